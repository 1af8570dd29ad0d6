import os
import tempfile

SECRET_KEY = "test-secret"

STORE_BACKEND = "json"
DATA_FILE = os.getenv("DATA_FILE", os.path.join(tempfile.gettempdir(), "payroll_test_employees.json"))
PAYSLIP_DIR = os.getenv("PAYSLIP_DIR", os.path.join(tempfile.gettempdir(), "payroll_test_payslips"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_test_db"),
}

ANNUAL_LEAVE_ALLOWANCE = 20

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED = False

import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")
DATA_FILE = os.getenv("DATA_FILE", "/var/lib/payroll/employees.json")
PAYSLIP_DIR = os.getenv("PAYSLIP_DIR", "/var/lib/payroll/payslips")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

ANNUAL_LEAVE_ALLOWANCE = int(os.getenv("ANNUAL_LEAVE_ALLOWANCE", "20"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "0")))

import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Snapshot store: "json" (single file) or "mysql"
STORE_BACKEND = os.getenv("STORE_BACKEND", "json")
DATA_FILE = os.getenv("DATA_FILE", "employees.json")
PAYSLIP_DIR = os.getenv("PAYSLIP_DIR", "payslips")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

ANNUAL_LEAVE_ALLOWANCE = int(os.getenv("ANNUAL_LEAVE_ALLOWANCE", "20"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: add the sample employees when the store is empty
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "1")))

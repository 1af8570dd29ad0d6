import os

# Bí danh của APP_ENV -> module cấu hình
_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def get_settings_module() -> str:
    # PAYROLL_SETTINGS (đường dẫn module đầy đủ) thắng APP_ENV
    explicit = os.getenv("PAYROLL_SETTINGS", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    # Giá trị lạ rơi về development
    return _ENV_MODULES.get(env, "config.development")

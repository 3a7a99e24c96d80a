import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./audit.db")
    MIGRATION_DB_URI = data.get("MIGRATION_DB_URI", "sqlite:///./audit.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    AUDIT_RETENTION_DAYS = int(data.get("AUDIT_RETENTION_DAYS", 90))
    ARCHIVAL_BATCH_SIZE = int(data.get("ARCHIVAL_BATCH_SIZE", 500))
    DEFAULT_MAX_RESULTS = int(data.get("DEFAULT_MAX_RESULTS", 100))

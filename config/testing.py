from .config import db_config_from_env

SECRET_KEY = "test-secret"

ADMIN_IDENTITY = "0xA"

STORAGE_BACKEND = "memory"
DB_CONFIG = db_config_from_env()

IDENTITY_HEADER = "X-Caller-Identity"

EVICTION_POLICY = "retain"
ALLOW_REREGISTRATION = True
STRICT_OVERRIDE = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
LOG_FILE = None

AUTO_INIT_DB = False

import os

from .config import db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# No default: production must name its administrator explicitly.
ADMIN_IDENTITY = os.getenv("ADMIN_IDENTITY", "")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
DB_CONFIG = db_config_from_env()

IDENTITY_HEADER = os.getenv("IDENTITY_HEADER", "X-Caller-Identity")

EVICTION_POLICY = os.getenv("EVICTION_POLICY", "retain")
ALLOW_REREGISTRATION = env_flag("ALLOW_REREGISTRATION", "1")
STRICT_OVERRIDE = env_flag("STRICT_OVERRIDE", "0")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")

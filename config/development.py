import os

from .config import db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# The single administrator identity, fixed for the lifetime of the ledger.
ADMIN_IDENTITY = os.getenv("ADMIN_IDENTITY", "0xadmin")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")
DB_CONFIG = db_config_from_env()

# Header set by the authenticating proxy in front of the API.
IDENTITY_HEADER = os.getenv("IDENTITY_HEADER", "X-Caller-Identity")

EVICTION_POLICY = os.getenv("EVICTION_POLICY", "retain")
ALLOW_REREGISTRATION = env_flag("ALLOW_REREGISTRATION", "1")
STRICT_OVERRIDE = env_flag("STRICT_OVERRIDE", "0")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")

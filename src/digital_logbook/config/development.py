import os

from . import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Skip the database entirely and serve the fixture roster
USE_MOCK_DATA = env_flag("USE_MOCK_DATA", "0")

# If enabled, app will apply schema.sql and insert sample users on startup (idempotent)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")

import os

from . import env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

USE_MOCK_DATA = env_flag("USE_MOCK_DATA", "0")
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")

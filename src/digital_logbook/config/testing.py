SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

USE_MOCK_DATA = True
AUTO_INIT_DB = False

SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret-long-enough-for-hs256-keys"
ACCESS_TOKEN_MINUTES = 30

SQLALCHEMY_DATABASE_URI = "sqlite://"
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
CORS_ORIGIN = "http://localhost:5173"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

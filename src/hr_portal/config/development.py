import os

from .base import Config

SECRET_KEY = Config.SECRET_KEY
JWT_SECRET = Config.JWT_SECRET
ACCESS_TOKEN_MINUTES = Config.ACCESS_TOKEN_MINUTES

SQLALCHEMY_DATABASE_URI = Config.SQLALCHEMY_DATABASE_URI
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
CORS_ORIGIN = Config.CORS_ORIGIN

# If enabled, tables are created on startup (create_all only adds missing tables)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo users, leave types and balances on startup
AUTO_SEED_DB = Config.AUTO_SEED_DB

import os

from .base import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", SECRET_KEY)
ACCESS_TOKEN_MINUTES = Config.ACCESS_TOKEN_MINUTES

SQLALCHEMY_DATABASE_URI = Config.SQLALCHEMY_DATABASE_URI
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
CORS_ORIGIN = Config.CORS_ORIGIN

AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB

"""
heroku_pg/config.py
-------------------
Settings for connecting to a managed PostgreSQL database.

Everything is read from environment variables. A .env file in the working
directory is loaded first, so local development can keep the Heroku
DATABASE_URL there instead of exporting it in every shell.

WHERE TO FIND YOUR DATABASE_URL:
  heroku config:get DATABASE_URL -a <your-app>

IMPORTANT: Add .env to your .gitignore — never commit passwords to GitHub.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable '{name}' must be an integer. Got: '{value}'")


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable '{name}' must be a number. Got: '{value}'")


class Config:
    # ------------------------------------------------------------------ #
    # Database                                                             #
    # ------------------------------------------------------------------ #
    DATABASE_URL     = os.getenv("DATABASE_URL", "")
    CONNECT_TIMEOUT  = _env_int("CONNECT_TIMEOUT", 10)
    APPLICATION_NAME = os.getenv("APPLICATION_NAME", "heroku-pg")

    # ------------------------------------------------------------------ #
    # Pool                                                                 #
    # ------------------------------------------------------------------ #
    POOL_MAX_SIZE = _env_int("POOL_MAX_SIZE", 20)
    POOL_MIN_SIZE = _env_int("POOL_MIN_SIZE", 1)
    # Seconds a checkout may wait before the pool gives up
    POOL_TIMEOUT  = _env_float("POOL_TIMEOUT", 30.0)

    # ------------------------------------------------------------------ #
    # Smoke test                                                           #
    # ------------------------------------------------------------------ #
    SMOKE_TEST_TABLE = os.getenv("SMOKE_TEST_TABLE", "person_nonconflicting")

    # ------------------------------------------------------------------ #
    # Logging                                                              #
    # ------------------------------------------------------------------ #
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE  = os.getenv("LOG_FILE", "")

    # ------------------------------------------------------------------ #
    # Flask                                                                #
    # ------------------------------------------------------------------ #
    DEBUG   = False
    TESTING = False


class DevelopmentConfig(Config):
    DEBUG     = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING       = True
    DATABASE_URL  = os.getenv("TEST_DATABASE_URL", "")
    POOL_MAX_SIZE = 2
    POOL_TIMEOUT  = 5.0


config_map = {
    "development": DevelopmentConfig,
    "production":  ProductionConfig,
    "testing":     TestingConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """Return the settings class for env, defaulting to development."""
    env = env or os.getenv("FLASK_ENV", "development")
    return config_map.get(env, config_map["development"])

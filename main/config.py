from decouple import AutoConfig
from pathlib import Path

config = AutoConfig()


class Config:
    def __init__(self):
        # Environment
        self.ENV = config("ENV", default="development")

        # Database
        self.DB_HOST = config("DB_HOST", default="localhost")
        self.DB_PORT = config("DB_PORT", default=5432, cast=int)
        self.DB_USER = config("DB_USER", default="catalog")
        self.DB_PASSWORD = config("DB_PASSWORD", default="catalog123")
        self.DB_NAME = config("DB_NAME", default="catalog_db")
        self.DATABASE_URL = config("DATABASE_URL", default="")
        self.SQLALCHEMY_TRACK_MODIFICATIONS = False

        # Auth
        self.SECRET_KEY = config("SECRET_KEY", default="dev-secret-key")

        # App
        self.BIND = config("BIND", default="127.0.0.1:8000")
        self.DEBUG = config("DEBUG", default=True, cast=bool)

        # OpenAPI (flask-smorest)
        self.API_TITLE = config("API_TITLE", default="Catalog Search API")
        self.API_VERSION = config("API_VERSION", default="v1")
        self.OPENAPI_VERSION = "3.0.3"

        # Logging
        self.LOG_DIR = Path(config("LOG_DIR", default="logs"))
        self.LOG_LEVEL = config("LOG_LEVEL", default="INFO")

        # Search
        self.SEARCH_MAX_WORKERS = config("SEARCH_MAX_WORKERS", default=3, cast=int)
        self.SEARCH_FETCH_TIMEOUT = config(
            "SEARCH_FETCH_TIMEOUT", default=10.0, cast=float
        )
        self.CATALOG_FETCH_LIMIT = config("CATALOG_FETCH_LIMIT", default=1000, cast=int)

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def SQLALCHEMY_ENGINE_OPTIONS(self):
        # SQLite pools reject the sizing options
        if self.SQLALCHEMY_DATABASE_URI.startswith("sqlite"):
            return {}
        return {"pool_size": 20, "max_overflow": 30, "pool_recycle": 3600}


settings = Config()

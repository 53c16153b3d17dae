"""
Configuration module for the application.
All configuration values are read from environment variables,
normally populated from a .env file by python-dotenv.
"""
import os
import secrets
import warnings


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # Flask Configuration
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "")
        self.FLASK_ENV: str = os.getenv("FLASK_ENV", "")
        self.FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "").lower() == "true"

        # Generate a development SECRET_KEY if not set and in development mode
        if not self.SECRET_KEY and self.FLASK_ENV != "production":
            self.SECRET_KEY = secrets.token_urlsafe(32)
            warnings.warn(
                "SECRET_KEY not set. Generated a temporary key for development. "
                "Set SECRET_KEY in your .env file for production!",
                UserWarning
            )

        # Database Configuration
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "")
        self.DB_USER: str = os.getenv("DB_USER", "")
        self.DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
        self.DB_HOST: str = os.getenv("DB_HOST", "")
        self.DB_PORT: str = os.getenv("DB_PORT", "") or "3306"
        self.DB_NAME: str = os.getenv("DB_NAME", "")

        # SQLAlchemy Configuration
        self.SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
        sqlalchemy_echo = os.getenv("SQLALCHEMY_ECHO", "")
        self.SQLALCHEMY_ECHO: bool = sqlalchemy_echo.lower() == "true" if sqlalchemy_echo else False

        # API Configuration
        self.API_PREFIX: str = os.getenv("API_PREFIX", "") or "/api"
        cors_origins = os.getenv("CORS_ORIGINS", "")
        self.CORS_ORIGINS: list[str] = [o.strip() for o in cors_origins.split(",") if o.strip()] if cors_origins else ["*"]

        # Logging
        self.LOG_LEVEL: str = (os.getenv("LOG_LEVEL", "") or "INFO").upper()

        # Quiz listing
        page_size = os.getenv("DEFAULT_PAGE_SIZE", "")
        self.DEFAULT_PAGE_SIZE: int = int(page_size) if page_size else 4
        max_page_size = os.getenv("MAX_PAGE_SIZE", "")
        self.MAX_PAGE_SIZE: int = int(max_page_size) if max_page_size else 100

        # Session Configuration
        session_secure = os.getenv("SESSION_COOKIE_SECURE", "")
        self.SESSION_COOKIE_SECURE: bool = session_secure.lower() == "true" if session_secure else False

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        Construct database URI from environment variables.

        DATABASE_URL wins when set. Otherwise a MySQL URI is built from the
        DB_* values, and without a DB_HOST a local SQLite file is used.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if not self.DB_HOST:
            return "sqlite:///quizbuilder.db"
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    def validate(self) -> None:
        """
        Validate required configuration values.
        Only enforces SECRET_KEY in production environment.
        """
        if not self.SECRET_KEY:
            if self.FLASK_ENV == "production":
                raise ValueError(
                    "SECRET_KEY environment variable is required in production. "
                    "Set it in your .env file or environment variables."
                )
        if self.DEFAULT_PAGE_SIZE < 1 or self.MAX_PAGE_SIZE < 1:
            raise ValueError("DEFAULT_PAGE_SIZE and MAX_PAGE_SIZE must be positive integers.")


# Global config instance - will be re-initialized after load_dotenv()
config = Config()

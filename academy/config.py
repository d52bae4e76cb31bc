"""
Configuration settings for the application
"""
import os
from datetime import timedelta
from pathlib import Path
from dotenv import load_dotenv
from .env_config import BASE_URL, ENVIRONMENT, IS_PRODUCTION, DEBUG

# Load environment variables
load_dotenv()


def default_data_dir() -> Path:
    """DATA_DIR from the environment, else ./data under the working directory"""
    return Path(os.getenv('DATA_DIR') or Path.cwd() / 'data')


# Data files
DATA_DIR = default_data_dir()
COURSES_FILE = Path(os.getenv('COURSES_FILE', DATA_DIR / 'courses.json'))
COURSES_DIR = Path(os.getenv('COURSES_DIR', DATA_DIR / 'courses'))
MESSAGES_FILE = Path(os.getenv('MESSAGES_FILE', DATA_DIR / 'messages.json'))

# Google OAuth
GOOGLE_CLIENT_ID = os.getenv('GOOGLE_CLIENT_ID')
GOOGLE_CLIENT_SECRET = os.getenv('GOOGLE_CLIENT_SECRET')
GOOGLE_CALLBACK_URL = os.getenv('GOOGLE_CALLBACK_URL', f"{BASE_URL}/auth/google/callback")

# Server settings
HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '3000'))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv('CORS_ORIGINS', BASE_URL).split(',')
    if origin.strip()
]


class Config:
    """
    Configuration class for the application.
    Loaded into app.config by create_app; tests override individual keys.
    """

    # Environment settings
    ENVIRONMENT = ENVIRONMENT
    DEBUG = DEBUG
    IS_PRODUCTION = IS_PRODUCTION
    BASE_URL = BASE_URL

    # Session signing key
    SECRET_KEY = os.getenv('SECRET_KEY') or os.getenv('SESSION_SECRET')

    # Session cookie; Secure and SameSite follow IS_PRODUCTION in create_app
    SESSION_COOKIE_HTTPONLY = True
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)

    # Google OAuth
    GOOGLE_CLIENT_ID = GOOGLE_CLIENT_ID
    GOOGLE_CLIENT_SECRET = GOOGLE_CLIENT_SECRET
    GOOGLE_CALLBACK_URL = GOOGLE_CALLBACK_URL
    GOOGLE_DISCOVERY_URL = 'https://accounts.google.com/.well-known/openid-configuration'

    # File paths
    COURSES_FILE = COURSES_FILE
    COURSES_DIR = COURSES_DIR
    MESSAGES_FILE = MESSAGES_FILE

    # Server settings
    HOST = HOST
    PORT = PORT
    CORS_ORIGINS = CORS_ORIGINS

    @classmethod
    def validate(cls, settings=None) -> None:
        """
        Validate that all required configuration values are set.
        Only enforced in production; development runs with a throwaway key.
        Raises ValueError if any required value is missing.
        """
        settings = settings if settings is not None else vars(cls)
        if not settings.get('IS_PRODUCTION'):
            return
        if not settings.get('SECRET_KEY'):
            raise ValueError("SECRET_KEY environment variable is not set")
        if not settings.get('GOOGLE_CLIENT_ID'):
            raise ValueError("GOOGLE_CLIENT_ID environment variable is not set")
        if not settings.get('GOOGLE_CLIENT_SECRET'):
            raise ValueError("GOOGLE_CLIENT_SECRET environment variable is not set")

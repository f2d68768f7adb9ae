# config/config.py
import os
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()


def parse_skill_options(raw: str) -> dict:
    """
    Parse "token:Label,token:Label" into an ordered token -> label mapping.
    A bare token gets itself as label.
    """
    options = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        token, _, label = item.partition(":")
        token = token.strip()
        if token:
            options[token] = label.strip() or token
    return options


class Config:
    # --- App settings ---
    FLASK_ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", 8000))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Needed for flash messages
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-key-change-this")

    # --- CORS Settings ---
    # Accept comma-separated values: e.g., "http://localhost:3000,http://127.0.0.1:3000"
    ALLOWED_ORIGINS = [
        o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    ]

    # --- Skills ---
    # token -> display label, in the order the form shows them
    SKILL_OPTIONS = parse_skill_options(
        os.getenv("SKILL_OPTIONS", "php:PHP,laravel:Laravel,react:React,mysql:MySQL")
    )
    # Off by default: the form widget is the only place the vocabulary is enforced
    ENFORCE_SKILL_VOCABULARY = os.getenv("ENFORCE_SKILL_VOCABULARY", "false").lower() in ("1", "true", "yes")

    # --- Database ---
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./employees.db")

import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


def _flag(name, default):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'cashcompass.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET = os.getenv("JWT_SECRET", SECRET_KEY)
    JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "7"))

    # "week" compares the ceiling to this week's expenses, "all" to every expense on record
    BUDGET_SCOPE = os.getenv("BUDGET_SCOPE", "week")

    OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")
    AI_SUMMARY_ENABLED = _flag("AI_SUMMARY_ENABLED", "true")
    AI_SUMMARY_URL = os.getenv("AI_SUMMARY_URL", "https://openrouter.ai/api/v1/chat/completions")
    AI_SUMMARY_MODEL = os.getenv("AI_SUMMARY_MODEL", "deepseek/deepseek-chat-v3-0324:free")
    AI_SUMMARY_TIMEOUT = float(os.getenv("AI_SUMMARY_TIMEOUT", "15"))

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SECRET_KEY = "test-secret"
    JWT_SECRET = "test-jwt-secret"
    BUDGET_SCOPE = "week"
    OPENROUTER_API_KEY = None
    AI_SUMMARY_ENABLED = False

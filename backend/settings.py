import os
from pathlib import Path

from dotenv import load_dotenv

from models.common import parse_bool

# Load environment variables from .env file in the backend folder
backend_dir = Path(__file__).parent
env_path = backend_dir / ".env"
load_dotenv(env_path)

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:  # pragma: no cover
    raise ValueError("JWT_SECRET_KEY must be set")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "24"))
OTP_TTL_MINUTES = int(os.getenv("OTP_TTL_MINUTES", "5"))

API_PREFIX = os.getenv("API_PREFIX", "/api")
BACKEND_DIR = Path(__file__).parent
DATABASE_PATH = BACKEND_DIR / "dailyverse.sqlite"
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATABASE_PATH}")
PROJECT_PATH = BACKEND_DIR.parent

TESTING_MODE = parse_bool(os.getenv("TESTING_MODE", False))  # don't wait on retries
HTTPS_VERIFY = parse_bool(os.getenv("HTTPS_VERIFY", True))

BASE_URL = os.getenv("BASE_URL", "http://127.0.0.1:3000")
CORS_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin
]
PORT = int(os.getenv("PORT", "8080"))

SLACK_TOKEN = os.getenv("SLACK_TOKEN") or None

# --- Email / SMTP configuration ---
SMTP_HOST = os.getenv("SMTP_HOST")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USERNAME = os.getenv("SMTP_USERNAME") or os.getenv("EMAIL_USER")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD") or os.getenv("EMAIL_PASS")
SMTP_USE_TLS = parse_bool(os.getenv("SMTP_USE_TLS", True))
SMTP_FROM_EMAIL = os.getenv("SMTP_FROM_EMAIL", "no-reply@dailyverse.app")
SMTP_FROM_NAME = os.getenv("SMTP_FROM_NAME", "DailyVerse")

# --- Third-party data sources ---
COUNTRIES_API_URL = os.getenv("COUNTRIES_API_URL", "https://restcountries.com/v3.1/all")
CITIES_API_URL = os.getenv(
    "CITIES_API_URL", "https://countriesnow.space/api/v0.1/countries/cities"
)
NEWS_API_URL = os.getenv("NEWS_API_URL", "https://newsdata.io/api/1/news")
NEWS_API_KEY = os.getenv("NEWS_API_KEY", "")

# --- Rate limiting of the account endpoints ---
AUTH_RATE_LIMIT = int(os.getenv("AUTH_RATE_LIMIT", "5"))
AUTH_RATE_PERIOD_SECONDS = int(os.getenv("AUTH_RATE_PERIOD_SECONDS", "3600"))

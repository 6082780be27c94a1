import os
import logging
from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = os.getenv("SERVICE_NAME", "dog-proxy")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

DOG_API_BASE_URL = os.getenv("DOG_API_BASE_URL", "https://dog.ceo/api").rstrip("/")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

if not SERVICE_NAME:
    raise RuntimeError("SERVICE_NAME is required")

if ENVIRONMENT not in {"development", "staging", "production"}:
    raise RuntimeError("ENVIRONMENT must be development, staging, or production")

try:
    UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))
except ValueError:
    raise RuntimeError("UPSTREAM_TIMEOUT_SECONDS must be a number") from None

if UPSTREAM_TIMEOUT_SECONDS <= 0:
    raise RuntimeError("UPSTREAM_TIMEOUT_SECONDS must be positive")

LOG_LEVEL = logging.INFO
if ENVIRONMENT == "development":
    LOG_LEVEL = logging.DEBUG
elif ENVIRONMENT == "production":
    LOG_LEVEL = logging.WARNING

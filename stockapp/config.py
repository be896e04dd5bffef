from dotenv import load_dotenv  # type: ignore
import os
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./stock.db")
DATABASE_ECHO = _as_bool(os.getenv("DATABASE_ECHO", "false"))
DATABASE_CREATE_TABLES = _as_bool(os.getenv("DATABASE_CREATE_TABLES", "true"))

API_PREFIX = os.getenv("API_PREFIX", "/api")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:4200").split(",")
    if origin.strip()
]
GZIP_MINIMUM_SIZE = int(os.getenv("GZIP_MINIMUM_SIZE", "1000"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_TO_FILE = _as_bool(os.getenv("LOG_TO_FILE", "false"))

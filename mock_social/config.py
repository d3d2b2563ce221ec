import os

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    DATABASE_PATH = os.getenv("DATABASE_PATH", "db.json")
    DATABASE_PRETTY = _env_bool("DATABASE_PRETTY", True)

    # http[s]://ACCESS_KEY:SECRET_KEY@host[:port]/bucket
    MEDIA_STORAGE_URL = os.getenv("MEDIA_STORAGE_URL", "").strip()
    MEDIA_PUBLIC_BASE_URL = os.getenv("MEDIA_PUBLIC_BASE_URL", "").strip()
    MINIO_CONNECT_TIMEOUT = float(os.getenv("MINIO_CONNECT_TIMEOUT", "5"))
    MINIO_READ_TIMEOUT = float(os.getenv("MINIO_READ_TIMEOUT", "20"))
    MINIO_HTTP_POOL_MAXSIZE = int(os.getenv("MINIO_HTTP_POOL_MAXSIZE", "32"))

    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(16 * 1024 * 1024)))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE") or None

    _default_cors_origins = [
        r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    ]
    _cors_origins_raw = os.getenv("CORS_ALLOWED_ORIGINS", "").strip()
    if _cors_origins_raw:
        CORS_ALLOWED_ORIGINS = [
            item.strip() for item in _cors_origins_raw.split(",") if item.strip()
        ]
    else:
        CORS_ALLOWED_ORIGINS = _default_cors_origins

from threading import Lock
from typing import NamedTuple
from urllib.parse import unquote, urlsplit

import urllib3
from flask import current_app
from minio import Minio


_minio_client = None
_minio_signature = None
_minio_lock = Lock()


class StorageSettings(NamedTuple):
    endpoint: str
    access_key: str
    secret_key: str
    secure: bool
    bucket: str
    public_base_url: str


def parse_storage_url(url: str, public_base_url: str = "") -> StorageSettings:
    """Split ``http[s]://ACCESS:SECRET@host[:port]/bucket`` into settings."""
    if not url:
        raise ValueError("MEDIA_STORAGE_URL is not set")

    parts = urlsplit(url)
    if parts.scheme not in ("http", "https"):
        raise ValueError("MEDIA_STORAGE_URL must use http or https")
    if not parts.hostname:
        raise ValueError("MEDIA_STORAGE_URL is missing a host")
    if not parts.username or not parts.password:
        raise ValueError("MEDIA_STORAGE_URL is missing credentials")

    bucket = parts.path.strip("/")
    if not bucket or "/" in bucket:
        raise ValueError("MEDIA_STORAGE_URL must name exactly one bucket")

    endpoint = parts.hostname
    if parts.port:
        endpoint = f"{endpoint}:{parts.port}"

    return StorageSettings(
        endpoint=endpoint,
        access_key=unquote(parts.username),
        secret_key=unquote(parts.password),
        secure=parts.scheme == "https",
        bucket=bucket,
        public_base_url=(public_base_url or f"{parts.scheme}://{endpoint}").rstrip("/"),
    )


def get_storage_settings() -> StorageSettings:
    return parse_storage_url(
        current_app.config["MEDIA_STORAGE_URL"],
        current_app.config.get("MEDIA_PUBLIC_BASE_URL", ""),
    )


def _build_signature(settings: StorageSettings):
    return (
        settings.endpoint,
        settings.access_key,
        settings.secret_key,
        settings.secure,
        current_app.config["MINIO_CONNECT_TIMEOUT"],
        current_app.config["MINIO_READ_TIMEOUT"],
        current_app.config.get("MINIO_HTTP_POOL_MAXSIZE", 32),
    )


def get_minio_client():
    global _minio_client, _minio_signature

    settings = get_storage_settings()
    signature = _build_signature(settings)
    with _minio_lock:
        if _minio_client is not None and _minio_signature == signature:
            return _minio_client

        timeout = urllib3.Timeout(
            connect=current_app.config["MINIO_CONNECT_TIMEOUT"],
            read=current_app.config["MINIO_READ_TIMEOUT"],
        )
        http_client = urllib3.PoolManager(
            timeout=timeout,
            retries=False,
            maxsize=current_app.config.get("MINIO_HTTP_POOL_MAXSIZE", 32),
        )

        _minio_client = Minio(
            settings.endpoint,
            access_key=settings.access_key,
            secret_key=settings.secret_key,
            secure=settings.secure,
            http_client=http_client,
        )
        _minio_signature = signature
        return _minio_client

import io
import logging
import os
import tempfile
import uuid

from PIL import Image, ImageOps

from mock_social.db import store
from mock_social.errors import MediaProcessingError, NotFoundError
from mock_social.extensions.minio_client import get_minio_client, get_storage_settings
from mock_social.repositories import user_repository


logger = logging.getLogger(__name__)

PICTURE_SIZES = {
    "profilePicture": (200, 200),
    "bannerPicture": (1200, 400),
}

JPEG_QUALITY = 90


def _has_transparency(image) -> bool:
    if image.mode in ("RGBA", "LA", "PA"):
        return True
    return image.mode == "P" and "transparency" in image.info


def resize_image(path: str, size):
    """Cover-fit the image at ``path`` to ``size``.

    Returns ``(data, content_type, extension)``. Images with an alpha
    channel stay PNG, everything else becomes JPEG.
    """
    with Image.open(path) as source:
        image = ImageOps.exif_transpose(source)
        keep_alpha = _has_transparency(image)
        image = image.convert("RGBA" if keep_alpha else "RGB")
        fitted = ImageOps.fit(
            image,
            size,
            method=Image.Resampling.LANCZOS,
            centering=(0.5, 0.5),
        )

    buffer = io.BytesIO()
    if keep_alpha:
        fitted.save(buffer, format="PNG", optimize=True)
        return buffer.getvalue(), "image/png", "png"

    fitted.save(buffer, format="JPEG", quality=JPEG_QUALITY)
    return buffer.getvalue(), "image/jpeg", "jpeg"


def _discard(path: str):
    try:
        os.remove(path)
    except OSError:
        pass


def _resize_upload(file_storage, size):
    fd, tmp_path = tempfile.mkstemp(prefix="upload-")
    os.close(fd)
    try:
        file_storage.save(tmp_path)
        return resize_image(tmp_path, size)
    finally:
        _discard(tmp_path)


def upload_image(data: bytes, content_type: str, object_name: str) -> str:
    settings = get_storage_settings()
    minio = get_minio_client()

    if not minio.bucket_exists(bucket_name=settings.bucket):
        minio.make_bucket(bucket_name=settings.bucket)

    minio.put_object(
        bucket_name=settings.bucket,
        object_name=object_name,
        data=io.BytesIO(data),
        length=len(data),
        content_type=content_type,
    )
    return f"{settings.public_base_url}/{settings.bucket}/{object_name}"


def update_picture(user_id, file_storage, kind: str):
    """Resize, upload and attach a profile or banner picture."""
    size = PICTURE_SIZES[kind]

    if not user_repository.exists(user_id):
        raise NotFoundError("User not found")

    try:
        data, content_type, extension = _resize_upload(file_storage, size)
        object_name = f"{kind}/{user_id}/{uuid.uuid4()}.{extension}"
        url = upload_image(data, content_type, object_name)
    except Exception as e:
        logger.exception("Failed to process %s for user %s", kind, user_id)
        raise MediaProcessingError("Error processing image") from e

    with store.transaction():
        user = user_repository.update_user(user_id, {kind: url})
        if user is None:
            raise NotFoundError("User not found")

    logger.info("Updated %s for user %s: %s", kind, user_id, url)
    return user

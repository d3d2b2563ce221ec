import logging

from mock_social.db import same_id, store
from mock_social.errors import NotFoundError, NotPostOwnerError, PostNotFoundError
from mock_social.models.post_model import IMMUTABLE_FIELDS
from mock_social.repositories import post_repository


logger = logging.getLogger(__name__)


def check_ownership(post_id, user_id):
    """Raise a ForbiddenError subclass unless ``user_id`` owns the post.

    Missing posts and foreign posts answer alike; the exception type
    keeps the two causes apart.
    """
    post = post_repository.get_by_id(post_id)
    if not post:
        raise PostNotFoundError()
    if not same_id(post.get("userId"), user_id):
        raise NotPostOwnerError()
    return post


def update_post(post_id, changes: dict):
    changes = {
        key: value for key, value in (changes or {}).items()
        if key not in IMMUTABLE_FIELDS
    }

    with store.transaction():
        post = post_repository.update_post(post_id, changes)
        if post is None:
            raise NotFoundError("Post not found")

    logger.info("Updated post %s (%s)", post_id, ", ".join(sorted(changes)) or "no fields")
    return post


def delete_post(post_id):
    if not post_repository.delete_post(post_id):
        raise NotFoundError("Post not found")

    logger.info("Deleted post %s", post_id)

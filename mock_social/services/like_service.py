import logging

from mock_social.db import store
from mock_social.errors import ConflictError, NotFoundError
from mock_social.repositories import post_repository, user_repository
from mock_social.repositories.like_repository import add_like, remove_like


logger = logging.getLogger(__name__)


def _load_post(post_id, user_id):
    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")
    if not user_repository.exists(user_id):
        raise NotFoundError("User not found")
    return post


def like(post_id, user_id):
    with store.transaction():
        post = _load_post(post_id, user_id)
        if not add_like(post, user_id):
            raise ConflictError("You already liked this post")

    logger.info("User %s liked post %s", user_id, post_id)


def unlike(post_id, user_id):
    with store.transaction():
        post = _load_post(post_id, user_id)
        if not remove_like(post, user_id):
            raise ConflictError("You have not liked this post")

    logger.info("User %s unliked post %s", user_id, post_id)

import logging

from mock_social.db import store
from mock_social.errors import BadRequestError, NotFoundError
from mock_social.repositories import post_repository, user_repository
from mock_social.repositories.comment_repository import create_comment


logger = logging.getLogger(__name__)


def add_comment(post_id, user_id, text):
    if not isinstance(text, str) or not text.strip():
        raise BadRequestError("Comment text is required")

    with store.transaction():
        post = post_repository.get_by_id(post_id)
        if not post:
            raise NotFoundError("Post not found")
        if not user_repository.exists(user_id):
            raise NotFoundError("User not found")

        comment = create_comment(post, user_id, text)

    logger.info("User %s commented on post %s", user_id, post_id)
    return comment

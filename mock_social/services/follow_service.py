import logging

from mock_social.db import store
from mock_social.errors import ConflictError, NotFoundError
from mock_social.repositories import user_repository
from mock_social.repositories.follow_repository import create_follow, delete_follow


logger = logging.getLogger(__name__)


def _load_pair(target_id, follower_id):
    target = user_repository.get_by_id(target_id)
    follower = user_repository.get_by_id(follower_id)
    if not target or not follower:
        raise NotFoundError("User not found")
    return follower, target


def follow(target_id, follower_id):
    with store.transaction():
        follower, target = _load_pair(target_id, follower_id)
        if not create_follow(follower, target):
            raise ConflictError("You are already following this user")

    logger.info("User %s followed %s", follower_id, target_id)


def unfollow(target_id, follower_id):
    with store.transaction():
        follower, target = _load_pair(target_id, follower_id)
        if not delete_follow(follower, target):
            raise ConflictError("You are not following this user")

    logger.info("User %s unfollowed %s", follower_id, target_id)

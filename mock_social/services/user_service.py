import logging

from mock_social.db import store
from mock_social.errors import ConflictError, NotFoundError, UnauthorizedError
from mock_social.repositories import user_repository


logger = logging.getLogger(__name__)


def register(username, email, password):
    with store.transaction():
        if user_repository.get_by_email_or_username(email=email, username=username):
            raise ConflictError("A user with that email or username already exists")

        user = user_repository.create_user(username, email, password)

    logger.info("Created user %s (%s)", user["id"], username)
    return user


def find_existing(email=None, username=None):
    user = user_repository.get_by_email_or_username(email=email, username=username)
    if not user:
        raise NotFoundError("User not found")
    return user


def authenticate(email=None, username=None, password=None):
    user = None
    if password is not None and (email is not None or username is not None):
        user = user_repository.get_by_credentials(email, username, password)

    if not user:
        logger.warning("Failed login for %s", email or username)
        raise UnauthorizedError("Invalid credentials")
    return user


def get_user(user_id):
    user = user_repository.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    return user

from mock_social.db import store
from mock_social.models.user_model import new_user


def _users():
    return store.collection("users")


def get_by_id(user_id):
    return _users().get(user_id)


def exists(user_id) -> bool:
    return _users().exists(user_id)


def get_by_email_or_username(email=None, username=None):
    def matches(user):
        return (
            (email is not None and user.get("email") == email)
            or (username is not None and user.get("username") == username)
        )

    return _users().find(matches)


def get_by_credentials(email, username, password):
    def matches(user):
        identity = (
            (email is not None and user.get("email") == email)
            or (username is not None and user.get("username") == username)
        )
        return identity and user.get("password") == password

    return _users().find(matches)


def create_user(username, email, password):
    user = new_user(store.next_id(), username, email, password)
    return _users().append(user)


def update_user(user_id, changes: dict):
    return _users().update(user_id, changes)

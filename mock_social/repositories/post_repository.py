from mock_social.db import store


def _posts():
    return store.collection("posts")


def get_by_id(post_id):
    return _posts().get(post_id)


def update_post(post_id, changes: dict):
    return _posts().update(post_id, changes)


def delete_post(post_id) -> bool:
    return _posts().remove(post_id)

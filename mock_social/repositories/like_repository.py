from mock_social.db import same_id
from mock_social.repositories import post_repository


def has_liked(post: dict, user_id) -> bool:
    return any(same_id(liker, user_id) for liker in post.get("likes") or [])


def add_like(post: dict, user_id) -> bool:
    if has_liked(post, user_id):
        return False

    post_repository.update_post(post["id"], {
        "likes": list(post.get("likes") or []) + [user_id],
    })
    return True


def remove_like(post: dict, user_id) -> bool:
    if not has_liked(post, user_id):
        return False

    post_repository.update_post(post["id"], {
        "likes": [liker for liker in post.get("likes") or [] if not same_id(liker, user_id)],
    })
    return True

from mock_social.db import store
from mock_social.models.comment_model import new_comment
from mock_social.repositories import post_repository


def create_comment(post: dict, user_id, text: str) -> dict:
    comment = new_comment(store.next_id(), user_id, text)
    post_repository.update_post(post["id"], {
        "comments": list(post.get("comments") or []) + [comment],
    })
    return comment

from mock_social.db import same_id, store


def _users():
    return store.collection("users")


def _contains(ids, value) -> bool:
    return any(same_id(item, value) for item in ids or [])


def _without(ids, value) -> list:
    return [item for item in ids or [] if not same_id(item, value)]


def is_following(follower: dict, target: dict) -> bool:
    return _contains(target.get("followers"), follower["id"])


def create_follow(follower: dict, target: dict) -> bool:
    if is_following(follower, target):
        return False

    with store.transaction():
        users = _users()
        users.update(target["id"], {
            "followers": list(target.get("followers") or []) + [follower["id"]],
        })
        following = list(follower.get("following") or [])
        if not _contains(following, target["id"]):
            following.append(target["id"])
        users.update(follower["id"], {"following": following})
    return True


def delete_follow(follower: dict, target: dict) -> bool:
    if not is_following(follower, target):
        return False

    with store.transaction():
        users = _users()
        users.update(target["id"], {
            "followers": _without(target.get("followers"), follower["id"]),
        })
        users.update(follower["id"], {
            "following": _without(follower.get("following"), target["id"]),
        })
    return True

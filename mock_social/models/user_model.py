PUBLIC_FIELDS_EXCLUDED = ("password",)


def new_user(user_id: int, username: str, email: str, password: str) -> dict:
    return {
        "id": user_id,
        "username": username,
        "email": email,
        "password": password,
        "profilePicture": "",
        "bannerPicture": "",
        "followers": [],
        "following": [],
        "posts": [],
        "likes": 0,
        "tags": [],
    }


def to_public(user: dict) -> dict:
    return {
        key: value for key, value in user.items()
        if key not in PUBLIC_FIELDS_EXCLUDED
    }

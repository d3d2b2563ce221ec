POST_DEFAULTS = {
    "likes": [],
    "comments": [],
}

# Never taken from an update body.
IMMUTABLE_FIELDS = ("id", "userId")


def with_defaults(post: dict) -> dict:
    record = dict(post)
    for key, value in POST_DEFAULTS.items():
        record.setdefault(key, list(value))
    return record

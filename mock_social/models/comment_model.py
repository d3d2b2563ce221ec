from datetime import datetime, timezone


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_comment(comment_id: int, user_id: int, text: str) -> dict:
    return {
        "id": comment_id,
        "userId": user_id,
        "comment": text,
        "timestamp": utc_timestamp(),
    }

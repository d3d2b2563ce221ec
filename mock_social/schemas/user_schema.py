from mock_social.extensions.extensions import ma
from mock_social.schemas.request_schema import RequestSchema, not_blank


_CREATE_REQUIRED = "username, email and password are required"


class UserCreateSchema(RequestSchema):
    username = ma.Str(
        required=True,
        validate=not_blank,
        error_messages={"required": _CREATE_REQUIRED},
    )
    email = ma.Str(
        required=True,
        validate=not_blank,
        error_messages={"required": _CREATE_REQUIRED},
    )
    password = ma.Str(
        required=True,
        validate=not_blank,
        error_messages={"required": _CREATE_REQUIRED},
    )


class UserLookupSchema(RequestSchema):
    # compared as-is; values of other types simply never match
    username = ma.Raw(load_default=None, allow_none=True)
    email = ma.Raw(load_default=None, allow_none=True)


class LoginSchema(UserLookupSchema):
    password = ma.Raw(load_default=None, allow_none=True)


class ActorSchema(RequestSchema):
    """Body carrying the acting user's id."""

    userId = ma.Int(
        required=True,
        error_messages={
            "required": "userId is required",
            "null": "userId is required",
            "invalid": "userId must be an integer",
        },
    )

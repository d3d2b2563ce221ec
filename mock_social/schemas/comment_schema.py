from mock_social.extensions.extensions import ma
from mock_social.schemas.user_schema import ActorSchema


class CommentCreateSchema(ActorSchema):
    comment = ma.Str(load_default="", allow_none=True)


class CommentResponseSchema(ma.Schema):
    id = ma.Int()
    userId = ma.Int()
    comment = ma.Str()
    timestamp = ma.Str()

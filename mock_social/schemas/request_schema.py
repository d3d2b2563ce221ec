from marshmallow import EXCLUDE, ValidationError

from mock_social.errors import BadRequestError
from mock_social.extensions.extensions import ma


def not_blank(value):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Field may not be blank.")


def first_error_message(messages) -> str:
    if isinstance(messages, dict):
        for value in messages.values():
            return first_error_message(value)
    if isinstance(messages, list) and messages:
        return first_error_message(messages[0])
    return str(messages)


class RequestSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    def load_body(self, data):
        """Load a request body, turning validation failures into a 400."""
        if not isinstance(data, dict):
            data = {}
        try:
            return self.load(data)
        except ValidationError as e:
            raise BadRequestError(first_error_message(e.messages)) from e

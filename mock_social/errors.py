class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(ApiError):
    status_code = 400
    default_message = "Bad request"


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Invalid credentials"


class ForbiddenError(ApiError):
    status_code = 403
    default_message = "You are not allowed to modify this post"


class PostNotFoundError(ForbiddenError):
    """Ownership check on a post id that does not exist."""


class NotPostOwnerError(ForbiddenError):
    """Ownership check by a user who does not own the post."""


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


# Duplicates answer 400, like the rest of the client errors.
class ConflictError(ApiError):
    status_code = 400
    default_message = "Already exists"


class MediaProcessingError(ApiError):
    status_code = 500
    default_message = "Error processing image"

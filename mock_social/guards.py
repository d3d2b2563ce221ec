import logging
from functools import wraps

from flask import g, jsonify, request

from mock_social.db import store
from mock_social.errors import ApiError, ForbiddenError
from mock_social.schemas.user_schema import ActorSchema, LoginSchema, UserLookupSchema
from mock_social.services import post_service, user_service


logger = logging.getLogger(__name__)


def _error(e: ApiError):
    return jsonify({"message": e.message}), e.status_code


def ownership_required(view):
    """Only let the owner named by body ``userId`` through to the view.

    The check and the view share one store transaction.
    """

    @wraps(view)
    def wrapper(post_id, *args, **kwargs):
        try:
            body = ActorSchema().load_body(request.get_json(silent=True))
        except ApiError as e:
            return _error(e)

        user_id = body["userId"]
        with store.transaction():
            try:
                post_service.check_ownership(post_id, user_id)
            except ForbiddenError as e:
                logger.warning(
                    "Ownership check failed for post %s by user %s: %s",
                    post_id, user_id, type(e).__name__,
                )
                return _error(e)

            g.actor_id = user_id
            return view(post_id, *args, **kwargs)

    return wrapper


def user_must_exist(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            body = UserLookupSchema().load_body(request.get_json(silent=True))
            g.user = user_service.find_existing(
                email=body["email"],
                username=body["username"],
            )
        except ApiError as e:
            return _error(e)
        return view(*args, **kwargs)

    return wrapper


def authenticate_user(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            body = LoginSchema().load_body(request.get_json(silent=True))
            g.user = user_service.authenticate(
                email=body["email"],
                username=body["username"],
                password=body["password"],
            )
        except ApiError as e:
            return _error(e)
        return view(*args, **kwargs)

    return wrapper

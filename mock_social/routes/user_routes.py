from flask import Blueprint, g, jsonify, request

from mock_social.errors import ApiError, BadRequestError
from mock_social.guards import authenticate_user, user_must_exist
from mock_social.models.user_model import to_public
from mock_social.schemas.user_schema import ActorSchema, UserCreateSchema
from mock_social.services import follow_service, media_service, user_service


user_bp = Blueprint("users", __name__)


@user_bp.route("/users", methods=["POST"])
def create_user():
    try:
        data = UserCreateSchema().load_body(request.get_json(silent=True))
        user = user_service.register(data["username"], data["email"], data["password"])
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify(to_public(user)), 201


@user_bp.route("/login", methods=["POST"])
@authenticate_user
def login():
    return jsonify(to_public(g.user)), 200


@user_bp.route("/users/exists", methods=["POST"])
@user_must_exist
def check_user_exists():
    return jsonify(to_public(g.user)), 200


@user_bp.route("/users/<int:user_id>/follow", methods=["POST"])
def follow_user(user_id):
    try:
        data = ActorSchema().load_body(request.get_json(silent=True))
        follow_service.follow(user_id, data["userId"])
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify({"message": "User followed successfully"}), 200


@user_bp.route("/users/<int:user_id>/unfollow", methods=["POST"])
def unfollow_user(user_id):
    try:
        data = ActorSchema().load_body(request.get_json(silent=True))
        follow_service.unfollow(user_id, data["userId"])
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify({"message": "User unfollowed successfully"}), 200


def _update_picture(user_id, kind):
    upload = request.files.get(kind)
    try:
        if upload is None or not getattr(upload, "filename", ""):
            raise BadRequestError("No file uploaded")
        user = media_service.update_picture(user_id, upload, kind)
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify(to_public(user)), 200


@user_bp.route("/users/<int:user_id>/updateProfilePicture", methods=["POST"])
def update_profile_picture(user_id):
    return _update_picture(user_id, "profilePicture")


@user_bp.route("/users/<int:user_id>/updateBannerPicture", methods=["POST"])
def update_banner_picture(user_id):
    return _update_picture(user_id, "bannerPicture")

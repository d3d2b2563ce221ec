from flask import Blueprint, jsonify, request

from mock_social.errors import ApiError
from mock_social.guards import ownership_required
from mock_social.schemas.comment_schema import CommentCreateSchema, CommentResponseSchema
from mock_social.schemas.user_schema import ActorSchema
from mock_social.services import comment_service, like_service, post_service


post_bp = Blueprint("posts", __name__)


@post_bp.route("/posts/<post_id>", methods=["PUT"])
@ownership_required
def update_post(post_id):
    changes = request.get_json(silent=True) or {}

    try:
        post = post_service.update_post(post_id, changes)
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify({"message": "Post updated successfully", "post": post}), 200


@post_bp.route("/posts/<post_id>", methods=["DELETE"])
@ownership_required
def delete_post(post_id):
    try:
        post_service.delete_post(post_id)
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify({"message": "Post deleted successfully"}), 200


@post_bp.route("/posts/<post_id>/like", methods=["POST"])
def like_post(post_id):
    try:
        data = ActorSchema().load_body(request.get_json(silent=True))
        like_service.like(post_id, data["userId"])
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify({"message": "Post liked successfully"}), 200


@post_bp.route("/posts/<post_id>/unlike", methods=["POST"])
def unlike_post(post_id):
    try:
        data = ActorSchema().load_body(request.get_json(silent=True))
        like_service.unlike(post_id, data["userId"])
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify({"message": "Post unliked successfully"}), 200


@post_bp.route("/posts/<post_id>/comments", methods=["POST"])
def create_comment(post_id):
    try:
        data = CommentCreateSchema().load_body(request.get_json(silent=True))
        comment = comment_service.add_comment(post_id, data["userId"], data["comment"])
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify(CommentResponseSchema().dump(comment)), 201

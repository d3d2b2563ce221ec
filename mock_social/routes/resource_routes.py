from flask import Blueprint, jsonify, request

from mock_social.errors import ApiError
from mock_social.services import resource_service


resource_bp = Blueprint("resources", __name__)


@resource_bp.route("/db", methods=["GET"])
def get_database():
    return jsonify(resource_service.dump_database()), 200


@resource_bp.route("/<resource>", methods=["GET"])
def list_resource(resource):
    try:
        records, total = resource_service.list_records(resource, request.args.to_dict())
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    response = jsonify(records)
    response.headers["X-Total-Count"] = str(total)
    return response, 200


@resource_bp.route("/<resource>", methods=["POST"])
def create_resource(resource):
    try:
        record = resource_service.create_record(resource, request.get_json(silent=True))
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify(record), 201


@resource_bp.route("/<resource>/<record_id>", methods=["GET"])
def get_resource(resource, record_id):
    try:
        record = resource_service.get_record(resource, record_id)
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify(record), 200


@resource_bp.route("/<resource>/<record_id>", methods=["PUT"])
def replace_resource(resource, record_id):
    try:
        record = resource_service.replace_record(
            resource, record_id, request.get_json(silent=True)
        )
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify(record), 200


@resource_bp.route("/<resource>/<record_id>", methods=["PATCH"])
def patch_resource(resource, record_id):
    try:
        record = resource_service.patch_record(
            resource, record_id, request.get_json(silent=True)
        )
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify(record), 200


@resource_bp.route("/<resource>/<record_id>", methods=["DELETE"])
def delete_resource(resource, record_id):
    try:
        resource_service.delete_record(resource, record_id)
    except ApiError as e:
        return jsonify({"message": e.message}), e.status_code

    return jsonify({}), 200

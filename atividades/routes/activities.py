from flask import Blueprint, jsonify, request
from flask_login import login_required

from atividades.models.activity import Activity
from atividades.services.activity_service import (
    NOT_FOUND_MESSAGE,
    create_activity,
    delete_activity,
    list_activities,
    list_activities_by_month,
    list_activities_by_service_year,
    update_activity,
)
from atividades.services.guard import current_user_id, get_owned_or_404
from atividades.services.validation import validate_activity_payload, validate_year_month

activities_bp = Blueprint('activities', __name__, url_prefix='/api/activities')


def _get_activity_for_user(activity_id: int, user_id: int) -> Activity:
    return get_owned_or_404(Activity, activity_id, user_id, NOT_FOUND_MESSAGE)


@activities_bp.route('', methods=['POST'])
@login_required
def create():
    activity = create_activity(current_user_id(), request.get_json(silent=True))
    return jsonify(activity.to_dict()), 201


@activities_bp.route('', methods=['GET'])
@login_required
def list_all():
    activities = list_activities(current_user_id())
    return jsonify([activity.to_dict() for activity in activities])


@activities_bp.route('/month/<int:year>/<int:month>', methods=['GET'])
@login_required
def list_by_month(year: int, month: int):
    user_id = current_user_id()
    validate_year_month(year, month)
    activities = list_activities_by_month(user_id, year, month)
    return jsonify([activity.to_dict() for activity in activities])


@activities_bp.route('/year/<int:year>/<int:month>', methods=['GET'])
@login_required
def list_by_service_year(year: int, month: int):
    user_id = current_user_id()
    validate_year_month(year, month)
    activities = list_activities_by_service_year(user_id, year, month)
    return jsonify([activity.to_dict() for activity in activities])


@activities_bp.route('/<int:activity_id>', methods=['GET'])
@login_required
def get(activity_id: int):
    activity = _get_activity_for_user(activity_id, current_user_id())
    return jsonify(activity.to_dict())


@activities_bp.route('/<int:activity_id>', methods=['PUT'])
@login_required
def update(activity_id: int):
    user_id = current_user_id()
    values = validate_activity_payload(request.get_json(silent=True))
    _get_activity_for_user(activity_id, user_id)

    activity = update_activity(activity_id, values)
    return jsonify(activity.to_dict())


@activities_bp.route('/<int:activity_id>', methods=['DELETE'])
@login_required
def delete(activity_id: int):
    _get_activity_for_user(activity_id, current_user_id())
    delete_activity(activity_id)
    return jsonify({'message': 'Atividade excluída com sucesso!'})

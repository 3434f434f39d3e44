from flask import Blueprint, jsonify, request
from flask_login import login_required

from atividades.models.reminder import Reminder
from atividades.services.guard import current_user_id, get_owned_or_404
from atividades.services.reminder_service import (
    NOT_FOUND_MESSAGE,
    create_reminder,
    delete_reminder,
    list_reminders,
    list_reminders_by_month,
    update_reminder,
)
from atividades.services.validation import validate_reminder_payload, validate_year_month

reminders_bp = Blueprint('reminders', __name__, url_prefix='/api/reminders')


def _get_reminder_for_user(reminder_id: int, user_id: int) -> Reminder:
    return get_owned_or_404(Reminder, reminder_id, user_id, NOT_FOUND_MESSAGE)


@reminders_bp.route('', methods=['POST'])
@login_required
def create():
    reminder = create_reminder(current_user_id(), request.get_json(silent=True))
    return jsonify(reminder.to_dict()), 201


@reminders_bp.route('', methods=['GET'])
@login_required
def list_all():
    reminders = list_reminders(current_user_id())
    return jsonify([reminder.to_dict() for reminder in reminders])


@reminders_bp.route('/month/<int:year>/<int:month>', methods=['GET'])
@login_required
def list_by_month(year: int, month: int):
    user_id = current_user_id()
    validate_year_month(year, month)
    reminders = list_reminders_by_month(user_id, year, month)
    return jsonify([reminder.to_dict() for reminder in reminders])


@reminders_bp.route('/<int:reminder_id>', methods=['GET'])
@login_required
def get(reminder_id: int):
    reminder = _get_reminder_for_user(reminder_id, current_user_id())
    return jsonify(reminder.to_dict())


@reminders_bp.route('/<int:reminder_id>', methods=['PUT'])
@login_required
def update(reminder_id: int):
    user_id = current_user_id()
    values = validate_reminder_payload(request.get_json(silent=True))
    _get_reminder_for_user(reminder_id, user_id)

    reminder = update_reminder(reminder_id, values)
    return jsonify(reminder.to_dict())


@reminders_bp.route('/<int:reminder_id>', methods=['DELETE'])
@login_required
def delete(reminder_id: int):
    _get_reminder_for_user(reminder_id, current_user_id())
    delete_reminder(reminder_id)
    return jsonify({'message': 'Lembrete excluído com sucesso!'})

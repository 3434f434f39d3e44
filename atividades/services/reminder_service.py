from atividades.models.reminder import Reminder
from atividades.services import entity_service
from atividades.services.calendar_service import month_bounds
from atividades.services.validation import validate_reminder_payload

NOT_FOUND_MESSAGE = 'Lembrete não encontrado'


def create_reminder(owner_id, payload):
    values = validate_reminder_payload(payload)
    return entity_service.create_owned(Reminder, owner_id, values)


def get_reminder(reminder_id):
    return entity_service.get_by_id(Reminder, reminder_id, NOT_FOUND_MESSAGE)


def list_reminders(owner_id):
    return entity_service.list_by_owner(Reminder, owner_id)


def list_reminders_by_month(owner_id, year, month):
    start, end = month_bounds(year, month)
    return entity_service.list_by_owner_between(Reminder, owner_id, start, end)


def update_reminder(reminder_id, values):
    return entity_service.update_owned(Reminder, reminder_id, values, NOT_FOUND_MESSAGE)


def delete_reminder(reminder_id):
    entity_service.delete_owned(Reminder, reminder_id, NOT_FOUND_MESSAGE)

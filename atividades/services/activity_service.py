from atividades.models.activity import Activity
from atividades.services import entity_service
from atividades.services.calendar_service import month_bounds, twelve_month_bounds
from atividades.services.validation import validate_activity_payload

NOT_FOUND_MESSAGE = 'Atividade não encontrada'


def create_activity(owner_id, payload):
    values = validate_activity_payload(payload)
    return entity_service.create_owned(Activity, owner_id, values)


def get_activity(activity_id):
    return entity_service.get_by_id(Activity, activity_id, NOT_FOUND_MESSAGE)


def list_activities(owner_id):
    return entity_service.list_by_owner(Activity, owner_id)


def list_activities_by_month(owner_id, year, month):
    start, end = month_bounds(year, month)
    return entity_service.list_by_owner_between(Activity, owner_id, start, end)


def list_activities_by_service_year(owner_id, year, month):
    """Doze meses a partir do dia 1 de year/month (zero-based).

    Quem chama escolhe o inicio; para o ano de servico e setembro.
    """
    start, end = twelve_month_bounds(year, month)
    return entity_service.list_by_owner_between(Activity, owner_id, start, end)


def update_activity(activity_id, values):
    return entity_service.update_owned(Activity, activity_id, values, NOT_FOUND_MESSAGE)


def delete_activity(activity_id):
    entity_service.delete_owned(Activity, activity_id, NOT_FOUND_MESSAGE)

from flask_login import current_user

from atividades import db
from atividades.errors import Forbidden, NotFound, Unauthenticated


def current_user_id() -> int:
    if not current_user.is_authenticated:
        raise Unauthenticated()
    return current_user.id


def require_ownership(entity, user_id: int) -> None:
    if entity.user_id != user_id:
        raise Forbidden()


def get_owned_or_404(model, entity_id: int, user_id: int, not_found_message=None):
    # Existencia antes de posse: um 403 so e possivel para registros que existem
    entity = db.session.get(model, entity_id)
    if entity is None:
        raise NotFound(not_found_message)
    require_ownership(entity, user_id)
    return entity

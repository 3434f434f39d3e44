"""Acesso a registros que pertencem a um usuario (atividades e lembretes).

Toda consulta de listagem e filtrada pelo ``user_id`` do dono. As operacoes
por id nao verificam posse: isso fica com ``guard.get_owned_or_404``.
"""

from datetime import date
from typing import Any, Dict, List

from atividades import db
from atividades.errors import NotFound


def create_owned(model, owner_id: int, values: Dict[str, Any]):
    entity = model(user_id=owner_id, **values)
    db.session.add(entity)
    db.session.commit()
    return entity


def get_by_id(model, entity_id: int, not_found_message=None):
    entity = db.session.get(model, entity_id)
    if entity is None:
        raise NotFound(not_found_message)
    return entity


def _owner_query(model, owner_id: int):
    return model.query.filter_by(user_id=owner_id)


def _newest_first(query, model):
    return query.order_by(model.date.desc(), model.id.desc())


def list_by_owner(model, owner_id: int) -> List:
    return _newest_first(_owner_query(model, owner_id), model).all()


def list_by_owner_between(model, owner_id: int, start: date, end: date) -> List:
    """Registros do dono com ``start <= date <= end``."""
    query = _owner_query(model, owner_id).filter(
        model.date >= start,
        model.date <= end,
    )
    return _newest_first(query, model).all()


def update_owned(model, entity_id: int, values: Dict[str, Any], not_found_message=None):
    entity = get_by_id(model, entity_id, not_found_message)
    # user_id nunca muda
    for field, value in values.items():
        setattr(entity, field, value)
    db.session.commit()
    return entity


def delete_owned(model, entity_id: int, not_found_message=None) -> None:
    entity = get_by_id(model, entity_id, not_found_message)
    db.session.delete(entity)
    db.session.commit()

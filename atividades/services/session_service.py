import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from flask import current_app

from atividades import db
from atividades.models.session import UserSession
from atividades.models.user import User


def _utcnow() -> datetime:
    # Colunas DateTime sem fuso: tudo em UTC ingenuo
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _session_lifetime() -> timedelta:
    return timedelta(days=current_app.config.get('SESSION_LIFETIME_DAYS', 7))


def create_session(user_id: int, now: Optional[datetime] = None) -> UserSession:
    created_at = now or _utcnow()
    user_session = UserSession(
        token=secrets.token_urlsafe(32),
        user_id=user_id,
        created_at=created_at,
        expires_at=created_at + _session_lifetime(),
    )
    db.session.add(user_session)
    db.session.commit()
    current_app.logger.info('Sessao criada para o usuario %s', user_id)
    return user_session


def resolve_session(token: str, now: Optional[datetime] = None) -> Optional[int]:
    """Retorna o id do usuario dono da sessao, ou None se ela for invalida.

    A expiracao e absoluta: consultar a sessao nao a prolonga.
    """
    if not token:
        return None

    user_session = db.session.get(UserSession, token)
    if user_session is None:
        return None

    if user_session.is_expired(now or _utcnow()):
        current_app.logger.info('Sessao expirada do usuario %s removida', user_session.user_id)
        db.session.delete(user_session)
        db.session.commit()
        return None

    if db.session.get(User, user_session.user_id) is None:
        return None

    return user_session.user_id


def destroy_session(token: str) -> None:
    if not token:
        return

    deleted = UserSession.query.filter_by(token=token).delete()
    db.session.commit()
    if deleted:
        current_app.logger.info('Sessao encerrada')


def purge_expired_sessions(now: Optional[datetime] = None) -> int:
    deleted = (
        UserSession.query
        .filter(UserSession.expires_at <= (now or _utcnow()))
        .delete(synchronize_session=False)
    )
    db.session.commit()
    return deleted


def set_session_cookie(response, user_session: UserSession):
    config = current_app.config
    response.set_cookie(
        config['SESSION_TOKEN_COOKIE'],
        user_session.token,
        expires=user_session.expires_at.replace(tzinfo=timezone.utc),
        httponly=True,
        secure=config.get('SESSION_COOKIE_SECURE', True),
        samesite=config.get('SESSION_COOKIE_SAMESITE', 'Lax'),
    )
    return response


def clear_session_cookie(response):
    config = current_app.config
    response.delete_cookie(
        config['SESSION_TOKEN_COOKIE'],
        httponly=True,
        secure=config.get('SESSION_COOKIE_SECURE', True),
        samesite=config.get('SESSION_COOKIE_SAMESITE', 'Lax'),
    )
    return response

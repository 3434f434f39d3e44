from flask import current_app
from sqlalchemy.exc import IntegrityError

from atividades.errors import ConflictError, InvalidCredentials, NotFound
from atividades.models.user import User, UserRole, db
from atividades.services.password_service import (
    MalformedPasswordHash,
    hash_password,
    verify_password,
)
from atividades.services.session_service import destroy_session
from atividades.services.validation import validate_profile_update, validate_registration


def get_user(user_id):
    return db.session.get(User, user_id)


def get_user_by_username(username):
    return User.query.filter_by(username=username).first()


def get_user_by_email(email):
    return User.query.filter_by(email=email).first()


def register_user(payload):
    data = validate_registration(payload)

    if get_user_by_username(data['username']):
        current_app.logger.info('Cadastro recusado: usuario %s ja existe', data['username'])
        raise ConflictError('username')

    if get_user_by_email(data['email']):
        current_app.logger.info('Cadastro recusado: email ja esta em uso')
        raise ConflictError('email')

    user = User(
        username=data['username'],
        email=data['email'],
        password_hash=hash_password(data['password']),
        first_name=data['first_name'],
        last_name=data['last_name'],
        role=UserRole.PUBLICADOR.value,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # outro cadastro gravou o mesmo usuario/email depois das consultas acima
        db.session.rollback()
        field = 'username' if get_user_by_username(data['username']) else 'email'
        current_app.logger.info('Cadastro recusado na gravacao: %s ja existe', field)
        raise ConflictError(field)
    current_app.logger.info('Usuario %s criado (id=%s)', user.username, user.id)
    return user


def validate_login(identifier, password):
    """Busca o usuario por nome de usuario e, se nao achar, por email.

    Usuario inexistente e senha errada geram o mesmo InvalidCredentials.
    """
    user = get_user_by_username(identifier) or get_user_by_email(identifier)

    if user is None:
        current_app.logger.info('Login recusado para %s', identifier)
        raise InvalidCredentials()

    try:
        password_ok = verify_password(password, user.password_hash)
    except MalformedPasswordHash:
        current_app.logger.error('Hash de senha invalido para o usuario %s', user.id)
        raise InvalidCredentials()

    if not password_ok:
        current_app.logger.info('Login recusado para %s', identifier)
        raise InvalidCredentials()

    current_app.logger.info('Login realizado pelo usuario %s', user.id)
    return user


def logout(token):
    destroy_session(token)


def update_user_profile(user_id, payload):
    updates = validate_profile_update(payload)

    user = get_user(user_id)
    if user is None:
        raise NotFound('Usuário não encontrado')

    for field, value in updates.items():
        setattr(user, field, value)
    db.session.commit()
    current_app.logger.info('Perfil do usuario %s atualizado: %s', user.id, ', '.join(updates) or '-')
    return user

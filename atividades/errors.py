from typing import Dict, Optional

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from atividades import db


class AppError(Exception):
    status_code = 500
    default_message = 'Erro interno do servidor'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self) -> Dict[str, object]:
        return {'message': self.message}


class ValidationError(AppError):
    status_code = 400
    default_message = 'Dados inválidos'

    def __init__(self, fields: Dict[str, str], message: Optional[str] = None):
        if message is None:
            message = '; '.join(f'{field}: {text}' for field, text in fields.items())
        super().__init__(message)
        self.fields = dict(fields)

    def to_dict(self) -> Dict[str, object]:
        return {'message': self.message, 'fields': self.fields}


class ConflictError(AppError):
    status_code = 400

    _MESSAGES = {
        'username': 'Nome de usuário já existe',
        'email': 'Email já está em uso',
    }

    def __init__(self, field: str):
        super().__init__(self._MESSAGES.get(field, f'{field} já está em uso'))
        self.field = field


class InvalidCredentials(AppError):
    status_code = 401
    default_message = 'Nome de usuário/email ou senha incorretos'


class Unauthenticated(AppError):
    status_code = 401
    default_message = 'Usuário não autenticado'


class Forbidden(AppError):
    status_code = 403
    default_message = 'Acesso não autorizado'


class NotFound(AppError):
    status_code = 404
    default_message = 'Registro não encontrado'


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception('Falha no banco de dados')
        return jsonify({'message': 'Erro interno do servidor'}), 500

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        app.logger.exception('Erro inesperado')
        return jsonify({'message': 'Erro interno do servidor'}), 500

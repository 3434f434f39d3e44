import logging

from flask import Flask, current_app
from flask_login import LoginManager
from flask_migrate import Migrate
from config import Config
from atividades.models.user import db, User
from atividades.models.session import UserSession
from atividades.models.activity import Activity
from atividades.models.reminder import Reminder

login_manager = LoginManager()
migrate = Migrate()


@login_manager.request_loader
def load_user_from_session_cookie(req):
    from atividades.services.session_service import resolve_session

    token = req.cookies.get(current_app.config['SESSION_TOKEN_COOKIE'])
    if not token:
        return None

    user_id = resolve_session(token)
    if user_id is None:
        return None
    return db.session.get(User, user_id)


@login_manager.unauthorized_handler
def unauthorized():
    from atividades.errors import Unauthenticated

    raise Unauthenticated()


def _configure_logging(app):
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # A sessao vive na tabela `sessions`; o cookie assinado do Flask nao e usado
    login_manager.session_protection = None

    from atividades.errors import register_error_handlers
    register_error_handlers(app)

    with app.app_context():
        # Importar e registrar blueprints
        from atividades.routes.auth import auth_bp
        from atividades.routes.activities import activities_bp
        from atividades.routes.reminders import reminders_bp
        from atividades.routes.reports import reports_bp

        app.register_blueprint(auth_bp)
        app.register_blueprint(activities_bp)
        app.register_blueprint(reminders_bp)
        app.register_blueprint(reports_bp)

    app.logger.debug('Aplicacao iniciada (APP_ENV=%s)', app.config.get('APP_ENV'))
    return app

from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required, current_user

from atividades.errors import NotFound
from atividades.services.auth_service import (
    get_user,
    logout as logout_session,
    register_user,
    update_user_profile,
    validate_login,
)
from atividades.services.guard import current_user_id
from atividades.services.session_service import (
    clear_session_cookie,
    create_session,
    set_session_cookie,
)
from atividades.services.validation import validate_login_payload

auth_bp = Blueprint('auth', __name__, url_prefix='/api')


@auth_bp.route('/register', methods=['POST'])
def register():
    user = register_user(request.get_json(silent=True))

    # Cadastro ja deixa o usuario logado
    user_session = create_session(user.id)
    response = jsonify(user.to_dict())
    response.status_code = 201
    return set_session_cookie(response, user_session)


@auth_bp.route('/login', methods=['POST'])
def login():
    data = validate_login_payload(request.get_json(silent=True))
    user = validate_login(data['identifier'], data['password'])

    user_session = create_session(user.id)
    response = jsonify(user.to_dict())
    return set_session_cookie(response, user_session)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    token = request.cookies.get(current_app.config['SESSION_TOKEN_COOKIE'])
    if token:
        logout_session(token)

    response = jsonify({'message': 'Logout realizado com sucesso!'})
    return clear_session_cookie(response)


@auth_bp.route('/user', methods=['GET'])
@login_required
def get_current_user():
    return jsonify(current_user.to_dict())


@auth_bp.route('/user', methods=['PUT'])
@login_required
def update_profile():
    user = update_user_profile(current_user_id(), request.get_json(silent=True))
    return jsonify(user.to_dict())


@auth_bp.route('/user-role', methods=['GET'])
@login_required
def get_user_role():
    user = get_user(current_user_id())
    if user is None:
        raise NotFound('Usuário não encontrado')
    return jsonify({'role': user.user_role.value})

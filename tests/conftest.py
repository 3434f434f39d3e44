"""Fixtures compartilhadas: app com SQLite em memoria e clientes logados.

O fixture ``app`` nao deixa um app context aberto: cada requisicao do test
client precisa do seu proprio ``g`` (o Flask-Login guarda o usuario la).
Consultas diretas ao banco usam ``with app.app_context()`` ou o fixture
``ctx``.
"""

import pytest

from atividades import create_app, db
from config import TestConfig


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, username='joao', email='joao@x.com', password='password123',
             first_name='João', last_name='Silva'):
    return client.post('/api/register', json={
        'username': username,
        'email': email,
        'password': password,
        'firstName': first_name,
        'lastName': last_name,
    })


@pytest.fixture
def joao(app):
    client = app.test_client()
    response = register(client)
    assert response.status_code == 201
    client.user = response.get_json()
    return client


@pytest.fixture
def maria(app):
    client = app.test_client()
    response = register(client, username='maria', email='maria@x.com', first_name='Maria',
                        last_name='Souza')
    assert response.status_code == 201
    client.user = response.get_json()
    return client

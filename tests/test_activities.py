import pytest

from atividades import db
from atividades.models.activity import Activity
from atividades.models.user import User
from tests.conftest import register


def _create(client, **overrides):
    payload = {'type': 'campo', 'hours': 2.5, 'date': '2024-03-10'}
    payload.update(overrides)
    return client.post('/api/activities', json=payload)


def test_joao_and_maria_scenario(app):
    joao = app.test_client()
    registered = register(joao)
    assert registered.status_code == 201
    assert registered.get_json()['role'] == 'publicador'
    joao.post('/api/logout')

    wrong = joao.post('/api/login', json={'identifier': 'joao', 'password': 'errada'})
    assert wrong.status_code == 401

    logged = joao.post('/api/login', json={'identifier': 'joao', 'password': 'password123'})
    assert logged.status_code == 200
    assert any(h.startswith('atividades_sessao=') for h in logged.headers.getlist('Set-Cookie'))

    created = _create(joao)
    assert created.status_code == 201
    activity = created.get_json()
    assert activity['userId'] == logged.get_json()['id']
    assert activity['hours'] == 2.5
    assert activity['date'] == '2024-03-10'

    maria = app.test_client()
    register(maria, username='maria', email='maria@x.com', first_name='Maria')
    maria.post('/api/logout')
    assert maria.post('/api/login', json={
        'identifier': 'maria@x.com', 'password': 'password123',
    }).status_code == 200

    assert maria.delete(f"/api/activities/{activity['id']}").status_code == 403
    assert joao.get(f"/api/activities/{activity['id']}").get_json() == activity


class TestCreate:

    def test_requires_session(self, client):
        assert _create(client).status_code == 401

    def test_notes_are_optional(self, joao):
        response = _create(joao, notes='Revisita na rua A')

        assert response.status_code == 201
        assert response.get_json()['notes'] == 'Revisita na rua A'
        assert _create(joao).get_json()['notes'] is None

    def test_datetime_is_reduced_to_date(self, joao):
        response = _create(joao, date='2024-03-10T15:30:00.000Z')

        assert response.status_code == 201
        assert response.get_json()['date'] == '2024-03-10'

    @pytest.mark.parametrize('hours', [0.5, 1, 12.5, 24])
    def test_accepts_hours_in_range(self, joao, hours):
        assert _create(joao, hours=hours).status_code == 201

    @pytest.mark.parametrize('hours', [0, 0.25, 1.3, 24.5, -1, '2', True, None])
    def test_rejects_invalid_hours(self, joao, hours):
        response = _create(joao, hours=hours)

        assert response.status_code == 400
        assert 'hours' in response.get_json()['fields']

    def test_rejects_unknown_type(self, joao):
        response = _create(joao, type='visita')

        assert response.status_code == 400
        assert response.get_json()['fields']['type'] == 'Tipo de atividade inválido'

    def test_rejects_invalid_date(self, joao):
        response = _create(joao, date='10/03/2024')

        assert response.status_code == 400
        assert 'date' in response.get_json()['fields']

    def test_reports_every_invalid_field(self, joao):
        response = joao.post('/api/activities', json={'type': 'x', 'hours': 30})

        assert response.status_code == 400
        assert set(response.get_json()['fields']) == {'type', 'hours', 'date'}

    def test_owner_comes_from_session_not_payload(self, joao, maria):
        response = _create(joao, userId=maria.user['id'])

        assert response.get_json()['userId'] == joao.user['id']


class TestList:

    def test_lists_only_own_activities_newest_first(self, joao, maria):
        _create(joao, date='2024-03-01')
        _create(joao, date='2024-03-20')
        _create(joao, date='2024-02-15')
        _create(maria, date='2024-03-05')

        activities = joao.get('/api/activities').get_json()

        assert [a['date'] for a in activities] == ['2024-03-20', '2024-03-01', '2024-02-15']
        assert {a['userId'] for a in activities} == {joao.user['id']}

    def test_same_date_uses_id_as_tiebreaker(self, joao):
        first = _create(joao).get_json()
        second = _create(joao).get_json()

        ids = [a['id'] for a in joao.get('/api/activities').get_json()]

        assert ids == [second['id'], first['id']]

    def test_month_window_in_leap_year(self, joao):
        for day in ['2024-01-31', '2024-02-01', '2024-02-29', '2024-03-01']:
            _create(joao, date=day)

        response = joao.get('/api/activities/month/2024/1')

        assert response.status_code == 200
        assert [a['date'] for a in response.get_json()] == ['2024-02-29', '2024-02-01']

    def test_month_window_for_december(self, joao):
        for day in ['2023-11-30', '2023-12-01', '2023-12-31', '2024-01-01']:
            _create(joao, date=day)

        dates = [a['date'] for a in joao.get('/api/activities/month/2023/11').get_json()]

        assert dates == ['2023-12-31', '2023-12-01']

    def test_month_window_excludes_other_users(self, joao, maria):
        _create(maria, date='2024-02-10')

        assert joao.get('/api/activities/month/2024/1').get_json() == []

    @pytest.mark.parametrize('month', [12, 99])
    def test_invalid_month(self, joao, month):
        response = joao.get(f'/api/activities/month/2024/{month}')

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Ano ou mês inválido'

    def test_month_requires_session(self, client):
        assert client.get('/api/activities/month/2024/1').status_code == 401

    def test_service_year_window(self, joao):
        for day in ['2023-08-31', '2023-09-01', '2024-02-10', '2024-08-31', '2024-09-01']:
            _create(joao, date=day)

        response = joao.get('/api/activities/year/2023/8')

        assert response.status_code == 200
        assert [a['date'] for a in response.get_json()] == [
            '2024-08-31', '2024-02-10', '2023-09-01',
        ]


class TestGetUpdateDelete:

    def test_get_own_activity(self, joao):
        activity = _create(joao).get_json()

        response = joao.get(f"/api/activities/{activity['id']}")

        assert response.status_code == 200
        assert response.get_json() == activity

    def test_missing_activity_is_404(self, joao):
        response = joao.get('/api/activities/999')

        assert response.status_code == 404
        assert response.get_json()['message'] == 'Atividade não encontrada'

    def test_other_users_activity_is_403(self, joao, maria):
        activity = _create(joao).get_json()

        response = maria.get(f"/api/activities/{activity['id']}")

        assert response.status_code == 403
        assert response.get_json()['message'] == 'Acesso não autorizado'

    def test_update_replaces_fields(self, joao):
        activity = _create(joao, notes='antes').get_json()

        response = joao.put(f"/api/activities/{activity['id']}", json={
            'type': 'estudo', 'hours': 1, 'date': '2024-03-11',
        })

        assert response.status_code == 200
        body = response.get_json()
        assert body == {
            'id': activity['id'],
            'userId': joao.user['id'],
            'type': 'estudo',
            'hours': 1.0,
            'date': '2024-03-11',
            'notes': None,
        }

    def test_update_by_other_user_is_403_and_keeps_activity(self, joao, maria):
        activity = _create(joao).get_json()

        response = maria.put(f"/api/activities/{activity['id']}", json={
            'type': 'cartas', 'hours': 3, 'date': '2024-03-12',
        })

        assert response.status_code == 403
        assert joao.get(f"/api/activities/{activity['id']}").get_json() == activity

    def test_invalid_update_is_400_and_not_partially_applied(self, joao):
        activity = _create(joao).get_json()

        response = joao.put(f"/api/activities/{activity['id']}", json={
            'type': 'estudo', 'hours': 99, 'date': '2024-03-11',
        })

        assert response.status_code == 400
        assert joao.get(f"/api/activities/{activity['id']}").get_json() == activity

    def test_payload_is_validated_before_lookup(self, joao):
        response = joao.put('/api/activities/999', json={'type': 'x'})

        assert response.status_code == 400

    def test_update_missing_activity_is_404(self, joao):
        response = joao.put('/api/activities/999', json={
            'type': 'campo', 'hours': 1, 'date': '2024-03-11',
        })

        assert response.status_code == 404

    def test_delete(self, joao):
        activity = _create(joao).get_json()

        response = joao.delete(f"/api/activities/{activity['id']}")

        assert response.status_code == 200
        assert joao.get(f"/api/activities/{activity['id']}").status_code == 404

    def test_second_delete_is_404(self, joao):
        activity = _create(joao).get_json()
        joao.delete(f"/api/activities/{activity['id']}")

        assert joao.delete(f"/api/activities/{activity['id']}").status_code == 404

    def test_delete_by_other_user_is_403(self, joao, maria):
        activity = _create(joao).get_json()

        assert maria.delete(f"/api/activities/{activity['id']}").status_code == 403
        assert joao.get(f"/api/activities/{activity['id']}").status_code == 200

    def test_unauthenticated_before_not_found(self, client):
        assert client.get('/api/activities/999').status_code == 401
        assert client.delete('/api/activities/999').status_code == 401


def test_deleting_user_cascades_to_activities(app, joao):
    _create(joao)
    _create(joao)

    with app.app_context():
        user = db.session.get(User, joao.user['id'])
        db.session.delete(user)
        db.session.commit()

        assert Activity.query.count() == 0

import pytest

from api import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def tap(client, state, *buttons):
    data = None
    for button in buttons:
        resp = client.post('/api/press', json={'state': state, 'button': button})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body['success'] is True
        data = body['data']
        state = data['state']
    return data


def initial_state(client):
    return client.get('/api/state').get_json()['data']['state']


def test_initial_state(client):
    resp = client.get('/api/state')
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['success'] is True
    assert body['data']['equation'] == "0"
    assert body['data']['state']['kind'] == "idle"
    assert body['data']['title'].startswith("Kiddy Calc ")


def test_press_builds_equation(client):
    state = initial_state(client)
    assert tap(client, state, "1", "2", "+")['equation'] == "12 +"
    assert tap(client, state, "1", "2", "+", "3")['equation'] == "12 + 3"


def test_press_chain_left_to_right(client):
    data = tap(client, initial_state(client), "2", "+", "3", "×", "4", "=")
    assert data['equation'] == "20"
    assert data['state']['kind'] == "evaluated"


def test_division_by_zero_round_trips(client):
    data = tap(client, initial_state(client), "8", "÷", "0", "=", "+")
    assert data['equation'] == "Oops! +"
    assert data['state']['pending'] == "nan"
    assert tap(client, data['state'], "1", "=")['equation'] == "Oops!"


def test_unknown_button_is_bad_request(client):
    resp = client.post('/api/press', json={'state': initial_state(client), 'button': "%"})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body['success'] is False
    assert "Unknown button" in body['error']


def test_missing_button_is_bad_request(client):
    resp = client.post('/api/press', json={'state': initial_state(client), 'button': 7})
    assert resp.status_code == 400


def test_malformed_state_is_bad_request(client):
    resp = client.post('/api/press', json={'state': {'kind': 'bogus'}, 'button': "1"})
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False


def test_non_json_body_is_bad_request(client):
    resp = client.post('/api/press', data="1", content_type='text/plain')
    assert resp.status_code == 400


def test_buttons_layout(client):
    body = client.get('/api/buttons').get_json()
    assert body['success'] is True
    assert body['count'] == 17
    rows = body['data']
    assert [b['label'] for b in rows[0]] == ["7", "8", "9", "÷"]
    assert rows[-1] == [{'label': "=", 'color': "#FF86C8", 'emoji': None, 'important': True}]


def test_index_page_served(client):
    resp = client.get('/')
    assert resp.status_code == 200
    assert b"/api/press" in resp.data


def test_index_page_runs_taps_in_order(client):
    page = client.get('/').data.decode("utf-8")
    # each tap waits for the previous response before sending its state
    assert "queue = queue.then(() => doPress(label))" in page
    assert "el.addEventListener('click', () => press(b.label))" in page


def test_api_info_page(client):
    resp = client.get('/api')
    assert resp.status_code == 200
    assert b"/api/buttons" in resp.data


def test_cors_enabled(client):
    resp = client.get('/api/state', headers={'Origin': 'http://example.com'})
    # older flask-cors answers '*', newer releases echo the origin
    assert resp.headers.get('Access-Control-Allow-Origin') in ('*', 'http://example.com')

import json

from highlandgames.frontend import loader as loader_module
from highlandgames.frontend.loader import ReferenceDataLoader, flask_client_fetcher, http_fetcher
from highlandgames.frontend.router import PageRouter, View


def test_starts_on_home():
    assert PageRouter().view is View.HOME


def test_admin_view_needs_admin_role():
    router = PageRouter()
    assert router.navigate('Admin') is View.HOME

    router = PageRouter(user={'username': 'morag', 'role': 'user'})
    assert router.navigate(View.ADMIN) is View.HOME

    router = PageRouter(user={'username': 'chieftain', 'role': 'admin'})
    assert router.navigate('Admin') is View.ADMIN


def test_user_dashboard_needs_user_role():
    router = PageRouter()
    assert router.navigate('UserDashboard') is View.LOGIN

    router = PageRouter(user={'username': 'chieftain', 'role': 'admin'})
    assert router.navigate('UserDashboard') is View.LOGIN

    router = PageRouter(user={'username': 'morag', 'role': 'user', 'email': 'm@x.com'})
    assert router.navigate('UserDashboard') is View.USER_DASHBOARD


def test_event_detail_needs_an_event():
    router = PageRouter()
    assert router.navigate('EventDetail') is View.EVENTS

    assert router.navigate('EventDetail', event_id=3) is View.EVENT_DETAIL
    assert router.event_id == 3

    router.navigate('Home')
    assert router.navigate('EventDetail') is View.EVENT_DETAIL


def test_unknown_tokens_fall_back_to_home():
    router = PageRouter()
    router.navigate('Events')
    assert router.navigate('Leaderboard') is View.HOME
    assert router.navigate(None) is View.HOME


def test_login_and_logout():
    router = PageRouter()
    assert router.log_in({'username': 'chieftain', 'role': 'admin'}) is View.ADMIN
    assert router.log_out() is View.HOME
    assert router.role is None

    assert router.log_in({'username': 'morag', 'role': 'user'}) is View.USER_DASHBOARD


def test_reference_data_reloads_on_every_transition(client, make_event, services):
    make_event('Caber Toss')
    router = PageRouter()
    loader = ReferenceDataLoader(flask_client_fetcher(client))
    loader.attach(router)

    router.navigate('Events')
    assert [e['name'] for e in loader.events] == ['Caber Toss']
    assert loader.slides == [] and loader.heritage == [] and loader.tally == []

    make_event('Hammer Throw')
    router.navigate('Login')
    router.navigate('Admin')  # guarded, lands on Home but still reloads
    assert loader.load_count == 3
    assert [e['name'] for e in loader.events] == ['Caber Toss', 'Hammer Throw']


def test_failed_load_keeps_previous_batch():
    responses = {
        '/api/events': [{'id': 1, 'name': 'Caber Toss'}],
        '/api/slides': [],
        '/api/tally': [{'team_name': 'Clan Stewart', 'total': 6}],
        '/api/heritage': [],
    }
    broken = {'on': False}

    def fetch(path):
        if broken['on'] and path == '/api/tally':
            raise ConnectionError("offline")
        return responses[path]

    loader = ReferenceDataLoader(fetch)
    assert loader.load() is True

    broken['on'] = True
    responses['/api/events'] = []
    assert loader.load() is False
    assert loader.events == [{'id': 1, 'name': 'Caber Toss'}]
    assert loader.loading is False
    assert loader.load_count == 1


class _FakeResponse:

    def __init__(self, body):
        self.body = body

    def read(self):
        return self.body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_http_fetcher_reads_json_from_server(monkeypatch):
    requested = []

    def fake_urlopen(request, timeout):
        requested.append((request.full_url, request.get_header('Accept'), timeout))
        return _FakeResponse(json.dumps([{'id': 1, 'name': 'Caber Toss'}]).encode('utf-8'))

    monkeypatch.setattr(loader_module, 'urlopen', fake_urlopen)

    fetch = http_fetcher('http://localhost:3001', timeout=3)
    assert fetch('/api/events') == [{'id': 1, 'name': 'Caber Toss'}]
    assert requested == [('http://localhost:3001/api/events', 'application/json', 3)]

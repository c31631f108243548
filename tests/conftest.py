import os

import pytest

from highlandgames import create_app


class RecordingNotifier:
    """Stands in for EmailNotifier and keeps every confirmation it was asked to send."""

    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    def notify_registration(self, name, email, events):
        if self.fail:
            raise ConnectionError("SMTP unavailable")
        self.sent.append({'name': name, 'email': email, 'events': [e.name for e in events]})
        return True


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def image_dirs(tmp_path):
    primary = tmp_path / 'dist' / 'images'
    mirror = tmp_path / 'public' / 'images'
    return primary, mirror


@pytest.fixture
def app(tmp_path, image_dirs, notifier):
    primary, mirror = image_dirs
    app = create_app({
        'TESTING': True,
        'DATABASE_PATH': str(tmp_path / 'test.db'),
        'IMAGE_UPLOAD_DIR': str(primary),
        'IMAGE_MIRROR_DIR': str(mirror),
        'RUN_TASKS_INLINE': True,
        'WTF_CSRF_ENABLED': False,
        'SECRET_KEY': 'test-secret',
        'EMAIL_HOST': '',
    }, notifier=notifier)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return app.extensions['highlandgames']


@pytest.fixture
def admin_client(app, services):
    services.auth.create_admin('admin', 'admin-pass')
    client = app.test_client()
    response = client.post('/api/login', json={'username': 'admin', 'password': 'admin-pass'})
    assert response.status_code == 200
    return client


@pytest.fixture
def make_event(services):
    def _make(name, **fields):
        payload = {'name': name}
        payload.update(fields)
        event, errors = services.content['events'].create(payload)
        assert not errors
        return event
    return _make


@pytest.fixture
def make_image(image_dirs):
    """Place an image file in both directories and return its /images/ reference."""
    def _make(filename):
        for directory in image_dirs:
            os.makedirs(directory, exist_ok=True)
            (directory / filename).write_bytes(b'\x89PNG\r\n\x1a\n')
        return f'/images/{filename}'
    return _make

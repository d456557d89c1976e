import os
import sys
import pytest

# Ensure the backend root (containing the `racer` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from racer import create_app, socketio
from racer.services.race.session import RaceSession


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CLIENT_DIR = os.path.join(CURRENT_DIR, 'static')
    CORS_ORIGINS = '*'
    TRACK_LENGTH = 5000
    LAPS_TO_WIN = 3
    COUNTDOWN_FROM = 3
    TICK_INTERVAL_MS = 50
    INVINCIBILITY_SEC = 3
    LEADERBOARD_SIZE = 10


class RecordingEmitter:
    """Collects (event, payload, to) tuples in emission order."""

    def __init__(self):
        self.events = []

    def __call__(self, event, payload=None, to=None):
        self.events.append((event, payload, to))

    def named(self, event):
        return [payload for name, payload, _ in self.events if name == event]

    def clear(self):
        self.events.clear()


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture()
def emitter():
    return RecordingEmitter()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def session(emitter, clock):
    return RaceSession(emit=emitter, clock=clock)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()

import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(logging.INFO)

    origins = flask_app.config.get('CORS_ORIGINS', '*')
    CORS(flask_app, origins=origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(
        flask_app,
        cors_allowed_origins=origins,
        ping_timeout=flask_app.config.get('PING_TIMEOUT', 60),
        ping_interval=flask_app.config.get('PING_INTERVAL', 25),
    )

    from racer.main import main
    flask_app.register_blueprint(main)

    from racer.api.race import race
    flask_app.register_blueprint(race, url_prefix='/api/race')

    # One authoritative session per app; handlers and timers reach it via app.extensions
    from racer.services.race.session import RaceSession
    flask_app.extensions['race_session'] = RaceSession(
        emit=_broadcast,
        track_length=flask_app.config.get('TRACK_LENGTH', 5000),
        laps_to_win=flask_app.config.get('LAPS_TO_WIN', 3),
        countdown_from=flask_app.config.get('COUNTDOWN_FROM', 3),
        leaderboard_size=flask_app.config.get('LEADERBOARD_SIZE', 10),
        logger=flask_app.logger,
    )

    from racer.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app


def _broadcast(event, payload=None, to=None):
    # socketio.emit works both inside handlers and from background tasks
    socketio.emit(event, payload, to=to, namespace='/')

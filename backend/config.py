import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '10000'))
    # Directory holding the client bundle (index.html and assets)
    CLIENT_DIR = os.environ.get('CLIENT_DIR') or os.path.join(BASE_DIR, '..', 'client')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    PING_TIMEOUT = int(os.environ.get('PING_TIMEOUT', '60'))
    PING_INTERVAL = int(os.environ.get('PING_INTERVAL', '25'))
    # Track layout
    TRACK_LENGTH = int(os.environ.get('TRACK_LENGTH', '5000'))
    LAPS_TO_WIN = int(os.environ.get('LAPS_TO_WIN', '3'))
    # Timers
    COUNTDOWN_FROM = int(os.environ.get('COUNTDOWN_FROM', '3'))
    TICK_INTERVAL_MS = int(os.environ.get('TICK_INTERVAL_MS', '50'))
    INVINCIBILITY_SEC = float(os.environ.get('INVINCIBILITY_SEC', '3'))
    LEADERBOARD_SIZE = int(os.environ.get('LEADERBOARD_SIZE', '10'))

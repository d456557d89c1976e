from flask import current_app, request
from racer import socketio
from racer.services.race.scheduler import (
    ensure_tick_loop,
    schedule_countdown,
    schedule_invincibility_expiry,
)


def _session():
    return current_app.extensions['race_session']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _text(value, default=''):
    # Clients send bare strings; anything else is treated as missing
    if isinstance(value, str):
        return value.strip()
    return default


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    session = _session()
    with session.lock:
        session.leave(_get_sid())


def handle_join_game(name=None):
    session = _session()
    with session.lock:
        session.join(_get_sid(), _text(name))
    ensure_tick_loop(current_app._get_current_object())


def handle_chat_message(message=None):
    session = _session()
    with session.lock:
        session.chat(_get_sid(), _text(message))


def handle_select_car(car_type=None):
    session = _session()
    with session.lock:
        session.select_car(_get_sid(), _text(car_type, 'default') or 'default')


def handle_start_race(data=None):
    session = _session()
    with session.lock:
        generation = session.start_race()
    if generation is not None:
        schedule_countdown(current_app._get_current_object(), generation)


def handle_click(data=None):
    session = _session()
    with session.lock:
        session.click(_get_sid())


def handle_use_powerup(data=None):
    sid = _get_sid()
    session = _session()
    with session.lock:
        token = session.use_powerup(sid)
    if token is not None:
        schedule_invincibility_expiry(current_app._get_current_object(), sid, token)


def handle_reset(data=None):
    session = _session()
    with session.lock:
        session.reset()


def handle_error(exc):
    # Never surface protocol errors to clients
    current_app.logger.exception(f"[socket-error] sid={_get_sid()} event={request.event}")


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the default namespace."""
    socketio.on_event('connect', handle_connect)
    socketio.on_event('disconnect', handle_disconnect)
    socketio.on_event('joinGame', handle_join_game)
    socketio.on_event('chatMessage', handle_chat_message)
    socketio.on_event('selectCar', handle_select_car)
    socketio.on_event('startRace', handle_start_race)
    socketio.on_event('click', handle_click)
    socketio.on_event('usePowerup', handle_use_powerup)
    socketio.on_event('reset', handle_reset)
    socketio.on_error_default(handle_error)

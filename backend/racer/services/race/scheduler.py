import time

from racer import socketio
from .simulation import RaceSimulation


def _timers_disabled(app) -> bool:
    return bool(app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'))


def ensure_tick_loop(app) -> None:
    """Start the fixed-cadence simulation loop once per session.

    - No-ops in TESTING mode unless ENABLE_SCHEDULER_IN_TESTS is set
    - Runs forever; idles cheaply when the phase is not racing
    """
    if _timers_disabled(app):
        return
    session = app.extensions['race_session']
    with session.lock:
        if session.loop_started:
            return
        session.loop_started = True

    interval = app.config.get('TICK_INTERVAL_MS', 50) / 1000.0
    simulation = RaceSimulation(session)

    def _tick_loop():
        app.logger.info(f"[tick-loop] started interval={interval}s")
        while True:
            with session.lock:
                simulation.step()
            time.sleep(interval)

    socketio.start_background_task(_tick_loop)


def schedule_countdown(app, generation: int) -> None:
    """Step the countdown once per second until racing starts or a reset supersedes it."""
    if _timers_disabled(app):
        return
    session = app.extensions['race_session']

    def _worker(expected_generation: int):
        while True:
            time.sleep(1)
            with session.lock:
                if not session.countdown_step(expected_generation):
                    return

    socketio.start_background_task(_worker, generation)


def schedule_invincibility_expiry(app, sid: str, token: int) -> None:
    if _timers_disabled(app):
        return
    session = app.extensions['race_session']
    delay = float(app.config.get('INVINCIBILITY_SEC', 3))

    def _worker(expected_sid: str, expected_token: int):
        time.sleep(delay)
        with session.lock:
            session.clear_invincibility(expected_sid, expected_token)

    socketio.start_background_task(_worker, sid, token)

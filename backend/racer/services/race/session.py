import logging
import random
import threading
import time
from typing import Callable, Dict, Optional

from .leaderboard import Leaderboard
from .registry import PlayerRegistry
from .track import generate_track_elements

LOBBY = 'lobby'
COUNTDOWN = 'countdown'
RACING = 'racing'
FINISHED = 'finished'

CLICK_BOOST = 1.8
CLICK_BOOST_WITH_POWERUP = 2.5
MAX_SPEED = 20
POWERUP_BOOST = 15
MAX_BOOSTED_SPEED = 30


def _noop_emit(event, payload=None, to=None):
    return None


class RaceSession:
    """The single authoritative race: phase, players, track and leaderboard.

    Every public method expects the caller to hold ``lock``. Timer-driven
    callbacks (``countdown_step``, ``clear_invincibility``) re-check the
    generation or token they were scheduled with and ignore stale calls.
    """

    def __init__(
        self,
        emit: Callable = _noop_emit,
        track_length: int = 5000,
        laps_to_win: int = 3,
        countdown_from: int = 3,
        leaderboard_size: int = 10,
        clock: Callable[[], float] = time.time,
        rng=random,
        logger: Optional[logging.Logger] = None,
    ):
        self.emit = emit
        self.track_length = track_length
        self.laps_to_win = laps_to_win
        self.countdown_from = countdown_from
        self.clock = clock
        self.rng = rng
        self.logger = logger or logging.getLogger(__name__)
        self.lock = threading.RLock()

        self.phase = LOBBY
        self.countdown = countdown_from
        self.race_start_time: Optional[float] = None
        self.generation = 0
        self.loop_started = False

        self.registry = PlayerRegistry()
        self.leaderboard = Leaderboard(leaderboard_size)
        self.powerups, self.obstacles = generate_track_elements(track_length, rng)

    @property
    def finish_line(self) -> int:
        return self.track_length * self.laps_to_win

    # ------------------------------ Snapshots ------------------------------

    def track_payload(self) -> Dict:
        return {
            'powerups': [p.to_dict() for p in self.powerups],
            'obstacles': [o.to_dict() for o in self.obstacles],
        }

    def snapshot(self) -> Dict:
        payload = {
            'players': self.registry.to_dict(),
            'gameState': self.phase,
            'countdown': self.countdown,
            'trackLength': self.track_length,
            'lapsToWin': self.laps_to_win,
            'leaderboard': self.leaderboard.snapshot(),
        }
        payload.update(self.track_payload())
        return payload

    def _regenerate_track(self) -> None:
        self.powerups, self.obstacles = generate_track_elements(self.track_length, self.rng)

    # ------------------------------ Membership -----------------------------

    def join(self, sid: str, name):
        player = self.registry.join(sid, name)
        init = {'playerId': sid}
        init.update(self.snapshot())
        self.emit('init', init, to=sid)
        self.emit('playerJoined', player.to_dict())
        self.emit('updateLobby', self.registry.lobby_roster())
        self.logger.info(f"[join] player={player.name} sid={sid} total={len(self.registry)}")
        return player

    def leave(self, sid: str) -> bool:
        """Drop the player; returns True when the registry emptied and the session reset."""
        player, now_empty = self.registry.leave(sid)
        if not player:
            return False
        self.emit('playerLeft', {'id': sid, 'name': player.name})
        self.logger.info(f"[leave] player={player.name} sid={sid} total={len(self.registry)}")
        if now_empty:
            self.reset()
        return now_empty

    def select_car(self, sid: str, car_type) -> None:
        player = self.registry.get(sid)
        if not player:
            return
        player.car_type = car_type
        self.emit('playerUpdated', player.to_dict())

    def chat(self, sid: str, message) -> None:
        player = self.registry.get(sid)
        if not player:
            return
        self.emit('chatMessage', {
            'player': player.name,
            'message': message,
            'color': player.color,
        })

    # ------------------------------ Phases ---------------------------------

    def start_race(self) -> Optional[int]:
        """Enter the countdown; returns the generation to schedule ticks for."""
        if self.phase != LOBBY or not len(self.registry):
            return None
        self.phase = COUNTDOWN
        self.countdown = self.countdown_from
        self.generation += 1
        self._regenerate_track()
        self.emit('gameStateChange', {'state': self.phase, 'countdown': self.countdown})
        self.emit('trackElements', self.track_payload())
        self.logger.info(f"[phase] countdown generation={self.generation} players={len(self.registry)}")
        return self.generation

    def countdown_step(self, generation: int) -> bool:
        """Advance the countdown by one second; False once it should stop."""
        if self.phase != COUNTDOWN or generation != self.generation:
            self.logger.info(f"[timer-abort] countdown generation={generation} current={self.generation} phase={self.phase}")
            return False
        self.countdown -= 1
        self.emit('countdown', self.countdown)
        if self.countdown > 0:
            return True
        self.phase = RACING
        self.race_start_time = self.clock()
        self.emit('gameStateChange', {'state': self.phase})
        self.emit('raceStart')
        self.logger.info(f"[phase] racing generation={self.generation}")
        return False

    def finish_session(self) -> None:
        self.phase = FINISHED
        self.emit('gameStateChange', {'state': self.phase})
        self.logger.info(f"[phase] finished generation={self.generation}")

    def reset(self) -> None:
        self.phase = LOBBY
        self.countdown = self.countdown_from
        self.race_start_time = None
        # Invalidates any countdown still pending from the previous race
        self.generation += 1
        for player in self.registry:
            player.reset_race_state()
        self._regenerate_track()
        payload = {'state': self.phase, 'players': self.registry.to_dict()}
        payload.update(self.track_payload())
        self.emit('gameReset', payload)
        self.logger.info(f"[reset] generation={self.generation} players={len(self.registry)}")

    # ------------------------------ Inputs ---------------------------------

    def _racing_player(self, sid: str):
        player = self.registry.get(sid)
        if not player or self.phase != RACING or player.finished:
            return None
        return player

    def click(self, sid: str) -> None:
        player = self._racing_player(sid)
        if not player:
            return
        boost = CLICK_BOOST_WITH_POWERUP if player.has_powerup else CLICK_BOOST
        player.speed = min(player.speed + boost, MAX_SPEED)
        player.clicks += 1

    def use_powerup(self, sid: str) -> Optional[int]:
        """Spend a held powerup; returns the invincibility token to expire later."""
        player = self._racing_player(sid)
        if not player or not player.has_powerup:
            return None
        player.speed = min(player.speed + POWERUP_BOOST, MAX_BOOSTED_SPEED)
        player.has_powerup = False
        player.is_invincible = True
        player.invincibility_token += 1
        self.emit('playerUsedPowerup', sid)
        return player.invincibility_token

    def clear_invincibility(self, sid: str, token: int) -> None:
        player = self.registry.get(sid)
        if not player or player.invincibility_token != token:
            return
        player.is_invincible = False

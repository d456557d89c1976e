from racer.models import Player
from .session import RACING, RaceSession


class RaceSimulation:
    """Fixed-cadence physics step for the racing phase."""

    POWERUP_RADIUS = 50
    OBSTACLE_RADIUS = 40
    OBSTACLE_PENALTY = 5
    FRICTION = 0.25

    def __init__(self, session: RaceSession):
        self.s = session

    def step(self) -> None:
        s = self.s
        if s.phase != RACING:
            return

        updated = False
        for player in s.registry:
            if player.finished:
                continue
            self._advance(player)
            updated = True

        if s.registry.all_finished():
            s.finish_session()

        # Full player snapshot to everyone whenever anyone moved; this scales with players * connections
        if updated:
            s.emit('gameUpdate', s.registry.to_dict())

    def _advance(self, player: Player) -> None:
        s = self.s
        player.position += player.speed

        # Only one lap boundary is handled per tick
        if player.position >= s.track_length * player.current_lap and player.current_lap < s.laps_to_win:
            player.current_lap += 1
            s.emit('lapComplete', {'id': player.id, 'lap': player.current_lap, 'name': player.name})

        for powerup in s.powerups:
            if powerup.active and abs(player.position - powerup.position) < self.POWERUP_RADIUS:
                player.has_powerup = True
                powerup.active = False
                s.emit('powerupCollected', {'playerId': player.id, 'powerupId': powerup.id})

        if not player.is_invincible:
            for obstacle in s.obstacles:
                if abs(player.position - obstacle.position) < self.OBSTACLE_RADIUS:
                    player.speed = max(0, player.speed - self.OBSTACLE_PENALTY)
                    s.emit('obstacleHit', {'playerId': player.id, 'obstacleId': obstacle.id})

        if player.speed > 0:
            player.speed = max(0, player.speed - self.FRICTION)

        if player.position >= s.finish_line:
            self._finish(player)

    def _finish(self, player: Player) -> None:
        s = self.s
        player.position = s.finish_line
        player.finished = True
        elapsed = int(round((s.clock() - s.race_start_time) * 1000))
        player.finish_time = elapsed
        player.total_races += 1
        if player.best_time is None or elapsed < player.best_time:
            player.best_time = elapsed

        s.leaderboard.record(player.name, elapsed, player.clicks)

        rank = s.registry.finished_count()
        if rank == 1:
            player.wins += 1

        s.emit('playerFinished', {
            'id': player.id,
            'name': player.name,
            'time': elapsed,
            'clicks': player.clicks,
            'position': rank,
        })
        s.emit('leaderboardUpdate', s.leaderboard.snapshot())
        s.logger.info(f"[finish] player={player.name} rank={rank} time={elapsed}ms clicks={player.clicks}")

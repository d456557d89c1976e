import random

COLORS = ['#FF6B6B', '#4ECDC4', '#45B7D1', '#FFA07A', '#98D8C8', '#F7DC6F', '#BB8FCE', '#85C1E2']


def random_color(rng=random):
    return rng.choice(COLORS)


class Player:
    def __init__(self, id, name, color=None, car_type='default'):
        self.id = id
        self.name = name
        self.color = color or random_color()
        self.car_type = car_type
        # Cumulative across races
        self.total_races = 0
        self.wins = 0
        self.best_time = None
        # Bumped on each powerup activation so stale expiry timers can be told apart
        self.invincibility_token = 0
        self.reset_race_state()

    def reset_race_state(self):
        """Clear the track-local fields; cumulative counters are kept."""
        self.position = 0
        self.speed = 0
        self.current_lap = 1
        self.finished = False
        self.finish_time = None
        self.clicks = 0
        self.has_powerup = False
        self.is_invincible = False

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'position': self.position,
            'speed': self.speed,
            'currentLap': self.current_lap,
            'finished': self.finished,
            'finishTime': self.finish_time,
            'color': self.color,
            'clicks': self.clicks,
            'hasPowerup': self.has_powerup,
            'isInvincible': self.is_invincible,
            'carType': self.car_type,
            'totalRaces': self.total_races,
            'wins': self.wins,
            'bestTime': self.best_time,
        }


class Powerup:
    def __init__(self, id, position, type='boost', active=True):
        self.id = id
        self.position = position
        self.type = type
        self.active = active

    def to_dict(self):
        return {
            'id': self.id,
            'position': self.position,
            'active': self.active,
            'type': self.type,
        }


class Obstacle:
    def __init__(self, id, position, type='cone'):
        self.id = id
        self.position = position
        self.type = type

    def to_dict(self):
        return {
            'id': self.id,
            'position': self.position,
            'type': self.type,
        }


class LeaderboardEntry:
    def __init__(self, name, time, clicks):
        self.name = name
        self.time = time
        self.clicks = clicks

    def to_dict(self):
        return {
            'name': self.name,
            'time': self.time,
            'clicks': self.clicks,
        }

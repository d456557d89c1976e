import random
from typing import List, Tuple

from racer.models import Obstacle, Powerup

POWERUP_COUNT = 15
OBSTACLE_COUNT = 10
POWERUP_JITTER = 100
OBSTACLE_JITTER = 75
# Keeps jittered positions strictly inside the track
EDGE_MARGIN = 1.0


def _clamp_inside(position: float, track_length: float) -> float:
    return max(EDGE_MARGIN, min(track_length - EDGE_MARGIN, position))


def generate_track_elements(track_length: float, rng=random) -> Tuple[List[Powerup], List[Obstacle]]:
    """Lay out a fresh set of powerups and obstacles for one race.

    Powerups sit on an even 1/16 grid, obstacles on a 1/11 grid offset by half
    a slot, each with independent jitter. Ids restart at 0 every generation;
    callers replace the whole set at once so reuse across races is harmless.
    """
    powerup_spacing = track_length / (POWERUP_COUNT + 1)
    powerups = []
    for i in range(POWERUP_COUNT):
        position = (i + 1) * powerup_spacing + rng.uniform(-POWERUP_JITTER, POWERUP_JITTER)
        powerups.append(Powerup(f"powerup-{i}", _clamp_inside(position, track_length)))

    obstacle_spacing = track_length / (OBSTACLE_COUNT + 1)
    obstacles = []
    for i in range(OBSTACLE_COUNT):
        position = (i + 0.5) * obstacle_spacing + rng.uniform(-OBSTACLE_JITTER, OBSTACLE_JITTER)
        obstacles.append(Obstacle(f"obstacle-{i}", _clamp_inside(position, track_length)))

    return powerups, obstacles

import random

from racer.services.race.track import generate_track_elements


def test_counts_and_types():
    powerups, obstacles = generate_track_elements(5000)
    assert len(powerups) == 15
    assert len(obstacles) == 10
    assert all(p.type == 'boost' and p.active for p in powerups)
    assert all(o.type == 'cone' for o in obstacles)


def test_ids_unique_within_generation():
    powerups, obstacles = generate_track_elements(5000)
    ids = [p.id for p in powerups] + [o.id for o in obstacles]
    assert len(ids) == len(set(ids))


def test_positions_inside_track_for_many_seeds():
    for seed in range(50):
        powerups, obstacles = generate_track_elements(5000, random.Random(seed))
        for entity in powerups + obstacles:
            assert 0 < entity.position < 5000


def test_positions_stay_inside_short_track():
    # Jitter exceeds the slot spacing here, so clamping has to kick in
    powerups, obstacles = generate_track_elements(200, random.Random(7))
    for entity in powerups + obstacles:
        assert 0 < entity.position < 200


def test_spacing_roughly_even():
    powerups, obstacles = generate_track_elements(5000, random.Random(3))
    spacing = 5000 / 16
    for i, p in enumerate(powerups):
        assert abs(p.position - (i + 1) * spacing) <= 100
    spacing = 5000 / 11
    for i, o in enumerate(obstacles):
        assert abs(o.position - (i + 0.5) * spacing) <= 75

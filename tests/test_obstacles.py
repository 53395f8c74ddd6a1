import random

import pytest

from flapcli.obstacles import ObstacleManager


def make_manager(seed=1, **overrides):
    params = dict(
        spawn_interval=2.0,
        scroll_speed=150.0,
        min_gap=150.0,
        max_gap=150.0,
        pipe_width=120.0,
        pipe_height=575.0,
        screen_width=800.0,
        screen_height=600.0,
        rng=random.Random(seed),
    )
    params.update(overrides)
    return ObstacleManager(**params)


def test_spawn_creates_top_and_bottom_pair():
    manager = make_manager()
    manager.spawn_pipes()
    top, bottom = manager.pipes
    assert top.is_top and not bottom.is_top
    assert top.x == manager.screen_width and bottom.x == manager.screen_width
    assert top.y == 0.0
    assert top.width == manager.pipe_width and bottom.width == manager.pipe_width


def test_gap_matches_configured_size_and_meets_ground():
    manager = make_manager()
    manager.spawn_pipes()
    top, bottom = manager.pipes
    assert bottom.y - top.height == pytest.approx(manager.max_gap)
    assert bottom.y + bottom.height == pytest.approx(manager.ground_y)


@pytest.mark.parametrize("seed", range(20))
def test_gap_top_stays_within_bounds(seed):
    manager = make_manager(seed=seed)
    manager.spawn_pipes()
    top = manager.pipes[0]
    assert 50.0 <= top.height <= manager.ground_y - manager.max_gap - 20.0


def test_gap_height_within_range():
    manager = make_manager(min_gap=100.0, max_gap=200.0)
    for _ in range(30):
        manager.spawn_pipes()
    tops = manager.pipes[0::2]
    bottoms = manager.pipes[1::2]
    for top, bottom in zip(tops, bottoms):
        assert 100.0 <= bottom.y - top.height <= 200.0


def test_small_screen_clamps_gap_top():
    manager = make_manager(screen_height=200.0)
    manager.spawn_pipes()
    top, bottom = manager.pipes
    assert top.height == pytest.approx(50.0)
    assert bottom.height == 0.0


def test_same_seed_gives_same_pipes():
    a = make_manager(seed=7, min_gap=100.0, max_gap=200.0)
    b = make_manager(seed=7, min_gap=100.0, max_gap=200.0)
    a.spawn_pipes()
    b.spawn_pipes()
    assert [(p.y, p.height) for p in a.pipes] == [(p.y, p.height) for p in b.pipes]


def test_update_spawns_only_after_interval():
    manager = make_manager()
    manager.update(1.0)
    assert manager.pipes == []
    assert manager.spawn_timer == pytest.approx(1.0)
    manager.update(1.0)
    assert len(manager.pipes) == 2
    assert manager.spawn_timer == 0.0


def test_update_moves_pipes_left():
    manager = make_manager(spawn_interval=100.0)
    manager.spawn_pipes()
    manager.update(0.5)
    assert all(p.x == pytest.approx(800.0 - 150.0 * 0.5) for p in manager.pipes)


def test_off_screen_pipes_are_removed_and_counted():
    manager = make_manager(spawn_interval=100.0)
    manager.spawn_pipes()
    manager.update(10.0)
    assert manager.pipes == []
    assert manager.deleted_pipes == 2


def test_set_scroll_speed_updates_existing_and_new_pipes():
    manager = make_manager(spawn_interval=100.0)
    manager.spawn_pipes()
    manager.set_scroll_speed(300.0)
    manager.spawn_pipes()
    assert manager.scroll_speed == 300.0
    assert all(p.speed == 300.0 for p in manager.pipes)
import random

import pygame
import pytest

from flapcli.elements import SKY_COLOR, Obstacle
from flapcli.errors import GameError
from flapcli.game import (
    BASE_GRAVITY,
    BASE_JUMP_FORCE,
    BASE_PIPE_SCROLL_SPEED,
    BASE_PIPE_SPAWN_INTERVAL,
    Game,
    GameState,
)


@pytest.fixture
def game():
    g = Game(800, 600, rng=random.Random(1))
    g.create_elements()
    g.apply_difficulty()
    return g


def _bottom_pipe_behind_bird(game):
    return Obstacle(-100, 0, 120, 50, game.screen_width, game.screen_height, 150, None, False)


def test_starts_in_menu_with_zero_score(game):
    assert game.state is GameState.MENU
    assert game.score == 0
    assert game.difficulty == 1.0


def test_ground_line_lies_inside_screen(game):
    assert 0 < game.ground_y < game.screen_height
    assert game.ground.y == game.ground_y


def test_bird_starts_vertically_centred(game):
    assert game.bird.y + game.bird.height / 2 == pytest.approx(game.screen_height / 2)


def test_space_starts_game(game):
    game.handle_key(pygame.K_SPACE)
    assert game.state is GameState.PLAYING


def test_j_key_also_starts_game(game):
    game.handle_key(pygame.K_j)
    assert game.state is GameState.PLAYING


def test_other_keys_are_ignored(game):
    game.handle_key(pygame.K_a)
    assert game.state is GameState.MENU


def test_action_key_while_playing_makes_bird_jump(game):
    game.handle_key(pygame.K_SPACE)
    game.handle_key(pygame.K_SPACE)
    assert game.bird.speed == -game.bird.jump_force
    assert game.state is GameState.PLAYING


def test_game_over_returns_to_menu_and_resets(game):
    game.state = GameState.GAME_OVER
    game.score = 5
    game.handle_key(pygame.K_SPACE)
    assert game.state is GameState.MENU
    assert game.score == 0


def test_update_in_menu_moves_nothing(game):
    y = game.bird.y
    ground_x = game.ground.x
    game.update(0.5)
    assert game.bird.y == y
    assert game.ground.x == ground_x


def test_bird_on_ground_ends_game(game):
    game.handle_key(pygame.K_SPACE)
    game.bird.y = game.ground_y
    game.update(0.01)
    assert game.state is GameState.GAME_OVER


def test_passing_bottom_pipe_scores_once(game):
    game.handle_key(pygame.K_SPACE)
    pipe = _bottom_pipe_behind_bird(game)
    game.obstacles.pipes.append(pipe)
    game.update(0.01)
    game.update(0.01)
    assert game.score == 1
    assert pipe.scored is True
    assert game.state is GameState.PLAYING


def test_top_pipe_never_scores(game):
    game.handle_key(pygame.K_SPACE)
    game.obstacles.pipes.append(
        Obstacle(-100, 0, 120, 50, game.screen_width, game.screen_height, 150, None, True)
    )
    game.update(0.01)
    assert game.score == 0


def test_every_third_point_raises_difficulty(game):
    game.handle_key(pygame.K_SPACE)
    game.obstacles.pipes.extend(_bottom_pipe_behind_bird(game) for _ in range(3))
    game.update(0.01)
    assert game.score == 3
    assert game.difficulty > 1.0
    assert game.obstacles.scroll_speed == pytest.approx(
        BASE_PIPE_SCROLL_SPEED * game.difficulty
    )


def test_two_points_keep_base_difficulty(game):
    game.handle_key(pygame.K_SPACE)
    game.obstacles.pipes.extend(_bottom_pipe_behind_bird(game) for _ in range(2))
    game.update(0.01)
    assert game.score == 2
    assert game.difficulty == 1.0


def test_increase_difficulty_scales_everything(game):
    game.increase_difficulty(0.5)
    scalar = game.difficulty
    assert scalar > 1.0
    assert game.obstacles.scroll_speed == pytest.approx(BASE_PIPE_SCROLL_SPEED * scalar)
    assert game.obstacles.spawn_interval * scalar == pytest.approx(BASE_PIPE_SPAWN_INTERVAL)
    assert game.ground.speed == pytest.approx(BASE_PIPE_SCROLL_SPEED * scalar)
    assert game.bird.gravity == pytest.approx(BASE_GRAVITY * scalar)
    assert game.bird.jump_force == pytest.approx(BASE_JUMP_FORCE * scalar)


def test_reset_restores_base_values(game):
    game.increase_difficulty(0.3)
    game.score = 9
    game.reset()
    assert game.difficulty == 1.0
    assert game.score == 0
    assert game.bird.gravity == pytest.approx(BASE_GRAVITY)
    assert game.obstacles.pipes == []


def test_draw_menu_without_sprites_shows_sky(game):
    surface = pygame.Surface((800, 600))
    game.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == SKY_COLOR


def test_run_before_initialize_raises(game):
    with pytest.raises(GameError):
        game.run()


def test_apply_difficulty_without_elements_raises():
    with pytest.raises(GameError):
        Game(800, 600).apply_difficulty()
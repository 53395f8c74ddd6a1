"""The game itself: state machine, difficulty, scoring and the frame loop."""

from __future__ import annotations

import logging
import random
import time
from enum import Enum, auto
from pathlib import Path

import pygame

from flapcli.collision import check_collision
from flapcli.elements import Background, Bird, Ground
from flapcli.errors import (
    AssetLoadError,
    DisplayCreationError,
    EngineInitError,
    GameError,
    TimerCreationError,
)
from flapcli.obstacles import ObstacleManager

log = logging.getLogger(__name__)

FPS = 60
GROUND_RATIO = 0.8
BACKGROUND_SCROLL_SPEED = 50.0
BACKGROUND_SEAM = 5.0
FONT_SIZE = 36

BASE_PIPE_SCROLL_SPEED = 150.0
BASE_PIPE_SPAWN_INTERVAL = 2.0
PIPE_WIDTH = 120.0
PIPE_HEIGHT = 575.0
MAX_PIPE_GAP = 150.0
MIN_PIPE_GAP = 150.0

BASE_GRAVITY = 900.0
BASE_JUMP_FORCE = 300.0
BIRD_X = 50.0
BIRD_WIDTH = 60.0
BIRD_HEIGHT = 50.0
INITIAL_BIRD_FLIGHT_DURATION = 3.0

DIFFICULTY_STEP = 0.1
DIFFICULTY_EVERY = 3

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)

ACTION_KEYS = (pygame.K_SPACE, pygame.K_j)


class GameState(Enum):
    """The screens the game moves between."""

    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class Game:
    """One game window: menu, play and game-over screens with a single score."""

    def __init__(
        self,
        width: float,
        height: float,
        assets_dir: str | Path = "assets",
        *,
        debug: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        self.screen_width = float(width)
        self.screen_height = float(height)
        self.assets_dir = Path(assets_dir)
        self.debug = debug
        self.state = GameState.MENU
        self.ground_y = self.screen_height * GROUND_RATIO
        self.difficulty = 1.0
        self.score = 0

        self.top_pipe_sprite: pygame.Surface | None = None
        self.bottom_pipe_sprite: pygame.Surface | None = None
        self.ground_sprite: pygame.Surface | None = None
        self.background_sprite: pygame.Surface | None = None
        self.bird_frames: list[pygame.Surface] = []
        self.font: pygame.font.Font | None = None

        self.obstacles: ObstacleManager | None = None
        self.bird: Bird | None = None
        self.ground: Ground | None = None
        self.background: Background | None = None

        self._rng = rng if rng is not None else random.Random()
        self._display: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._last_frame_time = 0.0
        # Kept across resets: difficulty only rises past the highest threshold reached.
        self._difficulty_threshold = 0

    def initialize(self) -> bool:
        """Open the window, load the assets and build the first scene."""
        try:
            pygame.display.init()
        except pygame.error as err:
            raise EngineInitError(f"Failed to initialize display subsystem: {err}") from err
        try:
            pygame.font.init()
        except pygame.error as err:
            raise EngineInitError(f"Failed to initialize font subsystem: {err}") from err

        try:
            self._display = pygame.display.set_mode(
                (int(self.screen_width), int(self.screen_height))
            )
        except pygame.error as err:
            raise DisplayCreationError("Failed to create display.") from err
        pygame.display.set_caption("Flappy Bird Clone")

        try:
            self._clock = pygame.time.Clock()
        except pygame.error as err:
            raise TimerCreationError("Failed to create timer.") from err

        self._load_assets()
        self.create_elements()
        self.apply_difficulty()
        self._last_frame_time = time.perf_counter()

        if self.debug and self.bird is not None:
            self.bird.debug_draw = True
        return True

    def _load_image(self, name: str, error: str) -> pygame.Surface:
        try:
            return pygame.image.load(str(self.assets_dir / name)).convert_alpha()
        except (pygame.error, OSError) as err:
            raise AssetLoadError(error) from err

    def _load_assets(self) -> None:
        pipes_error = (
            "Failed to load pipe sprites (top_pipe.png or bottom_pipe.png). "
            "Check 'assets/' directory."
        )
        self.top_pipe_sprite = self._load_image("top_pipe.png", pipes_error)
        self.bottom_pipe_sprite = self._load_image("bottom_pipe.png", pipes_error)
        self.ground_sprite = self._load_image(
            "ground.png", "Failed to load ground sprite (ground.png). Check 'assets/' directory."
        )
        self.background_sprite = self._load_image(
            "background.png",
            "Failed to load background sprite (background.png). Check 'assets/' directory.",
        )
        try:
            self.font = pygame.font.Font(str(self.assets_dir / "PixelifySansFont.ttf"), FONT_SIZE)
        except (pygame.error, OSError) as err:
            raise AssetLoadError(
                "Failed to load font (PixelifySansFont.ttf). Check 'assets/' directory."
            ) from err
        bird_error = "Failed to load bird sprites (bird_1.png). Check 'assets/' directory."
        # The same frame twice until a real animation exists.
        self.bird_frames = [
            self._load_image("bird_1.png", bird_error),
            self._load_image("bird_1.png", bird_error),
        ]

    def create_elements(self) -> None:
        """Build fresh pipes, background, ground and bird."""
        self.obstacles = ObstacleManager(
            BASE_PIPE_SPAWN_INTERVAL,
            BASE_PIPE_SCROLL_SPEED,
            MIN_PIPE_GAP,
            MAX_PIPE_GAP,
            PIPE_WIDTH,
            PIPE_HEIGHT,
            self.screen_width,
            self.screen_height,
            self.top_pipe_sprite,
            self.bottom_pipe_sprite,
            rng=self._rng,
        )

        background_y = -(self.screen_height - self.ground_y) + BACKGROUND_SEAM
        self.background = Background(
            0.0,
            background_y,
            self.screen_width,
            self.screen_height,
            self.screen_width,
            self.screen_height,
            BACKGROUND_SCROLL_SPEED,
            self.background_sprite,
        )

        if self.ground_sprite is not None:
            ground_w, ground_h = self.ground_sprite.get_size()
        else:
            ground_w, ground_h = self.screen_width, self.screen_height - self.ground_y
        self.ground = Ground(
            0.0,
            self.ground_y,
            ground_w,
            ground_h,
            self.screen_width,
            self.screen_height,
            BASE_PIPE_SCROLL_SPEED,
            self.ground_sprite,
        )

        self.bird = Bird(
            BIRD_X,
            self.screen_height / 2 - BIRD_HEIGHT / 2,
            BIRD_WIDTH,
            BIRD_HEIGHT,
            BASE_GRAVITY,
            BASE_JUMP_FORCE,
            self.bird_frames,
            self.screen_width,
            self.screen_height,
            INITIAL_BIRD_FLIGHT_DURATION,
        )
        if self.debug:
            self.bird.debug_draw = True

    def run(self) -> None:
        """Run the frame loop until the window is closed."""
        if self._display is None or self._clock is None:
            raise GameError("Game has not been initialized.")
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)
            if not running:
                break
            self._clock.tick(FPS)
            now = time.perf_counter()
            dt = now - self._last_frame_time
            self._last_frame_time = now
            self.update(dt)
            self.draw(self._display)
            pygame.display.flip()

    def close(self) -> None:
        """Release the window and the font subsystem."""
        self._display = None
        self._clock = None
        pygame.font.quit()
        pygame.display.quit()

    def handle_key(self, key: int) -> None:
        """React to a key press: start, flap, or go back to the menu."""
        if key not in ACTION_KEYS:
            return
        if self.state is GameState.MENU:
            self.state = GameState.PLAYING
            self.reset()
        elif self.state is GameState.PLAYING:
            self._require_scene()
            self.bird.jump()
        elif self.state is GameState.GAME_OVER:
            self.state = GameState.MENU
            self.reset()

    def update(self, dt: float) -> None:
        """Advance the scene by dt seconds; only play moves anything."""
        if self.state is GameState.PLAYING:
            self._update_playing(dt)

    def _require_scene(self) -> None:
        if self.obstacles is None or self.bird is None or self.ground is None:
            raise GameError("Game elements have not been created.")

    def _update_playing(self, dt: float) -> None:
        self._require_scene()
        self.ground.update(dt)
        self.obstacles.update(dt)
        self.bird.update(dt)

        if check_collision(self.bird, self.obstacles.pipes, self.ground_y):
            self.state = GameState.GAME_OVER
            log.info("Game over: collision detected")

        for pipe in self.obstacles.pipes:
            if pipe.is_top or pipe.scored:
                continue
            if self.bird.x > pipe.x + pipe.width:
                self.score += 1
                pipe.scored = True
                log.info("Score: %d", self.score)
                if (
                    self.score > 0
                    and self.score % DIFFICULTY_EVERY == 0
                    and self.score > self._difficulty_threshold
                ):
                    self.increase_difficulty(DIFFICULTY_STEP)
                    self._difficulty_threshold = self.score

        if self.debug:
            for pipe in self.obstacles.pipes:
                pipe.debug_draw = True

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current screen onto the surface."""
        surface.fill(BLACK)
        if self.state is GameState.MENU:
            self._draw_menu(surface)
        elif self.state is GameState.PLAYING:
            self._draw_playing(surface)
        else:
            self._draw_game_over(surface)

    def _draw_text(self, surface: pygame.Surface, text: str, color, y: float) -> None:
        if self.font is None:
            return
        rendered = self.font.render(text, True, color)
        x = self.screen_width / 2 - rendered.get_width() / 2
        surface.blit(rendered, (round(x), round(y)))

    def _draw_menu(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            self.background.draw(surface)
        if self.ground is not None:
            self.ground.draw(surface)
        self._draw_text(surface, "FLAPPY BIRD CLONE", WHITE, self.screen_height * 0.10)
        self._draw_text(surface, "Press SPACE to Play", WHITE, self.screen_height * 0.25)

    def _draw_scene(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            self.background.draw(surface)
        if self.obstacles is not None:
            self.obstacles.draw(surface)
        if self.ground is not None:
            self.ground.draw(surface)
        if self.bird is not None:
            self.bird.draw(surface)

    def _draw_playing(self, surface: pygame.Surface) -> None:
        self._draw_scene(surface)
        self._draw_text(surface, f"Score: {self.score}", WHITE, 20)

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        self._draw_scene(surface)
        self._draw_text(surface, "GAME OVER!", RED, self.screen_height * 0.10)
        self._draw_text(surface, f"Score: {self.score}", WHITE, self.screen_height * 0.25)
        self._draw_text(surface, "Press SPACE to restart", WHITE, self.screen_height * 0.9)

    def reset(self) -> None:
        """Start over with a fresh scene, zero score and base difficulty."""
        self.difficulty = 1.0
        self.score = 0
        self.create_elements()
        self.apply_difficulty()
        self._last_frame_time = time.perf_counter()

    def apply_difficulty(self) -> None:
        """Scale speeds, spawn rate, gravity and jump force by the difficulty."""
        self._require_scene()
        self.obstacles.set_scroll_speed(BASE_PIPE_SCROLL_SPEED * self.difficulty)
        self.obstacles.spawn_interval = BASE_PIPE_SPAWN_INTERVAL / self.difficulty
        self.ground.speed = BASE_PIPE_SCROLL_SPEED * self.difficulty
        self.bird.gravity = BASE_GRAVITY * self.difficulty
        self.bird.jump_force = BASE_JUMP_FORCE * self.difficulty

    def increase_difficulty(self, increment: float) -> None:
        """Raise the difficulty multiplier and apply it at once."""
        self.difficulty += increment
        log.info("Difficulty increased! New scalar: %g", self.difficulty)
        self.apply_difficulty()
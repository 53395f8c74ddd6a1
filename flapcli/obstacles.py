"""Spawning, scrolling and recycling of pipe pairs."""

from __future__ import annotations

import logging
import random

import pygame

from flapcli.elements import Obstacle

log = logging.getLogger(__name__)

GROUND_RATIO = 0.8
MIN_GAP_TOP = 50.0
GAP_GROUND_MARGIN = 20.0


class ObstacleManager:
    """Owns the pipes on screen: spawns pairs on a timer and drops those gone by."""

    def __init__(
        self,
        spawn_interval: float,
        scroll_speed: float,
        min_gap: float,
        max_gap: float,
        pipe_width: float,
        pipe_height: float,
        screen_width: float,
        screen_height: float,
        top_sprite: pygame.Surface | None = None,
        bottom_sprite: pygame.Surface | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.spawn_interval = float(spawn_interval)
        self.scroll_speed = float(scroll_speed)
        self.min_gap = float(min_gap)
        self.max_gap = float(max_gap)
        self.pipe_width = float(pipe_width)
        self.pipe_height = float(pipe_height)
        self.screen_width = float(screen_width)
        self.screen_height = float(screen_height)
        self.top_sprite = top_sprite
        self.bottom_sprite = bottom_sprite
        self.spawn_timer = 0.0
        self.deleted_pipes = 0
        self.pipes: list[Obstacle] = []
        self._rng = rng if rng is not None else random.Random()

    @property
    def ground_y(self) -> float:
        """Y coordinate where the ground begins."""
        return self.screen_height * GROUND_RATIO

    def update(self, dt: float) -> None:
        """Advance the spawn timer, move every pipe and drop those off screen."""
        self.spawn_timer += dt
        if self.spawn_timer >= self.spawn_interval:
            self.spawn_pipes()
            self.spawn_timer = 0.0

        kept: list[Obstacle] = []
        for pipe in self.pipes:
            pipe.update(dt)
            if pipe.is_off_screen():
                self.deleted_pipes += 1
            else:
                kept.append(pipe)
        self.pipes = kept

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every pipe."""
        for pipe in self.pipes:
            pipe.draw(surface)

    def set_scroll_speed(self, speed: float) -> None:
        """Change the speed of new pipes and of those already on screen."""
        self.scroll_speed = float(speed)
        for pipe in self.pipes:
            pipe.speed = self.scroll_speed

    def spawn_pipes(self) -> None:
        """Add a top and a bottom pipe at the right edge with a random gap."""
        ground_y = self.ground_y
        min_top = MIN_GAP_TOP
        max_top = max(ground_y - self.max_gap - GAP_GROUND_MARGIN, min_top)

        gap_top = self._rng.uniform(min_top, max_top)
        gap_height = self._rng.uniform(self.min_gap, self.max_gap)

        top_height = max(0.0, gap_top)
        bottom_y = gap_top + gap_height
        bottom_height = max(0.0, ground_y - bottom_y)

        self.pipes.append(
            Obstacle(
                self.screen_width,
                0.0,
                self.pipe_width,
                top_height,
                self.screen_width,
                self.screen_height,
                self.scroll_speed,
                self.top_sprite,
                True,
            )
        )
        self.pipes.append(
            Obstacle(
                self.screen_width,
                bottom_y,
                self.pipe_width,
                bottom_height,
                self.screen_width,
                self.screen_height,
                self.scroll_speed,
                self.bottom_sprite,
                False,
            )
        )
        log.debug("spawned pipe pair with gap at %.1f (height %.1f)", gap_top, gap_height)
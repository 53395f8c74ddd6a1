"""Visual game elements: background, ground, pipes and the bird."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

SKY_COLOR = (135, 206, 235)
DEBUG_COLOR = (255, 0, 255)
DEBUG_LINE_WIDTH = 2
BIRD_COLLIDER_RATIO = 0.8
BIRD_FRAME_DURATION = 0.1


def _blit_scaled(
    surface: pygame.Surface,
    sprite: pygame.Surface,
    x: float,
    y: float,
    width: float,
    height: float,
) -> None:
    """Draw the whole sprite stretched to the given rectangle."""
    w, h = round(width), round(height)
    if w <= 0 or h <= 0:
        return
    scaled = pygame.transform.scale(sprite, (w, h))
    surface.blit(scaled, (round(x), round(y)))


class Element:
    """A positioned, sized object with an optional sprite and a collider box."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        screen_width: float,
        screen_height: float,
        speed: float = 0.0,
        sprite: pygame.Surface | None = None,
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.screen_width = float(screen_width)
        self.screen_height = float(screen_height)
        self.speed = float(speed)
        self.sprite = sprite
        self.debug_draw = False
        self.collider_offset_x = 0.0
        self.collider_offset_y = 0.0
        self.collider_width = float(width)
        self.collider_height = float(height)

    @property
    def collider_x(self) -> float:
        return self.x + self.collider_offset_x

    @property
    def collider_y(self) -> float:
        return self.y + self.collider_offset_y

    def set_collider(self, offset_x: float, offset_y: float, width: float, height: float) -> None:
        """Place the collision box relative to the element's position."""
        self.collider_offset_x = float(offset_x)
        self.collider_offset_y = float(offset_y)
        self.collider_width = float(width)
        self.collider_height = float(height)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the sprite stretched over the element's bounds."""
        if self.sprite is not None:
            _blit_scaled(surface, self.sprite, self.x, self.y, self.width, self.height)

    def update(self, dt: float) -> None:
        """Move the element left at its current speed."""
        self.x -= self.speed * dt


class Background(Element):
    """Full-screen backdrop that scrolls and wraps around."""

    def draw(self, surface: pygame.Surface) -> None:
        if self.sprite is None:
            surface.fill(SKY_COLOR)
            return
        _blit_scaled(surface, self.sprite, self.x, self.y, self.width, self.height)
        if self.x + self.width < self.width:
            _blit_scaled(
                surface, self.sprite, self.x + self.width, self.y, self.width, self.height
            )

    def update(self, dt: float) -> None:
        if self.speed != 0:
            self.x -= self.speed * dt
            if self.x + self.width < 0:
                self.x = 0.0


class Ground(Element):
    """Scrolling ground strip drawn twice side by side for seamless tiling."""

    def _source(self) -> pygame.Surface:
        assert self.sprite is not None
        src_w = min(max(round(self.width), 0), self.sprite.get_width())
        src_h = min(max(round(self.height), 0), self.sprite.get_height())
        if (src_w, src_h) == self.sprite.get_size():
            return self.sprite
        return self.sprite.subsurface((0, 0, src_w, src_h))

    def draw(self, surface: pygame.Surface) -> None:
        if self.sprite is None:
            return
        source = self._source()
        if source.get_width() == 0 or source.get_height() == 0:
            return
        draw_height = self.screen_height - self.y
        _blit_scaled(surface, source, self.x, self.y, self.screen_width, draw_height)
        _blit_scaled(
            surface,
            source,
            self.x + self.screen_width - 2.0,
            self.y,
            self.screen_width,
            draw_height,
        )

    def update(self, dt: float) -> None:
        self.x -= self.speed * dt
        if self.x + self.screen_width <= 0:
            self.x = 0.0


class Obstacle(Element):
    """A single pipe moving left across the screen."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        screen_width: float,
        screen_height: float,
        speed: float,
        sprite: pygame.Surface | None,
        is_top: bool,
    ) -> None:
        super().__init__(x, y, width, height, screen_width, screen_height, speed, sprite)
        self.is_top = is_top
        self.scored = False

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)
        if self.debug_draw:
            pygame.draw.rect(
                surface,
                DEBUG_COLOR,
                pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height)),
                DEBUG_LINE_WIDTH,
            )

    def update(self, dt: float) -> None:
        self.x -= self.speed * dt

    def is_off_screen(self) -> bool:
        """True once the pipe has fully left the screen on the left."""
        return self.x + self.width < 0


class Bird(Element):
    """The player: falls under gravity after a short level flight and can jump."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        gravity: float,
        jump_force: float,
        frames: Sequence[pygame.Surface],
        screen_width: float,
        screen_height: float,
        initial_flight_duration: float,
    ) -> None:
        frames = list(frames)
        super().__init__(
            x, y, width, height, screen_width, screen_height, 0.0, frames[0] if frames else None
        )
        self.gravity = float(gravity)
        self.jump_force = float(jump_force)
        self.frames = frames
        self.current_frame = 0
        self.animation_timer = 0.0
        self.frame_duration = BIRD_FRAME_DURATION
        self.grace_timer = 0.0
        self.initial_flight_duration = float(initial_flight_duration)

        collider_width = self.width * BIRD_COLLIDER_RATIO
        collider_height = self.height * BIRD_COLLIDER_RATIO
        self.set_collider(
            (self.width - collider_width) / 2.0,
            (self.height - collider_height) / 2.0,
            collider_width,
            collider_height,
        )

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)
        if self.debug_draw:
            pygame.draw.rect(
                surface,
                DEBUG_COLOR,
                pygame.Rect(
                    round(self.collider_x),
                    round(self.collider_y),
                    round(self.collider_width),
                    round(self.collider_height),
                ),
                DEBUG_LINE_WIDTH,
            )

    def update(self, dt: float) -> None:
        if self.grace_timer < self.initial_flight_duration:
            self.grace_timer += dt
        else:
            self.speed += self.gravity * dt
        self.y += self.speed * dt

        if self.y < 0:
            self.y = 0.0
            self.speed = 0.0

        self.animation_timer += dt
        if self.animation_timer >= self.frame_duration and self.frames:
            self.current_frame = (self.current_frame + 1) % len(self.frames)
            self.sprite = self.frames[self.current_frame]
            self.animation_timer -= self.frame_duration

    def jump(self) -> None:
        """Shoot upwards and end the initial level flight."""
        self.speed = -self.jump_force
        self.grace_timer = self.initial_flight_duration
"""Collision checks between the bird, the pipes and the ground."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from flapcli.elements import Element

log = logging.getLogger(__name__)


def aabb_overlap(
    x1: float, y1: float, w1: float, h1: float, x2: float, y2: float, w2: float, h2: float
) -> bool:
    """True when two axis-aligned rectangles overlap; touching edges do not count."""
    overlap_x = x1 < x2 + w2 and x1 + w1 > x2
    overlap_y = y1 < y2 + h2 and y1 + h1 > y2
    return overlap_x and overlap_y


def check_collision(bird: Element, pipes: Iterable[Element | None], ground_y: float) -> bool:
    """True when the bird's collider touches the ground or overlaps any pipe."""
    if bird.collider_y + bird.collider_height >= ground_y:
        log.info("Collision: bird hit ground")
        return True

    for pipe in pipes:
        if pipe is None:
            continue
        if aabb_overlap(
            bird.collider_x,
            bird.collider_y,
            bird.collider_width,
            bird.collider_height,
            pipe.x,
            pipe.y,
            pipe.width,
            pipe.height,
        ):
            log.info("Collision: bird hit a pipe")
            return True

    return False
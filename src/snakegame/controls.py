# controls.py
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, UP, DOWN, LEFT, RIGHT
from .game import Game, GameStatus
from .render import button_rect, dpad_rects

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

# Gestures shorter than this (pixels) are taps, not swipes
SWIPE_MIN_DISTANCE = 20


def swipe_direction(dx: float, dy: float):
    """Direction of a drag by its dominant axis."""
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class Controls:
    """
    Turns pygame events into calls on a :class:`Game`.

    Keyboard: arrows / WASD steer, SPACE pauses or starts, ESC quits.
    Touch and mouse: a swipe steers, a tap on a direction button steers,
    a tap on the overlay button starts.
    Reversal filtering is left to the game.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        self.width, self.height = width, height
        self.gesture_start: Optional[Tuple[float, float]] = None

    def handle_event(self, game: Game, event: pygame.event.Event) -> bool:
        """Apply one event. Return False to quit."""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                game.toggle_pause()
            elif event.key in KEY_TO_DIRECTION:
                game.request_direction(KEY_TO_DIRECTION[event.key])

        elif event.type == pygame.FINGERDOWN:
            self.gesture_start = (event.x * self.width, event.y * self.height)
        elif event.type == pygame.FINGERUP:
            self._end_gesture(game, (event.x * self.width, event.y * self.height))

        # SDL also emits mouse events for touches; those are handled above
        elif event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False):
            if event.button == 1:
                self.gesture_start = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and not getattr(event, "touch", False):
            if event.button == 1:
                self._end_gesture(game, event.pos)

        return True

    def _end_gesture(self, game: Game, end: Tuple[float, float]) -> None:
        if self.gesture_start is None:
            return
        sx, sy = self.gesture_start
        self.gesture_start = None
        dx, dy = end[0] - sx, end[1] - sy

        if max(abs(dx), abs(dy)) < SWIPE_MIN_DISTANCE:
            point = (int(end[0]), int(end[1]))
            for direction, rect in dpad_rects(self.width, self.height).items():
                if rect.collidepoint(point):
                    game.request_direction(direction)
                    return
            if game.status != GameStatus.PLAYING and \
                    button_rect(self.width, self.height).collidepoint(point):
                game.start()
            return
        game.request_direction(swipe_direction(dx, dy))

# render.py
from typing import Dict, List, Optional, Protocol, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    CELL_SIZE, HUD_HEIGHT, PAD_HEIGHT, WIDTH, HEIGHT,
    BG, GRID_LINE, HUD_BG, TEXT, TEXT_DIM,
    HEAD_COLOR, TAIL_COLOR, FOOD, FOOD_GLOW, EYE, PUPIL,
    OVERLAY, BUTTON, BUTTON_TXT, PAD_BUTTON, PAD_ARROW,
    UP, DOWN, LEFT, RIGHT,
)
from .game import Direction, Game, GameStatus

Color = Tuple[int, int, int]


class Renderer(Protocol):
    def render(self, game: Game) -> None: ...


# ---------- Helpers ----------
def snake_colors(length: int) -> List[Color]:
    """Per-segment colors fading from HEAD_COLOR at the head toward TAIL_COLOR."""
    t = np.arange(length, dtype=np.float64) / max(length, 1)
    start = np.array(HEAD_COLOR, dtype=np.float64)
    end = np.array(TAIL_COLOR, dtype=np.float64)
    rgb = np.rint(start + (end - start) * t[:, None]).astype(int)
    return [(int(r), int(g), int(b)) for r, g, b in rgb]

def cell_origin(gx: int, gy: int) -> Tuple[int, int]:
    """Top-left pixel of a grid cell; the board sits below the HUD bar."""
    return gx * CELL_SIZE, gy * CELL_SIZE + HUD_HEIGHT

def button_rect(width: int = WIDTH, height: int = HEIGHT) -> pygame.Rect:
    rect = pygame.Rect(0, 0, 160, 44)
    rect.center = (width // 2, HUD_HEIGHT + board_height(height) // 2 + 60)
    return rect

def board_height(height: int = HEIGHT) -> int:
    return height - HUD_HEIGHT - PAD_HEIGHT

def dpad_rects(width: int = WIDTH, height: int = HEIGHT, size: int = 36) -> Dict[Direction, pygame.Rect]:
    """On-screen direction buttons, a plus shape centred in the strip below the board."""
    cx, cy = width // 2, height - PAD_HEIGHT // 2
    step = size + 2
    rects = {}
    for direction in (UP, DOWN, LEFT, RIGHT):
        dx, dy = direction
        rect = pygame.Rect(0, 0, size, size)
        rect.center = (cx + dx * step, cy + dy * step)
        rects[direction] = rect
    return rects

def overlay_text(game: Game) -> Optional[Tuple[str, str, str]]:
    """(title, message, button label) for the current status, None while playing."""
    if game.status == GameStatus.READY:
        return "Snake", "Press an arrow key or SPACE to start", "Start"
    if game.status == GameStatus.PAUSED:
        return "Paused", "Press SPACE to resume", "Resume"
    if game.status == GameStatus.GAME_OVER:
        if game.is_new_record:
            return "New record!", f"Score: {game.score}", "Play again"
        return "Game over", f"Score: {game.score}", "Restart"
    return None

def eye_positions(x: int, y: int, size: int, direction) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    off = size // 4
    near, far = off, size - off
    if direction == UP:
        return (x + near, y + near), (x + far, y + near)
    if direction == DOWN:
        return (x + near, y + far), (x + far, y + far)
    if direction == LEFT:
        return (x + near, y + near), (x + near, y + far)
    return (x + far, y + near), (x + far, y + far)


# ---------- Pygame renderer ----------
class PygameRenderer:
    """Draws a :class:`Game` onto a pygame surface. Never mutates the game."""

    def __init__(self, surface: pygame.Surface):
        pygame.font.init()
        self.surface = surface
        self.width, self.height = surface.get_size()
        self.font = pygame.font.Font(None, 26)
        self.title_font = pygame.font.Font(None, 48)
        self.grid_layer = self._build_grid_layer()
        self.food_glow = self._build_glow(FOOD_GLOW, CELL_SIZE - 4, 110)
        self.head_glow = self._build_glow(HEAD_COLOR, CELL_SIZE, 90)

    def _build_grid_layer(self) -> pygame.Surface:
        layer = pygame.Surface((self.width, board_height(self.height)), pygame.SRCALPHA)
        board_w, board_h = layer.get_size()
        for x in range(0, board_w + 1, CELL_SIZE):
            pygame.draw.line(layer, GRID_LINE, (x, 0), (x, board_h))
        for y in range(0, board_h + 1, CELL_SIZE):
            pygame.draw.line(layer, GRID_LINE, (0, y), (board_w, y))
        return layer

    @staticmethod
    def _build_glow(color: Color, radius: int, alpha: int) -> pygame.Surface:
        glow = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        for r in range(radius, 0, -2):
            a = int(alpha * (1 - r / radius) ** 1.5) + 4
            pygame.draw.circle(glow, (*color, a), (radius, radius), r)
        return glow

    def render(self, game: Game) -> None:
        self.surface.fill(BG)
        self.surface.blit(self.grid_layer, (0, HUD_HEIGHT))
        self.draw_food(game.food)
        self.draw_snake(game.snake, game.direction)
        self.draw_hud(game.score, game.best_score)
        self.draw_dpad()

        text = overlay_text(game)
        if text is not None:
            self.draw_overlay(*text)

    def draw_food(self, food: Optional[Tuple[int, int]]) -> None:
        if food is None:
            return
        x, y = cell_origin(*food)
        cx, cy = x + CELL_SIZE // 2, y + CELL_SIZE // 2
        radius = CELL_SIZE // 2 - 2

        self.surface.blit(self.food_glow, self.food_glow.get_rect(center=(cx, cy)))
        pygame.draw.circle(self.surface, FOOD, (cx, cy), radius)
        # highlight
        r3 = max(radius // 3, 1)
        hl = pygame.Surface((r3 * 2 + 2, r3 * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(hl, (255, 255, 255, 77), (r3 + 1, r3 + 1), r3)
        self.surface.blit(hl, hl.get_rect(center=(cx - radius // 3, cy - radius // 3)))

    def draw_snake(self, snake: List[Tuple[int, int]], direction) -> None:
        colors = snake_colors(len(snake))
        size = CELL_SIZE - 2
        # tail first so the head ends up on top
        for index in range(len(snake) - 1, -1, -1):
            x, y = cell_origin(*snake[index])
            if index == 0:
                center = (x + CELL_SIZE // 2, y + CELL_SIZE // 2)
                self.surface.blit(self.head_glow, self.head_glow.get_rect(center=center))
            rect = pygame.Rect(x + 1, y + 1, size, size)
            pygame.draw.rect(self.surface, colors[index], rect, border_radius=5)

        if snake:
            self.draw_eyes(*cell_origin(*snake[0]), size, direction)

    def draw_eyes(self, x: int, y: int, size: int, direction) -> None:
        eye_size = 4
        dx, dy = direction
        for ex, ey in eye_positions(x, y, size, direction):
            pygame.draw.circle(self.surface, EYE, (ex, ey), eye_size)
            pygame.draw.circle(self.surface, PUPIL, (ex + dx, ey + dy), eye_size // 2)

    def draw_hud(self, score: int, best: int) -> None:
        pygame.draw.rect(self.surface, HUD_BG, (0, 0, self.width, HUD_HEIGHT))
        sc = self.font.render(f"Score: {score}", True, TEXT)
        self.surface.blit(sc, sc.get_rect(midleft=(12, HUD_HEIGHT // 2)))
        bs = self.font.render(f"Best: {best}", True, TEXT_DIM)
        self.surface.blit(bs, bs.get_rect(midright=(self.width - 12, HUD_HEIGHT // 2)))

    def draw_overlay(self, title: str, message: str, button_label: str) -> None:
        # Dim with translucent overlay
        overlay = pygame.Surface((self.width, board_height(self.height)), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        self.surface.blit(overlay, (0, HUD_HEIGHT))

        mid_x = self.width // 2
        mid_y = HUD_HEIGHT + board_height(self.height) // 2

        t = self.title_font.render(title, True, TEXT)
        self.surface.blit(t, t.get_rect(center=(mid_x, mid_y - 40)))
        m = self.font.render(message, True, TEXT_DIM)
        self.surface.blit(m, m.get_rect(center=(mid_x, mid_y)))

        rect = button_rect(self.width, self.height)
        pygame.draw.rect(self.surface, BUTTON, rect, border_radius=rect.height // 2)
        b = self.font.render(button_label, True, BUTTON_TXT)
        self.surface.blit(b, b.get_rect(center=rect.center))

    def draw_dpad(self) -> None:
        strip_top = self.height - PAD_HEIGHT
        pygame.draw.rect(self.surface, HUD_BG, (0, strip_top, self.width, PAD_HEIGHT))
        for (dx, dy), rect in dpad_rects(self.width, self.height).items():
            pygame.draw.rect(self.surface, PAD_BUTTON, rect, border_radius=8)
            # arrow: tip toward the direction, base across it
            cx, cy = rect.center
            r = rect.width // 4
            tip = (cx + dx * r, cy + dy * r)
            base1 = (cx - dx * r + dy * r, cy - dy * r + dx * r)
            base2 = (cx - dx * r - dy * r, cy - dy * r - dx * r)
            pygame.draw.polygon(self.surface, PAD_ARROW, (tip, base1, base2))

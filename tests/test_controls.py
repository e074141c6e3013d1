"""Tests for keyboard, touch and mouse bindings."""

import pygame
import pytest

from snakegame.config import WIDTH, HEIGHT, UP, DOWN, LEFT, RIGHT
from snakegame.controls import Controls, SWIPE_MIN_DISTANCE, swipe_direction
from snakegame.game import GameStatus
from snakegame.render import button_rect, dpad_rects


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(controls, game, start, end):
    controls.handle_event(game, pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=start, button=1))
    controls.handle_event(game, pygame.event.Event(pygame.MOUSEBUTTONUP, pos=end, button=1))


@pytest.fixture
def controls():
    return Controls(WIDTH, HEIGHT)


class TestKeyboard:
    """Arrow keys, WASD, SPACE and quitting."""

    @pytest.mark.parametrize("k,direction", [
        (pygame.K_UP, UP), (pygame.K_w, UP),
        (pygame.K_DOWN, DOWN), (pygame.K_s, DOWN),
    ])
    def test_keys_steer(self, controls, make_game, k, direction):
        game = make_game(snake=[(5, 5), (4, 5)], direction=RIGHT)
        assert controls.handle_event(game, key(k)) is True
        assert game.round.pending == direction

    def test_reverse_key_ignored(self, controls, make_game):
        game = make_game(snake=[(5, 5), (4, 5)], direction=RIGHT)
        controls.handle_event(game, key(pygame.K_a))
        assert game.round.pending == RIGHT

    def test_arrow_starts_game(self, controls, make_game):
        game = make_game()
        controls.handle_event(game, key(pygame.K_UP))
        assert game.status == GameStatus.PLAYING

    def test_space_toggles_pause(self, controls, make_game):
        game = make_game()
        controls.handle_event(game, key(pygame.K_SPACE))
        assert game.status == GameStatus.PLAYING
        controls.handle_event(game, key(pygame.K_SPACE))
        assert game.status == GameStatus.PAUSED
        controls.handle_event(game, key(pygame.K_SPACE))
        assert game.status == GameStatus.PLAYING

    def test_quit_and_escape(self, controls, make_game):
        game = make_game()
        assert controls.handle_event(game, pygame.event.Event(pygame.QUIT)) is False
        assert controls.handle_event(game, key(pygame.K_ESCAPE)) is False

    def test_unbound_key_is_ignored(self, controls, make_game):
        game = make_game()
        assert controls.handle_event(game, key(pygame.K_q)) is True
        assert game.status == GameStatus.READY


class TestGestures:
    """Swipes and taps."""

    @pytest.mark.parametrize("dx,dy,direction", [
        (50, 10, RIGHT), (-50, 10, LEFT), (10, 50, DOWN), (10, -50, UP),
    ])
    def test_swipe_direction(self, dx, dy, direction):
        assert swipe_direction(dx, dy) == direction

    def test_mouse_swipe_steers(self, controls, make_game):
        game = make_game(snake=[(5, 5), (4, 5)], direction=RIGHT)
        click(controls, game, (100, 100), (110, 200))
        assert game.round.pending == DOWN

    def test_finger_swipe_steers(self, controls, make_game):
        game = make_game(snake=[(5, 5), (4, 5)], direction=RIGHT)
        controls.handle_event(game, pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.6))
        controls.handle_event(game, pygame.event.Event(pygame.FINGERUP, x=0.52, y=0.2))
        assert game.round.pending == UP

    def test_tap_on_button_starts(self, controls, make_game):
        game = make_game()
        center = button_rect(WIDTH, HEIGHT).center
        click(controls, game, center, center)
        assert game.status == GameStatus.PLAYING

    def test_tap_elsewhere_does_nothing(self, controls, make_game):
        game = make_game()
        click(controls, game, (5, 60), (5 + SWIPE_MIN_DISTANCE // 2, 60))
        assert game.status == GameStatus.READY

    def test_touch_generated_mouse_events_ignored(self, controls, make_game):
        game = make_game(snake=[(5, 5), (4, 5)], direction=RIGHT)
        controls.handle_event(game, pygame.event.Event(
            pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=1, touch=True))
        controls.handle_event(game, pygame.event.Event(
            pygame.MOUSEBUTTONUP, pos=(100, 300), button=1, touch=True))
        assert game.round.pending == RIGHT

    def test_release_without_press_is_ignored(self, controls, make_game):
        game = make_game(snake=[(5, 5), (4, 5)], direction=RIGHT)
        controls.handle_event(game, pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(100, 300), button=1))
        assert game.round.pending == RIGHT


class TestDirectionButtons:
    """On-screen D-pad below the board."""

    @pytest.mark.parametrize("direction", [UP, DOWN, LEFT])
    def test_click_steers(self, controls, make_game, direction):
        game = make_game(snake=[(5, 5), (4, 5)], direction=RIGHT)
        center = dpad_rects(WIDTH, HEIGHT)[direction].center
        click(controls, game, center, center)
        assert game.round.pending == direction

    def test_reverse_button_ignored(self, controls, make_game):
        game = make_game(snake=[(5, 5), (4, 5)], direction=UP)
        center = dpad_rects(WIDTH, HEIGHT)[DOWN].center
        click(controls, game, center, center)
        assert game.round.pending == UP

    def test_finger_tap_steers(self, controls, make_game):
        game = make_game(snake=[(5, 5), (4, 5)], direction=RIGHT)
        cx, cy = dpad_rects(WIDTH, HEIGHT)[DOWN].center
        x, y = (cx + 0.5) / WIDTH, (cy + 0.5) / HEIGHT
        controls.handle_event(game, pygame.event.Event(pygame.FINGERDOWN, x=x, y=y))
        controls.handle_event(game, pygame.event.Event(pygame.FINGERUP, x=x, y=y))
        assert game.round.pending == DOWN

    def test_button_starts_game_from_ready(self, controls, make_game):
        game = make_game()
        center = dpad_rects(WIDTH, HEIGHT)[UP].center
        click(controls, game, center, center)
        assert game.status == GameStatus.PLAYING

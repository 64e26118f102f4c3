import random

import pygame
import pytest

from jumpball.entities import CACTUS_WIDTH, Ball, Cactus
from jumpball.game import RESTART_BUTTON, START_BUTTON, Game, GameState


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def game_over_game():
    game = Game(rng=random.Random(1))
    game.state = GameState.GAME_OVER
    game.score = 7
    game.cacti.append(Cactus())
    return game


def test_initial_state():
    game = Game()
    assert game.state is GameState.START
    assert game.score == 0
    assert game.running


def test_enter_starts_game():
    game = Game()
    game.score = 5
    game.handle_event(key_down(pygame.K_RETURN))
    assert game.state is GameState.PLAYING
    assert game.score == 0


def test_click_on_start_button_edges():
    x, y, w, h = START_BUTTON
    game = Game()
    game.handle_event(click((0, 0)), mouse_pos=(x + w, y + h))
    assert game.state is GameState.PLAYING


def test_click_outside_start_button():
    x, y, w, h = START_BUTTON
    game = Game()
    game.handle_event(click((0, 0)), mouse_pos=(x + w + 1, y))
    assert game.state is GameState.START


def test_quit_stops_running():
    game = Game()
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert not game.running


@pytest.mark.parametrize("key", [pygame.K_SPACE, pygame.K_UP])
def test_jump_keys_while_playing(key):
    game = Game()
    game.state = GameState.PLAYING
    game.handle_event(key_down(key))
    assert game.ball.jumping


def test_step_ignored_outside_playing():
    game = Game()
    game.step()
    assert game.spawn_timer == 0
    assert game.cacti == []


def test_cactus_off_screen_scores():
    game = Game(rng=random.Random(3))
    game.state = GameState.PLAYING
    game.cacti.append(Cactus(x=-CACTUS_WIDTH))
    game.step()
    assert game.cacti == []
    assert game.score == 1
    assert game.high_score == game.score


def test_high_score_not_lowered():
    game = Game(rng=random.Random(3))
    game.state = GameState.PLAYING
    game.high_score = 10
    game.cacti.append(Cactus(x=-CACTUS_WIDTH))
    game.step()
    assert game.high_score == 10


def test_collision_ends_game_and_freezes_rest():
    game = Game(rng=random.Random(3))
    game.state = GameState.PLAYING
    ball_x = game.ball.x
    game.cacti.extend([Cactus(x=ball_x, speed=0), Cactus(x=500)])
    game.step()
    assert game.state is GameState.GAME_OVER
    assert len(game.cacti) == 2
    assert game.cacti[1].x == 500


def test_idle_ball_eventually_hits_cactus():
    game = Game(rng=random.Random(0))
    game.state = GameState.PLAYING
    for _ in range(1000):
        game.step()
        if game.state is GameState.GAME_OVER:
            break
    assert game.state is GameState.GAME_OVER


def test_spawn_timer_bounded():
    game = Game(rng=random.Random(5))
    game.state = GameState.PLAYING
    for _ in range(150):
        game.step()
        assert game.spawn_timer < 150
    assert game.cacti or game.score > 0 or game.state is GameState.GAME_OVER


def test_space_restarts_and_keeps_animation_setup():
    game = game_over_game()
    game.ball.animation.total_frames = 3
    game.ball.animation.animation_speed = 5
    game.ball.animation.current_frame = 2
    game.ball.y = 10
    game.handle_event(key_down(pygame.K_SPACE))
    assert game.state is GameState.PLAYING
    assert game.score == 0
    assert game.cacti == []
    assert game.ball.y == Ball().y
    assert game.ball.animation.total_frames == 3
    assert game.ball.animation.animation_speed == 5
    assert game.ball.animation.current_frame == 0


def test_held_key_does_not_repeat_until_released():
    game = game_over_game()
    game.handle_event(key_down(pygame.K_RETURN))
    assert game.state is GameState.PLAYING
    game.state = GameState.GAME_OVER
    game.cacti.append(Cactus())
    game.handle_event(key_down(pygame.K_r))
    assert game.state is GameState.GAME_OVER
    game.handle_event(key_up(pygame.K_RETURN))
    game.handle_event(key_down(pygame.K_r))
    assert game.state is GameState.PLAYING


def test_escape_returns_to_menu():
    game = game_over_game()
    game.handle_event(key_down(pygame.K_ESCAPE))
    assert game.state is GameState.START
    assert game.score == 0
    assert game.cacti == []


def test_other_keys_ignored_on_game_over():
    game = game_over_game()
    game.handle_event(key_down(pygame.K_a))
    assert game.state is GameState.GAME_OVER
    assert game.score == 7


def test_left_click_on_restart_button():
    x, y, w, h = RESTART_BUTTON
    game = game_over_game()
    game.handle_event(click((x, y)))
    assert game.state is GameState.PLAYING
    assert game.cacti == []


def test_right_click_or_outside_ignored():
    x, y, w, h = RESTART_BUTTON
    game = game_over_game()
    game.handle_event(click((x, y), button=3))
    game.handle_event(click((x - 1, y)))
    assert game.state is GameState.GAME_OVER
    assert len(game.cacti) == 1


def test_click_resets_key_lock():
    x, y, w, h = RESTART_BUTTON
    game = game_over_game()
    game.handle_event(key_down(pygame.K_SPACE))
    game.state = GameState.GAME_OVER
    game.handle_event(click((x + w, y + h)))
    game.state = GameState.GAME_OVER
    game.handle_event(key_down(pygame.K_SPACE))
    assert game.state is GameState.PLAYING
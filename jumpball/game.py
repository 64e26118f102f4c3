"""Game state machine: input handling, reset and per-frame simulation."""

from __future__ import annotations

import random
from dataclasses import replace
from enum import Enum, auto

import pygame

from jumpball.entities import (
    Ball,
    Cactus,
    RectTuple,
    check_collision,
    spawn_cacti,
)

START_BUTTON: RectTuple = (300, 200, 200, 80)
RESTART_BUTTON: RectTuple = (300, 250, 200, 80)

SPAWN_BASE_DELAY = 50
SPAWN_RANDOM_DELAY = 100
SPAWN_SPEED_MULTIPLIER = 2.0

_RESTART_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_r)
_JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)


class GameState(Enum):
    START = auto()
    PLAYING = auto()
    GAME_OVER = auto()


def _inside(rect: RectTuple, pos: tuple[int, int]) -> bool:
    x, y, w, h = rect
    px, py = pos
    return x <= px <= x + w and y <= py <= y + h


class Game:
    """Holds everything that changes while the game runs."""

    def __init__(self, rng: random.Random | None = None, ball: Ball | None = None):
        self.rng = rng if rng is not None else random.Random()
        self.ball = ball if ball is not None else Ball()
        self.cacti: list[Cactus] = []
        self.state = GameState.START
        self.score = 0
        self.high_score = 0
        self.spawn_timer = 0
        self.running = True
        self._key_processed = False

    def handle_event(self, event: pygame.event.Event, mouse_pos=None) -> None:
        """Route one input event according to the current state."""
        if event.type == pygame.QUIT:
            self.running = False

        if self.state is GameState.START:
            self.handle_start_input(event, mouse_pos)
        elif self.state is GameState.PLAYING:
            if event.type == pygame.KEYDOWN and event.key in _JUMP_KEYS:
                self.ball.jump()
        elif self.state is GameState.GAME_OVER:
            self.handle_game_over_input(event)

    def _begin(self) -> None:
        self.state = GameState.PLAYING
        self.score = 0

    def handle_start_input(self, event: pygame.event.Event, mouse_pos=None) -> None:
        """Start playing on a click on the start button or on Enter."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            pos = mouse_pos if mouse_pos is not None else event.pos
            if _inside(START_BUTTON, pos):
                self._begin()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            self._begin()

    def handle_game_over_input(self, event: pygame.event.Event) -> None:
        """Restart or go back to the menu from the game-over screen."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
            if _inside(RESTART_BUTTON, event.pos):
                self.reset()
                self._key_processed = False
        elif event.type == pygame.KEYDOWN and not self._key_processed:
            if event.key in _RESTART_KEYS:
                self.reset()
                self._key_processed = True
            elif event.key == pygame.K_ESCAPE:
                self.state = GameState.START
                self.score = 0
                self.cacti.clear()
                self._key_processed = True
        elif event.type == pygame.KEYUP:
            if event.key in _RESTART_KEYS or event.key == pygame.K_ESCAPE:
                self._key_processed = False

    def reset(self) -> None:
        """Start a fresh round with a new ball and no obstacles."""
        self.state = GameState.PLAYING
        self.score = 0
        self.cacti.clear()
        animation = replace(self.ball.animation, current_frame=0, frame_counter=0)
        self.ball = Ball(animation=animation)

    def step(self) -> None:
        """Advance the simulation by one frame."""
        if self.state is not GameState.PLAYING:
            return

        self.ball.update()

        self.spawn_timer += 1
        if self.spawn_timer >= SPAWN_BASE_DELAY + self.rng.randrange(SPAWN_RANDOM_DELAY):
            spawn_cacti(self.cacti, SPAWN_SPEED_MULTIPLIER, self.rng)
            self.spawn_timer = 0

        kept: list[Cactus] = []
        remaining = iter(self.cacti)
        for cactus in remaining:
            cactus.update()
            if cactus.x + cactus.width < 0:
                self.score += 1
                self.high_score = max(self.high_score, self.score)
                continue
            kept.append(cactus)
            if check_collision(self.ball.rect(), cactus.rect()):
                self.state = GameState.GAME_OVER
                kept.extend(remaining)
                break
        self.cacti[:] = kept
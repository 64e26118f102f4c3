"""Drawing of the start, playing and game-over screens."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from jumpball.entities import GROUND_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH
from jumpball.game import RESTART_BUTTON, START_BUTTON

if TYPE_CHECKING:
    from jumpball.game import Game

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 50, 50)
SHADOW: Color = (100, 0, 0)
BACKGROUND_COLOR: Color = (240, 240, 240)
BORDER_COLOR: Color = (40, 40, 40)
START_BUTTON_COLOR: Color = (100, 200, 100)
RESTART_BUTTON_COLOR: Color = (70, 160, 70)
RESTART_HOVER_COLOR: Color = (90, 180, 90)
OVERLAY_ALPHA = 180
FADE_STEP = 5


def _inside(rect: tuple[int, int, int, int], pos: tuple[int, int]) -> bool:
    x, y, w, h = rect
    px, py = pos
    return x <= px <= x + w and y <= py <= y + h


class Renderer:
    """Draws the game screens onto a surface using one font."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font):
        self.surface = surface
        self.font = font
        self._fade_alpha = 0

    def text(self, text: str, x: int, y: int, color: Color) -> pygame.Rect:
        """Draw `text` with its top-left corner at (x, y); return the area drawn."""
        image = self.font.render(text, False, color)
        return self.surface.blit(image, (x, y))

    def _overlay(self, alpha: int) -> None:
        layer = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        layer.fill((0, 0, 0, alpha))
        self.surface.blit(layer, (0, 0))

    def start_screen(self, high_score: int) -> None:
        self.surface.fill(BACKGROUND_COLOR)
        button = pygame.Rect(START_BUTTON)
        self.surface.fill(START_BUTTON_COLOR, button)
        pygame.draw.rect(self.surface, BLACK, button, 1)
        self.text("START", button.x + 70, button.y + 25, BLACK)
        self.text("JUMPING BALL GAME", 250, 100, BLACK)
        self.text(f"High Score: {high_score}", 300, 300, BLACK)

    def game_over_screen(
        self, score: int, high_score: int, mouse_pos: tuple[int, int]
    ) -> bool:
        """Draw the game-over overlay; return whether the mouse is on the restart button."""
        self._overlay(OVERLAY_ALPHA)
        hovering = _inside(RESTART_BUTTON, mouse_pos)

        self.text("GAME OVER", 302, 142, SHADOW)
        self.text("GAME OVER", 300, 140, RED)
        self.text(f"Your Score: {score}", 300, 220, WHITE)
        self.text(f"High Score: {high_score}", 300, 180, WHITE)

        button = pygame.Rect(RESTART_BUTTON)
        self.surface.fill(RESTART_HOVER_COLOR if hovering else RESTART_BUTTON_COLOR, button)
        pygame.draw.rect(self.surface, BORDER_COLOR, button, 1)

        text_width, text_height = self.font.size("RESTART")
        self.text(
            "RESTART",
            button.x + (button.w - text_width) // 2,
            button.y + (button.h - text_height) // 2,
            WHITE,
        )
        self.text("Press SPACE or ENTER to restart", 200, 350, WHITE)
        self.text("Press ESC to return to menu", 220, 380, WHITE)

        if self._fade_alpha < 255:
            self._fade_alpha = min(255, self._fade_alpha + FADE_STEP)
            self._overlay(255 - self._fade_alpha)
        return hovering

    def playing_screen(
        self,
        game: Game,
        ball_sheet: pygame.Surface | None,
        cactus_image: pygame.Surface | None,
    ) -> None:
        self.surface.fill(BACKGROUND_COLOR)
        ground = pygame.Rect(0, GROUND_HEIGHT, SCREEN_WIDTH, SCREEN_HEIGHT - GROUND_HEIGHT)
        self.surface.fill(BLACK, ground)

        if ball_sheet is not None:
            x, y, _, _ = game.ball.rect()
            frame = pygame.Rect(game.ball.animation.current_frame_rect())
            self.surface.blit(ball_sheet, (x, y), area=frame)

        if cactus_image is not None:
            for cactus in game.cacti:
                x, y, w, h = cactus.rect()
                self.surface.blit(pygame.transform.scale(cactus_image, (w, h)), (x, y))

        self.text(f"Score: {game.score}", 650, 30, BLACK)
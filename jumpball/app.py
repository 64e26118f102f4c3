"""Window setup, asset loading and the main loop."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import pygame

from jumpball.audio import AudioError, close_audio, init_audio, load_music, play_music
from jumpball.entities import (
    BALL_FRAME_HEIGHT,
    BALL_FRAME_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Animation,
)
from jumpball.game import Game, GameState
from jumpball.render import WHITE, Renderer

WINDOW_TITLE = "Ball Game"
FONT_FILE = "BungeeSpice-Regular.ttf"
FONT_SIZE = 24
MUSIC_FILE = "music.mp3"
BALL_IMAGE = "kl-removebg-preview2.png"
CACTUS_IMAGE = "kiem2.png"
BALL_ANIMATION_SPEED = 5
FRAME_DELAY_MS = 16


def load_texture(path: str | os.PathLike[str]) -> pygame.Surface:
    """Load an image file; raise OSError if it cannot be read."""
    try:
        image = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        raise OSError(f"Unable to load image {os.fspath(path)}: {exc}") from exc
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def load_ball_sheet(path: str | os.PathLike[str], animation: Animation) -> pygame.Surface:
    """Load the ball sprite sheet and configure `animation` to step through it."""
    sheet = load_texture(path)
    animation.total_frames = sheet.get_width() // BALL_FRAME_WIDTH
    animation.frame_width = BALL_FRAME_WIDTH
    animation.frame_height = BALL_FRAME_HEIGHT
    animation.animation_speed = BALL_ANIMATION_SPEED
    return sheet


def run(
    screen: pygame.Surface,
    renderer: Renderer,
    game: Game,
    ball_sheet: pygame.Surface | None,
    cactus_image: pygame.Surface | None,
) -> None:
    """Process input, simulate and draw frames until the game is quit."""
    while game.running:
        for event in pygame.event.get():
            game.handle_event(event, pygame.mouse.get_pos())

        game.step()

        screen.fill(WHITE)
        if game.state is GameState.START:
            renderer.start_screen(game.high_score)
        elif game.state is GameState.PLAYING:
            renderer.playing_screen(game, ball_sheet, cactus_image)
        else:
            renderer.game_over_screen(game.score, game.high_score, pygame.mouse.get_pos())

        pygame.display.flip()
        pygame.time.delay(FRAME_DELAY_MS)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="jumpball", description="Jumping ball arcade game.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="directory holding the music, font and images",
    )
    args = parser.parse_args(argv)
    assets: Path = args.assets

    try:
        try:
            init_audio()
            load_music(assets / MUSIC_FILE)
            play_music()
        except AudioError as exc:
            print(exc, file=sys.stderr)
            return 1

        try:
            pygame.init()
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            font = pygame.font.Font(os.fspath(assets / FONT_FILE), FONT_SIZE)
        except (pygame.error, OSError) as exc:
            print(f"Failed to initialize! {exc}", file=sys.stderr)
            return 1

        game = Game()
        try:
            ball_sheet = load_ball_sheet(assets / BALL_IMAGE, game.ball.animation)
            cactus_image = load_texture(assets / CACTUS_IMAGE)
        except OSError as exc:
            print(f"Failed to load media! {exc}", file=sys.stderr)
            return 1

        run(screen, Renderer(screen, font), game, ball_sheet, cactus_image)
        return 0
    finally:
        close_audio()
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
# jumpball

A small arcade game. A ball rolls along the ground while obstacles slide in from
the right. Jump over them. Each one that leaves the screen scores a point. If you
touch one, the game ends.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
jumpball
```

By default the game looks for its assets in the current directory. To use
another directory, pass `--assets`:

```
jumpball --assets path/to/assets
```

The assets directory must hold:

- `kl-removebg-preview2.png`: the ball sprite sheet, with 60×55 frames side by side
- `kiem2.png`: the obstacle image
- `BungeeSpice-Regular.ttf`: the font for on-screen text
- `music.mp3`: background music, which loops for as long as the game runs

If the audio device cannot be opened, or if any of these files is missing or
cannot be read, the game prints an error and exits with status 1.

### Controls

| Screen     | Action                                                       |
|------------|--------------------------------------------------------------|
| Start      | Click **START** or press Enter to begin                      |
| Playing    | Space or Up arrow to jump                                    |
| Game over  | Click **RESTART**, or press Space, Enter or R to play again   |
| Game over  | Esc to go back to the start screen                           |

The high score lasts only while the game is running. It is not saved to disk.

## Using the pieces

The game logic in `jumpball.game` and `jumpball.entities` does not need a
display, so you can drive it yourself:

```python
import random
from jumpball.game import Game, GameState

game = Game(rng=random.Random(1))
game.state = GameState.PLAYING
for _ in range(500):
    game.step()
    if game.state is GameState.GAME_OVER:
        break
print(game.score, game.high_score)
```

- `jumpball.entities` provides `Ball`, `Cactus` and `Animation`. It also has
  `make_cactus` and `spawn_cacti`, which accept an optional random source, and
  `check_collision`, which tests the ball's circle against an obstacle's
  rectangle with a forgiving margin.
- `jumpball.game.Game` holds the state. `handle_event` takes pygame events,
  `step` advances the simulation by one frame, and `reset` starts a new round.
- `jumpball.render.Renderer` draws the start, playing and game-over screens onto
  any pygame surface.
- `jumpball.audio` offers `init_audio`, `load_music`, `play_music` and
  `close_audio`. They raise `AudioError` on failure.
- `jumpball.app` offers `load_texture`, `load_ball_sheet`, the main loop `run`,
  and `main`, which is the entry point for the `jumpball` command.
# flapcli

A Flappy Bird style arcade game with a small interactive shell. You can
register players, list them with their stats, and start a game session for
one of them. When a session ends, the player's record is updated with the
last score, the number of games played and the best score.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install .[test]
pytest
```

## Running

```
flapcli
flapcli --users path/to/players.txt
```

`--users` sets the player register file. The default is `users.txt` in the
current directory. The shell reads commands from standard input until `exit`
or the end of input:

| Command                         | What it does                           |
|---------------------------------|----------------------------------------|
| `create_user <name> <nickname>` | Register a new player                  |
| `list_users`                    | Show all players in a fixed-width table |
| `run_game <nickname>`           | Open the game window as that player    |
| `exit`                          | Quit                                   |

Names and nicknames are single words, and each nickname can belong to only
one player. The register file holds one player per line, in the form
`name,nickname,score,games_played,best_score`. Lines that cannot be read are
skipped when the file is loaded. The file is written again whenever a player
is created, whenever a game's result is recorded, and when the shell exits.

A game that fails while running is reported on standard error and the shell
keeps going. This happens, for example, when an asset is missing.

## Playing

The window is 800 by 600 pixels. On the menu, press **Space** or **J** to
start. While playing, either key makes the bird flap. The bird glides level
for its first three seconds, or until the first flap. After that, gravity
pulls it down.

Flying past a pair of pipes scores one point. Every third point does all of
the following:

- speeds up the pipes and the ground
- shortens the time between pipe pairs
- raises gravity and flap strength

Touching a pipe or the ground ends the run. On the game-over screen, Space or
J returns to the menu. Closing the window ends the session, and the score
shown at that moment is recorded for the player.

The game loads these files from an `assets/` directory in the current
directory:

- `top_pipe.png`
- `bottom_pipe.png`
- `ground.png`
- `background.png`
- `bird_1.png`
- `PixelifySansFont.ttf`

## Using the pieces

The modules can also be used directly:

- **`flapcli.users.UserManager`** loads and saves the register. It offers
  `create_user`, `get_user`, `update_stats`, `format_table`, `load` and
  `save`. It works as a context manager and saves when it closes.
  - `update_stats` returns `True` when the score is a new best.
  - It raises `DuplicateNicknameError` or `UserNotFoundError` when a nickname
    clashes or is missing.
- **`flapcli.collision`**
  - `aabb_overlap` tests two rectangles for overlap.
  - `check_collision` tests a bird against the pipes and the ground line.
- **`flapcli.obstacles.ObstacleManager`** spawns pipe pairs on a timer,
  scrolls them, and drops those that have left the screen. It takes an
  optional `random.Random` for repeatable gaps.
- **`flapcli.elements`** holds the on-screen pieces: `Element`, `Background`,
  `Ground`, `Obstacle` and `Bird`.
- **`flapcli.game.Game`** moves between the `GameState` values `MENU`,
  `PLAYING` and `GAME_OVER`. It also handles scoring and difficulty, and runs
  the frame loop.
  - `Game(width, height, assets_dir="assets", debug=False, rng=None)`
  - `debug=True` draws the collision boxes.
- **`flapcli.cli.run_shell`** runs the shell over any iterable of lines and
  any output stream. You can give it your own `launch` callable in place of
  the game window.
- **`flapcli.errors`** defines `GameError` and its subclasses for failures in
  the engine, the display, the timer, asset loading and the register file.

## Limitations

- There is no `help` command. The message for an unknown command mentions
  it, but `help` itself is also treated as an unknown command.
- The bird's animation repeats one frame.
- The background is drawn in a fixed place and does not scroll.
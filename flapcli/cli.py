"""Interactive command shell for managing players and launching games."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from flapcli.errors import GameError
from flapcli.game import Game
from flapcli.users import DuplicateNicknameError, User, UserManager

SCREEN_WIDTH = 800.0
SCREEN_HEIGHT = 600.0

BANNER = "\n".join(
    [
        "Welcome to Flappy Bird CLI!",
        "Commands:",
        "  create_user <name> <nickname> - Register a new player",
        "  list_users                     - Show all registered players",
        "  run_game <nickname>            - Start the game with a specific player",
        "  exit                           - Quit the application",
    ]
)


def _launch_game(user: User) -> int:
    """Open a game window, play until it closes and return the final score."""
    game = Game(SCREEN_WIDTH, SCREEN_HEIGHT)
    try:
        game.initialize()
        game.run()
        return game.score
    finally:
        game.close()


def _run_game(
    manager: UserManager, nickname: str, out: TextIO, launch: Callable[[User], int]
) -> None:
    user = manager.get_user(nickname)
    if user is None:
        print(
            f"Error: Nickname '{nickname}' not found. "
            "Please create user first or list users.",
            file=out,
        )
        return
    print(f"Launching game for player: {user.name} ({user.nickname})", file=out)
    try:
        score = launch(user)
        print(f"Game session ended. Final score: {score}", file=out)
        if manager.update_stats(nickname, score):
            print(f"New high score for {nickname}: {score}!", file=out)
        else:
            print(f"Score for {nickname}: {score}. Best: {user.best_score}", file=out)
    except GameError as err:
        print(f"CRITICAL GAME ERROR: {err}", file=sys.stderr)
    except Exception as err:  # the shell must survive any failure inside a game
        print(f"UNEXPECTED ERROR: {err}", file=sys.stderr)


def run_shell(
    manager: UserManager,
    lines: Iterable[str],
    out: TextIO,
    launch: Callable[[User], int] = _launch_game,
) -> None:
    """Read commands from lines until 'exit' or the end of input."""
    print(BANNER, file=out)
    commands = iter(lines)
    while True:
        out.write("\n> ")
        out.flush()
        line = next(commands, None)
        if line is None:
            break
        words = line.split()
        command, args = (words[0], words[1:]) if words else ("", [])

        if command == "create_user":
            if len(args) < 2:
                print("Usage: create_user <name> <nickname>", file=out)
                continue
            name, nickname = args[0], args[1]
            try:
                manager.create_user(name, nickname)
            except DuplicateNicknameError:
                print(
                    f"Error: Nickname '{nickname}' already exists. "
                    "Please choose a different one.",
                    file=out,
                )
            else:
                print(
                    f"User '{name}' with nickname '{nickname}' created successfully!", file=out
                )
        elif command == "list_users":
            print(manager.format_table(), file=out)
        elif command == "run_game":
            if not args:
                print("Usage: run_game <nickname>", file=out)
                continue
            _run_game(manager, args[0], out, launch)
        elif command == "exit":
            print("Exiting Flappy Bird CLI. Goodbye!", file=out)
            break
        else:
            print(f"Unknown command: '{command}'", file=out)
            print("Type 'help' for a list of commands.", file=out)


def main(argv: list[str] | None = None) -> int:
    """Start the shell on standard input and output."""
    parser = argparse.ArgumentParser(prog="flapcli", description="Flappy Bird player shell.")
    parser.add_argument("--users", default="users.txt", help="player register file")
    args = parser.parse_args(argv)
    with UserManager(args.users) as manager:
        run_shell(manager, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
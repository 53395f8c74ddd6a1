"""Player register stored as comma-separated lines in a text file."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from flapcli.errors import FileError, GameError

log = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_FIELD_COUNT = 5
_COLUMN_WIDTH = 15
_RULE = "-" * 54


@dataclass
class User:
    """A registered player and their statistics."""

    name: str
    nickname: str
    score: int = 0
    games_played: int = 0
    best_score: int = 0

    def to_line(self) -> str:
        return f"{self.name},{self.nickname},{self.score},{self.games_played},{self.best_score}"


class DuplicateNicknameError(GameError):
    """A user with the requested nickname already exists."""


class UserNotFoundError(GameError, LookupError):
    """No user has the requested nickname."""


def _parse_int(text: str) -> int:
    """Read a leading integer, ignoring surrounding whitespace and trailing text."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _split_fields(line: str) -> list[str]:
    parts = line.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


class UserManager:
    """Loads, queries, updates and saves the player register."""

    def __init__(self, filename: str | Path = "users.txt") -> None:
        self.path = Path(filename)
        self.users: list[User] = []
        self.load()
        log.info("Loaded %d users from %s", len(self.users), self.path)

    def __enter__(self) -> UserManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()
        log.info("Saved %d users to %s", len(self.users), self.path)

    def __len__(self) -> int:
        return len(self.users)

    def __iter__(self):
        return iter(self.users)

    def load(self) -> None:
        """Replace the in-memory users with those in the file; bad lines are skipped."""
        self.users.clear()
        try:
            with self.path.open(encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError:
            log.warning("Could not open %s for reading; assuming no existing users.", self.path)
            return

        for line in lines:
            parts = _split_fields(line)
            if len(parts) != _FIELD_COUNT:
                continue
            name, nickname, score, games, best = parts
            try:
                user = User(name, nickname, _parse_int(score), _parse_int(games), _parse_int(best))
            except ValueError as err:
                log.error("Error parsing user line %r: %s", line, err)
                continue
            self.users.append(user)

    def save(self) -> None:
        """Write every user to the file, one per line."""
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                for user in self.users:
                    handle.write(user.to_line() + "\n")
        except OSError as err:
            raise FileError(f"could not open {self.path} for writing: {err}") from err

    def create_user(self, name: str, nickname: str) -> User:
        """Register a new player with empty statistics and save the register."""
        if self.get_user(nickname) is not None:
            raise DuplicateNicknameError(
                f"Nickname '{nickname}' already exists. Please choose a different one."
            )
        user = User(name, nickname)
        self.users.append(user)
        self.save()
        return user

    def format_table(self) -> str:
        """Render the register as a fixed-width table."""
        if not self.users:
            return "No users registered yet."
        lines = [
            "",
            "--- Registered Users ---",
            "Name           Nickname       Games Played   Best Score",
            _RULE,
        ]
        lines.extend(
            f"{user.name:<{_COLUMN_WIDTH}}{user.nickname:<{_COLUMN_WIDTH}}"
            f"{user.games_played:<{_COLUMN_WIDTH}}{user.best_score}"
            for user in self.users
        )
        lines.extend([_RULE, ""])
        return "\n".join(lines)

    def get_user(self, nickname: str) -> User | None:
        """Return the user with this nickname, or None."""
        return next((user for user in self.users if user.nickname == nickname), None)

    def update_stats(self, nickname: str, score: int) -> bool:
        """Record a finished game; return True when it set a new best score."""
        user = self.get_user(nickname)
        if user is None:
            raise UserNotFoundError(
                f"Could not update stats for nickname '{nickname}'. User not found."
            )
        user.games_played += 1
        user.score = score
        new_best = score > user.best_score
        if new_best:
            user.best_score = score
        self.save()
        return new_best
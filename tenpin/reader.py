"""Reading players and their rolls from text files."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .frames import MAX_PINS

MAX_LINE_LENGTH = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class GameData:
    """A player's name and the rolls recorded for them."""

    player_name: str = ""
    rolls: tuple[int, ...] = field(default_factory=tuple)


def _check_length(line: str) -> str:
    if len(line) > MAX_LINE_LENGTH:
        raise ValueError("Line is very long in file")
    return line


def _parse_roll(entry: str) -> int:
    match = _LEADING_INT.match(entry)
    if match is None:
        raise ValueError(f"Invalid roll value: {entry}")
    value = int(match.group(1))
    if not 0 <= value <= MAX_PINS:
        raise ValueError(f"Invalid roll value: {entry}")
    return value


def parse_rolls(line: str) -> list[int]:
    """Parse a comma-separated list of pin counts, skipping blank entries."""
    rolls = []
    for raw_entry in line.split(","):
        entry = raw_entry.strip(" \t")
        if entry:
            rolls.append(_parse_roll(entry))
    return rolls


def _lines(path: str | Path) -> Iterator[str]:
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Unable to open file: {path}") from exc
    with handle:
        for line in handle:
            yield line.rstrip("\n")


def read_game(path: str | Path) -> GameData:
    """Read one game: the player's name, then a line of rolls."""
    lines = _lines(path)
    name = next(lines, None)
    if name is None:
        raise ValueError("File is empty or invalid format")
    _check_length(name)
    rolls_line = next(lines, None)
    if rolls_line is None:
        raise ValueError("Missing rolls data in file")
    _check_length(rolls_line)
    lines.close()
    return GameData(name, tuple(parse_rolls(rolls_line)))


def read_games(path: str | Path) -> list[GameData]:
    """Read every game in a file, each a name line followed by a rolls line.

    Blank lines between games are skipped; a trailing name without rolls is
    reported on standard error and left out.
    """
    games = []
    lines = _lines(path)
    for name in lines:
        if not name:
            continue
        _check_length(name)
        rolls_line = next(lines, None)
        if rolls_line is None:
            print(f"Warning: Missing rolls for player {name}", file=sys.stderr)
            continue
        _check_length(rolls_line)
        games.append(GameData(name, tuple(parse_rolls(rolls_line))))
    return games
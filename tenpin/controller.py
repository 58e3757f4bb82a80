"""Interactive front end that plays games from files or a built-in sample."""

from __future__ import annotations

import argparse
import sys

from .game import BowlingGame
from .reader import read_game, read_games

MAX_FILENAME_LENGTH = 100
DEFAULT_DATA_DIR = "data"
DEFAULT_SINGLE_FILE = "input.txt"
DEFAULT_MULTIPLE_FILE = "multiple_games.txt"

SAMPLE_ROLLS = (1, 4, 4, 5, 6, 4, 5, 5, 10, 0, 1, 7, 3, 6, 4, 10, 2, 8, 6)

_MENU_LINES = (
    "1. Play single game for single player file",
    "2. Play multiple games from file",
    "3. Play Sample game",
    "4. Quit the Game",
)
_QUIT = 4


def validate_filename(filename: str) -> None:
    """Reject empty or overlong file names."""
    if not filename:
        raise ValueError("Filename cannot be empty")
    if len(filename) > MAX_FILENAME_LENGTH:
        raise ValueError("Filename too long")


def _report_file_error(filename: str, error: Exception) -> None:
    print(f"\nFile Error with '{filename}':", file=sys.stderr)
    print(f"  {error}", file=sys.stderr)


def play_game_from_file(filename: str) -> BowlingGame | None:
    """Play the single game in ``filename``, printing progress and the scorecard.

    Returns the game, or None if the file could not be played.
    """
    try:
        validate_filename(filename)
        print(f"Reading game data from file: {filename}")
        data = read_game(filename)
        print(f"Starting game for player name: {data.player_name}")
        print(f"Rolls to process: {len(data.rolls)}")

        game = BowlingGame(data.player_name)
        for number, pins in enumerate(data.rolls, start=1):
            print(f"Current Roll {number}: {pins} pins knocked down")
            game.roll(pins)
            print(f"Current total score: {game.total_score()}")
            if game.is_complete():
                print("Game is completed")
                break

        if not game.is_complete():
            print("Game is not complete will need more rolls.")
        print(game.scorecard(), end="")
        return game
    except Exception as exc:
        _report_file_error(filename, exc)
        return None


def play_multiple_games_from_file(filename: str) -> list[BowlingGame]:
    """Play every game in ``filename``, printing a scorecard for each.

    Returns the games whose scorecards were printed.
    """
    played: list[BowlingGame] = []
    try:
        validate_filename(filename)
        print(f"Multiple Games Reading from file with name: {filename}")
        games = read_games(filename)
        print(f"Found {len(games)} number of games to process\n")

        for number, data in enumerate(games, start=1):
            print("\n" + "*" * 50)
            print(f"GAME {number} - Player: {data.player_name}")
            print("*" * 50)

            game = BowlingGame(data.player_name)
            for pins in data.rolls:
                game.roll(pins)
                if game.is_complete():
                    break
            print(game.scorecard(), end="")
            played.append(game)
    except Exception as exc:
        _report_file_error(filename, exc)
    return played


def run_sample_game() -> BowlingGame | None:
    """Play a fixed example game, printing the score after every roll."""
    try:
        game = BowlingGame("Player")
        print("Sample example game: ")
        print("Rolls: " + ",".join(str(pins) for pins in SAMPLE_ROLLS))
        for number, pins in enumerate(SAMPLE_ROLLS, start=1):
            game.roll(pins)
            print(f"Roll {number}: {pins} pins. Current score: {game.total_score()}")
        print(game.scorecard(), end="")
        return game
    except Exception as exc:
        print(f"Sample Error: {exc}", file=sys.stderr)
        return None


def _display_menu() -> None:
    print("\n" + "=" * 50)
    print("BOWLING GAME")
    print("=" * 50)
    for line in _MENU_LINES:
        print(line)
    print("-" * 50)


def _parse_choice(line: str) -> int:
    tokens = line.split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def _data_file(data_dir: str, entered: str, default: str) -> str:
    return f"{data_dir}/{entered or default}"


def run_application(data_dir: str = DEFAULT_DATA_DIR) -> int:
    """Run the menu loop until the player quits or input ends."""
    print("Bowling Game")
    while True:
        _display_menu()
        try:
            line = input("Choose option (1-4): ")
        except EOFError:
            print()
            return 0
        choice = _parse_choice(line)

        if choice == 1:
            entered = _ask(
                f"Enter filename for single game (default: {DEFAULT_SINGLE_FILE}): "
            )
            play_game_from_file(_data_file(data_dir, entered, DEFAULT_SINGLE_FILE))
        elif choice == 2:
            entered = _ask(
                "Enter filename for multiple games "
                f"(default: {DEFAULT_MULTIPLE_FILE}): "
            )
            play_multiple_games_from_file(
                _data_file(data_dir, entered, DEFAULT_MULTIPLE_FILE)
            )
        elif choice == 3:
            run_sample_game()
        elif choice == _QUIT:
            print("Thank you, Game ended")
            return 0
        else:
            print("Invalid choice try again")

        try:
            input("\nPress Enter to continue:")
        except EOFError:
            print()
            return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Score ten-pin bowling games.")
    parser.add_argument(
        "data_dir",
        nargs="?",
        default=DEFAULT_DATA_DIR,
        help="directory holding the game files",
    )
    args = parser.parse_args(argv)
    try:
        return run_application(args.data_dir)
    except Exception as exc:
        print(f"Fatal Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
# tenpin

Scores ten-pin bowling games. Frames 1 to 9 take up to two rolls (one on a
strike). The tenth frame grants a third roll after a strike or spare. Strike
and spare bonuses are added to frames 1 to 9.

## Installing

```
pip install .
```

## Running

```
tenpin [DATA_DIR]
```

`DATA_DIR` is the directory that holds the game files. It defaults to `data`,
relative to the current directory. The command opens a menu:

1. Play a single game from a file (default `input.txt`)
2. Play several games from a file (default `multiple_games.txt`)
3. Play the built-in sample game
4. Quit

A file name you enter is looked up in `DATA_DIR`. Pressing Enter without a
name uses the default. When a file cannot be read or played, the error goes to
standard error and the menu comes back. The command also ends when standard
input ends.

## Input files

A single-game file has the player's name on the first line. The rolls follow
on the second line, separated by commas:

```
Alice
10,7,3,9,0,10,0,8,8,2,0,6,10,10,10,8,1
```

A multi-game file repeats a name line and a rolls line for each player. Blank
lines between games are skipped. If the last name has no rolls line after it,
a warning goes to standard error and that name is left out.

Every roll must be between 0 and 10. No line may be longer than 100 characters.

## Using it from Python

```python
from tenpin.game import BowlingGame

game = BowlingGame("Alice")
for pins in [10] * 12:
    game.roll(pins)

assert game.is_complete()
assert game.total_score() == 300
print(game.scorecard())
```

`BowlingGame.roll` has these error cases:

- It raises `RuntimeError` once the game is complete, or when a roll is added to a finished frame.
- It raises `ValueError` for a pin count outside 0 to 10.
- It raises `ValueError` when two rolls in a frame add up to more than 10 pins.

The frames themselves are in `tenpin.frames`: `RegularFrame` and
`TenthFrame`. Scores are computed by `tenpin.scoring.total_score`.

Files can be read with `tenpin.reader.read_game` and
`tenpin.reader.read_games`. They return `GameData` records, each holding a
`player_name` and a tuple of `rolls`. `tenpin.reader.parse_rolls` parses a
single line of rolls into a list.

The menu actions can also be called directly from `tenpin.controller`:

- `play_game_from_file`
- `play_multiple_games_from_file`
- `run_sample_game`
- `run_application`

## Limitations

The scorecard shows the player's name and the final score only. It does not
show a frame-by-frame breakdown. Games are not saved anywhere.

## Tests

```
pip install .[test]
pytest
```
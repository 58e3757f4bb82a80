"""Ten-pin bowling scoring: frames, games, roll files and a console menu."""

__version__ = "1.0.0"
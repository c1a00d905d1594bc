"""A falling-block puzzle game: board, pieces, rules and a pygame front end."""

__version__ = "0.1.0"
__all__ = ["position", "colors", "block", "grid", "game", "app"]
"""The Coup game: players, roles, turn order, game sessions and a console front end."""

__version__ = "0.1.0"
__all__ = ["__version__"]
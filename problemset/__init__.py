"""Solutions to short programming-contest exercises, with a command-line front end."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "sequences", "games", "text", "cli"]
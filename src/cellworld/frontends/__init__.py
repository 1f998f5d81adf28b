"""Terminal frontends for the automata."""

from .cli import run_loop, ecosystem_main, life_main

__all__ = ["run_loop", "ecosystem_main", "life_main"]

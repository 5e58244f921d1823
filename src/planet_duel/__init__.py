"""Planet Duel: a two-player gravity artillery game."""

__version__ = "0.1.0"

"""Scoring engines for the golf trip betting formats."""

from . import handicap, junk, match_play, nassau, scramble, skins, team_formats, wolf
from .formats import BetConfig, compute_state, parse_bet_config

__all__ = [
    "BetConfig",
    "compute_state",
    "handicap",
    "junk",
    "match_play",
    "nassau",
    "parse_bet_config",
    "scramble",
    "skins",
    "team_formats",
    "wolf",
]

# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Rank ladder of the Bundespolizei, highest rank first."""

# Positions without a listed rank sort after every rank
UNRANKED_LEVEL = 999

POLICE_RANKS = [
    {"name": "Bundespolizeipräsident", "level": 1},
    {"name": "Vizepräsident", "level": 2},
    {"name": "Leitender Polizeidirektor", "level": 3},
    {"name": "Polizeidirektor", "level": 4},
    {"name": "Polizeioberrat", "level": 5},
    {"name": "Polizeirat", "level": 6},
    {"name": "Erster Polizeihauptkommissar", "level": 7},
    {"name": "Polizeihauptkommissar", "level": 8},
    {"name": "Polizeioberkommissar", "level": 9},
    {"name": "Polizeikommissar", "level": 10},
    {"name": "Polizeihauptmeister", "level": 11},
    {"name": "Polizeiobermeister", "level": 12},
    {"name": "Polizeimeister", "level": 13},
    {"name": "Polizeikommissar-Anwärter", "level": 14},
    {"name": "Polizeimeister-Anwärter", "level": 15},
]

_LEVELS = {rank["name"]: rank["level"] for rank in POLICE_RANKS}


def rank_level(name: str) -> int:
    """Position of a rank in the ladder; 1 is the highest."""
    return _LEVELS.get(name, UNRANKED_LEVEL)

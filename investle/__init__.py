"""
investle: daily stock guessing game

picks a deterministic secret stock per day from a fixed catalog and
scores guesses attribute by attribute (match / near / miss + arrows).
"""

from .config import Config, DEFAULT_CONFIG
from .catalog import Entity, InvalidCatalog, load_catalog, parse_catalog, resolve_input
from .daily import day_index, daily_permutation, select_secret, secret_for_date
from .rules import AttributeFeedback, Category, Direction, evaluate, is_match
from .session import GameSession, GuessOutcome, Rejection, SessionState, submit_guess

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "Entity",
    "InvalidCatalog",
    "load_catalog",
    "parse_catalog",
    "resolve_input",
    "day_index",
    "daily_permutation",
    "select_secret",
    "secret_for_date",
    "AttributeFeedback",
    "Category",
    "Direction",
    "evaluate",
    "is_match",
    "GameSession",
    "GuessOutcome",
    "Rejection",
    "SessionState",
    "submit_guess",
]

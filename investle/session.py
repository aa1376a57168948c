"""
one player's game: the secret, the guesses so far, and where it stands.

every session owns its own state, so a server can hold one per player.
a session is not safe for concurrent writers.

bad input never raises: submit() hands back a GuessOutcome with a
Rejection reason and leaves the session untouched.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Sequence

from .catalog import Entity, require_catalog, resolve_input
from .config import Config, DEFAULT_CONFIG
from .daily import select_secret
from .rules import ComparisonResult, evaluate, is_match

MAX_GUESSES = DEFAULT_CONFIG.max_guesses


class SessionState(str, Enum):
    CONTINUING = "continuing"
    WON = "won"
    EXHAUSTED = "exhausted"


class Rejection(str, Enum):
    INVALID_INPUT = "invalid_input"
    UNKNOWN_ENTITY = "unknown_entity"
    DUPLICATE_GUESS = "duplicate_guess"
    BUDGET_EXHAUSTED = "budget_exhausted"
    # already won; nothing left to guess
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GuessOutcome:
    """what happened to one submission."""

    accepted: bool
    state: SessionState
    reason: Rejection | None = None
    entity: Entity | None = None
    comparison: ComparisonResult | None = None


class GameSession:
    """
    guess submission state machine.

    CONTINUING → (accepted guess) → CONTINUING | WON | EXHAUSTED.
    WON and EXHAUSTED are terminal.
    """

    def __init__(
        self,
        catalog: Sequence[Entity],
        secret: Entity,
        max_guesses: int = MAX_GUESSES,
    ):
        require_catalog(catalog)
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be >= 1, got {max_guesses}")

        self.catalog = tuple(catalog)
        self.max_guesses = max_guesses
        self._secret = secret
        self._guesses: list[Entity] = []
        self._state = SessionState.CONTINUING

    @classmethod
    def for_day(
        cls,
        catalog: Sequence[Entity],
        now: datetime,
        config: Config = DEFAULT_CONFIG,
    ) -> "GameSession":
        """start a session on the daily secret for `now`."""
        secret = select_secret(catalog, now, config)
        return cls(catalog, secret, max_guesses=config.max_guesses)

    # --- read accessors ---

    @property
    def guesses(self) -> tuple[Entity, ...]:
        return tuple(self._guesses)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_over(self) -> bool:
        return self._state is not SessionState.CONTINUING

    @property
    def guesses_left(self) -> int:
        return self.max_guesses - len(self._guesses)

    @property
    def revealed_secret(self) -> Entity | None:
        """the secret, but only once the game is over."""
        return self._secret if self.is_over else None

    def comparisons(self) -> list[tuple[Entity, ComparisonResult]]:
        """every guess with fresh feedback, oldest first."""
        return [(g, evaluate(g, self._secret)) for g in self._guesses]

    # --- transitions ---

    def _reject(self, reason: Rejection, entity: Entity | None = None) -> GuessOutcome:
        return GuessOutcome(accepted=False, state=self._state, reason=reason, entity=entity)

    def submit(self, raw_input: str) -> GuessOutcome:
        """
        validate and apply one guess.

        guards run in order: blank input, unknown entity, duplicate,
        finished session / full record. the first that fails rejects
        the guess with no state change.
        """
        if not raw_input.strip():
            return self._reject(Rejection.INVALID_INPUT)

        entity = resolve_input(self.catalog, raw_input)
        if entity is None:
            return self._reject(Rejection.UNKNOWN_ENTITY)

        if any(is_match(entity, g) for g in self._guesses):
            return self._reject(Rejection.DUPLICATE_GUESS, entity)

        if self._state is SessionState.WON:
            return self._reject(Rejection.GAME_OVER, entity)
        if len(self._guesses) >= self.max_guesses:
            return self._reject(Rejection.BUDGET_EXHAUSTED, entity)

        self._guesses.append(entity)
        comparison = evaluate(entity, self._secret)

        if is_match(entity, self._secret):
            self._state = SessionState.WON
        elif len(self._guesses) == self.max_guesses:
            self._state = SessionState.EXHAUSTED

        return GuessOutcome(
            accepted=True,
            state=self._state,
            entity=entity,
            comparison=comparison,
        )


def submit_guess(session: GameSession, raw_input: str) -> GuessOutcome:
    """functional spelling of GameSession.submit."""
    return session.submit(raw_input)

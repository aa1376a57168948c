"""
compare a guess against the secret, attribute by attribute.

this is the core investle logic: each attribute gets a match/near/miss
category plus an arrow telling the player whether the secret's value is
higher or lower. the tiers deliberately hide the exact distance.

the rule set is a table (RULES) so each attribute can be audited and
tested on its own.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union

from .catalog import NO_DIVIDEND_EPSILON, Entity


class Category(str, Enum):
    MATCH = "match"
    NEAR = "near"
    MISS = "miss"


class Direction(str, Enum):
    # secret is higher than the guess
    UP = "up"
    # secret is lower than the guess
    DOWN = "down"
    NONE = "none"


@dataclass(frozen=True)
class AttributeFeedback:
    category: Category
    direction: Direction = Direction.NONE


ComparisonResult = dict[str, AttributeFeedback]

# market cap breakpoints in billions: Small | Small/Mid | Mid | Large | Mega
MARKET_CAP_BREAKPOINTS = (2.0, 10.0, 50.0, 200.0)


def direction_of(guess: float, secret: float) -> Direction:
    """arrow points toward the secret."""
    if guess < secret:
        return Direction.UP
    if guess > secret:
        return Direction.DOWN
    return Direction.NONE


def tier(diff: float, close: float, medium: float) -> Category:
    if diff <= close:
        return Category.MATCH
    if diff <= medium:
        return Category.NEAR
    return Category.MISS


def bucket_of(value: float, breakpoints: tuple[float, ...]) -> int:
    """ordinal bucket: how many breakpoints the value has reached."""
    return sum(1 for b in breakpoints if value >= b)


def market_cap_bucket(cap: float) -> int:
    """0 (Small, <2B) … 4 (Mega, >=200B)."""
    return bucket_of(cap, MARKET_CAP_BREAKPOINTS)


# --- rule variants ---


@dataclass(frozen=True)
class ExactMatch:
    """categorical: equal (case-sensitive, as stored) or not."""

    def compare(self, guess: str, secret: str) -> AttributeFeedback:
        return AttributeFeedback(Category.MATCH if guess == secret else Category.MISS)


@dataclass(frozen=True)
class Bucketed:
    """category from bucket distance, direction from raw values."""

    breakpoints: tuple[float, ...]

    def compare(self, guess: float, secret: float) -> AttributeFeedback:
        distance = abs(bucket_of(guess, self.breakpoints) - bucket_of(secret, self.breakpoints))
        if distance == 0:
            category = Category.MATCH
        elif distance == 1:
            category = Category.NEAR
        else:
            category = Category.MISS
        return AttributeFeedback(category, direction_of(guess, secret))


@dataclass(frozen=True)
class AbsoluteThreshold:
    close: float
    medium: float

    def compare(self, guess: float, secret: float) -> AttributeFeedback:
        category = tier(abs(guess - secret), self.close, self.medium)
        return AttributeFeedback(category, direction_of(guess, secret))


@dataclass(frozen=True)
class RelativeThreshold:
    """thresholds are percentages of the secret's value."""

    close_pct: float
    medium_pct: float

    def compare(self, guess: float, secret: float) -> AttributeFeedback:
        scale = abs(secret) / 100.0
        category = tier(abs(guess - secret), self.close_pct * scale, self.medium_pct * scale)
        return AttributeFeedback(category, direction_of(guess, secret))


@dataclass(frozen=True)
class PresenceMagnitude:
    """
    pays / doesn't pay first, then magnitude when both pay.

    no direction hint for this one.
    """

    close: float
    medium: float
    epsilon: float = NO_DIVIDEND_EPSILON

    def compare(self, guess: float, secret: float) -> AttributeFeedback:
        guess_pays = guess > self.epsilon
        secret_pays = secret > self.epsilon

        if not guess_pays and not secret_pays:
            return AttributeFeedback(Category.MATCH)
        if guess_pays != secret_pays:
            return AttributeFeedback(Category.MISS)
        return AttributeFeedback(tier(abs(guess - secret), self.close, self.medium))


Rule = Union[ExactMatch, Bucketed, AbsoluteThreshold, RelativeThreshold, PresenceMagnitude]

# attribute name (Entity field) → rule, in display order
RULES: dict[str, Rule] = {
    "sector": ExactMatch(),
    "country": ExactMatch(),
    "market_cap": Bucketed(MARKET_CAP_BREAKPOINTS),
    "price": RelativeThreshold(close_pct=2.0, medium_pct=8.0),
    "ipo_year": AbsoluteThreshold(close=2, medium=5),
    "one_year_return_pct": AbsoluteThreshold(close=3.0, medium=10.0),
    "dividend_yield_pct": PresenceMagnitude(close=0.5, medium=1.5),
}


def evaluate(
    guess: Entity,
    secret: Entity,
    rules: Mapping[str, Rule] = RULES,
) -> ComparisonResult:
    """
    score a guess against the secret.

    args:
        guess: the guessed entity
        secret: today's secret
        rules: attribute → rule table (default: RULES)

    returns:
        attribute name → AttributeFeedback, in table order
    """
    return {
        attr: rule.compare(getattr(guess, attr), getattr(secret, attr))
        for attr, rule in rules.items()
    }


def is_match(guess: Entity, secret: Entity) -> bool:
    """win condition: same ticker, case-insensitive."""
    return guess.ticker.upper() == secret.ticker.upper()

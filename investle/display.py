"""
text helpers for presenting guesses.

nothing here affects scoring; it's what a frontend (or scripts/play.py)
shows in the guess table, the status line and the final reveal.
"""

from .catalog import Entity
from .rules import ComparisonResult, Direction, market_cap_bucket
from .session import GameSession, GuessOutcome, Rejection, SessionState

BUCKET_LABELS = ("Small", "Small/Mid", "Mid", "Large", "Mega")

ARROWS = {
    Direction.UP: "▲",
    Direction.DOWN: "▼",
    Direction.NONE: "",
}

# column order for the guess table
COLUMNS = (
    "ticker",
    "name",
    "sector",
    "country",
    "market_cap",
    "price",
    "ipo_year",
    "one_year_return_pct",
    "dividend_yield_pct",
)

HEADERS = ("Ticker", "Name", "Sector", "Country", "Mkt Cap", "Price", "IPO", "1Y Ret", "Div")

REJECTION_MESSAGES = {
    Rejection.INVALID_INPUT: "Type a ticker or company name.",
    Rejection.UNKNOWN_ENTITY: "Stock not in Investle universe.",
    Rejection.DUPLICATE_GUESS: "You already guessed that stock.",
    Rejection.BUDGET_EXHAUSTED: "You've used all guesses.",
    Rejection.GAME_OVER: "You already found today's stock.",
}


def bucket_label(index: int) -> str:
    if 0 <= index < len(BUCKET_LABELS):
        return BUCKET_LABELS[index]
    return "?"


def arrow(direction: Direction) -> str:
    return ARROWS[direction]


def format_return(pct: float) -> str:
    sign = "+" if pct >= 0 else ""
    return f"{sign}{pct:.1f}%"


def format_dividend(pct: float) -> str:
    return f"{pct:.2f}%" if pct > 0 else "None"


def format_value(attribute: str, entity: Entity) -> str:
    """the text shown in one cell for `entity`."""
    if attribute == "market_cap":
        return bucket_label(market_cap_bucket(entity.market_cap))
    if attribute == "price":
        return f"${entity.price:,.2f}"
    if attribute == "ipo_year":
        return str(entity.ipo_year)
    if attribute == "one_year_return_pct":
        return format_return(entity.one_year_return_pct)
    if attribute == "dividend_yield_pct":
        return format_dividend(entity.dividend_yield_pct)
    return str(getattr(entity, attribute))


def format_cell(attribute: str, entity: Entity, comparison: ComparisonResult) -> str:
    """value plus arrow; scored cells also carry their category, e.g. `Mid ▲ [near]`."""
    text = format_value(attribute, entity)
    feedback = comparison.get(attribute)
    if feedback is None:
        return text
    mark = arrow(feedback.direction)
    if mark:
        text = f"{text} {mark}"
    return f"{text} [{feedback.category.value}]"


def format_row(entity: Entity, comparison: ComparisonResult) -> list[str]:
    return [format_cell(col, entity, comparison) for col in COLUMNS]


def guesses_counter(session: GameSession) -> str:
    return f"{len(session.guesses)} / {session.max_guesses} guesses used"


def status_message(outcome: GuessOutcome, session: GameSession) -> str:
    """status line after a submission."""
    if not outcome.accepted:
        return REJECTION_MESSAGES[outcome.reason]

    secret = session.revealed_secret
    if outcome.state is SessionState.WON:
        return f"Correct! The mystery stock is {secret.ticker} – {secret.name}."
    if outcome.state is SessionState.EXHAUSTED:
        return f"Out of guesses! The mystery stock was {secret.ticker} – {secret.name}."
    return "Keep going!"


def reveal_text(secret: Entity) -> str:
    lines = [
        f"{secret.ticker} – {secret.name}",
        f"Sector: {secret.sector}",
        f"Country: {secret.country}, Market cap: {secret.market_cap:g}B",
        (
            f"IPO Year: {secret.ipo_year}, "
            f"1Y Return: {format_return(secret.one_year_return_pct)}, "
            f"Dividend yield: {format_dividend(secret.dividend_yield_pct)}"
        ),
    ]
    return "\n".join(lines)

"""
Domain Models for the Theater Statement Engine

These dataclasses provide type-safe representations of all business entities.
All monetary values are integer minor units (cents).
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from collections.abc import Iterator, Mapping

from .errors import UnknownPlayTypeError

# =============================================================================
# INPUT MODELS
# =============================================================================


class PlayType(str, Enum):
    """The closed set of genres a play can be priced as."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"
    HISTORY = "history"
    PASTORAL = "pastoral"

    @classmethod
    def parse(cls, value, play_id: str | None = None) -> "PlayType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownPlayTypeError(value, play_id) from None


@dataclass(frozen=True)
class Play:
    """A play in the catalog."""

    name: str
    type: PlayType

    @classmethod
    def from_dict(cls, data: dict, play_id: str | None = None) -> "Play":
        return cls(
            name=data["name"],
            type=PlayType.parse(data["type"], play_id),
        )


@dataclass(frozen=True)
class Performance:
    """A single performance line on an invoice."""

    play_id: str
    audience: int

    @classmethod
    def from_dict(cls, data: dict) -> "Performance":
        # Accept both the camelCase key and snake_case
        play_id = data["playID"] if "playID" in data else data["play_id"]
        return cls(play_id=play_id, audience=data["audience"])


@dataclass(frozen=True)
class Invoice:
    """A customer's invoice. Performance order is statement line order."""

    customer: str
    performances: tuple[Performance, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Invoice":
        return cls(
            customer=data["customer"],
            performances=tuple(Performance.from_dict(p) for p in data.get("performances", [])),
        )


class PlayCatalog(Mapping):
    """Read-only mapping from play id to Play."""

    def __init__(self, plays: Mapping[str, Play] | None = None):
        self._plays = MappingProxyType(dict(plays or {}))

    def __getitem__(self, play_id: str) -> Play:
        return self._plays[play_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._plays)

    def __len__(self) -> int:
        return len(self._plays)

    def __repr__(self) -> str:
        return f"PlayCatalog({dict(self._plays)!r})"

    @classmethod
    def from_dict(cls, data: dict) -> "PlayCatalog":
        """Load a catalog, rejecting unsupported play types up front."""
        return cls({play_id: Play.from_dict(play, play_id) for play_id, play in data.items()})


@dataclass(frozen=True)
class StatementInput:
    """Complete input for generating a statement."""

    invoice: Invoice
    catalog: PlayCatalog

    @classmethod
    def from_dict(cls, data: dict) -> "StatementInput":
        return cls(
            invoice=Invoice.from_dict(data["invoice"]),
            catalog=PlayCatalog.from_dict(data["plays"]),
        )


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass(frozen=True)
class LineResult:
    """Priced result for one performance."""

    play_name: str
    charge: int
    audience: int
    credits: int


@dataclass(frozen=True)
class StatementTotals:
    """Running totals over an invoice."""

    total_amount: int = 0
    total_credits: int = 0

    def __add__(self, line: LineResult) -> "StatementTotals":
        if not isinstance(line, LineResult):
            return NotImplemented
        return StatementTotals(
            total_amount=self.total_amount + line.charge,
            total_credits=self.total_credits + line.credits,
        )


@dataclass(frozen=True)
class StatementResult:
    """Final output of statement generation."""

    customer: str
    lines: tuple[LineResult, ...]
    totals: StatementTotals
    text: str
    summary: dict = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict:
        return {**self.summary, "statement": self.text}

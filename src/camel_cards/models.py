"""Data models for the camel cards ranking pipeline."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

HAND_SIZE = 5


class Rank(str, Enum):
    """A card rank, declared weakest first."""

    JOKER = "J"  # Wildcard; there is no separate Jack
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    WILDCARD = "J"

    @property
    def strength(self) -> int:
        """Position in the strength order (0 = weakest)."""
        return _RANK_ORDER.index(self)

    @property
    def is_wildcard(self) -> bool:
        return self is Rank.WILDCARD

    @classmethod
    def from_symbol(cls, symbol: str) -> "Rank":
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown rank symbol: {symbol!r}") from None


_RANK_ORDER = list(Rank)


class CombinationTier(int, Enum):
    """Hand category, weakest first."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_KIND = 5
    FIVE_OF_KIND = 6

    @property
    def label(self) -> str:
        return _TIER_LABELS[self]


_TIER_LABELS = {
    CombinationTier.HIGH_CARD: "High Card",
    CombinationTier.PAIR: "Pair",
    CombinationTier.TWO_PAIR: "Two Pair",
    CombinationTier.THREE_OF_KIND: "Three of a Kind",
    CombinationTier.FULL_HOUSE: "Full House",
    CombinationTier.FOUR_OF_KIND: "Four of a Kind",
    CombinationTier.FIVE_OF_KIND: "Five of a Kind",
}


class Hand(BaseModel):
    """Five ranks in the order they were dealt."""

    model_config = ConfigDict(frozen=True)

    ranks: tuple[Rank, ...] = Field(
        min_length=HAND_SIZE, max_length=HAND_SIZE, description="Ranks in dealt order"
    )

    @classmethod
    def from_string(cls, symbols: str) -> "Hand":
        """Build a hand from its symbols, e.g. ``"32T3K"``."""
        return cls(ranks=tuple(Rank.from_symbol(s) for s in symbols))

    @property
    def strengths(self) -> tuple[int, ...]:
        """Rank strengths used for the position-by-position tie-break."""
        return tuple(rank.strength for rank in self.ranks)

    @property
    def wildcards(self) -> int:
        return sum(1 for rank in self.ranks if rank.is_wildcard)

    def __str__(self) -> str:
        return "".join(rank.value for rank in self.ranks)


class Entry(BaseModel):
    """A hand together with its wager."""

    model_config = ConfigDict(frozen=True)

    hand: Hand
    wager: int = Field(ge=0, description="Amount bid on this hand")

    # Always derived from the hand, once at construction time
    _tier: CombinationTier = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        from .evaluator import evaluate

        self._tier = evaluate(self.hand)

    @property
    def tier(self) -> CombinationTier:
        """Combination tier of the hand."""
        return self._tier

    def get_display_text(self) -> str:
        """Get human-readable entry content."""
        return f"{self.hand} {self.wager} ({self.tier.label})"

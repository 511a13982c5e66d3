"""Order entries by hand strength and pay out wagers by position."""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..models import CombinationTier, Entry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Standing:
    """An entry's final place in the ranking."""

    position: int
    entry: Entry

    @property
    def payout(self) -> int:
        return self.entry.wager * self.position


def compute_sort_key(entry: Entry) -> tuple[int, tuple[int, ...]]:
    """
    Compute the ordering key for an entry.

    Tier decides first; equal tiers fall back to comparing rank strengths
    position by position.
    """
    return (entry.tier, entry.hand.strengths)


def rank_entries(entries: Iterable[Entry]) -> list[Entry]:
    """
    Sort entries from weakest to strongest.

    Args:
        entries: Entries to rank

    Returns:
        New list sorted ascending; identical hands keep their input order
    """
    return sorted(entries, key=compute_sort_key)


def total_winnings(ranked: Sequence[Entry]) -> int:
    """Sum each wager times its 1-based position in the ranked sequence."""
    return sum(entry.wager * position for position, entry in enumerate(ranked, start=1))


class HandRanker:
    """Handles ranking entries and summarising the results."""

    def rank(self, entries: Iterable[Entry]) -> list[Entry]:
        ranked = rank_entries(entries)
        logger.debug("Ranked %d entries", len(ranked))
        return ranked

    def total_winnings(self, ranked: Sequence[Entry]) -> int:
        return total_winnings(ranked)

    def standings(self, entries: Iterable[Entry]) -> list[Standing]:
        """
        Rank entries and attach their positions.

        Returns:
            Standings ordered weakest (position 1) to strongest
        """
        return [
            Standing(position=position, entry=entry)
            for position, entry in enumerate(self.rank(entries), start=1)
        ]

    def get_tier_distribution(self, entries: Sequence[Entry]) -> dict:
        """
        Get statistics about how entries spread over the tiers.

        Returns dict with per-tier counts (weakest first), the total number
        of entries and the total wager.
        """
        tiers = {tier.label: 0 for tier in CombinationTier}
        for entry in entries:
            tiers[entry.tier.label] += 1

        return {
            "total": len(entries),
            "total_wager": sum(e.wager for e in entries),
            "tiers": tiers,
        }

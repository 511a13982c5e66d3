"""Classify hands into combination tiers, with wildcard substitution."""

import logging
from collections import Counter
from typing import Sequence

from .models import HAND_SIZE, CombinationTier, Hand, Rank

logger = logging.getLogger(__name__)


class InvalidHandError(ValueError):
    """A hand reached the evaluator without exactly five ranks."""

    def __init__(self, size: int):
        super().__init__(f"A hand must have exactly {HAND_SIZE} ranks, got {size}")
        self.size = size


def count_ranks(ranks: Sequence[Rank]) -> Counter:
    """Count each rank, keyed in order of first appearance."""
    return Counter(ranks)


def merge_wildcards(counts: Counter) -> Counter:
    """
    Fold wildcard occurrences into the most frequent other rank.

    When several ranks share the highest count, the first one encountered in
    the hand absorbs the wildcards. Any of them gives the same count multiset.

    Returns:
        A new Counter without the wildcard key, empty if the hand was all
        wildcards.
    """
    merged = Counter(counts)
    wildcards = merged.pop(Rank.WILDCARD, 0)
    if wildcards and merged:
        target = max(merged, key=merged.__getitem__)
        merged[target] += wildcards
    return merged


def classify_counts(counts: Sequence[int]) -> CombinationTier:
    """Map the occurrence counts of a five-card hand to a tier."""
    distinct = len(counts)
    if distinct <= 1:
        return CombinationTier.FIVE_OF_KIND
    if distinct == 2:
        if sorted(counts) == [2, 3]:
            return CombinationTier.FULL_HOUSE
        return CombinationTier.FOUR_OF_KIND
    if distinct == 3:
        if 3 in counts:
            return CombinationTier.THREE_OF_KIND
        return CombinationTier.TWO_PAIR
    if distinct == 4:
        return CombinationTier.PAIR
    return CombinationTier.HIGH_CARD


def evaluate(hand: Hand) -> CombinationTier:
    """
    Determine the best tier a hand can reach.

    Args:
        hand: Hand to classify

    Returns:
        The combination tier, counting wildcards toward the strongest group

    Raises:
        InvalidHandError: If the hand does not hold exactly five ranks
    """
    if len(hand.ranks) != HAND_SIZE:
        raise InvalidHandError(len(hand.ranks))

    counts = merge_wildcards(count_ranks(hand.ranks))
    tier = classify_counts(list(counts.values()))
    logger.debug("Evaluated %s as %s", hand, tier.label)
    return tier


class HandEvaluator:
    """Evaluates hands, remembering results per hand."""

    def __init__(self):
        self._cache: dict[str, CombinationTier] = {}

    def evaluate(self, hand: Hand) -> CombinationTier:
        key = str(hand)
        if key not in self._cache:
            self._cache[key] = evaluate(hand)
        return self._cache[key]

    def describe(self, hand: Hand) -> dict:
        """
        Explain how a hand was classified.

        Returns dict with the hand, wildcard count, the rank counts after
        wildcard merging (as symbols) and the resulting tier.
        """
        merged = merge_wildcards(count_ranks(hand.ranks))
        return {
            "hand": str(hand),
            "wildcards": hand.wildcards,
            "counts": {rank.value: count for rank, count in merged.most_common()},
            "tier": self.evaluate(hand),
        }

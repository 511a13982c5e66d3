"""Hand ranking and payouts."""

from .hand_ranker import HandRanker, Standing, rank_entries, total_winnings

__all__ = ["HandRanker", "Standing", "rank_entries", "total_winnings"]

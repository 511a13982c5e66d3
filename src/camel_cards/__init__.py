"""Camel Cards - rank wildcard poker hands and total up the winnings."""

__version__ = "0.1.0"

from .evaluator import HandEvaluator, InvalidHandError, evaluate
from .models import CombinationTier, Entry, Hand, Rank
from .parser import ParseError, load_entries, parse_entries, parse_entry
from .ranker import HandRanker, Standing, rank_entries, total_winnings

__all__ = [
    # Parser
    "ParseError",
    "load_entries",
    "parse_entries",
    "parse_entry",
    # Evaluator
    "HandEvaluator",
    "InvalidHandError",
    "evaluate",
    # Ranker
    "HandRanker",
    "Standing",
    "rank_entries",
    "total_winnings",
    # Models
    "CombinationTier",
    "Entry",
    "Hand",
    "Rank",
]

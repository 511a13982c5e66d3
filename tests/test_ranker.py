"""Tests for hand ranking and winnings."""

from camel_cards.models import CombinationTier, Entry, Hand
from camel_cards.ranker import HandRanker, rank_entries, total_winnings

EXAMPLE = [
    ("32T3K", 765),
    ("T55J5", 684),
    ("KK677", 28),
    ("KTJJT", 220),
    ("QQQJA", 483),
]


def create_test_entry(symbols: str, wager: int = 1) -> Entry:
    """Helper to create test entries."""
    return Entry(hand=Hand.from_string(symbols), wager=wager)


def create_example_entries() -> list[Entry]:
    return [create_test_entry(symbols, wager) for symbols, wager in EXAMPLE]


def test_rank_entries_example():
    """Test the example entries are ordered weakest to strongest."""
    ranked = rank_entries(create_example_entries())

    assert [str(e.hand) for e in ranked] == ["32T3K", "KK677", "T55J5", "QQQJA", "KTJJT"]


def test_total_winnings_example():
    """Test the example total."""
    ranked = rank_entries(create_example_entries())

    assert total_winnings(ranked) == 5905


def test_total_winnings_empty():
    """Test ranking nothing wins nothing."""
    assert total_winnings(rank_entries([])) == 0


def test_tier_beats_card_order():
    """Test a higher tier wins regardless of card strength."""
    ranked = rank_entries([
        create_test_entry("22345"),  # Pair of twos
        create_test_entry("AKQT9"),  # High card
    ])

    assert str(ranked[0].hand) == "AKQT9"
    assert str(ranked[1].hand) == "22345"


def test_tie_break_by_first_differing_card():
    """Test equal tiers compare card by card."""
    ranked = rank_entries([
        create_test_entry("KTJJT"),
        create_test_entry("KK677"),
        create_test_entry("33332"),
        create_test_entry("2AAAA"),
    ])

    # 33332 and 2AAAA are both four of a kind; 3 beats 2 in the first slot
    assert [str(e.hand) for e in ranked] == ["KK677", "2AAAA", "33332", "KTJJT"]


def test_wildcard_is_weakest_in_tie_break():
    """Test the wildcard loses to a two when tiers are equal."""
    ranked = rank_entries([
        create_test_entry("2222J"),
        create_test_entry("J2222"),
    ])

    assert str(ranked[0].hand) == "J2222"


def test_rank_entries_is_stable_for_duplicates():
    """Test identical hands keep their input order."""
    first = create_test_entry("32T3K", 1)
    second = create_test_entry("32T3K", 2)

    ranked = rank_entries([first, second])

    assert [e.wager for e in ranked] == [1, 2]


def test_rank_entries_idempotent():
    """Test re-ranking a ranked list changes nothing."""
    ranked = rank_entries(create_example_entries())

    assert rank_entries(ranked) == ranked


def test_rank_entries_does_not_modify_input():
    """Test ranking returns a new list."""
    entries = create_example_entries()
    rank_entries(entries)

    assert [str(e.hand) for e in entries] == [symbols for symbols, _ in EXAMPLE]


class TestHandRanker:
    """Tests for the HandRanker class."""

    def test_rank_and_total(self):
        """Test ranking and totalling through the class."""
        ranker = HandRanker()
        ranked = ranker.rank(create_example_entries())

        assert ranker.total_winnings(ranked) == 5905

    def test_standings(self):
        """Test positions and payouts."""
        standings = HandRanker().standings(create_example_entries())

        assert [s.position for s in standings] == [1, 2, 3, 4, 5]
        assert str(standings[0].entry.hand) == "32T3K"
        assert standings[0].payout == 765
        assert standings[4].payout == 220 * 5
        assert sum(s.payout for s in standings) == 5905

    def test_standings_empty(self):
        """Test standings for no entries."""
        assert HandRanker().standings([]) == []

    def test_tier_distribution(self):
        """Test tier distribution calculation."""
        stats = HandRanker().get_tier_distribution(create_example_entries())

        assert stats["total"] == 5
        assert stats["total_wager"] == 765 + 684 + 28 + 220 + 483
        assert stats["tiers"][CombinationTier.FOUR_OF_KIND.label] == 3
        assert stats["tiers"][CombinationTier.TWO_PAIR.label] == 1
        assert stats["tiers"][CombinationTier.PAIR.label] == 1
        assert stats["tiers"][CombinationTier.HIGH_CARD.label] == 0
        assert list(stats["tiers"])[0] == "High Card"

    def test_tier_distribution_empty(self):
        """Test tier distribution with no entries."""
        stats = HandRanker().get_tier_distribution([])

        assert stats["total"] == 0
        assert stats["total_wager"] == 0
        assert all(count == 0 for count in stats["tiers"].values())

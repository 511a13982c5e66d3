"""Parse puzzle input lines into ranked-game entries."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from ..models import HAND_SIZE, Entry, Hand, Rank

logger = logging.getLogger(__name__)

RANK_SYMBOLS = frozenset(rank.value for rank in Rank)


class ParseError(ValueError):
    """Error parsing an input line into an entry."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


def parse_hand(symbols: str) -> Hand:
    """
    Parse a five-symbol hand such as ``"32T3K"``.

    Raises:
        ParseError: If the length is wrong or a symbol is not a rank
    """
    if len(symbols) != HAND_SIZE:
        raise ParseError(f"Hand '{symbols}' must have exactly {HAND_SIZE} cards")

    unknown = [s for s in symbols if s not in RANK_SYMBOLS]
    if unknown:
        raise ParseError(f"Hand '{symbols}' contains unknown card '{unknown[0]}'")

    return Hand.from_string(symbols)


def parse_wager(text: str) -> int:
    """Parse a non-negative integer wager."""
    if not text.isascii() or not text.isdigit():
        raise ParseError(f"Wager '{text}' must be a non-negative integer")
    return int(text)


def parse_entry(line: str, line_number: Optional[int] = None) -> Entry:
    """
    Parse a single ``<hand> <wager>`` line.

    Args:
        line: Input line, e.g. "32T3K 765"
        line_number: 1-based line number, used in error messages

    Returns:
        Entry with its tier already evaluated

    Raises:
        ParseError: If the line is malformed
    """
    parts = line.split()
    if len(parts) != 2:
        raise ParseError(
            f"Expected '<hand> <wager>', got '{line.strip()}'", line_number, line
        )

    hand_str, wager_str = parts
    try:
        return Entry(hand=parse_hand(hand_str), wager=parse_wager(wager_str))
    except ParseError as e:
        raise ParseError(str(e), line_number, line) from None
    except ValidationError as e:
        raise ParseError(f"Invalid entry '{line.strip()}': {e}", line_number, line) from e


def parse_entries(lines: Iterable[str]) -> list[Entry]:
    """
    Parse every non-blank line.

    The first malformed line aborts the whole batch.
    """
    entries = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        entries.append(parse_entry(line, line_number))
    return entries


def load_entries(file_path: str | Path) -> list[Entry]:
    """
    Load all entries from a puzzle input file.

    Args:
        file_path: Path to the input text file

    Returns:
        Entries in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ParseError: If the file is not UTF-8 text or any line is malformed
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Input file not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{file_path.name} is not valid UTF-8 text (byte {e.start})") from e

    entries = parse_entries(text.splitlines())
    logger.debug("Loaded %d entries from %s", len(entries), file_path)
    return entries

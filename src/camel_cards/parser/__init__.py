"""Puzzle input parsing."""

from .entry_parser import ParseError, load_entries, parse_entries, parse_entry

__all__ = ["ParseError", "load_entries", "parse_entries", "parse_entry"]

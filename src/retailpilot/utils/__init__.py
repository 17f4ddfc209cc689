"""Utility functions for retailpilot."""

from retailpilot.utils.date_parser import parse_date, parse_timestamp
from retailpilot.utils.amount_parser import parse_amount

__all__ = ["parse_date", "parse_timestamp", "parse_amount"]

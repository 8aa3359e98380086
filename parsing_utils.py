"""Utility functions for splitting scale records and classifying their tokens."""

import re

_LEADING_DIGITS = re.compile(r"[0-9]+")


def _remove_whitespace(text: str) -> str:
    """Remove every whitespace character from text, not only at the edges.

    Precondition:
        text is a non-None string

    Postcondition:
        returns text with all whitespace characters removed
    """
    return "".join(text.split())


def split_record(line: str, delimiter: str = ",") -> tuple[str, str, str]:
    """Split a 'name,left,right' record into its three whitespace-free fields.

    Precondition:
        line is a non-None string
        delimiter is a single character

    Postcondition:
        returns (name, left, right) with all whitespace removed from each
        fields missing from line are returned as empty strings
        fields after the third are ignored

    Args:
        line: record text such as "  Scale1 , 3 , Scale2  "
        delimiter: field separator

    Returns:
        tuple of (name, left_token, right_token)
    """
    fields = [_remove_whitespace(part) for part in line.split(delimiter)[:3]]
    fields += [""] * (3 - len(fields))
    return fields[0], fields[1], fields[2]


def is_weight_token(token: str) -> bool:
    """A token is a weight when it is non-empty and starts with a decimal digit."""
    return bool(token) and "0" <= token[0] <= "9"


def parse_weight(token: str) -> int:
    """Parse the leading run of digits of a weight token.

    Anything after the leading digits is ignored, so "12kg" parses as 12.

    Precondition:
        is_weight_token(token) is True

    Postcondition:
        returns a non-negative int

    Args:
        token: weight token

    Returns:
        integer value of the leading digits

    Raises:
        ValueError: if token does not start with a digit
    """
    match = _LEADING_DIGITS.match(token)
    if match is None:
        raise ValueError(f"Invalid weight '{token}'. Must start with a digit.")
    return int(match.group())

"""Build the scale reference graph from 'name,left,right' records."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from parsing_utils import is_weight_token, parse_weight, split_record
from scales import DEFAULT_SCALE_SELF_MASS, Pan, ScaleCollection, ScaleRef, Side

_LOGGER = logging.getLogger("scalebalancer")


@dataclass
class RejectedLine:
    """A record that was skipped because it is not a valid scale definition"""
    line_number: int  # 0-based, counting every physical line
    text: str


@dataclass
class ParseResult:
    """Scales built from the input plus the lines that were rejected"""
    scales: ScaleCollection
    rejected: List[RejectedLine] = field(default_factory=list)


def _is_skipped(line: str, comment_prefix: str) -> bool:
    return not line or line.startswith(comment_prefix)


def _is_valid_record(name: str, left: str, right: str) -> bool:
    """A record needs a name and must not reference itself on either side."""
    return bool(name) and left != name and right != name


def _assign_side(scales: ScaleCollection, side: Side, token: str) -> Side:
    """Return the side described by token, or side unchanged if token is empty.

    Precondition:
        token contains no whitespace

    Postcondition:
        weight tokens produce a new Pan
        name tokens produce a ScaleRef, creating the named scale if it is new
        empty tokens return side unchanged
    """
    if is_weight_token(token):
        return Pan(mass=parse_weight(token))
    if token:
        scales.get_or_create(token)
        return ScaleRef(token)
    return side


def parse_scales(
    lines: Iterable[str],
    self_mass: int = DEFAULT_SCALE_SELF_MASS,
    comment_prefix: str = "#",
    delimiter: str = ",",
) -> ParseResult:
    """Parse scale records into an ordered collection of linked scales.

    Precondition:
        lines yields strings, with or without trailing line terminators
        self_mass >= 0

    Postcondition:
        blank lines and lines starting with comment_prefix are skipped silently
        invalid or self-referencing records are logged, recorded in
        result.rejected and leave the collection untouched
        scales appear in the order their names were first mentioned
        a redefined scale keeps its position; its sides take the new tokens

    Args:
        lines: iterable of raw lines, e.g. an open file
        self_mass: starting mass of every scale
        comment_prefix: lines starting with this are comments
        delimiter: field separator within a record

    Returns:
        ParseResult holding the scales and the rejected lines
    """
    result = ParseResult(ScaleCollection(self_mass))
    scales = result.scales

    for line_number, raw_line in enumerate(lines):
        line = raw_line.rstrip("\r\n")
        if _is_skipped(line, comment_prefix):
            continue

        name, left, right = split_record(line, delimiter)
        if not _is_valid_record(name, left, right):
            _LOGGER.warning('Invalid line %s: "%s"', line_number, line)
            result.rejected.append(RejectedLine(line_number, line))
            continue

        scale = scales.get_or_create(name)
        scale.left = _assign_side(scales, scale.left, left)
        scale.right = _assign_side(scales, scale.right, right)

    _LOGGER.info("Parsed %s scales (%s lines rejected)", len(scales), len(result.rejected))
    return result

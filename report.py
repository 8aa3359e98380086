"""Format balanced scales as 'name,left_balance,right_balance' records."""

import logging
from typing import TextIO

from scales import Scale, ScaleCollection

_LOGGER = logging.getLogger("scalebalancer")


def format_record(scale: Scale, scales: ScaleCollection) -> str:
    """Format one scale's record without a line terminator.

    The values are the balance masses of the scale's own sides as resolved
    through scales, i.e. the counterweight placed on each side of this scale.
    """
    left = scales.resolve(scale.left)
    right = scales.resolve(scale.right)
    return f"{scale.name},{left.balance_mass},{right.balance_mass}"


def report_changes(scales: ScaleCollection) -> list[str]:
    """Records for every scale in first-mention order."""
    return [format_record(scale, scales) for scale in scales]


def write_report(stream: TextIO, scales: ScaleCollection) -> None:
    """Write one newline-terminated record per scale to stream.

    Precondition:
        scales has been balanced
        stream is open for writing text

    Postcondition:
        len(scales) lines are written in first-mention order
    """
    for record in report_changes(scales):
        stream.write(record + "\n")
    _LOGGER.info("Reported %s scales", len(scales))

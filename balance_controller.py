"""Controller for scale balancing runs - no I/O beyond explicit load/save calls"""

import io
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from balancer import balance_each_scale
from report import report_changes, write_report
from scale_graph import design_scale_graph
from scale_parser import RejectedLine, parse_scales
from scales import DEFAULT_SCALE_SELF_MASS, ScaleCollection

_LOGGER = logging.getLogger("scalebalancer")


@dataclass
class BalanceConfig:
    """Configuration for parsing and balancing"""
    scale_self_mass: int = DEFAULT_SCALE_SELF_MASS
    comment_prefix: str = "#"
    delimiter: str = ","

    def validate(self) -> None:
        """Check that the configuration can be used for a run.

        Raises:
            ValueError: if any setting is out of range
        """
        if self.scale_self_mass < 0:
            raise ValueError(f"Invalid self-mass {self.scale_self_mass}. Must be zero or more.")
        if not self.comment_prefix:
            raise ValueError("Comment prefix must not be empty")
        if len(self.delimiter) != 1 or self.delimiter.isspace() or self.delimiter.isdigit():
            raise ValueError(
                f"Invalid delimiter '{self.delimiter}'. Must be one non-whitespace, non-digit character."
            )


@dataclass
class BalanceOutcome:
    """Result of one parse-and-balance run"""
    scales: ScaleCollection
    records: List[str]
    rejected: List[RejectedLine] = field(default_factory=list)


class BalanceController:
    """Stateful controller holding the input text and the latest balanced result"""

    def __init__(self, config: Optional[BalanceConfig] = None):
        """Initialize controller with empty input.

        Postcondition:
            self.config is the given config or a default BalanceConfig
            input text is empty
            no outcome has been generated
        """
        self.config = config or BalanceConfig()
        self._input_text = ""
        self._current_outcome: Optional[BalanceOutcome] = None

    # ========== State ==========

    def get_input_text(self) -> str:
        return self._input_text

    def set_input_text(self, text: str):
        """Replace the input text and discard any previous outcome"""
        self._input_text = text
        self._current_outcome = None

    def get_current_outcome(self) -> Optional[BalanceOutcome]:
        return self._current_outcome

    # ========== Actions ==========

    def load_file(self, filepath: str):
        """Load input text from a file

        Args:
            filepath: Path to the scale table

        Raises:
            OSError: If the file cannot be read
        """
        with open(filepath, "r", encoding="utf-8") as f:
            self.set_input_text(f.read())

        _LOGGER.info("Scales loaded from %s", os.path.basename(filepath))

    def generate(self) -> BalanceOutcome:
        """Parse the current input text and balance every scale.

        Precondition:
            self.config is valid

        Postcondition:
            a fresh collection is parsed from the input text, so repeated calls
            never balance the same scales twice
            self._current_outcome holds the new outcome

        Returns:
            BalanceOutcome with scales, output records and rejected lines

        Raises:
            ValueError: if the configuration is invalid or scales form a cycle
        """
        self.config.validate()

        parsed = parse_scales(
            io.StringIO(self._input_text),
            self_mass=self.config.scale_self_mass,
            comment_prefix=self.config.comment_prefix,
            delimiter=self.config.delimiter,
        )
        balance_each_scale(parsed.scales)

        outcome = BalanceOutcome(
            scales=parsed.scales,
            records=report_changes(parsed.scales),
            rejected=parsed.rejected,
        )
        self._current_outcome = outcome
        return outcome

    def _outcome(self) -> BalanceOutcome:
        if self._current_outcome is None:
            return self.generate()
        return self._current_outcome

    def get_report_lines(self) -> List[str]:
        """Output records, generating them first if needed"""
        return self._outcome().records

    def get_graphviz_source(self) -> str:
        """Graphviz source of the balanced network, generating it first if needed"""
        return design_scale_graph(self._outcome().scales).source

    def save_report(self, filepath: str):
        """Write the output records to a file

        Raises:
            OSError: If the file cannot be written
        """
        outcome = self._outcome()
        with open(filepath, "w", encoding="utf-8") as f:
            write_report(f, outcome.scales)

        _LOGGER.info("Report saved to %s", os.path.basename(filepath))

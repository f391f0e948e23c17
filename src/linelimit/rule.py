"""The line length limit rule, as seen by a host lint pipeline."""

from collections.abc import Mapping
from pathlib import Path

from linelimit.config import resolve_configuration
from linelimit.constants import (
    DEFAULT_MAX_LENGTH,
    RULE_DESCRIPTION_FMT,
    RULE_NAME,
    RULE_PRIORITY,
    RULE_SUMMARY_FMT,
)
from linelimit.mode import ExecutionMode
from linelimit.scanner import LongLine, annotate_long_lines, has_long_line
from linelimit.tokens import FragmentSequence


class LineLengthLimit:
    """Flags lines longer than a configurable maximum.

    Never fixes anything: in a check / dry-run pass each long line gets a
    ``# Line too long`` comment appended, otherwise ``fix`` does nothing.
    """

    name = RULE_NAME
    priority = RULE_PRIORITY

    def __init__(self, configuration: Mapping[str, object] | None = None) -> None:
        self._max_length = DEFAULT_MAX_LENGTH
        if configuration is not None:
            self.configure(configuration)

    def configure(self, configuration: Mapping[str, object]) -> None:
        """Resolve and apply a configuration mapping.

        Raises:
            ConfigurationError: On unknown options or an invalid max_length.
                The previous value is kept.
        """
        self._max_length = resolve_configuration(configuration)

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def summary(self) -> str:
        return RULE_SUMMARY_FMT.format(max_length=self._max_length)

    @property
    def description(self) -> str:
        return RULE_DESCRIPTION_FMT.format(max_length=self._max_length)

    def is_risky(self) -> bool:
        """Never risky, it does not remove code."""
        return False

    def supports(self, path: Path) -> bool:
        """Applies to every file."""
        return True

    def is_candidate(self, tokens: FragmentSequence) -> bool:
        return has_long_line(tokens, self._max_length)

    def fix(
        self, path: Path, tokens: FragmentSequence, mode: ExecutionMode
    ) -> list[LongLine]:
        """Annotate long lines when mode allows it; otherwise a no-op."""
        if not mode.annotate:
            return []
        return annotate_long_lines(tokens, self._max_length)

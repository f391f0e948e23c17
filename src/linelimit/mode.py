"""Execution mode: whether a pass may annotate the fragments it scans."""

from collections.abc import Sequence
from dataclasses import dataclass

from linelimit.constants import CHECK_COMMAND, DRY_RUN_FLAG


@dataclass(frozen=True)
class ExecutionMode:
    """How the current pass was invoked.

    ``annotate`` is true for check / dry-run passes, where long lines get a
    marker appended. A normal pass leaves the fragments untouched.
    """

    annotate: bool = False

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "ExecutionMode":
        """Derive the mode from command line arguments.

        A ``check`` command or a ``--dry-run`` flag anywhere in argv enables
        annotation.
        """
        return cls(annotate=CHECK_COMMAND in argv or DRY_RUN_FLAG in argv)


CHECK = ExecutionMode(annotate=True)
NORMAL = ExecutionMode(annotate=False)

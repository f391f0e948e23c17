"""Line length scanning over a fragment sequence.

Detection and annotation share one walk. The walk keeps a running length
of the line being assembled across fragment boundaries; a line is only
measured once a line break inside some fragment closes it, so the final
line of a text without a trailing break is never checked.
"""

import logging
from dataclasses import dataclass

from linelimit.constants import LINE_BREAK, MARKER_SEPARATOR, MARKER_TEXT
from linelimit.tokens import Fragment, FragmentKind, FragmentSequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LongLine:
    """A line longer than the configured maximum."""

    line_number: int  # 1-indexed
    length: int


def marker_fragments() -> list[Fragment]:
    """Build the whitespace + comment pair inserted after a long line."""
    return [
        Fragment(FragmentKind.WHITESPACE, MARKER_SEPARATOR),
        Fragment(FragmentKind.COMMENT, MARKER_TEXT),
    ]


def _annotate(
    tokens: FragmentSequence, index: int, segments: list[str], offending: list[int]
) -> int:
    """Mark offending segments of the fragment at index.

    Returns the number of fragments inserted before it.
    """
    if offending == [0] and not segments[0]:
        # The long line ended with the previous fragment.
        tokens.insert_at(index, marker_fragments())
        return 2

    rebuilt = list(segments)
    for position in offending:
        rebuilt[position] += MARKER_SEPARATOR + MARKER_TEXT
    tokens.replace_at(
        index, Fragment(tokens[index].kind, LINE_BREAK.join(rebuilt))
    )
    return 0


def scan(
    tokens: FragmentSequence,
    max_length: int,
    annotate: bool = False,
    first_only: bool = False,
) -> list[LongLine]:
    """Walk the fragments and collect every line longer than max_length.

    Args:
        tokens: Fragments to scan, in order.
        max_length: Longest allowed line, in characters.
        annotate: Append a marker after each long line, mutating tokens.
            Markers are added after measuring, so they never count toward
            the length of the line they flag.
        first_only: Stop at the first long line.

    Returns:
        Long lines in the order they were found.
    """
    found: list[LongLine] = []
    line_length = 0
    line_number = 1
    index = 0

    while index < len(tokens):
        content = tokens[index].content
        if LINE_BREAK not in content:
            line_length += len(content)
            index += 1
            continue

        segments = content.split(LINE_BREAK)
        # Every segment but the last is terminated by a break.
        lengths = [line_length + len(segments[0])]
        lengths.extend(len(segment) for segment in segments[1:-1])
        offending = [i for i, length in enumerate(lengths) if length > max_length]

        for position in offending:
            found.append(LongLine(line_number + position, lengths[position]))
            if first_only:
                return found

        if offending and annotate:
            index += _annotate(tokens, index, segments, offending)

        line_number += len(segments) - 1
        line_length = len(segments[-1])
        index += 1

    logger.debug("Scanned %d line(s), %d too long", line_number, len(found))
    return found


def find_long_lines(tokens: FragmentSequence, max_length: int) -> list[LongLine]:
    """Report every long line without touching the fragments."""
    return scan(tokens, max_length)


def has_long_line(tokens: FragmentSequence, max_length: int) -> bool:
    """Check whether any closed line is longer than max_length."""
    return bool(scan(tokens, max_length, first_only=True))


def annotate_long_lines(tokens: FragmentSequence, max_length: int) -> list[LongLine]:
    """Append a marker after every long line, in place."""
    found = scan(tokens, max_length, annotate=True)
    if found:
        logger.debug("Annotated %d long line(s)", len(found))
    return found

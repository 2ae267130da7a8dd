"""Normalization of SVG path data into absolute path commands.

The path mini-language is parsed by fontTools' SVG path parser, which
resolves relative coordinates, H/V shorthand, smooth-curve reflection and
elliptical arcs (as cubic segments) while drawing into a RecordingPen. The
recording is then turned into ``PathCommand`` values.
"""

import re
from typing import Any

from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path import parse_path

from svg2glif.domain.commands import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, QCurveTo
from svg2glif.exceptions import MalformedPathDataError

_COMMAND_LETTERS = "MmZzLlHhVvCcSsQqTtAa"
_INVALID_CHAR_RE = re.compile(rf"[^{_COMMAND_LETTERS}0-9eE+\-.,\s]")
_SEGMENT_RE = re.compile(rf"[{_COMMAND_LETTERS}][^{_COMMAND_LETTERS}]*")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATORS = " \t\r\n,"

# Numbers consumed per repetition of each command (arcs are left to fontTools,
# which accepts compact flag syntax)
_ARITY: dict[str, int] = {
    "M": 2, "L": 2, "T": 2,
    "H": 1, "V": 1,
    "S": 4, "Q": 4,
    "C": 6,
    "Z": 0,
}


def parse_path_data(path_data: str) -> list[PathCommand]:
    """Parse the ``d`` attribute of a path into absolute commands.

    Args:
        path_data: SVG path data

    Returns:
        Commands in drawing order; empty for blank path data

    Raises:
        MalformedPathDataError: If the path data contains invalid syntax
    """
    if not path_data.strip():
        return []

    _check_syntax(path_data)

    pen = RecordingPen()
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError) as e:
        raise MalformedPathDataError(path_data, str(e) or type(e).__name__) from e

    return recording_to_commands(pen.value)


def recording_to_commands(recording: list[tuple[str, tuple[Any, ...]]]) -> list[PathCommand]:
    """Convert RecordingPen output to path commands.

    ``endPath`` carries no geometry: an open subpath is terminated by the
    next MoveTo or the end of the command list. A lineTo back to the
    subpath start directly before ``closePath`` is implied by ClosePath and
    dropped. The parser inserts one whenever the current point differs from
    the start, so a point that only rounds onto the start is kept.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        List of PathCommand values
    """
    commands: list[PathCommand] = []
    start: LineTo | None = None

    for operator, args in recording:
        if operator == "moveTo":
            x, y = args[0]
            commands.append(MoveTo(x, y))
            start = LineTo(x, y)

        elif operator == "lineTo":
            x, y = args[0]
            commands.append(LineTo(x, y))

        elif operator == "curveTo":
            (x1, y1), (x2, y2), (x3, y3) = args
            commands.append(CurveTo(x1, y1, x2, y2, x3, y3))

        elif operator == "qCurveTo":
            commands.append(QCurveTo(tuple(tuple(p) for p in args if p is not None)))

        elif operator == "closePath":
            if commands and commands[-1] == start:
                commands.pop()
            commands.append(ClosePath())

    return commands


def _check_syntax(path_data: str) -> None:
    bad = _INVALID_CHAR_RE.search(path_data)
    if bad is not None:
        raise MalformedPathDataError(
            path_data,
            f"unexpected character {bad.group()!r}",
            segment=_segment_at(path_data, bad.start()),
        )

    leading = path_data.lstrip()
    if leading[0] not in "Mm":
        raise MalformedPathDataError(
            path_data,
            "path data must begin with a moveto command",
            segment=_segment_at(path_data, len(path_data) - len(leading)),
        )

    for match in _SEGMENT_RE.finditer(path_data):
        segment = match.group().strip()
        stray = _NUMBER_RE.sub(" ", segment[1:]).strip(_SEPARATORS)
        if stray:
            raise MalformedPathDataError(
                path_data, f"invalid number token {stray.split()[0]!r}", segment=segment
            )
        letter = segment[0].upper()
        if letter not in _ARITY:
            continue
        count = len(_NUMBER_RE.findall(segment[1:]))
        arity = _ARITY[letter]
        if arity == 0:
            if count:
                raise MalformedPathDataError(
                    path_data, "closepath takes no arguments", segment=segment
                )
        elif count == 0 or count % arity:
            raise MalformedPathDataError(
                path_data,
                f"'{segment[0]}' expects a multiple of {arity} numbers, got {count}",
                segment=segment,
            )


def _segment_at(path_data: str, index: int) -> str:
    for match in _SEGMENT_RE.finditer(path_data):
        if match.start() <= index < match.end():
            return match.group().strip()
    return path_data[index : index + 16].strip()

"""
Face-shape heuristic over 68-point landmarks.

classify_face_shape compares three widths (jaw, cheekbone, forehead) and the
jaw height, then walks a fixed priority chain of ratio rules.
"""
# facecam/face_shape.py
from __future__ import annotations
import math
from typing import NamedTuple, Protocol, Sequence, Tuple

ROUND = "Round"
SQUARE = "Square"
OVAL = "Oval"
HEART = "Heart"
DIAMOND = "Diamond"
UNDETERMINED = "Undetermined"

SHAPE_LABELS: Tuple[str, ...] = (ROUND, SQUARE, OVAL, HEART, DIAMOND, UNDETERMINED)

MIN_JAW_POINTS = 8        # jaw[3] and jaw[len-4]
MIN_CONTOUR_POINTS = 27   # contour[17] / contour[26] = outer brow ends

# 68-point layout
JAW_SLICE = slice(0, 17)
CONTOUR_SLICE = slice(0, 27)


class XY(Protocol):
    x: float
    y: float


class Point(NamedTuple):
    x: float
    y: float


class LandmarkIndexError(IndexError):
    """Landmark sequence too short for the indices the heuristic reads."""


def _ratio(num: float, den: float) -> float:
    # IEEE semantics: x/0 -> inf, 0/0 -> nan
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num)
    return num / den


def _check_lengths(jaw: Sequence[XY], contour: Sequence[XY]) -> None:
    if len(jaw) < MIN_JAW_POINTS:
        raise LandmarkIndexError(
            f"jaw outline needs at least {MIN_JAW_POINTS} points, got {len(jaw)}"
        )
    if len(contour) < MIN_CONTOUR_POINTS:
        raise LandmarkIndexError(
            f"face contour needs at least {MIN_CONTOUR_POINTS} points, got {len(contour)}"
        )


def classify_face_shape(jaw: Sequence[XY], contour: Sequence[XY]) -> str:
    """
    Classify a face as Round / Square / Oval / Heart / Diamond / Undetermined.

    Args:
        jaw: ordered jaw outline (corner, ..., chin, ..., corner), >= 8 points
        contour: ordered outer face boundary, >= 27 points

    Raises:
        LandmarkIndexError: if either sequence is shorter than required.
    """
    _check_lengths(jaw, contour)

    n = len(jaw)
    mid = jaw[n // 2]

    jaw_width = abs(jaw[0].x - jaw[n - 1].x)
    jaw_height = abs(jaw[0].y - mid.y)
    cheekbone_width = abs(jaw[3].x - jaw[n - 4].x)
    forehead_width = abs(contour[17].x - contour[26].x)

    jaw_to_cheek = _ratio(jaw_width, cheekbone_width)
    jaw_to_height = _ratio(jaw_width, jaw_height)
    cheek_to_forehead = _ratio(cheekbone_width, forehead_width)

    # priority chain; first match wins
    if jaw_to_height < 1.2 and cheek_to_forehead < 1.5:
        return ROUND
    if jaw_to_height > 1.5 and cheek_to_forehead > 1.4:
        return SQUARE
    if jaw_to_height > 1.3 and cheek_to_forehead < 1.5:
        return OVAL
    if jaw[0].x < mid.x:
        return HEART
    if cheek_to_forehead < 1.2 and jaw_to_cheek < 1.5:
        return DIAMOND
    return UNDETERMINED


def jaw_outline(points: Sequence[XY]) -> Sequence[XY]:
    """Jaw points (0..16) of a 68-point landmark set."""
    return points[JAW_SLICE]


def face_contour(points: Sequence[XY]) -> Sequence[XY]:
    """Jaw + both brows (0..26) of a 68-point landmark set."""
    return points[CONTOUR_SLICE]


def to_points(coords) -> list[Point]:
    """Convert an (N, 2) array / iterable of pairs into Point tuples."""
    return [Point(float(c[0]), float(c[1])) for c in coords]

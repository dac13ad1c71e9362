"""
Dominant-emotion selection from expression probabilities.
"""
# facecam/emotion.py
from __future__ import annotations
from typing import Iterable, List, Mapping, Tuple, Union
import logging

logger = logging.getLogger(__name__)

NEUTRAL = "Neutral"

Expressions = Union[Mapping[str, float], Iterable[Tuple[str, float]]]


def _pairs(expressions: Expressions) -> Iterable[Tuple[str, float]]:
    if isinstance(expressions, Mapping):
        return expressions.items()
    return expressions


def select_dominant_emotion(expressions: Expressions) -> str:
    """
    Return the label with the strictly highest probability.

    Entries are scanned in enumeration order (dict insertion order, or the
    order of an explicit (label, probability) sequence); on a tie the earlier
    entry wins. The running max starts at 0, so empty input or input where
    nothing exceeds 0 yields "Neutral".
    """
    best_label = ""
    best_value = 0
    for label, value in _pairs(expressions):
        if value > best_value:
            best_value = value
            best_label = label
    return best_label or NEUTRAL


def normalize_expressions(raw: Mapping | None, scale: float = 100.0) -> List[Tuple[str, float]]:
    """
    Convert a DeepFace "emotion" blob (percent values) into ordered
    (label, probability) pairs in [0, 1]. Enumeration order is kept.
    """
    if not isinstance(raw, Mapping):
        return []
    out: List[Tuple[str, float]] = []
    for label, value in raw.items():
        try:
            p = float(value) / scale
        except (TypeError, ValueError):
            logger.debug(f"[emotion] dropping non-numeric probability {label}={value!r}")
            continue
        out.append((str(label), max(0.0, min(1.0, p))))
    return out

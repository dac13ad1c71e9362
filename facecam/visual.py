"""Visualization helpers.

- draw_overlays: draw face boxes, landmark dots, expression scores and a
  "Shape / Emotion" label panel per face, or a NO_FACE flag.

Pure OpenCV drawing; analysis happens in facecam.analyze.
"""
from __future__ import annotations
import cv2
import numpy as np
from typing import List, Optional, Sequence, Tuple

from facecam.models import FaceAnnotation

BOX_COLOR = (255, 128, 0)        # BGR
LANDMARK_COLOR = (0, 255, 255)
TEXT_COLOR = (255, 255, 255)
FLAG_COLOR = (0, 0, 255)
PANEL_HEIGHT = 40
PANEL_ALPHA = 0.6
FONT = cv2.FONT_HERSHEY_SIMPLEX


def _clamp_box(x: int, y: int, fw: int, fh: int, w: int, h: int) -> Tuple[int, int, int, int]:
    x = max(0, min(x, w - 1)); y = max(0, min(y, h - 1))
    fw = max(0, min(fw, w - x)); fh = max(0, min(fh, h - y))
    return x, y, fw, fh


def _draw_panel(out: np.ndarray, x: int, y: int, width: int, lines: Sequence[str]) -> None:
    """Translucent black panel above (x, y) with white text lines."""
    h, w = out.shape[:2]
    top = max(0, y - PANEL_HEIGHT)
    bottom = top + PANEL_HEIGHT
    x1 = min(w, x + max(width, 1))
    bottom = min(h, bottom)
    if bottom > top and x1 > x:
        roi = out[top:bottom, x:x1]
        shade = np.zeros_like(roi)
        out[top:bottom, x:x1] = cv2.addWeighted(roi, 1.0 - PANEL_ALPHA, shade, PANEL_ALPHA, 0)
    baselines = (top + 15, top + 30)
    for text, base in zip(lines, baselines):
        cv2.putText(out, text, (x + 10, base), FONT, 0.45, TEXT_COLOR, 1, cv2.LINE_AA)


def draw_overlays(frame: np.ndarray,
                  faces: List[FaceAnnotation] | None = None,
                  flag: Optional[str] = None,
                  min_expression_prob: float = 0.1) -> np.ndarray:
    """Draw annotations on a copy of the frame.

    Args:
        frame: BGR image
        faces: analyzed faces (region, landmarks, expressions, shape, emotion)
        flag: optional flag string (e.g., "NO_FACE")
        min_expression_prob: expressions below this probability are not listed

    Returns:
        Annotated copy of the frame
    """
    out = frame.copy()
    h, w = out.shape[:2]

    if faces is None:
        faces = []

    if flag == "NO_FACE":
        cv2.putText(out, "NO_FACE", (10, 30), FONT, 1.0, FLAG_COLOR, 2, cv2.LINE_AA)
        return out

    for face in faces:
        reg = face.region
        x, y, fw, fh = _clamp_box(reg.x, reg.y, reg.w, reg.h, w, h)
        cv2.rectangle(out, (x, y), (x + fw, y + fh), BOX_COLOR, 2)

        for p in face.landmarks:
            cv2.circle(out, (int(round(p.x)), int(round(p.y))), 1, LANDMARK_COLOR, -1, cv2.LINE_AA)

        # expression scores under the box
        row = min(h - 5, y + fh + 15)
        for label, prob in face.expressions:
            if prob < min_expression_prob:
                continue
            cv2.putText(out, f"{label} ({prob:.2f})", (x, row), FONT, 0.4, BOX_COLOR, 1, cv2.LINE_AA)
            row = min(h - 5, row + 14)

        _draw_panel(out, x, y, fw, [f"Shape: {face.shape}", f"Emotion: {face.emotion}"])

    return out

# facecam/analyze.py
"""
Per-frame analysis: DeepFace faces + expressions, LBF landmarks, then the
face-shape and dominant-emotion heuristics for every face.
"""
from __future__ import annotations
from typing import Dict, List, Optional
import logging

import numpy as np

from facecam.config import Settings
from facecam.emotion import normalize_expressions, select_dominant_emotion
from facecam.face_shape import (
    UNDETERMINED,
    LandmarkIndexError,
    classify_face_shape,
    face_contour,
    jaw_outline,
)
from facecam.landmarks import get_landmarker
from facecam.models import FaceAnnotation, FrameAnalysis, LandmarkPoint, Region

logger = logging.getLogger(__name__)

_DEFAULT = object()


def _region_from_result(r: Dict, width: int, height: int, min_size: int) -> Optional[Region]:
    """Clamp a DeepFace region to the frame; drop tiny or placeholder boxes."""
    r = r or {}
    reg = r.get("region") or {}
    x, y = int(reg.get("x", 0)), int(reg.get("y", 0))
    w, h = int(reg.get("w", 0)), int(reg.get("h", 0))
    # enforce_detection=False yields a whole-frame box with confidence 0 when nothing is found
    conf = r.get("face_confidence")
    if conf is not None:
        try:
            if float(conf) <= 0:
                return None
        except (TypeError, ValueError):
            pass
    x = max(0, min(x, width - 1)); y = max(0, min(y, height - 1))
    w = max(0, min(w, width - x)); h = max(0, min(h, height - y))
    if w < min_size or h < min_size:
        return None
    return Region(x=x, y=y, w=w, h=h)


def shape_for_landmarks(points) -> str:
    """Face shape for a 68-point set; Undetermined when the set is unusable."""
    if not points:
        return UNDETERMINED
    try:
        return classify_face_shape(jaw_outline(points), face_contour(points))
    except LandmarkIndexError as e:
        logger.warning(f"[analyze] skipping shape, bad landmark set: {e}")
        return UNDETERMINED


def analyze_frame(frame: np.ndarray, settings: Settings, landmarker=_DEFAULT) -> FrameAnalysis:
    """
    Detect faces, expressions and landmarks on one BGR frame.

    Args:
        frame: BGR image
        settings: runtime settings (detector backend, landmark model, min face size)
        landmarker: object with fit(frame, regions); defaults to the cached LBF
            model from settings. Pass None to skip landmarks.

    Returns:
        FrameAnalysis with one FaceAnnotation per face, or flag NO_FACE.
    """
    # Lazy import so tests can inject sys.modules['deepface']
    from deepface import DeepFace

    if landmarker is _DEFAULT:
        landmarker = get_landmarker(settings.LANDMARK_MODEL)

    height, width = frame.shape[:2]
    result = DeepFace.analyze(
        frame,
        actions=["emotion"],
        enforce_detection=False,
        detector_backend=settings.DETECTOR_BACKEND,
    )
    # DeepFace returns list[dict] or dict depending on version; normalize to list
    if isinstance(result, dict):
        result = [result]

    kept: List[tuple] = []
    for r in result or []:
        region = _region_from_result(r, width, height, settings.MIN_FACE_SIZE)
        if region is not None:
            kept.append((region, r))
    logger.debug(f"[analyze] raw={len(result or [])} kept={len(kept)}")

    if not kept:
        return FrameAnalysis(faces=[], flag="NO_FACE")

    regions = [region for region, _ in kept]
    landmark_sets: List[list] = [[] for _ in regions]
    if landmarker is not None:
        landmark_sets = list(landmarker.fit(frame, regions))
        landmark_sets.extend([] for _ in range(len(regions) - len(landmark_sets)))

    faces: List[FaceAnnotation] = []
    for (region, r), points in zip(kept, landmark_sets):
        expressions = normalize_expressions(r.get("emotion"))
        faces.append(FaceAnnotation(
            region=region,
            shape=shape_for_landmarks(points),
            emotion=select_dominant_emotion(expressions),
            expressions=expressions,
            landmarks=[LandmarkPoint(x=p.x, y=p.y) for p in points],
        ))
    return FrameAnalysis(faces=faces)

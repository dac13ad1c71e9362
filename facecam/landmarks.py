"""
68-point facial landmarks with OpenCV's Facemark LBF model.

Requires the contrib build of OpenCV (cv2.face) and an LBF model file
(e.g. lbfmodel.yaml); its path comes from Settings.LANDMARK_MODEL.
"""
# facecam/landmarks.py
from __future__ import annotations
from functools import lru_cache
from typing import List, Optional, Sequence
import logging
import os

import cv2
import numpy as np

from facecam.face_shape import Point, to_points
from facecam.models import Region

logger = logging.getLogger(__name__)


class FacemarkLandmarker:
    """Fits 68 landmarks per face box."""

    def __init__(self, model_path: str):
        if not hasattr(cv2, "face"):
            raise RuntimeError("cv2.face is unavailable. Install opencv-contrib-python.")
        if not os.path.exists(model_path):
            raise RuntimeError(f"Landmark model not found: {model_path}")
        self.model_path = model_path
        self._facemark = cv2.face.createFacemarkLBF()
        self._facemark.loadModel(model_path)
        logger.debug(f"[landmarks] loaded LBF model {model_path}")

    def fit(self, frame: np.ndarray, regions: Sequence[Region]) -> List[List[Point]]:
        """Return one point list per region (empty list where fitting failed)."""
        if not regions:
            return []
        boxes = np.array([[r.x, r.y, r.w, r.h] for r in regions], dtype=np.int32)
        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY) if frame.ndim == 3 else frame
        ok, fitted = self._facemark.fit(gray, boxes)
        if not ok or fitted is None:
            logger.debug(f"[landmarks] fit failed for {len(regions)} box(es)")
            return [[] for _ in regions]
        out = [to_points(np.asarray(lm).reshape(-1, 2)) for lm in fitted]
        # pad in case the backend returned fewer shapes than boxes
        out.extend([] for _ in range(len(regions) - len(out)))
        return out


@lru_cache(maxsize=4)
def get_landmarker(model_path: str) -> Optional[FacemarkLandmarker]:
    """Load once per model path; None (logged once) when unavailable."""
    try:
        return FacemarkLandmarker(model_path)
    except (RuntimeError, cv2.error) as e:
        logger.warning(f"[landmarks] landmarks disabled: {e}")
        return None

# facecam/live.py
"""
Live (real-time) webcam overlay.

Every LIVE_DETECT_INTERVAL seconds the current frame is analyzed
(faces, landmarks, expressions, face shape, dominant emotion); frames in
between are drawn with the cached annotations, so a slow detection skips
frames instead of queueing them.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Optional

import cv2

# Prevent OpenMP oversubscription on CPU
os.environ.setdefault("OMP_NUM_THREADS", "1")
os.environ.setdefault("MKL_NUM_THREADS", "1")

from facecam.analyze import analyze_frame
from facecam.config import Settings
from facecam.landmarks import get_landmarker
from facecam.models import FrameAnalysis
from facecam.visual import draw_overlays

logger = logging.getLogger(__name__)


def run_live_overlay(settings: Settings, camera_index: Optional[int] = None) -> None:
    """
    Open webcam, annotate faces with box, landmarks, expressions,
    face shape and dominant emotion. Press 'q' to quit.
    """
    cam_idx = settings.CAMERA_INDEX if camera_index is None else camera_index
    cap = cv2.VideoCapture(cam_idx)
    if not cap.isOpened():
        raise RuntimeError(f"Could not open camera index {cam_idx}")

    landmarker = get_landmarker(settings.LANDMARK_MODEL)
    interval = settings.LIVE_DETECT_INTERVAL
    cached = FrameAnalysis()
    next_detect_t = 0.0
    frames = 0
    logger.debug(f"[live] camera={cam_idx} interval={interval}s landmarks={landmarker is not None}")

    try:
        while True:
            ok, frame = cap.read()
            if not ok:
                logger.debug("[live] camera returned no frame; stopping")
                break
            frames += 1

            now = time.time()
            if now >= next_detect_t:
                try:
                    cached = analyze_frame(frame, settings, landmarker=landmarker)
                except Exception:
                    logger.exception("[live] detection failed; showing NO_FACE for this tick")
                    cached = FrameAnalysis(flag="NO_FACE")
                next_detect_t = now + interval

            annotated = draw_overlays(frame, cached.faces, cached.flag,
                                      min_expression_prob=settings.EXPRESSION_MIN_PROB)
            cv2.imshow(settings.WINDOW_NAME, annotated)
            if (cv2.waitKey(1) & 0xFF) == ord("q"):
                break
    finally:
        cap.release()
        cv2.destroyAllWindows()
        logger.debug(f"[live] stopped after {frames} frame(s)")

"""Run live camera overlay (face box, landmarks, expressions, shape, emotion).

Usage:
    uvicorn api.main:app --reload  # (separate, for API)
    python scripts/live_overlay.py  # (to see camera overlay window)

Set LANDMARK_MODEL=/path/to/lbfmodel.yaml to enable landmarks + face shape.
Press 'q' to quit the window.
"""
import logging

from facecam.config import Settings
from facecam.live import run_live_overlay

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    s = Settings()
    run_live_overlay(s)

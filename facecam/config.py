"""
Configuration for the face overlay.
"""
from pydantic import BaseModel
import os

DETECTOR_BACKENDS = (
    "opencv", "ssd", "dlib", "mtcnn", "retinaface",
    "mediapipe", "yolov8", "yunet", "centerface",
)


class Settings(BaseModel):
    """
    Runtime settings with environment-variable overrides.
    """
    CAMERA_INDEX: int = int(os.getenv("CAMERA_INDEX", "0"))
    LIVE_DETECT_INTERVAL: float = float(os.getenv("LIVE_DETECT_INTERVAL", "0.1"))
    DETECTOR_BACKEND: str = (os.getenv("DETECTOR_BACKEND", "opencv") or "opencv")
    LANDMARK_MODEL: str = os.getenv("LANDMARK_MODEL", "lbfmodel.yaml")
    MIN_FACE_SIZE: int = int(os.getenv("MIN_FACE_SIZE", "24"))
    EXPRESSION_MIN_PROB: float = float(os.getenv("EXPRESSION_MIN_PROB", "0.1"))
    WINDOW_NAME: str = os.getenv("WINDOW_NAME", "Face Shape & Emotion (q to quit)")

    def __init__(self, **data):
        super().__init__(**data)
        # Normalize DETECTOR_BACKEND: strip comments/extra words, lower-case, validate
        raw = (self.DETECTOR_BACKEND or "").strip()
        backend = raw.split()[0].lower() if raw else "opencv"
        if backend not in DETECTOR_BACKENDS:
            backend = "opencv"
        object.__setattr__(self, "DETECTOR_BACKEND", backend)
        object.__setattr__(self, "LIVE_DETECT_INTERVAL", max(0.01, float(self.LIVE_DETECT_INTERVAL)))

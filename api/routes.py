"""
REST endpoints for frame analysis and the two face heuristics.
"""
import logging

import cv2
import numpy as np
from fastapi import APIRouter, UploadFile, File, HTTPException

from facecam.config import Settings
from facecam.analyze import analyze_frame
from facecam.emotion import select_dominant_emotion
from facecam.face_shape import LandmarkIndexError, classify_face_shape
from facecam.models import (
    EmotionRequest,
    EmotionResponse,
    FrameAnalysis,
    ShapeRequest,
    ShapeResponse,
)

router = APIRouter()
settings = Settings()
logger = logging.getLogger(__name__)


@router.post("/analyze/frame", response_model=FrameAnalysis)
async def analyze_frame_endpoint(file: UploadFile = File(...)):
    """
    Annotate every face in an uploaded still image: region, landmarks,
    expression probabilities, face shape and dominant emotion.

    Args:
        file: Uploaded image (any format OpenCV can decode).

    Returns:
        FrameAnalysis payload.
    """
    logger.debug(f"[api] /analyze/frame filename={file.filename}")
    data = await file.read()
    frame = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_COLOR) if data else None
    if frame is None:
        raise HTTPException(status_code=400, detail="Upload is not a decodable image")

    try:
        result = analyze_frame(frame, settings)
        logger.debug(f"[api] analyze_frame completed faces={len(result.faces)}")
        return result
    except Exception as e:
        logger.exception("[api] analyze_frame failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/classify/shape", response_model=ShapeResponse)
async def classify_shape(req: ShapeRequest):
    """
    Classify a face shape from jaw outline + face contour points.
    Too-short sequences are rejected with 422.
    """
    try:
        shape = classify_face_shape(req.jaw, req.contour)
    except LandmarkIndexError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ShapeResponse(shape=shape)


@router.post("/classify/emotion", response_model=EmotionResponse)
async def classify_emotion(req: EmotionRequest):
    """Pick the dominant emotion; "Neutral" when nothing scores above 0."""
    return EmotionResponse(emotion=select_dominant_emotion(req.expressions))

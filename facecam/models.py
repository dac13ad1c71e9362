"""
Pydantic data models for API IO.
"""
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Literal, Optional, Tuple, Union

ShapeLabel = Literal["Round", "Square", "Oval", "Heart", "Diamond", "Undetermined"]


class LandmarkPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Region(BaseModel):
    x: int
    y: int
    w: int
    h: int


class FaceAnnotation(BaseModel):
    region: Region
    shape: ShapeLabel = "Undetermined"
    emotion: str = "Neutral"
    expressions: List[Tuple[str, float]] = Field(default_factory=list)
    landmarks: List[LandmarkPoint] = Field(default_factory=list)


class FrameAnalysis(BaseModel):
    faces: List[FaceAnnotation] = Field(default_factory=list)
    flag: Optional[Literal["NO_FACE"]] = None


# classify endpoints

class ShapeRequest(BaseModel):
    jaw: List[LandmarkPoint]
    contour: List[LandmarkPoint]


class ShapeResponse(BaseModel):
    shape: ShapeLabel


class EmotionRequest(BaseModel):
    # ordered pairs keep tie-break order explicit; a JSON object is accepted too
    expressions: Union[List[Tuple[str, float]], Dict[str, float]] = Field(default_factory=list)


class EmotionResponse(BaseModel):
    emotion: str

import sys
import types

import numpy as np
import pytest

from facecam.face_shape import Point


def _make_jaw(first, last, mid, cheek_l, cheek_r, n=9):
    """Jaw outline of n points with the heuristic's reads pinned; the rest filler."""
    pts = [Point(*first) for _ in range(n)]
    pts[n - 1] = Point(*last)
    pts[n // 2] = Point(*mid)
    pts[3] = Point(*cheek_l)
    pts[n - 4] = Point(*cheek_r)
    return pts


def _make_contour(left_x, right_x, n=27):
    pts = [Point(0.0, 0.0) for _ in range(n)]
    pts[17] = Point(left_x, 0.0)
    pts[26] = Point(right_x, 0.0)
    return pts


@pytest.fixture
def make_jaw():
    return _make_jaw


@pytest.fixture
def make_contour():
    return _make_contour


@pytest.fixture
def blank_frame():
    return np.zeros((120, 160, 3), dtype=np.uint8)


@pytest.fixture
def fake_deepface(monkeypatch):
    """Install a fake `deepface` module; set .results to control analyze()."""
    calls = {"n": 0}

    class DF:
        results = []

        @staticmethod
        def analyze(frame, actions, enforce_detection, detector_backend, **kwargs):
            calls["n"] += 1
            return DF.results

    DF.calls = calls
    monkeypatch.setitem(sys.modules, "deepface", types.SimpleNamespace(DeepFace=DF))
    return DF

import types

import numpy as np
import pytest

import facecam.landmarks as landmarks
from facecam.models import Region


class FakeFacemark:
    def __init__(self, ok=True):
        self.ok = ok
        self.loaded = None
        self.boxes = None
    def loadModel(self, path):
        self.loaded = path
    def fit(self, gray, boxes):
        assert gray.ndim == 2
        self.boxes = boxes
        shapes = [np.arange(136, dtype=np.float32).reshape(1, 68, 2) + i for i in range(len(boxes))]
        return self.ok, shapes


@pytest.fixture
def model_file(tmp_path):
    p = tmp_path / "lbfmodel.yaml"
    p.write_text("fake")
    return str(p)


@pytest.fixture(autouse=True)
def clear_cache():
    landmarks.get_landmarker.cache_clear()
    yield
    landmarks.get_landmarker.cache_clear()


def _install(monkeypatch, fm):
    monkeypatch.setattr(landmarks.cv2, "face",
                        types.SimpleNamespace(createFacemarkLBF=lambda: fm), raising=False)


def test_fit_returns_points_per_region(monkeypatch, model_file):
    fm = FakeFacemark()
    _install(monkeypatch, fm)
    lm = landmarks.FacemarkLandmarker(model_file)
    assert fm.loaded == model_file

    frame = np.zeros((100, 100, 3), dtype=np.uint8)
    out = lm.fit(frame, [Region(x=1, y=2, w=30, h=30), Region(x=50, y=50, w=40, h=40)])
    assert len(out) == 2
    assert len(out[0]) == 68
    assert out[0][1].x == 2.0 and out[0][1].y == 3.0
    assert out[1][0].x == 1.0
    assert fm.boxes.tolist() == [[1, 2, 30, 30], [50, 50, 40, 40]]


def test_fit_failure_gives_empty_sets(monkeypatch, model_file):
    _install(monkeypatch, FakeFacemark(ok=False))
    lm = landmarks.FacemarkLandmarker(model_file)
    out = lm.fit(np.zeros((10, 10, 3), dtype=np.uint8), [Region(x=0, y=0, w=5, h=5)])
    assert out == [[]]


def test_fit_without_regions(monkeypatch, model_file):
    _install(monkeypatch, FakeFacemark())
    lm = landmarks.FacemarkLandmarker(model_file)
    assert lm.fit(np.zeros((10, 10, 3), dtype=np.uint8), []) == []


def test_missing_model_disables_landmarks(monkeypatch, tmp_path):
    _install(monkeypatch, FakeFacemark())
    with pytest.raises(RuntimeError):
        landmarks.FacemarkLandmarker(str(tmp_path / "missing.yaml"))
    assert landmarks.get_landmarker(str(tmp_path / "missing.yaml")) is None


def test_get_landmarker_is_cached(monkeypatch, model_file):
    _install(monkeypatch, FakeFacemark())
    first = landmarks.get_landmarker(model_file)
    assert first is not None
    assert landmarks.get_landmarker(model_file) is first

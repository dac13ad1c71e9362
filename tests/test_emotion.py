from facecam.emotion import normalize_expressions, select_dominant_emotion


def test_empty_is_neutral():
    assert select_dominant_emotion({}) == "Neutral"
    assert select_dominant_emotion([]) == "Neutral"


def test_all_zero_is_neutral():
    assert select_dominant_emotion({"happy": 0, "sad": 0}) == "Neutral"


def test_highest_wins():
    assert select_dominant_emotion({"happy": 0.9, "sad": 0.1}) == "happy"
    assert select_dominant_emotion({"sad": 0.1, "angry": 0.3, "happy": 0.2}) == "angry"


def test_tie_keeps_first_entry():
    assert select_dominant_emotion({"happy": 0.5, "sad": 0.5}) == "happy"
    assert select_dominant_emotion([("sad", 0.5), ("happy", 0.5)]) == "sad"


def test_negative_values_never_selected():
    assert select_dominant_emotion([("sad", -0.2), ("happy", -0.1)]) == "Neutral"


def test_empty_label_falls_back():
    assert select_dominant_emotion([("", 0.8)]) == "Neutral"


def test_idempotent():
    expr = [("neutral", 0.4), ("surprised", 0.6)]
    assert select_dominant_emotion(expr) == select_dominant_emotion(expr) == "surprised"


def test_normalize_deepface_percentages():
    raw = {"angry": 1.0, "happy": 90.0, "neutral": 9.0, "bad": "n/a"}
    out = normalize_expressions(raw)
    assert [label for label, _ in out] == ["angry", "happy", "neutral"]
    assert out[1] == ("happy", 0.9)
    assert select_dominant_emotion(out) == "happy"


def test_normalize_non_mapping():
    assert normalize_expressions(None) == []
    assert normalize_expressions([("happy", 1.0)]) == []

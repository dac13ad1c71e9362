"""
CLI to analyze a still image -> JSON (face boxes, shape, emotion).
"""
from __future__ import annotations
import argparse, json, logging, os
import cv2
from facecam.config import Settings
from facecam.analyze import analyze_frame

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--image", required=True, help="Path to input image")
    p.add_argument("--out", default="output/analysis.json", help="Path to output JSON")
    p.add_argument("--no-landmarks", action="store_true", help="Skip the LBF landmark model")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    frame = cv2.imread(args.image)
    if frame is None:
        raise SystemExit(f"Could not read image: {args.image}")

    settings = Settings()
    if args.no_landmarks:
        result = analyze_frame(frame, settings, landmarker=None)
    else:
        result = analyze_frame(frame, settings)
    payload = result.model_dump()
    print(json.dumps(payload, indent=2, ensure_ascii=False))

    # Also write to file
    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    print(f"✅ Analysis written to {args.out}")

if __name__ == "__main__":
    main()

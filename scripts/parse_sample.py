from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_engine import enhance_text, parse_resume_text  # noqa: E402
from resume_engine.core.logging import configure_logging  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse a plain-text resume and print the result as JSON.")
    parser.add_argument("path", help="Path to a UTF-8 text file with extracted resume text")
    parser.add_argument(
        "--enhance",
        action="store_true",
        help="Also run every experience achievement through the content enhancer.",
    )
    parser.add_argument("--level", default=None, help="Experience level used with --enhance.")
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL for this run.")
    args = parser.parse_args()

    configure_logging(args.log_level)

    raw_text = Path(args.path).read_text(encoding="utf-8", errors="ignore")
    result = parse_resume_text(raw_text)
    payload: dict[str, object] = {"parse": result.model_dump()}

    if args.enhance:
        enhanced = []
        for entry in result.experience:
            for achievement in entry.achievements:
                outcome = enhance_text(
                    achievement,
                    {"industry": result.detected_industry, "experience_level": args.level},
                )
                enhanced.append(outcome.model_dump())
        payload["enhanced"] = enhanced

    print(json.dumps(payload, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

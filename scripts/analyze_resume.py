from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_feedback import analyze_resume, format_analysis_report, recommend_jobs  # noqa: E402
from resume_feedback.core.observability import configure_logging  # noqa: E402

logger = logging.getLogger("analyze_resume")


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8", errors="replace")


def main() -> int:
    parser = argparse.ArgumentParser(description="Score a plain-text resume and print feedback.")
    parser.add_argument("path", help="UTF-8 text file with the resume, or '-' for stdin")
    parser.add_argument("--industry", default=None, help="Target industry, e.g. technology or finance")
    parser.add_argument("--format", choices=("json", "text"), default="text")
    args = parser.parse_args()

    configure_logging()

    try:
        text = _read_text(args.path)
    except OSError as exc:
        logger.error("resume_read_failed path=%s: %s", args.path, exc)
        return 2

    analysis = analyze_resume(text, args.industry)
    if args.format == "json":
        print(analysis.model_dump_json(by_alias=True, indent=2))
    else:
        jobs = recommend_jobs(text, analysis.overall_score)
        print(format_analysis_report(analysis, jobs), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""filesort classify / stats — classify filenames and print the report."""

from __future__ import annotations

import json
import sys

from filesort import client
from filesort.classify import ClassifiedRecord, classify_file
from filesort.commands import print_config_hint, print_server_info, read_names
from filesort.config import get_cli_config, get_registry
from filesort.report import (
    ReportStats,
    format_report,
    format_stats,
    sort_by_priority,
    summarize,
)

_BAR_WIDTH = 40


def _print_progress(done: int, total: int, final: bool = False) -> None:
    """Redraw the progress bar on stderr. total == 0 renders as complete."""
    pct = 100.0 if final or total <= 0 else min(100.0, done * 100.0 / total)
    filled = int(pct / 100.0 * _BAR_WIDTH)
    bar = "█" * filled + "░" * (_BAR_WIDTH - filled)
    sys.stderr.write(f"\r\x1b[2KClassifying [{bar}] {pct:5.1f}%  {done:,}/{total:,}")
    if final:
        sys.stderr.write("\n")
    sys.stderr.flush()


def _show_progress(args) -> bool:
    if getattr(args, "quiet", False) or getattr(args, "json", False):
        return False
    if not get_cli_config().get("progress", True):
        return False
    return sys.stderr.isatty()


def _classify_local(names: list[str], progress: bool) -> list[ClassifiedRecord]:
    registry = get_registry()
    records = []
    total = len(names)
    for i, name in enumerate(names):
        if progress:
            _print_progress(i, total)
        records.append(classify_file(name, registry))
    if progress:
        _print_progress(total, total, final=True)
    return records


def _classify_remote(names: list[str]) -> tuple[list[ClassifiedRecord], ReportStats]:
    print_server_info()
    try:
        resp = client.post("/report", {"filenames": names})
    except Exception as e:
        print(f"filesort: cannot reach server: {e}", file=sys.stderr)
        print_config_hint()
        sys.exit(1)
    records = [ClassifiedRecord(**r) for r in resp["records"]]
    stats = resp["stats"]
    return records, ReportStats(
        total=stats["total"],
        category_counts=stats["category_counts"],
        # JSON object keys are strings; priorities are ints locally
        priority_counts={int(k): v for k, v in stats["priority_counts"].items()},
    )


def _run(args) -> tuple[list[ClassifiedRecord], ReportStats]:
    has_source = bool(
        getattr(args, "names", None)
        or getattr(args, "from_file", None)
        or getattr(args, "demo", False)
    )
    if not has_source:
        print("filesort: no filenames given (pass names, --from FILE or --demo)", file=sys.stderr)
        sys.exit(1)
    # An empty list file is valid input and yields an empty report
    try:
        names = read_names(args)
    except OSError as e:
        print(f"filesort: cannot read {e.filename}: {e.strerror}", file=sys.stderr)
        sys.exit(1)

    if getattr(args, "remote", False):
        return _classify_remote(names)

    records = sort_by_priority(_classify_local(names, _show_progress(args)))
    return records, summarize(records)


def cmd_classify(args) -> None:
    records, stats = _run(args)
    if getattr(args, "json", False):
        print(json.dumps({
            "records": [r.to_dict() for r in records],
            "stats": stats.to_dict(),
        }, indent=2))
        return
    print()
    for line in format_report(records, stats):
        print(line)


def cmd_stats(args) -> None:
    _, stats = _run(args)
    if getattr(args, "json", False):
        print(json.dumps(stats.to_dict(), indent=2))
        return
    print()
    for line in format_stats(stats):
        print(line)

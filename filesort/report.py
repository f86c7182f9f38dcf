"""Sorting, distribution statistics and plain-text report rendering."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from filesort.classify import ClassifiedRecord


def sort_by_priority(records: Iterable[ClassifiedRecord]) -> list[ClassifiedRecord]:
    """Stable ascending sort; equal priorities keep their input order."""
    return sorted(records, key=lambda r: r.priority)


def aggregate(records: Iterable[ClassifiedRecord]) -> tuple[dict[str, int], dict[int, int]]:
    """
    Return (category_counts, priority_counts).
    Categories are ordered alphabetically, priorities ascending.
    """
    by_cat: dict[str, int] = {}
    by_prio: dict[int, int] = {}
    for rec in records:
        by_cat[rec.category] = by_cat.get(rec.category, 0) + 1
        by_prio[rec.priority] = by_prio.get(rec.priority, 0) + 1
    return dict(sorted(by_cat.items())), dict(sorted(by_prio.items()))


def percentage(count: int, total: int) -> float:
    """count / total * 100; 0.0 for an empty set."""
    if total <= 0:
        return 0.0
    return count / total * 100.0


@dataclass
class ReportStats:
    total: int
    category_counts: dict[str, int] = field(default_factory=dict)
    priority_counts: dict[int, int] = field(default_factory=dict)

    def category_percentages(self) -> dict[str, float]:
        return {k: percentage(v, self.total) for k, v in self.category_counts.items()}

    def priority_percentages(self) -> dict[int, float]:
        return {k: percentage(v, self.total) for k, v in self.priority_counts.items()}

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "category_counts": dict(self.category_counts),
            "priority_counts": dict(self.priority_counts),
            "category_percentages": self.category_percentages(),
            "priority_percentages": self.priority_percentages(),
        }


def summarize(records: Sequence[ClassifiedRecord]) -> ReportStats:
    category_counts, priority_counts = aggregate(records)
    return ReportStats(
        total=len(records),
        category_counts=category_counts,
        priority_counts=priority_counts,
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def format_records(records: Sequence[ClassifiedRecord]) -> list[str]:
    """Aligned results table: file, category, priority."""
    if not records:
        return ["  (no files)"]
    file_w = max(len("file"), max(len(r.filename) for r in records))
    cat_w = max(len("category"), max(len(r.category) for r in records))
    lines = [
        f"  {'file':<{file_w}}  {'category':<{cat_w}}  priority",
        f"  {'-' * file_w}  {'-' * cat_w}  {'-' * len('priority')}",
    ]
    for r in records:
        lines.append(f"  {r.filename:<{file_w}}  {r.category:<{cat_w}}  P{r.priority}")
    return lines


def format_stats(stats: ReportStats) -> list[str]:
    lines = [f"  {stats.total:,} files  ·  {len(stats.category_counts)} categories", ""]

    if stats.category_counts:
        cat_w = max(len(c) for c in stats.category_counts)
        lines.append("category distribution")
        for cat, count in stats.category_counts.items():
            pct = percentage(count, stats.total)
            lines.append(f"  {cat:<{cat_w}}  {count:>3} files  ({pct:5.1f}%)")
        lines.append("")

    if stats.priority_counts:
        lines.append("priority distribution")
        for prio, count in stats.priority_counts.items():
            pct = percentage(count, stats.total)
            lines.append(f"  priority {prio}  {count:>3} files  ({pct:5.1f}%)")
        lines.append("")

    return lines


def format_report(records: Sequence[ClassifiedRecord], stats: ReportStats) -> list[str]:
    """Full report: sorted results table followed by the statistics block."""
    return format_records(records) + [""] + format_stats(stats)

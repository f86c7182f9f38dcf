"""filesort categories — show the effective extension table."""
from __future__ import annotations

import json

from filesort.classify import priority_of
from filesort.config import get_registry
from filesort.registry import DEFAULT_CATEGORY, categories


def category_rows(registry) -> list[dict]:
    """One row per category, ordered by priority then registry order."""
    rows = []
    for cat in categories(registry):
        exts = [ext for ext, c in registry.items() if c == cat]
        rows.append({"category": cat, "priority": priority_of(cat), "extensions": exts})
    if DEFAULT_CATEGORY not in (r["category"] for r in rows):
        rows.append({"category": DEFAULT_CATEGORY, "priority": priority_of(DEFAULT_CATEGORY), "extensions": []})
    rows.sort(key=lambda r: r["priority"])
    return rows


def cmd_categories(args) -> None:
    rows = category_rows(get_registry())
    if getattr(args, "json", False):
        print(json.dumps(rows, indent=2))
        return

    cat_w = max(len("category"), max(len(r["category"]) for r in rows))
    print(f"  {'category':<{cat_w}}  prio  extensions")
    print(f"  {'-' * cat_w}  ----  {'-' * len('extensions')}")
    for r in rows:
        exts = " ".join(r["extensions"]) or "(everything else)"
        print(f"  {r['category']:<{cat_w}}  P{r['priority']:<3}  {exts}")

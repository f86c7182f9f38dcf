"""File classification: filename → (ext_lower, category, priority)."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, Mapping, Optional

from filesort.registry import DEFAULT_CATEGORY, lookup

_PRIORITIES = {
    "DOCUMENTS_REPOSITORY": 1,
    "SOURCE_CODE": 2,
    "MULTIMEDIA_ASSETS": 3,
    "AUDIO_LIBRARY": 3,
    "VIDEO_CONTENT": 3,
    "ARCHIVE_STORAGE": 4,
}
LOWEST_PRIORITY = 5


@dataclass(frozen=True)
class ClassifiedRecord:
    filename: str
    extension: str
    category: str
    priority: int

    def to_dict(self) -> dict:
        return asdict(self)


def extract_extension(filename: str) -> str:
    """
    Return the lowercase text after the last dot, without the dot.
    Empty string when there is no dot or the dot is the last character.

    A name whose only dot is the first character (".gitignore") yields the
    trailing text ("gitignore"); hidden files get no special treatment.
    """
    dot_idx = filename.rfind(".")
    if dot_idx < 0 or dot_idx == len(filename) - 1:
        return ""
    return filename[dot_idx + 1:].lower()


def categorize(extension: str, registry: Optional[Mapping[str, str]] = None) -> str:
    if not extension:
        return DEFAULT_CATEGORY
    return lookup(extension, registry) or DEFAULT_CATEGORY


def priority_of(category: str) -> int:
    """1 is the highest priority; unknown categories fall to the lowest (5)."""
    return _PRIORITIES.get(category, LOWEST_PRIORITY)


def classify_file(filename: str, registry: Optional[Mapping[str, str]] = None) -> ClassifiedRecord:
    ext = extract_extension(filename)
    category = categorize(ext, registry)
    return ClassifiedRecord(
        filename=filename,
        extension=ext,
        category=category,
        priority=priority_of(category),
    )


def classify_all(
    filenames: Iterable[str],
    registry: Optional[Mapping[str, str]] = None,
) -> list[ClassifiedRecord]:
    """Classify each filename independently; output keeps input order."""
    return [classify_file(name, registry) for name in filenames]

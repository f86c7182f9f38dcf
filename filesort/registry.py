"""Extension registry: lowercase extension → category label."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_CATEGORY = "MISCELLANEOUS_FILES"

_DOCUMENT_EXTS = "txt doc docx pdf rtf".split()
_MULTIMEDIA_EXTS = "jpg jpeg png gif bmp".split()
_AUDIO_EXTS = "mp3 wav flac aac".split()
_VIDEO_EXTS = "mp4 avi mkv mov".split()
_ARCHIVE_EXTS = "zip rar 7z tar".split()
_CODE_EXTS = "cpp c py java js html".split()

_TABLE = (
    ("DOCUMENTS_REPOSITORY", _DOCUMENT_EXTS),
    ("MULTIMEDIA_ASSETS", _MULTIMEDIA_EXTS),
    ("AUDIO_LIBRARY", _AUDIO_EXTS),
    ("VIDEO_CONTENT", _VIDEO_EXTS),
    ("ARCHIVE_STORAGE", _ARCHIVE_EXTS),
    ("SOURCE_CODE", _CODE_EXTS),
)

# Built once at import; read-only for the life of the process.
EXTENSION_CATEGORIES: Mapping[str, str] = MappingProxyType(
    {ext: category for category, exts in _TABLE for ext in exts}
)


def _normalize_ext(ext: str) -> str:
    return ext.strip().lstrip(".").lower()


def build_registry(extra: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """
    Return a read-only registry: the built-in table overlaid with `extra`.
    Extra keys are lowercased and may be given with or without a leading dot.
    Empty keys are ignored.
    """
    if not extra:
        return EXTENSION_CATEGORIES
    merged = dict(EXTENSION_CATEGORIES)
    for ext, category in extra.items():
        key = _normalize_ext(ext)
        if key:
            merged[key] = str(category)
    return MappingProxyType(merged)


def lookup(extension: str, registry: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the category for `extension`, or None when it is not registered."""
    if registry is None:
        registry = EXTENSION_CATEGORIES
    return registry.get(extension)


def categories(registry: Optional[Mapping[str, str]] = None) -> list[str]:
    """Distinct category labels in registry order."""
    if registry is None:
        registry = EXTENSION_CATEGORIES
    return list(dict.fromkeys(registry.values()))

# -*- coding: utf-8 -*-
"""Translation catalog store (i18n/en.json)

The catalog is a JSON array of objects:

    [
      {
        "id": "api.context.invalid_param.app_error",
        "translation": "Invalid {{.Name}} parameter"
      },
      ...
    ]

``translation`` is usually a string but may be any JSON value (plural forms
are objects); it is carried through untouched.

Output format
- key order per entry: id, translation
- 2-space indentation, trailing newline
- no ASCII or HTML escaping: "<b>", "&" and non-Latin text are written as-is
- written atomically (temp file + fsync + replace)
"""
from __future__ import annotations

import dataclasses
import difflib
import json
import os
import pathlib
import tempfile
from typing import Any, Iterable, List, Union

from i18n_tool.exceptions import CatalogFormatError, CatalogReadError
from i18n_tool.utils.logging import tool_logger

NEWLINE = "\n"

PathLike = Union[str, "os.PathLike[str]"]

__all__ = [
    "CatalogEntry",
    "load_catalog",
    "parse_catalog",
    "dump_catalog",
    "save_catalog",
    "atomic_write",
    "unified_diff",
]


@dataclasses.dataclass
class CatalogEntry:
    id: str
    translation: Any = ""

    def to_json(self) -> dict:
        return {"id": self.id, "translation": self.translation}


# ── Reading ──────────────────────────────────────────────────────────────────

def parse_catalog(text: str, path: PathLike = "<catalog>", allow_malformed: bool = False) -> List[CatalogEntry]:
    """Decode catalog JSON.

    Strict by default: anything other than an array of {"id": str, ...}
    objects raises CatalogFormatError. With ``allow_malformed`` a document
    that does not decode gives an empty catalog and bad entries are dropped,
    each with a warning.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        if not allow_malformed:
            raise CatalogFormatError(f"Malformed catalog {path}: {e}", path) from e
        tool_logger.warning("Malformed catalog %s (%s); treating it as empty", path, e)
        return []

    if not isinstance(data, list):
        if not allow_malformed:
            raise CatalogFormatError(f"Catalog {path} must be a JSON array", path)
        tool_logger.warning("Catalog %s is not a JSON array; treating it as empty", path)
        return []

    entries: List[CatalogEntry] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or not isinstance(item.get("id"), str):
            if not allow_malformed:
                raise CatalogFormatError(f"Catalog {path}: entry {index} has no string \"id\"", path)
            tool_logger.warning("Catalog %s: dropping entry %d without a string id", path, index)
            continue
        entries.append(CatalogEntry(item["id"], item.get("translation")))
    return entries


def load_catalog(path: PathLike, allow_malformed: bool = False) -> List[CatalogEntry]:
    """Read the catalog; a missing/unreadable file raises CatalogReadError."""
    try:
        text = pathlib.Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogReadError(f"Failed to read catalog {path}: {e}", path) from e
    entries = parse_catalog(text, path, allow_malformed=allow_malformed)
    tool_logger.info("Loaded %d catalog entries from %s", len(entries), path)
    return entries


# ── Writing ──────────────────────────────────────────────────────────────────

def dump_catalog(entries: Iterable[CatalogEntry]) -> str:
    return json.dumps([e.to_json() for e in entries], indent=2, ensure_ascii=False) + NEWLINE


def atomic_write(path: pathlib.Path, data: str) -> None:
    """Atomically write ``data`` to ``path``.

    This function writes to a temporary file in the same directory, fsyncs,
    then replaces the target. If the target exists, its permissions are
    preserved when possible.
    """
    tmp_dir = path.parent
    tmp_dir.mkdir(parents=True, exist_ok=True)
    try:
        orig_mode = path.stat().st_mode & 0o777
    except OSError:
        # New file: regular umask-derived mode, not the 0600 of the temp file
        umask = os.umask(0)
        os.umask(umask)
        orig_mode = 0o666 & ~umask

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", delete=False, dir=tmp_dir, prefix=f".{path.name}.", encoding="utf-8", newline=NEWLINE
        ) as tf:
            tmp_name = tf.name
            tf.write(data)
            tf.flush()
            os.fsync(tf.fileno())
        os.chmod(tmp_name, orig_mode)
        os.replace(tmp_name, str(path))
        tmp_name = None
    finally:
        # Cleanup if the temp file was not moved into place
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)


def save_catalog(path: PathLike, entries: Iterable[CatalogEntry]) -> str:
    """Serialize and atomically write the catalog; returns the written text."""
    text = dump_catalog(entries)
    atomic_write(pathlib.Path(path), text)
    return text


def unified_diff(a: str, b: str, path: PathLike) -> str:
    return "".join(
        difflib.unified_diff(
            a.splitlines(keepends=True),
            b.splitlines(keepends=True),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
        )
    )

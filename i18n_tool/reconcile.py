# -*- coding: utf-8 -*-
"""
Reconcile identifiers found in code with the translation catalog.

extract: rewrite the catalog so it holds exactly the referenced identifiers,
         keeping existing translations and adding "" for new ones.
check:   print "Added: <id>" / "Removed: <id>" lines and fail when the
         catalog is stale; never writes.

Both operate on the same inputs, so check reports exactly what extract
would change.
"""
from __future__ import annotations

import dataclasses
import sys
from typing import AbstractSet, Dict, Iterable, List, Optional, Set, TextIO

from i18n_tool.catalog import CatalogEntry, dump_catalog, load_catalog, save_catalog, unified_diff
from i18n_tool.exceptions import CatalogOutOfDateError
from i18n_tool.scanner.walker import ScanStats, add_dynamically_generated_ids, extract_strings
from i18n_tool.utils.config import ToolConfig
from i18n_tool.utils.logging import preview_ids, tool_logger


@dataclasses.dataclass
class CatalogDiff:
    added: List[str] = dataclasses.field(default_factory=list)
    removed: List[str] = dataclasses.field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed

    def lines(self) -> List[str]:
        return [f"Added: {i}" for i in self.added] + [f"Removed: {i}" for i in self.removed]


@dataclasses.dataclass
class ExtractResult:
    entries: List[CatalogEntry]
    diff: CatalogDiff
    changed: bool
    written: bool
    file_diff: Optional[str] = None


# ── Pure reconciliation ───────────────────────────────────────────────────────

def diff(discovered: AbstractSet[str], entries: Iterable[CatalogEntry]) -> CatalogDiff:
    existing = {e.id for e in entries}
    return CatalogDiff(
        added=sorted(discovered - existing),
        removed=sorted(existing - discovered),
    )


def reconcile(discovered: AbstractSet[str], entries: Iterable[CatalogEntry]) -> List[CatalogEntry]:
    """New catalog holding exactly ``discovered``, sorted by id.

    Existing entries keep their translation object as-is; for duplicate ids
    in the old catalog the last one wins.
    """
    working: Dict[str, CatalogEntry] = {}
    for entry in entries:
        working[entry.id] = entry

    for key in discovered:
        if key not in working:
            working[key] = CatalogEntry(key, "")

    for key in list(working):
        if key not in discovered:
            del working[key]

    return [working[key] for key in sorted(working)]


# ── Runs ─────────────────────────────────────────────────────────────────────

def collect_ids(config: ToolConfig, stats: Optional[ScanStats] = None) -> Set[str]:
    """Scan both roots and add the runtime-only identifiers."""
    ids = extract_strings(
        config.source_dir,
        config.enterprise_dir,
        ignore_errors=config.ignore_walk_errors,
        stats=stats,
        vendor_root=config.vendor_dir,
    )
    return add_dynamically_generated_ids(ids)


def extract(config: ToolConfig, dry_run: bool = False, emit_diff: bool = False) -> ExtractResult:
    """Rewrite the catalog to match the code (or only report, with ``dry_run``)."""
    ids = collect_ids(config)
    path = config.catalog_path
    current = load_catalog(path, allow_malformed=config.allow_malformed_catalog)

    changes = diff(ids, current)
    entries = reconcile(ids, current)
    new_text = dump_catalog(entries)

    try:
        old_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        old_text = ""
    changed = new_text != old_text

    if changes.added:
        tool_logger.info("Adding %d id(s): %s", len(changes.added), preview_ids(changes.added))
    if changes.removed:
        tool_logger.info("Removing %d id(s): %s", len(changes.removed), preview_ids(changes.removed))

    file_diff = unified_diff(old_text, new_text, path) if emit_diff and changed else None

    written = False
    if changed and not dry_run:
        save_catalog(path, entries)
        written = True
        tool_logger.info("Wrote %d entries to %s", len(entries), path)
    elif not changed:
        tool_logger.info("%s is up to date", path)

    return ExtractResult(entries=entries, diff=changes, changed=changed, written=written, file_diff=file_diff)


def check(config: ToolConfig, out: Optional[TextIO] = None) -> CatalogDiff:
    """Report catalog drift; raise CatalogOutOfDateError when there is any."""
    out = out if out is not None else sys.stdout
    ids = collect_ids(config)
    current = load_catalog(config.catalog_path, allow_malformed=config.allow_malformed_catalog)

    changes = diff(ids, current)
    for line in changes.lines():
        print(line, file=out)

    if not changes.is_empty:
        raise CatalogOutOfDateError(changes)
    return changes

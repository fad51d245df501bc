# -*- coding: utf-8 -*-
"""
Walk the source roots and collect translation identifiers.

Exclusion rules, checked in order (any one skips the file):
  1. under the primary root's vendor/ directory
  2. a generated client file (hooks.skip_path_suffixes)
  3. a Go test file (*_test.go)
  4. not a Go file

Both roots share one identifier set; the enterprise root gets the same rules,
vendor exclusion included, but only <primary>/vendor is ever excluded.
"""
from __future__ import annotations

import dataclasses
import os
import pathlib
from typing import Iterable, Iterator, List, Mapping, Optional, Set, AbstractSet, Union

from i18n_tool import hooks
from i18n_tool.exceptions import WalkError
from i18n_tool.utils.logging import preview_ids, short_path, tool_logger

from .go_source import scan_file

PathLike = Union[str, "os.PathLike[str]"]


@dataclasses.dataclass
class ScanStats:
    scanned: int = 0
    skipped: int = 0
    matches: int = 0
    roots: List[str] = dataclasses.field(default_factory=list)


def _abs(path: PathLike) -> pathlib.Path:
    return pathlib.Path(os.path.abspath(os.fspath(path)))


def is_vendored(path: PathLike, vendor_root: Optional[PathLike]) -> bool:
    if vendor_root is None:
        return False
    p, v = _abs(path), _abs(vendor_root)
    return p == v or v in p.parents


def skip_reason(path: PathLike, vendor_root: Optional[PathLike] = None) -> Optional[str]:
    """Why ``path`` is not scanned, or None when it should be."""
    if is_vendored(path, vendor_root):
        return "vendored"
    posix = pathlib.PurePath(os.fspath(path)).as_posix()
    for suffix in hooks.skip_path_suffixes:
        if posix == suffix or posix.endswith("/" + suffix):
            return "generated"
    name = os.path.basename(posix)
    if name.endswith(hooks.test_suffix):
        return "test"
    if not name.endswith(hooks.source_suffix):
        return "not go source"
    return None


def iter_source_files(
    root: PathLike,
    vendor_root: Optional[PathLike] = None,
    ignore_errors: bool = False,
    stats: Optional[ScanStats] = None,
) -> Iterator[pathlib.Path]:
    """Yield every file under ``root`` that passes the exclusion rules, in sorted order."""
    stats = stats if stats is not None else ScanStats()

    def _onerror(err: OSError) -> None:
        if ignore_errors:
            tool_logger.warning("Skipping unreadable path %s: %s", err.filename, err)
            return
        raise WalkError(f"Failed to walk {err.filename}: {err.strerror or err}", err.filename) from err

    for dirpath, dirnames, filenames in os.walk(os.fspath(root), onerror=_onerror):
        # Do not descend into the vendor tree at all
        dirnames[:] = sorted(d for d in dirnames if not is_vendored(os.path.join(dirpath, d), vendor_root))
        for filename in sorted(filenames):
            path = pathlib.Path(dirpath, filename)
            reason = skip_reason(path, vendor_root)
            if reason is not None:
                stats.skipped += 1
                tool_logger.debug("Skipping %s (%s)", path, reason)
                continue
            yield path


def scan_root(
    root: PathLike,
    ids: Set[str],
    vendor_root: Optional[PathLike] = None,
    ignore_errors: bool = False,
    stats: Optional[ScanStats] = None,
    rules: Optional[Mapping[str, int]] = None,
    constants: Optional[AbstractSet[str]] = None,
) -> Set[str]:
    """Scan one root into ``ids``. A root that does not exist is skipped with a warning."""
    stats = stats if stats is not None else ScanStats()
    if not os.path.isdir(os.fspath(root)):
        tool_logger.warning("Source root %s does not exist; skipping", os.fspath(root))
        return ids

    stats.roots.append(os.fspath(root))
    for path in iter_source_files(root, vendor_root, ignore_errors, stats):
        try:
            stats.matches += scan_file(path, ids, rules, constants)
        except OSError as e:
            if not ignore_errors:
                raise WalkError(f"Failed to read {path}: {e.strerror or e}", str(path)) from e
            tool_logger.warning("Skipping unreadable file %s: %s", path, e)
            stats.skipped += 1
            continue
        stats.scanned += 1
    return ids


def extract_strings(
    primary_dir: PathLike,
    enterprise_dir: Optional[PathLike] = None,
    ignore_errors: bool = False,
    stats: Optional[ScanStats] = None,
    rules: Optional[Mapping[str, int]] = None,
    constants: Optional[AbstractSet[str]] = None,
    vendor_root: Optional[PathLike] = None,
) -> Set[str]:
    """Identifiers referenced under the primary and (optional) enterprise roots.

    ``vendor_root`` defaults to the primary root's vendor directory.
    """
    stats = stats if stats is not None else ScanStats()
    if vendor_root is None:
        vendor_root = os.path.join(os.fspath(primary_dir), hooks.vendor_dirname)
    ids: Set[str] = set()

    roots = [primary_dir] + ([enterprise_dir] if enterprise_dir is not None else [])
    for root in roots:
        scan_root(root, ids, vendor_root, ignore_errors, stats, rules, constants)

    tool_logger.info(
        "Scanned %d file(s) (%d skipped) under %s: %d match(es), %d unique id(s)",
        stats.scanned,
        stats.skipped,
        ", ".join(short_path(r, os.getcwd()) for r in stats.roots) or "<nothing>",
        stats.matches,
        len(ids),
    )
    return ids


def add_dynamically_generated_ids(ids: Set[str], extra: Optional[Iterable[str]] = None) -> Set[str]:
    """Add identifiers that only exist at runtime (see hooks.DYNAMICALLY_GENERATED_IDS)."""
    injected = list(hooks.DYNAMICALLY_GENERATED_IDS) + list(extra or [])
    ids.update(injected)
    tool_logger.debug("Injected %d runtime id(s): %s", len(injected), preview_ids(injected))
    return ids

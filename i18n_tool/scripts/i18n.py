#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
i18n.py: keep the server translation catalog (i18n/en.json) in sync with the Go code.

Usage Examples
--------------

1. Rewrite i18n/en.json from the code (run from the server checkout):
   i18n-tool extract

2. Preview what extract would change, as a unified diff:
   i18n-tool extract --dry-run --diff

3. CI gate: list drift and exit 1 when the catalog is out of date:
   i18n-tool check --source-dir ./server --enterprise-dir ./enterprise

Exit status is 0 on success, 1 on any error or when check finds drift.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from i18n_tool import hooks
from i18n_tool.exceptions import I18nToolError
from i18n_tool.reconcile import check, extract
from i18n_tool.utils.config import load_config
from i18n_tool.utils.logging import set_level

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--source-dir", default=hooks.default_source_dir, help="Path to folder with the server source code")
    ap.add_argument("--enterprise-dir", default=hooks.default_enterprise_dir, help="Path to folder with the enterprise source code")
    ap.add_argument("--allow-malformed-catalog", action="store_true", default=None, help="Treat an undecodable catalog as empty instead of failing")
    ap.add_argument("--ignore-walk-errors", action="store_true", default=None, help="Warn and continue on unreadable files/directories")
    ap.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS, help="Logging level")


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="i18n-tool", description="Management of server translations")
    sub = ap.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    ex = sub.add_parser(
        "extract",
        help="Extract translations",
        description="Extract translations from the source code and put them into the i18n/en.json file",
    )
    _add_common_args(ex)
    ex.add_argument("--dry-run", action="store_true", help="Report only; do not write the catalog")
    ex.add_argument("--diff", action="store_true", help="Print a unified diff of the catalog changes")

    ck = sub.add_parser(
        "check",
        help="Check translations",
        description="Check translations existing in the source code and compare them to the i18n/en.json file",
    )
    _add_common_args(ck)
    return ap


def run(args: argparse.Namespace) -> int:
    try:
        config = load_config(
            args.source_dir,
            args.enterprise_dir,
            allow_malformed_catalog=args.allow_malformed_catalog,
            ignore_walk_errors=args.ignore_walk_errors,
            log_level=args.log_level,
        )
        set_level(config.log_level)

        if args.command == "check":
            check(config)
            return 0

        result = extract(config, dry_run=args.dry_run, emit_diff=args.diff)
        if args.diff and result.file_diff:
            sys.stdout.write(result.file_diff)
        if args.dry_run:
            print(f"Would add {len(result.diff.added)} and remove {len(result.diff.removed)} id(s)")
        return 0
    except I18nToolError as e:
        # Includes CatalogOutOfDateError: the Added/Removed lines are already on stdout
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()

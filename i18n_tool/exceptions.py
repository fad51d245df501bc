# -*- coding: utf-8 -*-
"""Exceptions raised by the i18n tool.

Every failure the tool reports on purpose derives from :class:`I18nToolError`;
the command line shell prints the message and exits non-zero for those.
"""
from __future__ import annotations

import os
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from i18n_tool.reconcile import CatalogDiff

__all__ = [
    "I18nToolError",
    "ConfigurationError",
    "GoParseError",
    "WalkError",
    "CatalogError",
    "CatalogReadError",
    "CatalogFormatError",
    "CatalogOutOfDateError",
]


class I18nToolError(Exception):
    """Base exception for the i18n tool."""


class ConfigurationError(I18nToolError):
    """Raised when a path parameter or the config file is missing or invalid."""


class GoParseError(I18nToolError):
    """Raised when a Go source file does not parse."""

    def __init__(self, path: Optional[str], line: int, column: int, detail: str = "syntax error") -> None:
        where = f"{path or '<source>'}:{line}:{column}"
        super().__init__(f"{where}: {detail}")
        self.path = path
        self.line = line
        self.column = column


class WalkError(I18nToolError):
    """Raised on traversal or read failures while walking a source root."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class CatalogError(I18nToolError):
    """Base class for translation catalog failures."""

    def __init__(self, message: str, path: Optional[os.PathLike] = None) -> None:
        super().__init__(message)
        self.path = path


class CatalogReadError(CatalogError):
    """Raised when the catalog file is missing or unreadable."""


class CatalogFormatError(CatalogError):
    """Raised when the catalog file is not a JSON array of {id, translation}."""


class CatalogOutOfDateError(I18nToolError):
    """Raised by check mode when code and catalog disagree."""

    def __init__(self, diff: "CatalogDiff", message: str = "Translations file out of date.") -> None:
        super().__init__(message)
        self.diff = diff

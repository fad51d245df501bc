# -*- coding: utf-8 -*-
"""
Call-site and constant patterns that introduce a translation identifier.

Both tables are plain data: recognizing a new helper is a one-line change to
CALL_RULES, a new error-code constant a one-line change to ERROR_CODE_CONSTANTS.

Only literal strings count. T(someVar), T("a" + b) or T(fmt.Sprintf(...)) are
invisible here, which is why hooks.DYNAMICALLY_GENERATED_IDS exists.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, AbstractSet

# ── Call rules: terminal callee name -> index of the identifier argument ──────
CALL_RULES = {
    "T": 0,               # i18n.T / c.T / utils.T
    "translateFunc": 0,
    "userLocale": 0,
    "localT": 0,
    "newAppError": 0,     # model-level helper wrapping NewAppError
    "NewAppError": 1,     # NewAppError(where, id, params, details, status)
    "TranslateAsHtml": 1, # utils.TranslateAsHtml(t, id, params)
}

# ── Constants whose literal value is an error identifier ──────────────────────
ERROR_CODE_CONSTANTS = frozenset({
    "MISSING_CHANNEL_ERROR",
    "MISSING_CHANNEL_MEMBER_ERROR",
    "CHANNEL_EXISTS_ERROR",
    "MISSING_STATUS_ERROR",
    "TEAM_MEMBER_EXISTS_ERROR",
    "MISSING_AUTH_ACCOUNT_ERROR",
    "MISSING_ACCOUNT_ERROR",
    "EXPIRED_LICENSE_ERROR",
    "INVALID_LICENSE_ERROR",
})

# tree-sitter-go node types for "..." and `...`
STRING_LITERAL_TYPES = frozenset({"interpreted_string_literal", "raw_string_literal"})


def literal_value(node: Any) -> Optional[str]:
    """Return the contents of a Go string literal node, quotes stripped.

    Anything that is not a string literal (identifiers, calls, binary
    expressions, numbers) returns None.
    """
    if node is None or node.type not in STRING_LITERAL_TYPES:
        return None
    text = node.text.decode("utf-8") if isinstance(node.text, bytes) else str(node.text)
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ('"', "`"):
        return text[1:-1]
    return None


def match_call(
    name: Optional[str],
    args: Sequence[Any],
    rules: Optional[Mapping[str, int]] = None,
) -> Optional[str]:
    """Identifier introduced by a call to ``name`` with argument nodes ``args``."""
    if not name:
        return None
    table = CALL_RULES if rules is None else rules
    index = table.get(name)
    if index is None or len(args) <= index:
        return None
    return literal_value(args[index])


def match_constant(
    name: Optional[str],
    value: Any,
    constants: Optional[AbstractSet[str]] = None,
) -> Optional[str]:
    """Identifier declared by ``const <name> = <value>``, if the name is allow-listed."""
    allowed = ERROR_CODE_CONSTANTS if constants is None else constants
    if not name or name not in allowed:
        return None
    return literal_value(value)

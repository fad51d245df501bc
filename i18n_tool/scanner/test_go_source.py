#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Test suite for the tree-sitter based Go scanner.
"""
from __future__ import annotations

import pathlib
import tempfile
import textwrap
import unittest

from i18n_tool.exceptions import GoParseError
from i18n_tool.scanner.go_source import scan_file, scan_source


def go(body: str) -> str:
    return textwrap.dedent(body).lstrip()


class TestCallExtraction(unittest.TestCase):
    """Call sites recognized in real Go source."""

    def scan(self, src: str) -> set:
        ids: set = set()
        scan_source(go(src), ids)
        return ids

    def test_bare_t_call(self):
        ids = self.scan('''
            package app

            func f(T func(string) string) string {
            	return T("foo.bar")
            }
        ''')
        self.assertEqual(ids, {"foo.bar"})

    def test_qualified_t_call(self):
        ids = self.scan('''
            package app

            func (a *App) f() string {
            	return a.T("api.context.404.app_error")
            }
        ''')
        self.assertEqual(ids, {"api.context.404.app_error"})

    def test_new_app_error_second_argument(self):
        ids = self.scan('''
            package model

            func (u *User) IsValid() *AppError {
            	return NewAppError("ctx", "model.user.is_valid.id.app_error", nil, "", 400)
            }
        ''')
        self.assertEqual(ids, {"model.user.is_valid.id.app_error"})

    def test_qualified_new_app_error(self):
        ids = self.scan('''
            package app

            func f() *model.AppError {
            	return model.NewAppError("CreateUser", "app.user.save.app_error", nil, err.Error(), 500)
            }
        ''')
        self.assertEqual(ids, {"app.user.save.app_error"})

    def test_translate_as_html(self):
        ids = self.scan('''
            package app

            func f() {
            	body := utils.TranslateAsHtml(T, "api.templates.welcome_body.info", nil)
            	_ = body
            }
        ''')
        self.assertEqual(ids, {"api.templates.welcome_body.info"})

    def test_dynamic_argument_yields_nothing(self):
        ids = self.scan('''
            package app

            func f(someVar string) {
            	T(someVar)
            	T("prefix." + someVar)
            	T(fmt.Sprintf("x.%s", someVar))
            }
        ''')
        self.assertEqual(ids, set())

    def test_raw_string_literal(self):
        ids = self.scan('''
            package app

            func f() {
            	T(`raw.id`)
            }
        ''')
        self.assertEqual(ids, {"raw.id"})

    def test_nested_calls_all_found(self):
        ids = self.scan('''
            package app

            func f() {
            	c.Err = model.NewAppError("f", "outer.app_error", map[string]interface{}{"Reason": T("inner.reason")}, "", 400)
            }
        ''')
        self.assertEqual(ids, {"outer.app_error", "inner.reason"})

    def test_multiple_calls_and_duplicates(self):
        ids: set = set()
        matches = scan_source(go('''
            package app

            func f() {
            	T("a")
            	T("b")
            	T("a")
            	translateFunc("c")
            	userLocale("d")
            	localT("e")
            }
        '''), ids)
        self.assertEqual(ids, {"a", "b", "c", "d", "e"})
        self.assertEqual(matches, 6)

    def test_comment_inside_arguments_ignored(self):
        ids = self.scan('''
            package app

            func f() {
            	T(/* key */ "with.comment")
            }
        ''')
        self.assertEqual(ids, {"with.comment"})

    def test_shared_set_accumulates(self):
        ids = {"already.there"}
        scan_source(go('''
            package app

            func f() { T("new.one") }
        '''), ids)
        self.assertEqual(ids, {"already.there", "new.one"})


class TestConstantExtraction(unittest.TestCase):
    """Allow-listed error-code constants."""

    def test_single_constant(self):
        ids: set = set()
        scan_source(go('''
            package store

            const MISSING_CHANNEL_ERROR = "store.sql_channel.missing.app_error"
        '''), ids)
        self.assertEqual(ids, {"store.sql_channel.missing.app_error"})

    def test_grouped_constants(self):
        ids: set = set()
        scan_source(go('''
            package store

            const (
            	MISSING_CHANNEL_ERROR        = "store.sql_channel.get_by_name.missing.app_error"
            	MISSING_CHANNEL_MEMBER_ERROR = "store.sql_channel.get_member.missing.app_error"
            	SOME_OTHER_CONSTANT          = "not.an.id"
            	CHANNEL_EXISTS_ERROR         = "store.sql_channel.save_channel.exists.app_error"
            )
        '''), ids)
        self.assertEqual(ids, {
            "store.sql_channel.get_by_name.missing.app_error",
            "store.sql_channel.get_member.missing.app_error",
            "store.sql_channel.save_channel.exists.app_error",
        })

    def test_multi_name_spec_pairs_by_position(self):
        ids: set = set()
        scan_source(go('''
            package model

            const EXPIRED_LICENSE_ERROR, INVALID_LICENSE_ERROR = "api.license.expired", "api.license.invalid"
        '''), ids)
        self.assertEqual(ids, {"api.license.expired", "api.license.invalid"})

    def test_constant_inside_function(self):
        ids: set = set()
        scan_source(go('''
            package app

            func f() {
            	const MISSING_ACCOUNT_ERROR = "app.account.missing"
            	_ = MISSING_ACCOUNT_ERROR
            }
        '''), ids)
        self.assertEqual(ids, {"app.account.missing"})

    def test_var_declaration_ignored(self):
        ids: set = set()
        scan_source(go('''
            package store

            var MISSING_CHANNEL_ERROR = "store.var.not.const"
        '''), ids)
        self.assertEqual(ids, set())


class TestParseErrors(unittest.TestCase):
    """Malformed source aborts instead of being skipped."""

    def test_syntax_error_raises(self):
        with self.assertRaises(GoParseError) as ctx:
            scan_source("package app\n\nfunc f( {\n\tT(\"x\")\n", set(), path="broken.go")
        self.assertEqual(ctx.exception.path, "broken.go")
        self.assertIn("broken.go:", str(ctx.exception))
        self.assertGreaterEqual(ctx.exception.line, 1)

    def test_invalid_utf8_in_literal(self):
        """A bad byte inside a matched literal is a parse error, not a decode crash."""
        ids: set = set()
        with self.assertRaises(GoParseError) as ctx:
            scan_source(b'package a\n\nfunc f() { T("bad.\xff.id") }\n', ids, path="bad.go")
        self.assertEqual((ctx.exception.line, ctx.exception.column), (3, 19))
        self.assertIn("illegal UTF-8 encoding", str(ctx.exception))
        self.assertEqual(ids, set())

    def test_invalid_utf8_outside_literal(self):
        """Go rejects stray bytes anywhere, comments included."""
        with self.assertRaises(GoParseError) as ctx:
            scan_source(b'package a\n// caf\xe9\nfunc f() {}\n', set())
        self.assertEqual((ctx.exception.line, ctx.exception.column), (2, 7))

    def test_no_partial_results_on_error(self):
        ids: set = set()
        with self.assertRaises(GoParseError):
            scan_source("package app\n\nfunc f() { T(\"good.id\") }\n\nfunc g( {\n", ids)
        self.assertEqual(ids, set())


class TestScanFile(unittest.TestCase):
    """Reading from disk."""

    def test_scan_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            p = pathlib.Path(tmpdir) / "a.go"
            p.write_text('package a\n\nfunc f() { T("file.id") }\n', encoding="utf-8")
            ids: set = set()
            self.assertEqual(scan_file(p, ids), 1)
            self.assertEqual(ids, {"file.id"})

    def test_missing_file_raises_oserror(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(OSError):
                scan_file(pathlib.Path(tmpdir) / "nope.go", set())


if __name__ == "__main__":
    unittest.main(verbosity=2)

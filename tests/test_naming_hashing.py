"""Tests for name normalization and content hashing."""

import hashlib

from temper.hashing import digest
from temper.naming import normalize_name


def test_normalize_name_strips_extension():
    assert normalize_name("template.jade") == "template"
    assert normalize_name("/views/partials/header.jinja") == "header"


def test_normalize_name_removes_leading_digits_and_unsafe_chars():
    assert normalize_name("9$-money_$00-test.jade") == "$money_$00test"
    assert normalize_name("01-page.html") == "page"


def test_normalize_name_only_drops_last_extension():
    assert normalize_name("my-template.tar.jade") == "mytemplatetar"


def test_normalize_name_can_be_empty():
    """All-digit or all-symbol names give an empty identifier, not an error."""
    assert normalize_name("123.html") == ""
    assert normalize_name("---.html") == ""


def test_digest_is_deterministic():
    assert digest("<h1>{key}</h1>") == digest("<h1>{key}</h1>")
    assert len(digest("anything")) == 32


def test_digest_differs_for_different_content():
    assert digest("foo") != digest("bar")


def test_digest_known_value():
    assert digest("") == "d41d8cd98f00b204e9800998ecf8427e"
    assert digest(b"abc") == digest("abc")


def test_digest_uses_string_form():
    class Code:
        def __str__(self):
            return "def root(): pass"

    assert digest(Code()) == digest("def root(): pass")


def test_digest_is_marked_as_not_for_security(monkeypatch):
    seen = {}
    md5 = hashlib.md5

    def fake_md5(data, **kwargs):
        seen.update(kwargs)
        return md5(data, **kwargs)

    monkeypatch.setattr(hashlib, "md5", fake_md5)
    digest("foo")
    assert seen == {"usedforsecurity": False}

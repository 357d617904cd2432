"""Tests for doc comment parsing."""

from __future__ import annotations

from apidoc.factory.comments import is_doc_comment, parse_doc_comment, parse_param


def test_parse_doc_comment_splits_description_and_tags() -> None:
    comment = parse_doc_comment(
        """/**
         * Adds two numbers.
         * Second line.
         * @param {number} a - first operand
         * @param {number|string} [b=1] second operand
         *   continued here
         * @return {number} the sum
         * @protected
         */"""
    )

    assert comment.description == "Adds two numbers.\nSecond line."
    assert comment.access == "protected"
    params = comment.params
    assert params[0].name == "a"
    assert params[0].types == ["number"]
    assert params[0].description == "first operand"
    assert params[1].name == "b"
    assert params[1].optional is True
    assert params[1].types == ["number", "string"]
    assert params[1].description == "second operand\ncontinued here"
    assert comment.return_types == ["number"]


def test_returns_alias_and_ignore() -> None:
    comment = parse_doc_comment("/** @returns {Promise} done\n * @ignore */")

    assert comment.return_types == ["Promise"]
    assert comment.has("ignore")


def test_is_doc_comment() -> None:
    assert is_doc_comment("/** doc */")
    assert not is_doc_comment("/* plain */")
    assert not is_doc_comment("// line")
    assert not is_doc_comment("/*** banner ***/")


def test_parse_param_without_type() -> None:
    param = parse_param("options settings bag")

    assert param.name == "options"
    assert param.types == []
    assert param.description == "settings bag"

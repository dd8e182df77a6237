"""Tests for whitespace tokenization."""

from netrcparse.lib.tokenizer import tokens_split


def test_split_on_mixed_whitespace():
    content = "machine mytest\n\tlogin  joe\r\n   password mypass\n"
    assert tokens_split(content) == [
        "machine",
        "mytest",
        "login",
        "joe",
        "password",
        "mypass",
    ]


def test_leading_and_trailing_whitespace_trimmed():
    assert tokens_split("\n\n   machine m   \n\n") == ["machine", "m"]


def test_empty_content():
    assert tokens_split("") == []
    assert tokens_split(" \n\t \n") == []


def test_hash_and_quotes_are_literal():
    assert tokens_split('password pa#ss "quoted" # comment') == [
        "password",
        "pa#ss",
        '"quoted"',
        "#",
        "comment",
    ]

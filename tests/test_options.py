"""Unit tests for TrekOptions and color resolution."""

import argparse
from unittest.mock import MagicMock

import pytest

from ftrek.options import TrekOptions, resolve_color
from ftrek.traversal.error_action import ErrorAction


def test_defaults():
    options = TrekOptions()
    assert options.root == "."
    assert options.gitignore is False
    assert options.color == "auto"
    assert options.error_action is ErrorAction.IGNORE


def test_error_action_from_string():
    assert TrekOptions(error_action="WARN").error_action is ErrorAction.WARN


def test_invalid_error_action():
    with pytest.raises(ValueError, match="Invalid error_action"):
        TrekOptions(error_action="explode")


def test_invalid_color():
    with pytest.raises(ValueError, match="Invalid color mode"):
        TrekOptions(color="sometimes")


@pytest.mark.parametrize(
    "permission_action,expected",
    [("ignore", ErrorAction.IGNORE), ("warn", ErrorAction.WARN), ("fail", ErrorAction.RAISE)],
)
def test_from_namespace(permission_action, expected):
    args = argparse.Namespace(directory="src", gitignore=True, color="never", permission_action=permission_action)
    options = TrekOptions.from_namespace(args)
    assert options == TrekOptions("src", True, "never", expected)


def terminal():
    stream = MagicMock()
    stream.isatty.return_value = True
    return stream


def test_resolve_color_always_and_never():
    assert resolve_color(TrekOptions(color="always"), object(), environ={"NO_COLOR": "1"}) is True
    assert resolve_color(TrekOptions(color="never"), terminal(), environ={}) is False


def test_resolve_color_auto():
    assert resolve_color(TrekOptions(), terminal(), environ={}) is True
    assert resolve_color(TrekOptions(), terminal(), environ={"NO_COLOR": ""}) is False

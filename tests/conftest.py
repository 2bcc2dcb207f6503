"""Shared test fixtures for elmsweep tests."""

from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def write_files(tmp_path):
    """Write ``{relative_path: content}`` under tmp_path and return the root."""

    def _write(files: dict[str, str]) -> Path:
        for name, content in files.items():
            p = tmp_path / name
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text(content)
        return tmp_path

    return _write


@pytest.fixture
def chain_project(write_files):
    """Main -> Page -> Widget, with Orphan imported by nothing."""
    return write_files(
        {
            "src/Main.elm": (
                "module Main exposing (main)\n\n"
                "import Html\n"
                "import Page\n\n"
                "main =\n    Page.view\n"
            ),
            "src/Page.elm": (
                "module Page exposing (view)\n\n"
                "import Widget\n\n"
                "view =\n    Widget.render\n"
            ),
            "src/Widget.elm": "module Widget exposing (render)\n\nrender =\n    0\n",
            "src/Orphan.elm": "module Orphan exposing (x)\n\nx =\n    1\n",
        }
    )


@pytest.fixture
def sample_source():
    """A realistic Elm module with comments, multi-line imports and declarations."""
    return (
        "module Main exposing (Model, Msg(..), main)\n"
        "\n"
        "{-| The application.\n"
        "    {- nested -}\n"
        "-}\n"
        "\n"
        "import Browser\n"
        "import Html exposing (Html, div, text)\n"
        "import Html.Attributes as Attr\n"
        "import Json.Decode as D\n"
        "    exposing\n"
        "        ( Decoder\n"
        "        , field\n"
        "        )\n"
        "-- import Commented.Out\n"
        "\n"
        "\n"
        "type alias Model =\n"
        "    { count : Int }\n"
        "\n"
        "\n"
        "type Msg\n"
        "    = Increment\n"
        "    | Decrement\n"
        "\n"
        "\n"
        "main : Program () Model Msg\n"
        "main =\n"
        "    Browser.sandbox { init = init, update = update, view = view }\n"
        "\n"
        "\n"
        "init =\n"
        "    { count = 0 }\n"
    )

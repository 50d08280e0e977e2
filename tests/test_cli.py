import logging

import pytest
from click.testing import CliRunner

import lcp
import lcp.deployment as d
from lcp.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def restore_level():
    level = d.LOGGER.level
    yield
    d.LOGGER.setLevel(level)


def test_prefix(runner):
    result = runner.invoke(cli, ["what's the", "whatever", "whatabout"])

    assert result.exit_code == 0
    assert result.output == "what\n"


def test_single_word(runner):
    result = runner.invoke(cli, ["hello"])

    assert result.exit_code == 0
    assert result.output == "hello\n"


def test_empty_prefix(runner):
    result = runner.invoke(cli, ["there's no", "common prefix", "here"])

    assert result.exit_code == 0
    assert result.output == "<empty>\n"


def test_empty_word(runner):
    result = runner.invoke(cli, [""])

    assert result.exit_code == 0
    assert result.output == "<empty>\n"


def test_custom_placeholder(runner):
    result = runner.invoke(cli, ["--placeholder", "(none)", "abc", "xyz"])

    assert result.exit_code == 0
    assert result.output == "(none)\n"


def test_placeholder_from_settings(runner, monkeypatch):
    monkeypatch.setattr(d, "SETTINGS", d.Settings(placeholder="~"))
    result = runner.invoke(cli, ["abc", "xyz"])

    assert result.output == "~\n"


def test_no_words(runner):
    result = runner.invoke(cli, [])

    assert result.exit_code == 2
    assert "Usage: lcp [WORDS]..." in result.output


def test_words_from_stdin(runner):
    result = runner.invoke(cli, ["-f", "-"], input="hello\nhelp\nhelvetica\n")

    assert result.exit_code == 0
    assert result.output == "hel\n"


def test_words_and_file(runner, tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("flow\nflight\n")

    result = runner.invoke(cli, ["flower", "--file", str(path)])

    assert result.exit_code == 0
    assert result.output == "fl\n"


def test_empty_file_is_usage_error(runner, tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("")

    result = runner.invoke(cli, ["--file", str(path)])

    assert result.exit_code == 2


def test_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["--file", str(tmp_path / "nope.txt")])

    assert result.exit_code == 2


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.output == f"lcp {lcp.__version__}\n"


def test_verbose_logs(runner, caplog, restore_level):
    with caplog.at_level(logging.DEBUG, logger="lcp"):
        result = runner.invoke(cli, ["-v", "hello", "help"])

    assert result.exit_code == 0
    assert "Common prefix has 3 characters" in caplog.text

"""Tests for the command line interface."""

import pytest
import yaml
from typer.testing import CliRunner

from termescape import __version__
from termescape.cli.commands import parse_words, unescape
from termescape.main import app
from termescape.renderer import StyleToken

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump({"theme": {"entries": {"say": "green", "loop": "loop"}}}),
        encoding="utf-8",
    )
    return path


class TestParseWords:
    """Tests for parse_words and unescape."""

    def test_tokens_and_words(self):
        """Colon words are tokens; literal words are joined by spaces."""
        assert parse_words([":red", "hello", "world", ":reset"]) == [
            StyleToken("red"),
            "hello",
            " ",
            "world",
            StyleToken("reset"),
        ]

    def test_lone_colon_is_text(self):
        """A single colon is literal text."""
        assert parse_words([":"]) == [":"]

    def test_unescape(self):
        """Shell spellings of ESC are replaced."""
        assert unescape("\\e[31mx\\033[0m") == "\x1b[31mx\x1b[0m"


class TestCommands:
    """Tests for CLI commands."""

    def test_version(self):
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_echo(self, tmp_path):
        """echo renders tokens."""
        config = tmp_path / "none.yaml"
        result = runner.invoke(app, ["--config", str(config), "echo", ":red", "hello", "--emit"])
        assert result.exit_code == 0
        assert result.output == "\x1b[31mhello\x1b[0m\n"

    def test_echo_no_emit(self, tmp_path):
        """--no-emit strips styles."""
        config = tmp_path / "none.yaml"
        result = runner.invoke(
            app, ["--config", str(config), "echo", ":red", "hello", "world", "--no-emit"]
        )
        assert result.exit_code == 0
        assert result.output == "hello world\n"

    def test_echo_theme_from_config(self, config_file):
        """Theme entries from the config file are used."""
        result = runner.invoke(
            app, ["--config", str(config_file), "echo", ":say", "hi", "--emit", "--no-reset"]
        )
        assert result.exit_code == 0
        assert result.output == "\x1b[32mhi\n"

    def test_echo_unknown_name(self, tmp_path):
        """Unknown names exit with an error."""
        config = tmp_path / "none.yaml"
        result = runner.invoke(app, ["--config", str(config), "echo", ":nope", "x", "--emit"])
        assert result.exit_code == 1
        assert "invalid sequence specification" in result.output

    def test_echo_cycle(self, config_file):
        """Cyclic theme entries exit with an error."""
        result = runner.invoke(app, ["--config", str(config_file), "echo", ":loop", "--emit"])
        assert result.exit_code == 1
        assert "cyclic sequence specification" in result.output

    @pytest.mark.parametrize("command", ["echo", "palette", "rgb-palette"])
    def test_unknown_theme_name(self, tmp_path, command):
        """An unknown theme name in the config exits with an error."""
        config = tmp_path / "config.yaml"
        config.write_text("theme_name: nope\n", encoding="utf-8")
        args = ["--config", str(config), command]
        if command == "echo":
            args += [":red", "x"]
        result = runner.invoke(app, [*args, "--emit"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unknown theme: nope" in result.output

    def test_sequences(self):
        """sequences lists the built-in names."""
        result = runner.invoke(app, ["sequences"])
        assert result.exit_code == 0
        assert "light_magenta_background" in result.output

    def test_palette(self, tmp_path):
        """palette prints every color code."""
        config = tmp_path / "none.yaml"
        result = runner.invoke(app, ["--config", str(config), "palette", "--no-emit"])
        assert result.exit_code == 0
        assert " 255 " in result.output
        assert len(result.output.splitlines()) == 32

    def test_rgb_palette(self, tmp_path):
        """rgb-palette prints the color cube."""
        config = tmp_path / "none.yaml"
        result = runner.invoke(app, ["--config", str(config), "rgb-palette", "--emit"])
        assert result.exit_code == 0
        assert "5/5/5" in result.output
        assert "\x1b[48;5;231m" in result.output

    def test_length(self):
        """length prints the visible length."""
        result = runner.invoke(app, ["length", "\\e[31mhello\\e[0m"])
        assert result.exit_code == 0
        assert result.output.strip() == "5"

    def test_split(self):
        """split prints both halves."""
        result = runner.invoke(app, ["split", "\\e[31mred\\e[32mgreen", "4"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            repr("\x1b[31mred\x1b[32mg"),
            repr("reen"),
        ]

"""CLI tests for parse, link, scan, image and config commands."""

import json

from click.testing import CliRunner

from medialink.cli import cli
from medialink.config import save_config


def _invoke(args, **kwargs):
    runner = CliRunner()
    return runner.invoke(cli, args, **kwargs)


class TestParse:
    def test_parse_json(self):
        result = _invoke(["parse", "--format", "json", "https://youtu.be/dQw4w9WgXcQ"])

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {
                "input": "https://youtu.be/dQw4w9WgXcQ",
                "type": "yt",
                "id": "dQw4w9WgXcQ",
                "link": "https://youtu.be/dQw4w9WgXcQ",
            }
        ]

    def test_parse_short(self):
        result = _invoke(["parse", "-f", "json", "--short", "https://vimeo.com/76979871"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["link"] == "vi:76979871"

    def test_parse_uses_configured_defaults(self):
        save_config({"interface": {"short_links": True, "output_format": "json"}})

        result = _invoke(["parse", "https://youtu.be/dQw4w9WgXcQ"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["link"] == "yt:dQw4w9WgXcQ"

    def test_parse_full_overrides_config(self):
        save_config({"interface": {"short_links": True}})

        result = _invoke(["parse", "-f", "json", "--full", "yt:dQw4w9WgXcQ"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["link"] == "https://youtu.be/dQw4w9WgXcQ"

    def test_parse_table(self):
        result = _invoke(["parse", "https://vimeo.com/1"])

        assert result.exit_code == 0
        assert "Media references" in result.output
        assert "vi" in result.output

    def test_parse_unresolved_exits_nonzero(self):
        result = _invoke(["parse", "-f", "json", "nothing here"])

        assert result.exit_code == 1
        assert "Not a media link: nothing here" in result.output

    def test_parse_requires_input(self):
        result = _invoke(["parse"])

        assert result.exit_code != 0


class TestLink:
    def test_link_full(self):
        result = _invoke(["link", "yt", "dQw4w9WgXcQ"])

        assert result.exit_code == 0
        assert result.output == "https://youtu.be/dQw4w9WgXcQ\n"

    def test_link_short(self):
        result = _invoke(["link", "--short", "yt", "dQw4w9WgXcQ"])

        assert result.exit_code == 0
        assert result.output == "yt:dQw4w9WgXcQ\n"

    def test_link_unknown_type(self):
        result = _invoke(["link", "zz", "abc"])

        assert result.exit_code == 1
        assert "No link form" in result.output


class TestScan:
    def test_scan_text_argument(self):
        text = "watch https://youtu.be/dQw4w9WgXcQ, and grab https://example.com/a.mp4"
        result = _invoke(["scan", "-f", "json", text])

        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert [(row["type"], row["id"]) for row in rows] == [
            ("yt", "dQw4w9WgXcQ"),
            ("fi", "https://example.com/a.mp4"),
        ]

    def test_scan_stdin(self):
        result = _invoke(["scan", "-f", "json"], input="clip: https://clips.twitch.tv/FunnyClip\n")

        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert rows[0]["type"] == "tc"
        assert rows[0]["link"] == "https://clips.twitch.tv/FunnyClip"

    def test_scan_no_links(self):
        result = _invoke(["scan", "-f", "table", "nothing to see"])

        assert result.exit_code == 0
        assert "No links found." in result.output

    def test_scan_verbose(self):
        result = _invoke(["-v", "scan", "-f", "json", "https://vimeo.com/1"])

        assert result.exit_code == 0


class TestImage:
    def test_image_accepted(self):
        result = _invoke(["image", "https://media.discordapp.net/attachments/1/2/a.png?ex=1"])

        assert result.exit_code == 0
        assert "https://media.discordapp.net/attachments/1/2/a.png" in result.output
        assert "discord" in result.output

    def test_image_rejected(self):
        result = _invoke(["image", "https://i.gyazo.com/abc.png", "http://i.gyazo.com/x.png"])

        assert result.exit_code == 1
        assert "https://i.gyazo.com/abc.png" in result.output
        assert "1 link(s) rejected" in result.output


class TestConfig:
    def test_config_path(self, isolated_config):
        result = _invoke(["config", "path"])

        assert result.exit_code == 0
        assert str(isolated_config) in result.output

    def test_config_set(self, isolated_config):
        result = _invoke(["config", "set", "interface.short_links", "true"])

        assert result.exit_code == 0
        saved = json.loads(isolated_config.read_text())
        assert saved["interface"]["short_links"] is True

    def test_config_set_invalid_value(self, isolated_config):
        result = _invoke(["config", "set", "interface.output_format", "xml"])

        assert result.exit_code == 1
        assert "Invalid value" in result.output
        assert not isolated_config.exists()

    def test_config_reset(self, isolated_config):
        save_config({"interface": {"short_links": True}})

        result = _invoke(["config", "reset"])

        assert result.exit_code == 0
        saved = json.loads(isolated_config.read_text())
        assert saved["interface"]["short_links"] is False

    def test_config_show(self):
        result = _invoke(["config", "show"])

        assert result.exit_code == 0
        assert "short_links" in result.output


def test_version():
    result = _invoke(["--version"])

    assert result.exit_code == 0

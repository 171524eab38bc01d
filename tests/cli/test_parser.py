"""Tests for CLIParser."""

import pytest

from mira_site.cli.parser import CLIParser
from mira_site.config import ConfigManager


@pytest.fixture
def parser(tmp_path):
    """Parser built from default settings."""
    global_config = ConfigManager(tmp_path).load_global_config()
    return CLIParser(global_config)


def test_downloads_defaults(parser):
    """Without flags the config decides about pre-releases."""
    args = parser.parse_args(["downloads"])
    assert args.command == "downloads"
    assert args.prereleases is None
    assert args.json is False


def test_downloads_prereleases_flag(parser):
    """A bare --prereleases means "true"."""
    args = parser.parse_args(["downloads", "--prereleases", "--json"])
    assert args.prereleases == "true"
    assert args.json is True


def test_downloads_prereleases_value(parser):
    """An explicit value is kept for interpretation."""
    args = parser.parse_args(["downloads", "--prereleases", "0"])
    assert args.prereleases == "0"


def test_roadmap_flags(parser):
    """The roadmap command supports --all and --json."""
    args = parser.parse_args(["roadmap", "--all", "--json"])
    assert args.command == "roadmap"
    assert args.all is True
    assert args.json is True


def test_config_requires_action(parser):
    """The config command needs --show or --init."""
    with pytest.raises(SystemExit):
        parser.parse_args(["config"])

    args = parser.parse_args(["config", "--init"])
    assert args.init is True
    assert args.show is False


def test_version_flag(parser):
    """--version works without a command."""
    args = parser.parse_args(["--version"])
    assert args.version is True
    assert args.command is None

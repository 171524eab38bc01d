"""Tests for release asset name classification."""

import pytest

from mira_site.api.classifier import (
    classify,
    get_mac_architecture,
    is_downloadable_asset,
    is_installer_asset,
    is_portable_asset,
)


@pytest.mark.parametrize(
    "name",
    [
        "Mira-Setup.exe",
        "Mira.MSI",
        "Mira.dmg",
        "Mira.pkg",
        "Mira-win.zip",
        "Mira-mac.tar.gz",
        "Mira.AppImage",
        "mira_1.0.0_amd64.deb",
        "mira-1.0.0.x86_64.rpm",
    ],
)
def test_downloadable_extensions(name):
    """Every supported artifact extension is offered for download."""
    assert is_downloadable_asset(name)


@pytest.mark.parametrize(
    "name",
    ["latest.yml", "Mira-Setup.exe.blockmap", "SHA256SUMS", "Mira.tar.gz.sig"],
)
def test_non_downloadable_assets(name):
    """Checksums, manifests and signatures are filtered out."""
    assert not is_downloadable_asset(name)


def test_classify_windows_setup_exe():
    """A setup .exe is an installer and not portable."""
    assert classify("Mira-Setup-x64.exe") == {"windows", "installer"}


def test_classify_bare_exe_is_portable():
    """An .exe without "setup" runs without installation."""
    assert classify("Mira.exe") == {"windows", "portable"}


def test_classify_msi_is_installer():
    """An .msi counts as a Windows installer."""
    assert classify("Mira-1.0.0.msi") == {"windows", "installer"}


def test_classify_windows_zip():
    """A zip named for Windows is a portable Windows build."""
    assert classify("Mira-win-Portable.zip") == {"windows", "portable"}


def test_classify_zip_without_platform():
    """A zip with no platform marker carries packaging tags only."""
    assert classify("Mira-Portable.zip") == {"portable"}


def test_classify_mac_dmg_arm64():
    """Architecture tags are attached to mac assets."""
    assert classify("Mira-arm64.dmg") == {"mac", "arch-arm64", "installer"}


def test_classify_mac_without_arch_marker():
    """A mac asset without a marker gets arch-unknown."""
    assert classify("Mira.dmg") == {"mac", "arch-unknown", "installer"}


def test_classify_linux_packages():
    """Linux packages get the linux tag and no packaging tag."""
    assert classify("Mira.AppImage") == {"linux"}
    assert classify("mira_1.0.0_amd64.deb") == {"linux"}


def test_classify_no_arch_tags_outside_mac():
    """Architecture markers on non-mac assets are ignored."""
    tags = classify("Mira-linux-arm64.tar.gz")
    assert tags == {"linux", "portable"}


def test_classify_is_case_insensitive():
    """Matching ignores case."""
    assert classify("MIRA-SETUP.EXE") == classify("mira-setup.exe")


def test_classify_darwin_also_matches_win_marker():
    """"darwin" contains "win", so such assets are tagged for both."""
    tags = classify("Mira-darwin-x64.zip")
    assert {"mac", "windows", "arch-x64", "portable"} <= tags


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Mira-1.0.0-arm64.dmg", "arm64"),
        ("Mira-1.0.0-aarch64.pkg", "arm64"),
        ("Mira-mac-apple-silicon.zip", "arm64"),
        ("Mira_mac_apple_silicon.zip", "arm64"),
        ("Mira-1.0.0-x64.dmg", "x64"),
        ("Mira-1.0.0-x86_64.dmg", "x64"),
        ("Mira-1.0.0-amd64.pkg", "x64"),
        ("Mira-mac-intel.zip", "x64"),
        ("Mira.dmg", "unknown"),
    ],
)
def test_get_mac_architecture(name, expected):
    """Architecture markers are recognized as whole words."""
    assert get_mac_architecture(name) == expected


@pytest.mark.parametrize(
    "name", ["Mira-mac-x640.dmg", "Mira-intelligent.dmg", "Mira-barm64.dmg"]
)
def test_get_mac_architecture_requires_word_boundaries(name):
    """Markers inside longer tokens do not count."""
    assert get_mac_architecture(name) == "unknown"


def test_installer_and_portable_are_exclusive_for_exe():
    """"setup" decides between installer and portable for .exe files."""
    assert is_installer_asset("Mira-Setup.exe")
    assert not is_portable_asset("Mira-Setup.exe")
    assert is_portable_asset("Mira-Portable.exe")
    assert not is_installer_asset("Mira-Portable.exe")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Miraéx64.dmg", "x64"),
        ("Miraéarm64.dmg", "arm64"),
        ("Mira-mac-éintel.zip", "x64"),
    ],
)
def test_get_mac_architecture_accented_neighbours_are_boundaries(name, expected):
    """Only ASCII letters, digits and underscore extend a marker token."""
    assert get_mac_architecture(name) == expected

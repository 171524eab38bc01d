"""Pytest configuration and fixtures for mira-site tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("mira_site"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def release_api_data():
    """Sample GitHub release payload."""
    return {
        "tag_name": "v1.2.3",
        "name": "Mira 1.2.3",
        "html_url": "https://github.com/FatalMistake02/mira/releases/tag/v1.2.3",
        "published_at": "2025-03-04T12:00:00Z",
        "prerelease": False,
        "draft": False,
        "assets": [
            {
                "name": "Mira-Setup-1.2.3-x64.exe",
                "browser_download_url": "https://example.com/Mira-Setup-1.2.3-x64.exe",
                "size": 90000000,
            },
            {
                "name": "Mira-1.2.3-arm64.dmg",
                "browser_download_url": "https://example.com/Mira-1.2.3-arm64.dmg",
                "size": 110000000,
            },
            {
                "name": "Mira-1.2.3.AppImage",
                "browser_download_url": "https://example.com/Mira-1.2.3.AppImage",
                "size": 120000000,
            },
            {
                "name": "latest.yml",
                "browser_download_url": "https://example.com/latest.yml",
                "size": 400,
            },
        ],
    }

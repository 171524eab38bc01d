"""Utility helpers shared across mira-site.

- version_utils: version parsing and ordering
- arch_utils: host platform detection
- displays: terminal rendering of downloads and roadmap views
"""

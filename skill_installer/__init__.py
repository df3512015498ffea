"""Installer for the chrome-extension-architect agent skill."""

__version__ = "0.1.0"

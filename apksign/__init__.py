"""Resolve Android release-signing configuration for CI and local builds."""

__version__ = "0.1.0"

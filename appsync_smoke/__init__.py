"""Smoke-test tooling for the AppSync ``publishMessage`` / ``onMessage`` API."""

__version__ = "0.1.0"

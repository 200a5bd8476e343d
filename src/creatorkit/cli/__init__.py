"""
CLI interface module for creatorkit.

Provides a Typer-based command-line interface for serving the API,
managing the quota store and running the offline calculators.
"""

from __future__ import annotations

__all__: list[str] = []

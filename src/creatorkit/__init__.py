"""
creatorkit - Free utility tools for YouTube creators.

An HTTP service that looks up public YouTube pages and turns them into
channel ids, tag lists, channel statistics and monetization signals, plus
pure calculators for revenue projection, tag and title suggestions.
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "creatorkit"
__email__ = "noreply@creatorkit.dev"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__email__", "__license__"]

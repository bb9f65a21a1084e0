# SPDX-License-Identifier: MIT
"""Command line interface for versionkit."""

from .main import cli, main

__all__ = ["cli", "main"]

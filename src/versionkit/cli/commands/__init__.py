# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import validate, bump, compare, sort

__all__ = ["validate", "bump", "compare", "sort"]

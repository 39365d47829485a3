# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import bump, order, validate

__all__ = ["bump", "order", "validate"]

"""
Either types — a value that is one of two things.
"""

from __future__ import annotations

from dataclasses import dataclass

# ═══════════════════════════════════════════════════════════════════════════════
# Variants
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Left[L]:
    """Left side. By convention the failure or alternative case."""

    value: L


@dataclass(frozen=True, slots=True)
class Right[R]:
    """Right side. By convention the expected case."""

    value: R


type Either[L, R] = Left[L] | Right[R]
"""Exactly one of Left or Right."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Left", "Right", "Either")

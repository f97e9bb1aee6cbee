"""Performance benchmarks for parsenom.

Benchmarks use pytest-benchmark to track the cost of primitive scanning,
repetition loops and binary decoding.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []

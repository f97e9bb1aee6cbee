"""pytest-benchmark configuration for parsenom benchmarks.

Python 3.13+.
"""

from __future__ import annotations

import pytest


@pytest.hookimpl(optionalhook=True)
def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add parsenom metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "parsenom"
    output_json["python_version"] = "3.13+"


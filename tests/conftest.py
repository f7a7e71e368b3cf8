"""Global pytest configuration.

Registers the shared fixture plugin `sample_graphs` (tests/sample_graphs.py).
The plugin is listed here rather than imported so pytest applies assertion
rewriting to it.
"""

from __future__ import annotations

pytest_plugins: list[str] = ["sample_graphs"]

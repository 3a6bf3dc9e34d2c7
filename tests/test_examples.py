"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def test_trace_demo_example_runs() -> None:
    """Test that examples/trace_demo.py runs successfully."""
    script = ROOT / "examples" / "trace_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        encoding="utf-8",
        check=False,
        timeout=30,
        env=env,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )

    assert "--- Final Shortest Paths ---" in result.stdout
    assert "[missing_source] Please select a source node" in result.stdout
    assert "Kruskal MST weight" in result.stdout

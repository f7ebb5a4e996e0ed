from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used by walker, writer and CLI tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich from forcing ANSI output into captured streams."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference listing tree.

    Structure:
    /root
      a.txt          (10 bytes)
      b/
        c.txt        (5 bytes)
      .d.txt
      .hidden/
        sentinel.txt
    """
    root = tmp_path / "root"
    root.mkdir()

    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_bytes(b"y" * 5)
    (root / ".d.txt").write_text("hidden", encoding="utf-8")
    (root / ".hidden").mkdir()
    (root / ".hidden" / "sentinel.txt").write_text("never listed", encoding="utf-8")

    return root

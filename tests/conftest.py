"""Pytest configuration for the `tests/` suite.

CI installs the package in editable mode, which exposes `permcalc.*`. When
running straight from a checkout without installing, the repository root is
added to `sys.path` so `import permcalc` still resolves.
"""

from __future__ import annotations

import sys
from pathlib import Path


def _prepend_sys_path(path: Path) -> None:
    if not path.exists() or not path.is_dir():
        return

    path_str = str(path.resolve())
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


_REPO_ROOT = Path(__file__).resolve().parents[1]

_prepend_sys_path(_REPO_ROOT)

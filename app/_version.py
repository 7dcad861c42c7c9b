"""Package version: installed metadata first, then pyproject.toml in a source checkout."""
from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _from_pyproject() -> str:
    if not _PYPROJECT.is_file():
        return "0.0.0"
    match = re.search(r'^version\s*=\s*"([^"]+)"', _PYPROJECT.read_text(encoding="utf-8"), re.MULTILINE)
    return match.group(1) if match else "0.0.0"


try:
    __version__: str = version("docsite")
except PackageNotFoundError:
    __version__ = _from_pyproject()

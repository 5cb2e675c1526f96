from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from getxgen.config import FeatureConfig  # noqa: E402

Snapshot = dict[str, "bytes | None"]


@pytest.fixture()
def reset_password() -> FeatureConfig:
    return FeatureConfig.from_name("reset password")


@pytest.fixture()
def snapshot() -> Callable[[Path], Snapshot]:
    """Map every path below a directory to its content (``None`` for folders)."""

    def take(directory: Path) -> Snapshot:
        return {
            str(path.relative_to(directory)): None if path.is_dir() else path.read_bytes()
            for path in sorted(directory.rglob("*"))
        }

    return take

from pathlib import Path

import pytest

from sdprovision.system import UnitFileManager


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """An empty directory standing in for the provisioned root.
    """
    path = tmp_path / 'root'
    path.mkdir()
    return path


@pytest.fixture
def manager(root: Path) -> UnitFileManager:
    return UnitFileManager(root)


@pytest.fixture
def persistent_dir(root: Path) -> Path:
    return root / 'etc' / 'systemd' / 'system'

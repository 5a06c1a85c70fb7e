from pathlib import Path

import pytest

from sdprovision.system import (
    UnitFileManager,
    is_masked,
    mask_unit,
    unmask_unit,
)


def assert_masked(path: Path) -> None:
    assert path.is_symlink()
    assert str(path.readlink()) == '/dev/null'


class TestMaskUnit:
    def test_unit_that_does_not_exist(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        path = mask_unit('foo.service', root)

        assert path == persistent_dir / 'foo.service'
        assert_masked(path)

    def test_existing_unit_file(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        persistent_dir.mkdir(parents=True)
        bar = persistent_dir / 'bar.service'
        bar.write_text('[Service]\nExecStart=/bin/true\n')

        mask_unit('bar.service', root)

        assert_masked(bar)

    def test_existing_foreign_symlink(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        persistent_dir.mkdir(parents=True)
        target = root / 'real.service'
        target.write_text('[Unit]\n')
        link = persistent_dir / 'real.service'
        link.symlink_to(target)

        mask_unit('real.service', root)

        assert_masked(link)
        assert target.read_text() == '[Unit]\n'

    def test_dangling_symlink(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        persistent_dir.mkdir(parents=True)
        link = persistent_dir / 'gone.service'
        link.symlink_to(root / 'missing')

        mask_unit('gone.service', root)

        assert_masked(link)

    def test_idempotent(self, root: Path, persistent_dir: Path) -> None:
        mask_unit('foo.service', root)
        assert_masked(persistent_dir / 'foo.service')

        mask_unit('foo.service', root)
        assert_masked(persistent_dir / 'foo.service')

    def test_directory_in_the_way(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        blocker = persistent_dir / 'foo.service'
        blocker.mkdir(parents=True)
        (blocker / 'keep').write_text('data')

        with pytest.raises(OSError):
            mask_unit('foo.service', root)

        assert (blocker / 'keep').read_text() == 'data'

    def test_empty_directory_in_the_way(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        blocker = persistent_dir / 'foo.service'
        blocker.mkdir(parents=True)

        mask_unit('foo.service', root)

        assert_masked(blocker)

    def test_absolute_name_stays_under_root(
        self,
        root: Path,
        persistent_dir: Path,
        tmp_path: Path,
    ) -> None:
        outside = tmp_path / 'outside.service'
        outside.write_text('[Unit]\n')

        path = mask_unit(str(outside), root)

        assert path == persistent_dir / str(outside).lstrip('/')
        assert_masked(path)
        assert outside.read_text() == '[Unit]\n'

    def test_masks_persistent_path_only(self, root: Path) -> None:
        mask_unit('50-eth0.network', root)

        assert_masked(
            root / 'etc' / 'systemd' / 'system' / '50-eth0.network'
        )
        assert not (root / 'run').exists()


class TestUnmaskUnit:
    def test_removes_mask(self, root: Path, persistent_dir: Path) -> None:
        mask_unit('foo.service', root)

        assert unmask_unit('foo.service', root) is True
        assert not (persistent_dir / 'foo.service').is_symlink()
        assert not (persistent_dir / 'foo.service').exists()

    def test_missing_unit(self, root: Path) -> None:
        assert unmask_unit('foo.service', root) is False

    def test_leaves_regular_file(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        persistent_dir.mkdir(parents=True)
        unit = persistent_dir / 'foo.service'
        unit.write_text('[Unit]\n')

        assert unmask_unit('foo.service', root) is False
        assert unit.read_text() == '[Unit]\n'

    def test_leaves_foreign_symlink(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        persistent_dir.mkdir(parents=True)
        link = persistent_dir / 'foo.service'
        link.symlink_to(root / 'elsewhere.service')

        assert unmask_unit('foo.service', root) is False
        assert link.is_symlink()


class TestIsMasked:
    def test_masked(self, manager: UnitFileManager) -> None:
        manager.mask_unit('foo.service')
        assert manager.is_masked('foo.service')

    def test_missing(self, manager: UnitFileManager) -> None:
        assert not manager.is_masked('foo.service')

    def test_regular_file(
        self,
        root: Path,
        persistent_dir: Path,
    ) -> None:
        persistent_dir.mkdir(parents=True)
        (persistent_dir / 'foo.service').write_text('[Unit]\n')

        assert not is_masked('foo.service', root)

import logging
from pathlib import Path

from sdprovision.constants import (
    DROP_IN_DIR_SUFFIX,
    DROP_IN_FILENAME,
    SystemdPaths,
    UnitFileModes,
)
from sdprovision.models.unit import Unit


class SystemdDirectoryManager:
    """Manages systemd configuration directories below a root.
    """

    def __init__(self, root: Path | str = '/') -> None:
        """Initialize the directory manager for ``root``.
        """
        self._logger = logging.getLogger(__name__)
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def get_persistent_unit_dir(self) -> Path:
        """Get the durable unit directory, <root>/etc/systemd/system.
        """
        return self._root / SystemdPaths.PERSISTENT_UNIT_DIR

    def get_runtime_unit_dir(self, group: str) -> Path:
        """Get the volatile unit directory for ``group``.
        """
        return self._root / SystemdPaths.RUNTIME_UNIT_DIR / group

    def ensure_directory_exists(self, path: Path) -> None:
        """Ensure directory exists, creating missing ancestors with 0755.
        """
        missing = []
        current = path
        while not current.exists() and current != current.parent:
            missing.append(current)
            current = current.parent

        try:
            for directory in reversed(missing):
                directory.mkdir(
                    mode=UnitFileModes.DIRECTORY,
                    exist_ok=True,
                )
                directory.chmod(UnitFileModes.DIRECTORY)
                self._logger.debug('Created directory: %s', directory)
        except OSError as e:
            self._logger.error(
                'Failed to create directory %s: %s',
                path,
                e,
                exc_info=True,
            )
            raise


class UnitFileManager:
    """Places and masks systemd unit files on a root filesystem.

    The manager never talks to systemd itself. It only lays out files the
    way systemd expects to find them, so the same code serves a live system
    (root ``/``) and an image or chroot being prepared.
    """

    def __init__(
        self,
        root: Path | str = '/',
        directory_manager: SystemdDirectoryManager | None = None,
    ) -> None:
        """Initialize with the target root and optional directory manager.
        """
        self._logger = logging.getLogger(__name__)

        self._dir_manager = directory_manager or SystemdDirectoryManager(root)

    @property
    def root(self) -> Path:
        return self._dir_manager.root

    def unit_destination(self, unit: Unit) -> Path:
        """Get the full path the unit is written to.

        Runtime units go below /run/systemd/<group>, everything else directly
        into /etc/systemd/system. A drop-in becomes the single fragment of a
        ``<name>.d`` directory. Never touches the filesystem.
        """
        # Keep absolute-looking names below the root
        name = unit.name.lstrip('/')

        if unit.runtime:
            base_dir = self._dir_manager.get_runtime_unit_dir(unit.group)
        else:
            base_dir = self._dir_manager.get_persistent_unit_dir()

        if unit.drop_in:
            return base_dir / f'{name}{DROP_IN_DIR_SUFFIX}' \
                / DROP_IN_FILENAME

        return base_dir / name

    def place_unit(self, unit: Unit, destination: Path) -> Path:
        """Write unit content to ``destination`` with mode 0644.

        Args:
            unit: Unit whose content is written
            destination: Full path of the unit file

        Returns:
            Path to the written unit file

        Raises:
            OSError: If a directory or the file cannot be written
        """
        destination = Path(destination)

        self._dir_manager.ensure_directory_exists(destination.parent)

        try:
            # Never write through a symlink, e.g. a mask pointing at /dev/null
            if destination.is_symlink():
                destination.unlink()
                self._logger.debug('Replaced symlink at %s', destination)

            destination.write_text(unit.content, encoding='utf-8')
            destination.chmod(UnitFileModes.UNIT_FILE)
        except OSError as e:
            self._logger.error(
                'Failed to write unit file %s to %s: %s',
                unit.name,
                destination,
                e,
                exc_info=True,
            )
            raise

        self._logger.info('Wrote unit file: %s', destination)
        return destination

    def mask_unit(self, unit_name: str) -> Path:
        """Mask a unit by linking its persistent path to /dev/null.

        Whatever currently occupies the path (regular file, empty directory,
        earlier mask or any other symlink) is removed first, so masking is
        idempotent.

        Raises:
            OSError: If the old entry cannot be removed or the link created
        """
        destination = self._persistent_destination(unit_name)

        try:
            try:
                destination.unlink()
            except IsADirectoryError:
                destination.rmdir()
            self._logger.debug('Removed existing entry at %s', destination)
        except FileNotFoundError:
            pass
        except OSError as e:
            self._logger.error(
                'Failed to remove %s before masking: %s',
                destination,
                e,
                exc_info=True,
            )
            raise

        self._dir_manager.ensure_directory_exists(destination.parent)

        try:
            destination.symlink_to(SystemdPaths.NULL_DEVICE)
        except OSError as e:
            self._logger.error(
                'Failed to mask unit %s: %s',
                unit_name,
                e,
                exc_info=True,
            )
            raise

        self._logger.info('Masked unit %s at %s', unit_name, destination)
        return destination

    def unmask_unit(self, unit_name: str) -> bool:
        """Remove the mask of a unit.

        Only a symlink pointing at /dev/null is removed. Regular files and
        links elsewhere are left alone.

        Returns:
            True if a mask was removed, False if the unit was not masked
        """
        destination = self._persistent_destination(unit_name)

        if not self.is_masked(unit_name):
            self._logger.debug('Unit %s is not masked', unit_name)
            return False

        try:
            destination.unlink()
        except OSError as e:
            self._logger.error(
                'Failed to unmask unit %s: %s',
                unit_name,
                e,
                exc_info=True,
            )
            raise

        self._logger.info('Unmasked unit %s', unit_name)
        return True

    def is_masked(self, unit_name: str) -> bool:
        """Check whether the unit's persistent path is a link to /dev/null.
        """
        destination = self._persistent_destination(unit_name)
        if not destination.is_symlink():
            return False

        return str(destination.readlink()) == SystemdPaths.NULL_DEVICE

    def apply_unit(self, unit: Unit) -> Path:
        """Mask or place a unit depending on its ``mask`` flag.
        """
        if unit.mask:
            return self.mask_unit(unit.name)

        return self.place_unit(unit, self.unit_destination(unit))

    def _persistent_destination(self, unit_name: str) -> Path:
        return self.unit_destination(Unit(name=unit_name))


def unit_destination(unit: Unit, root: Path | str) -> Path:
    """Resolve where ``unit`` lives below ``root``.
    """
    return UnitFileManager(root).unit_destination(unit)


def place_unit(unit: Unit, destination: Path | str) -> Path:
    """Write ``unit`` to an already resolved ``destination``.
    """
    return UnitFileManager().place_unit(unit, Path(destination))


def mask_unit(unit_name: str, root: Path | str) -> Path:
    """Mask ``unit_name`` below ``root``.
    """
    return UnitFileManager(root).mask_unit(unit_name)


def unmask_unit(unit_name: str, root: Path | str) -> bool:
    """Remove the /dev/null link of ``unit_name`` below ``root``.
    """
    return UnitFileManager(root).unmask_unit(unit_name)


def is_masked(unit_name: str, root: Path | str) -> bool:
    """Check whether ``unit_name`` is masked below ``root``.
    """
    return UnitFileManager(root).is_masked(unit_name)

import logging
from pathlib import Path

from sdprovision.models.system import MachineInfo


class MachineIDProvider:
    """Machine id provider reading <root>/etc/machine-id.
    """

    def __init__(self, root: Path | str = '/') -> None:
        self._logger = logging.getLogger(__name__)
        self._root = Path(root)

    def get_machine_id(self) -> str:
        """Get the machine id, or an empty string if it cannot be read.
        """
        try:
            return MachineInfo.from_machine_id_file(self._root).machine_id
        except RuntimeError as e:
            self._logger.debug('No machine id available: %s', e)
            return ''


def machine_id(root: Path | str) -> str:
    """Machine id of the system rooted at ``root``.
    """
    return MachineIDProvider(root).get_machine_id()

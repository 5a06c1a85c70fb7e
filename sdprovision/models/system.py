from pathlib import Path
from typing import Self

from pydantic import Field

from sdprovision.constants import SystemdPaths
from sdprovision.utils import BaseModel


class MachineInfo(BaseModel):
    """Identity of the machine being provisioned.

    Args:
        machine_id: Contents of /etc/machine-id, surrounding whitespace removed
    """

    machine_id: str = Field(...)

    @classmethod
    def from_machine_id_file(cls, root: Path | str) -> Self:
        """Read the machine id below ``root``.
        """
        machine_id_path = Path(root) / SystemdPaths.MACHINE_ID_FILE
        try:
            raw = machine_id_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(
                f'Failed to read machine id from {machine_id_path}: {e}'
            )

        return cls(machine_id=raw.strip())

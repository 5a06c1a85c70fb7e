from enum import StrEnum
from typing import Final


class SystemdPaths(StrEnum):
    """Systemd locations, relative to the provisioned root.
    """

    # Persistent unit directory
    PERSISTENT_UNIT_DIR = 'etc/systemd/system'

    # Runtime units live under a per-group subdirectory of this one
    RUNTIME_UNIT_DIR = 'run/systemd'

    MACHINE_ID_FILE = 'etc/machine-id'

    # Absolute, mask links always point here
    NULL_DEVICE = '/dev/null'


class UnitFileModes:
    """Permission bits for files and directories created on the root.
    """

    UNIT_FILE: Final[int] = 0o644
    DIRECTORY: Final[int] = 0o755


DROP_IN_FILENAME: Final[str] = '20-cloudinit.conf'
DROP_IN_DIR_SUFFIX: Final[str] = '.d'

DEFAULT_UNIT_GROUP: Final[str] = 'system'

# Unit type (name suffix) -> runtime subdirectory
UNIT_TYPE_GROUPS: Final[dict[str, str]] = {
    'network': 'network',
    'netdev': 'network',
    'link': 'network',
}

from sdprovision.constants import (
    DROP_IN_FILENAME,
    SystemdPaths,
    UnitFileModes,
)
from sdprovision.system.providers import MachineIDProvider, machine_id
from sdprovision.system.unit_file_manager import (
    SystemdDirectoryManager,
    UnitFileManager,
    is_masked,
    mask_unit,
    place_unit,
    unit_destination,
    unmask_unit,
)

__all__ = [
    'DROP_IN_FILENAME',
    'SystemdPaths',
    'UnitFileModes',
    'MachineIDProvider',
    'machine_id',
    'SystemdDirectoryManager',
    'UnitFileManager',
    'is_masked',
    'mask_unit',
    'place_unit',
    'unit_destination',
    'unmask_unit',
]

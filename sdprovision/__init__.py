from sdprovision.models import MachineInfo, Unit
from sdprovision.system import (
    DROP_IN_FILENAME,
    UnitFileManager,
    is_masked,
    machine_id,
    mask_unit,
    place_unit,
    unit_destination,
    unmask_unit,
)

__all__ = [
    'DROP_IN_FILENAME',
    'MachineInfo',
    'Unit',
    'UnitFileManager',
    'is_masked',
    'machine_id',
    'mask_unit',
    'place_unit',
    'unit_destination',
    'unmask_unit',
]

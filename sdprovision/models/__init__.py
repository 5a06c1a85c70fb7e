from sdprovision.models.system import MachineInfo
from sdprovision.models.unit import Unit

__all__ = [
    'MachineInfo',
    'Unit',
]

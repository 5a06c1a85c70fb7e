from pydantic import Field

from sdprovision.constants import DEFAULT_UNIT_GROUP, UNIT_TYPE_GROUPS
from sdprovision.utils import BaseModel


class Unit(BaseModel):
    """A systemd unit to be materialized on a root filesystem.

    Args:
        name: Unit name, e.g. "50-eth0.network" or "media-state.mount"
        runtime: Place the unit in the volatile /run tree instead of /etc
        drop_in: Content is an override fragment for an existing unit
        content: Raw unit file content, written byte for byte
        mask: Mask the unit instead of writing its content
    """

    name: str = Field(..., min_length=1)
    runtime: bool = Field(False)
    drop_in: bool = Field(False)
    content: str = Field('')
    mask: bool = Field(False)

    @property
    def unit_type(self) -> str:
        """Unit type taken from the name suffix, '' when there is none.
        """
        _, dot, suffix = self.name.rpartition('.')
        return suffix if dot else ''

    @property
    def group(self) -> str:
        """Runtime subdirectory the unit belongs to (network, system, ...).
        """
        return UNIT_TYPE_GROUPS.get(self.unit_type, DEFAULT_UNIT_GROUP)

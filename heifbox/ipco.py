"""Item property container box."""

from __future__ import annotations

from .box import Box, ContainerBox, register_box
from .ipma import Association, Entry

__all__ = ["IPCO"]


@register_box("ipco")
class IPCO(ContainerBox):
    """The 'ipco' box holding the item properties referenced by 'ipma'."""

    def __init__(self) -> None:
        super().__init__("ipco")

    def property_at_index(self, index: int) -> Box | None:
        """Return the property at zero-based ``index``, or None if out of range."""
        if index < 0 or index >= len(self.boxes):
            return None
        return self.boxes[index]

    def get_property(self, association: Association) -> Box | None:
        """Return the property an association points to (one-based), or None."""
        index = association.property_index
        if index == 0 or len(self.boxes) < index:
            return None
        return self.boxes[index - 1]

    def get_properties(self, entry: Entry) -> list[Box]:
        """Return every property an entry's associations resolve to."""
        found = (self.get_property(a) for a in entry.associations)
        return [box for box in found if box is not None]
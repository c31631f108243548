"""
Partial-update (patch) base type.
A patch carries only the fields the client actually sent; everything else
stays None and leaves the stored value untouched when applied.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, List


@dataclass
class Patch:
    """Base class for entity patches. Subclasses declare Optional fields."""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'Patch':
        """Build a patch from a JSON payload, ignoring unknown and null keys."""
        payload = payload or {}
        values = {}
        for f in fields(cls):
            value = payload.get(f.name)
            if value is not None:
                values[f.name] = value
        return cls(**values)

    def present_fields(self) -> List[str]:
        """Names of fields carried by this patch."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def is_empty(self) -> bool:
        return not self.present_fields()

    def apply(self, entity: Any) -> Any:
        """Copy present fields onto the entity and return it."""
        for name in self.present_fields():
            setattr(entity, name, getattr(self, name))
        return entity

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Frozen API payload record.

    Unset optional fields are omitted from payloads, and builder methods on
    subclasses return updated copies rather than mutating the receiver.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]):
        return cls.model_validate(payload)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def _with(self, **updates: Any):
        # Revalidated; model_copy(update=...) would store values unchecked.
        return type(self).model_validate({**self.model_dump(), **updates})

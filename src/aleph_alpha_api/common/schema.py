"""Pydantic base models for request and response payloads."""
from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class WireModel(BaseModel):
    """
    Request payload that only sends what the caller asked for.

    Optional fields default to ``None`` and are left out of the JSON body unless
    they were passed explicitly, to the constructor or through :meth:`set`.
    An explicit ``None`` is sent as ``null``. Required fields and fields with a
    non-null default are always sent.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        protected_namespaces=(),
    )

    @model_serializer(mode="wrap")
    def _omit_unset(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if field.default is not None or name in self.model_fields_set:
                continue
            key = (field.serialization_alias or field.alias or name) if info.by_alias else name
            data.pop(key, None)
        return data

    def set(self, **fields: Any) -> Any:
        """
        Set optional fields in place and return the request for chaining.

        Args:
            **fields: Field values keyed by their python name.
        """
        for name, value in fields.items():
            setattr(self, name, value)
        return self

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body using the wire names."""
        return self.model_dump(mode="json", by_alias=True)


class ResponseModel(BaseModel):
    """Immutable server response. Unknown keys are ignored."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

"""Structured decoder capability interface.

The strategy chain and integrity checker only talk to a ``RecordSchema``.
Protobuf message classes are adapted through ``ProtobufRecordSchema``.
"""

from __future__ import annotations

from typing import Any, Protocol

from google.protobuf import json_format
from google.protobuf.descriptor import Descriptor, FieldDescriptor
from google.protobuf.message import DecodeError, Message

from core.errors import RecordDecodeError, ResponseSerializationError

# json_format renders these as strings; the toolkit reports them as numbers.
_INT64_FIELD_TYPES = frozenset(
    {
        FieldDescriptor.TYPE_INT64,
        FieldDescriptor.TYPE_UINT64,
        FieldDescriptor.TYPE_SINT64,
        FieldDescriptor.TYPE_FIXED64,
        FieldDescriptor.TYPE_SFIXED64,
    }
)


class RecordSchema(Protocol):
    """Decode/encode capability for one record type."""

    name: str

    def decode(self, data: bytes) -> Any:
        """Parse bytes into a record or raise ``RecordDecodeError``."""
        ...

    def encode(self, record: Any) -> bytes:
        """Serialize a record back into bytes."""
        ...

    def to_value(self, record: Any) -> dict[str, Any]:
        """Render a record as a generic JSON-safe mapping."""
        ...


class ProtobufRecordSchema:
    """``RecordSchema`` backed by a protobuf message class."""

    def __init__(self, message_class: type[Message]) -> None:
        self._message_class = message_class
        self.name = message_class.DESCRIPTOR.full_name

    def decode(self, data: bytes) -> Message:
        # The pure-python backend reports bad UTF-8 in string fields as
        # UnicodeDecodeError rather than DecodeError.
        try:
            return self._message_class.FromString(data)
        except (DecodeError, UnicodeDecodeError) as error:
            raise RecordDecodeError(f"{self.name} parse failed: {error}") from error

    def encode(self, record: Message) -> bytes:
        return record.SerializeToString()

    def to_value(self, record: Message) -> dict[str, Any]:
        try:
            value = json_format.MessageToDict(record, preserving_proto_field_name=True)
        except (TypeError, ValueError) as error:
            raise ResponseSerializationError(
                f"Failed to render {self.name} as a structured value: {error}"
            ) from error
        return _restore_int64_numbers(value, record.DESCRIPTOR)


def _restore_int64_numbers(value: dict[str, Any], descriptor: Descriptor) -> dict[str, Any]:
    """Convert 64-bit integer fields rendered as strings back into ints.

    Args:
        value: ``MessageToDict`` output keyed by proto field names.
        descriptor: Descriptor of the message ``value`` was rendered from.

    Returns:
        The same mapping, updated in place.
    """
    for field in descriptor.fields:
        if field.name not in value:
            continue
        item = value[field.name]
        if field.message_type is not None:
            if field.message_type.GetOptions().map_entry:
                value[field.name] = _restore_map_values(item, field.message_type)
            elif isinstance(item, list):
                for entry in item:
                    if isinstance(entry, dict):
                        _restore_int64_numbers(entry, field.message_type)
            elif isinstance(item, dict):
                _restore_int64_numbers(item, field.message_type)
        elif field.type in _INT64_FIELD_TYPES:
            value[field.name] = [int(v) for v in item] if isinstance(item, list) else int(item)
    return value


def _restore_map_values(item: dict[str, Any], entry_descriptor: Descriptor) -> dict[str, Any]:
    value_field = entry_descriptor.fields_by_name["value"]
    if value_field.message_type is not None:
        for entry in item.values():
            if isinstance(entry, dict):
                _restore_int64_numbers(entry, value_field.message_type)
        return item
    if value_field.type in _INT64_FIELD_TYPES:
        return {key: int(entry) for key, entry in item.items()}
    return item

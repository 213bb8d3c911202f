"""Batch report event schema.

The client log producer batches ``ReportEvent`` entries under one
``BatchReportEvent`` message. The descriptor is assembled here so the
toolkit needs no generated protobuf modules.
"""

from __future__ import annotations

from functools import lru_cache

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import Message

from schema.record_schema import ProtobufRecordSchema

PROTO_PACKAGE = "batchdecode.client.log"
BATCH_REPORT_EVENT = "BatchReportEvent"

_FieldSpec = tuple[str, int, int, int, str]

_LABEL_OPTIONAL = descriptor_pb2.FieldDescriptorProto.LABEL_OPTIONAL
_LABEL_REPEATED = descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED
_TYPE_STRING = descriptor_pb2.FieldDescriptorProto.TYPE_STRING
_TYPE_UINT64 = descriptor_pb2.FieldDescriptorProto.TYPE_UINT64
_TYPE_UINT32 = descriptor_pb2.FieldDescriptorProto.TYPE_UINT32
_TYPE_MESSAGE = descriptor_pb2.FieldDescriptorProto.TYPE_MESSAGE

# (name, number, label, type, message type name)
_MESSAGES: dict[str, tuple[_FieldSpec, ...]] = {
    "IdentityPackage": (
        ("device_id", 1, _LABEL_OPTIONAL, _TYPE_STRING, ""),
        ("user_id", 2, _LABEL_OPTIONAL, _TYPE_STRING, ""),
        ("global_id", 3, _LABEL_OPTIONAL, _TYPE_STRING, ""),
    ),
    "AppPackage": (
        ("version_name", 1, _LABEL_OPTIONAL, _TYPE_STRING, ""),
        ("version_code", 2, _LABEL_OPTIONAL, _TYPE_UINT32, ""),
        ("channel", 3, _LABEL_OPTIONAL, _TYPE_STRING, ""),
        ("platform", 4, _LABEL_OPTIONAL, _TYPE_STRING, ""),
    ),
    "CommonPackage": (
        ("identity_package", 1, _LABEL_OPTIONAL, _TYPE_MESSAGE, "IdentityPackage"),
        ("app_package", 2, _LABEL_OPTIONAL, _TYPE_MESSAGE, "AppPackage"),
        ("network_type", 3, _LABEL_OPTIONAL, _TYPE_STRING, ""),
    ),
    "EventPackage": (
        ("action", 1, _LABEL_OPTIONAL, _TYPE_STRING, ""),
        ("page", 2, _LABEL_OPTIONAL, _TYPE_STRING, ""),
        ("params", 3, _LABEL_OPTIONAL, _TYPE_STRING, ""),
        ("tags", 4, _LABEL_REPEATED, _TYPE_STRING, ""),
    ),
    "ReportEvent": (
        ("client_timestamp", 1, _LABEL_OPTIONAL, _TYPE_UINT64, ""),
        ("client_increment_id", 2, _LABEL_OPTIONAL, _TYPE_UINT64, ""),
        ("session_id", 3, _LABEL_OPTIONAL, _TYPE_STRING, ""),
        ("event_package", 4, _LABEL_OPTIONAL, _TYPE_MESSAGE, "EventPackage"),
    ),
    BATCH_REPORT_EVENT: (
        ("event", 1, _LABEL_REPEATED, _TYPE_MESSAGE, "ReportEvent"),
        ("common_package", 2, _LABEL_OPTIONAL, _TYPE_MESSAGE, "CommonPackage"),
        ("send_timestamp", 3, _LABEL_OPTIONAL, _TYPE_UINT64, ""),
    ),
}


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="batchdecode/client/log/batch_report.proto",
        package=PROTO_PACKAGE,
        syntax="proto3",
    )
    for message_name, fields in _MESSAGES.items():
        message_proto = file_proto.message_type.add(name=message_name)
        for field_name, number, label, field_type, type_name in fields:
            field_proto = message_proto.field.add(
                name=field_name, number=number, label=label, type=field_type
            )
            if type_name:
                field_proto.type_name = f".{PROTO_PACKAGE}.{type_name}"
    return file_proto


@lru_cache(maxsize=None)
def _message_classes() -> dict[str, type[Message]]:
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(_build_file_descriptor().SerializeToString())
    return {
        name: message_factory.GetMessageClass(
            pool.FindMessageTypeByName(f"{PROTO_PACKAGE}.{name}")
        )
        for name in _MESSAGES
    }


def message_class(name: str) -> type[Message]:
    """Return the protobuf class for a batch report message name.

    Args:
        name: Unqualified message name, e.g. ``ReportEvent``.

    Returns:
        Generated message class.
    """
    return _message_classes()[name]


def batch_report_schema() -> ProtobufRecordSchema:
    """Return the record schema for ``BatchReportEvent`` payloads."""
    return ProtobufRecordSchema(message_class(BATCH_REPORT_EVENT))

"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

Multipart form builder.

Flattens a payload object into ``resource[field]`` form parts for nested
resource submissions, optionally followed by one file part. Only fields
declared directly on the payload's own class are sent, so bookkeeping fields
of a base class never reach the wire.
"""

from __future__ import annotations

import dataclasses
import inspect
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import (
    Any,
    BinaryIO,
    ClassVar,
    Iterable,
    Iterator,
    List,
    Optional,
    Protocol,
    Tuple,
    Union,
    get_origin,
    runtime_checkable,
)
from uuid import UUID

from sendowl.exceptions import SerializationError
from sendowl.sdk.naming import LOWERCASE, NamingPolicy

DEFAULT_ATTACHMENT_FIELD = "attachment"

FileContent = Union[bytes, BinaryIO]


@runtime_checkable
class FormEncodable(Protocol):
    """Payloads that choose their own form fields.

    ``to_form_fields`` yields ``(field_name, value)`` pairs; names still go
    through the builder's naming policy and null/id suppression rules.
    """

    def to_form_fields(self) -> Iterable[Tuple[str, Any]]:
        ...


@dataclass(frozen=True)
class Attachment:
    """A file to send alongside the form fields."""
    stream: FileContent
    filename: str
    field_name: str = DEFAULT_ATTACHMENT_FIELD
    content_type: Optional[str] = None


@dataclass(frozen=True)
class FormField:
    """One multipart part: a text value, or a file when ``filename`` is set."""
    key: str
    value: Optional[str] = None
    filename: Optional[str] = None
    stream: Optional[FileContent] = None
    content_type: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.stream is not None

    @staticmethod
    def to_httpx(fields: Iterable["FormField"]) -> List[Tuple[str, Tuple[Any, ...]]]:
        """Render fields as an httpx ``files=`` list.

        Text parts are sent as ``(None, bytes)`` tuples so the request is
        multipart even when no file is attached.
        """
        parts: List[Tuple[str, Tuple[Any, ...]]] = []
        for f in fields:
            if f.is_file:
                if f.content_type:
                    parts.append((f.key, (f.filename, f.stream, f.content_type)))
                else:
                    parts.append((f.key, (f.filename, f.stream)))
            else:
                parts.append((f.key, (None, (f.value or "").encode("utf-8"))))
        return parts


def _is_zero(value: Any) -> bool:
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float, Decimal)):
        return value == 0
    if isinstance(value, UUID):
        return value.int == 0
    return False


def _form_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _form_text(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    ):
        raise SerializationError(
            f"Nested {type(value).__name__} values cannot be form-encoded"
        )
    return str(value)


class MultipartBuilder:
    """Builds the form parts of a nested-resource submission.

    Args:
        policy: Naming policy for field names. Defaults to :data:`LOWERCASE`.

    Example::

        builder = MultipartBuilder()
        builder.build(Item(id=42, name="Foo"), "item")
        # [FormField("item[id]", "42"), FormField("item[name]", "Foo")]
    """

    def __init__(self, policy: NamingPolicy = LOWERCASE) -> None:
        self._policy = policy

    @property
    def policy(self) -> NamingPolicy:
        return self._policy

    def build(
        self,
        obj: Any,
        resource_name: str,
        attachment: Optional[Attachment] = None,
    ) -> List[FormField]:
        """Return the form parts for ``obj`` nested under ``resource_name``.

        Raises:
            SerializationError: If a field holds a nested object.
        """
        fields: List[FormField] = []
        for name, value in self._field_values(obj):
            if value is None:
                continue
            if name.casefold() == "id" and _is_zero(value):
                continue
            key = f"{resource_name}[{self._policy.apply(name)}]"
            if isinstance(value, (list, tuple, set, frozenset)):
                fields.extend(
                    FormField(key=f"{key}[]", value=_form_text(item))
                    for item in value
                    if item is not None
                )
            else:
                fields.append(FormField(key=key, value=_form_text(value)))

        if attachment is not None and attachment.stream is not None:
            fields.append(
                FormField(
                    key=f"{resource_name}[{attachment.field_name}]",
                    filename=attachment.filename,
                    stream=attachment.stream,
                    content_type=attachment.content_type,
                )
            )
        return fields

    def _field_values(self, obj: Any) -> Iterator[Tuple[str, Any]]:
        if isinstance(obj, FormEncodable):
            yield from obj.to_form_fields()
            return

        cls = type(obj)
        own = inspect.get_annotations(cls)
        if dataclasses.is_dataclass(obj):
            # fields of a frozen dataclass are not writable
            if cls.__dataclass_params__.frozen:
                return
            for f in dataclasses.fields(obj):
                if f.init and f.name in own:
                    yield f.name, getattr(obj, f.name)
            return

        # Plain classes: attributes annotated on the class itself, then
        # properties with a setter defined in its body.
        body = vars(cls)
        for name, annotation in own.items():
            if name.startswith("_") or isinstance(body.get(name), property):
                continue
            if get_origin(annotation) is ClassVar:
                continue
            yield name, getattr(obj, name, None)
        for name, attr in body.items():
            if isinstance(attr, property) and attr.fset is not None and not name.startswith("_"):
                yield name, getattr(obj, name)

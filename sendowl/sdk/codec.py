"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

Case-convention JSON codec.

Validation and serialization are done by pydantic ``TypeAdapter``s whose
config turns every field name into its wire key through a ``NamingPolicy``
(lower-case by default). Keys of plain mappings are run through the same
policy on the way out and on the way in, so keys match case-insensitively
at every depth.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Tuple, Type, TypeVar, Union

from pydantic import ConfigDict, PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from sendowl.exceptions import SerializationError
from sendowl.sdk.naming import LOWERCASE, NamingPolicy

T = TypeVar("T")


def _format_errors(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        # drop the envelope position
        loc = ".".join(str(part) for part in error["loc"][1:]) or "$"
        messages.append(f"{loc}: {error['msg']}")
    return "; ".join(messages)


class JsonCodec:
    """JSON codec applying a naming policy to every object key.

    Args:
        policy: Naming policy for keys. Defaults to :data:`LOWERCASE`.

    Example::

        codec = JsonCodec()
        text = codec.encode(Product(Name="Widget", Price=9.99))
        # '{"name": "Widget", "price": 9.99}'
        product = codec.decode(text, Product)
    """

    def __init__(self, policy: NamingPolicy = LOWERCASE) -> None:
        self._policy = policy
        self._config = ConfigDict(alias_generator=policy.apply, populate_by_name=True)
        self._adapters: Dict[Any, TypeAdapter] = {}

    @property
    def policy(self) -> NamingPolicy:
        return self._policy

    def _adapter(self, tp: Any) -> TypeAdapter:
        adapter = self._adapters.get(tp)
        if adapter is None:
            # A stdlib dataclass takes its config from the enclosing schema, and
            # TypeAdapter rejects a config for a bare dataclass, so wrap it.
            try:
                adapter = TypeAdapter(Tuple[tp], config=self._config)
            except PydanticSchemaGenerationError as exc:
                raise SerializationError(f"Unsupported type {tp!r}: {exc}") from exc
            self._adapters[tp] = adapter
        return adapter

    def _rename_keys(self, value: Any) -> Any:
        if isinstance(value, dict):
            result: Dict[str, Any] = {}
            for key, item in value.items():
                wire_key = self._policy.apply(str(key))
                if wire_key in result:
                    raise SerializationError(
                        f"Two fields map to the same wire key '{wire_key}'"
                    )
                result[wire_key] = self._rename_keys(item)
            return result
        if isinstance(value, list):
            return [self._rename_keys(item) for item in value]
        return value

    # -- Encoding ----------------------------------------------------------

    def encode(self, value: Any) -> str:
        """Encode ``value`` as JSON text with policy-named keys.

        Raises:
            SerializationError: If ``value`` (or anything nested in it) has
                no JSON representation.
        """
        wire = self.to_wire(value)
        try:
            return json.dumps(wire, ensure_ascii=False, allow_nan=False)
        except ValueError as exc:
            raise SerializationError(f"Cannot encode value as JSON: {exc}") from exc

    def to_wire(self, value: Any) -> Any:
        """Convert ``value`` into plain JSON-ready structures."""
        adapter = self._adapter(type(value))
        try:
            dumped = adapter.dump_python((value,), mode="json", by_alias=True)
        except PydanticSerializationError as exc:
            raise SerializationError(
                f"Cannot encode value of type {type(value).__name__}: {exc}"
            ) from exc
        return self._rename_keys(dumped[0])

    # -- Decoding ----------------------------------------------------------

    def decode(self, text: Union[str, bytes], target_type: Type[T]) -> T:
        """Parse JSON ``text`` and validate it into ``target_type``.

        Raises:
            SerializationError: If the text is not valid JSON or its shape is
                incompatible with ``target_type``.
        """
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise SerializationError(f"Malformed JSON: {exc}") from exc
        return self.from_wire(data, target_type)

    def from_wire(self, data: Any, target_type: Any) -> Any:
        """Validate already-parsed JSON ``data`` into ``target_type``."""
        adapter = self._adapter(target_type)
        try:
            return adapter.validate_python((self._rename_keys(data),))[0]
        except ValidationError as exc:
            raise SerializationError(
                f"Cannot decode {getattr(target_type, '__name__', target_type)}: "
                f"{_format_errors(exc)}"
            ) from exc

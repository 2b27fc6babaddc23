"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

Wire naming policy.

A ``NamingPolicy`` is an immutable value handed to the codec and the
multipart builder at construction time. The same policy is applied on the
encode and decode paths so a field survives a round trip through the wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class NamingPolicy:
    """Deterministic transform from a field name to its wire key.

    Args:
        name: Human readable policy name (used in logs and reprs).
        transform: Pure function applied to every field name.
    """

    name: str
    transform: Callable[[str], str]

    def apply(self, field_name: str) -> str:
        """Return the wire key for ``field_name``."""
        return self.transform(field_name)

    def matches(self, wire_key: str, field_name: str) -> bool:
        """Case-insensitive comparison of a wire key with a field name."""
        return self.apply(wire_key).casefold() == self.apply(field_name).casefold()


LOWERCASE = NamingPolicy(name="lowercase", transform=str.lower)

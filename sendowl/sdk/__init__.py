"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

SendOwl SDK public API surface.

Quick start::

    from sendowl.sdk import Credentials, TransportClient

    async with TransportClient(base_url, Credentials(key, secret)) as client:
        product = await client.fetch("products/1", Product)
"""

from sendowl.sdk.codec import JsonCodec
from sendowl.sdk.multipart import (
    DEFAULT_ATTACHMENT_FIELD,
    Attachment,
    FormEncodable,
    FormField,
    MultipartBuilder,
)
from sendowl.sdk.naming import LOWERCASE, NamingPolicy
from sendowl.sdk.transport import Credentials, TransportClient

__all__ = [
    # transport
    "TransportClient",
    "Credentials",
    # codec
    "JsonCodec",
    "NamingPolicy",
    "LOWERCASE",
    # multipart
    "MultipartBuilder",
    "Attachment",
    "FormField",
    "FormEncodable",
    "DEFAULT_ATTACHMENT_FIELD",
]

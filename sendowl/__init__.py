"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

SendOwl Transport - lower-case JSON and multipart transport for the SendOwl API

Resource clients (products, orders, ...) build on ``sendowl.sdk.TransportClient``
to fetch, create, replace and remove resources and to submit multipart forms
with file attachments.
"""

from sendowl._version import __version__

__all__ = ["__version__"]

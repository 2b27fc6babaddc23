"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SendOwl Transport, a product of Garudex Labs

Demo script for the SendOwl transport.

Shows how a resource client (products here) sits on top of TransportClient:
JSON reads and writes, a multipart upload with an attachment, and error
handling.

Requirements:
- ~/.sendowl/config.yaml (or $SENDOWL_CONFIG) with api_key and api_secret,
  e.g. as ${SENDOWL_API_KEY} and ${SENDOWL_API_SECRET}
- Network access to the SendOwl API
"""

import asyncio
import os
from dataclasses import dataclass
from typing import List, Optional

from sendowl.exceptions import HttpStatusError, NetworkError
from sendowl.config import load_config
from sendowl.logging_config import setup_logging_from_config
from sendowl.sdk import Attachment, TransportClient


@dataclass
class Product:
    id: int = 0
    name: Optional[str] = None
    product_type: Optional[str] = None
    price: Optional[str] = None


class ProductClient:
    """Minimal resource client built on the shared transport."""

    def __init__(self, transport: TransportClient) -> None:
        self._transport = transport

    async def list(self) -> List[Product]:
        return await self._transport.fetch("products", List[Product])

    async def get(self, product_id: int) -> Product:
        return await self._transport.fetch(f"products/{product_id}", Product)

    async def upload(self, product: Product, path: str) -> Product:
        with open(path, "rb") as stream:
            return await self._transport.submit_form(
                "products",
                product,
                "product",
                Product,
                Attachment(stream=stream, filename=os.path.basename(path)),
            )

    async def update(self, product: Product) -> None:
        await self._transport.replace(f"products/{product.id}", product)

    async def delete(self, product_id: int) -> None:
        await self._transport.remove(f"products/{product_id}")


async def main() -> None:
    config = load_config()
    setup_logging_from_config(config.logging)

    async with TransportClient.from_config(config) as transport:
        products = ProductClient(transport)

        try:
            print("1. Listing products...")
            for product in await products.list():
                print(f"   {product.id}: {product.name}")

            print("2. Uploading a new digital product...")
            created = await products.upload(
                Product(name="Demo e-book", product_type="digital", price="4.99"),
                __file__,
            )
            print(f"   created product {created.id}")

            print("3. Renaming it...")
            created.name = "Demo e-book (2nd edition)"
            await products.update(created)

            print("4. Deleting it...")
            await products.delete(created.id)
        except HttpStatusError as e:
            kind = "validation" if e.is_client_error else "service"
            print(f"   {kind} error {e.status_code}: {e.body}")
        except NetworkError as e:
            print(f"   network error: {e}")


if __name__ == "__main__":
    asyncio.run(main())

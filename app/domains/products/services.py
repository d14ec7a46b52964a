import logging
import re
from typing import Optional
from app.config.mongodb import mongodb
from app.domains.products.models import ProductIn
from app.shared.money import to_cents, to_decimal, to_store
from app.shared.mongo_utils import serialize_document, to_object_id, utcnow

CODE_PATTERN = re.compile(r"^P(\d+)$")

SAMPLE_PRODUCTS = [
    {"code": "P001", "name": "Kertas A4 80gr (1 Rim)", "price": 50000},
    {"code": "P002", "name": "Print Hitam Putih A4", "price": 500},
    {"code": "P003", "name": "Print Warna A4", "price": 2000},
    {"code": "P004", "name": "Fotocopy A4", "price": 300},
    {"code": "P005", "name": "Ballpoint Standard", "price": 3000},
    {"code": "P006", "name": "Spidol Whiteboard", "price": 8000},
    {"code": "P007", "name": "Penggaris 30cm", "price": 5000},
]


class ProductService:
    @staticmethod
    def _collection():
        return mongodb.get_collection("products")

    async def list_products(self, search: Optional[str] = None):
        query = {}
        if search:
            # Cocokkan kode atau nama, tanpa membedakan huruf besar/kecil
            pattern = re.escape(search.strip())
            query = {
                "$or": [
                    {"code": {"$regex": pattern, "$options": "i"}},
                    {"name": {"$regex": pattern, "$options": "i"}},
                ]
            }
        cursor = self._collection().find(query).sort("code", 1)
        results = await cursor.to_list(length=None)
        return [serialize_document(doc) for doc in results]

    async def get_product(self, product_id: str):
        doc = await self._collection().find_one({"_id": to_object_id(product_id, "Product")})
        if doc is None:
            raise LookupError(f"Product {product_id} not found")
        return serialize_document(doc)

    async def next_code(self) -> str:
        cursor = self._collection().find({"code": {"$regex": CODE_PATTERN.pattern}}, {"code": 1})
        highest = 0
        async for doc in cursor:
            match = CODE_PATTERN.match(doc["code"])
            if match:
                highest = max(highest, int(match.group(1)))
        return f"P{highest + 1:03d}"

    async def _prepare(self, product: ProductIn) -> dict:
        name = product.name.strip()
        if not name:
            raise ValueError("Product name must not be empty")
        price = to_decimal(product.price)
        if price is not None:
            price = to_cents(price)
        if price is None or price < 0:
            raise ValueError("Price must be a non-negative number")

        code = (product.code or "").strip()
        if not code:
            code = await self.next_code()
        return {"code": code, "name": name, "price": to_store(price)}

    async def create_product(self, product: ProductIn):
        data = await self._prepare(product)
        data["created_at"] = utcnow()
        insert_result = await self._collection().insert_one(data)
        logging.info(f"Inserted product {data['code']} with ID: {insert_result.inserted_id}")
        data["_id"] = insert_result.inserted_id
        return serialize_document(data)

    async def update_product(self, product_id: str, product: ProductIn):
        object_id = to_object_id(product_id, "Product")
        data = await self._prepare(product)
        result = await self._collection().update_one({"_id": object_id}, {"$set": data})
        if result.matched_count == 0:
            raise LookupError(f"Product {product_id} not found")
        logging.info(f"Updated product {product_id} -> {data['code']}")
        return await self.get_product(product_id)

    async def delete_product(self, product_id: str):
        result = await self._collection().delete_one({"_id": to_object_id(product_id, "Product")})
        if result.deleted_count == 0:
            raise LookupError(f"Product {product_id} not found")
        logging.info(f"Deleted product {product_id}")

    async def seed_products(self) -> int:
        """Insert the shop's sample catalog when no products exist yet."""
        collection = self._collection()
        if await collection.count_documents({}) > 0:
            return 0
        now = utcnow()
        await collection.insert_many([{**p, "price": float(p["price"]), "created_at": now} for p in SAMPLE_PRODUCTS])
        logging.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
        return len(SAMPLE_PRODUCTS)

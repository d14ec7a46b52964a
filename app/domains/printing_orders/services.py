import logging
from app.config.mongodb import mongodb
from app.domains.printing_orders.models import PrintingOrderIn
from app.shared.mongo_utils import serialize_document, to_object_id, utcnow


class PrintingOrderService:
    @staticmethod
    def _collection():
        return mongodb.get_collection("printing_orders")

    async def list_orders(self):
        cursor = self._collection().find({}).sort("created_at", -1)
        results = await cursor.to_list(length=None)
        orders = [serialize_document(doc) for doc in results]
        return {
            "ongoing": [o for o in orders if not o["is_completed"]],
            "completed": [o for o in orders if o["is_completed"]],
        }

    async def create_order(self, order: PrintingOrderIn):
        fields = {
            "customer_name": "Customer name must not be empty",
            "phone_number": "Phone number must not be empty",
            "order_name": "Order name must not be empty",
        }
        data = {}
        for field, message in fields.items():
            value = getattr(order, field).strip()
            if not value:
                raise ValueError(message)
            data[field] = value

        now = utcnow()
        data.update({
            "is_paid": order.is_paid,
            "is_completed": False,
            "created_at": now,
            "updated_at": now,
        })
        insert_result = await self._collection().insert_one(data)
        logging.info(f"Inserted printing order with ID: {insert_result.inserted_id}")
        data["_id"] = insert_result.inserted_id
        return serialize_document(data)

    async def _toggle(self, order_id: str, flag: str):
        collection = self._collection()
        object_id = to_object_id(order_id, "Order")
        doc = await collection.find_one({"_id": object_id})
        if doc is None:
            raise LookupError(f"Order {order_id} not found")

        # Last write wins; no check against concurrent toggles
        await collection.update_one(
            {"_id": object_id},
            {"$set": {flag: not doc[flag], "updated_at": utcnow()}},
        )
        doc = await collection.find_one({"_id": object_id})
        logging.info(f"Order {order_id} {flag} -> {doc[flag]}")
        return serialize_document(doc)

    async def toggle_completed(self, order_id: str):
        return await self._toggle(order_id, "is_completed")

    async def toggle_paid(self, order_id: str):
        return await self._toggle(order_id, "is_paid")

    async def delete_order(self, order_id: str):
        result = await self._collection().delete_one({"_id": to_object_id(order_id, "Order")})
        if result.deleted_count == 0:
            raise LookupError(f"Order {order_id} not found")
        logging.info(f"Deleted printing order {order_id}")

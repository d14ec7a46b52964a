import datetime
import logging
from decimal import Decimal
from typing import List, Optional, Tuple
from app.config.mongodb import mongodb
from app.domains.cashier.receipt import render_receipt_text
from app.domains.reports.models import ItemEdit
from app.shared.dates import local_day_range
from app.shared.money import to_decimal, to_store, total_of
from app.shared.mongo_utils import serialize_document, to_object_id


def reconcile_totals(payment_amount, subtotals) -> Tuple[Decimal, Decimal]:
    """New (total, change) for a sale whose item subtotals were edited."""
    total = total_of(subtotals)
    return total, (to_decimal(payment_amount) or Decimal(0)) - total


class ReportService:
    @staticmethod
    def _transactions():
        return mongodb.get_collection("transactions")

    @staticmethod
    def _items():
        return mongodb.get_collection("transaction_items")

    async def list_transactions(
        self, start_date: Optional[datetime.date] = None, end_date: Optional[datetime.date] = None
    ):
        start, end = local_day_range(start_date, end_date)
        query = {"transaction_date": {"$gte": start, "$lt": end}}
        cursor = self._transactions().find(query).sort("transaction_date", -1)
        results = await cursor.to_list(length=None)
        transactions = [serialize_document(doc) for doc in results]
        return {
            "transactions": transactions,
            "count": len(transactions),
            "total_revenue": float(total_of(t["total_amount"] for t in transactions)),
        }

    async def _get_header(self, transaction_id: str) -> dict:
        doc = await self._transactions().find_one({"_id": to_object_id(transaction_id, "Transaction")})
        if doc is None:
            raise LookupError(f"Transaction {transaction_id} not found")
        return doc

    async def _get_items(self, object_id) -> List[dict]:
        cursor = self._items().find({"transaction_id": object_id}).sort("created_at", 1)
        return await cursor.to_list(length=None)

    async def get_transaction(self, transaction_id: str):
        header = await self._get_header(transaction_id)
        items = await self._get_items(header["_id"])
        transaction = serialize_document(header)
        transaction["items"] = [serialize_document(item) for item in items]
        return transaction

    async def update_items(self, transaction_id: str, edits: List[ItemEdit]):
        """
        Apply item edits, then recompute the sale's total and change.

        Every item is written on its own; a failure part way through leaves
        the earlier item updates in place.
        """
        header = await self._get_header(transaction_id)
        items = {str(item["_id"]): item for item in await self._get_items(header["_id"])}

        for edit in edits:
            item = items.get(edit.item_id)
            if item is None:
                raise LookupError(f"Item {edit.item_id} not found in transaction {transaction_id}")

            changes = {}
            if edit.product_name is not None:
                name = edit.product_name.strip()
                if not name:
                    raise ValueError("Product name must not be empty")
                changes["product_name"] = name
            if edit.quantity is not None:
                changes["quantity"] = edit.quantity
            if edit.price is not None:
                changes["price"] = to_store(to_decimal(edit.price))

            quantity = changes.get("quantity", item["quantity"])
            price = to_decimal(changes.get("price", item["price"]))
            changes["subtotal"] = to_store(price * quantity)

            await self._items().update_one({"_id": item["_id"]}, {"$set": changes})
            item.update(changes)

        total, change = reconcile_totals(header["payment_amount"], (i["subtotal"] for i in items.values()))
        await self._transactions().update_one(
            {"_id": header["_id"]},
            {"$set": {"total_amount": to_store(total), "change_amount": to_store(change)}},
        )
        logging.info(f"Transaction {transaction_id} reconciled: total={total} change={change}")
        return await self.get_transaction(transaction_id)

    async def delete_transaction(self, transaction_id: str):
        header = await self._get_header(transaction_id)
        # Detail dihapus dulu, header terakhir (cascade)
        items_result = await self._items().delete_many({"transaction_id": header["_id"]})
        await self._transactions().delete_one({"_id": header["_id"]})
        logging.info(f"Deleted transaction {transaction_id} with {items_result.deleted_count} items")

    async def render_receipt(self, transaction_id: str) -> str:
        transaction = await self.get_transaction(transaction_id)
        return render_receipt_text(transaction, transaction["items"])

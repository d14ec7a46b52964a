import logging
from typing import Optional
from app.config.mongodb import mongodb
from app.domains.cashier.cart import Cart
from app.domains.cashier.models import CartLineView, CartView, UpdateLineRequest
from app.domains.cashier.receipt import render_receipt_text
from app.domains.products.services import ProductService
from app.shared.money import to_store
from app.shared.mongo_utils import serialize_document, utcnow


def cart_view(cart: Cart) -> CartView:
    return CartView(
        id=cart.id,
        lines=[
            CartLineView(
                product_id=line.product_id,
                product_code=line.product_code,
                display_name=line.display_name,
                display_price=float(line.display_price),
                quantity=line.quantity,
                subtotal=float(line.subtotal),
            )
            for line in cart.lines
        ],
        item_count=len(cart),
        total=float(cart.total()),
    )


class CashierService:
    def __init__(self, product_service: Optional[ProductService] = None):
        self.products = product_service or ProductService()

    async def add_product(self, cart: Cart, product_id: str):
        product = await self.products.get_product(product_id)
        return cart.add_line(product)

    @staticmethod
    def update_line(cart: Cart, product_id: str, changes: UpdateLineRequest):
        return cart.update_line(
            product_id,
            name=changes.display_name,
            price=changes.display_price,
            delta=changes.delta,
        )

    async def checkout(self, cart: Cart, payment_amount) -> dict:
        """
        Record the sale, render its receipt and empty the cart.

        The header and the item rows are two separate writes; if the second
        one fails the header stays committed and the cart is kept.
        """
        change = cart.compute_change(payment_amount)
        total = cart.total()
        payment = total + change

        header = {
            "transaction_date": utcnow(),
            "total_amount": to_store(total),
            "payment_amount": to_store(payment),
            "change_amount": to_store(change),
        }
        header["created_at"] = header["transaction_date"]
        insert_result = await mongodb.get_collection("transactions").insert_one(header)
        header["_id"] = insert_result.inserted_id
        logging.info(f"Inserted transaction with ID: {insert_result.inserted_id}")

        items = [
            {
                "transaction_id": insert_result.inserted_id,
                "product_code": line.product_code,
                "product_name": line.display_name,
                "quantity": line.quantity,
                "price": to_store(line.display_price),
                "subtotal": to_store(line.subtotal),
                "created_at": header["created_at"],
            }
            for line in cart.lines
        ]
        try:
            await mongodb.get_collection("transaction_items").insert_many(items)
        except Exception as e:
            logging.error(f"Failed to save items for transaction {insert_result.inserted_id}: {str(e)}")
            raise

        transaction = serialize_document(header)
        saved_items = [serialize_document(item) for item in items]
        receipt = render_receipt_text(transaction, saved_items)

        cart.clear()
        return {"transaction": transaction, "items": saved_items, "receipt": receipt}

from fastapi import APIRouter
import logging
from app.domains.cashier.cart import CartRegistry
from app.domains.cashier.models import AddLineRequest, CheckoutRequest, UpdateLineRequest
from app.domains.cashier.services import CashierService, cart_view
from app.shared.http_errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()
service = CashierService()
carts = CartRegistry()


@router.post("/carts", status_code=201)
async def open_cart():
    cart = carts.create()
    logger.info(f"Opened cart {cart.id}")
    return cart_view(cart)


@router.get("/carts/{cart_id}")
async def get_cart(cart_id: str):
    try:
        return cart_view(carts.get(cart_id))
    except Exception as e:
        raise to_http_exception(e, "fetching cart")


@router.delete("/carts/{cart_id}")
async def discard_cart(cart_id: str):
    try:
        carts.discard(cart_id)
        return {"status": "discarded"}
    except Exception as e:
        raise to_http_exception(e, "discarding cart")


@router.delete("/carts/{cart_id}/lines")
async def clear_cart(cart_id: str):
    try:
        cart = carts.get(cart_id)
        cart.clear()
        return cart_view(cart)
    except Exception as e:
        raise to_http_exception(e, "clearing cart")


@router.post("/carts/{cart_id}/lines")
async def add_line(cart_id: str, request: AddLineRequest):
    try:
        cart = carts.get(cart_id)
        await service.add_product(cart, request.product_id)
        return cart_view(cart)
    except Exception as e:
        raise to_http_exception(e, "adding product to cart")


@router.patch("/carts/{cart_id}/lines/{product_id}")
async def update_line(cart_id: str, product_id: str, request: UpdateLineRequest):
    try:
        cart = carts.get(cart_id)
        service.update_line(cart, product_id, request)
        return cart_view(cart)
    except Exception as e:
        raise to_http_exception(e, "updating cart line")


@router.delete("/carts/{cart_id}/lines/{product_id}")
async def remove_line(cart_id: str, product_id: str):
    try:
        cart = carts.get(cart_id)
        cart.remove_line(product_id)
        return cart_view(cart)
    except Exception as e:
        raise to_http_exception(e, "removing cart line")


@router.post("/carts/{cart_id}/checkout")
async def checkout(cart_id: str, request: CheckoutRequest):
    try:
        cart = carts.get(cart_id)
        result = await service.checkout(cart, request.payment_amount)
        logger.info(f"Checkout of cart {cart_id} completed")
        return result
    except Exception as e:
        raise to_http_exception(e, "processing payment")

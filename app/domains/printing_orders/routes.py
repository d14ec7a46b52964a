from fastapi import APIRouter
import logging
from app.domains.printing_orders.models import PrintingOrderIn
from app.domains.printing_orders.services import PrintingOrderService
from app.shared.http_errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()
service = PrintingOrderService()


@router.get("/printing-orders")
async def list_orders():
    try:
        return await service.list_orders()
    except Exception as e:
        raise to_http_exception(e, "fetching printing orders")


@router.post("/printing-orders", status_code=201)
async def create_order(order: PrintingOrderIn):
    try:
        return {"order": await service.create_order(order)}
    except Exception as e:
        raise to_http_exception(e, "adding printing order")


@router.post("/printing-orders/{order_id}/toggle-complete")
async def toggle_complete(order_id: str):
    try:
        return {"order": await service.toggle_completed(order_id)}
    except Exception as e:
        raise to_http_exception(e, "changing order status")


@router.post("/printing-orders/{order_id}/toggle-paid")
async def toggle_paid(order_id: str):
    try:
        return {"order": await service.toggle_paid(order_id)}
    except Exception as e:
        raise to_http_exception(e, "changing payment status")


@router.delete("/printing-orders/{order_id}")
async def delete_order(order_id: str):
    try:
        await service.delete_order(order_id)
        return {"status": "deleted"}
    except Exception as e:
        raise to_http_exception(e, "deleting printing order")

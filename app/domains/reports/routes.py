from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, PlainTextResponse
import datetime
import logging
from typing import Optional
from app.domains.cashier.receipt import render_receipt_html
from app.domains.reports.models import TransactionItemsUpdate
from app.domains.reports.services import ReportService
from app.shared.http_errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()
service = ReportService()


@router.get("/transactions")
async def get_transactions(
    start_date: Optional[datetime.date] = None,
    end_date: Optional[datetime.date] = None,
):
    try:
        return await service.list_transactions(start_date, end_date)
    except Exception as e:
        raise to_http_exception(e, "fetching transactions")


@router.get("/transactions/{transaction_id}")
async def get_transaction(transaction_id: str):
    try:
        return {"transaction": await service.get_transaction(transaction_id)}
    except Exception as e:
        raise to_http_exception(e, "fetching transaction")


@router.put("/transactions/{transaction_id}/items")
async def update_transaction_items(transaction_id: str, request: TransactionItemsUpdate):
    try:
        return {"transaction": await service.update_items(transaction_id, request.items)}
    except Exception as e:
        raise to_http_exception(e, "updating transaction items")


@router.delete("/transactions/{transaction_id}")
async def delete_transaction(transaction_id: str):
    try:
        await service.delete_transaction(transaction_id)
        return {"status": "deleted"}
    except Exception as e:
        raise to_http_exception(e, "deleting transaction")


@router.get("/transactions/{transaction_id}/receipt")
async def get_receipt(transaction_id: str, format: str = Query("html", pattern="^(html|text)$")):
    try:
        receipt = await service.render_receipt(transaction_id)
    except Exception as e:
        raise to_http_exception(e, "rendering receipt")
    if format == "text":
        return PlainTextResponse(receipt)
    return HTMLResponse(render_receipt_html(receipt))

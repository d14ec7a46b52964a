from fastapi import APIRouter
import logging
from app.domains.withdrawals.models import WithdrawalIn
from app.domains.withdrawals.services import WithdrawalService
from app.shared.http_errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()
service = WithdrawalService()


@router.get("/withdrawals")
async def list_withdrawals():
    try:
        return await service.get_summary()
    except Exception as e:
        raise to_http_exception(e, "fetching withdrawals")


@router.get("/withdrawals/balance")
async def get_balance():
    try:
        balance = await service.get_balance()
        return balance.summary()
    except Exception as e:
        raise to_http_exception(e, "computing balance")


@router.post("/withdrawals", status_code=201)
async def create_withdrawal(withdrawal: WithdrawalIn):
    try:
        return {"withdrawal": await service.create_withdrawal(withdrawal)}
    except Exception as e:
        raise to_http_exception(e, "adding withdrawal")


@router.delete("/withdrawals/{withdrawal_id}")
async def delete_withdrawal(withdrawal_id: str):
    try:
        await service.delete_withdrawal(withdrawal_id)
        return {"status": "deleted"}
    except Exception as e:
        raise to_http_exception(e, "deleting withdrawal")

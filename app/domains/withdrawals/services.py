import logging
from app.config.mongodb import mongodb
from app.domains.withdrawals.balance import BalanceCalculator
from app.domains.withdrawals.models import WithdrawalIn
from app.shared.dates import local_date_to_utc, local_today
from app.shared.money import to_store
from app.shared.mongo_utils import serialize_document, to_object_id, utcnow


class WithdrawalService:
    @staticmethod
    def _collection():
        return mongodb.get_collection("withdrawals")

    async def revenue_amounts(self):
        # Dijumlahkan di sini dengan Decimal, bukan $sum float di database
        cursor = mongodb.get_collection("transactions").find({}, {"total_amount": 1})
        return [doc["total_amount"] async for doc in cursor]

    async def list_withdrawals(self):
        cursor = self._collection().find({}).sort("withdrawal_date", -1)
        results = await cursor.to_list(length=None)
        return [serialize_document(doc) for doc in results]

    async def get_balance(self) -> BalanceCalculator:
        withdrawals = await self.list_withdrawals()
        return BalanceCalculator(await self.revenue_amounts(), [w["amount"] for w in withdrawals])

    async def get_summary(self):
        withdrawals = await self.list_withdrawals()
        balance = BalanceCalculator(await self.revenue_amounts(), [w["amount"] for w in withdrawals])
        return {**balance.summary(), "withdrawals": withdrawals}

    async def create_withdrawal(self, withdrawal: WithdrawalIn):
        name = withdrawal.withdrawal_name.strip()
        if not name:
            raise ValueError("Withdrawal name is required")

        # Cek saldo dulu; tidak atomik dengan insert di bawah
        balance = await self.get_balance()
        amount = balance.validate_withdrawal(withdrawal.amount)

        now = utcnow()
        data = {
            "withdrawal_date": local_date_to_utc(withdrawal.withdrawal_date or local_today(), now),
            "withdrawal_name": name,
            "amount": to_store(amount),
            "created_at": now,
        }
        insert_result = await self._collection().insert_one(data)
        logging.info(f"Inserted withdrawal with ID: {insert_result.inserted_id}")
        data["_id"] = insert_result.inserted_id
        return serialize_document(data)

    async def delete_withdrawal(self, withdrawal_id: str):
        result = await self._collection().delete_one({"_id": to_object_id(withdrawal_id, "Withdrawal")})
        if result.deleted_count == 0:
            raise LookupError(f"Withdrawal {withdrawal_id} not found")
        logging.info(f"Deleted withdrawal {withdrawal_id}")

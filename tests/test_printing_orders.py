import pytest

from app.domains.printing_orders.models import PrintingOrderIn
from app.domains.printing_orders.services import PrintingOrderService


@pytest.mark.asyncio
async def test_new_order_is_trimmed_and_not_completed(db):
    order = await PrintingOrderService().create_order(
        PrintingOrderIn(customer_name=" Budi ", phone_number=" 0812 ", order_name=" Banner 1x2m ", is_paid=True)
    )

    assert (order["customer_name"], order["phone_number"], order["order_name"]) == ("Budi", "0812", "Banner 1x2m")
    assert order["is_paid"] is True
    assert order["is_completed"] is False
    assert order["created_at"] == order["updated_at"]


@pytest.mark.parametrize(
    "fields, message",
    [
        ({"customer_name": " "}, "Customer name must not be empty"),
        ({"phone_number": ""}, "Phone number must not be empty"),
        ({"order_name": "  "}, "Order name must not be empty"),
    ],
)
@pytest.mark.asyncio
async def test_blank_fields_are_rejected(db, fields, message):
    data = {"customer_name": "Budi", "phone_number": "0812", "order_name": "Banner", **fields}

    with pytest.raises(ValueError, match=message):
        await PrintingOrderService().create_order(PrintingOrderIn(**data))
    assert await db["printing_orders"].count_documents({}) == 0


@pytest.mark.asyncio
async def test_lifecycle(db):
    service = PrintingOrderService()
    order = await service.create_order(PrintingOrderIn(customer_name="Sari", phone_number="0813", order_name="Undangan"))

    paid = await service.toggle_paid(order["id"])
    done = await service.toggle_completed(order["id"])
    board = await service.list_orders()

    assert paid["is_paid"] is True
    assert done["is_completed"] is True and done["is_paid"] is True
    assert board["ongoing"] == []
    assert [o["id"] for o in board["completed"]] == [order["id"]]

    reopened = await service.toggle_completed(order["id"])
    assert reopened["is_completed"] is False

    await service.delete_order(order["id"])
    assert await service.list_orders() == {"ongoing": [], "completed": []}
    with pytest.raises(LookupError):
        await service.toggle_paid(order["id"])


def test_printing_order_routes(client, db):
    payload = {"customer_name": "Budi", "phone_number": "0812", "order_name": "Stiker"}
    order = client.post("/api/printing-orders", json=payload).json()["order"]

    assert client.post(f"/api/printing-orders/{order['id']}/toggle-complete").json()["order"]["is_completed"] is True
    assert client.post(f"/api/printing-orders/{order['id']}/toggle-paid").json()["order"]["is_paid"] is True
    assert len(client.get("/api/printing-orders").json()["completed"]) == 1

    response = client.post("/api/printing-orders", json={**payload, "order_name": ""})
    assert response.status_code == 400
    assert response.json()["detail"] == "Order name must not be empty"

    assert client.delete(f"/api/printing-orders/{order['id']}").status_code == 200
    assert client.delete(f"/api/printing-orders/{order['id']}").status_code == 404

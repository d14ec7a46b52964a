import pytest

from app.config.mongodb import mongodb
from app.domains.cashier.cart import Cart
from app.domains.cashier.services import CashierService
from app.domains.products.models import ProductIn
from app.domains.products.services import ProductService


@pytest.fixture
def products(client):
    created = {}
    for name, price in (("Print Hitam Putih A4", 500), ("Print Warna A4", 2000)):
        response = client.post("/api/products", json={"name": name, "price": price})
        created[name] = response.json()["product"]
    return created


def _ring_up(client, products):
    cart = client.post("/api/carts").json()
    bw = products["Print Hitam Putih A4"]["id"]
    color = products["Print Warna A4"]["id"]
    client.post(f"/api/carts/{cart['id']}/lines", json={"product_id": bw})
    client.post(f"/api/carts/{cart['id']}/lines", json={"product_id": bw})
    response = client.post(f"/api/carts/{cart['id']}/lines", json={"product_id": color})
    return cart["id"], response.json()


def test_cart_lines_and_total(client, products):
    cart_id, cart = _ring_up(client, products)

    assert cart["total"] == 3000
    assert cart["item_count"] == 2
    assert [line["quantity"] for line in cart["lines"]] == [2, 1]


def test_update_line_overrides_and_quantity(client, products):
    cart_id, _ = _ring_up(client, products)
    color = products["Print Warna A4"]["id"]

    response = client.patch(
        f"/api/carts/{cart_id}/lines/{color}",
        json={"display_name": "Print Warna A3", "display_price": 4000, "delta": 1},
    )
    line = response.json()["lines"][1]
    assert (line["display_name"], line["display_price"], line["quantity"]) == ("Print Warna A3", 4000, 2)
    assert response.json()["total"] == 9000

    response = client.patch(f"/api/carts/{cart_id}/lines/{color}", json={"delta": -2})
    assert len(response.json()["lines"]) == 1

    response = client.patch(f"/api/carts/{cart_id}/lines/{color}", json={"delta": 1})
    assert response.status_code == 404


def test_invalid_display_price_is_reported(client, products):
    cart_id, _ = _ring_up(client, products)
    bw = products["Print Hitam Putih A4"]["id"]

    response = client.patch(f"/api/carts/{cart_id}/lines/{bw}", json={"display_price": 0})

    assert response.status_code == 400
    assert response.json()["detail"] == "Price must be greater than 0"
    assert client.get(f"/api/carts/{cart_id}").json()["total"] == 3000


def test_checkout_records_sale_and_clears_cart(client, products, db):
    cart_id, _ = _ring_up(client, products)

    response = client.post(f"/api/carts/{cart_id}/checkout", json={"payment_amount": 5000})

    assert response.status_code == 200
    body = response.json()
    transaction = body["transaction"]
    assert (transaction["total_amount"], transaction["payment_amount"], transaction["change_amount"]) == (3000, 5000, 2000)
    assert [(i["product_name"], i["quantity"], i["subtotal"]) for i in body["items"]] == [
        ("Print Hitam Putih A4", 2, 1000),
        ("Print Warna A4", 1, 2000),
    ]
    assert all(i["transaction_id"] == transaction["id"] for i in body["items"])
    assert "Kembalian:" in body["receipt"]
    assert client.get(f"/api/carts/{cart_id}").json()["lines"] == []

    stored = client.get(f"/api/transactions/{transaction['id']}").json()["transaction"]
    assert sum(i["subtotal"] for i in stored["items"]) == stored["total_amount"]


def test_insufficient_payment_changes_nothing(client, products, db):
    cart_id, _ = _ring_up(client, products)

    for payload in ({"payment_amount": 2999}, {}, {"payment_amount": 0}):
        response = client.post(f"/api/carts/{cart_id}/checkout", json=payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid payment amount"

    assert client.get(f"/api/carts/{cart_id}").json()["total"] == 3000
    assert client.get("/api/transactions").json()["count"] == 0


def test_clear_remove_and_discard(client, products):
    cart_id, _ = _ring_up(client, products)
    bw = products["Print Hitam Putih A4"]["id"]

    assert len(client.delete(f"/api/carts/{cart_id}/lines/{bw}").json()["lines"]) == 1
    assert client.delete(f"/api/carts/{cart_id}/lines").json()["total"] == 0
    assert client.delete(f"/api/carts/{cart_id}").status_code == 200
    assert client.get(f"/api/carts/{cart_id}").status_code == 404


def test_unknown_product_cannot_be_added(client):
    cart = client.post("/api/carts").json()
    response = client.post(f"/api/carts/{cart['id']}/lines", json={"product_id": "6650f1a2b3c4d5e6f7a8b9c0"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_failed_item_write_keeps_header_and_cart(db, monkeypatch):
    product = await ProductService().create_product(ProductIn(name="Fotocopy A4", price=300))
    service = CashierService()
    cart = Cart()
    await service.add_product(cart, product["id"])

    class BrokenItems:
        async def insert_many(self, documents):
            raise RuntimeError("connection reset")

    real_get_collection = mongodb.get_collection
    monkeypatch.setattr(
        mongodb,
        "get_collection",
        lambda name: BrokenItems() if name == "transaction_items" else real_get_collection(name),
    )

    with pytest.raises(RuntimeError):
        await service.checkout(cart, 1000)

    assert await db["transactions"].count_documents({}) == 1
    assert len(cart) == 1


def test_rejected_line_edit_leaves_line_unchanged(client, products):
    cart_id, _ = _ring_up(client, products)
    bw = products["Print Hitam Putih A4"]["id"]

    response = client.patch(
        f"/api/carts/{cart_id}/lines/{bw}",
        json={"display_name": "Changed", "display_price": 0, "delta": 3},
    )

    assert response.status_code == 400
    line = client.get(f"/api/carts/{cart_id}").json()["lines"][0]
    assert (line["display_name"], line["display_price"], line["quantity"]) == ("Print Hitam Putih A4", 500, 2)


def test_sub_cent_prices_keep_subtotals_equal_to_total(client, products):
    cart_id, _ = _ring_up(client, products)
    bw = products["Print Hitam Putih A4"]["id"]
    color = products["Print Warna A4"]["id"]
    client.patch(f"/api/carts/{cart_id}/lines/{bw}", json={"display_price": 0.005, "delta": -1})
    client.patch(f"/api/carts/{cart_id}/lines/{color}", json={"display_price": 0.005})

    body = client.post(f"/api/carts/{cart_id}/checkout", json={"payment_amount": 1}).json()

    subtotals = [i["subtotal"] for i in body["items"]]
    assert subtotals == [0.01, 0.01]
    assert sum(subtotals) == body["transaction"]["total_amount"] == 0.02
    assert body["transaction"]["change_amount"] == 0.98

from fastapi import APIRouter, HTTPException
import logging
from typing import Optional
from pymongo.errors import DuplicateKeyError
from app.domains.products.models import ProductIn
from app.domains.products.services import ProductService
from app.shared.http_errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter()
service = ProductService()


@router.get("/products")
async def list_products(search: Optional[str] = None):
    try:
        products = await service.list_products(search)
        return {"products": products}
    except Exception as e:
        raise to_http_exception(e, "fetching products")


@router.get("/products/next-code")
async def get_next_code():
    try:
        return {"code": await service.next_code()}
    except Exception as e:
        raise to_http_exception(e, "generating product code")


@router.post("/products/seed")
async def seed_products():
    try:
        created = await service.seed_products()
        return {"status": "ok", "products_created": created}
    except Exception as e:
        raise to_http_exception(e, "seeding products")


@router.post("/products", status_code=201)
async def create_product(product: ProductIn):
    try:
        return {"product": await service.create_product(product)}
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Product code already exists")
    except Exception as e:
        raise to_http_exception(e, "creating product")


@router.put("/products/{product_id}")
async def update_product(product_id: str, product: ProductIn):
    try:
        return {"product": await service.update_product(product_id, product)}
    except DuplicateKeyError:
        raise HTTPException(status_code=400, detail="Product code already exists")
    except Exception as e:
        raise to_http_exception(e, "updating product")


@router.delete("/products/{product_id}")
async def delete_product(product_id: str):
    try:
        await service.delete_product(product_id)
        return {"status": "deleted"}
    except Exception as e:
        raise to_http_exception(e, "deleting product")

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.domains.products.routes import router as product_router
from app.domains.cashier.routes import router as cashier_router
from app.domains.reports.routes import router as report_router
from app.domains.withdrawals.routes import router as withdrawal_router
from app.domains.printing_orders.routes import router as printing_order_router
from app.config.mongodb import mongodb
from app.config.setting import settings
import logging
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)

app = FastAPI(title=settings.app_name)

logging.info(f"Allowed origins: {settings.parsed_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.parsed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def startup():
    # Initialize MongoDB connection
    try:
        await mongodb.init_db()
        count = await mongodb.db.products.count_documents({})
        logging.info(f"MongoDB connected. Found {count} documents in 'products' collection.")
    except Exception as e:
        logging.error(f"MongoDB connection failed: {str(e)}")
        raise

@app.on_event("shutdown")
def shutdown_db():
    mongodb.close()


@app.get("/")
def read_root():
    return {"name": settings.app_name, "status": "ok"}


app.include_router(product_router, prefix="/api", tags=["Products"])
app.include_router(cashier_router, prefix="/api", tags=["Cashier"])
app.include_router(report_router, prefix="/api", tags=["Reports"])
app.include_router(withdrawal_router, prefix="/api", tags=["Withdrawals"])
app.include_router(printing_order_router, prefix="/api", tags=["Printing Orders"])

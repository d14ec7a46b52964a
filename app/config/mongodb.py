from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv
from app.config.setting import settings
import logging

load_dotenv()

class MongoDB:
    def __init__(self, uri: str, db_name: str):
        self.uri = uri
        self.client = None
        self.db = None
        self.db_name = db_name

    async def init_db(self):
        # Create connection to MongoDB using the connection string
        self.client = AsyncIOMotorClient(self.uri)
        self.db = self.client[self.db_name]
        logging.info(f"Using MongoDB database '{self.db_name}'")

        await self.ensure_indexes()

    async def ensure_indexes(self):
        await self.db["products"].create_index("code", unique=True)
        await self.db["transactions"].create_index("transaction_date")
        await self.db["transaction_items"].create_index("transaction_id")
        await self.db["printing_orders"].create_index("created_at")

    def get_collection(self, name: str):
        if self.db is None:
            raise RuntimeError("MongoDB not connected")
        return self.db[name]

    def close(self):
        if self.client is not None:
            self.client.close()

# Inisialisasi MongoDB dengan connection string
mongodb = MongoDB(uri=settings.mongo_uri, db_name=settings.mongo_db_name)

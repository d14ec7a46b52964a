from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Remen Printing POS"
    environment: str = "development"
    allowed_origins: str = "*"

    @property
    def parsed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    # MongoDB settings
    mongo_db_name: str = "pos"
    mongo_uri: str = "mongodb://localhost:27017"

    # Receipt settings
    shop_name: str = "REMEN PRINTING"
    shop_phone: str = "082158103363"
    shop_address: str = "Jl. Poros Kota Bangun III"
    receipt_width: int = 32

    # Shop clock, used for receipts and report date ranges (WITA)
    utc_offset_hours: int = 8

    # Open carts untouched this long are dropped
    cart_idle_minutes: int = 240

    class Config:
        env_file = ".env"
        case_sensitive = False

settings = Settings()

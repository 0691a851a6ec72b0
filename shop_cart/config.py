import os
from dataclasses import dataclass
from functools import cache


@dataclass(frozen=True, slots=True)
class Settings:
    cart_store: str = "memory"
    database_url: str = "sqlite+pysqlite:///./shop_cart.db"
    session_cookie: str = "SESSION"

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            cart_store=os.getenv("CART_STORE", "memory").lower(),
            database_url=os.getenv("DATABASE_URL", "sqlite+pysqlite:///./shop_cart.db"),
            session_cookie=os.getenv("SESSION_COOKIE", "SESSION"),
        )


@cache
def get_settings() -> Settings:
    return Settings.from_env()

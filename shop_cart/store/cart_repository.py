from __future__ import annotations

import json
from abc import ABC, abstractmethod

from sqlalchemy import Column, String, Text, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from shop_cart.config import Settings
from shop_cart.logging import get_logger, sanitize_string_for_logging
from shop_cart.store.cart_models import CART_ATTRIBUTE, Cart

logger = get_logger(__name__)

Base = declarative_base()


class SessionAttributeOrm(Base):
    __tablename__ = "session_attributes"
    session_id = Column(String(64), primary_key=True)
    name = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)


def _dump(cart: Cart) -> str:
    return json.dumps(cart.to_dict())


def _load(session_id: str, raw: str | None) -> Cart:
    if raw is None:
        return Cart()
    try:
        return Cart.from_dict(json.loads(raw))
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError, ArithmeticError) as e:
        logger.warning(
            "Corrupted cart data for session %s: %s",
            sanitize_string_for_logging(session_id, 8),
            e,
        )
        return Cart()


class CartRepository(ABC):
    """Per-session storage of a single serialized cart."""

    @abstractmethod
    def locate(self, session_id: str | None) -> Cart:
        """Return the session's cart, or a new empty one. Never writes."""

    @abstractmethod
    def save(self, session_id: str | None, cart: Cart) -> None:
        """Replace the session's stored cart."""

    @abstractmethod
    def clear(self, session_id: str | None) -> None:
        """Drop the session's cart attribute entirely."""


class InMemoryCartRepository(CartRepository):
    def __init__(self) -> None:
        self._sessions = dict[str, dict[str, str]]()

    def locate(self, session_id: str | None) -> Cart:
        if session_id is None:
            return Cart()
        attributes = self._sessions.get(session_id, {})
        return _load(session_id, attributes.get(CART_ATTRIBUTE))

    def save(self, session_id: str | None, cart: Cart) -> None:
        if session_id is None:
            return
        self._sessions.setdefault(session_id, {})[CART_ATTRIBUTE] = _dump(cart)

    def clear(self, session_id: str | None) -> None:
        if session_id is None:
            return
        attributes = self._sessions.get(session_id)
        if attributes is not None:
            attributes.pop(CART_ATTRIBUTE, None)


class SqlCartRepository(CartRepository):
    def __init__(self, database_url: str) -> None:
        self.engine = create_engine(database_url, future=True)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False, future=True)

    def init_db(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def locate(self, session_id: str | None) -> Cart:
        if session_id is None:
            return Cart()
        with self.SessionLocal() as session:
            orm = session.get(SessionAttributeOrm, {"session_id": session_id, "name": CART_ATTRIBUTE})
            return _load(session_id, orm.value if orm is not None else None)

    def save(self, session_id: str | None, cart: Cart) -> None:
        if session_id is None:
            return
        with self.SessionLocal.begin() as session:
            orm = session.get(SessionAttributeOrm, {"session_id": session_id, "name": CART_ATTRIBUTE})
            if orm is None:
                session.add(SessionAttributeOrm(session_id=session_id, name=CART_ATTRIBUTE, value=_dump(cart)))
            else:
                orm.value = _dump(cart)

    def clear(self, session_id: str | None) -> None:
        if session_id is None:
            return
        with self.SessionLocal.begin() as session:
            orm = session.get(SessionAttributeOrm, {"session_id": session_id, "name": CART_ATTRIBUTE})
            if orm is not None:
                session.delete(orm)


def create_cart_repository(settings: Settings) -> CartRepository:
    if settings.cart_store == "memory":
        return InMemoryCartRepository()
    if settings.cart_store == "sql":
        repository = SqlCartRepository(settings.database_url)
        repository.init_db()
        return repository
    raise ValueError(f"Unknown cart store: {settings.cart_store!r}")

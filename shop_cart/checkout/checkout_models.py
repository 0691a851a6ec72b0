from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass(slots=True)
class ReceiptLine:
    name: str
    quantity: int
    unit_price: Decimal
    total: Decimal


@dataclass(slots=True)
class ReceiptDiscount:
    description: str
    amount: Decimal


@dataclass(slots=True)
class Receipt:
    lines: List[ReceiptLine]
    subtotal: Decimal
    discounts: List[ReceiptDiscount] = field(default_factory=list)
    total: Decimal = Decimal("0")

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Context, Decimal, ROUND_HALF_UP, getcontext
from typing import Iterable, List, Optional

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _exact_context(*values: Decimal) -> Context:
    # enough digits for every cent of the largest operand plus a carry
    context = getcontext().copy()
    context.prec = max([context.prec] + [v.adjusted() + 4 for v in values if v.is_finite()])
    return context


def to_money(value) -> Decimal:
    """Coerce ``value`` to a two-decimal ``Decimal``, whatever its magnitude."""
    value = to_decimal(value)
    return value.quantize(CENT, rounding=ROUND_HALF_UP, context=_exact_context(value))


def subtract_money(minuend, subtrahend) -> Decimal:
    minuend, subtrahend = to_decimal(minuend), to_decimal(subtrahend)
    difference = _exact_context(minuend, subtrahend).subtract(minuend, subtrahend)
    return to_money(difference)


@dataclass
class Product:
    id: str
    title: str
    description: str
    thumbnail_url: str
    price: Decimal
    quantity: int
    total: Decimal = Decimal("0.00")

    @classmethod
    def build(
        cls,
        id: str,
        title: str,
        description: str,
        thumbnail_url: str,
        price,
        quantity: int,
    ) -> "Product":
        price = to_money(price)
        quantity = int(quantity)
        return cls(
            id=id,
            title=title,
            description=description,
            thumbnail_url=thumbnail_url,
            price=price,
            quantity=quantity,
            total=to_money(price * quantity),
        )

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


@dataclass
class Cart:
    id: str
    user_id: str
    session_id: str
    products: List[Product] = field(default_factory=list)
    total: Decimal = Decimal("0.00")
    discount: Decimal = Decimal("0.00")
    total_products: int = 0
    total_quantity: int = 0

    @classmethod
    def build(
        cls,
        id: str,
        user_id: str,
        session_id: str,
        products: Optional[Iterable[Product]] = None,
        discount=Decimal("0"),
    ) -> "Cart":
        """Create a cart with its derived fields computed from ``products``.

        The derived fields are computed once here. Later changes to the
        discount do not recompute them.
        """
        items = list(products or [])
        discount = to_money(discount)
        line_total = sum((p.total for p in items), Decimal("0"))
        return cls(
            id=id,
            user_id=user_id,
            session_id=session_id,
            products=items,
            total=to_money(line_total - discount),
            discount=discount,
            total_products=len(items),
            total_quantity=sum(p.quantity for p in items),
        )

    def __eq__(self, other):
        if not isinstance(other, Cart):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

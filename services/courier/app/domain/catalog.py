from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)

from services.courier.app.domain.errors import InvalidArgumentError, InvalidQuantityError

ZERO = Decimal("0")
CENT = Decimal("0.01")

# Money operands are bounded by to_money, so products and sums in this context are exact.
MONEY_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)
MAX_MONEY_INTEGER_DIGITS = 16
MAX_MONEY_PLACES = 18


def to_money(value: Decimal | int | str | float, *, field: str = "amount") -> Decimal:
    """Coerce an input into an exact Decimal.

    Floats go through their shortest string form so 0.1 becomes Decimal("0.1"), not the
    binary expansion.
    """

    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation as e:
            raise InvalidArgumentError(f"{field} is not a decimal number: {value!r}") from e
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        raise InvalidArgumentError(f"{field} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidArgumentError(f"{field} must be finite, got {value!r}")
    if result and (
        result.adjusted() >= MAX_MONEY_INTEGER_DIGITS
        or result.as_tuple().exponent < -MAX_MONEY_PLACES
    ):
        raise InvalidArgumentError(
            f"{field} is out of range, got {value!r}. Expected below 10**{MAX_MONEY_INTEGER_DIGITS}"
            f" with at most {MAX_MONEY_PLACES} decimal places."
        )
    return result


def round_cents(amount: Decimal) -> Decimal:
    with localcontext(MONEY_CONTEXT):
        return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)


@dataclass(frozen=True, slots=True)
class CatalogItem:
    id: str
    name: str
    unit_price: Decimal

    def __post_init__(self) -> None:
        price = to_money(self.unit_price, field="unit_price")
        if price < ZERO:
            raise InvalidArgumentError(f"unit_price must be >= 0, got {price}")
        object.__setattr__(self, "unit_price", price)


@dataclass(frozen=True, slots=True)
class OrderLine:
    item: CatalogItem
    quantity: int

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidQuantityError(self.quantity)
        if self.quantity <= 0:
            raise InvalidQuantityError(self.quantity)

    @property
    def line_total(self) -> Decimal:
        with localcontext(MONEY_CONTEXT):
            return self.item.unit_price * self.quantity


@dataclass(frozen=True, slots=True)
class DeliveryOptions:
    express_requested: bool = False
    note: str | None = None

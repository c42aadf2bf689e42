"""Fixed-point money value object."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

CENTS = Decimal("0.01")
# Largest amount a NUMERIC(12, 2) price column holds
MAX_AMOUNT = Decimal("9999999999.99")


@dataclass(frozen=True)
class Money:
    """Money value object with exactly two fraction digits."""

    amount: Decimal

    def __post_init__(self) -> None:
        """Normalize and validate money amount."""
        amount = self.amount
        if isinstance(amount, float):
            amount = str(amount)
        try:
            amount = Decimal(amount)
        except (InvalidOperation, TypeError, ValueError) as err:
            raise ValueError(f"Invalid money amount: {self.amount!r}") from err

        if not amount.is_finite():
            raise ValueError("Money amount must be a finite number")
        if amount < 0:
            raise ValueError("Money amount cannot be negative")
        if amount > MAX_AMOUNT:
            raise ValueError(f"Money amount cannot exceed {MAX_AMOUNT}")

        try:
            quantized = amount.quantize(CENTS)
        except InvalidOperation as err:
            raise ValueError(f"Invalid money amount: {self.amount!r}") from err
        if amount != quantized:
            raise ValueError("Money amount cannot have more than 2 fraction digits")

        object.__setattr__(self, "amount", quantized)

    @classmethod
    def parse(cls, value: Union[str, int, float, Decimal]) -> "Money":
        """Parse a form value such as '15999.99' into Money."""
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Money amount is required")
        return cls(value)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

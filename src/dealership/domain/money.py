from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from dealership.domain.errors import ValidationError

CENTS = Decimal("0.01")
ZERO_MONEY = Decimal("0.00")

# 16 significant digits keeps power/division steps from drifting before the
# final rounding to cents.
PRICING_CONTEXT = Context(prec=16, rounding=ROUND_HALF_UP)


def round_money(amount: Decimal) -> Decimal:
    """Round to cents using ROUND_HALF_UP."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_plain_string(amount: Decimal) -> str:
    """Render a Decimal without scientific notation (e.g. ``1E+3`` -> ``1000``)."""
    return format(amount, "f")


def parse_decimal(raw: str, field: str = "amount") -> Decimal:
    """
    Parse a decimal string at a boundary (HTTP payloads, record files).

    Raises:
        ValidationError: If the string is not a finite decimal
    """
    try:
        value = Decimal(raw.strip())
    except (InvalidOperation, ValueError, AttributeError):
        raise ValidationError(
            errors=[
                {
                    "field": field,
                    "message": f"Must be a valid decimal: {raw}",
                    "code": "INVALID_DECIMAL",
                }
            ]
        )

    if not value.is_finite():
        raise ValidationError(
            errors=[
                {
                    "field": field,
                    "message": f"Must be a finite decimal: {raw}",
                    "code": "INVALID_DECIMAL",
                }
            ]
        )

    return value

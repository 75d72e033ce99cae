from __future__ import annotations

from decimal import Decimal

from dealership.domain.errors import ValidationError
from dealership.domain.money import PRICING_CONTEXT, ZERO_MONEY, round_money

MONTHS_PER_YEAR = Decimal("12")


def annuity(principal: Decimal, monthly_rate: Decimal, term_months: int) -> Decimal:
    """
    Fixed monthly payment that repays ``principal`` over ``term_months``.

    Standard amortized loan payment:
        payment = P * r * (1+r)^n / ((1+r)^n - 1)

    Rounding policy:
    - Intermediate steps run in PRICING_CONTEXT (16 digits, ROUND_HALF_UP)
    - The payment is rounded to cents using ROUND_HALF_UP
    - A zero rate degrades to P / n
    - A denominator that collapses to zero inside the context yields 0.00

    Raises:
        ValidationError: If an argument is negative, not a Decimal, or the term is not a positive int
    """
    if not isinstance(principal, Decimal) or not isinstance(monthly_rate, Decimal):
        raise ValidationError("principal and monthly_rate must be Decimal")
    if isinstance(term_months, bool) or not isinstance(term_months, int) or term_months <= 0:
        raise ValidationError("term_months must be a positive integer", term_months=term_months)
    if principal < 0:
        raise ValidationError("principal must be >= 0")
    if monthly_rate < 0:
        raise ValidationError("monthly_rate must be >= 0")

    ctx = PRICING_CONTEXT

    if monthly_rate == 0:
        return round_money(ctx.divide(principal, Decimal(term_months)))

    one = Decimal("1")
    growth = ctx.power(ctx.add(one, monthly_rate), term_months)
    numerator = ctx.multiply(ctx.multiply(principal, monthly_rate), growth)
    denominator = ctx.subtract(growth, one)

    if denominator == 0:
        return ZERO_MONEY

    return round_money(ctx.divide(numerator, denominator))

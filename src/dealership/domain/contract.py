"""Sales and lease contracts.

A contract is a tagged variant (``ContractKind``) whose money fields are
derived once, at construction, by the pure pricing functions below.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Union

from dealership.domain.errors import ValidationError
from dealership.domain.finance import MONTHS_PER_YEAR, annuity
from dealership.domain.money import PRICING_CONTEXT, ZERO_MONEY, round_money
from dealership.domain.vehicle import Vehicle


class ContractKind(str, Enum):
    SALE = "SALE"
    LEASE = "LEASE"


# ==============================================================================
# Sales pricing rules
# ==============================================================================

SALES_TAX_RATE = Decimal("0.05")
RECORDING_FEE = Decimal("100.00")
LOW_PRICE_THRESHOLD = Decimal("10000.00")
PROCESSING_FEE_LOW = Decimal("295.00")
PROCESSING_FEE_HIGH = Decimal("495.00")

# Loans on vehicles priced at or above the threshold get the cheaper, longer plan
LOW_INTEREST_ANNUAL_RATE = Decimal("0.0425")
LOW_INTEREST_TERM_MONTHS = 48
HIGH_INTEREST_ANNUAL_RATE = Decimal("0.0525")
HIGH_INTEREST_TERM_MONTHS = 24
SALES_RATE_QUANTUM = Decimal("1E-10")

# ==============================================================================
# Lease pricing rules
# ==============================================================================

EXPECTED_END_VALUE_RATE = Decimal("0.50")
LEASE_FEE_RATE = Decimal("0.07")
LEASE_RECORDING_FEE = Decimal("100")
LEASE_ANNUAL_RATE = Decimal("0.04")
LEASE_TERM_MONTHS = 36
MAX_LEASE_AGE_YEARS = 3


@dataclass(frozen=True, slots=True)
class SalesPricing:
    sales_tax: Decimal
    recording_fee: Decimal
    processing_fee: Decimal
    total_price: Decimal
    monthly_payment: Decimal


@dataclass(frozen=True, slots=True)
class LeasePricing:
    expected_end_value: Decimal
    lease_fee: Decimal
    total_price: Decimal
    monthly_payment: Decimal


def processing_fee_for(price: Decimal) -> Decimal:
    # Threshold is inclusive on the high side
    return PROCESSING_FEE_LOW if price < LOW_PRICE_THRESHOLD else PROCESSING_FEE_HIGH


def sales_loan_terms(price: Decimal) -> tuple[Decimal, int]:
    """Return (monthly_rate, term_months) for financing a sale at ``price``."""
    if price >= LOW_PRICE_THRESHOLD:
        annual_rate, term = LOW_INTEREST_ANNUAL_RATE, LOW_INTEREST_TERM_MONTHS
    else:
        annual_rate, term = HIGH_INTEREST_ANNUAL_RATE, HIGH_INTEREST_TERM_MONTHS

    monthly_rate = PRICING_CONTEXT.divide(annual_rate, MONTHS_PER_YEAR).quantize(
        SALES_RATE_QUANTUM, rounding=ROUND_HALF_UP
    )
    return monthly_rate, term


def price_sale(price: Decimal, financed: bool) -> SalesPricing:
    """
    Derive every money field of a sale from the vehicle price.

    - Sales tax: 5% of price, rounded to cents
    - Recording fee: flat 100.00
    - Processing fee: 295.00 below 10,000.00, else 495.00
    - Monthly payment: 0.00 unless financed; financed sales amortize the
      total price (4.25%/48 months at or above 10,000.00, 5.25%/24 below)
    """
    sales_tax = round_money(price * SALES_TAX_RATE)
    processing_fee = processing_fee_for(price)
    total_price = price + sales_tax + RECORDING_FEE + processing_fee

    if financed:
        monthly_rate, term = sales_loan_terms(price)
        monthly_payment = annuity(total_price, monthly_rate, term)
    else:
        monthly_payment = ZERO_MONEY

    return SalesPricing(
        sales_tax=sales_tax,
        recording_fee=RECORDING_FEE,
        processing_fee=processing_fee,
        total_price=total_price,
        monthly_payment=monthly_payment,
    )


def price_lease(price: Decimal) -> LeasePricing:
    """
    Derive every money field of a lease from the vehicle price.

    - Expected end-of-term value: 50% of price
    - Lease fee: 7% of price
    - Total: end value + lease fee + 100 recording fee
    - Monthly payment: total amortized at 4% over 36 months
    """
    ctx = PRICING_CONTEXT
    expected_end_value = ctx.multiply(price, EXPECTED_END_VALUE_RATE)
    lease_fee = ctx.multiply(price, LEASE_FEE_RATE)
    total_price = ctx.add(ctx.add(expected_end_value, lease_fee), LEASE_RECORDING_FEE)
    monthly_rate = ctx.divide(LEASE_ANNUAL_RATE, MONTHS_PER_YEAR)

    return LeasePricing(
        expected_end_value=expected_end_value,
        lease_fee=lease_fee,
        total_price=total_price,
        monthly_payment=annuity(total_price, monthly_rate, LEASE_TERM_MONTHS),
    )


def _validate_parties(
    contract_date: object,
    customer_name: object,
    customer_email: object,
    vehicle: object,
    errors: list[dict[str, str]] | None = None,
) -> None:
    errors = list(errors or [])

    if not isinstance(contract_date, date):
        errors.append({"field": "contract_date", "message": "Must be a date", "code": "REQUIRED"})
    if not isinstance(customer_name, str) or not customer_name.strip():
        errors.append({"field": "customer_name", "message": "Must not be blank", "code": "REQUIRED"})
    if not isinstance(customer_email, str) or not customer_email.strip():
        errors.append({"field": "customer_email", "message": "Must not be blank", "code": "REQUIRED"})
    if not isinstance(vehicle, Vehicle):
        errors.append({"field": "vehicle", "message": "Must be a Vehicle", "code": "REQUIRED"})

    if errors:
        raise ValidationError(errors=errors)


@dataclass(frozen=True)
class SalesContract:
    contract_date: date
    customer_name: str
    customer_email: str
    vehicle: Vehicle
    financed: bool
    contract_id: int | None = None
    pricing: SalesPricing = field(init=False)

    def __post_init__(self) -> None:
        errors: list[dict[str, str]] = []
        if not isinstance(self.financed, bool):
            errors.append({"field": "financed", "message": "Must be true or false", "code": "INVALID_TYPE"})

        _validate_parties(self.contract_date, self.customer_name, self.customer_email, self.vehicle, errors)
        object.__setattr__(self, "pricing", price_sale(self.vehicle.price, self.financed))

    @property
    def kind(self) -> ContractKind:
        return ContractKind.SALE

    @property
    def sales_tax(self) -> Decimal:
        return self.pricing.sales_tax

    @property
    def recording_fee(self) -> Decimal:
        return self.pricing.recording_fee

    @property
    def processing_fee(self) -> Decimal:
        return self.pricing.processing_fee

    @property
    def total_price(self) -> Decimal:
        return self.pricing.total_price

    @property
    def monthly_payment(self) -> Decimal:
        return self.pricing.monthly_payment

    def with_id(self, contract_id: int) -> SalesContract:
        return replace(self, contract_id=contract_id)


@dataclass(frozen=True)
class LeaseContract:
    """
    Lease of one vehicle.

    ``pricing`` is derived from the vehicle price unless given explicitly,
    which only happens when rehydrating a record that kept the totals but not
    the vehicle details.
    """

    contract_date: date
    customer_name: str
    customer_email: str
    vehicle: Vehicle
    contract_id: int | None = None
    pricing: LeasePricing | None = None

    def __post_init__(self) -> None:
        _validate_parties(self.contract_date, self.customer_name, self.customer_email, self.vehicle)
        if self.pricing is None:
            object.__setattr__(self, "pricing", price_lease(self.vehicle.price))

    @property
    def kind(self) -> ContractKind:
        return ContractKind.LEASE

    @property
    def expected_end_value(self) -> Decimal:
        return self._pricing.expected_end_value

    @property
    def lease_fee(self) -> Decimal:
        return self._pricing.lease_fee

    @property
    def total_price(self) -> Decimal:
        return self._pricing.total_price

    @property
    def monthly_payment(self) -> Decimal:
        return self._pricing.monthly_payment

    @property
    def _pricing(self) -> LeasePricing:
        assert self.pricing is not None  # set in __post_init__
        return self.pricing

    def with_id(self, contract_id: int) -> LeaseContract:
        return replace(self, contract_id=contract_id)


Contract = Union[SalesContract, LeaseContract]

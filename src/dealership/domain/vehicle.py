from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum

from dealership.domain.errors import ValidationError

EARLIEST_MODEL_YEAR = 1886
UNKNOWN = "UNKNOWN"


class VehicleType(str, Enum):
    CAR = "CAR"
    TRUCK = "TRUCK"
    SUV = "SUV"
    VAN = "VAN"

    @classmethod
    def parse(cls, raw: str) -> VehicleType:
        """Parse a stored/entered category ("suv", "Suv ", "SUV")."""
        try:
            return cls(raw.strip().upper().replace(" ", "_"))
        except (ValueError, AttributeError):
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_type",
                        "message": f"Must be one of {[t.value for t in cls]}: {raw}",
                        "code": "INVALID_VALUE",
                    }
                ]
            )


@dataclass(frozen=True)
class Vehicle:
    """
    One inventory item.

    Identity is the VIN: equality and hashing ignore every other field,
    including the store-assigned ``vehicle_id``.
    """

    vin: str
    year: int = field(compare=False)
    make: str = field(compare=False)
    model: str = field(compare=False)
    vehicle_type: VehicleType = field(compare=False)
    color: str = field(compare=False)
    odometer: int = field(compare=False)
    price: Decimal = field(compare=False)
    vehicle_id: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        errors = self._collect_errors()
        if errors:
            raise ValidationError(errors=errors, vin=self.vin)

    def _collect_errors(self) -> list[dict[str, str]]:
        errors: list[dict[str, str]] = []

        for name in ("vin", "make", "model", "color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                errors.append({"field": name, "message": "Must not be blank", "code": "BLANK"})

        max_year = date.today().year + 1
        if (
            isinstance(self.year, bool)
            or not isinstance(self.year, int)
            or not EARLIEST_MODEL_YEAR <= self.year <= max_year
        ):
            errors.append(
                {
                    "field": "year",
                    "message": f"Must be between {EARLIEST_MODEL_YEAR} and {max_year}",
                    "code": "OUT_OF_RANGE",
                }
            )

        if not isinstance(self.vehicle_type, VehicleType):
            errors.append(
                {"field": "vehicle_type", "message": "Must be a VehicleType", "code": "INVALID_VALUE"}
            )

        if isinstance(self.odometer, bool) or not isinstance(self.odometer, int) or self.odometer < 0:
            errors.append({"field": "odometer", "message": "Must be >= 0", "code": "OUT_OF_RANGE"})

        # No floats past the boundary
        if not isinstance(self.price, Decimal):
            errors.append({"field": "price", "message": "Must be a Decimal", "code": "INVALID_DECIMAL"})
        elif not self.price.is_finite() or self.price < 0:
            errors.append({"field": "price", "message": "Must be >= 0", "code": "OUT_OF_RANGE"})

        return errors

    @classmethod
    def placeholder(cls, vin: str) -> Vehicle:
        """Stand-in for records that only kept the VIN (lease records)."""
        return cls(
            vin=vin,
            year=EARLIEST_MODEL_YEAR,
            make=UNKNOWN,
            model=UNKNOWN,
            vehicle_type=VehicleType.CAR,
            color=UNKNOWN,
            odometer=0,
            price=Decimal("0"),
        )

    def with_id(self, vehicle_id: int) -> Vehicle:
        """Return a copy carrying the store-assigned identifier."""
        return replace(self, vehicle_id=vehicle_id)

    def age_in(self, year: int) -> int:
        return year - self.year

    def __str__(self) -> str:
        return f"{self.year} {self.make} {self.model} <{self.vin}> {self.price}"

#!/usr/bin/env python3
"""
Seed the vehicles table with deterministic random inventory.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Unique VINs derived from the random stream
- Prices correlated with model year and make band

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_vehicles.py
"""

from __future__ import annotations

import random
import string
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete

from dealership.domain.vehicle import VehicleType
from dealership.infra.db.models.vehicle import VehicleRow
from dealership.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_VEHICLES = 40


# ==============================================================================
# Inventory Data
# ==============================================================================

# Base prices in USD
MAKES = {
    "economy": {
        "makes": ["Hyundai", "Kia", "Nissan", "Chevrolet"],
        "base_price_min": 12000,
        "base_price_max": 24000,
    },
    "mid_range": {
        "makes": ["Toyota", "Honda", "Ford", "Mazda"],
        "base_price_min": 22000,
        "base_price_max": 38000,
    },
    "premium": {
        "makes": ["BMW", "Audi", "Lexus"],
        "base_price_min": 38000,
        "base_price_max": 70000,
    },
}

MODELS_BY_MAKE = {
    "Hyundai": [("Elantra", VehicleType.CAR), ("Tucson", VehicleType.SUV)],
    "Kia": [("Forte", VehicleType.CAR), ("Carnival", VehicleType.VAN)],
    "Nissan": [("Sentra", VehicleType.CAR), ("Frontier", VehicleType.TRUCK)],
    "Chevrolet": [("Malibu", VehicleType.CAR), ("Silverado", VehicleType.TRUCK)],
    "Toyota": [("Camry", VehicleType.CAR), ("RAV4", VehicleType.SUV), ("Sienna", VehicleType.VAN)],
    "Honda": [("Civic", VehicleType.CAR), ("CR-V", VehicleType.SUV), ("Odyssey", VehicleType.VAN)],
    "Ford": [("F-150", VehicleType.TRUCK), ("Explorer", VehicleType.SUV), ("Mustang", VehicleType.CAR)],
    "Mazda": [("Mazda3", VehicleType.CAR), ("CX-5", VehicleType.SUV)],
    "BMW": [("330i", VehicleType.CAR), ("X5", VehicleType.SUV)],
    "Audi": [("A4", VehicleType.CAR), ("Q7", VehicleType.SUV)],
    "Lexus": [("ES 350", VehicleType.CAR), ("RX 350", VehicleType.SUV)],
}

COLORS = ["Black", "White", "Silver", "Gray", "Red", "Blue", "Green"]

# Excludes I, O and Q, which VINs never use
VIN_ALPHABET = "".join(c for c in string.ascii_uppercase + string.digits if c not in "IOQ")
VIN_LENGTH = 17


# ==============================================================================
# Price Calculation
# ==============================================================================


def calculate_price(make: str, year: int, current_year: int) -> Decimal:
    """
    Price from make band and age.

    - ~12% depreciation per year, capped at 75%
    - +/- 8% noise
    - Rounded to the nearest 100, never below 4,000
    """
    category = next(
        (data for data in MAKES.values() if make in data["makes"]),
        MAKES["mid_range"],
    )
    base_price = Decimal(random.randint(category["base_price_min"], category["base_price_max"]))

    years_old = max(0, current_year - year)
    depreciation = min(Decimal("0.12") * years_old, Decimal("0.75"))
    price = base_price * (Decimal("1") - depreciation)

    variance = Decimal(str(round(random.uniform(0.92, 1.08), 4)))
    price = (price * variance / 100).quantize(Decimal("1")) * 100

    return max(price, Decimal("4000")).quantize(Decimal("0.01"))


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_vin(used: set[str]) -> str:
    while True:
        vin = "".join(random.choices(VIN_ALPHABET, k=VIN_LENGTH))
        if vin not in used:
            used.add(vin)
            return vin


def generate_vehicle(used_vins: set[str], current_year: int) -> VehicleRow:
    category = random.choice(list(MAKES.keys()))
    make = random.choice(MAKES[category]["makes"])
    model, vehicle_type = random.choice(MODELS_BY_MAKE[make])

    # Last ten model years, weighted toward newer so some stay leasable
    years = range(current_year - 9, current_year + 1)
    year = random.choices(years, weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7], k=1)[0]

    years_old = current_year - year
    max_odometer = min(180000, years_old * 15000 + random.randint(0, 20000))
    odometer = random.randint(0, max(500, max_odometer))

    return VehicleRow(
        vin=generate_vin(used_vins),
        year=year,
        make=make,
        model=model,
        vehicle_type=vehicle_type.value,
        color=random.choice(COLORS),
        odometer=odometer,
        price=calculate_price(make, year, current_year),
    )


def seed_vehicles(num_vehicles: int = NUM_VEHICLES, seed: int = RANDOM_SEED) -> None:
    """
    Replace the inventory with generated vehicles.

    Args:
        num_vehicles: Number of vehicles to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)
    current_year = date.today().year

    print(f"Seeding inventory with {num_vehicles} vehicles (seed={seed})...")

    with get_session() as session:
        deleted_count = session.execute(delete(VehicleRow)).rowcount
        print(f"   Deleted {deleted_count} existing vehicles")

        used_vins: set[str] = set()
        vehicles = [generate_vehicle(used_vins, current_year) for _ in range(num_vehicles)]

        session.add_all(vehicles)
        session.flush()

        print(f"Seeded {len(vehicles)} vehicles")

        for i, vehicle in enumerate(vehicles[:5], 1):
            print(
                f"   {i}. {vehicle.year} {vehicle.make} {vehicle.model} "
                f"({vehicle.vehicle_type}, {vehicle.color}) - ${vehicle.price:,.2f}"
            )

        if len(vehicles) > 5:
            print(f"   ... and {len(vehicles) - 5} more")


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)

from pydantic import BaseModel, ConfigDict, Field

MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"
# NUMERIC(12, 2): at most ten integer digits
PRICE_PATTERN = r"^\d{1,10}(\.\d{1,2})?$"


class VehicleResponseDTO(BaseModel):
    vehicle_id: int | None
    vin: str
    year: int
    make: str
    model: str
    vehicle_type: str
    color: str
    odometer: int
    price: str


class VehicleCreateDTO(BaseModel):
    """Request payload for adding a vehicle to inventory."""

    vin: str = Field(
        description="Vehicle Identification Number",
        examples=["1HGCM82633A004352"],
        min_length=1,
        max_length=17,
    )
    year: int = Field(description="Model year", examples=[2022])
    make: str = Field(description="Manufacturer", examples=["Toyota"], min_length=1, max_length=50)
    model: str = Field(description="Model name", examples=["RAV4"], min_length=1, max_length=50)
    vehicle_type: str = Field(description="One of CAR, TRUCK, SUV, VAN", examples=["SUV"])
    color: str = Field(description="Exterior color", examples=["Blue"], min_length=1, max_length=30)
    odometer: int = Field(description="Odometer reading", examples=[25000], ge=0)
    price: str = Field(
        description="Tax-exclusive asking price as decimal string",
        examples=["31000.00"],
        pattern=PRICE_PATTERN,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vin": "1HGCM82633A004352",
                "year": 2022,
                "make": "Toyota",
                "model": "RAV4",
                "vehicle_type": "SUV",
                "color": "Blue",
                "odometer": 25000,
                "price": "31000.00",
            }
        }
    )


class VehicleSearchQueryDTO(BaseModel):
    """
    Query parameters for inventory search.

    At most one filter family may be used per request:
    price range, make/model, year range, color, mileage range or type.
    Without filters every vehicle is returned.
    """

    price_min: str | None = Field(default=None, description="Minimum price (inclusive)", pattern=MONEY_PATTERN)
    price_max: str | None = Field(default=None, description="Maximum price (inclusive)", pattern=MONEY_PATTERN)
    make: str | None = Field(default=None, description="Make (case-insensitive partial match)")
    model: str | None = Field(default=None, description="Model (case-insensitive partial match)")
    year_min: int | None = Field(default=None, description="Minimum year (inclusive)")
    year_max: int | None = Field(default=None, description="Maximum year (inclusive)")
    color: str | None = Field(default=None, description="Color (case-insensitive partial match)")
    odometer_min: int | None = Field(default=None, description="Minimum odometer (inclusive)", ge=0)
    odometer_max: int | None = Field(default=None, description="Maximum odometer (inclusive)", ge=0)
    vehicle_type: str | None = Field(default=None, description="One of CAR, TRUCK, SUV, VAN")


class VehicleListResponseDTO(BaseModel):
    vehicles: list[VehicleResponseDTO]
    total: int

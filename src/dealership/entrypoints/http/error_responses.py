"""Error body returned by every dealership endpoint.

Every DomainError is rendered as ErrorResponse by exception_handlers; the
``code`` is the error's ``error_code`` and also selects the HTTP status:

    VALIDATION_ERROR   422  bad vehicle/customer fields, inverted search range
    MALFORMED_RECORD   422  unreadable line in the contract file
    NOT_FOUND          404  VIN not in inventory, unknown vehicle_id
    INVALID_STATE      409  vehicle too old to lease
    CONFLICT           409  VIN already in inventory
    PERSISTENCE_ERROR  503  a store failed; the sale or lease was undone
    INTERNAL_ERROR     500  anything unexpected
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One rejected field of a vehicle or contract request."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "year",
                "message": "Must be between 1886 and 2027",
                "code": "OUT_OF_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """
    Dealership error body.

    ``errors`` is only set for VALIDATION_ERROR, one entry per rejected
    field. Failed sells and leases leave inventory and contracts unchanged,
    so a PERSISTENCE_ERROR can be retried as is.
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier '1HGCM82633A004352' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Vehicle is too old to be leased. Must be 3 years old or newer.",
                    "code": "INVALID_STATE",
                },
                {"detail": "Vehicle with VIN '1HGCM82633A004352' already exists", "code": "CONFLICT"},
                {
                    "detail": "Failed to remove vehicle '1HGCM82633A004352' from inventory",
                    "code": "PERSISTENCE_ERROR",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "customer_name", "message": "Must not be blank", "code": "REQUIRED"},
                        {"field": "financed", "message": "Must be true or false", "code": "INVALID_TYPE"},
                    ],
                },
            ]
        }
    )

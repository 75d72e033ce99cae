from fastapi import FastAPI

from dealership.entrypoints.http.exception_handlers import register_exception_handlers
from dealership.entrypoints.http.routes.contracts import router as contracts_router
from dealership.entrypoints.http.routes.health import router as health_router
from dealership.entrypoints.http.routes.vehicles import router as vehicles_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Dealership API",
        description="""
        Inventory and contract API for a car dealership.

        ## Features
        - Search inventory by price, make/model, year, color, mileage or type
        - Add and remove inventory vehicles
        - Sell or lease a vehicle, producing a priced contract

        ## Monetary Values
        All amounts are decimal strings (e.g. "31000.00").

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(contracts_router, prefix="/v1")

    return app


app = build_app()

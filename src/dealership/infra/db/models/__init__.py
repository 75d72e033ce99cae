from dealership.infra.db.models.contract import LeaseContractRow, SalesContractRow
from dealership.infra.db.models.vehicle import VehicleRow

__all__ = ["LeaseContractRow", "SalesContractRow", "VehicleRow"]

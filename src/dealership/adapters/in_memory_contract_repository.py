from __future__ import annotations

from itertools import count
from typing import Generic, TypeVar

from dealership.domain.contract import LeaseContract, SalesContract
from dealership.domain.errors import NotFoundError
from dealership.ports.contract_repository import (
    LeaseContractRepository,
    SalesContractRepository,
)

C = TypeVar("C", SalesContract, LeaseContract)


class _InMemoryContractStore(Generic[C]):
    resource = "Contract"

    def __init__(self) -> None:
        self._contracts: dict[int, C] = {}
        self._ids = count(1)

    def create(self, contract: C) -> C:
        stored = contract.with_id(next(self._ids))
        self._contracts[stored.contract_id] = stored  # type: ignore[index]
        return stored

    def get_all(self) -> list[C]:
        return list(self._contracts.values())

    def delete(self, contract_id: int) -> None:
        if self._contracts.pop(contract_id, None) is None:
            raise NotFoundError(resource=self.resource, identifier=str(contract_id))


class InMemorySalesContractRepository(_InMemoryContractStore[SalesContract], SalesContractRepository):
    """Sales contracts in insertion order with sequential ids."""

    resource = "SalesContract"


class InMemoryLeaseContractRepository(_InMemoryContractStore[LeaseContract], LeaseContractRepository):
    """Lease contracts in insertion order with sequential ids."""

    resource = "LeaseContract"

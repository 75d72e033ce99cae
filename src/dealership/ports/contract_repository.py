from __future__ import annotations

from abc import ABC, abstractmethod

from dealership.domain.contract import LeaseContract, SalesContract


class SalesContractRepository(ABC):
    """
    Port for persisted sales contracts.

    delete() exists so the dealership service can undo a stored contract
    when the matching inventory removal fails.
    """

    @abstractmethod
    def create(self, contract: SalesContract) -> SalesContract:
        """Store the contract and return it carrying its contract_id."""
        ...

    @abstractmethod
    def get_all(self) -> list[SalesContract]: ...

    @abstractmethod
    def delete(self, contract_id: int) -> None:
        """
        Raises:
            NotFoundError: If no contract has this id
        """
        ...


class LeaseContractRepository(ABC):
    """Port for persisted lease contracts. Same contract as SalesContractRepository."""

    @abstractmethod
    def create(self, contract: LeaseContract) -> LeaseContract: ...

    @abstractmethod
    def get_all(self) -> list[LeaseContract]: ...

    @abstractmethod
    def delete(self, contract_id: int) -> None: ...

"""Flat-file contract persistence (one pipe-delimited record per line)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from dealership.adapters import contract_record_codec as codec
from dealership.domain.contract import Contract, LeaseContract, SalesContract
from dealership.domain.errors import DomainError, NotFoundError, PersistenceError
from dealership.ports.contract_repository import (
    LeaseContractRepository,
    SalesContractRepository,
)

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class ContractFile:
    """
    UTF-8 text file holding sales and lease records side by side.

    - save() appends one line, creating the file if needed
    - save_all() rewrites the file wholesale
    - load_all() skips (and logs) blank or malformed lines; a missing file is empty
    - Contract ids are 1-based positions among the records that load
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, contract: Contract) -> Contract:
        """Append a contract and return it carrying its position as contract_id."""
        line = codec.encode(contract)
        next_id = len(self.load_all()) + 1

        try:
            with self._path.open("a", encoding=ENCODING) as handle:
                handle.write(line + "\n")
        except OSError as exc:
            raise self._io_failure("write", exc) from exc

        return contract.with_id(next_id)

    def save_all(self, contracts: Iterable[Contract]) -> None:
        lines = [codec.encode(contract) + "\n" for contract in contracts]
        self._write_lines(lines)

    def load_all(self) -> list[Contract]:
        loaded: list[Contract] = []
        for line_number, line in enumerate(self._read_lines(), start=1):
            contract = self._parse_line(line, line_number)
            if contract is not None:
                loaded.append(contract.with_id(len(loaded) + 1))
        return loaded

    def delete(self, contract_id: int, kind: type[Contract]) -> None:
        """
        Drop the record at position contract_id if it is of the given kind.

        Lines that fail to parse are kept as they are.

        Raises:
            NotFoundError: If no loadable record of that kind sits at that position
        """
        raw_lines = self._read_lines()
        position = 0

        for index, line in enumerate(raw_lines):
            contract = self._parse_line(line, index + 1)
            if contract is None:
                continue
            position += 1
            if position == contract_id and isinstance(contract, kind):
                self._write_lines(raw_lines[:index] + raw_lines[index + 1 :])
                return

        raise NotFoundError(resource=kind.__name__, identifier=str(contract_id))

    def _parse_line(self, line: str, line_number: int) -> Contract | None:
        if not line.strip():
            return None

        try:
            return codec.decode(line)
        except DomainError as exc:
            logger.warning(
                "Skipping malformed contract line",
                extra={
                    "path": str(self._path),
                    "line_number": line_number,
                    "line": line.rstrip("\n"),
                    "error": exc.message,
                },
            )
            return None

    def _read_lines(self) -> list[str]:
        if not self._path.exists():
            return []

        try:
            with self._path.open("r", encoding=ENCODING) as handle:
                return handle.readlines()
        except OSError as exc:
            raise self._io_failure("read", exc) from exc

    def _write_lines(self, lines: list[str]) -> None:
        try:
            with self._path.open("w", encoding=ENCODING) as handle:
                handle.writelines(line if line.endswith("\n") else line + "\n" for line in lines)
        except OSError as exc:
            raise self._io_failure("write", exc) from exc

    def _io_failure(self, action: str, exc: OSError) -> PersistenceError:
        logger.error(
            "Contract file I/O failed",
            exc_info=exc,
            extra={"path": str(self._path), "action": action},
        )
        return PersistenceError(f"Failed to {action} contract file", path=str(self._path))


class FileSalesContractRepository(SalesContractRepository):
    """SalesContractRepository over a shared ContractFile."""

    def __init__(self, contract_file: ContractFile) -> None:
        self._file = contract_file

    def create(self, contract: SalesContract) -> SalesContract:
        return self._file.save(contract)  # type: ignore[return-value]

    def get_all(self) -> list[SalesContract]:
        return [c for c in self._file.load_all() if isinstance(c, SalesContract)]

    def delete(self, contract_id: int) -> None:
        self._file.delete(contract_id, SalesContract)


class FileLeaseContractRepository(LeaseContractRepository):
    """LeaseContractRepository over a shared ContractFile."""

    def __init__(self, contract_file: ContractFile) -> None:
        self._file = contract_file

    def create(self, contract: LeaseContract) -> LeaseContract:
        return self._file.save(contract)  # type: ignore[return-value]

    def get_all(self) -> list[LeaseContract]:
        return [c for c in self._file.load_all() if isinstance(c, LeaseContract)]

    def delete(self, contract_id: int) -> None:
        self._file.delete(contract_id, LeaseContract)

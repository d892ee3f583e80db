"""Application service: Show Bill use case (query)."""

from __future__ import annotations

from pos.application.dto import BillDTO, bill_to_dto
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.bill_repository import BillRepository


class ShowBillHandler:

    def __init__(self, bill_repo: BillRepository) -> None:
        self._bill_repo = bill_repo

    def handle(self, bill_number: str) -> BillDTO:
        bill = self._bill_repo.get_by_number(bill_number)
        if bill is None:
            raise EntityNotFoundError(f"Bill {bill_number} not found")
        lines = self._bill_repo.list_lines(bill.id)  # type: ignore[arg-type]
        return bill_to_dto(bill, lines)

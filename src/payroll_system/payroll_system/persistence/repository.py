from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from ..employees.model import Employee


class EmployeeRepository(Protocol):
    """Snapshot store for the whole employee collection.

    Lưu ý (DIP): tầng service chỉ phụ thuộc vào interface này. Both calls are
    all-or-nothing: ``load_all`` returns every employee or raises
    ``PersistenceFailure``; ``save_all`` replaces the stored snapshot.
    """

    def load_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_all(self, employees: Iterable[Employee]) -> None:
        raise NotImplementedError

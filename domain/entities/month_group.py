from dataclasses import dataclass, field

from .transaction import Transaction


@dataclass
class MonthGroup:
    year: int
    month: int
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)

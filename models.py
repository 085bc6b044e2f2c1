# Data class for the single table in the store

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Product:
    name: str
    quantity: int
    id: Optional[int] = None   # None until the store assigns one

    @classmethod
    def from_row(cls, row):
        return cls(name=row['name'], quantity=int(row['quantity']), id=int(row['id']))

"""Store configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IdPolicy(Enum):
    """How add_row picks the id of a new row."""

    LAST_PLUS_ONE = "last"  # id of the current last row + 1
    MAX_PLUS_ONE = "max"  # largest id in the table + 1


@dataclass(frozen=True)
class StoreConfig:
    """Settings shared by the loader and the store.

    Attributes:
        id_column: Column holding each row's numeric identifier.
        id_policy: Id assignment policy for inserted rows.
        first_id: Id given to a row inserted into an empty table.
        extension: Required final dot-delimited segment of a source path.
    """

    id_column: str = "id"
    id_policy: IdPolicy = IdPolicy.LAST_PLUS_ONE
    first_id: int = 1
    extension: str = "json"

    def __post_init__(self) -> None:
        if not isinstance(self.id_policy, IdPolicy):
            # Accept the enum's string value, e.g. StoreConfig(id_policy="max")
            object.__setattr__(self, "id_policy", IdPolicy(self.id_policy))

"""Parameterized equality queries over container documents."""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

_FIELD_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class QuerySpec:
    """
    Equality predicates ANDed together, optionally scoped to one partition.

    Values are carried as parameters and never formatted into the query
    text. Field names are restricted to plain identifiers.
    """

    filters: Mapping[str, Any] = field(default_factory=dict)
    partition_key: Optional[Any] = None

    def __post_init__(self) -> None:
        for name in self.filters:
            if not _FIELD_NAME.match(name):
                raise ValueError(f"Invalid document field name: {name!r}")

    @property
    def text(self) -> str:
        """SQL text with one named parameter per predicate."""
        if not self.filters:
            return "SELECT * FROM c"
        predicates = " AND ".join(f"c.{name} = @{name}" for name in self.filters)
        return f"SELECT * FROM c WHERE {predicates}"

    @property
    def parameters(self) -> list[dict[str, Any]]:
        return [{"name": f"@{name}", "value": value} for name, value in self.filters.items()]

    def describe(self) -> str:
        """Human-readable summary used in log lines and result messages."""
        if not self.filters:
            return "all documents"
        return " and ".join(f"{name} = {value!r}" for name, value in self.filters.items())

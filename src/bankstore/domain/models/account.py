"""Account domain model."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Account:
    """
    Bank account document.

    Partitioned by ``id`` in the document store. ``number`` is queryable
    but uniqueness is not enforced by the repository layer.
    """

    id: str
    user_name: str
    number: int

    def __post_init__(self) -> None:
        if isinstance(self.number, str):
            self.number = int(self.number)

    @property
    def partition_key(self) -> str:
        return self.id

    def to_document(self) -> dict[str, Any]:
        """Serialize to the document shape stored in the container."""
        return {
            "id": self.id,
            "UserName": self.user_name,
            "Number": self.number,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Account":
        """Build an Account from a stored document, ignoring store metadata."""
        return cls(
            id=document["id"],
            user_name=document["UserName"],
            number=document["Number"],
        )

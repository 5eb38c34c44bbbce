"""Bank user domain model."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class BankUser:
    """
    Bank customer identity.

    Partitioned by ``user_name``. At most one user should hold a given
    user name; the repository checks this on update.
    """

    id: str
    user_name: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def partition_key(self) -> str:
        return self.user_name

    def to_document(self) -> dict[str, Any]:
        """Serialize to the document shape stored in the container."""
        return {
            "id": self.id,
            "UserName": self.user_name,
            "FirstName": self.first_name,
            "LastName": self.last_name,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "BankUser":
        """Build a BankUser from a stored document, ignoring store metadata."""
        return cls(
            id=document["id"],
            user_name=document["UserName"],
            first_name=document.get("FirstName"),
            last_name=document.get("LastName"),
        )

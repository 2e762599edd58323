"""Data model for an entry of the resolved index."""

from dataclasses import dataclass
from typing import Any

from rustdoc_index.item_type import ItemType


@dataclass(frozen=True)
class ResolvedItem:
    """A documented item with the URL of its documentation."""

    kind: ItemType
    url: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        """Return the serializable form, with the kind written as its slug."""
        return {
            "kind": self.kind.to_url_slug(),
            "url": self.url,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResolvedItem":
        """Inverse of ``to_dict``."""
        return cls(
            kind=ItemType.from_slug(str(data["kind"])),
            url=str(data["url"]),
            description=str(data.get("description") or ""),
        )

"""Base entity class for all cache entities."""

from dataclasses import asdict, dataclass
from typing import Any


def to_camel(name: str) -> str:
    """snake_case -> camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    def to_camel_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary keyed by camelCase names."""
        return {to_camel(k): v for k, v in asdict(self).items()}

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PermissionDefinition:
    constant: str
    node: str


@dataclass(frozen=True)
class PermissionGroup:
    name: str
    definitions: tuple[PermissionDefinition, ...]

    @property
    def nodes(self) -> tuple[str, ...]:
        return tuple(d.node for d in self.definitions)


@dataclass(frozen=True)
class MissingDescription:
    group: str
    constant: str

    @property
    def ref(self) -> str:
        return f"{self.group}#{self.constant}"

    def __str__(self) -> str:
        return f"Note: Could not retrieve description for {self.ref}"

    def to_json(self) -> dict[str, str]:
        return {"group": self.group, "constant": self.constant}


@dataclass(frozen=True)
class CatalogResult:
    catalog: dict[str, str]
    notices: tuple[MissingDescription, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.notices

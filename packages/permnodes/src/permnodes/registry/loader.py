from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema

from ..core.env import getenv
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG, ERR_VALIDATION
from ..nodes.model import PermissionDefinition, PermissionGroup

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
REGISTRY_TOML = PACKAGE_ROOT / "registry" / "NODES.toml"
REGISTRY_SCHEMA = PACKAGE_ROOT / "contracts" / "schemas" / "permnodes.registry.v1.schema.json"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class SourceConfig:
    folder: str
    extension: str
    encoding: str = DEFAULT_ENCODING


@dataclass(frozen=True)
class NodeRegistry:
    source: SourceConfig
    groups: tuple[PermissionGroup, ...]

    def group(self, name: str) -> PermissionGroup:
        for group in self.groups:
            if group.name == name:
                return group
        raise KeyError(name)

    def source_path(self, root: Path, group: PermissionGroup) -> Path:
        return root / self.source.folder / f"{group.name}.{self.source.extension}"

    def validate(self) -> list[str]:
        errors: list[str] = []
        seen_groups: set[str] = set()
        for group in self.groups:
            if group.name in seen_groups:
                errors.append(f"duplicate group `{group.name}`")
            seen_groups.add(group.name)
            seen_constants: set[str] = set()
            for definition in group.definitions:
                if definition.constant in seen_constants:
                    errors.append(f"duplicate constant `{group.name}#{definition.constant}`")
                seen_constants.add(definition.constant)
        return errors


def resolve_registry_path(path: Path | None = None) -> Path:
    if path is not None:
        return path
    override = getenv("PERMNODES_REGISTRY")
    return Path(override) if override else REGISTRY_TOML


def _validate_schema(payload: dict[str, Any], target: Path) -> None:
    schema = json.loads(REGISTRY_SCHEMA.read_text(encoding="utf-8"))
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ScriptError(
            f"registry {target.as_posix()} failed schema validation at {loc}: {exc.message}",
            ERR_VALIDATION,
            kind="registry_invalid",
        ) from exc


def registry_from_payload(payload: dict[str, Any]) -> NodeRegistry:
    source = payload["source"]
    groups = tuple(
        PermissionGroup(
            name=str(row["name"]),
            definitions=tuple(
                PermissionDefinition(constant=str(item["constant"]), node=str(item["node"]))
                for item in row.get("nodes", [])
            ),
        )
        for row in payload["groups"]
    )
    return NodeRegistry(
        source=SourceConfig(
            folder=str(source["folder"]),
            extension=str(source["extension"]),
            encoding=str(source.get("encoding", DEFAULT_ENCODING)),
        ),
        groups=groups,
    )


def load_registry(path: Path | None = None) -> NodeRegistry:
    target = resolve_registry_path(path)
    try:
        payload = tomllib.loads(target.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ScriptError(f"registry toml not readable: {target.as_posix()}", ERR_CONFIG, kind="registry_unreadable") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ScriptError(f"registry toml invalid: {target.as_posix()}: {exc}", ERR_CONFIG, kind="registry_unreadable") from exc
    _validate_schema(payload, target)
    registry = registry_from_payload(payload)
    errors = registry.validate()
    if errors:
        raise ScriptError("registry toml invalid: " + "; ".join(errors), ERR_VALIDATION, kind="registry_invalid")
    return registry

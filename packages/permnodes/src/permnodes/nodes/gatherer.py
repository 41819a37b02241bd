"""Gather the permission nodes of the registry, optionally with their JavaDoc."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import ScriptError
from ..exit_codes import ERR_SOURCE
from .extract import CommentExtractor, extract_javadoc
from .model import CatalogResult, MissingDescription, PermissionGroup

if TYPE_CHECKING:
    from ..registry.loader import NodeRegistry


def gather_nodes(registry: NodeRegistry) -> list[str]:
    nodes: set[str] = set()
    for group in registry.groups:
        nodes.update(group.nodes)
    return sorted(nodes)


def read_group_source(registry: NodeRegistry, root: Path, group: PermissionGroup) -> str:
    path = registry.source_path(root, group)
    try:
        return path.read_text(encoding=registry.source.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptError(
            f"failed to get the source for group '{group.name}': {path}",
            ERR_SOURCE,
            kind="source_unreadable",
        ) from exc


def gather_nodes_with_docs(
    registry: NodeRegistry,
    root: Path,
    extractor: CommentExtractor = extract_javadoc,
) -> CatalogResult:
    """Map every node of the registry to the JavaDoc of its enum constant.

    Constants without a matching comment map to "" and produce one
    `MissingDescription` each. An unreadable group source aborts the whole
    call; nothing is returned for the groups read before it.
    """
    descriptions: dict[str, str] = {}
    notices: list[MissingDescription] = []
    for group in registry.groups:
        found = extractor(read_group_source(registry, root, group))
        for definition in group.definitions:
            description = found.get(definition.constant)
            if description is None:
                notices.append(MissingDescription(group.name, definition.constant))
                description = ""
            descriptions[definition.node] = description.strip()
    return CatalogResult(catalog=dict(sorted(descriptions.items())), notices=tuple(notices))

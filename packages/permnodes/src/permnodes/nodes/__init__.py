from .extract import CommentExtractor, extract_javadoc
from .gatherer import gather_nodes, gather_nodes_with_docs
from .model import CatalogResult, MissingDescription, PermissionDefinition, PermissionGroup

__all__ = [
    "CatalogResult",
    "CommentExtractor",
    "MissingDescription",
    "PermissionDefinition",
    "PermissionGroup",
    "extract_javadoc",
    "gather_nodes",
    "gather_nodes_with_docs",
]

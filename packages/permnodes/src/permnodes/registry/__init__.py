from .loader import NodeRegistry, SourceConfig, load_registry, resolve_registry_path

__all__ = ["NodeRegistry", "SourceConfig", "load_registry", "resolve_registry_path"]

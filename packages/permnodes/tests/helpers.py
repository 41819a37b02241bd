from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from permnodes.nodes.model import PermissionDefinition, PermissionGroup
from permnodes.registry.loader import NodeRegistry, SourceConfig

ROOT = Path(__file__).resolve().parents[3]
FIXTURES_ROOT = ROOT / "packages/permnodes/tests/fixtures"
AUTHME_REPO = FIXTURES_ROOT / "authme"
SOURCE_FOLDER = "src/permissions"


def make_registry(groups: dict[str, dict[str, str]], folder: str = SOURCE_FOLDER) -> NodeRegistry:
    return NodeRegistry(
        source=SourceConfig(folder=folder, extension="java"),
        groups=tuple(
            PermissionGroup(
                name=name,
                definitions=tuple(PermissionDefinition(constant, node) for constant, node in definitions.items()),
            )
            for name, definitions in groups.items()
        ),
    )


def write_source(repo: Path, group: str, body: str, folder: str = SOURCE_FOLDER) -> Path:
    path = repo / folder / f"{group}.java"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"public enum {group} implements PermissionNode {{\n\n{body}\n}}\n", encoding="utf-8")
    return path


def write_registry_toml(path: Path, groups: dict[str, dict[str, str]], folder: str = SOURCE_FOLDER) -> Path:
    lines = ["[source]", f'folder = "{folder}"', 'extension = "java"', ""]
    for name, definitions in groups.items():
        lines.extend(["[[groups]]", f'name = "{name}"', "nodes = ["])
        lines.extend(f'  {{ constant = "{c}", node = "{n}" }},' for c, n in definitions.items())
        lines.extend(["]", ""])
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def run_permnodes(*args: str, cwd: Path | None = None, env_extra: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT / "packages/permnodes/src")
    env.pop("PERMNODES_REGISTRY", None)
    env.setdefault("RUN_ID", "pytest-run")
    env.update(env_extra or {})
    return subprocess.run(
        [sys.executable, "-m", "permnodes", *args],
        cwd=(cwd or ROOT),
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .clock import utc_now
from .env import getenv
from .repo_root import find_repo_root

OutputFormat = Literal["text", "json"]


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    registry_path: Path | None
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        cwd: str | None,
        registry: str | None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        repo_root = Path(cwd).resolve() if cwd else find_repo_root()
        default_run = f"permnodes-{utc_now().strftime('%Y%m%d-%H%M%S')}"
        resolved_run_id = run_id or getenv("RUN_ID") or default_run
        registry_raw = registry or getenv("PERMNODES_REGISTRY")
        return cls(
            run_id=resolved_run_id,
            repo_root=repo_root,
            registry_path=Path(registry_raw).resolve() if registry_raw else None,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
        )

"""CLI payload output helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.serialize import dumps_json

if TYPE_CHECKING:
    from ..core.context import RunContext


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def build_base_payload(ctx: RunContext, status: str = "ok") -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "permnodes",
        "status": status,
        "run_id": ctx.run_id,
        "repo_root": str(ctx.repo_root),
        "registry": str(ctx.registry_path) if ctx.registry_path else "<packaged>",
    }


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_name": "permnodes.error.v1",
                "schema_version": 1,
                "tool": "permnodes",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            pretty=False,
        )
    return message

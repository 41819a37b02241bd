from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_INTERNAL
from ..nodes.command import (
    configure_nodes_parsers,
    run_describe_command,
    run_list_command,
    run_registry_command,
)
from .output import render_error

COMMANDS = {
    "list": run_list_command,
    "describe": run_describe_command,
    "registry": run_registry_command,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="permnodes", description="Gather AuthMe permission nodes and their JavaDoc.")
    p.add_argument("--version", action="version", version=f"permnodes {__version__}")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--cwd", help="repository root holding the permission sources")
    p.add_argument("--registry", help="permission registry TOML (default: packaged NODES.toml)")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit warnings and errors")
    sub = p.add_subparsers(dest="cmd", required=True)
    configure_nodes_parsers(sub)
    return p


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    as_json = bool(ns.json)
    try:
        ctx = RunContext.from_args(
            ns.run_id,
            ns.cwd,
            ns.registry,
            "json" if as_json else "text",
            ns.verbose,
            ns.quiet,
            ns.log_json,
        )
        log_event(ctx, "info", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format)
        return COMMANDS[ns.cmd](ctx, ns)
    except ScriptError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=as_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())

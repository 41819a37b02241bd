from __future__ import annotations

import argparse
import sys

from ..cli.output import build_base_payload, emit
from ..core.context import RunContext
from ..core.logging import log_event
from ..exit_codes import ERR_VALIDATION, OK
from ..registry.loader import load_registry
from .gatherer import gather_nodes, gather_nodes_with_docs
from .model import MissingDescription


def _report_notices(ctx: RunContext, notices: tuple[MissingDescription, ...]) -> None:
    for notice in notices:
        log_event(ctx, "debug", "nodes", "missing-description", group=notice.group, constant=notice.constant)
        if not ctx.as_json:
            print(str(notice), file=sys.stderr)


def run_list_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    registry = load_registry(ctx.registry_path)
    nodes = gather_nodes(registry)
    log_event(ctx, "debug", "nodes", "gathered", count=len(nodes))
    if ctx.as_json:
        emit({**build_base_payload(ctx), "nodes": nodes}, True)
        return OK
    for node in nodes:
        print(node)
    return OK


def run_describe_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    registry = load_registry(ctx.registry_path)
    result = gather_nodes_with_docs(registry, ctx.repo_root)
    _report_notices(ctx, result.notices)
    status = "ok" if result.complete or not ns.strict else "fail"
    if ctx.as_json:
        emit(
            {
                **build_base_payload(ctx, status),
                "catalog": result.catalog,
                "notices": [notice.to_json() for notice in result.notices],
            },
            True,
        )
    else:
        for node, description in result.catalog.items():
            print(f"{node}\t{description}")
    return OK if status == "ok" else ERR_VALIDATION


def run_registry_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    registry = load_registry(ctx.registry_path)
    groups = [
        {
            "name": group.name,
            "count": len(group.definitions),
            "source": registry.source_path(ctx.repo_root, group).as_posix(),
        }
        for group in registry.groups
    ]
    if ctx.as_json:
        emit({**build_base_payload(ctx), "encoding": registry.source.encoding, "groups": groups}, True)
        return OK
    for row in groups:
        print(f"{row['name']}: {row['count']} nodes <- {row['source']}")
    return OK


def configure_nodes_parsers(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    sub.add_parser("list", help="print all permission nodes sorted alphabetically")
    describe = sub.add_parser("describe", help="print permission nodes with their JavaDoc description")
    describe.add_argument("--strict", action="store_true", help="fail when a description is missing")
    sub.add_parser("registry", help="print the permission groups and their source files")

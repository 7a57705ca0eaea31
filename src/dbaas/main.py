import argparse
import json
from collections.abc import Callable, Sequence
from importlib.metadata import version
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .clients import DBaaSAPI, get_dbaas_client
from .config import Settings
from .errors import ConfigurationError, DBaaSError
from .logger import logger, set_verbose
from .resources import (
    acl,
    configuration_parameter,
    database,
    datastore,
    datastore_type,
    extension,
    flavor,
    grant,
    logical_replication_slot,
    prometheus_metrics_token,
    topic,
    user,
)

Lister = Callable[[DBaaSAPI], Sequence[BaseModel]]
Getter = Callable[[DBaaSAPI, str], BaseModel]

# resource name -> (list, get)
RESOURCES: dict[str, tuple[Lister, Getter]] = {
    "datastores": (datastore.list_datastores, datastore.get_datastore),
    "databases": (database.list_databases, database.get_database),
    "users": (user.list_users, user.get_user),
    "acls": (acl.list_acls, acl.get_acl),
    "grants": (grant.list_grants, grant.get_grant),
    "topics": (topic.list_topics, topic.get_topic),
    "extensions": (extension.list_extensions, extension.get_extension),
    "available-extensions": (
        extension.list_available_extensions,
        extension.get_available_extension,
    ),
    "flavors": (flavor.list_flavors, flavor.get_flavor),
    "datastore-types": (
        datastore_type.list_datastore_types,
        datastore_type.get_datastore_type,
    ),
    "configuration-parameters": (
        configuration_parameter.list_configuration_parameters,
        configuration_parameter.get_configuration_parameter,
    ),
    "logical-replication-slots": (
        logical_replication_slot.list_logical_replication_slots,
        logical_replication_slot.get_logical_replication_slot,
    ),
    "prometheus-metrics-tokens": (
        prometheus_metrics_token.list_prometheus_metric_tokens,
        prometheus_metrics_token.get_prometheus_metric_token,
    ),
}

# Shown in the table when the model has them, in this order
SUMMARY_FIELDS = ["id", "name", "engine", "version", "status", "datastore_id"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbaas",
        description="dbaas: inspect DBaaS resources from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all datastores of the project
  dbaas datastores

  # Show one flavor as JSON
  dbaas --json flavors 20d7bcf4-f8d6-4bf6-b8f6-46cb440a87f4

Connection settings default to DBAAS_TOKEN and DBAAS_ENDPOINT.
""",
    )
    try:
        ver = version("dbaas")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"dbaas v{ver}")

    parser.add_argument("--token", help="Auth token (default: $DBAAS_TOKEN)")
    parser.add_argument("--endpoint", help="Service endpoint (default: $DBAAS_ENDPOINT)")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument(
        "--verbose", action="store_true", help="Log every request and response status"
    )
    parser.add_argument("resource", choices=sorted(RESOURCES), help="Resource kind")
    parser.add_argument("id", nargs="?", help="Show a single resource by ID")

    return parser


def render_table(resource: str, items: Sequence[BaseModel]) -> Table:
    table = Table(title=f"{resource} ({len(items)})")
    if not items:
        return table

    fields = [f for f in SUMMARY_FIELDS if f in type(items[0]).model_fields]
    for f in fields:
        table.add_column(f, style="cyan" if f == "id" else None)

    for item in items:
        row = []
        for f in fields:
            value: Any = getattr(item, f)
            if hasattr(value, "value"):
                value = value.value
            row.append("" if value is None else str(value))
        table.add_row(*row)

    return table


def run(args: argparse.Namespace, out_console: Console) -> None:
    if args.token or args.endpoint:
        settings = Settings.from_env()
        token = args.token or settings.token
        endpoint = args.endpoint or settings.endpoint
        if not token or not endpoint:
            raise ConfigurationError("both a token and an endpoint are required")
        api = DBaaSAPI(token=token, endpoint=endpoint, user_agent=settings.user_agent)
    else:
        api = get_dbaas_client()

    list_fn, get_fn = RESOURCES[args.resource]

    if args.id:
        item = get_fn(api, args.id)
        if args.json:
            out_console.print_json(item.model_dump_json())
        else:
            out_console.print(item)
        return

    items = list_fn(api)
    if args.json:
        out_console.print_json(json.dumps([i.model_dump(mode="json") for i in items]))
    else:
        out_console.print(render_table(args.resource, items))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    set_verbose(args.verbose)

    log_console = Console(stderr=True)
    out_console = Console()

    try:
        run(args, out_console)
    except DBaaSError as e:
        logger.debug(f"{e.category.value} error: {e!r}")
        log_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        return 1

    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        raise SystemExit(130)

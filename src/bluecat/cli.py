"""Command-line interface for the BlueCat Address Manager client."""

from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.table import Table

from .bam.client import BAMClient
from .bam.response_models import APIEntity
from .config import BAMConfig, ClientConfig, LoggingConfig, load_config
from .observability import configure_logging
from .utils.exceptions import BlueCatError

app = typer.Typer(
    name="bluecat",
    help="BlueCat Client - Query BlueCat Address Manager over the REST v1 API",
    add_completion=False,
)

console = Console()
logger = structlog.get_logger(__name__)


def _connect(
    config_file: Path | None, log_level: str | None, insecure: bool
) -> BAMClient:
    """Load configuration, set up logging and build an unauthenticated client."""
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Configuration error:[/red] {e}")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=log_level or config.logging.level,
        json_logs=config.logging.format == "json",
        log_file=config.logging.file,
    )

    if config.bam is None:
        console.print("[red]ERROR: No BAM server configured.[/red]")
        console.print("(Set BAM_SERVER/BAM_USERNAME/BAM_PASSWORD env vars or provide --config)")
        raise typer.Exit(code=1)

    if insecure:
        config.bam.verify_ssl = False

    return BAMClient(config.bam)


def _entity_table(title: str, entities: list[APIEntity]) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Type", style="yellow")
    table.add_column("Properties")
    for entity in entities:
        table.add_row(str(entity.id), entity.name, entity.type, entity.properties)
    return table


@app.command()
def login(
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Configuration file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate checks"),
) -> None:
    """
    Check that the configured credentials can log in.

    Examples:
        bluecat login
        bluecat login --config prod.yaml
    """
    try:
        with _connect(config_file, log_level, insecure) as client:
            console.print(f"[green]OK:[/green] Logged in to {client.config.server}")
    except BlueCatError as e:
        console.print(f"\n[red]ERROR: Login failed:[/red] {e}")
        raise typer.Exit(code=1) from e


@app.command()
def entity(
    entity_id: int = typer.Argument(..., help="Object ID"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Configuration file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate checks"),
) -> None:
    """
    Show one object by ID.

    Examples:
        bluecat entity 100881
    """
    try:
        with _connect(config_file, log_level, insecure) as client:
            result = client.get_entity_by_id(entity_id)
    except BlueCatError as e:
        console.print(f"\n[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if not result.id:
        console.print(f"[yellow]No object with ID {entity_id}[/yellow]")
        raise typer.Exit(code=1)

    console.print(_entity_table(f"Entity {entity_id}", [result]))


@app.command()
def children(
    parent_id: int = typer.Argument(..., help="Object ID of the parent"),
    object_type: str = typer.Argument(..., help="Child object type (e.g. IP4Network)"),
    count: int = typer.Option(10, "--count", "-n", help="Maximum number of children"),
    start: int = typer.Option(0, "--start", help="Index of the first child"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Configuration file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate checks"),
) -> None:
    """
    List one page of children of an object.

    Examples:
        bluecat children 100881 IP4Network
        bluecat children 100881 IP4Network --count 50 --start 50
    """
    try:
        with _connect(config_file, log_level, insecure) as client:
            results = client.get_entities(parent_id, object_type, count=count, start=start)
    except BlueCatError as e:
        console.print(f"\n[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(_entity_table(f"{object_type} under {parent_id}", results))
    console.print(f"  Total shown: {len(results)}")


@app.command()
def search(
    keyword: str = typer.Argument(..., help="Search string (^, $ and * wildcards)"),
    types: str = typer.Option(
        "IP4Network,IP4Address,HostRecord", "--types", "-t", help="Comma-separated object types"
    ),
    count: int = typer.Option(10, "--count", "-n", help="Maximum number of results"),
    start: int = typer.Option(0, "--start", help="Index of the first result"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Configuration file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate checks"),
) -> None:
    """
    Search objects by keyword.

    Examples:
        bluecat search "^web"
        bluecat search 10.0.0.* --types IP4Address
    """
    try:
        with _connect(config_file, log_level, insecure) as client:
            results = client.search_by_object_types(keyword, types, count=count, start=start)
    except BlueCatError as e:
        console.print(f"\n[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(_entity_table(f"Search: {keyword}", results))


@app.command(name="system-info")
def system_info(
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Configuration file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate checks"),
) -> None:
    """Show BAM system information."""
    try:
        with _connect(config_file, log_level, insecure) as client:
            info = client.get_system_info()
    except BlueCatError as e:
        console.print(f"\n[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    table = Table(title="System Information")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for item in info.split("|"):
        if not item:
            continue
        name, _, value = item.partition("=")
        table.add_row(name, value)
    console.print(table)


@app.command(name="next-ip")
def next_ip(
    network_id: int = typer.Argument(..., help="Object ID of the IPv4 network"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Configuration file"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate checks"),
) -> None:
    """
    Print the next available IPv4 address in a network.

    Examples:
        bluecat next-ip 100881
    """
    try:
        with _connect(config_file, log_level, insecure) as client:
            address = client.get_next_ip4_address(network_id)
    except BlueCatError as e:
        console.print(f"\n[red]ERROR:[/red] {e}")
        raise typer.Exit(code=1) from e

    if not address:
        console.print(f"[yellow]No free address in network {network_id}[/yellow]")
        raise typer.Exit(code=1)

    console.print(address)


@app.command(name="init-config")
def init_config(
    output: Path = typer.Argument(..., help="Where to write the YAML file"),
    server: str = typer.Option(..., "--server", "-s", help="BAM host name"),
    username: str = typer.Option(..., "--username", "-u", help="API user name"),
    insecure: bool = typer.Option(False, "--insecure", help="Skip TLS certificate checks"),
    log_format: str = typer.Option("console", "--log-format", help="console or json"),
) -> None:
    """
    Write a configuration file. The password is read from BAM_PASSWORD at run time.

    Examples:
        bluecat init-config ~/.config/bluecat.yaml -s bam.example.com -u api
    """
    config = ClientConfig(
        bam=BAMConfig(server=server, username=username, password="", verify_ssl=not insecure),
        logging=LoggingConfig(format=log_format),
    )
    config.to_file(output)
    console.print(f"[green]Wrote configuration to {output}[/green]")


if __name__ == "__main__":
    app()

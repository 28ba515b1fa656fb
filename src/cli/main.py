"""Main CLI interface using Typer."""

from pathlib import Path
from typing import Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..api import MappingService
from ..mapping import MappingError, load_catalog
from ..model.cluster import KubeConfig, MapOptions, StorageType
from ..model.result import OutcomeStatus, RewriteResult
from ..utils.logger import get_logger

# Create CLI app
app = typer.Typer(
    name="k8s-api-mapper",
    help="Map deprecated or removed Kubernetes APIs to their supported versions",
    add_completion=True,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

STATUS_STYLES: Dict[OutcomeStatus, str] = {
    OutcomeStatus.APPLIED: "[green]APPLIED[/green]",
    OutcomeStatus.NOT_YET_APPLICABLE: "[yellow]NOT YET APPLICABLE[/yellow]",
    OutcomeStatus.INVALID_VERSION: "[red]INVALID VERSION[/red]",
    OutcomeStatus.NO_MATCH: "[dim]NO MATCH[/dim]",
}


def _one_line(api: str) -> str:
    """Collapse a multi-line API string for table display."""
    return " / ".join(part.strip() for part in api.strip().splitlines())


def _print_outcomes(result: RewriteResult) -> None:
    """Print the outcomes of entries that matched the manifest."""
    outcomes = [o for o in result.outcomes if o.status != OutcomeStatus.NO_MATCH]
    if not outcomes:
        err_console.print("[green]No deprecated or removed APIs found[/green]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Status", style="cyan")
    table.add_column("Deprecated API", style="white")
    table.add_column("New API", style="green")
    table.add_column("Effective", style="yellow")

    for outcome in outcomes:
        table.add_row(
            STATUS_STYLES[outcome.status],
            _one_line(outcome.entry.deprecated_api),
            _one_line(outcome.entry.new_api),
            outcome.effective_version or "-",
        )

    err_console.print(table)
    err_console.print(
        f"Cluster version [cyan]{result.cluster_version}[/cyan]: "
        f"[green]{len(result.applied)}[/green] applied, "
        f"[yellow]{len(result.skipped)}[/yellow] skipped"
    )


@app.command("map")
def map_release(
    release: str = typer.Argument(..., help="Name of the Helm release"),
    namespace: str = typer.Option(
        "default", "--namespace", "-n", help="Namespace of the Helm release"
    ),
    map_file: Optional[Path] = typer.Option(
        None, "--map-file", "-m", help="API mapping file (default: built-in mappings)"
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
    kubeconfig: Optional[Path] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file"
    ),
    storage: StorageType = typer.Option(
        StorageType.SECRETS, "--storage", help="Helm release storage backend"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Show what would be mapped without updating the release"
    ),
):
    """Map deprecated APIs in the latest revision of a Helm release."""
    options = MapOptions(
        release_name=release,
        release_namespace=namespace,
        map_file=str(map_file) if map_file else None,
        dry_run=dry_run,
        storage_type=storage,
        kube_config=KubeConfig(context=context, file=str(kubeconfig) if kubeconfig else None),
    )

    try:
        with console.status(f"[bold green]Mapping release {release}..."):
            report = MappingService().map_release(options)
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _print_outcomes(report.result)

    if report.updated:
        console.print(
            f"[green]✓[/green] Release [cyan]{report.release_name}[/cyan] updated "
            f"to revision {report.new_revision}"
        )
    elif report.dry_run and report.result.modified:
        console.print(
            f"[yellow]Dry run:[/yellow] release [cyan]{report.release_name}[/cyan] "
            f"revision {report.original_revision} would be updated"
        )
    else:
        console.print(
            f"Release [cyan]{report.release_name}[/cyan] does not need to be updated"
        )


@app.command()
def rewrite(
    manifest: Path = typer.Argument(..., help="Manifest file to rewrite"),
    map_file: Optional[Path] = typer.Option(
        None, "--map-file", "-m", help="API mapping file (default: built-in mappings)"
    ),
    kube_version: Optional[str] = typer.Option(
        None,
        "--kube-version",
        "-k",
        help="Target Kubernetes version, e.g. 1.22 (default: query the cluster)",
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
    kubeconfig: Optional[Path] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the rewritten manifest to this file"
    ),
    in_place: bool = typer.Option(
        False, "--in-place", "-i", help="Overwrite the manifest file"
    ),
):
    """Rewrite deprecated APIs in a local manifest file."""
    kube_config = KubeConfig(context=context, file=str(kubeconfig) if kubeconfig else None)

    try:
        result = MappingService().rewrite_file(
            manifest,
            map_file=str(map_file) if map_file else None,
            kube_version=kube_version,
            kube_config=kube_config,
        )
    except Exception as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    _print_outcomes(result)

    target = manifest if in_place else output
    if target:
        target.write_text(result.manifest)
        err_console.print(f"[green]✓[/green] Manifest saved to: [cyan]{target}[/cyan]")
    else:
        typer.echo(result.manifest, nl=False)


@app.command()
def mappings(
    map_file: Optional[Path] = typer.Option(
        None, "--map-file", "-m", help="API mapping file (default: built-in mappings)"
    ),
):
    """List the API mappings in a catalog."""
    try:
        catalog = load_catalog(map_file)
    except MappingError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title="Kubernetes API Mappings", show_header=True)
    table.add_column("Deprecated API", style="white")
    table.add_column("New API", style="green")
    table.add_column("Deprecated In", style="yellow")
    table.add_column("Removed In", style="red")

    for entry in catalog:
        table.add_row(
            _one_line(entry.deprecated_api),
            _one_line(entry.new_api),
            entry.deprecated_in_version or "-",
            entry.removed_in_version or "-",
        )

    console.print(table)
    console.print(f"{len(catalog)} mappings")


@app.command()
def version():
    """Show version information."""
    console.print("[bold]k8s-api-mapper[/bold] version 0.1.0")
    console.print("Maps deprecated Kubernetes APIs in manifests and Helm releases")


if __name__ == "__main__":
    app()

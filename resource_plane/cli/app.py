"""
Aplicación CLI del Resource Plane.

Solo compone comandos; la lógica vive en core, providers y controller. Los errores de la
taxonomía se formatean aquí y se convierten en código de salida 1.
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from resource_plane import __version__
from resource_plane.controller.memory import InMemoryManagementController
from resource_plane.core.errors import ResourcePlaneError
from resource_plane.core.predicate_parser import parse_predicate
from resource_plane.core.provider.notifier import ChangeNotifier
from resource_plane.core.provider.registry import create_provider
from resource_plane.core.query import QueryRunner
from resource_plane.core.resource import REQUEST_STATUS_PROPERTY_ID, Request, ResourceType
from resource_plane.extensions import EXTENSION_NAME_PROPERTY_ID
from resource_plane.logging_config import configure_logging
from resource_plane.runtime.settings import load_settings

app = typer.Typer(
    name="resource-plane",
    help="Resource Plane - API genérica de recursos sobre el controlador de gestión",
    add_completion=False,
    no_args_is_help=True,
)
extensions_app = typer.Typer(help="Extensiones de stack (solo lectura)", no_args_is_help=True)
app.add_typer(extensions_app, name="extensions")

console = Console()

CatalogOption = typer.Option(None, "--catalog", "-c", help="Catálogo YAML (por defecto se resuelve)")


def _build_runner(catalog: Optional[Path]) -> QueryRunner:
    settings = load_settings(catalog_path=catalog)
    configure_logging(settings.log_level)
    if settings.catalog_path is None:
        console.print("[yellow]⚠️ Sin catálogo: se usa un controlador vacío[/yellow]")
    controller = InMemoryManagementController(catalog_path=settings.catalog_path)
    provider = create_provider(ResourceType.EXTENSION, controller, ChangeNotifier())
    return QueryRunner(provider)


def _fail(error: ResourcePlaneError) -> None:
    kind = error.kind.value if error.kind else type(error).__name__
    console.print(f"[red]✘ {escape(error.message)}[/red] [dim]({kind})[/dim]")
    raise typer.Exit(code=1)


@extensions_app.command("list")
def list_extensions(
    fields: Optional[List[str]] = typer.Option(None, "--fields", "-f", help="Propiedades a mostrar"),
    filter_: Optional[str] = typer.Option(None, "--filter", help="Predicado, ej: Extensions/extension_name=EXT-1.0"),
    catalog: Optional[Path] = CatalogOption,
):
    """Lista las extensiones (proyección y filtro opcionales)"""
    try:
        runner = _build_runner(catalog)
        resources = runner.get_resources(Request.read(fields or ()), parse_predicate(filter_))
    except ResourcePlaneError as e:
        _fail(e)

    property_ids = sorted({pid for r in resources for pid in r.property_ids})
    table = Table(title="Extensions", show_header=True, header_style="bold cyan")
    for pid in property_ids:
        table.add_column(pid, style="cyan")
    rows = sorted(resources, key=lambda r: str(r.get_property(EXTENSION_NAME_PROPERTY_ID)))
    for resource in rows:
        table.add_row(*(escape(str(resource.get_property(pid, ""))) for pid in property_ids))
    console.print(table)
    console.print(f"[dim]{len(resources)} recurso(s)[/dim]")


@extensions_app.command("get")
def get_extension(
    name: str = typer.Argument(..., help="Nombre de la extensión"),
    catalog: Optional[Path] = CatalogOption,
):
    """Muestra una extensión; falla si no existe"""
    try:
        resource = _build_runner(catalog).get_resource(name)
    except ResourcePlaneError as e:
        _fail(e)

    lines = "\n".join(f"[bold]{pid}:[/bold] {escape(str(value))}" for pid, value in sorted(resource.to_dict().items()))
    console.print(Panel.fit(lines, title=resource.type.value, border_style="cyan"))


@extensions_app.command("refresh")
def refresh_extensions(catalog: Optional[Path] = CatalogOption):
    """Refresca la metadata de stacks (dispara el update de extensiones)"""
    try:
        runner = _build_runner(catalog)
        status = runner.provider.update_resources(Request.write(), None)
    except ResourcePlaneError as e:
        _fail(e)

    if status.request_id is not None:
        backend_status = status.request_resource.get_property(REQUEST_STATUS_PROPERTY_ID)
        console.print(f"[green]✔ {status.status.value}[/green] request id: {status.request_id} ({backend_status})")
    else:
        console.print(f"[green]✔ {status.status.value}[/green]")


@app.command()
def version():
    """Muestra la versión del Resource Plane"""
    console.print(Panel.fit(
        "[bold cyan]Resource Plane[/bold cyan]\n"
        "[dim]Providers de recursos sobre el controlador de gestión[/dim]\n\n"
        f"[bold]Versión:[/bold] {__version__}",
        border_style="cyan"
    ))


def main():
    app()

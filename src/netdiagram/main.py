import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from netdiagram.config import configure_logging, get_settings
from netdiagram.core.builder import GraphModelBuilder
from netdiagram.core.errors import NetDiagramError
from netdiagram.core.focus import FocusController, resolve_focus
from netdiagram.core.loader import load_service_map, load_viz_data
from netdiagram.core.options import Preset, load_render_options
from netdiagram.core.schemas import DiagramConfig, FocusStatus, NetworkDiagram, ValueOptions
from netdiagram.render.vis import VisHtmlRenderer

logger = logging.getLogger(__name__)

APP_HELP = """
netdiagram: turn tabular query results into network diagrams.

Each row of a query result becomes a directed edge from its source field to
its destination field, labelled with the value of the first field. Labels are
deduplicated into nodes numbered in the order they are first seen.

By default the source is the LAST field of the result and the destination the
SECOND-TO-LAST; use --source / --dest to pick them explicitly.
"""

app = typer.Typer(name="netdiagram", help=APP_HELP, no_args_is_help=True)


def _fail(message: str) -> None:
    print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(code=1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output.")):
    configure_logging("DEBUG" if verbose else None)


def _print_diagram(diagram: NetworkDiagram) -> None:
    graph = diagram.graph
    labels = {node.id: node.label for node in graph.nodes}
    header = (
        f"{diagram.source_field.name} -> {diagram.dest_field.name} "
        f"(value: {diagram.value_field.name})"
    )
    print(Panel(escape(header), title=escape(diagram.title) if diagram.title else "Network Diagram", border_style="blue"))

    nodes_table = Table(title=f"Nodes ({len(graph.nodes)})")
    nodes_table.add_column("ID", style="cyan", justify="right")
    nodes_table.add_column("Label", style="magenta")
    for node in graph.nodes:
        nodes_table.add_row(str(node.id), escape(node.label))
    print(nodes_table)

    edges_table = Table(title=f"Edges ({len(graph.edges)})")
    edges_table.add_column("From", style="cyan")
    edges_table.add_column("To", style="cyan")
    edges_table.add_column("Value", style="green", justify="right")
    for edge in graph.edges:
        edges_table.add_row(
            escape(labels[edge.from_]) if edge.from_ in labels else "[dim]-[/dim]",
            escape(labels[edge.to]) if edge.to in labels else "[dim]-[/dim]",
            escape(str(edge.title)),
        )
    print(edges_table)


@app.command()
def build(
    result: Path = typer.Argument(..., help="Query result JSON ({data, metadata: {fields}})"),
    source: Optional[str] = typer.Option(None, "--source", "-s", help="Source field name"),
    dest: Optional[str] = typer.Option(None, "--dest", "-d", help="Destination field name"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Diagram title"),
    json_output: bool = typer.Option(False, "--json", help="Output graph and options as JSON"),
    html: Optional[Path] = typer.Option(None, "--html", help="Write a standalone vis-network HTML page"),
    focus: Optional[str] = typer.Option(None, "--focus", help="Service to focus in the HTML page"),
    service_map: Optional[Path] = typer.Option(None, "--service-map", help="Service map JSON used by --focus"),
):
    """
    Build a network diagram from a query result.

    Examples:
        netdiagram build result.json
        netdiagram build result.json --source src_country --dest dst_country --json
        netdiagram build result.json --html map.html --focus checkout --service-map services.json
    """
    if focus is not None and (html is None or service_map is None):
        _fail("--focus requires both --html and --service-map")

    config = DiagramConfig(
        value_options=ValueOptions(source=[source] if source else [], dest=[dest] if dest else []),
        panel_title=title,
    )
    try:
        diagram = GraphModelBuilder(config).build(load_viz_data(result))
        options = load_render_options(Preset.DIAGRAM)
    except NetDiagramError as e:
        _fail(str(e))

    if get_settings().scale_edges:
        options = options.with_edge_scaling(diagram.value_range)

    if html is not None:
        renderer = VisHtmlRenderer(title=diagram.title)
        if focus is not None:
            try:
                services = load_service_map(service_map)
            except NetDiagramError as e:
                _fail(str(e))
            controller = FocusController(renderer, services)
            controller.search(focus)
            if controller.invalid:
                print(f"[yellow]Service '{escape(focus)}' is not in the service map; page will not be focused[/yellow]")
        renderer.write(diagram.graph, options.to_vis(), html)
        print(f"[bold green]Wrote {html}[/bold green]")
        return

    if json_output:
        typer.echo(json.dumps({
            "title": diagram.title,
            "sourceField": diagram.source_field.name,
            "destField": diagram.dest_field.name,
            "valueField": diagram.value_field.name,
            "graph": diagram.graph.to_vis(),
            "valueRange": diagram.value_range.model_dump(),
            "options": options.to_vis(),
        }))
        return

    _print_diagram(diagram)


@app.command("focus")
def focus_service(
    service_map: Path = typer.Argument(..., help="Service map JSON"),
    query: str = typer.Argument(..., help="Service name (exact, case-sensitive)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Resolve a service name to its node id in the service map.

    Exits with status 1 when the service is unknown.
    """
    try:
        services = load_service_map(service_map)
    except NetDiagramError as e:
        _fail(str(e))

    focus_result = resolve_focus(query, services)
    if json_output:
        typer.echo(json.dumps(focus_result.model_dump(mode="json")))
    elif focus_result.status == FocusStatus.FOUND:
        print(f"[green]{escape(query)} -> node {focus_result.node_id}[/green]")
    elif focus_result.status == FocusStatus.EMPTY:
        print("[dim]Nothing to focus[/dim]")
    else:
        print(f"[red]Unknown service: {escape(query)}[/red]")

    if focus_result.status == FocusStatus.NOT_FOUND:
        raise typer.Exit(code=1)


@app.command()
def options(
    preset: Preset = typer.Option(Preset.DIAGRAM, "--preset", "-p", help="Option set to show"),
):
    """
    Show the effective vis-network options (preset plus netdiagram.toml overrides).
    """
    try:
        render_options = load_render_options(preset)
    except NetDiagramError as e:
        _fail(str(e))
    typer.echo(json.dumps(render_options.to_vis(), indent=2))


if __name__ == "__main__":
    app()

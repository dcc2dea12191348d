"""Command-line interface for eulerian."""

import sys
from pathlib import Path
from typing import Optional
import click
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from eulerian.config import Config, load_config_data
from eulerian.core.circuit import EulerianCircuitFinder, verify_circuit
from eulerian.graph.base import Multigraph
from eulerian.graph.generators import create_graph

USAGE = "Usage: eulerian run -v <vertices> -e <edges> -s <seed>"

app = typer.Typer(
    name="eulerian",
    help="eulerian: Eulerian circuits on seeded random multigraphs",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)


@app.command()
def run(
    vertices: Optional[int] = typer.Option(None, "-v", "--vertices", help="Number of vertices (> 0)"),
    edges: Optional[int] = typer.Option(None, "-e", "--edges", help="Number of edges (>= 0)"),
    seed: Optional[int] = typer.Option(None, "-s", "--seed", help="Random seed (> 0)"),
    graph_type: Optional[str] = typer.Option(None, "-t", "--type", help="Generator type (see list-generators)"),
    k: Optional[int] = typer.Option(None, "--k", help="Degree for k-regular graphs"),
    config_path: Optional[Path] = typer.Option(None, "-c", "--config", help="Configuration file (YAML/JSON)"),
    verbose: bool = typer.Option(False, "--verbose", help="Print graph statistics"),
    verify: bool = typer.Option(False, "--verify", help="Verify the circuit"),
):
    """Generate a graph and print its Eulerian circuit, if one exists.

    Command-line flags override values from the configuration file.

    Example:
        eulerian run -v 4 -e 4 -s 1
    """
    try:
        config = _resolve_config(
            config_path,
            graph={"vertices": vertices, "edges": edges, "seed": seed, "type": graph_type, "k": k},
            output={"verbose": verbose or None, "verify": verify or None},
        )
    except ValidationError as e:
        err_console.print(USAGE, markup=False, highlight=False)
        err_console.print(
            "Error: Invalid parameters. Ensure vertices > 0, edges >= 0, seed > 0.",
            markup=False,
            highlight=False,
        )
        err_console.print(_describe(e), style="red", markup=False)
        raise typer.Exit(1)
    except (ValueError, OSError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    try:
        graph = create_graph(
            config.graph.type,
            config.graph.vertices,
            config.graph.edges,
            seed=config.graph.seed,
            k=config.graph.k,
        )
    except ValueError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if config.output.verbose:
        _display_graph(graph, config)

    result = EulerianCircuitFinder().find(graph)
    typer.echo(result.message)

    if config.output.verify and result.exists:
        if not verify_circuit(graph, result.circuit):
            err_console.print("[bold red]Error:[/bold red] circuit failed verification")
            raise typer.Exit(1)
        console.print(f"[green]✓ Verified: {graph.num_edges} edges traversed once each[/green]")


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def echo(ctx: typer.Context):
    """Print the given arguments back.

    Example:
        eulerian echo hello world
    """
    typer.echo(f"You entered: {' '.join([ctx.command_path] + ctx.args)}")


@app.command()
def list_generators():
    """List available graph generators.

    Example:
        eulerian list-generators
    """
    console.print("[bold]Available Generators:[/bold]")
    console.print("  • random - Ring plus seeded random edges (may leave odd degrees)")
    console.print("  • ring - Single cycle through all vertices")
    console.print("  • complete - All-to-all (Eulerian for odd vertex counts)")
    console.print("  • k-regular - Circulant lattice (requires even k parameter)")


def _resolve_config(config_path: Optional[Path], **overrides) -> Config:
    """Merge the config file, if any, with non-None CLI overrides, then validate."""
    data = load_config_data(config_path) if config_path is not None else {}

    for section, values in overrides.items():
        if data.get(section) is None:
            data[section] = {}
        section_data = data[section]
        if not isinstance(section_data, dict):
            raise ValueError(f"'{section}' section of {config_path} must be a mapping")
        section_data.update({key: value for key, value in values.items() if value is not None})

    return Config(**data)


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def _display_graph(graph: Multigraph, config: Config) -> None:
    """Display graph statistics and vertex degrees in a table."""
    console.print(f"[bold]Graph:[/bold] {config.graph.type} (seed {config.graph.seed})")
    console.print(f"  Vertices: {graph.num_vertices}")
    console.print(f"  Edges: {graph.num_edges}")
    console.print(f"  Average degree: {graph.avg_degree():.2f}")
    console.print(f"  Connected: {graph.is_connected()}")

    table = Table(title="Vertex Degrees")
    table.add_column("Vertex", style="cyan")
    table.add_column("Degree", style="green")
    table.add_column("Neighbors", style="blue")

    for vertex in range(graph.num_vertices):
        degree = graph.degree(vertex)
        table.add_row(
            str(vertex),
            f"[red]{degree}[/red]" if degree % 2 else str(degree),
            ", ".join(str(v) for v in graph.neighbors[vertex]),
        )

    console.print(table)


def main() -> None:
    """Console entry point. Usage errors exit with status 1."""
    try:
        code = app(standalone_mode=False)
    except click.exceptions.UsageError as e:
        e.show()
        sys.exit(1)
    except click.exceptions.Abort:
        err_console.print("Aborted!")
        sys.exit(1)
    sys.exit(code or 0)


if __name__ == "__main__":
    main()

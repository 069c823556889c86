"""CLI entry point for wgraph."""

import json
import math
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console

from wgraph.core.exceptions import WGraphError
from wgraph.core.graph import Graph, load_graph

app = typer.Typer(
    name="wgraph",
    help="Reachability, components and shortest paths on weighted edge-list graphs.",
    no_args_is_help=True,
)
console = Console()

GraphFile = Annotated[
    Path, typer.Argument(help="Edge-list file", exists=True, dir_okay=False, readable=True)
]
Undirected = Annotated[
    bool, typer.Option("--undirected", "-u", help="Insert every edge in both directions")
]
OutputJson = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def get_graph(path: Path, undirected: bool) -> Graph:
    """Load the graph or exit with the error."""
    try:
        return load_graph(path, undirected=undirected)
    except WGraphError as e:
        fail(e)


def fail(error: WGraphError) -> NoReturn:
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(code=1)


def format_distance(d: float) -> str:
    return "inf" if math.isinf(d) else f"{d:g}"


@app.command()
def show(
    path: GraphFile,
    undirected: Undirected = False,
    output_json: OutputJson = False,
) -> None:
    """Print the adjacency lists."""
    graph = get_graph(path, undirected)

    if output_json:
        result = {
            "vertices": graph.num_vertices,
            "edges": [
                {"from": e.source, "to": e.target, "weight": e.weight} for e in graph.edges()
            ],
        }
        print(json.dumps(result))
        return

    for line in graph.to_text().splitlines():
        console.print(line, markup=False, highlight=False)
    console.print(f"[dim]Vertices: {graph.num_vertices} | Edges: {graph.num_edges}[/]")


@app.command()
def check(
    path: GraphFile,
    undirected: Undirected = False,
    output_json: OutputJson = False,
) -> None:
    """Check whether every edge has a reciprocal edge of equal weight."""
    graph = get_graph(path, undirected)
    result = graph.is_undirected()

    if output_json:
        print(json.dumps({"undirected": result}))
    elif result:
        console.print("[green]Undirected[/green]")
    else:
        console.print("[yellow]Directed[/yellow] (some edge has no matching reverse edge)")


@app.command()
def reachable(
    path: GraphFile,
    source: Annotated[int, typer.Argument(help="Start vertex")],
    undirected: Undirected = False,
    output_json: OutputJson = False,
) -> None:
    """List vertices reachable from a source, in BFS order."""
    graph = get_graph(path, undirected)
    try:
        vertices = graph.reachable_from(source)
    except WGraphError as e:
        fail(e)

    if output_json:
        print(json.dumps({"source": source, "reachable": vertices}))
        return

    console.print(f"[bold]Reachable from [cyan]{source}[/cyan][/] ({len(vertices)} vertices)")
    console.print("  " + ", ".join(str(v) for v in vertices))


@app.command()
def components(
    path: GraphFile,
    undirected: Undirected = False,
    output_json: OutputJson = False,
) -> None:
    """Split an undirected graph into connected components."""
    graph = get_graph(path, undirected)
    try:
        result = graph.connected_components()
    except WGraphError as e:
        fail(e)

    if output_json:
        print(json.dumps({"components": result}))
        return

    console.print(f"[bold]{len(result)} component(s)[/]")
    for i, component in enumerate(result):
        members = ", ".join(str(v) for v in component)
        console.print(f"  [cyan]#{i}[/] [dim]({len(component)})[/] {members}")


@app.command()
def paths(
    path: GraphFile,
    sources: Annotated[list[int], typer.Argument(help="Source vertices")],
    target: Annotated[
        int | None, typer.Option("--to", "-t", help="Only show the path to this vertex")
    ] = None,
    undirected: Undirected = False,
    output_json: OutputJson = False,
) -> None:
    """Shortest paths from the nearest source to every vertex."""
    graph = get_graph(path, undirected)
    try:
        result = graph.shortest_paths(sources)
        route = result.path_to(target) if target is not None else None
    except WGraphError as e:
        fail(e)

    source_list = ", ".join(str(s) for s in sources)

    if target is not None:
        if output_json:
            distance = result.dist[target]
            print(
                json.dumps(
                    {
                        "target": target,
                        "distance": None if math.isinf(distance) else distance,
                        "path": route,
                    }
                )
            )
        elif route is None:
            console.print(f"No path to [cyan]{target}[/cyan] from {source_list}")
        else:
            hops = " -> ".join(str(v) for v in route)
            console.print(f"[bold cyan]{target}[/] at {format_distance(result.dist[target])}")
            console.print(f"  {hops}")
        return

    if output_json:
        print(
            json.dumps(
                {
                    "sources": sources,
                    "dist": [None if math.isinf(d) else d for d in result.dist],
                    "parent": result.parent,
                }
            )
        )
        return

    console.print(f"[bold]Shortest paths from {source_list}[/]")
    for v, (d, p) in enumerate(zip(result.dist, result.parent)):
        parent = "-" if p is None else str(p)
        style = "dim" if math.isinf(d) else "cyan"
        console.print(f"  [{style}]{v}[/] dist={format_distance(d)} parent={parent}")


if __name__ == "__main__":
    app()

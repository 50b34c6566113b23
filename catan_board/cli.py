from __future__ import annotations

import json
import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from catan_board.board import BoardState, build_board, restore_board
from catan_board.config import BoardConfig
from catan_board.domain.generator import DESERT_TOKEN, HOT_TOKENS, has_adjacent_hot_tokens

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _make_config(seed: Optional[int], hex_size: float, max_attempts: int) -> BoardConfig:
    try:
        return BoardConfig(hex_size=hex_size, max_token_attempts=max_attempts, seed=seed).validate()
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def tile_table(board: BoardState) -> Table:
    table = Table(title="Tiles")
    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("AXIAL")
    table.add_column("RESOURCE")
    table.add_column("TOKEN", justify="right")
    for tile in board.tiles:
        if tile.token == DESERT_TOKEN:
            token = "-"
        elif tile.token in HOT_TOKENS:
            token = f"[bold red]{tile.token}[/bold red]"
        else:
            token = str(tile.token)
        table.add_row(str(tile.id), f"({tile.q}, {tile.r})", tile.resource.value, token)
    return table


def summary_table(board: BoardState) -> Table:
    graph = board.graph
    table = Table(title="Board Summary")
    table.add_column("METRIC", style="cyan")
    table.add_column("VALUE", justify="right")
    table.add_row("Tiles", str(graph.tile_count()))
    table.add_row("Vertices", str(len(graph.vertices)))
    table.add_row("Edges", str(len(graph.edges)))
    table.add_row("Coastal edges", str(len(board.coast)))
    table.add_row("Ports", str(len(board.ports)))
    table.add_row("Token attempts", str(board.layout.attempts))
    table.add_row("Fallback used", "yes" if board.layout.used_fallback else "no")
    table.add_row(
        "Adjacent 6/8",
        "yes" if has_adjacent_hot_tokens(board.layout, graph.tile_neighbors()) else "no",
    )
    return table


def coast_table(board: BoardState) -> Table:
    ports_by_index = {port.coast_index: port for port in board.ports}
    table = Table(title="Coastline")
    table.add_column("INDEX", justify="right", style="cyan", no_wrap=True)
    table.add_column("TILE", justify="right")
    table.add_column("SIDE", justify="right")
    table.add_column("ANGLE", justify="right")
    table.add_column("PORT")
    for edge in board.coast.edges:
        port = ports_by_index.get(edge.index)
        table.add_row(
            str(edge.index),
            str(edge.tile_id),
            str(edge.side),
            f"{edge.angle:.3f}",
            port.port_type.value if port is not None else "",
        )
    return table


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log board construction details.")
def main(verbose: bool) -> None:
    """Generate and inspect hex boards."""
    _configure_logging(verbose)


@main.command()
@click.option("--seed", default=None, type=int, help="Seed for the layout shuffle. Default: random.")
@click.option(
    "--hex-size",
    default=BoardConfig.hex_size,
    show_default=True,
    type=float,
    help="Hex radius in pixels.",
)
@click.option(
    "--max-attempts",
    default=BoardConfig.max_token_attempts,
    show_default=True,
    type=click.IntRange(0, None),
    help="Token shuffles tried before falling back to adjacency ranking.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the saved-layout JSON instead of tables.")
def generate(seed: Optional[int], hex_size: float, max_attempts: int, as_json: bool) -> None:
    """Generate a randomized board."""
    config = _make_config(seed, hex_size, max_attempts)
    board = build_board(config)
    if as_json:
        click.echo(json.dumps(board.to_dict(), indent=2))
        return

    console = Console()
    console.print(tile_table(board))
    console.print(summary_table(board))


@main.command()
@click.option("--seed", default=None, type=int, help="Seed for the layout shuffle. Default: random.")
@click.option("--hex-size", default=BoardConfig.hex_size, show_default=True, type=float, help="Hex radius in pixels.")
def coast(seed: Optional[int], hex_size: float) -> None:
    """List coastal edges in perimeter order with their port markers."""
    board = build_board(_make_config(seed, hex_size, BoardConfig.max_token_attempts))
    Console().print(coast_table(board))


@main.command()
@click.argument("layout_file", type=click.File("r"))
def show(layout_file) -> None:
    """Rebuild a board from JSON written by `generate --json`."""
    try:
        payload = json.load(layout_file)
        board = restore_board(payload)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="LAYOUT_FILE") from exc
    logger.debug("Restored board with %d tiles", len(board.tiles))

    console = Console()
    console.print(tile_table(board))
    console.print(summary_table(board))


if __name__ == "__main__":
    main()

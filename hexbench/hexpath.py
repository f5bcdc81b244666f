"""Find minimum and maximum cost paths through a grid of hexadecimal cells."""

from __future__ import annotations

import argparse
import heapq
import os
import random
import re
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

_HEX_BYTE = re.compile(r"\+?[0-9a-fA-F]+")
_DECIMAL = re.compile(r"\+?[0-9]+")

_RESET = "\x1b[0m"
_MIN_HIGHLIGHT = "\x1b[47m\x1b[30m"
_MAX_HIGHLIGHT = "\x1b[41m\x1b[37m"
_COLORS = (
    "\x1b[38;5;196m",
    "\x1b[38;5;208m",
    "\x1b[38;5;226m",
    "\x1b[38;5;46m",
    "\x1b[38;5;51m",
    "\x1b[38;5;21m",
    "\x1b[38;5;129m",
    "\x1b[38;5;201m",
)

_LONG_ABOUT = (
    "Find min/max cost paths in hexadecimal grid\n\n"
    "Map format:\n"
    "  - Each cell: 00-FF (hexadecimal)\n"
    "  - Start: top-left (must be 00)\n"
    "  - End: bottom-right (must be FF)\n"
    "  - Moves: up, down, left, right"
)

Cell = tuple[int, int]


class MapError(Exception):
    """Raised when a map cannot be read, parsed, written or sized."""


@dataclass
class Grid:
    """A rectangular grid of byte values, indexed as ``cells[y][x]``."""

    cells: list[list[int]]

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def goal(self) -> Cell:
        return (self.width - 1, self.height - 1)

    def get(self, x: int, y: int) -> int:
        """Return the value at column ``x``, row ``y``."""
        return self.cells[y][x]

    def neighbors(self, x: int, y: int) -> list[Cell]:
        """Return the cells reachable in one move: left, right, up, down."""
        result = []
        if x > 0:
            result.append((x - 1, y))
        if x < self.width - 1:
            result.append((x + 1, y))
        if y > 0:
            result.append((x, y - 1))
        if y < self.height - 1:
            result.append((x, y + 1))
        return result

    def to_text(self) -> str:
        """Render the grid in map-file format, one row per line."""
        return "".join(
            " ".join(f"{value:02X}" for value in row) + "\n" for row in self.cells
        )


@dataclass
class PathResult:
    """A path from the start to the goal and its total cost."""

    path: list[Cell]
    total_cost: int


def generate_map(width: int, height: int, rng: random.Random | None = None) -> Grid:
    """Create a random grid with 00 at the start and FF at the goal."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    rng = rng if rng is not None else random.Random()
    cells = [[0] * width for _ in range(height)]
    cells[0][0] = 0x00
    cells[height - 1][width - 1] = 0xFF
    goal = (width - 1, height - 1)
    for y, row in enumerate(cells):
        for x in range(width):
            if (x, y) in ((0, 0), goal):
                continue
            row[x] = rng.randint(0x01, 0xFE)
    return Grid(cells)


def _parse_cell(token: str) -> int:
    if not _HEX_BYTE.fullmatch(token):
        raise MapError("Invalid hex value: invalid digit found in string")
    value = int(token, 16)
    if value > 0xFF:
        raise MapError("Invalid hex value: number too large to fit in target type")
    return value


def parse_map_text(text: str) -> Grid:
    """Parse map text: rows of whitespace-separated hex bytes, blank lines ignored."""
    cells = [
        [_parse_cell(token) for token in line.split()]
        for line in text.splitlines()
        if line.strip()
    ]
    if not cells:
        raise MapError("Empty map")
    width = len(cells[0])
    if any(len(row) != width for row in cells):
        raise MapError("Inconsistent row lengths")
    return Grid(cells)


def parse_map(path: str | os.PathLike) -> Grid:
    """Read and parse a map file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise MapError(f"Failed to read file: {err}") from None
    return parse_map_text(text)


def save_map(grid: Grid, path: str | os.PathLike) -> None:
    """Write ``grid`` to ``path`` in map-file format."""
    try:
        handle = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as err:
        raise MapError(f"Failed to create file: {err}") from None
    with handle:
        try:
            handle.write(grid.to_text())
        except OSError as err:
            raise MapError(f"Failed to write: {err}") from None


def _parse_dimension(text: str, what: str) -> int:
    if not _DECIMAL.fullmatch(text) or int(text) >= 2**64:
        raise MapError(f"Invalid {what}")
    return int(text)


def parse_size(spec: str) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` specification."""
    parts = spec.split("x")
    if len(parts) != 2:
        raise MapError("Invalid format. Use WIDTHxHEIGHT (e.g., 12x8)")
    return _parse_dimension(parts[0], "width"), _parse_dimension(parts[1], "height")


def _reconstruct_path(grid: Grid, parent: dict[Cell, Cell], cost: int) -> PathResult:
    path = [grid.goal]
    current = grid.goal
    while current != (0, 0) and current in parent:
        current = parent[current]
        path.append(current)
    path.reverse()
    return PathResult(path, cost)


def dijkstra_min(grid: Grid) -> PathResult | None:
    """Find the cheapest path from the top-left to the bottom-right cell.

    The start cell's value is not counted; every cell entered is.
    """
    dist: dict[Cell, int] = {(0, 0): 0}
    parent: dict[Cell, Cell] = {}
    heap = [(0, 0, 0)]
    while heap:
        cost, x, y = heapq.heappop(heap)
        if (x, y) == grid.goal:
            return _reconstruct_path(grid, parent, dist[grid.goal])
        if cost > dist.get((x, y), float("inf")):
            continue
        for nx, ny in grid.neighbors(x, y):
            new_cost = cost + grid.get(nx, ny)
            if new_cost < dist.get((nx, ny), float("inf")):
                dist[(nx, ny)] = new_cost
                parent[(nx, ny)] = (x, y)
                heapq.heappush(heap, (new_cost, nx, ny))
    return None


def dijkstra_max(grid: Grid) -> PathResult | None:
    """Greedily search for an expensive path, always expanding the costliest cell first."""
    dist: dict[Cell, int] = {}
    parent: dict[Cell, Cell] = {}
    visited: set[Cell] = set()
    heap = [(0, 0, 0)]  # negated (cost, x, y) so the largest pops first
    while heap:
        neg_cost, neg_x, neg_y = heapq.heappop(heap)
        cost, x, y = -neg_cost, -neg_x, -neg_y
        if (x, y) in visited:
            continue
        visited.add((x, y))
        if (x, y) == grid.goal:
            return _reconstruct_path(grid, parent, dist.get(grid.goal, 0))
        for nx, ny in grid.neighbors(x, y):
            if (nx, ny) in visited:
                continue
            new_cost = cost + grid.get(nx, ny)
            if new_cost > dist.get((nx, ny), 0):
                dist[(nx, ny)] = new_cost
                parent[(nx, ny)] = (x, y)
                heapq.heappush(heap, (-new_cost, -nx, -ny))
    return None


def color_for(value: int) -> str:
    """Return the terminal colour escape for a cell value."""
    return _COLORS[(value & 0xFF) >> 5]


def _colored(value: int) -> str:
    return f"{color_for(value)}{value:02X}{_RESET} "


def _grid_rows(grid: Grid, highlight: set[Cell], style: str) -> list[str]:
    return [
        "".join(
            f"{style}{value:02X}{_RESET} " if (x, y) in highlight else _colored(value)
            for x, value in enumerate(row)
        )
        for y, row in enumerate(grid.cells)
    ]


def visualize_grid(grid: Grid, min_path: PathResult | None = None,
                   max_path: PathResult | None = None) -> list[str]:
    """Return coloured renderings of the grid and of each path given."""
    lines = [
        "",
        "HEXADECIMAL GRID (rainbow gradient):",
        "═══════════════════════════════════════════════════════════════════════════════",
    ]
    lines.extend(_grid_rows(grid, set(), ""))
    sections = (
        (min_path, "MINIMUM COST PATH (shown in WHITE):", _MIN_HIGHLIGHT, "minimum"),
        (max_path, "MAXIMUM COST PATH (shown in RED):", _MAX_HIGHLIGHT, "maximum"),
    )
    for result, title, style, kind in sections:
        if result is None:
            continue
        lines.extend(["", title, "═" * len(title)])
        lines.extend(_grid_rows(grid, set(result.path), style))
        lines.extend(["", f"Cost: {result.total_cost} ({kind})"])
    return lines


def path_analysis(grid: Grid, result: PathResult, label: str) -> list[str]:
    """Return a textual report of a path and its step-by-step costs."""
    cost = result.total_cost
    lines = [
        "",
        f"{label} COST PATH:",
        "==================",
        f"Total cost: 0x{cost:X} ({cost} decimal)",
        f"Path length: {len(result.path)} steps",
        "Path: " + "→".join(f"({x},{y})" for x, y in result.path),
        "",
        "Step-by-step costs:",
    ]
    for index, (x, y) in enumerate(result.path):
        value = grid.get(x, y)
        if index == 0:
            lines.append(f"  Start  0x{value:02X} ({x},{y})")
        else:
            lines.append(f"    →    0x{value:02X} ({x},{y})  +{value}")
    lines.append(f"  Total: 0x{cost:X} ({cost})")
    return lines


def animate_pathfinding(grid: Grid, delay: float = 0.2) -> Iterator[str]:
    """Yield text frames of a minimum-cost search, pausing ``delay`` seconds per step."""
    yield "Searching for minimum cost path...\n"
    dist: dict[Cell, int] = {(0, 0): 0}
    visited: set[Cell] = set()
    heap = [(0, 0, 0)]
    step = 0
    while heap:
        cost, x, y = heapq.heappop(heap)
        if (x, y) in visited:
            continue
        visited.add((x, y))
        step += 1
        rows = [
            "".join(
                "[✓]" if (col, row) in visited
                else "[*]" if (col, row) == (x, y)
                else "[ ]"
                for col in range(grid.width)
            )
            for row in range(grid.height)
        ]
        yield f"Step {step}: Exploring ({x},{y}) - cost: {cost}\n" + "\n".join(rows) + "\n"
        if delay > 0:
            time.sleep(delay)
        if (x, y) == grid.goal:
            yield "✓ Reached destination!"
            return
        for nx, ny in grid.neighbors(x, y):
            if (nx, ny) in visited:
                continue
            new_cost = cost + grid.get(nx, ny)
            if new_cost < dist.get((nx, ny), float("inf")):
                dist[(nx, ny)] = new_cost
                heapq.heappush(heap, (new_cost, nx, ny))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexpath",
        description=_LONG_ABOUT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("map", nargs="?", type=Path, metavar="map",
                        help="Map file (hex values, space separated)")
    parser.add_argument("--generate", metavar="widthxheight",
                        help="Generate random map (e.g., 8x4, 10x10)")
    parser.add_argument("--output", metavar="file", type=Path,
                        help="Save generated map to file")
    parser.add_argument("--visualize", action="store_true", help="Show colored map")
    parser.add_argument("--both", action="store_true", help="Show both min and max paths")
    parser.add_argument("--animate", action="store_true", help="Animate pathfinding")
    return parser


def _run_generate(spec: str, output: Path | None) -> int:
    try:
        width, height = parse_size(spec)
    except MapError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    print(f"Generating {width}x{height} hexadecimal grid...")
    try:
        grid = generate_map(width, height)
    except ValueError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    if output is not None:
        try:
            save_map(grid, output)
        except MapError as err:
            print(f"Error: {err}", file=sys.stderr)
            return 1
        print(f"Map saved to: {output}")
    print("\nGenerated map:")
    print(grid.to_text(), end="")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _build_parser().parse_args(argv)

    if args.generate is not None:
        return _run_generate(args.generate, args.output)

    if args.map is None:
        print("Error: Map file required (or use --generate)", file=sys.stderr)
        return 1
    try:
        grid = parse_map(args.map)
    except MapError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    if args.animate:
        for frame in animate_pathfinding(grid):
            print(frame)
        return 0

    min_result = dijkstra_min(grid)
    max_result = dijkstra_max(grid)

    if args.visualize:
        lines = visualize_grid(grid, min_result, max_result)
    else:
        width, height = grid.width, grid.height
        lines = [
            "Analyzing hexadecimal grid...",
            f"Grid size: {width}×{height}",
            f"Start: (0,0) = 0x{grid.get(0, 0):02X}",
            f"End: ({width - 1},{height - 1}) = 0x{grid.get(width - 1, height - 1):02X}",
        ]
        if min_result is not None:
            lines.extend(path_analysis(grid, min_result, "MINIMUM"))
        if max_result is not None:
            lines.extend(path_analysis(grid, max_result, "MAXIMUM"))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Conway's Game of Life on a wrapping square grid."""

from __future__ import annotations

from arcadekit.engine import Canvas, Inputs, Rng


def count_alive_neighbours(grid: list[list[bool]], x: int, y: int) -> int:
    """Count live cells around (x, y), wrapping at the edges of a square grid."""
    size = len(grid)
    return sum(
        grid[(y + dy) % size][(x + dx) % size]
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx, dy) != (0, 0)
    )


class Life:
    """The simulation state and its per-frame behaviour."""

    def __init__(self, size: int = 256, cell_size: int = 8, rng: Rng | None = None) -> None:
        if cell_size <= 0 or size < cell_size:
            raise ValueError("cell_size must be positive and no larger than size")
        self.cell_size = cell_size
        grid_size = size // cell_size
        self.grid = [[False] * grid_size for _ in range(grid_size)]
        self.rng = rng or Rng()

    def randomize(self) -> None:
        self.grid = [[self.rng.next() % 2 == 0 for _ in row] for row in self.grid]

    def step(self) -> None:
        def alive_next(x: int, y: int, alive: bool) -> bool:
            neighbours = count_alive_neighbours(self.grid, x, y)
            return neighbours in (2, 3) if alive else neighbours == 3

        self.grid = [
            [alive_next(x, y, cell) for x, cell in enumerate(row)]
            for y, row in enumerate(self.grid)
        ]

    def draw(self, canvas: Canvas) -> None:
        canvas.clear(0x000000FF)
        size = self.cell_size
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell:
                    canvas.rect(x=x * size, y=y * size, w=size, h=size, color=0xFFFFFFFF)

    def update(self, inputs: Inputs, canvas: Canvas) -> None:
        pad = inputs.gamepad(0)
        if pad.start.just_pressed() or pad.select.just_pressed() or inputs.mouse.left.just_pressed():
            self.randomize()
        self.step()
        self.draw(canvas)
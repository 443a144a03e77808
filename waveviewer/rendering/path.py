"""Append-only drawable path made of move, line and quadratic curve commands."""

from __future__ import annotations

from dataclasses import dataclass, field

MOVE_TO = "M"
LINE_TO = "L"
QUAD_TO = "Q"


@dataclass
class WaveformPath:
    commands: list[tuple] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        self.commands.append((MOVE_TO, float(x), float(y)))

    def line_to(self, x: float, y: float) -> None:
        self.commands.append((LINE_TO, float(x), float(y)))

    def quad_to(self, control_x: float, control_y: float, x: float, y: float) -> None:
        self.commands.append((QUAD_TO, float(control_x), float(control_y), float(x), float(y)))

    def add_path(self, other: "WaveformPath") -> None:
        self.commands.extend(other.commands)

    def is_empty(self) -> bool:
        return not self.commands

    def __len__(self) -> int:
        return len(self.commands)

    def flatten(self, curve_steps: int = 4) -> list[list[float]]:
        """Return polylines as flat ``[x0, y0, x1, y1, ...]`` lists.

        Every ``move_to`` starts a new polyline. Quadratic segments are
        sampled ``curve_steps`` times.
        """
        steps = max(1, int(curve_steps))
        polylines: list[list[float]] = []
        current: list[float] = []
        last_x = last_y = 0.0
        for command in self.commands:
            kind = command[0]
            if kind == MOVE_TO:
                if len(current) >= 4:
                    polylines.append(current)
                last_x, last_y = command[1], command[2]
                current = [last_x, last_y]
            elif kind == LINE_TO:
                if not current:
                    current = [last_x, last_y]
                last_x, last_y = command[1], command[2]
                current.extend((last_x, last_y))
            elif kind == QUAD_TO:
                if not current:
                    current = [last_x, last_y]
                _, cx, cy, x, y = command
                for step in range(1, steps + 1):
                    t = step / steps
                    inv = 1.0 - t
                    current.append(inv * inv * last_x + 2.0 * inv * t * cx + t * t * x)
                    current.append(inv * inv * last_y + 2.0 * inv * t * cy + t * t * y)
                last_x, last_y = x, y
        if len(current) >= 4:
            polylines.append(current)
        return polylines

"""Uniform random integer between two bounds."""
from __future__ import annotations

import math
import random

from src.core.protocol import RandomNumberArgs, ToolResult
from src.utils.tracing import traceable


def _render(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def draw(x: float, y: float) -> float:
    """``floor(random() * (y - x + 1)) + x``; lands in [x, y] for integer x <= y."""
    return math.floor(random.random() * (y - x + 1)) + x


@traceable(name="getrandomnumber")
def get_random_number(args: RandomNumberArgs) -> ToolResult:
    if args.x > args.y:
        return ToolResult.error(
            f"Error: x ({_render(args.x)}) must be less than or equal to y ({_render(args.y)})."
        )
    return ToolResult.from_text(_render(draw(args.x, args.y)))

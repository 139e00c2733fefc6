"""Helpers for writing solver outputs to disk."""

from __future__ import annotations

import os
from typing import Optional, Sequence

from config import CFG
from models import Triangle
from render import NO_SOLUTION, render_solution


def _resolve_output_path(base_dir: str, configured_name: str) -> Optional[str]:
    """Return the absolute path for an output artifact, or ``None`` when disabled."""

    name = (configured_name or "").strip()
    if not name:
        return None
    if os.path.isabs(name):
        return name
    return os.path.join(base_dir, name)


def write_coords(triangles: Sequence[Triangle], base_dir: str) -> Optional[str]:
    """Write the solution block to the configured text file, if any."""

    path = _resolve_output_path(base_dir, CFG.COORDS_OUT)
    if path is None:
        return None
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        if not triangles:
            f.write(NO_SOLUTION + "\n")
        else:
            f.write(render_solution(triangles))
    return path


__all__ = ["write_coords"]

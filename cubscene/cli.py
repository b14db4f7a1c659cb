"""Command-line entry point that validates a scene file."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from cubscene.colors import check_colors
from cubscene.mapcheck import check_map
from cubscene.scene import ParseError, SceneData, read_scene
from cubscene.textures import check_textures, has_extension, is_readable


def parse_check(path: str, data: SceneData | None = None) -> SceneData:
    """Read and fully validate the scene at ``path``, raising ParseError on failure."""
    if data is None:
        data = SceneData()
    if not has_extension(os.fspath(path), ".cub"):
        raise ParseError(f"scene file must end in .cub: {path}")
    if not is_readable(path):
        raise ParseError(f"cannot read scene file: {path}")
    read_scene(path, data)
    check_map(data)
    check_textures(data)
    check_colors(data)
    return data


def _show(value: str | None) -> str:
    return "(null)" if value is None else value


def format_summary(data: SceneData) -> str:
    """Render the parsed scene as a human-readable report."""
    if not data.map:
        return "Map is empty or not initialized.\n"
    lines = ["Parsed Map:"]
    lines.extend(
        f'[{index}]: "{row}" (length: {len(row)})' for index, row in enumerate(data.map)
    )
    r_c, g_c, b_c = data.ceiling_rgb
    r_f, g_f, b_f = data.floor_rgb
    lines.extend(
        [
            f"Map Height: {data.map_height}, Map Width: {data.map_width}",
            "-----------------------------------------",
            f"we---> {_show(data.we)}",
            f"no--> {_show(data.no)}",
            f"ea---> {_show(data.ea)}",
            f"so -->{_show(data.so)}",
            f"F--> {_show(data.floor)}",
            f"C --> {_show(data.ceiling)}",
            f"player_dir---> {data.player_dir}",
            f"r_c---> {r_c}",
            f"g_c--> {g_c}",
            f"b_c---> {b_c}",
            f"r_f---> {r_f}",
            f"g_f--> {g_f}",
            f"b_f->> {b_f}",
            f"map_height --> {data.map_height}",
            f"map_width--> {data.map_width}",
        ]
    )
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the single scene file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error: Wrong argument count")
        return 3
    try:
        data = parse_check(args[0])
    except ParseError as exc:
        print(f"Error: {exc}")
        print("error ❌")
        return 2
    sys.stdout.write(format_summary(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())
# dot_writer.py
import os

from geometry import IncidenceResult

DEFAULT_GRAPH_NAME = "K"

# 직선 색은 이 13개를 순서대로 돌려가며 씀
COLOR_PALETTE = [
    "red", "blue", "green", "orange", "gray", "purple", "cyan",
    "brown", "chocolate4", "crimson", "goldenrod", "indigo", "navyblue",
]


def get_color(i):
    return COLOR_PALETTE[i % len(COLOR_PALETTE)]


def render_dot(result: IncidenceResult, graph_name: str = DEFAULT_GRAPH_NAME, colored: bool = True) -> str:
    """
    Render the plane as a dot graph: one vertex per point id, then one
    "a -- b -- c" path per line in emission order.
    """
    out = [f"Graph {graph_name} {{"]
    for point_id in result.point_ids:
        out.append(f"\t{point_id}")
    out.append("")

    for idx, point_ids in enumerate(result.lines):
        path = " -- ".join(str(pid) for pid in point_ids)
        if colored:
            path += f" [color = {get_color(idx)}]"
        out.append(f"\t{path}")
    out.append("}")
    return "\n".join(out) + "\n"


def write_dot(result: IncidenceResult, filename: str, graph_name: str = DEFAULT_GRAPH_NAME, colored: bool = True) -> str:
    directory = os.path.dirname(os.path.abspath(filename))
    if not os.path.exists(directory):
        os.makedirs(directory)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(render_dot(result, graph_name=graph_name, colored=colored))
    return filename

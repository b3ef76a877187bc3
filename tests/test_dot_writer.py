"""
Tests for dot graph rendering.
"""

from dot_writer import COLOR_PALETTE, get_color, render_dot, write_dot
from geometry import build_projective_plane

FANO_DOT = """Graph K {
\t0
\t1
\t2
\t3
\t4
\t5
\t6

\t0 -- 1 -- 2 [color = red]
\t0 -- 3 -- 5 [color = blue]
\t0 -- 4 -- 6 [color = green]
\t1 -- 3 -- 4 [color = orange]
\t1 -- 5 -- 6 [color = gray]
\t2 -- 3 -- 6 [color = purple]
\t2 -- 4 -- 5 [color = cyan]
}
"""


class TestPalette:

    def test_thirteen_colors(self):
        assert len(COLOR_PALETTE) == 13
        assert COLOR_PALETTE[0] == "red"
        assert COLOR_PALETTE[-1] == "navyblue"

    def test_cycles(self):
        assert get_color(0) == "red"
        assert get_color(8) == "chocolate4"
        assert get_color(13) == "red"
        assert get_color(27) == "green"


class TestRenderDot:

    def test_fano(self):
        assert render_dot(build_projective_plane(2)) == FANO_DOT

    def test_without_color(self):
        text = render_dot(build_projective_plane(2), colored=False)
        assert "\t0 -- 1 -- 2\n" in text
        assert "color" not in text

    def test_graph_name(self):
        assert render_dot(build_projective_plane(2), graph_name="Fano").startswith("Graph Fano {\n")

    def test_palette_wraps_for_order_three(self):
        lines = render_dot(build_projective_plane(3)).splitlines()
        paths = [line for line in lines if "--" in line]
        assert len(paths) == 13
        assert paths[0].startswith("\t0 -- 1 -- 2 -- 3 ")
        assert paths[12].endswith("[color = navyblue]")


def test_write_dot(tmp_path):
    target = tmp_path / "out" / "fano.dot"
    written = write_dot(build_projective_plane(2), str(target))
    assert written == str(target)
    assert target.read_text(encoding="utf-8") == FANO_DOT

import io

import pytest

from mtxgraph import read_mtx, FormatError, WeightedEdge
from mtxgraph.formats.read_mtx import parse_mtx

KARATE_HEAD = """%%MatrixMarket matrix coordinate pattern symmetric
% sample
3 3 3
1 2
2 3
3 1"""


def test_read_symmetric_file(tmp_path):
    path = tmp_path / "test.mtx"
    path.write_text(KARATE_HEAD)

    graph = read_mtx(path)

    assert graph.node_count == 3
    assert graph.edge_count == 3
    assert 1 in graph.neighbors(0)


def test_read_from_string_path(tmp_path):
    path = tmp_path / "test.mtx"
    path.write_text(KARATE_HEAD)

    assert read_mtx(str(path)).edge_count == 3


def test_read_from_lines():
    graph = read_mtx(io.StringIO(KARATE_HEAD))

    assert graph.adjacency_list == {0: [1, 2], 1: [0, 2], 2: [1, 0]}


def test_parse_returns_zero_based_pairs():
    node_count, edges = parse_mtx(KARATE_HEAD.splitlines())

    assert node_count == 3
    assert edges == [(0, 1), (1, 2), (2, 0)]


def test_file_without_banner_and_blank_lines():
    graph = read_mtx(["% only a comment", "", "4 4 2", "1 2", "", "3 4"])

    assert graph.node_count == 4
    assert graph.edge_count == 2


def test_duplicate_entries_are_merged():
    graph = read_mtx(["3 3 3", "1 2", "2 1", "1 2"])

    assert graph.edge_count == 1


def test_real_field_produces_weighted_edges():
    lines = ["%%MatrixMarket matrix coordinate real general", "2 2 1", "1 2 0.75"]

    graph = read_mtx(lines)

    edge = graph.edges[0]
    assert isinstance(edge, WeightedEdge)
    assert edge.weight == 0.75


def test_pattern_field_ignores_extra_columns():
    graph = read_mtx(["%%MatrixMarket matrix coordinate pattern general", "2 2 1", "1 2 9"])

    assert not graph.edges[0].is_weighted


def test_nonzero_mismatch_is_only_a_warning(caplog):
    with caplog.at_level("WARNING", logger="mtxgraph.formats.read_mtx"):
        graph = read_mtx(["3 3 5", "1 2"])

    assert graph.edge_count == 1
    assert "declares 5 entries" in caplog.text


@pytest.mark.parametrize("lines,line_number", [
    (["%%MatrixMarket matrix array real general", "2 2"], 1),
    (["%%MatrixMarket matrix coordinate complex general", "2 2 1"], 1),
    (["%%MatrixMarket vector"], 1),
    (["3 3"], 1),
    (["x 3 3"], 1),
    (["-1 3 0"], 1),
    (["3 3 1", "1"], 2),
    (["3 3 1", "1 b"], 2),
    (["3 3 1", "1 4"], 2),
    (["3 3 1", "0 1"], 2),
    (["%%MatrixMarket matrix coordinate real general", "2 2 1", "1 2 heavy"], 3),
])
def test_malformed_input_raises_format_error(lines, line_number):
    with pytest.raises(FormatError) as excinfo:
        read_mtx(lines)

    assert excinfo.value.line_number == line_number
    assert f"line {line_number}" in str(excinfo.value)


def test_missing_size_line():
    with pytest.raises(FormatError) as excinfo:
        read_mtx(["%%MatrixMarket matrix coordinate pattern symmetric", "% nothing else"])

    assert excinfo.value.line_number is None


def test_empty_graph_file():
    graph = read_mtx(["0 0 0"])

    assert graph.node_count == 0


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        read_mtx(tmp_path / "missing.mtx")


def test_invalid_utf8_raises_format_error(tmp_path):
    path = tmp_path / "binary.mtx"
    path.write_bytes(b"%%MatrixMarket matrix coordinate pattern symmetric\n3 3 1\n1 2 \xff\n")

    with pytest.raises(FormatError) as excinfo:
        read_mtx(path)

    assert "UTF-8" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_byte_order_mark_before_banner(tmp_path):
    path = tmp_path / "bom.mtx"
    path.write_bytes(b"\xef\xbb\xbf" + KARATE_HEAD.encode("utf-8"))

    graph = read_mtx(path)

    assert graph.node_count == 3
    assert graph.edge_count == 3


def test_byte_order_mark_in_lines():
    graph = read_mtx(["\ufeff%%MatrixMarket matrix coordinate real general", "2 2 1", "1 2 3"])

    assert graph.edges[0].weight == 3.0


def test_banner_after_blank_lines_is_honoured():
    lines = ["", "   ", "%%MatrixMarket matrix coordinate real general", "2 2 1", "1 2 0.5"]

    graph = read_mtx(lines)

    assert graph.edges[0].is_weighted


def test_array_banner_after_blank_line_is_rejected():
    with pytest.raises(FormatError) as excinfo:
        read_mtx(["", "%%MatrixMarket matrix array real general", "2 2"])

    assert excinfo.value.line_number == 2


def test_banner_after_comment_is_a_plain_comment():
    graph = read_mtx(["% header", "%%MatrixMarket matrix coordinate real general", "2 2 1", "1 2"])

    assert not graph.edges[0].is_weighted


@pytest.mark.parametrize("field", ["real", "integer"])
def test_weighted_field_requires_value_column(field):
    lines = [f"%%MatrixMarket matrix coordinate {field} symmetric", "3 3 2", "1 2 4", "2 3"]

    with pytest.raises(FormatError) as excinfo:
        read_mtx(lines)

    assert excinfo.value.line_number == 4

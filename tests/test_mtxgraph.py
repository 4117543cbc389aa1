import io

from mtxgraph import pymtxgraph, GraphStore
from mtxgraph.classes.utils import format_adjacency_matrix, format_adjacency_list, format_path


def test_facade_scenario():
    graph = pymtxgraph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)

    assert graph.node_count == 4
    assert len(graph.edges) == 3
    assert graph.breadth_first(0) == [0, 1, 2, 3]
    assert graph.depth_first(0) == [0, 1, 3, 2]
    assert graph.is_connected()
    assert not graph.is_directed()
    assert not graph.contains_cycle()
    assert not graph.has_weighted_edges()
    assert graph.connected_components() == [[0, 1, 2, 3]]


def test_facade_wraps_existing_store(triangle):
    graph = pymtxgraph(graph=triangle)

    assert graph.graph is triangle
    assert graph.contains_cycle()
    assert graph.analyze().edge_count == 3


def test_facade_from_mtx():
    source = io.StringIO("%%MatrixMarket matrix coordinate pattern symmetric\n3 3 2\n1 2\n2 3\n")
    graph = pymtxgraph.from_mtx(source)

    assert graph.adjacency_list == {0: [1], 1: [0, 2], 2: [1]}
    assert graph.adjacency_matrix.sum() == 4
    assert "Connectivity: connected" in graph.describe()


def test_facade_export(tmp_path, path3):
    target = pymtxgraph(graph=path3).export_to_png(tmp_path / "out.png", seed=3)

    assert target.endswith("out.png")


def test_format_adjacency_matrix(path3):
    assert format_adjacency_matrix(path3) == "0 1 0\n1 0 1\n0 1 0"
    assert format_adjacency_matrix(GraphStore.create(0)) == ""


def test_format_adjacency_list(path3):
    assert format_adjacency_list(path3) == "Node 0 : 1\nNode 1 : 0, 2\nNode 2 : 1"
    assert pymtxgraph(2).format_adjacency_list() == "Node 0 : \nNode 1 : "


def test_format_path():
    assert format_path([0, 1, 3, 2]) == "0 -> 1 -> 3 -> 2"
    assert format_path([]) == ""

from mtxgraph import GraphBuilder, WeightedEdge


def test_from_edges_builds_store():
    graph = GraphBuilder.from_edges(3, [(0, 1), (1, 2)])

    assert graph.node_count == 3
    assert graph.edge_count == 2
    assert graph.neighbors(1) == (0, 2)


def test_duplicates_are_counted_not_inserted():
    builder = GraphBuilder(3).add_edges([(0, 1), (1, 0), (0, 1), (2, 1)])

    assert builder.duplicate_count == 2
    assert builder.build().edge_count == 2


def test_weight_column_creates_weighted_edges():
    graph = GraphBuilder.from_edges(2, [(0, 1, 4.0)])

    assert isinstance(graph.edges[0], WeightedEdge)
    assert graph.edges[0].weight == 4.0

import pytest

from mtxgraph import GraphStore


@pytest.fixture
def sample_graph():
    """4 nodes with edges (0,1), (0,2), (1,3)."""
    graph = GraphStore.create(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    return graph


@pytest.fixture
def triangle():
    graph = GraphStore.create(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 0)
    return graph


@pytest.fixture
def path3():
    graph = GraphStore.create(3)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    return graph


class AsymmetricStore(GraphStore):
    """Store whose matrix can be made asymmetric, as a directed producer would leave it."""

    def drop_arc(self, node_a, node_b):
        self._adjacency_matrix[node_a, node_b] = False


@pytest.fixture
def asymmetric_store():
    return AsymmetricStore

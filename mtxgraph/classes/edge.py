"""
Edge representations for mtxgraph.

Two variants share the same interface: a plain ``Edge`` and a
``WeightedEdge`` carrying a numeric weight. Callers ask ``is_weighted``
instead of inspecting the concrete type.
"""

from typing import Tuple


class Edge:
    """Unordered connection between two node ids."""

    __slots__ = ('_node_a', '_node_b')

    def __init__(self, node_a: int, node_b: int):
        self._node_a = node_a
        self._node_b = node_b

    @property
    def node_a(self) -> int:
        return self._node_a

    @property
    def node_b(self) -> int:
        return self._node_b

    @property
    def endpoints(self) -> Tuple[int, int]:
        return (self._node_a, self._node_b)

    @property
    def is_weighted(self) -> bool:
        return False

    @property
    def weight(self):
        return None

    def connects(self, node_a: int, node_b: int) -> bool:
        """Check whether this edge joins the given pair, in either order."""
        return {self._node_a, self._node_b} == {node_a, node_b}

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.is_weighted == other.is_weighted
                and self.weight == other.weight
                and self.connects(other.node_a, other.node_b))

    def __hash__(self):
        return hash((frozenset(self.endpoints), self.weight))

    def __repr__(self) -> str:
        return f"Edge({self._node_a}, {self._node_b})"


class WeightedEdge(Edge):
    """Edge variant carrying a numeric weight."""

    __slots__ = ('_weight',)

    def __init__(self, node_a: int, node_b: int, weight: float):
        super().__init__(node_a, node_b)
        self._weight = float(weight)

    @property
    def is_weighted(self) -> bool:
        return True

    @property
    def weight(self) -> float:
        return self._weight

    def __repr__(self) -> str:
        return f"WeightedEdge({self._node_a}, {self._node_b}, weight={self._weight})"

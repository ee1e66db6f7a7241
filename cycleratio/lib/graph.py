from __future__ import annotations

from typing import Any, Dict, Hashable, Tuple

import networkx as nx

NodeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID]


class MissingAttributeError(KeyError):
    """Raised when an edge, or a required attribute on it, is absent."""


class StrictDiGraph(nx.DiGraph):
    """
    Directed graph used by the cycle ratio solvers.

    Unlike a plain networkx.DiGraph it refuses to guess:
      - add_edge() requires both endpoints to exist already.
      - A node can be added once and an edge once per direction.
      - Removing something that is not there raises ValueError.
      - get_attr() raises MissingAttributeError for an absent edge or
        attribute rather than returning a default.

    Edges are kept in insertion order, so algorithms that scan outgoing
    edges behave deterministically.
    """

    #
    # Node management
    #
    def add_node(self, n: NodeID, **attr: Any) -> None:
        """
        Add vertex `n`; adding it a second time is an error.

        Args:
            n (NodeID): Any hashable vertex label.
            **attr: Vertex attributes (the solvers do not read any).

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if n in self:
            raise ValueError(f"Node '{n}' already exists in this graph.")
        super().add_node(n, **attr)

    def remove_node(self, n: NodeID) -> None:
        """
        Remove vertex `n` together with the edges into and out of it.

        Args:
            n (NodeID): Vertex to remove.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        super().remove_node(n)

    #
    # Edge management
    #
    def add_edge(self, u_of_edge: NodeID, v_of_edge: NodeID, **attr: Any) -> None:
        """
        Add a directed edge from u_of_edge to v_of_edge.

        This method does not create nodes automatically; both nodes must
        already exist in the graph. Self-loops are allowed.

        Args:
            u_of_edge (NodeID): The source node. Must exist in the graph.
            v_of_edge (NodeID): The target node. Must exist in the graph.
            **attr: Arbitrary edge attributes, e.g. cost=2, time=1.

        Raises:
            ValueError: If either node does not exist, or if an edge in the
                same direction already exists.
        """
        if u_of_edge not in self:
            raise ValueError(f"Source node '{u_of_edge}' does not exist.")
        if v_of_edge not in self:
            raise ValueError(f"Target node '{v_of_edge}' does not exist.")
        if v_of_edge in self._succ[u_of_edge]:
            raise ValueError(
                f"Edge from '{u_of_edge}' to '{v_of_edge}' already exists."
            )
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """
        Remove the directed edge from u to v.

        Args:
            u (NodeID): The source node of the edge.
            v (NodeID): The target node of the edge.

        Raises:
            ValueError: If there is no edge from u to v.
        """
        if u not in self._succ or v not in self._succ[u]:
            raise ValueError(f"No edge from '{u}' to '{v}' to remove.")
        super().remove_edge(u, v)

    #
    # Convenience methods
    #
    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """
        Retrieve all nodes and their attributes as a dictionary.

        Returns:
            Dict[NodeID, AttrDict]: A mapping of node ID to its attributes.
        """
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[EdgeTuple, AttrDict]:
        """
        Retrieve all edges and their attributes, in insertion order.

        The attribute dictionaries are the live ones stored in the graph.

        Returns:
            Dict[EdgeTuple, AttrDict]: A mapping of (source, target) to the
                edge attribute dictionary.
        """
        return {(u, v): attr for u, v, attr in self.edges(data=True)}

    def get_attr(self, u: NodeID, v: NodeID, name: str) -> Any:
        """
        Read a single attribute of the edge from u to v.

        Args:
            u (NodeID): The source node.
            v (NodeID): The target node.
            name (str): The attribute name, e.g. "cost".

        Returns:
            The attribute value.

        Raises:
            MissingAttributeError: If the edge does not exist or has no
                attribute called `name`.
        """
        try:
            attr = self._succ[u][v]
        except KeyError:
            raise MissingAttributeError(
                f"No edge from '{u}' to '{v}' to read '{name}' from."
            ) from None
        try:
            return attr[name]
        except KeyError:
            raise MissingAttributeError(
                f"Edge from '{u}' to '{v}' has no attribute '{name}'."
            ) from None

    def update_edge_attr(self, u: NodeID, v: NodeID, **attr: Any) -> None:
        """
        Update attributes on an existing edge.

        Args:
            u (NodeID): The source node.
            v (NodeID): The target node.
            **attr: Arbitrary edge attributes to add or modify.

        Raises:
            ValueError: If there is no edge from u to v.
        """
        if u not in self._succ or v not in self._succ[u]:
            raise ValueError(f"No edge from '{u}' to '{v}' found.")
        self._succ[u][v].update(attr)

    def set_default(self, name: str, value: Any) -> None:
        """
        Fill in an attribute on every edge that does not have it yet.

        Edges that already carry `name` keep their value, so repeated calls
        with the same arguments leave the graph unchanged. Edges added later
        are not affected.

        Args:
            name (str): The attribute name, e.g. "time".
            value: The value assigned to edges lacking the attribute.
        """
        for _, _, attr in self.edges(data=True):
            attr.setdefault(name, value)

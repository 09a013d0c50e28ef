# Copyright 2015 Kevin B Jacobs
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License.  You may obtain
# a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.  See the
# License for the specific language governing permissions and limitations
# under the License.

"""Single-source paths in an undirected graph using depth first search.

Two interchangeable implementations are provided.  DepthFirstPaths recurses on
the Python call stack, IterativeDepthFirstPaths simulates that recursion with
an explicit stack of (vertex, adjacency, next index) frames.  Both visit
neighbors in adjacency order and mark vertices in the same order, so they
record identical predecessors and return identical paths for every graph and
source.  Prefer the iterative version for graphs deeper than the interpreter's
recursion limit.
"""

import logging

from ugraph.errors import InvalidArgument, check_vertex


logger = logging.getLogger(__name__)


class BasePaths:
    """Reachability and paths from a fixed source vertex.

    The search runs eagerly when the object is built.  The graph is referenced,
    not copied, and must not be mutated while the results are in use.

    Args:
        graph (Graph): graph to search
        source (int): source vertex in [0, graph.V)

    Raises:
        InvalidArgument: if source is not a vertex of graph

    """
    def __init__(self, graph, source):
        check_vertex(source, graph.V, exc=InvalidArgument, role='source vertex')

        self.graph    = graph
        self._source  = source
        self._marked  = [False] * graph.V
        self._edge_to = [None] * graph.V
        self._order   = [source]

        self._marked[source] = True
        self._search(source)

        logger.debug('%s from %d reached %d of %d vertices',
                     type(self).__name__, source, len(self._order), graph.V)

    def _search(self, source):
        raise NotImplementedError

    def _visit(self, v, w):
        """Record the discovery of w from v."""
        self._edge_to[w] = v
        self._marked[w] = True
        self._order.append(w)

    @property
    def source(self):
        """Return the source vertex."""
        return self._source

    @property
    def count(self):
        """Return the number of vertices reachable from the source, itself included."""
        return len(self._order)

    @property
    def order(self):
        """Return the reached vertices in the order they were marked."""
        return tuple(self._order)

    def has_path_to(self, v):
        """Return True if v is reachable from the source.

        Raises:
            PreconditionViolation: if v is not in [0, V)

        """
        check_vertex(v, len(self._marked))
        return self._marked[v]

    def path_to(self, v):
        """Return the path from the source to v.

        Args:
            v (int): target vertex

        Returns:
            list: vertices [source, ..., v], or None if v is not reachable

        Raises:
            PreconditionViolation: if v is not in [0, V)

        """
        if not self.has_path_to(v):
            return None

        path = [v]
        edge_to = self._edge_to
        while v != self._source:
            v = edge_to[v]
            path.append(v)

        path.reverse()
        return path

    def __repr__(self):
        return '{}({!r}, source={})'.format(type(self).__name__, self.graph, self._source)


class DepthFirstPaths(BasePaths):
    """Depth first paths found by recursion.

    Examples:
        >>> from ugraph.graph import Graph
        >>> g = Graph(4)
        >>> g.add_edge(0, 1)
        >>> g.add_edge(2, 3)
        >>> paths = DepthFirstPaths(g, 0)
        >>> paths.path_to(1)
        [0, 1]
        >>> paths.has_path_to(3), paths.path_to(3)
        (False, None)

    """
    def _search(self, v):
        marked = self._marked
        for w in self.graph.adj(v):
            if not marked[w]:
                self._visit(v, w)
                self._search(w)


class IterativeDepthFirstPaths(BasePaths):
    """Depth first paths found with an explicit stack.

    Examples:
        >>> from ugraph.graph import Graph
        >>> g = Graph(3)
        >>> g.add_edge(0, 0)
        >>> g.add_edge(0, 2)
        >>> IterativeDepthFirstPaths(g, 0).path_to(2)
        [0, 2]

    """
    def _search(self, source):
        marked = self._marked
        adj = self.graph.adj

        # Each frame is [vertex, adjacency, index of the next neighbor to examine]
        stack = [[source, adj(source), 0]]
        while stack:
            frame = stack[-1]
            v, neighbors, i = frame
            n = len(neighbors)

            while i < n and marked[neighbors[i]]:
                i += 1

            if i < n:
                w = neighbors[i]
                frame[2] = i + 1
                self._visit(v, w)
                stack.append([w, adj(w), 0])
            else:
                stack.pop()

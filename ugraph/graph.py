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

"""Undirected graph over the integer vertices [0, V).

Parallel edges and self-loops are allowed.
"""


from ugraph.errors import InvalidArgument, check_vertex


class Graph:
    r"""Undirected graph holding a fixed number of vertices.

    Vertices are the integers in [0, V).  Adjacency sequences keep neighbors in
    edge insertion order, which determines the order of any traversal.

    Args:
        v (int): number of vertices, must be >= 0

    Examples:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1)
        >>> g.add_edge(1, 1)
        >>> g.V, g.E
        (3, 2)
        >>> g.adj(1)
        (0, 1, 1)
        >>> g.describe()
        '3 vertices, 2 edges\n0: 1 \n1: 0 1 1 \n2: \n'

    """
    __slots__ = ('_v', '_e', '_adj', '_edges')

    def __init__(self, v):
        """Build a new Graph without any edges."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidArgument('number of vertices must be an integer, V={!r}'.format(v))
        if v < 0:
            raise InvalidArgument('number of vertices must not be negative, V={}'.format(v))

        self._v = v
        self._e = 0
        self._adj = [[] for _ in range(v)]
        self._edges = []

    @property
    def V(self):
        """Return the number of vertices."""
        return self._v

    @property
    def E(self):
        """Return the number of edges."""
        return self._e

    def __len__(self):
        """Return the number of vertices."""
        return self._v

    def add_edge(self, v, w):
        """Add the undirected edge v-w.

        Self-loops append v twice to its own adjacency sequence, once per
        endpoint.  Parallel edges are kept as-is.

        Raises:
            PreconditionViolation: if either endpoint is not in [0, V)

        """
        check_vertex(v, self._v)
        check_vertex(w, self._v)

        self._adj[v].append(w)
        self._adj[w].append(v)
        self._edges.append((v, w))
        self._e += 1

    def adj(self, v):
        """Return the vertices adjacent to v in insertion order.

        Args:
            v (int): vertex id

        Returns:
            tuple: read-only view of the adjacency sequence

        Raises:
            PreconditionViolation: if v is not in [0, V)

        """
        check_vertex(v, self._v)
        return tuple(self._adj[v])

    __getitem__ = adj

    def edges(self):
        """Yield the inserted edges as (v, w) pairs in insertion order."""
        yield from self._edges

    def describe(self):
        """Render the graph as text, one line per vertex with its neighbors.

        Every vertex line ends in a space, even when the vertex has no
        neighbors.
        """
        lines = ['{} vertices, {} edges\n'.format(self._v, self._e)]
        for v, adj in enumerate(self._adj):
            lines.append('{}: {}\n'.format(v, ''.join('{} '.format(w) for w in adj)))
        return ''.join(lines)

    __str__ = describe

    def __repr__(self):
        return 'Graph(V={}, E={})'.format(self._v, self._e)

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

"""Read and write graphs in a line-oriented edge list format.

The first line holds the number of vertices V, the second the number of edges
E, and every following line one undirected edge as two vertex ids in [0, V)
separated by a space::

    4
    2
    0 1
    2 3

The above describes a graph with 4 vertices and the two edges 0-1 and 2-3.
"""

import re
import sys
import logging

from ugraph.graph     import Graph
from ugraph.errors    import FormatError
from ugraph.smartfile import smartfile


logger = logging.getLogger(__name__)


INT_RE = re.compile(r'[-+]?[0-9]+\Z')


def _parse_int(token, what, lineno):
    if not INT_RE.match(token):
        raise FormatError('failed to parse {}, invalid token {!r}'.format(what, token), lineno)
    return int(token)


def _parse_count(line, what, lineno):
    if line is None:
        raise FormatError('line missing, must contain {}'.format(what), lineno)

    value = _parse_int(line.rstrip('\r\n'), what, lineno)

    if value < 0:
        raise FormatError('{} must not be negative, got {}'.format(what, value), lineno)

    return value


def parse_graph(lines):
    """Build a Graph from lines of edge list text.

    Every line after the two header lines must hold exactly one edge, so a
    blank line among the edges is an error.  Count lines may not carry
    surrounding whitespace.

    Args:
        lines (iterable of str): input lines, with or without line endings

    Returns:
        Graph: graph with the edges added in input order

    Raises:
        FormatError: if the input is malformed or a vertex is out of range

    Examples:
        >>> g = parse_graph(['3', '2', '0 1', '1 2'])
        >>> g.V, g.E, g.adj(1)
        (3, 2, (0, 2))

    """
    lines = enumerate(lines, 1)

    lineno, line = next(lines, (1, None))
    v = _parse_count(line, 'number of vertices', lineno)

    lineno, line = next(lines, (2, None))
    e = _parse_count(line, 'number of edges', lineno)

    graph = Graph(v)

    for lineno, line in lines:
        tokens = line.split()

        if len(tokens) != 2:
            raise FormatError('edge must have two vertices, invalid line {!r}'.format(line.rstrip('\r\n')), lineno)

        edge = [_parse_int(token, 'vertex', lineno) for token in tokens]

        for vertex in edge:
            if not 0 <= vertex < v:
                raise FormatError('vertex id must be within [0, {}), invalid vertex {}'.format(v, vertex), lineno)

        graph.add_edge(*edge)

    if graph.E != e:
        raise FormatError('declared {} edges but the edge list contains {}'.format(e, graph.E))

    return graph


def read_graph(filename):
    """Read a Graph from a plain, compressed or remote edge list file.

    Args:
        filename (str, Path or file object): input file, '-' for stdin

    Returns:
        Graph: parsed graph

    """
    f = smartfile(filename)

    try:
        graph = parse_graph(f)
    finally:
        if f is not filename and f is not sys.stdin:
            f.close()

    logger.debug('read %r from %s', graph, filename)

    return graph


def format_graph(graph):
    """Yield the edge list lines, without line endings, describing graph.

    Edges are written in insertion order so that reading them back reproduces
    every adjacency sequence.

    >>> g = Graph(2)
    >>> g.add_edge(0, 1)
    >>> g.add_edge(1, 1)
    >>> list(format_graph(g))
    ['2', '2', '0 1', '1 1']

    """
    yield str(graph.V)
    yield str(graph.E)
    for v, w in graph.edges():
        yield '{} {}'.format(v, w)


def write_graph(graph, filename):
    """Write graph as an edge list to filename ('-' for stdout)."""
    f = smartfile(filename, 'w')

    try:
        for line in format_graph(graph):
            f.write(line + '\n')
    finally:
        if f is not filename and f is not sys.stdout:
            f.close()

    logger.debug('wrote %r to %s', graph, filename)

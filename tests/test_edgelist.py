"""Test reading and writing edge list files."""

import io
import random

import pytest

from ugraph.graph    import Graph
from ugraph.errors   import FormatError, InvalidArgument
from ugraph.edgelist import parse_graph, read_graph, format_graph, write_graph


TINY_G = """\
8
10
0 1
0 6
0 7
1 6
1 2
1 4
2 3
2 4
3 4
4 5
"""


def test_parse_graph_with_one_edge():
    """Test parsing a graph with a single edge."""
    g = parse_graph(io.StringIO('2\n1\n0 1'))
    assert g.V == 2
    assert g.E == 1
    assert g.adj(0) == (1,)
    assert g.adj(1) == (0,)


def test_parse_graph_keeps_adjacency_order():
    """Test edges are added in the order they are listed."""
    g = parse_graph(io.StringIO(TINY_G))
    assert g.V == 8
    assert g.E == 10
    assert g.adj(0) == (1, 6, 7)
    assert g.adj(1) == (0, 6, 2, 4)
    assert g.adj(4) == (1, 2, 3, 5)


def test_parse_graph_without_edges():
    """Test parsing graphs without any edges."""
    g = parse_graph(['0', '0'])
    assert (g.V, g.E) == (0, 0)
    g = parse_graph(['3\n', '0\n'])
    assert (g.V, g.E) == (3, 0)


def test_parse_graph_self_loop_and_parallel_edges():
    """Test self-loops and parallel edges are read as given."""
    g = parse_graph(['2', '3', '0 0', '0 1', '1 0'])
    assert g.E == 3
    assert g.adj(0) == (0, 0, 1, 1)
    assert g.adj(1) == (0, 0)


def test_parse_graph_trailing_newline():
    """Test a final line ending does not count as an extra edge line."""
    g = parse_graph(io.StringIO('2\n1\n0 1\n'))
    assert g.E == 1


@pytest.mark.parametrize('text', [
    '',           # number of vertices missing
    'a',          # vertices not a number
    '-1',         # vertices negative
    '1\n',        # number of edges missing
    '1\na',       # edges not a number
    '1\n-1',      # edges negative
    '2\n1',       # edge count differs from edge list
    '2\n0\n0 1',  # edge count differs from edge list
    '2\n1\n3 1',  # first vertex out of range
    '2\n1\na 1',  # first vertex not a number
    '2\n1\n0 3',  # second vertex out of range
    '2\n1\n0 a',  # second vertex not a number
    '2\n1\n3',    # edge misses a vertex
    '2\n1\n0 1 1',  # edge has too many vertices
    '2\n1\n-1 0',   # negative vertex
    '2\n1\n1_0 1',  # not a plain decimal
    '2\n1\n\n0 1',   # blank line among the edges
    '2\n1\n0 1\n\n',  # trailing blank line
    ' 2\n1\n0 1',   # padded vertex count
    '2\n1 \n0 1',   # padded edge count
])
def test_parse_graph_invalid(text):
    """Test malformed input is rejected."""
    with pytest.raises(FormatError):
        parse_graph(io.StringIO(text))


def test_format_error_is_invalid_argument():
    """Test FormatError can be handled as InvalidArgument and ValueError."""
    with pytest.raises(InvalidArgument):
        parse_graph(['x'])
    with pytest.raises(ValueError):
        parse_graph(['x'])


def test_format_error_line_numbers():
    """Test errors report the offending line."""
    with pytest.raises(FormatError) as excinfo:
        parse_graph(['3', '2', '0 1', '1 7'])
    assert excinfo.value.lineno == 4
    assert 'line 4' in str(excinfo.value)

    with pytest.raises(FormatError) as excinfo:
        parse_graph(['2', '1', '', '0 1'])
    assert excinfo.value.lineno == 3
    assert 'edge must have two vertices' in str(excinfo.value)

    with pytest.raises(FormatError) as excinfo:
        parse_graph(['3'])
    assert excinfo.value.lineno == 2

    with pytest.raises(FormatError) as excinfo:
        parse_graph(['3', '2', '0 1'])
    assert excinfo.value.lineno is None


def test_format_graph():
    """Test formatting a graph as edge list lines."""
    g = parse_graph(io.StringIO(TINY_G))
    assert '\n'.join(format_graph(g)) + '\n' == TINY_G


def test_round_trip():
    """Test writing and reading a graph preserves counts and adjacency order."""
    rng = random.Random(1234)
    for _ in range(10):
        v = rng.randint(1, 20)
        g = Graph(v)
        for _ in range(rng.randint(0, 40)):
            g.add_edge(rng.randrange(v), rng.randrange(v))

        h = parse_graph(format_graph(g))

        assert h.V == g.V
        assert h.E == g.E
        assert all(h.adj(i) == g.adj(i) for i in range(v))


@pytest.mark.parametrize('name', ['tinyG.txt', 'tinyG.txt.gz', 'tinyG.txt.bz2'])
def test_read_write_files(tmp_path, name):
    """Test reading and writing plain and compressed files."""
    g = parse_graph(io.StringIO(TINY_G))
    filename = tmp_path / name

    write_graph(g, str(filename))
    h = read_graph(str(filename))

    assert h.describe() == g.describe()


def test_read_graph_from_path_and_file_object(tmp_path):
    """Test reading from pathlib paths and open file objects."""
    filename = tmp_path / 'tinyG.txt'
    filename.write_text(TINY_G)

    assert read_graph(filename).E == 10

    with open(str(filename)) as f:
        assert read_graph(f).E == 10
        assert not f.closed


def test_read_graph_missing_file(tmp_path):
    """Test reading a file that does not exist."""
    with pytest.raises(OSError):
        read_graph(str(tmp_path / 'missing.txt'))

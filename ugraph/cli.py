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

"""Inspect undirected graphs and their depth first paths from the command line."""

import sys
import logging

from argparse         import ArgumentParser

from ugraph.errors    import GraphError
from ugraph.edgelist  import read_graph
from ugraph.paths     import DepthFirstPaths, IterativeDepthFirstPaths


logger = logging.getLogger(__name__)


def format_path(path):
    """Format a path for display, using '-' when there is none.

    >>> format_path([0, 1, 6])
    '0 1 6'
    >>> format_path(None)
    '-'

    """
    if path is None:
        return '-'
    return ' '.join(str(v) for v in path)


def describe(args):
    """Print the adjacency lists of a graph."""
    graph = read_graph(args.graph)
    print(graph.describe(), end='')
    return 0


def paths(args):
    """Print the depth first path from a source to each target vertex."""
    graph = read_graph(args.graph)
    finder = DepthFirstPaths if args.recursive else IterativeDepthFirstPaths
    dfp = finder(graph, args.source)

    targets = args.target if args.target else range(graph.V)

    for v in targets:
        print('{}: {}'.format(v, format_path(dfp.path_to(v))))

    return 0


def compare(args):
    """Check that recursive and iterative depth first paths agree.

    Sources too deep for the recursive search are reported and skipped.
    Returns 1 if any source disagrees, otherwise 2 if any was skipped.
    """
    graph = read_graph(args.graph)
    sources = args.source if args.source else range(graph.V)
    mismatches = skipped = 0

    for s in sources:
        iterative = IterativeDepthFirstPaths(graph, s)

        try:
            recursive = DepthFirstPaths(graph, s)
        except RecursionError:
            skipped += 1
            print('source {}: SKIPPED, too deep for the recursive search'.format(s))
            continue

        differ = [v for v in range(graph.V)
                  if recursive.has_path_to(v) != iterative.has_path_to(v)
                  or recursive.path_to(v) != iterative.path_to(v)]

        if differ:
            mismatches += 1
            print('source {}: MISMATCH at {}'.format(s, format_path(differ)))
        else:
            print('source {}: ok, {} reachable'.format(s, recursive.count))

    logger.debug('compared %d sources, %d mismatched, %d skipped', len(sources), mismatches, skipped)

    if mismatches:
        return 1
    return 2 if skipped else 0


def arg_parser():
    """Build ugraph's argument parser."""
    parser = ArgumentParser(prog='ugraph')
    subparsers = parser.add_subparsers(help='Commands', dest='command')

    describe_parser = subparsers.add_parser('describe', help='print the adjacency lists of a graph')
    describe_parser.add_argument('graph', help='Edge list input, optionally gzip/bzip2 compressed (- for stdin)')
    describe_parser.set_defaults(func=describe)

    paths_parser = subparsers.add_parser('paths', help='print depth first paths from a source vertex')
    paths_parser.add_argument('graph', help='Edge list input, optionally gzip/bzip2 compressed (- for stdin)')
    paths_parser.add_argument('-s', '--source', metavar='V', type=int, required=True, help='Source vertex (required)')
    paths_parser.add_argument('-t', '--target', metavar='V', type=int, action='append',
                              help='Target vertex.  Option may be specified multiple times (default=all vertices)')
    paths_parser.add_argument('--iterative', dest='recursive', action='store_false',
                              help='Search with an explicit stack (default)')
    paths_parser.add_argument('--recursive', dest='recursive', action='store_true',
                              help='Search by recursion, limited by the interpreter recursion limit')
    paths_parser.set_defaults(func=paths, recursive=False)

    compare_parser = subparsers.add_parser('compare', help='check recursive and iterative searches agree')
    compare_parser.add_argument('graph', help='Edge list input, optionally gzip/bzip2 compressed (- for stdin)')
    compare_parser.add_argument('-s', '--source', metavar='V', type=int, action='append',
                                help='Source vertex.  Option may be specified multiple times (default=all vertices)')
    compare_parser.set_defaults(func=compare)

    parser.add_argument('--debug', action='store_true', help='Output extremely verbose debugging information')
    parser.add_argument('--profile', action='store_true', help='Profile code performance')

    return parser


def run_ugraph(parser, args):
    """Run ugraph."""
    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (GraphError, OSError) as e:
        logger.debug('%s failed', args.command, exc_info=True)
        print('ugraph {}: error: {}'.format(args.command, e), file=sys.stderr)
        return 2
    except RecursionError:
        logger.debug('%s failed', args.command, exc_info=True)
        print('ugraph {}: error: graph is too deep for the recursive search, use --iterative'.format(args.command),
              file=sys.stderr)
        return 2


def main(argv=None):
    """Just ugraph's main CLI function."""
    parser = arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    if args.profile:
        try:
            import yappi
        except ImportError:
            print('ugraph: error: --profile requires yappi, install ugraph[profile]', file=sys.stderr)
            return 2

        yappi.start()
        try:
            return run_ugraph(parser, args)
        finally:
            yappi.stop()
            stats = yappi.get_func_stats().sort('tsub').strip_dirs()
            stats.print_all(out=sys.stderr, columns={0: ('name', 45), 1: ('ncall', 10), 2: ('tsub', 8), 3: ('ttot', 8), 4: ('tavg', 8)})
    else:
        return run_ugraph(parser, args)


if __name__ == '__main__':
    sys.exit(main())

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

"""Exceptions raised by ugraph."""


class GraphError(Exception):
    """Base class for all ugraph errors."""
    pass


class InvalidArgument(GraphError, ValueError):
    """Exception raised when a graph or path finder is built from invalid arguments."""
    pass


class PreconditionViolation(GraphError, IndexError):
    """Exception raised when an out-of-range vertex id is passed to a graph operation.

    This signals a programming error at the call site rather than a recoverable
    runtime condition.
    """
    pass


class FormatError(InvalidArgument):
    """Exception raised when graph text input is malformed.

    Attrs:
        lineno (int): 1-based line number of the offending line, or None when
                      the error concerns the input as a whole

    """
    def __init__(self, message, lineno=None):
        if lineno is not None:
            message = 'line {}: {}'.format(lineno, message)
        super().__init__(message)
        self.lineno = lineno


def check_vertex(v, n, exc=PreconditionViolation, role='vertex'):
    """Raise exc unless v is a vertex id in the range [0, n).

    >>> check_vertex(0, 1)
    >>> check_vertex(1, 1)
    Traceback (most recent call last):
    ...
    ugraph.errors.PreconditionViolation: vertex must be within [0, 1), invalid vertex 1

    """
    if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < n:
        raise exc('{} must be within [0, {}), invalid {} {!r}'.format(role, n, role, v))

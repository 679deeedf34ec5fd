#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.


class ParseError(ValueError):
    """Base class for everything that can go wrong reading benchmark output.

    Attributes:
        line (str): the output line being parsed when the error occurred, if
                    known
    """

    def __init__(self, message, line=None):
        super().__init__(message)
        self.line = line

    def with_context(self, context, line=None):
        """Copy of this error with context prepended to the message.

        The class is preserved so callers can still tell what kind of failure
        happened after the error has been passed up through several layers.
        """
        return type(self)(
            "{}: {}".format(context, self), line=line if line is not None else self.line
        )


class InvalidCharacterError(ParseError):
    """A name or value to be encoded contains '/' or '.'."""


class MalformedParameterError(ParseError):
    """A parameter segment is empty or has more than one '.'."""


class MissingConcurrencySuffixError(ParseError):
    """Benchmark identifier has no trailing -GOMAXPROCS."""


class InvalidIterationCountError(ParseError):
    pass


class InvalidNumberError(ParseError):
    pass


class MalformedMetricLabelError(ParseError):
    """Custom metric label is not of the form name.unit"""


class InvalidLineError(ParseError):
    """Line handed to the line parser is not a benchmark line at all."""


class ConfigError(Exception):
    pass

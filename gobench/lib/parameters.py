#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.
import re
from dataclasses import dataclass
from typing import Iterable, List

from gobench.lib.errors import InvalidCharacterError, MalformedParameterError


PARAM_SEPARATOR = "/"
NAME_VALUE_SEPARATOR = "."

# benchmark output is split on these, so they can never appear in a name or
# value that we encode ourselves
ILLEGAL_CHARS_REGEX = re.compile(r"[/.]")


@dataclass(frozen=True)
class Parameter(object):
    """A single named dimension of a benchmark's configuration."""

    name: str

    value: str


def check_legal(*fields: str):
    """Raise InvalidCharacterError if any field contains '/' or '.'."""
    for field in fields:
        if ILLEGAL_CHARS_REGEX.search(field):
            raise InvalidCharacterError(
                f"'{field}' cannot contain '{NAME_VALUE_SEPARATOR}' "
                f"or '{PARAM_SEPARATOR}'"
            )


def parameters_to_name(params: Iterable[Parameter]) -> str:
    """Join parameters into the sub-benchmark name format that
    name_to_parameters() reads back.

    Args:
        params (iterable[Parameter]): parameters in the order they should
                                      appear

    Returns:
        name (str): e.g. "size.large/mode.fast"

    Raises:
        InvalidCharacterError: a name or value contains '/' or '.'
    """
    segments = []
    for param in params:
        check_legal(param.name, param.value)
        segments.append(NAME_VALUE_SEPARATOR.join([param.name, param.value]))
    return PARAM_SEPARATOR.join(segments)


def name_to_parameters(name: str) -> List[Parameter]:
    """Parse a string built by parameters_to_name() back into Parameters.

    A segment without a '.' is a flag-style parameter, its name doubles as
    its value.

    Raises:
        MalformedParameterError: a segment is empty or has more than two parts
    """
    if not name:
        return []

    params: List[Parameter] = []
    for segment in name.split(PARAM_SEPARATOR):
        parts = segment.split(NAME_VALUE_SEPARATOR)
        if not segment or len(parts) > 2:
            raise MalformedParameterError(f"failed to parse param: '{segment}'")
        if len(parts) == 1:
            params.append(Parameter(name=segment, value=segment))
        else:
            params.append(Parameter(name=parts[0], value=parts[1]))
    return params

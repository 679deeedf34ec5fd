#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.

import math
import re
from dataclasses import dataclass
from typing import Optional

from gobench.lib.errors import InvalidNumberError, MalformedMetricLabelError
from gobench.lib.parameters import NAME_VALUE_SEPARATOR, check_legal


# measurements go test reports by default that we don't keep
IGNORED_METRICS = frozenset(["MB/s", "B/op", "allocs/op"])
NS_PER_OP = "ns/op"

FLOAT_REGEX = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


@dataclass
class Metric(object):
    name: str

    unit: str

    sample: float


def parse_sample(value: str) -> float:
    """Parse a metric value as a finite base-10 float."""
    if not FLOAT_REGEX.match(value):
        raise InvalidNumberError(f"invalid number '{value}'")
    sample = float(value)
    if not math.isfinite(sample):
        raise InvalidNumberError(f"'{value}' is out of range")
    return sample


def custom_metric_label(name: str, unit: str) -> str:
    """Format a custom metric label the way parse_custom_metric() reads it.

    Raises:
        InvalidCharacterError: name or unit contains '/' or '.'
    """
    check_legal(name, unit)
    return NAME_VALUE_SEPARATOR.join([name, unit])


def parse_custom_metric(value: str, label: str) -> Metric:
    """Parse a metric reported under a "name.unit" label."""
    sample = parse_sample(value)
    name_unit = label.split(NAME_VALUE_SEPARATOR)
    if len(name_unit) != 2:
        raise MalformedMetricLabelError(f"failed to parse metric: '{label}'")
    return Metric(name=name_unit[0], unit=name_unit[1], sample=sample)


def make_metric(value: str, label: str) -> Optional[Metric]:
    """Turn a (value, label) pair from a benchmark line into a Metric.

    Returns:
        metric (Metric): the parsed metric, or None if label is one of the
                         default measurements that are ignored
    """
    if label in IGNORED_METRICS:
        return None
    if label == NS_PER_OP:
        # the built-in timing metric is its own name and unit
        return Metric(name=NS_PER_OP, unit=NS_PER_OP, sample=parse_sample(value))
    return parse_custom_metric(value, label)

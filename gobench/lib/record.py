#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.
from dataclasses import dataclass, field
from typing import List, Optional

from gobench.lib.metrics import Metric


@dataclass
class Condition(object):
    name: str

    value: str


@dataclass
class Metadata(object):
    """Describes the run that produced a set of benchmarks."""

    cl: str = ""
    """change the benchmarked code was built from"""

    iteration_id: str = ""
    """identifies one run when the same change is benchmarked several times"""

    pending_cl: str = ""

    timestamp: str = ""


@dataclass
class Benchmark(object):
    """Storage record for a single benchmark result.

    Records are built up one piece at a time by the parsers: create with
    new(), then set_metadata(), add_condition() and add_metric().
    """

    name: str

    iterations: int

    official: bool = False
    """official results come from a controlled environment, everything else
    is considered a developer run"""

    metadata: Optional[Metadata] = None

    conditions: List[Condition] = field(default_factory=list)

    metrics: List[Metric] = field(default_factory=list)

    @classmethod
    def new(cls, name: str, iterations: int, official: bool) -> "Benchmark":
        return cls(name=name, iterations=iterations, official=official)

    def set_metadata(self, metadata: Optional[Metadata]):
        self.metadata = metadata

    def add_condition(self, name: str, value: str):
        self.conditions.append(Condition(name=name, value=value))

    def add_metric(self, name: str, unit: str, sample: float):
        self.metrics.append(Metric(name=name, unit=unit, sample=sample))


@dataclass
class Suite(object):
    """A named group of benchmarks that were run together."""

    name: str

    benchmarks: List[Benchmark] = field(default_factory=list)

    conditions: List[Condition] = field(default_factory=list)

    official: bool = False

    timestamp: str = ""


def shared_conditions(benchmarks: List[Benchmark]) -> List[Condition]:
    """Conditions that every benchmark has, in the order of the first one."""
    if not benchmarks:
        return []
    return [
        c for c in benchmarks[0].conditions
        if all(c in bm.conditions for bm in benchmarks[1:])
    ]

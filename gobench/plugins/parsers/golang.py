#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from gobench.lib.errors import (
    InvalidIterationCountError,
    InvalidLineError,
    MalformedParameterError,
    MissingConcurrencySuffixError,
    ParseError,
)
from gobench.lib.metrics import Metric, make_metric
from gobench.lib.parameters import Parameter, name_to_parameters
from gobench.lib.parser import Parser
from gobench.lib.record import Benchmark, Metadata


logger = logging.getLogger(__name__)

BENCHMARK_PREFIX = "Benchmark"
GOMAXPROCS = "GOMAXPROCS"

ITERATIONS_REGEX = re.compile(r"^[+-]?[0-9]+$")


@dataclass
class ParsedLine(object):
    """Everything read from one benchmark line, before it becomes a record."""

    name: str

    iterations: int

    parameters: List[Parameter] = field(default_factory=list)

    metrics: List[Metric] = field(default_factory=list)

    def to_benchmark(
        self, metadata: Optional[Metadata], official: bool
    ) -> Benchmark:
        bm = Benchmark.new(self.name, self.iterations, official)
        bm.set_metadata(metadata)
        for param in self.parameters:
            bm.add_condition(param.name, param.value)
        for metric in self.metrics:
            bm.add_metric(metric.name, metric.unit, metric.sample)
        return bm


def is_benchmark(line: str) -> bool:
    """Check that a line is a benchmark result line.

    Result lines look like:
        BenchmarkFoo/size.large-8    1000    1234 ns/op    5.5 custom.ms
    """
    fields = line.split()
    if len(fields) < 2:
        return False
    if not fields[0].startswith(BENCHMARK_PREFIX):
        return False
    return bool(ITERATIONS_REGEX.match(fields[1]))


def parse_name_params(identifier: str) -> Tuple[str, List[Parameter]]:
    """Split an identifier of the form NAME[/PARAMS]-GOMAXPROCS.

    go test appends GOMAXPROCS itself, so it is always the last "-" and
    always comes back as the first parameter. Parameters are separated by
    "/", each one being "name.value".

    Raises:
        MissingConcurrencySuffixError: there is no "-" in identifier
        MalformedParameterError: the parameters can't be parsed
    """
    max_index = identifier.rfind("-")
    if max_index < 0:
        raise MissingConcurrencySuffixError(
            f"{GOMAXPROCS} not found in '{identifier}'"
        )
    params = [Parameter(name=GOMAXPROCS, value=identifier[max_index + 1:])]

    remainder = identifier[:max_index]
    index = remainder.find("/")
    if index < 0:
        return remainder, params

    name, encoded = remainder[:index], remainder[index + 1:]
    if not encoded:
        raise MalformedParameterError(f"empty parameter list in '{identifier}'")
    try:
        params.extend(name_to_parameters(encoded))
    except MalformedParameterError as e:
        raise e.with_context(f"parse params '{identifier}'") from e
    return name, params


def parse_line(line: str) -> ParsedLine:
    """Parse a single benchmark result line.

    Safe to call on any line, anything is_benchmark() would reject raises
    instead of being parsed. A value without a trailing label at the end of
    the line is ignored.
    """
    fields = line.split()
    if len(fields) < 2:
        raise InvalidLineError(f"two fields required, got: {len(fields)}")
    if not fields[0].startswith(BENCHMARK_PREFIX):
        raise InvalidLineError(f"invalid prefix: '{fields[0]}'")
    if not ITERATIONS_REGEX.match(fields[1]):
        raise InvalidIterationCountError(
            f"expecting number of runs, got '{fields[1]}'"
        )
    iterations = int(fields[1])

    name, params = parse_name_params(fields[0])
    parsed = ParsedLine(
        name=name[len(BENCHMARK_PREFIX):], iterations=iterations, parameters=params
    )

    # only complete (value, label) pairs
    for i in range(2, len(fields) - 1, 2):
        value, label = fields[i], fields[i + 1]
        try:
            metric = make_metric(value, label)
        except ParseError as e:
            raise e.with_context(f"failed on metric {label} value {value}") from e
        if metric is not None:
            parsed.metrics.append(metric)
    return parsed


def parse_data_line(
    line: str, metadata: Optional[Metadata], official: bool
) -> Benchmark:
    """Parse a benchmark result line into a storage record."""
    return parse_line(line).to_benchmark(metadata, official)


def parse_output(
    output: str, metadata: Optional[Metadata], official: bool
) -> List[Benchmark]:
    """Parse the complete output of a go test -bench run.

    Lines that aren't benchmark results are skipped. The first result line
    that fails to parse fails the whole output.

    Raises:
        ParseError: with the offending line in its line attribute
    """
    benchmarks: List[Benchmark] = []
    skipped = 0
    for line in output.split("\n"):
        if not is_benchmark(line):
            skipped += 1
            continue
        try:
            benchmarks.append(parse_data_line(line, metadata, official))
        except ParseError as e:
            raise e.with_context(f"failed to parse line '{line}'", line=line) from e
    logger.debug("Skipped {} non-benchmark lines".format(skipped))
    logger.info("Parsed {} benchmarks".format(len(benchmarks)))
    return benchmarks


class GoParser(Parser):
    """Parser for the text output of go test -bench."""

    def parse(
        self, output: str, metadata: Optional[Metadata], official: bool
    ) -> List[Benchmark]:
        return parse_output(output, metadata, official)

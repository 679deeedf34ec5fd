#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.
import dataclasses
import json
import sys
from abc import ABCMeta, abstractmethod
from typing import IO, Optional

from gobench.lib.record import Suite


class Reporter(object, metaclass=ABCMeta):
    """A Reporter is used to record parsed benchmarks somewhere."""

    def __init__(self, stream: Optional[IO[str]] = None):
        self.stream = stream if stream is not None else sys.stdout

    @abstractmethod
    def report(self, suite: Suite):
        """Save every benchmark in the suite."""
        pass

    def close(self):
        """Do whatever cleanup is required after all suites are reported."""
        if self.stream is not sys.stdout:
            self.stream.close()


class StdoutReporter(Reporter):
    """Default reporter implementation, writes human-readable lines."""

    def report(self, suite: Suite):
        kind = "official" if suite.official else "unofficial"
        print(f'{suite.name} ({kind}): {len(suite.benchmarks)} benchmarks',
              file=self.stream)
        if suite.conditions:
            conditions = " ".join(f"{c.name}={c.value}" for c in suite.conditions)
            print(f"shared conditions: {conditions}", file=self.stream)
        for bm in suite.benchmarks:
            print(f"{bm.name}: {bm.iterations} iterations", file=self.stream)
            if bm.conditions:
                conditions = " ".join(f"{c.name}={c.value}" for c in bm.conditions)
                print(f"  conditions: {conditions}", file=self.stream)
            for metric in bm.metrics:
                print(f"  {metric.name}={metric.sample} {metric.unit}",
                      file=self.stream)


class JSONReporter(Reporter):
    def report(self, suite: Suite):
        """Write one JSON object per benchmark, tagged with the suite it came
        from, so results can be appended to a file and loaded line by line.
        """
        for bm in suite.benchmarks:
            row = dataclasses.asdict(bm)
            row["suite"] = suite.name
            row["suite_timestamp"] = suite.timestamp
            row["suite_conditions"] = [dataclasses.asdict(c) for c in suite.conditions]
            print(json.dumps(row), file=self.stream, flush=True)

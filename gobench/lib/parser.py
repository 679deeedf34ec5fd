#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.
from abc import ABCMeta, abstractmethod
from typing import List, Optional

from gobench.lib.record import Benchmark, Metadata


class Parser(object, metaclass=ABCMeta):
    """Parser is the link between raw benchmark output and storage records.
    A Parser is given the complete output of a benchmark run and returns one
    Benchmark record for every result it found.
    """

    @abstractmethod
    def parse(
        self, output: str, metadata: Optional[Metadata], official: bool
    ) -> List[Benchmark]:
        """Convert benchmark output into a list of records.

        Raises:
            ParseError: output contains a result line that can't be parsed
        """
        pass

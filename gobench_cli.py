#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.

# main functionality is actually provided in gobench/cli.py
from gobench.cli import gobench


def entry_point():
    gobench(obj={})


if __name__ == "__main__":
    entry_point()

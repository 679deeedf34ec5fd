#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.

import dataclasses
import logging
import sys
from datetime import datetime, timezone

import click
from click.core import ParameterSource
from gobench.lib.config import default_config_path, load_config
from gobench.lib.errors import ConfigError, InvalidCharacterError, ParseError
from gobench.lib.parameters import Parameter, parameters_to_name
from gobench.lib.parser_factory import ParserFactory
from gobench.lib.record import Suite, shared_conditions
from gobench.lib.reporter_factory import ReporterFactory


@click.group()
@click.option("-v", "--verbose", count=True, default=0)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=default_config_path,
)
@click.pass_context
def gobench(ctx, verbose, config_path):
    ctx.ensure_object(dict)

    # warn is 30, should default to 30 when verbose=0
    # each level below warning is 10 less than the previous
    log_level = verbose * (-10) + 30
    logging.basicConfig(format="%(levelname)s:%(name)s: %(message)s", level=log_level)
    logger = logging.getLogger(__name__)

    try:
        ctx.obj["config"] = load_config(config_path)
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(1)


@gobench.command()
@click.argument("output", type=click.File("r"), default="-")
@click.option("--suite", "-s", "suite_name")
@click.option("--official/--unofficial", default=False)
@click.option("--parser", "parser_name")
@click.option("--json", "-j", "output_json", is_flag=True)
@click.option("--output", "-o", "output_file", type=click.File("a"))
@click.option("--cl")
@click.option("--iteration-id")
@click.option("--pending-cl")
@click.option("--timestamp")
@click.pass_context
def parse(
    ctx,
    output,
    suite_name,
    official,
    parser_name,
    output_json,
    output_file,
    cl,
    iteration_id,
    pending_cl,
    timestamp,
):
    """Parse go test -bench OUTPUT (default stdin) and report the results."""
    logger = logging.getLogger("gobench.parse")
    config = ctx.obj["config"]

    if ctx.get_parameter_source("official") == ParameterSource.DEFAULT:
        official = config.official
    overrides = {
        "cl": cl,
        "iteration_id": iteration_id,
        "pending_cl": pending_cl,
        "timestamp": timestamp,
    }
    metadata = dataclasses.replace(
        config.metadata, **{k: v for k, v in overrides.items() if v is not None}
    )

    parser_name = parser_name or config.parser
    try:
        parser = ParserFactory.create(parser_name)
    except KeyError as e:
        logger.error(e.args[0])
        sys.exit(1)

    try:
        benchmarks = parser.parse(output.read(), metadata, official)
    except ParseError as e:
        logger.error(str(e))
        sys.exit(1)

    suite = Suite(
        name=suite_name or config.suite,
        benchmarks=benchmarks,
        conditions=shared_conditions(benchmarks),
        official=official,
        timestamp=metadata.timestamp
        or datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    )

    reporter_name = config.reporter
    if output_json or output_file:
        reporter_name = "json"
    reporter = ReporterFactory.create(reporter_name, stream=output_file)
    reporter.report(suite)
    reporter.close()


@gobench.command()
@click.argument("params", nargs=-1, required=True)
def name(params):
    """Build a sub-benchmark name from NAME.VALUE or NAME=VALUE PARAMS."""
    logger = logging.getLogger("gobench.name")

    parameters = []
    for param in params:
        key, sep, value = param.partition("=")
        if not sep:
            key, sep, value = param.partition(".")
        # a bare name is a flag, same as name_to_parameters reads it
        parameters.append(Parameter(name=key, value=value if sep else key))

    try:
        click.echo(parameters_to_name(parameters))
    except InvalidCharacterError as e:
        logger.error(str(e))
        sys.exit(1)

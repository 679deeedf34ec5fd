#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from gobench.lib.errors import ConfigError
from gobench.lib.record import Metadata


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GOBENCH_CONFIG"
DEFAULT_CONFIG_PATH = "gobench.yml"


@dataclass
class Config(object):
    """Defaults for a parse run, command line options take precedence.

    Example gobench.yml:
        suite: runsc
        official: false
        parser: golang
        reporter: json
        metadata:
          cl: "332010386"
          iteration_id: "3"
    """

    suite: str = "gobench"

    official: bool = False

    parser: str = "golang"

    reporter: str = "default"

    metadata: Metadata = field(default_factory=Metadata)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "Config":
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ConfigError(
                "Unknown config option(s): {}".format(", ".join(sorted(unknown)))
            )
        config = dict(config)
        for key in ("suite", "parser", "reporter"):
            if key in config and not isinstance(config[key], str):
                raise ConfigError(f'"{key}" must be a string, got {config[key]!r}')
        # a quoted "false" would otherwise be truthy
        if "official" in config and not isinstance(config["official"], bool):
            raise ConfigError(
                f'"official" must be true or false, got {config["official"]!r}'
            )

        metadata = config.pop("metadata", None)
        if metadata is None:
            metadata = {}
        if not isinstance(metadata, dict):
            raise ConfigError("metadata must be a mapping")
        for key, value in metadata.items():
            # yaml happily turns a CL number into an int
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise ConfigError(
                    f'metadata "{key}" must be a string or number, got {value!r}'
                )
        try:
            metadata = Metadata(**{k: str(v) for k, v in metadata.items()})
        except TypeError as e:
            raise ConfigError(f"Invalid metadata: {e}") from e
        return cls(metadata=metadata, **config)


def default_config_path() -> str:
    return os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)


def load_config(path: str) -> Config:
    """Load a Config from a yaml file, a missing file means all defaults."""
    if not os.path.exists(path):
        logger.info('No config file at "{}", using defaults'.format(path))
        return Config()

    logger.info('Loading config from "{}"'.format(path))
    with open(path) as config_file:
        try:
            raw = yaml.safe_load(config_file)
        except yaml.YAMLError as e:
            raise ConfigError(f'Failed to parse "{path}": {e}') from e

    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ConfigError(f'"{path}" must contain a mapping')
    return Config.from_dict(raw)

#!/usr/bin/env python3

from .factory import BaseFactory
from .reporter import JSONReporter, Reporter, StdoutReporter

ReporterFactory = BaseFactory(Reporter)

ReporterFactory.register("stdout", StdoutReporter)
ReporterFactory.register("default", StdoutReporter)
ReporterFactory.register("json", JSONReporter)

#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.

import unittest

from gobench.lib.factory import BaseFactory
from gobench.lib.parser import Parser
from gobench.lib.parser_factory import ParserFactory
from gobench.lib.reporter import JSONReporter, Reporter, StdoutReporter
from gobench.lib.reporter_factory import ReporterFactory
from gobench.plugins.parsers.golang import GoParser


class EchoParser(Parser):
    def __init__(self, prefix=''):
        self.prefix = prefix

    def parse(self, output, metadata, official):
        return [self.prefix + output]


class TestBaseFactory(unittest.TestCase):

    def setUp(self):
        self.factory = BaseFactory(Parser)

    def test_register_nonsubclass(self):
        """Can't register a non-subclass"""
        with self.assertRaises(AssertionError):
            class Dummy:
                pass
            self.factory.register('dummy', Dummy)

    def test_create_unregistered(self):
        """Can't create unregistered type"""
        with self.assertRaises(KeyError) as e:
            self.factory.create('dummy')
        self.assertIn('No Parser named "dummy"', e.exception.args[0])

    def test_create_registered(self):
        """Can create registered type, passing constructor arguments"""
        self.factory.register('echo', EchoParser)
        self.assertIsInstance(self.factory.create('echo'), EchoParser)
        parser = self.factory.create('echo', prefix='> ')
        self.assertListEqual(['> hi'], parser.parse('hi', None, False))

    def test_registered_names(self):
        """Can get list of registered classes"""
        self.assertListEqual([], self.factory.registered_names)
        self.factory.register('echo', EchoParser)
        self.factory.register('golang', GoParser)
        self.assertListEqual(['echo', 'golang'], self.factory.registered_names)


class TestBundledPlugins(unittest.TestCase):

    def test_parsers(self):
        self.assertIsInstance(ParserFactory.create('golang'), GoParser)

    def test_reporters(self):
        self.assertCountEqual(['stdout', 'default', 'json'],
                              ReporterFactory.registered_names)
        self.assertIsInstance(ReporterFactory.create('default'), StdoutReporter)
        self.assertIsInstance(ReporterFactory.create('json'), JSONReporter)
        self.assertTrue(issubclass(JSONReporter, Reporter))


if __name__ == '__main__':
    unittest.main()

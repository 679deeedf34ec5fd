#!/usr/bin/env python3
# Copyright (c) 2017-present, Facebook, Inc.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree. An additional grant
# of patent rights can be found in the PATENTS file in the same directory.

import json
import unittest

from click.testing import CliRunner

from gobench.cli import gobench


OUTPUT = '''goos: linux
BenchmarkFoo-8 100 1234 ns/op 16 B/op
BenchmarkFoo/size.large/mode.fast-4 10 5.5 custom.ms
PASS
'''


class TestCli(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()

    def invoke(self, args, **kwargs):
        return self.runner.invoke(
            gobench, ['-c', 'missing.yml'] + args, obj={}, **kwargs)

    def test_parse_stdin(self):
        """Results are printed in human-readable form by default"""
        with self.runner.isolated_filesystem():
            result = self.invoke(['parse', '--suite', 'runsc'], input=OUTPUT)
        self.assertEqual(0, result.exit_code, result.output)
        self.assertIn('runsc (unofficial): 2 benchmarks', result.output)
        self.assertIn('conditions: GOMAXPROCS=4 size=large mode=fast',
                      result.output)
        self.assertIn('custom=5.5 ms', result.output)
        self.assertNotIn('shared conditions', result.output)

    def test_parse_shared_conditions(self):
        """Conditions every benchmark has are reported for the suite"""
        output = 'BenchmarkA/runtime.runsc-8 1 1 ns/op\nBenchmarkB-8 1 2 ns/op\n'
        with self.runner.isolated_filesystem():
            result = self.invoke(['parse', '--json'], input=output)
        self.assertEqual(0, result.exit_code, result.output)
        for line in result.output.splitlines():
            self.assertListEqual([{'name': 'GOMAXPROCS', 'value': '8'}],
                                 json.loads(line)['suite_conditions'])

    def test_parse_json(self):
        with self.runner.isolated_filesystem():
            result = self.invoke(['parse', '--json', '--official',
                                  '--cl', '42', '--timestamp', 'now'],
                                 input=OUTPUT)
        self.assertEqual(0, result.exit_code, result.output)
        rows = [json.loads(line) for line in result.output.splitlines()]
        self.assertListEqual(['Foo', 'Foo'], [r['name'] for r in rows])
        self.assertTrue(all(r['official'] for r in rows))
        self.assertEqual('42', rows[0]['metadata']['cl'])
        self.assertEqual('now', rows[0]['suite_timestamp'])
        self.assertEqual('gobench', rows[0]['suite'])

    def test_parse_file_to_file(self):
        """Results are appended to the output file as JSON lines"""
        with self.runner.isolated_filesystem():
            with open('bench.txt', 'w') as f:
                f.write(OUTPUT)
            for _ in range(2):
                result = self.invoke(['parse', 'bench.txt', '-o', 'out.jsonl'])
                self.assertEqual(0, result.exit_code, result.output)
            with open('out.jsonl') as f:
                rows = [json.loads(line) for line in f]
        self.assertEqual(4, len(rows))
        self.assertEqual('', result.output)

    def test_parse_config(self):
        """Config file provides defaults, options override them"""
        with self.runner.isolated_filesystem():
            with open('gobench.yml', 'w') as f:
                f.write('suite: fromconfig\nreporter: json\n'
                        'metadata:\n  cl: "7"\n  iteration_id: "2"\n')
            result = self.runner.invoke(
                gobench, ['-c', 'gobench.yml', 'parse', '--cl', '8'],
                input=OUTPUT, obj={})
        self.assertEqual(0, result.exit_code, result.output)
        row = json.loads(result.output.splitlines()[0])
        self.assertEqual('fromconfig', row['suite'])
        self.assertEqual('8', row['metadata']['cl'])
        self.assertEqual('2', row['metadata']['iteration_id'])

    def test_parse_bad_config(self):
        with self.runner.isolated_filesystem():
            with open('gobench.yml', 'w') as f:
                f.write('bogus: 1\n')
            result = self.runner.invoke(
                gobench, ['-c', 'gobench.yml', 'parse'], input=OUTPUT, obj={})
        self.assertEqual(1, result.exit_code)

    def test_parse_quoted_official(self):
        """A quoted official flag in the config is rejected, not truthy"""
        with self.runner.isolated_filesystem():
            with open('gobench.yml', 'w') as f:
                f.write('official: "false"\n')
            result = self.runner.invoke(
                gobench, ['-c', 'gobench.yml', 'parse', '--json'],
                input=OUTPUT, obj={})
        self.assertEqual(1, result.exit_code)
        self.assertNotIn('"official": true', result.output)

    def test_parse_error(self):
        """A bad benchmark line fails the command"""
        with self.runner.isolated_filesystem():
            result = self.invoke(
                ['parse', '--json'],
                input=OUTPUT + 'BenchmarkX-1 1 notanumber ns/op\n')
        self.assertEqual(1, result.exit_code)
        self.assertNotIn('"name"', result.output)

    def test_parse_unknown_parser(self):
        with self.runner.isolated_filesystem():
            result = self.invoke(['parse', '--parser', 'fio'], input=OUTPUT)
        self.assertEqual(1, result.exit_code)

    def test_name(self):
        """name builds a sub-benchmark name from parameters"""
        result = self.invoke(['name', 'size=large', 'mode.fast', 'nocache'])
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual('size.large/mode.fast/nocache.nocache\n',
                         result.output)

    def test_name_illegal(self):
        result = self.invoke(['name', 'size=1.5'])
        self.assertEqual(1, result.exit_code)


if __name__ == '__main__':
    unittest.main()

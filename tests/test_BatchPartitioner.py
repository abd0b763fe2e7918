#!/usr/bin/env python
# -*- coding: utf-8 -*-

import itertools
import random
import unittest

import randrun as rr

class BatchPartitionerTestCase(unittest.TestCase):
    def batches(self, fixed, variable, once=False, **kwargs):
        partitioner = rr.BatchPartitioner(fixed, variable, **kwargs)
        return list(partitioner.batches(once))

    def argvs(self, *args, **kwargs):
        return [batch.argv for batch in self.batches(*args, **kwargs)]

    def assertCovers(self, batches, fixed, variable):
        args = []
        for batch in batches:
            self.assertEqual(batch.argv[:len(fixed)], fixed)
            args.extend(batch.argv[len(fixed):])
        self.assertEqual(args, variable)
        self.assertEqual([batch.last for batch in batches],
                         [False] * (len(batches) - 1) + [True])

    def test_count_limit(self):
        self.assertEqual(self.argvs(['cmd'], ['a', 'b', 'c', 'd'], max_args=3),
                         [['cmd', 'a', 'b'], ['cmd', 'c', 'd']])

    def test_count_limit_uneven(self):
        self.assertEqual(self.argvs(['cmd'], ['a', 'b', 'c'], max_args=3),
                         [['cmd', 'a', 'b'], ['cmd', 'c']])

    def test_unlimited(self):
        batches = self.batches(['cmd', '-v'], ['a', 'b', 'c'])
        self.assertEqual(batches, [rr.Batch(['cmd', '-v', 'a', 'b', 'c'], True)])

    def test_empty_variable_pool(self):
        self.assertEqual(self.batches(['cmd'], []), [rr.Batch(['cmd'], True)])

    def test_no_fixed_prefix(self):
        self.assertEqual(self.argvs([], ['a', 'b', 'c'], max_args=2),
                         [['a', 'b'], ['c']])

    def test_fixed_prefix_too_long(self):
        for max_args in [1, 2]:
            with self.assertRaises(rr.UserArgumentsError):
                rr.BatchPartitioner(['cmd', '-v'], ['a'], max_args=max_args)

    def test_size_limit(self):
        # 'cmd' costs 4; each one-letter argument costs 2.
        self.assertEqual(self.argvs(['cmd'], ['a', 'b', 'c', 'd'], max_size=9),
                         [['cmd', 'a', 'b'], ['cmd', 'c', 'd']])

    def test_size_limit_is_strict(self):
        self.assertEqual(self.argvs(['cmd'], ['a', 'b', 'c', 'd'], max_size=8),
                         [['cmd', 'a'], ['cmd', 'b'], ['cmd', 'c'], ['cmd', 'd']])

    def test_size_counts_encoded_bytes(self):
        self.assertEqual(rr.BatchPartitioner.arg_size('é'), 3)
        self.assertEqual(self.argvs(['cmd'], ['é', 'é'], max_size=8),
                         [['cmd', 'é'], ['cmd', 'é']])

    def test_oversized_argument_alone(self):
        self.assertEqual(self.argvs(['cmd'], ['a', 'x' * 20, 'b'], max_size=10),
                         [['cmd', 'a'], ['cmd', 'x' * 20], ['cmd', 'b']])

    def test_both_limits(self):
        variable = ['aa', 'b', 'cc', 'd', 'e', 'ffff']
        self.assertEqual(self.argvs(['x'], variable, max_args=3, max_size=9),
                         [['x', 'aa', 'b'], ['x', 'cc', 'd'], ['x', 'e'], ['x', 'ffff']])

    def test_once(self):
        self.assertEqual(self.batches(['cmd'], ['a', 'b', 'c'], True, max_args=2),
                         [rr.Batch(['cmd', 'a'], True)])

    def test_next_batch(self):
        partitioner = rr.BatchPartitioner(['cmd'], ['a', 'b', 'c'], max_args=3)
        self.assertEqual(partitioner.next_batch(0), (['cmd', 'a', 'b'], 2, False))
        self.assertEqual(partitioner.next_batch(2), (['cmd', 'c'], 3, True))

    def test_batches_respect_limits(self):
        rng = random.Random(77)
        fixed = ['cmd', '-x', '--']
        fixed_size = sum(len(arg) + 1 for arg in fixed)
        for max_args, max_size in itertools.product([4, 5, 9], [30, 45, 200]):
            variable = ['a' * rng.randint(0, 12) for _ in range(rng.randint(1, 40))]
            batches = self.batches(fixed, variable, max_args=max_args, max_size=max_size)
            self.assertCovers(batches, fixed, variable)
            for batch in batches:
                size = sum(len(arg) + 1 for arg in batch.argv)
                self.assertLessEqual(len(batch.argv), max_args)
                if len(batch.argv) > len(fixed) + 1:
                    self.assertLess(size, max_size)
                else:
                    self.assertGreater(size, fixed_size)

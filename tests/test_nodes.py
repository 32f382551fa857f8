from __future__ import annotations

import math
import unittest

import numpy as np

from surfercore.errors import InvalidDegree, InvalidInterval
from surfercore.nodes import CANONICAL_INTERVAL, ChebyshevNodes, EquispacedNodes, Interval, validate_degree

GENERATORS = (EquispacedNodes(), ChebyshevNodes())


class TestInterval(unittest.TestCase):
    def test_canonical_interval(self) -> None:
        self.assertEqual(CANONICAL_INTERVAL.lower, -1.0)
        self.assertEqual(CANONICAL_INTERVAL.upper, 1.0)
        self.assertEqual(CANONICAL_INTERVAL.midpoint, 0.0)
        self.assertEqual(CANONICAL_INTERVAL.half_width, 1.0)
        self.assertEqual(CANONICAL_INTERVAL.width, 2.0)
        self.assertTrue(CANONICAL_INTERVAL.contains(-1.0))
        self.assertFalse(CANONICAL_INTERVAL.contains(1.5))

    def test_rejects_degenerate_bounds(self) -> None:
        for lower, upper in [(1.0, 1.0), (2.0, -2.0), (0.0, math.inf), (math.nan, 1.0)]:
            with self.assertRaises(InvalidInterval):
                Interval(lower, upper)

    def test_invalid_interval_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            Interval(1.0, 0.0)


class TestValidateDegree(unittest.TestCase):
    def test_accepts_integral_values(self) -> None:
        self.assertEqual(validate_degree(0), 0)
        self.assertEqual(validate_degree(7.0), 7)
        self.assertEqual(validate_degree(np.int64(4)), 4)

    def test_rejects_invalid_values(self) -> None:
        for bad in (-1, -7.0, 2.5, True, math.nan, "3", None):
            with self.assertRaises(InvalidDegree):
                validate_degree(bad)


class TestNodeGenerators(unittest.TestCase):
    def test_count_and_bounds(self) -> None:
        for interval in (CANONICAL_INTERVAL, Interval(0.0, 3.0)):
            for cls in (EquispacedNodes, ChebyshevNodes):
                gen = cls(interval=interval)
                for d in range(0, 25):
                    nodes = gen.generate(d)
                    self.assertEqual(nodes.shape, (d + 1,))
                    self.assertTrue(np.all(nodes >= interval.lower))
                    self.assertTrue(np.all(nodes <= interval.upper))

    def test_deterministic(self) -> None:
        for gen in GENERATORS:
            for d in (0, 1, 7, 16):
                a = gen.generate(d)
                b = gen.generate(d)
                self.assertIsNot(a, b)
                self.assertEqual(a.tobytes(), b.tobytes())

    def test_degree_zero_single_node(self) -> None:
        interval = Interval(2.0, 4.0)
        for cls in (EquispacedNodes, ChebyshevNodes):
            nodes = cls(interval=interval).generate(0)
            self.assertEqual(nodes.tolist(), [3.0])

    def test_negative_degree_rejected(self) -> None:
        for gen in GENERATORS:
            for d in (-1, -10):
                with self.assertRaises(InvalidDegree):
                    gen.generate(d)

    def test_nodes_are_read_only(self) -> None:
        for gen in GENERATORS:
            nodes = gen.generate(3)
            with self.assertRaises(ValueError):
                nodes[0] = 10.0

    def test_equispaced_uniform_gaps(self) -> None:
        gen = EquispacedNodes(interval=Interval(-2.0, 5.0))
        for d in range(1, 20):
            nodes = gen.generate(d)
            gaps = np.diff(nodes)
            np.testing.assert_allclose(gaps, 7.0 / d, rtol=1.0e-12)
            self.assertEqual(nodes[0], -2.0)
            self.assertEqual(nodes[-1], 5.0)

    def test_chebyshev_reference_fixture(self) -> None:
        nodes = ChebyshevNodes().generate(3)
        expected = [math.cos((2 * i + 1) * math.pi / 8) for i in range(4)]
        np.testing.assert_allclose(nodes, expected, rtol=0.0, atol=1.0e-12)
        np.testing.assert_allclose(nodes, [0.9239, 0.3827, -0.3827, -0.9239], atol=1.0e-4)

    def test_chebyshev_symmetry(self) -> None:
        for interval in (CANONICAL_INTERVAL, Interval(0.0, 2.0), Interval(-3.0, 0.5)):
            gen = ChebyshevNodes(interval=interval)
            mid = interval.midpoint
            for d in range(0, 20):
                nodes = gen.generate(d)
                for x in nodes:
                    mirrored = mid - (x - mid)
                    self.assertLess(float(np.min(np.abs(nodes - mirrored))), 1.0e-12)

    def test_chebyshev_clusters_towards_endpoints(self) -> None:
        gen = ChebyshevNodes()
        for d in range(3, 25):
            gaps = np.diff(np.sort(gen.generate(d)))
            m = len(gaps)
            for i in range((m - 1) // 2):
                self.assertLess(gaps[i], gaps[i + 1])
                self.assertLess(gaps[m - 1 - i], gaps[m - 2 - i])


if __name__ == "__main__":
    unittest.main()

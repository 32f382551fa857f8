from __future__ import annotations

import contextlib
import io
import json
import unittest

import numpy as np

from surfercore.cli import main
from surfercore.config import SurferConfig
from surfercore.errors import InvalidDegree, InvalidInterval, UnknownStrategy
from surfercore.nodes import CANONICAL_INTERVAL
from surfercore.selector import AlgorithmSelector, Strategy


def _run(argv: list[str]):
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        code = main(argv)
    return code, json.loads(buf.getvalue())


class TestSurferConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = SurferConfig()
        self.assertEqual(cfg.strategy, "chebyshev")
        self.assertEqual(cfg.degree, 7)
        self.assertEqual(cfg.backend, "numpy")
        self.assertEqual(cfg.interval(), CANONICAL_INTERVAL)

    def test_strategy_names_match_selector(self) -> None:
        cfg = SurferConfig(strategy=" Chebyshev ")
        self.assertEqual(cfg.strategy, "chebyshev")
        self.assertEqual(AlgorithmSelector.from_config(cfg).strategy, Strategy.CHEBYSHEV)

    def test_validation(self) -> None:
        with self.assertRaises(ValueError):
            SurferConfig(strategy="spline")
        with self.assertRaises(UnknownStrategy):
            SurferConfig(strategy="spline")
        with self.assertRaises(ValueError):
            SurferConfig(backend="cython")
        with self.assertRaises(InvalidDegree):
            SurferConfig(degree=-3)
        with self.assertRaises(InvalidInterval):
            SurferConfig(interval_lower=1.0, interval_upper=-1.0)


class TestCli(unittest.TestCase):
    def test_nodes(self) -> None:
        code, nodes = _run(["nodes", "--strategy", "equispaced", "--degree", "4"])
        self.assertEqual(code, 0)
        np.testing.assert_allclose(nodes, [-1.0, -0.5, 0.0, 0.5, 1.0])

    def test_weights(self) -> None:
        code, weights = _run(["weights", "--degree", "3"])
        self.assertEqual(code, 0)
        self.assertEqual(len(weights), 4)

    def test_fit(self) -> None:
        code, coeffs = _run(["fit", "--strategy", "equispaced", "--degree", "2", "--values", "1", "0", "1"])
        self.assertEqual(code, 0)
        np.testing.assert_allclose(coeffs, [0.0, 0.0, 1.0], atol=1.0e-12)

    def test_strategies(self) -> None:
        _, names = _run(["strategies"])
        self.assertEqual(names, ["equispaced", "chebyshev"])

    def test_invalid_input_exits(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["nodes", "--degree", "-1"])
            self.assertEqual(ctx.exception.code, 2)
            with self.assertRaises(SystemExit):
                main(["fit", "--degree", "2", "--values", "1", "2"])


if __name__ == "__main__":
    unittest.main()

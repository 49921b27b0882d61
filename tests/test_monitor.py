import unittest

import numpy as np

from beakerlab.bench import Bench
from beakerlab.gui.monitor import MonitorSession, PourInputs
from beakerlab.mixing import MixingEngine


class TestMonitorSession(unittest.TestCase):
    def test_series_follow_pours(self):
        session = MonitorSession(Bench(MixingEngine()))
        session.pour(PourInputs("B1", "hcl", 10))
        session.pour(PourInputs("B1", "naoh", 5))
        session.pour(PourInputs("B2", "naoh", 5))
        session.pour(PourInputs("B1", "naoh", 10))

        index, ph = session.log_for("B1").ph_series()
        np.testing.assert_array_equal(index, [1, 2, 3])
        np.testing.assert_allclose(ph, [5.0, 6.0, 8.0])

        _, volume = session.log_for("B1").volume_series()
        np.testing.assert_allclose(volume, [10.0, 15.0, 25.0])
        self.assertEqual(len(session.log_for("B2").readouts), 1)

    def test_empty_log(self):
        session = MonitorSession(Bench(MixingEngine()))
        index, ph = session.log_for("none").ph_series()
        self.assertEqual(index.size, 0)
        self.assertEqual(ph.size, 0)


if __name__ == '__main__':
    unittest.main()

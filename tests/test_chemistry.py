import unittest

from beakerlab.chemistry import (
    IndicatorRule,
    LinearPHModel,
    NeutralizationRule,
    PrecipitateRule,
    derive_color,
)
from beakerlab.constants import COLOR_NEUTRALIZED, COLOR_PINK, COLOR_PRECIPITATE, COLOR_WATER


class TestLinearPHModel(unittest.TestCase):
    def setUp(self):
        self.model = LinearPHModel()

    def test_neutral_when_balanced(self):
        self.assertEqual(self.model.ph({}), 7.0)
        self.assertEqual(self.model.ph({"hcl": 12.0, "naoh": 12.0}), 7.0)

    def test_linear_acid_branch(self):
        # 7 - 25 / 5 = 2
        self.assertAlmostEqual(self.model.ph({"hcl": 25.0}), 2.0)
        self.assertAlmostEqual(self.model.ph({"hcl": 30.0, "naoh": 5.0}), 2.0)

    def test_linear_base_branch(self):
        self.assertAlmostEqual(self.model.ph({"hcl": 5.0, "naoh": 10.0}), 8.0)

    def test_clamps(self):
        self.assertEqual(self.model.ph({"hcl": 1000.0}), 0.5)
        self.assertEqual(self.model.ph({"naoh": 1000.0}), 13.5)

    def test_other_chemicals_are_inert(self):
        self.assertEqual(self.model.ph({"water": 50.0, "salt": 3.0}), 7.0)

    def test_custom_identifiers(self):
        model = LinearPHModel(acid_id="h2so4", base_id="koh", divisor=2.0)
        self.assertAlmostEqual(model.ph({"h2so4": 4.0}), 5.0)
        self.assertEqual(model.ph({"hcl": 4.0}), 7.0)


class TestColorRules(unittest.TestCase):
    def test_default_is_water(self):
        self.assertEqual(derive_color({}), COLOR_WATER)
        self.assertEqual(derive_color({"water": 10.0}), COLOR_WATER)

    def test_indicator_needs_excess_base(self):
        self.assertEqual(derive_color({"phenolph": 1.0, "naoh": 2.0}), COLOR_PINK)
        self.assertEqual(derive_color({"phenolph": 1.0}), COLOR_WATER)
        self.assertFalse(IndicatorRule().matches({"phenolph": 1.0, "hcl": 3.0, "naoh": 3.0}))

    def test_precipitate_accepts_either_silver_id(self):
        self.assertTrue(PrecipitateRule().matches({"silver": 1.0, "salt": 1.0}))
        self.assertTrue(PrecipitateRule().matches({"agno3": 1.0, "salt": 1.0}))
        self.assertFalse(PrecipitateRule().matches({"agno3": 1.0}))
        self.assertFalse(PrecipitateRule().matches({"salt": 1.0}))

    def test_neutralization_needs_both(self):
        self.assertTrue(NeutralizationRule().matches({"hcl": 1.0, "naoh": 9.0}))
        self.assertFalse(NeutralizationRule().matches({"hcl": 1.0}))

    def test_precipitate_overrides_indicator(self):
        components = {"phenolph": 1.0, "naoh": 5.0, "agno3": 1.0, "salt": 1.0}
        self.assertEqual(derive_color(components), COLOR_PRECIPITATE)

    def test_last_matching_rule_wins(self):
        # Indicator, precipitate and neutralization all match; neutralization is last.
        components = {"hcl": 5.0, "naoh": 10.0, "phenolph": 1.0, "agno3": 1.0, "salt": 1.0}
        self.assertEqual(derive_color(components), COLOR_NEUTRALIZED)

    def test_rule_order_is_respected(self):
        components = {"hcl": 5.0, "naoh": 10.0, "phenolph": 1.0, "agno3": 1.0, "salt": 1.0}
        reordered = (NeutralizationRule(), IndicatorRule(), PrecipitateRule())
        self.assertEqual(derive_color(components, reordered), COLOR_PRECIPITATE)


if __name__ == '__main__':
    unittest.main()

import unittest

from gpacalc.config.settings import CREDIT_HOUR_OPTIONS, _credit_hours_option, settings


class SettingsTests(unittest.TestCase):
    def test_default_credit_hours_is_an_option(self):
        self.assertIn(settings.default_credit_hours, CREDIT_HOUR_OPTIONS)

    def test_credit_hours_option(self):
        self.assertEqual(_credit_hours_option("2"), 2)
        self.assertEqual(_credit_hours_option("5"), 3)
        self.assertEqual(_credit_hours_option("0"), 3)
        self.assertEqual(_credit_hours_option("three"), 3)


if __name__ == "__main__":
    unittest.main()

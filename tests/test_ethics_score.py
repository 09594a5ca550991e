import unittest

from services.ethics_score import (
    brand_ethics_score,
    calculate_ethics_score,
    certification_ethics_score,
    country_ethics_score,
    ingredient_ethics_penalty,
)


class TestEthicsScore(unittest.TestCase):

    def test_certification_contribution(self):
        self.assertEqual(certification_ethics_score([]), -10)
        self.assertEqual(certification_ethics_score(["en:organic"]), 10)
        self.assertEqual(certification_ethics_score(["en:vegan"]), 0)
        self.assertEqual(certification_ethics_score(["en:kosher"]), -7)
        self.assertEqual(certification_ethics_score(["en:organic", "en:fair-trade"]), 10)
        # the local label carries no ethics weight
        self.assertEqual(certification_ethics_score(["en:local"]), -10)
        self.assertEqual(certification_ethics_score(["en:local", "en:organic"]), 10)

    def test_country_contribution(self):
        self.assertEqual(country_ethics_score("switzerland"), 12)
        self.assertEqual(country_ethics_score("mexico"), -2)
        # table order decides, not text order
        self.assertEqual(country_ethics_score("mexico, germany"), 8)
        self.assertEqual(country_ethics_score("peru"), 0)
        self.assertEqual(country_ethics_score(""), 0)

    def test_ingredient_penalty_floor(self):
        self.assertEqual(ingredient_ethics_penalty("water, preservatives"), -5)
        self.assertEqual(ingredient_ethics_penalty("sugar, palm oil, preservatives"), -15)
        self.assertEqual(ingredient_ethics_penalty(""), 0)

    def test_brand_contribution(self):
        self.assertEqual(brand_ethics_score("Patagonia Provisions"), 10)
        self.assertEqual(brand_ethics_score("Nestlé"), -10)
        self.assertEqual(brand_ethics_score("coca-cola"), -8)
        self.assertEqual(brand_ethics_score("Local Farm"), 0)
        self.assertEqual(brand_ethics_score(""), 0)

    def test_total(self):
        self.assertEqual(calculate_ethics_score([], "", "", ""), 40)
        self.assertEqual(calculate_ethics_score(["en:organic"], "mexico", "", ""), 58)
        self.assertEqual(calculate_ethics_score([], "", "palm oil", "monsanto"), 10)


if __name__ == '__main__':
    unittest.main()

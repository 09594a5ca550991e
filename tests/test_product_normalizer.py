import unittest

from pydantic import ValidationError

from interfaces.productModels import Certification, Material, PackagingType, Product, RawExternalProduct
from services.product_normalizer import build_product, resolve_product

EXAMPLE_PRODUCT = {
    "code": "7501000000001",
    "product_name": "Leche entera",
    "categories": "dairy",
    "countries": "mexico",
    "packaging_materials_tags": ["en:glass"],
    "labels_tags": ["en:organic"],
}

VARIED_PRODUCTS = [
    {},
    EXAMPLE_PRODUCT,
    {"categories": "beef, processed meats", "countries": "China", "packaging_text": "plastic film",
     "ingredients_text": "Beef, palm oil, artificial colors, trans fats", "brands": "Monsanto", "nutriscore_grade": "e"},
    {"categories": "fresh vegetables", "countries": "en:mexico", "packaging_materials_tags": ["en:paper", "en:glass", "en:pvc"],
     "labels_tags": ["organic", "fair-trade", "rainforest-alliance", "carbon-neutral", "vegan", "cruelty-free"],
     "brands": "Patagonia", "nutriscore_grade": "a"},
    {"product_name": "Doritos", "brands": "Sabritas", "ecoscore_score": 250},
    {"ecoscore_score": -4, "labels_tags": "en:kosher,en:halal", "countries": ["Spain", "France"]},
]


class TestResolveProduct(unittest.TestCase):

    def test_display_name_fallbacks(self):
        self.assertEqual(resolve_product({"brands": "Acme", "categories": "Snacks, Chips"}, "mx").display_name, "Acme Snacks")
        self.assertEqual(resolve_product({"brands": "Acme"}, "mx").display_name, "Acme")
        self.assertEqual(resolve_product({"categories": "Snacks"}, "mx").display_name, "Snacks")
        self.assertEqual(resolve_product({}, "mx").display_name, "Product")

    def test_category_and_image(self):
        resolved = resolve_product({
            "categories": " Snacks , Chips",
            "image_url": "https://example.org/a.jpg",
            "image_front_url": "https://example.org/front.jpg",
        }, "mx")
        self.assertEqual(resolved.category, "Snacks")
        self.assertEqual(resolved.image_url, "https://example.org/front.jpg")
        self.assertEqual(resolve_product({}, "mx").category, "General")

    def test_locality_sources(self):
        self.assertTrue(resolve_product({"countries": "en:mexico"}, "mx").is_local)
        self.assertTrue(resolve_product({"manufacturing_places": "Guadalajara, México"}, "mx").is_local)
        self.assertTrue(resolve_product({"origins": "France"}, "fr").is_local)
        self.assertFalse(resolve_product({"countries": "United States"}, "mx").is_local)
        self.assertFalse(resolve_product({}, "mx").is_local)

    def test_malformed_fields_degrade(self):
        resolved = resolve_product({
            "ecoscore_score": "n/a",
            "labels_tags": "en:organic, en:vegan",
            "packaging_materials_tags": None,
            "nutriscore_grade": "B",
        }, "mx")
        self.assertIsNone(resolved.authoritative_eco_score)
        self.assertEqual(resolved.labels, ("en:organic", "en:vegan"))
        self.assertEqual(resolved.material_tags, ())
        self.assertEqual(resolved.nutrition_grade, "b")
        self.assertIsNone(resolve_product({"ecoscore_score": float("inf")}, "mx").authoritative_eco_score)
        self.assertIsNone(resolve_product({"ecoscore_score": "1e999"}, "mx").authoritative_eco_score)
        self.assertEqual(build_product({"ecoscore_score": "1e999"}, "mx").eco_score, 45)

    def test_authoritative_score_clamped(self):
        self.assertEqual(resolve_product({"ecoscore_score": 250}, "mx").authoritative_eco_score, 100)
        self.assertEqual(resolve_product({"ecoscore_score": "72.0"}, "mx").authoritative_eco_score, 72)


class TestBuildProduct(unittest.TestCase):

    def test_example_scenario(self):
        product = build_product(EXAMPLE_PRODUCT, "mx")
        self.assertEqual(product.packaging_type, PackagingType.REUSABLE)
        self.assertEqual(product.packaging_score, 90)
        # 50 + dairy 39 + local 15 + reusable 10, clamped
        self.assertEqual(product.carbon_score, 100)
        # 50 + organic 10 + mexico -2
        self.assertEqual(product.ethics_score, 58)
        # (100*40 + 90*35 + 58*25) // 100 + local 5
        self.assertEqual(product.eco_score, 91)
        self.assertTrue(product.is_local)
        self.assertEqual([c.id for c in product.certifications], ["organic", "local"])
        self.assertEqual([(m.name, m.percentage, m.is_recyclable) for m in product.materials], [("Glass", 100.0, True)])
        self.assertEqual(product.id, "7501000000001")
        self.assertEqual(product.name, "Leche entera")
        self.assertEqual(product.category, "dairy")

    def test_defaults_on_absence(self):
        product = build_product({}, "mx")
        self.assertEqual(product.packaging_type, PackagingType.MIXED)
        self.assertEqual(product.packaging_score, 50)
        self.assertEqual(
            [(m.name, m.percentage) for m in product.materials],
            [("Mixed Plastics", 50.0), ("Cardboard", 30.0), ("Aluminum Foil", 20.0)],
        )
        self.assertEqual(product.carbon_score, 45)
        self.assertEqual(product.ethics_score, 40)
        expected = (product.carbon_score * 40 + product.packaging_score * 35 + product.ethics_score * 25) // 100
        self.assertEqual(product.eco_score, expected)
        self.assertEqual(product.eco_score, 45)
        self.assertEqual(product.certifications, ())
        self.assertFalse(product.is_local)

    def test_none_behaves_like_empty_record(self):
        self.assertEqual(build_product(None, "mx"), build_product({}, "mx"))

    def test_structured_materials_take_priority(self):
        product = build_product({
            "packaging_materials_tags": ["en:glass"],
            "packaging_text": "non-recyclable plastic bag",
        }, "mx")
        self.assertEqual((product.packaging_score, product.packaging_type), (90, PackagingType.REUSABLE))

    def test_authoritative_override(self):
        product = build_product(dict(EXAMPLE_PRODUCT, ecoscore_score=72), "mx")
        self.assertEqual(product.eco_score, 72)
        self.assertEqual(product.carbon_score, 100)

    def test_local_certification_not_duplicated(self):
        product = build_product({"countries": "Mexico", "labels_tags": ["en:local", "en:organic"]}, "mx")
        self.assertEqual([c.id for c in product.certifications].count("local"), 1)

    def test_scores_stay_in_range(self):
        for raw in VARIED_PRODUCTS:
            for region in ("mx", "us", "fr", "zz"):
                product = build_product(raw, region)
                for score in (product.eco_score, product.packaging_score, product.carbon_score, product.ethics_score):
                    self.assertGreaterEqual(score, 0)
                    self.assertLessEqual(score, 100)
                self.assertTrue(product.materials)

    def test_idempotent(self):
        for raw in VARIED_PRODUCTS:
            first = build_product(raw, "mx")
            second = build_product(RawExternalProduct.model_validate(raw), "mx")
            self.assertEqual(first.model_dump_json(by_alias=True), second.model_dump_json(by_alias=True))

    def test_generated_id_is_stable(self):
        first = build_product({"product_name": "Loose apples"}, "mx")
        second = build_product({"product_name": "Loose apples"}, "mx")
        other = build_product({"product_name": "Loose pears"}, "mx")
        self.assertEqual(first.id, second.id)
        self.assertNotEqual(first.id, other.id)

    def test_home_region_is_an_input(self):
        raw = {"countries": "France", "categories": "cheese"}
        self.assertTrue(build_product(raw, "fr").is_local)
        self.assertFalse(build_product(raw, "mx").is_local)
        self.assertGreater(build_product(raw, "fr").carbon_score, build_product(raw, "mx").carbon_score)

    def test_json_shape(self):
        payload = build_product(EXAMPLE_PRODUCT, "mx").model_dump(mode="json", by_alias=True)
        self.assertEqual(payload["packagingType"], "Reusable")
        self.assertIn("ecoScore", payload)
        self.assertIn("isLocal", payload)
        self.assertEqual(payload["materials"][0], {"name": "Glass", "percentage": 100.0, "isRecyclable": True})


class TestProductContract(unittest.TestCase):

    def product_kwargs(self, **overrides):
        kwargs = dict(
            id="1", name="Test", category="General", eco_score=50, packaging_score=50,
            carbon_score=50, ethics_score=50, packaging_type=PackagingType.MIXED,
            materials=(Material(name="Glass", percentage=100, is_recyclable=True),),
        )
        kwargs.update(overrides)
        return kwargs

    def test_out_of_range_score_rejected(self):
        with self.assertRaises(ValidationError):
            Product(**self.product_kwargs(eco_score=101))
        with self.assertRaises(ValidationError):
            Product(**self.product_kwargs(carbon_score=-1))

    def test_duplicate_certifications_rejected(self):
        certification = Certification(id="organic", name="Organic", description="")
        with self.assertRaises(ValidationError):
            Product(**self.product_kwargs(certifications=(certification, certification)))

    def test_empty_materials_rejected(self):
        with self.assertRaises(ValidationError):
            Product(**self.product_kwargs(materials=()))

    def test_product_is_immutable(self):
        product = Product(**self.product_kwargs())
        with self.assertRaises(ValidationError):
            product.eco_score = 10


if __name__ == '__main__':
    unittest.main()

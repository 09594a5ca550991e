import unittest

from interfaces.productModels import PackagingType
from services.extractors import (
    default_materials,
    extract_certifications,
    extract_materials,
    material_display_name,
    materials_from_tags,
)


class TestCertificationExtractor(unittest.TestCase):

    def test_one_certification_per_match(self):
        certifications = extract_certifications(["en:organic", "en:eu-organic", "en:vegan", "en:no-gluten"], False)
        self.assertEqual([c.id for c in certifications], ["organic", "vegan"])
        self.assertEqual(certifications[0].name, "Organic")

    def test_local_certification_synthesized(self):
        certifications = extract_certifications([], True)
        self.assertEqual(len(certifications), 1)
        self.assertEqual(certifications[0].id, "local")
        self.assertEqual(certifications[0].name, "Local Product")

    def test_local_certification_not_duplicated(self):
        certifications = extract_certifications(["en:local", "en:organic"], True)
        self.assertEqual([c.id for c in certifications], ["local", "organic"])

    def test_not_local_no_synthesized_certification(self):
        self.assertEqual(extract_certifications(["en:halal"], False)[0].id, "halal")
        self.assertEqual(extract_certifications([], False), ())

    def test_local_label_ignored_for_non_local_product(self):
        self.assertEqual(extract_certifications(["en:produit-local"], False), ())
        certifications = extract_certifications(["en:local", "en:organic"], False)
        self.assertEqual([c.id for c in certifications], ["organic"])


class TestMaterialExtractor(unittest.TestCase):

    def test_display_name(self):
        self.assertEqual(material_display_name("en:pet-bottle"), "Pet Bottle")
        self.assertEqual(material_display_name("Glass"), "Glass")

    def test_share_by_tag_count(self):
        materials = materials_from_tags(["en:glass", "en:glass", "en:pp-lid", "en:plastic"])
        self.assertEqual([m.name for m in materials], ["Glass", "Pp Lid", "Plastic"])
        self.assertEqual([m.percentage for m in materials], [50.0, 25.0, 25.0])
        self.assertEqual([m.is_recyclable for m in materials], [True, True, False])

    def test_percentages_sum_to_hundred(self):
        materials = materials_from_tags(["en:glass", "en:steel", "en:cork"])
        self.assertAlmostEqual(sum(m.percentage for m in materials), 100.0, places=6)

    def test_default_compositions(self):
        recyclable = default_materials(PackagingType.RECYCLABLE)
        self.assertEqual([(m.name, m.percentage) for m in recyclable], [("PET Plastic", 60.0), ("Aluminum", 30.0), ("Paper", 10.0)])
        mixed = default_materials(PackagingType.MIXED)
        self.assertEqual([m.name for m in mixed], ["Mixed Plastics", "Cardboard", "Aluminum Foil"])
        self.assertEqual([m.is_recyclable for m in mixed], [False, True, False])

    def test_every_packaging_type_has_materials(self):
        for packaging_type in PackagingType:
            materials = extract_materials([], packaging_type)
            self.assertTrue(materials)
            self.assertAlmostEqual(sum(m.percentage for m in materials), 100.0)

    def test_tags_take_priority_over_packaging_type(self):
        materials = extract_materials(["en:cardboard"], PackagingType.REUSABLE)
        self.assertEqual([(m.name, m.percentage, m.is_recyclable) for m in materials], [("Cardboard", 100.0, True)])


if __name__ == '__main__':
    unittest.main()

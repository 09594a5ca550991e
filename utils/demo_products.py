from types import MappingProxyType

from interfaces.productModels import Certification, Material, PackagingType, Product

# offline seed products, served before any network lookup
DEMO_PRODUCTS = MappingProxyType({
    "8901234567890": Product(
        id="8901234567890",
        name="Organic Greek Yogurt",
        brand="Nature's Best",
        category="Dairy",
        image_url=None,
        eco_score=85,
        packaging_score=90,
        carbon_score=80,
        ethics_score=85,
        packaging_type=PackagingType.RECYCLABLE,
        certifications=(
            Certification(id="1", name="USDA Organic", description="Certified organic ingredients"),
            Certification(id="2", name="Non-GMO", description="No genetically modified organisms"),
        ),
        materials=(
            Material(name="Glass", percentage=100, is_recyclable=True),
        ),
        is_local=True,
    ),
    "7501059200050": Product(
        id="7501059200050",
        name="Plastic Water Bottle",
        brand="Generic",
        category="Beverages",
        image_url=None,
        eco_score=25,
        packaging_score=20,
        carbon_score=30,
        ethics_score=40,
        packaging_type=PackagingType.NON_RECYCLABLE,
        certifications=(),
        materials=(
            Material(name="PET Plastic", percentage=100, is_recyclable=False),
        ),
        is_local=False,
    ),
    "3017620422003": Product(
        id="3017620422003",
        name="Nutella",
        brand="Ferrero",
        category="Breakfast Foods",
        image_url="https://images.openfoodfacts.org/images/products/301/762/042/2003/front_en.631.400.jpg",
        eco_score=45,
        packaging_score=60,
        carbon_score=40,
        ethics_score=50,
        packaging_type=PackagingType.RECYCLABLE,
        certifications=(),
        materials=(
            Material(name="Glass", percentage=85, is_recyclable=True),
            Material(name="Plastic", percentage=15, is_recyclable=False),
        ),
        is_local=False,
    ),
    "1234567890123": Product(
        id="1234567890123",
        name="Eco-Friendly Detergent",
        brand="Green Clean",
        category="Cleaning",
        image_url=None,
        eco_score=92,
        packaging_score=95,
        carbon_score=88,
        ethics_score=90,
        packaging_type=PackagingType.COMPOSTABLE,
        certifications=(
            Certification(id="3", name="Vegan", description="No animal products"),
            Certification(id="4", name="Cruelty Free", description="Not tested on animals"),
        ),
        materials=(
            Material(name="Plant-based Plastic", percentage=100, is_recyclable=True),
        ),
        is_local=True,
    ),
})

from django.core.management.base import BaseCommand
from django.db import transaction

from ecohub.apps.catalog.models import Brand, Category, Product

CATEGORIES = [
    {"name": "Food & Beverages", "slug": "food-beverages", "description": "Eco-friendly food and drinks"},
    {"name": "Personal Care", "slug": "personal-care", "description": "Sustainable beauty and hygiene"},
    {"name": "Home & Living", "slug": "home-living", "description": "Eco-conscious home products"},
    {"name": "Fashion", "slug": "fashion", "description": "Ethical and sustainable fashion"},
    {"name": "Cleaning", "slug": "cleaning", "description": "Green cleaning supplies"},
]

BRANDS = [
    {
        "name": "Patagonia",
        "slug": "patagonia",
        "description": "Outdoor apparel and gear with strong environmental and social commitments.",
        "website": "https://www.patagonia.com",
        "sustainability_practices": [
            {"label": "Fair Trade", "description": "Uses Fair Trade Certified factories"},
            {"label": "Recycled Materials", "description": "Uses recycled polyester and organic cotton"},
        ],
        "packaging_types": ["Recycled paper", "Reusable bags"],
        "carbon_neutral": True,
        "certified": ["B Corp", "1% for the Planet"],
        "featured": True,
    },
    {
        "name": "Lush",
        "slug": "lush",
        "description": "Fresh handmade cosmetics with minimal packaging and ethical sourcing.",
        "website": "https://www.lush.com",
        "sustainability_practices": [
            {"label": "Naked Products", "description": "Many products sold without packaging"},
            {"label": "Recyclable Packaging", "description": "Black pots are 100% recyclable"},
        ],
        "packaging_types": ["Paper bags", "Recyclable pots", "Naked (no packaging)"],
        "carbon_neutral": False,
        "certified": ["Vegan options", "Cruelty-free"],
        "featured": True,
    },
    {
        "name": "Who Gives A Crap",
        "slug": "who-gives-a-crap",
        "description": "Toilet paper and paper towels made from recycled materials.",
        "website": "https://us.whogivesacrap.org",
        "sustainability_practices": [
            {"label": "Recycled Paper", "description": "100% recycled or bamboo"},
            {"label": "Plastic-Free", "description": "Wrapped in paper, not plastic"},
        ],
        "packaging_types": ["Paper wrap", "Cardboard"],
        "carbon_neutral": True,
        "certified": ["B Corp"],
        "featured": True,
    },
    {
        "name": "Blueland",
        "slug": "blueland",
        "description": "Cleaning products in reusable bottles with dissolvable tablets.",
        "website": "https://www.blueland.com",
        "sustainability_practices": [
            {"label": "Refill System", "description": "Reusable bottles, tablet refills"},
            {"label": "No Plastic Bottles", "description": "Eliminates single-use plastic"},
        ],
        "packaging_types": ["Compostable", "Recyclable cardboard"],
        "carbon_neutral": False,
        "certified": ["Leaping Bunny"],
        "featured": True,
    },
    {
        "name": "Package Free Shop",
        "slug": "package-free-shop",
        "description": "Zero-waste lifestyle products. Everything shipped plastic-free.",
        "website": "https://packagefreeshop.com",
        "sustainability_practices": [
            {"label": "Plastic-Free Shipping", "description": "All shipments are plastic-free"},
            {"label": "Curated Sustainable Brands", "description": "Vetted for sustainability"},
        ],
        "packaging_types": ["Paper", "Compostable", "Reusable"],
        "carbon_neutral": True,
        "certified": ["B Corp"],
        "featured": False,
    },
]

# (name, slug, brand slug, category slug, packaging, eco score, buy url, featured)
PRODUCTS = [
    ("Organic Cotton T-Shirt", "patagonia-organic-tshirt", "patagonia", "fashion", "Recycled paper", 9, "https://www.patagonia.com", True),
    ("Recycled Down Jacket", "patagonia-recycled-jacket", "patagonia", "fashion", "Recycled paper", 9, "https://www.patagonia.com", False),
    ("Naked Shampoo Bar", "lush-naked-shampoo", "lush", "personal-care", "Naked (no packaging)", 10, "https://www.lush.com", True),
    ("Recycled Toilet Paper 24 Rolls", "wgac-toilet-paper", "who-gives-a-crap", "home-living", "Paper wrap", 9, "https://us.whogivesacrap.org", True),
    ("Clean Up Kit (Tablets + Bottles)", "blueland-cleanup-kit", "blueland", "cleaning", "Compostable", 9, "https://www.blueland.com", True),
    ("Bamboo Toothbrush Set", "package-free-bamboo-brush", "package-free-shop", "personal-care", "Paper", 8, "https://packagefreeshop.com", False),
]


class Command(BaseCommand):
    help = "Replace the catalog with the curated seed set of categories, brands and products."

    @transaction.atomic
    def handle(self, *args, **options):
        Product.objects.all().delete()
        Brand.objects.all().delete()
        Category.objects.all().delete()

        Category.objects.bulk_create(Category(**row) for row in CATEGORIES)
        Brand.objects.bulk_create(Brand(**row) for row in BRANDS)
        categories = {c.slug: c for c in Category.objects.all()}
        brands = {b.slug: b for b in Brand.objects.all()}

        Product.objects.bulk_create(
            Product(
                name=name,
                slug=slug,
                brand=brands[brand_slug],
                category=categories[category_slug],
                packaging_type=packaging,
                eco_score=eco_score,
                buy_url=buy_url,
                featured=featured,
            )
            for name, slug, brand_slug, category_slug, packaging, eco_score, buy_url, featured in PRODUCTS
        )

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed complete: {len(categories)} categories, {len(brands)} brands, "
                f"{len(PRODUCTS)} products."
            )
        )

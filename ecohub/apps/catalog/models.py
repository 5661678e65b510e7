# ecohub/catalog/models.py
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class Category(models.Model):
    name = models.CharField(max_length=128)
    slug = models.SlugField(max_length=128, unique=True)
    description = models.TextField(blank=True, default="")

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class Brand(models.Model):
    """Hand-curated sustainable brand."""

    name = models.CharField(max_length=128)
    slug = models.SlugField(max_length=128, unique=True)
    description = models.TextField(blank=True, default="")
    logo = models.URLField(blank=True, default="")
    website = models.URLField(blank=True, default="")
    # [{"label": "Fair Trade", "description": "..."}]
    sustainability_practices = models.JSONField(default=list, blank=True)
    packaging_types = models.JSONField(default=list, blank=True)  # e.g. "Paper bags"
    carbon_neutral = models.BooleanField(default=False)
    certified = models.JSONField(default=list, blank=True)  # e.g. "B Corp"
    featured = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name


class Product(models.Model):
    name = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    description = models.TextField(blank=True, default="")
    image = models.URLField(blank=True, default="")
    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    currency = models.CharField(max_length=3, default="USD")
    buy_url = models.URLField(blank=True, default="")  # brand's product page
    brand = models.ForeignKey(Brand, on_delete=models.CASCADE, related_name="products")
    category = models.ForeignKey(
        Category, on_delete=models.PROTECT, related_name="products"
    )
    packaging_type = models.CharField(max_length=64, blank=True, default="")
    eco_score = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(10)],
    )  # 1-10 sustainability score
    tags = models.JSONField(default=list, blank=True)
    featured = models.BooleanField(default=False, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["featured", "eco_score"], name="catalog_product_featured_idx")
        ]

    def __str__(self):
        return self.name

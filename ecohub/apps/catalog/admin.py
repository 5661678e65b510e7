from django.contrib import admin
from .models import Brand, Category, Product


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "carbon_neutral", "featured", "created_at")
    list_filter = ("carbon_neutral", "featured")
    search_fields = ("name", "slug", "description")
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "brand",
        "category",
        "packaging_type",
        "eco_score",
        "price",
        "featured",
    )
    list_filter = ("category", "featured", "brand")
    search_fields = ("name", "slug", "description", "brand__name")
    prepopulated_fields = {"slug": ("name",)}

from rest_framework import serializers

from .models import Brand, Category, Product


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "slug", "description"]


class BrandSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Brand
        fields = ["id", "name", "slug", "logo", "website"]


class BrandSerializer(serializers.ModelSerializer):
    sustainabilityPractices = serializers.JSONField(source="sustainability_practices")
    packagingTypes = serializers.JSONField(source="packaging_types")
    carbonNeutral = serializers.BooleanField(source="carbon_neutral")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = Brand
        fields = [
            "id",
            "name",
            "slug",
            "description",
            "logo",
            "website",
            "sustainabilityPractices",
            "packagingTypes",
            "carbonNeutral",
            "certified",
            "featured",
            "createdAt",
            "updatedAt",
        ]


class ProductSerializer(serializers.ModelSerializer):
    brand = BrandSummarySerializer()
    category = CategorySerializer()
    buyUrl = serializers.URLField(source="buy_url")
    packagingType = serializers.CharField(source="packaging_type")
    ecoScore = serializers.IntegerField(source="eco_score", allow_null=True)
    price = serializers.FloatField(allow_null=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "slug",
            "description",
            "image",
            "price",
            "currency",
            "buyUrl",
            "brand",
            "category",
            "packagingType",
            "ecoScore",
            "tags",
            "featured",
        ]


class ProductDetailSerializer(ProductSerializer):
    brand = BrandSerializer()

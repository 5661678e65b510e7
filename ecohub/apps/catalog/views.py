from django.db.models import F, Q
from django.shortcuts import get_object_or_404
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .models import Brand, Category, Product
from .serializers import (
    BrandSerializer,
    CategorySerializer,
    ProductDetailSerializer,
    ProductSerializer,
)

DEFAULT_PRODUCT_LIMIT = 50


def _flag(value) -> bool:
    return (value or "").lower() == "true"


@api_view(["GET"])
@permission_classes([AllowAny])
def category_list(request):
    categories = Category.objects.all()
    return Response(CategorySerializer(categories, many=True).data)


@api_view(["GET"])
@permission_classes([AllowAny])
def category_detail(request, slug):
    category = get_object_or_404(Category, slug=slug)
    return Response(CategorySerializer(category).data)


@api_view(["GET"])
@permission_classes([AllowAny])
def brand_list(request):
    brands = Brand.objects.all()
    if _flag(request.query_params.get("featured")):
        brands = brands.filter(featured=True)
    q = request.query_params.get("q")
    if q:
        brands = brands.filter(Q(name__icontains=q) | Q(description__icontains=q))
    brands = brands.order_by("-featured", "name")
    return Response(BrandSerializer(brands, many=True).data)


@api_view(["GET"])
@permission_classes([AllowAny])
def brand_detail(request, slug):
    brand = get_object_or_404(Brand, slug=slug)
    return Response(BrandSerializer(brand).data)


@api_view(["GET"])
@permission_classes([AllowAny])
def product_list(request):
    params = request.query_params
    try:
        limit = int(params.get("limit", DEFAULT_PRODUCT_LIMIT))
    except (TypeError, ValueError):
        return Response({"message": "Invalid limit"}, status=400)

    products = Product.objects.select_related("brand", "category")
    if params.get("category"):
        products = products.filter(category__slug=params["category"])
    if params.get("brand"):
        products = products.filter(brand__slug=params["brand"])
    if params.get("packaging"):
        products = products.filter(packaging_type__icontains=params["packaging"])
    if _flag(params.get("featured")):
        products = products.filter(featured=True)
    q = params.get("q")
    if q:
        products = products.filter(
            Q(name__icontains=q) | Q(description__icontains=q) | Q(tags__icontains=q)
        )
    products = products.order_by(
        "-featured", F("eco_score").desc(nulls_last=True), "name"
    )[: max(limit, 0)]
    return Response(ProductSerializer(products, many=True).data)


@api_view(["GET"])
@permission_classes([AllowAny])
def product_detail(request, slug):
    product = get_object_or_404(
        Product.objects.select_related("brand", "category"), slug=slug
    )
    return Response(ProductDetailSerializer(product).data)

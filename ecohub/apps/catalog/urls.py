from django.urls import path
from .views import (
    brand_detail,
    brand_list,
    category_detail,
    category_list,
    product_detail,
    product_list,
)

urlpatterns = [
    path("categories/", category_list, name="category-list"),
    path("categories/<slug:slug>", category_detail, name="category-detail"),
    path("brands/", brand_list, name="brand-list"),
    path("brands/<slug:slug>", brand_detail, name="brand-detail"),
    path("products/", product_list, name="product-list"),
    path("products/<slug:slug>", product_detail, name="product-detail"),
]

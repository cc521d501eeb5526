from django.urls import path
from .views import ApplyDiscountView, SearchCartView

urlpatterns = [
    path("searchCart", SearchCartView.as_view(), name="search-cart"),
    path("applyDiscount", ApplyDiscountView.as_view(), name="apply-discount"),
]

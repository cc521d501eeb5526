from django.urls import path, re_path
from .views import CartDetailView, CartDiscountView, CartListView, CartSearchView

urlpatterns = [
    path("", CartListView.as_view(), name="api-carts-list"),
    path("search/", CartSearchView.as_view(), name="api-carts-search"),
    # Detail routes accept an optional trailing slash
    re_path(r"^(?P<cart_id>[\w-]+)/discount/?$", CartDiscountView.as_view(), name="api-carts-discount"),
    re_path(r"^(?P<cart_id>[\w-]+)/?$", CartDetailView.as_view(), name="api-carts-detail"),
]

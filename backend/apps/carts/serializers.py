from rest_framework import serializers

# Amounts are rounded to cents by the service, not rejected here
MONEY = dict(max_digits=None, decimal_places=None)


class ProductReadSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    thumbnailUrl = serializers.CharField(source="thumbnail_url")
    price = serializers.CharField()
    quantity = serializers.IntegerField()
    total = serializers.CharField()


class CartReadSerializer(serializers.Serializer):
    id = serializers.CharField()
    userId = serializers.CharField(source="user_id")
    sessionId = serializers.CharField(source="session_id")
    products = ProductReadSerializer(many=True)
    total = serializers.CharField()
    discount = serializers.CharField()
    totalProducts = serializers.IntegerField(source="total_products")
    totalQuantity = serializers.IntegerField(source="total_quantity")


class CartSearchSerializer(serializers.Serializer):
    # Form posts from the cart page
    total = serializers.DecimalField(**MONEY)


class ApplyDiscountFormSerializer(serializers.Serializer):
    cartId = serializers.CharField()
    total = serializers.DecimalField(**MONEY)
    discount = serializers.DecimalField(**MONEY)


class CartListQuerySerializer(serializers.Serializer):
    minTotal = serializers.DecimalField(required=False, **MONEY)
    userId = serializers.CharField(required=False)


class CartSearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField()


class DiscountSerializer(serializers.Serializer):
    discount = serializers.DecimalField(**MONEY)

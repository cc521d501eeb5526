from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.renderers import TemplateHTMLRenderer
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.exceptions import ApplicationError
from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_cart_service
from .serializers import (
    ApplyDiscountFormSerializer,
    CartListQuerySerializer,
    CartReadSerializer,
    CartSearchQuerySerializer,
    CartSearchSerializer,
    DiscountSerializer,
)
from .services import CartNotFoundError

logger = get_logger(__name__).bind(component="carts", layer="view")

CART_TEMPLATE = "carts/cart.html"


def _cart_page(carts, threshold, **extra) -> Response:
    context = {
        "carts": CartReadSerializer(carts, many=True).data,
        "total": threshold,
    }
    context.update(extra)
    return Response(context, template_name=CART_TEMPLATE)


class CartPageView(APIView):
    renderer_classes = [TemplateHTMLRenderer]
    parser_classes = [FormParser, MultiPartParser]
    service = build_cart_service()


@extend_schema(exclude=True)
class SearchCartView(CartPageView):
    log = logger.bind(view="SearchCartView")

    def post(self, request):
        serializer = CartSearchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        threshold = serializer.validated_data["total"]
        carts = self.service.find_all_cart_total_greater_than(threshold)
        self.log.debug("Rendering cart search", threshold=threshold, matches=len(carts))
        return _cart_page(carts, threshold)


@extend_schema(exclude=True)
class ApplyDiscountView(CartPageView):
    log = logger.bind(view="ApplyDiscountView")

    def post(self, request):
        serializer = ApplyDiscountFormSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        cart = self.service.apply_discount(data["cartId"], data["discount"])
        if cart is None:
            self.log.info("Discount skipped for unknown cart", cart_id=data["cartId"])
        carts = self.service.find_all_cart_total_greater_than(data["total"])
        return _cart_page(carts, data["total"], discounted_cart_id=cart.id if cart else None)


class CartListView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartListView")

    @extend_schema(
        summary="List carts",
        parameters=[
            OpenApiParameter(
                name="minTotal",
                description="Only carts whose total is greater than or equal to this value, ascending by total",
                required=False,
                type=str,
            ),
            OpenApiParameter(
                name="userId",
                description="Return the cart owned by this user",
                required=False,
                type=str,
            ),
        ],
        responses={
            200: CartReadSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = CartListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        if "userId" in params:
            cart = self.service.find_by_user_id(params["userId"])
            carts = [cart] if cart else []
        elif "minTotal" not in params:
            carts = self.service.list_carts()
        else:
            carts = self.service.find_all_cart_total_greater_than(params["minTotal"])
        self.log.debug("Listing carts", params=dict(params), matches=len(carts))
        return Response(CartReadSerializer(carts, many=True).data)


class CartDetailView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartDetailView")

    @extend_schema(
        summary="Get cart",
        parameters=[OpenApiParameter("cart_id", str, OpenApiParameter.PATH)],
        responses={
            200: CartReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, cart_id: str):
        try:
            dto = self.service.find_by_id(cart_id)
        except CartNotFoundError as exc:
            raise ApplicationError(
                "NOT_FOUND", "Cart not found", details={"cartId": exc.cart_id}
            )
        return Response(CartReadSerializer(dto).data)


class CartDiscountView(APIView):
    service = build_cart_service()
    log = logger.bind(view="CartDiscountView")

    @extend_schema(
        summary="Apply discount",
        description=(
            "Sets the cart's discount and subtracts it from the cart's current total. "
            "The subtraction starts from the stored total, so repeated calls compound."
        ),
        parameters=[OpenApiParameter("cart_id", str, OpenApiParameter.PATH)],
        request=DiscountSerializer,
        responses={
            200: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, cart_id: str):
        serializer = DiscountSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = self.service.apply_discount(cart_id, serializer.validated_data["discount"])
        if dto is None:
            raise ApplicationError(
                "NOT_FOUND", "Cart not found", details={"cartId": cart_id}
            )
        self.log.info("Discount applied via API", cart_id=cart_id, total=dto.total)
        return Response(CartReadSerializer(dto).data, status=status.HTTP_200_OK)


class CartSearchView(APIView):
    service = build_cart_service()

    @extend_schema(
        summary="Search carts by product description",
        parameters=[
            OpenApiParameter(
                name="q",
                description="Words that must all appear in a product description",
                required=True,
                type=str,
            )
        ],
        responses={
            200: CartReadSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        query = CartSearchQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        carts = self.service.search_products(query.validated_data["q"])
        return Response(CartReadSerializer(carts, many=True).data)

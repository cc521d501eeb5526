from apps.common.repository import IndexField, IndexKind

CART_INDEXES = (
    IndexField("userId", IndexKind.TAG),
    IndexField("sessionId", IndexKind.TAG),
    IndexField("products.id", IndexKind.TAG),
    IndexField("products.description", IndexKind.TEXT),
    IndexField("total", IndexKind.NUMERIC),
    IndexField("totalProducts", IndexKind.NUMERIC),
    IndexField("totalQuantity", IndexKind.NUMERIC),
)

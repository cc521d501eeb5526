"""Conversions between cart models, stored documents and DTOs."""
from typing import Any, Dict, Iterable, List, Optional

from .dtos import CartDTO, ProductDTO
from .models import Cart, Product, to_money


class ProductMapper:
    @staticmethod
    def to_document(product: Product) -> Dict[str, Any]:
        return {
            "id": product.id,
            "title": product.title,
            "description": product.description,
            "thumbnailUrl": product.thumbnail_url,
            "price": str(product.price),
            "quantity": product.quantity,
            "total": str(product.total),
        }

    @staticmethod
    def from_document(document: Dict[str, Any]) -> Product:
        return Product(
            id=str(document["id"]),
            title=document.get("title") or "",
            description=document.get("description") or "",
            thumbnail_url=document.get("thumbnailUrl") or "",
            price=to_money(document.get("price", 0)),
            quantity=int(document.get("quantity", 0)),
            total=to_money(document.get("total", 0)),
        )

    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            title=product.title,
            description=product.description,
            thumbnail_url=product.thumbnail_url,
            price=str(product.price),
            quantity=product.quantity,
            total=str(product.total),
        )


class CartMapper:
    def __init__(self, product_mapper: Optional[ProductMapper] = None) -> None:
        self.product_mapper = product_mapper or ProductMapper()

    def to_document(self, cart: Cart) -> Dict[str, Any]:
        return {
            "id": cart.id,
            "userId": cart.user_id,
            "sessionId": cart.session_id,
            "products": [self.product_mapper.to_document(p) for p in cart.products],
            "total": str(cart.total),
            "discount": str(cart.discount),
            "totalProducts": cart.total_products,
            "totalQuantity": cart.total_quantity,
        }

    def from_document(self, document: Dict[str, Any]) -> Cart:
        products = [
            self.product_mapper.from_document(p) for p in document.get("products") or []
        ]
        return Cart(
            id=str(document["id"]),
            user_id=document.get("userId") or "",
            session_id=document.get("sessionId") or "",
            products=products,
            total=to_money(document.get("total", 0)),
            discount=to_money(document.get("discount", 0)),
            total_products=int(document.get("totalProducts", len(products))),
            total_quantity=int(
                document.get("totalQuantity", sum(p.quantity for p in products))
            ),
        )

    def to_dto(self, cart: Cart) -> CartDTO:
        return CartDTO(
            id=cart.id,
            user_id=cart.user_id,
            session_id=cart.session_id,
            products=[self.product_mapper.to_dto(p) for p in cart.products],
            total=str(cart.total),
            discount=str(cart.discount),
            total_products=cart.total_products,
            total_quantity=cart.total_quantity,
        )

    def many_to_dto(self, carts: Iterable[Cart]) -> List[CartDTO]:
        return [self.to_dto(c) for c in carts]

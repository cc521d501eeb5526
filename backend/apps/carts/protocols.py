from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, TYPE_CHECKING

from .models import Cart

if TYPE_CHECKING:
    from apps.carts.dtos import CartDTO


class CartRepositoryProtocol(Protocol):
    def find_by_id(self, cart_id: str) -> Optional[Cart]:
        ...

    def find_one_by_user_id(self, user_id: str) -> Optional[Cart]:
        ...

    def find_all_by_total_at_least(self, minimum) -> List[Cart]:
        ...

    def search_product_descriptions(self, text: str) -> List[Cart]:
        ...

    def save(self, cart: Cart) -> Cart:
        ...

    def delete_all(self) -> int:
        ...


class CartMapperProtocol(Protocol):
    def to_dto(self, cart: Cart) -> "CartDTO":
        ...

    def many_to_dto(self, carts: Iterable[Cart]) -> List["CartDTO"]:
        ...

from dataclasses import dataclass
from typing import List


@dataclass
class ProductDTO:
    id: str
    title: str
    description: str
    thumbnail_url: str
    price: str
    quantity: int
    total: str


@dataclass
class CartDTO:
    id: str
    user_id: str
    session_id: str
    products: List[ProductDTO]
    total: str
    discount: str
    total_products: int
    total_quantity: int

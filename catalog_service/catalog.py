# catalog_service/catalog.py
from dataclasses import dataclass, asdict
from numbers import Real
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

CATEGORIES = ("tv", "mobile", "smart-devices")


class InvalidProductError(ValueError):
    """Raised when a product record or catalog breaks its invariants."""


@dataclass(frozen=True)
class Product:
    """
    A single sellable item. Instances are immutable once built.
    """
    id: int
    name: str
    category: str
    price: float
    description: str = ""

    def __post_init__(self):
        # bool is an int subclass; reject it explicitly
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise InvalidProductError(f"Product id must be a positive integer, got {self.id!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidProductError(f"Product {self.id} has an empty name")
        if self.category not in CATEGORIES:
            raise InvalidProductError(
                f"Product {self.id} has unknown category {self.category!r}; "
                f"expected one of {', '.join(CATEGORIES)}"
            )
        if isinstance(self.price, bool) or not isinstance(self.price, Real) or self.price <= 0:
            raise InvalidProductError(f"Product {self.id} price must be positive, got {self.price!r}")
        if not isinstance(self.description, str):
            raise InvalidProductError(f"Product {self.id} description must be a string")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Catalog:
    """
    Ordered, read-only sequence of products.

    Built once at startup and shared by every request handler.
    """

    def __init__(self, products: Iterable[Product] = ()):
        items = tuple(products)
        seen = set()
        for product in items:
            if product.id in seen:
                raise InvalidProductError(f"Duplicate product id {product.id}")
            seen.add(product.id)
        self._products: Tuple[Product, ...] = items

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "Catalog":
        try:
            return cls(Product(**record) for record in records)
        except TypeError as e:
            raise InvalidProductError(f"Malformed product record: {e}") from e

    def all(self) -> Tuple[Product, ...]:
        return self._products

    def by_category(self, category: str) -> Tuple[Product, ...]:
        return tuple(p for p in self._products if p.category == category)

    def categories(self) -> List[str]:
        found: List[str] = []
        for product in self._products:
            if product.category not in found:
                found.append(product.category)
        return found

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __repr__(self) -> str:
        return f"Catalog({len(self._products)} products)"


DEFAULT_PRODUCTS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Samsung 55\" Smart TV", "category": "tv", "price": 45000,
     "description": "4K UHD smart TV with HDR and built-in streaming apps"},
    {"id": 2, "name": "LG 43\" Full HD TV", "category": "tv", "price": 28000,
     "description": "Full HD LED TV with a slim bezel"},
    {"id": 3, "name": "iPhone 15", "category": "mobile", "price": 79900,
     "description": "6.1-inch display, A16 Bionic chip, 128GB storage"},
    {"id": 4, "name": "Samsung Galaxy S24", "category": "mobile", "price": 74999,
     "description": "Android flagship with a 50MP triple camera"},
    {"id": 5, "name": "Amazon Echo Dot", "category": "smart-devices", "price": 4499,
     "description": "Compact smart speaker with Alexa"},
    {"id": 6, "name": "Google Nest Hub", "category": "smart-devices", "price": 7999,
     "description": "Smart display for home control and video"},
]


def default_catalog() -> Catalog:
    return Catalog.from_records(DEFAULT_PRODUCTS)

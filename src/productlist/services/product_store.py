"""In-memory product list store."""
from typing import Iterable, Iterator, List, Optional, Tuple

from productlist.domain.types import ProductId, ProductName, trim
from productlist.models import Product
from productlist.utils.logger import get_logger

logger = get_logger(__name__)


class ProductListStore:
    """
    Ordered, in-memory collection of products.

    Every operation is total: an empty-after-trim name, an unknown id or
    an empty index set leaves the collection untouched and raises nothing.
    """

    def __init__(self):
        self._items: List[Product] = []

    def add(self, raw_name: str) -> None:
        """
        Append a new product to the end of the list.

        Args:
            raw_name: User input; leading/trailing whitespace is dropped
        """
        name = trim(raw_name)
        if not name:
            logger.debug("Ignoring add with empty name")
            return

        product = Product(name=ProductName(name))
        self._items.append(product)
        logger.info(
            "Product added",
            product_id=str(product.id),
            product_name=product.name,
            position=len(self._items) - 1
        )

    def remove_by_identity(self, product_id: ProductId) -> None:
        """
        Remove the product with the given id, keeping the others in order.

        Args:
            product_id: ID of the product to remove
        """
        index = self._index_of(product_id)
        if index is None:
            logger.debug("Ignoring remove of unknown product", product_id=str(product_id))
            return

        product = self._items.pop(index)
        logger.info(
            "Product removed",
            product_id=str(product.id),
            product_name=product.name
        )

    def update(self, product_id: ProductId, raw_new_name: str) -> None:
        """
        Rename a product in place; id and position are unchanged.

        Args:
            product_id: ID of the product to rename
            raw_new_name: User input; leading/trailing whitespace is dropped
        """
        name = trim(raw_new_name)
        if not name:
            logger.debug("Ignoring rename to empty name", product_id=str(product_id))
            return

        index = self._index_of(product_id)
        if index is None:
            logger.debug("Ignoring rename of unknown product", product_id=str(product_id))
            return

        product = self._items[index]
        old_name = product.name
        product.name = ProductName(name)
        logger.info(
            "Product renamed",
            product_id=str(product.id),
            old_name=old_name,
            new_name=product.name
        )

    def remove_by_indices(self, indices: Iterable[int]) -> None:
        """
        Remove the products at the given positions in a single pass.

        Positions refer to the list as it was before the call. Positions
        outside the list are ignored.

        Args:
            indices: Positions to remove
        """
        targets = set(indices)
        valid = {i for i in targets if 0 <= i < len(self._items)}
        if valid != targets:
            logger.debug(
                "Ignoring out-of-range indices",
                indices=sorted(targets - valid),
                size=len(self._items)
            )
        if not valid:
            return

        self._items = [
            product for position, product in enumerate(self._items)
            if position not in valid
        ]
        logger.info(
            "Products removed",
            indices=sorted(valid),
            remaining=len(self._items)
        )

    def list(self) -> Tuple[Product, ...]:
        """Return a snapshot of the products in display order."""
        return tuple(self._items)

    def get(self, product_id: ProductId) -> Optional[Product]:
        """Look up a live product by id."""
        index = self._index_of(product_id)
        return None if index is None else self._items[index]

    def _index_of(self, product_id: ProductId) -> Optional[int]:
        for index, product in enumerate(self._items):
            if product.id == product_id:
                return index
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.list())

    def __contains__(self, product_id: object) -> bool:
        return any(product.id == product_id for product in self._items)

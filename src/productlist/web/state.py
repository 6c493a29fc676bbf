"""Transient presentation state for the product list screen."""
from typing import Iterable, Optional
from pydantic import BaseModel

from productlist.domain.types import ProductId
from productlist.models import Product
from productlist.services.product_store import ProductListStore
from productlist.utils.logger import get_logger

logger = get_logger(__name__)


class ProductListViewState(BaseModel):
    """
    Selection state owned by the screen, not by the store.

    Holds the product picked for deletion or renaming while its
    confirmation dialog is open, the text being edited, and whether
    bulk delete mode is on.
    """
    session_id: str = ""
    product_to_delete: Optional[ProductId] = None
    product_to_edit: Optional[ProductId] = None
    edited_product_name: str = ""
    edit_mode: bool = False

    def _log_action(self, action: str, product_id: Optional[ProductId]) -> None:
        logger.info(
            action,
            session_id=self.session_id,
            product_id=str(product_id) if product_id is not None else None
        )

    def request_delete(self, product: Product) -> None:
        """Select a product and ask for delete confirmation."""
        self.product_to_delete = product.id
        self._log_action("Delete requested", product.id)

    def confirm_delete(self, store: ProductListStore) -> None:
        """Remove the selected product and clear the selection."""
        self._log_action("Delete confirmed", self.product_to_delete)
        if self.product_to_delete is not None:
            store.remove_by_identity(self.product_to_delete)
        self.product_to_delete = None

    def cancel_delete(self) -> None:
        self._log_action("Delete cancelled", self.product_to_delete)
        self.product_to_delete = None

    def request_edit(self, product: Product) -> None:
        """Select a product for renaming, pre-filling its current name."""
        self.product_to_edit = product.id
        self.edited_product_name = product.name
        self._log_action("Edit requested", product.id)

    def confirm_edit(self, store: ProductListStore, new_name: str) -> None:
        """
        Rename the selected product and clear the selection.

        An empty-after-trim name is ignored by the store; the dialog
        still closes.
        """
        self._log_action("Edit confirmed", self.product_to_edit)
        if self.product_to_edit is not None:
            store.update(self.product_to_edit, new_name)
        self.product_to_edit = None
        self.edited_product_name = ""

    def cancel_edit(self) -> None:
        self._log_action("Edit cancelled", self.product_to_edit)
        self.product_to_edit = None
        self.edited_product_name = ""

    def toggle_edit_mode(self) -> bool:
        """Switch bulk delete mode and return the new value."""
        self.edit_mode = not self.edit_mode
        return self.edit_mode

    def delete_at(self, store: ProductListStore, indices: Iterable[int]) -> None:
        """Forward rendered row positions to the store."""
        positions = set(indices)
        logger.info(
            "Bulk delete confirmed",
            session_id=self.session_id,
            indices=sorted(positions)
        )
        store.remove_by_indices(positions)

    def selected_for_delete(self, store: ProductListStore) -> Optional[Product]:
        if self.product_to_delete is None:
            return None
        return store.get(self.product_to_delete)

    def selected_for_edit(self, store: ProductListStore) -> Optional[Product]:
        if self.product_to_edit is None:
            return None
        return store.get(self.product_to_edit)

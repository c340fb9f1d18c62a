"""
Inventory Commands

Snapshot-in, snapshot-out mutations issued by the presentation layer.
Inputs are never modified; every command touching a product refreshes
its updatedAt.
"""

from typing import Callable, Dict, List, Optional

from .models import (
    DEFAULT_VARIANT_ENTRIES,
    ColorVariant,
    Entry,
    EntryStatus,
    InventoryData,
    Product,
    next_status,
)
from .protocols import (
    EntryNotFoundError,
    ProductNotFoundError,
    VariantNotFoundError,
)

_UNSET = object()


def _require_name(name: str, what: str) -> str:
    if name is None or not name.strip():
        raise ValueError(f"{what} name must not be blank")
    return name.strip()


def _find_product(data: InventoryData, product_id: str) -> Product:
    for product in data.products:
        if product.id == product_id:
            return product
    raise ProductNotFoundError(f"Product not found: {product_id}")


def _find_variant(product: Product, variant_id: str) -> ColorVariant:
    for variant in product.variants:
        if variant.id == variant_id:
            return variant
    raise VariantNotFoundError(f"Variant not found: {variant_id} (product {product.id})")


def _replace_product(data: InventoryData, product: Product) -> InventoryData:
    return InventoryData(
        products=[product if p.id == product.id else p for p in data.products]
    )


def _with_variant(
    data: InventoryData,
    product_id: str,
    variant_id: str,
    change: Callable[[ColorVariant], ColorVariant]
) -> InventoryData:
    product = _find_product(data, product_id)
    variant = _find_variant(product, variant_id)
    updated = change(variant)
    variants = [updated if v.id == variant_id else v for v in product.variants]
    return _replace_product(data, product.model_copy(update={"variants": variants}).touch())


# ====================
# Products
# ====================


def add_product(data: InventoryData, name: str, category: Optional[str] = None) -> InventoryData:
    """New product first, no variants"""
    product = Product(name=_require_name(name, "Product"), category=category or None)
    return InventoryData(products=[product] + list(data.products))


def update_product(data: InventoryData, product: Product) -> InventoryData:
    """Swap in an edited product with the same id"""
    _find_product(data, product.id)
    return _replace_product(data, product.touch())


def rename_product(
    data: InventoryData,
    product_id: str,
    name: str,
    category=_UNSET
) -> InventoryData:
    product = _find_product(data, product_id)
    update: Dict[str, object] = {"name": _require_name(name, "Product")}
    if category is not _UNSET:
        update["category"] = category or None
    return _replace_product(data, product.model_copy(update=update).touch())


def delete_product(data: InventoryData, product_id: str) -> InventoryData:
    _find_product(data, product_id)
    return InventoryData(products=[p for p in data.products if p.id != product_id])


# ====================
# Variants
# ====================


def add_variant(
    data: InventoryData,
    product_id: str,
    name: str,
    entry_count: int = DEFAULT_VARIANT_ENTRIES
) -> InventoryData:
    """Append a color with entry_count empty slots"""
    product = _find_product(data, product_id)
    variant = ColorVariant.create(_require_name(name, "Variant"), entry_count=entry_count)
    variants = list(product.variants) + [variant]
    return _replace_product(data, product.model_copy(update={"variants": variants}).touch())


def rename_variant(data: InventoryData, product_id: str, variant_id: str, name: str) -> InventoryData:
    name = _require_name(name, "Variant")
    return _with_variant(data, product_id, variant_id, lambda v: v.model_copy(update={"name": name}))


def remove_variant(data: InventoryData, product_id: str, variant_id: str) -> InventoryData:
    product = _find_product(data, product_id)
    _find_variant(product, variant_id)
    variants = [v for v in product.variants if v.id != variant_id]
    return _replace_product(data, product.model_copy(update={"variants": variants}).touch())


# ====================
# Entries
# ====================


def _require_entry(variant: ColorVariant, entry_id: str) -> None:
    if not any(e.id == entry_id for e in variant.entries):
        raise EntryNotFoundError(f"Entry not found: {entry_id} (variant {variant.id})")


def cycle_entry(data: InventoryData, product_id: str, variant_id: str, entry_id: str) -> InventoryData:
    """Advance one slot: empty -> stocked -> sold -> empty"""

    def change(variant: ColorVariant) -> ColorVariant:
        _require_entry(variant, entry_id)
        entries = [
            e.model_copy(update={"status": next_status(e.status)}) if e.id == entry_id else e
            for e in variant.entries
        ]
        return variant.model_copy(update={"entries": entries})

    return _with_variant(data, product_id, variant_id, change)


def add_entry(
    data: InventoryData,
    product_id: str,
    variant_id: str,
    status: EntryStatus = EntryStatus.STOCKED
) -> InventoryData:
    """Append one slot; manually added slots start stocked"""
    entry = Entry(status=EntryStatus(status))
    return _with_variant(
        data, product_id, variant_id,
        lambda v: v.model_copy(update={"entries": list(v.entries) + [entry]})
    )


def remove_entry(data: InventoryData, product_id: str, variant_id: str, entry_id: str) -> InventoryData:

    def change(variant: ColorVariant) -> ColorVariant:
        _require_entry(variant, entry_id)
        return variant.model_copy(update={"entries": [e for e in variant.entries if e.id != entry_id]})

    return _with_variant(data, product_id, variant_id, change)


# ====================
# Queries
# ====================


def search_products(data: InventoryData, query: str) -> List[Product]:
    """Case-insensitive name match; blank query returns everything"""
    needle = (query or "").strip().lower()
    if not needle:
        return list(data.products)
    return [p for p in data.products if needle in p.name.lower()]


def inventory_totals(data: InventoryData) -> Dict[str, int]:
    return {
        "products": len(data.products),
        "variants": sum(len(p.variants) for p in data.products),
        "entries": sum(len(v.entries) for p in data.products for v in p.variants),
    }


__all__ = [
    "add_product",
    "update_product",
    "rename_product",
    "delete_product",
    "add_variant",
    "rename_variant",
    "remove_variant",
    "cycle_entry",
    "add_entry",
    "remove_entry",
    "search_products",
    "inventory_totals",
]

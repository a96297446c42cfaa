"""Tests for the shopping list service."""

import pytest

from src.models.shopping_item import ShoppingItem
from src.schemas.product import ProductCreate, ProductUpdate
from src.schemas.store import StoreCreate
from src.services.product_service import ProductService
from src.services.shopping_service import ShoppingService
from src.services.store_service import StoreService


@pytest.fixture
def catalog(db):
    """Two stores and three products with different store coverage."""
    stores = StoreService(db)
    products = ProductService(db)

    store_a = stores.create(StoreCreate(name="Store A"))
    store_b = stores.create(StoreCreate(name="Store B"))

    milk = products.create(
        ProductCreate(name="Milk", notes="2%", store_ids={store_a, store_b})
    )
    bread = products.create(ProductCreate(name="Bread", store_ids={store_a}))
    saffron = products.create(ProductCreate(name="Saffron"))

    return {
        "store_a": store_a,
        "store_b": store_b,
        "milk": milk,
        "bread": bread,
        "saffron": saffron,
    }


@pytest.fixture
def service(db):
    return ShoppingService(db)


def active_items_for(db, product_id):
    return (
        db.query(ShoppingItem)
        .filter(ShoppingItem.product_id == product_id, ShoppingItem.is_purchased.is_(False))
        .all()
    )


def test_add_item_creates_active_item(db, service, catalog):
    """Test adding a product creates an active item."""
    item_id = service.add_item(catalog["milk"], 2)

    item = db.get(ShoppingItem, item_id)
    assert item.quantity == 2
    assert item.is_purchased is False
    assert item.purchased_at is None
    assert item.created_at is not None


def test_add_item_merges_into_active_item(db, service, catalog):
    """Test adding the same product twice increases quantity instead of duplicating."""
    first_id = service.add_item(catalog["milk"], 2)
    second_id = service.add_item(catalog["milk"], 3)

    assert first_id == second_id
    items = active_items_for(db, catalog["milk"])
    assert len(items) == 1
    assert items[0].quantity == 5


def test_add_item_after_purchase_starts_new_item(db, service, catalog):
    """Test a purchased item is not merged into."""
    first_id = service.add_item(catalog["milk"], 1)
    service.mark_purchased(first_id)

    second_id = service.add_item(catalog["milk"], 4)

    assert second_id != first_id
    assert db.get(ShoppingItem, first_id).quantity == 1
    assert db.get(ShoppingItem, second_id).quantity == 4


def test_set_quantity_overwrites(db, service, catalog):
    """Test setting a positive quantity leaves exactly one item with that quantity."""
    item_id = service.add_item(catalog["bread"], 1)

    service.set_quantity(item_id, 4)

    items = active_items_for(db, catalog["bread"])
    assert len(items) == 1
    assert items[0].quantity == 4


@pytest.mark.parametrize("quantity", [0, -1])
def test_set_quantity_non_positive_removes_item(db, service, catalog, quantity):
    """Test zero or negative quantity deletes the item."""
    item_id = service.add_item(catalog["bread"], 3)

    service.set_quantity(item_id, quantity)

    assert db.get(ShoppingItem, item_id) is None


def test_set_quantity_missing_item_is_noop(service):
    """Test operating on a missing item does not raise."""
    service.set_quantity(99999, 5)
    service.set_quantity(99999, 0)


def test_decrement_from_one_removes_item(db, service, catalog):
    """Test the minus control removes a line at quantity one."""
    item_id = service.add_item(catalog["milk"], 2)

    service.decrement_quantity(item_id)
    assert db.get(ShoppingItem, item_id).quantity == 1

    service.decrement_quantity(item_id)
    assert db.get(ShoppingItem, item_id) is None


def test_increment_quantity(db, service, catalog):
    """Test the plus control adds one."""
    item_id = service.add_item(catalog["milk"], 2)

    service.increment_quantity(item_id)

    assert db.get(ShoppingItem, item_id).quantity == 3


def test_mark_purchased(db, service, catalog):
    """Test marking purchased sets the flag and timestamp and hides the item."""
    item_id = service.add_item(catalog["milk"], 1)

    service.mark_purchased(item_id)

    item = db.get(ShoppingItem, item_id)
    assert item.is_purchased is True
    assert item.purchased_at is not None
    assert all(view.id != item_id for view in service.list_active())


def test_mark_purchased_again_refreshes_timestamp(db, service, catalog):
    """Test re-marking keeps the item purchased with a timestamp that does not go back."""
    item_id = service.add_item(catalog["milk"], 1)
    service.mark_purchased(item_id)
    first_purchased_at = db.get(ShoppingItem, item_id).purchased_at

    service.mark_purchased(item_id)

    item = db.get(ShoppingItem, item_id)
    assert item.is_purchased is True
    assert item.purchased_at >= first_purchased_at


def test_remove_item(db, service, catalog):
    """Test removing active and purchased items."""
    active_id = service.add_item(catalog["milk"], 1)
    purchased_id = service.add_item(catalog["bread"], 1)
    service.mark_purchased(purchased_id)

    service.remove_item(active_id)
    service.remove_item(purchased_id)
    service.remove_item(99999)

    assert db.get(ShoppingItem, active_id) is None
    assert db.get(ShoppingItem, purchased_id) is None


def test_clear_purchased_removes_only_purchased(db, service, catalog):
    """Test clearing purchased items leaves active ones alone."""
    active_id = service.add_item(catalog["milk"], 1)
    purchased_id = service.add_item(catalog["bread"], 1)
    service.mark_purchased(purchased_id)

    removed = service.clear_purchased()

    assert removed == 1
    remaining = db.query(ShoppingItem).all()
    assert [item.id for item in remaining] == [active_id]


def test_has_purchased(service, catalog):
    """Test the purchased-items flag follows purchase and clear."""
    assert service.has_purchased() is False

    item_id = service.add_item(catalog["milk"], 1)
    assert service.has_purchased() is False

    service.mark_purchased(item_id)
    assert service.has_purchased() is True

    service.clear_purchased()
    assert service.has_purchased() is False


def test_list_active_is_oldest_first_and_enriched(service, catalog):
    """Test active items come back in FIFO order with product details."""
    service.add_item(catalog["saffron"], 1)
    service.add_item(catalog["milk"], 2)
    service.add_item(catalog["bread"], 1)

    items = service.list_active()

    assert [item.product_name for item in items] == ["Saffron", "Milk", "Bread"]
    saffron, milk, bread = items
    assert milk.product_notes == "2%"
    assert saffron.product_notes == ""
    assert milk.available_store_ids == {catalog["store_a"], catalog["store_b"]}
    assert bread.available_store_ids == {catalog["store_a"]}
    assert saffron.available_store_ids == set()
    assert milk.quantity == 2


def test_store_availability_empty_without_active_items(service, catalog):
    """Test coverage is undefined, not zero-filled, with nothing on the list."""
    assert service.compute_store_availability() == []

    item_id = service.add_item(catalog["milk"], 1)
    service.mark_purchased(item_id)

    assert service.compute_store_availability() == []


def test_store_availability_coverage_and_order(service, catalog):
    """Test per-store coverage with two of three and one of three items."""
    service.add_item(catalog["milk"], 1)
    service.add_item(catalog["bread"], 1)
    service.add_item(catalog["saffron"], 1)

    availability = service.compute_store_availability()

    assert [s.store_id for s in availability] == [catalog["store_a"], catalog["store_b"]]
    store_a, store_b = availability
    assert store_a.available_items_count == 2
    assert store_a.total_items_count == 3
    assert store_a.coverage_percentage == 66.7
    assert store_b.available_items_count == 1
    assert store_b.coverage_percentage == 33.3


def test_store_availability_follows_store_set_changes(db, service, catalog):
    """Test coverage is recomputed from current store links on every call."""
    service.add_item(catalog["saffron"], 1)
    before = {s.store_id: s.coverage_percentage for s in service.compute_store_availability()}
    assert before == {catalog["store_a"]: 0.0, catalog["store_b"]: 0.0}

    ProductService(db).update(
        catalog["saffron"], ProductUpdate(name="Saffron", store_ids={catalog["store_b"]})
    )

    after = service.compute_store_availability()
    assert after[0].store_id == catalog["store_b"]
    assert after[0].coverage_percentage == 100.0


def test_deleting_product_removes_its_shopping_items(db, service, catalog):
    """Test product deletion cascades to the shopping list."""
    item_id = service.add_item(catalog["milk"], 1)

    ProductService(db).delete(catalog["milk"])

    assert db.get(ShoppingItem, item_id) is None
    assert service.list_active() == []

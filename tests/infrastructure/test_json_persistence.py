"""Tests for the JSON-document persistence adapter.

These touch the filesystem through pytest's ``tmp_path``.
"""

import json
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from shopeasy.application.create_order import CreateOrderHandler
from shopeasy.application.dto import CreateOrderRequest, OrderItemSpec
from shopeasy.application.update_order_status import UpdateOrderStatusHandler
from shopeasy.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    InvalidTransitionError,
    ValidationError,
)
from shopeasy.domain.model.order_status import OrderStatus
from shopeasy.infrastructure.persistence.json_customer_repository import JsonCustomerRepository
from shopeasy.infrastructure.persistence.json_order_repository import JsonOrderRepository
from shopeasy.infrastructure.persistence.json_product_repository import JsonProductRepository
from shopeasy.infrastructure.persistence.json_store import JsonStore
from shopeasy.infrastructure.seed import seed_store


@pytest.fixture()
def store(tmp_path):
    s = JsonStore(tmp_path / "data" / "shop.json")
    seed_store(s)
    return s


def _request(*lines: tuple[int, int], customer_id: int = 1) -> CreateOrderRequest:
    return CreateOrderRequest(
        customer_id=customer_id,
        shipping_address="1 Main St",
        items=[OrderItemSpec(pid, qty) for pid, qty in lines],
    )


def _stock(store: JsonStore, product_id: int) -> int:
    return next(p["stock_quantity"] for p in store.read()["products"] if p["id"] == product_id)


class TestJsonStore:

    def test_creates_empty_document(self, tmp_path):
        path = tmp_path / "nested" / "shop.json"
        JsonStore(path)
        assert json.loads(path.read_text()) == {"customers": [], "products": [], "orders": []}

    def test_transaction_commits_on_success(self, tmp_path):
        s = JsonStore(tmp_path / "shop.json")
        with s.transaction():
            doc = s.read()
            doc["customers"].append({"id": 1})
            s.write(doc)
            # not on disk until commit
            assert json.loads((tmp_path / "shop.json").read_text())["customers"] == []
        assert s.read()["customers"] == [{"id": 1}]

    def test_transaction_discards_on_error(self, tmp_path):
        s = JsonStore(tmp_path / "shop.json")
        with pytest.raises(RuntimeError):
            with s.transaction():
                doc = s.read()
                doc["customers"].append({"id": 1})
                s.write(doc)
                raise RuntimeError("boom")
        assert s.read()["customers"] == []

    def test_nested_transactions_join(self, tmp_path):
        s = JsonStore(tmp_path / "shop.json")
        with s.transaction():
            with s.transaction():
                doc = s.read()
                doc["orders"].append({"id": 7})
                s.write(doc)
            assert s.read()["orders"] == [{"id": 7}]
        assert s.read()["orders"] == [{"id": 7}]

    def test_no_temp_files_left_behind(self, tmp_path):
        s = JsonStore(tmp_path / "shop.json")
        s.write(s.read())
        assert not [p.name for p in tmp_path.iterdir() if p.name.endswith(".tmp")]

    def test_lock_file_sits_beside_document(self, tmp_path):
        JsonStore(tmp_path / "shop.json")
        assert (tmp_path / ".shop.json.lock").exists()


class TestSeed:

    def test_seed_loads_demo_data_once(self, store):
        assert len(store.read()["products"]) == 6
        assert len(store.read()["customers"]) == 3
        assert seed_store(store) is False


class TestJsonOrderRepository:

    def test_create_and_reload(self, store):
        repo = JsonOrderRepository(store)
        dto = CreateOrderHandler(repo).handle(_request((1, 2), (3, 1)))

        order = JsonOrderRepository(JsonStore(store.file_path)).get_by_id(dto.id)
        assert order.status == OrderStatus.PENDING
        assert [i.unit_price.amount for i in order.items] == [Decimal("29.99"), Decimal("45.00")]
        assert [i.id for i in order.items] == [1, 2]
        assert str(order.total) == "$104.98"
        assert order.ordered_at.tzinfo is not None

    def test_prices_stored_as_strings(self, store):
        CreateOrderHandler(JsonOrderRepository(store)).handle(_request((1, 1)))
        raw = json.loads(store.file_path.read_text())
        assert raw["orders"][0]["items"][0]["unit_price"] == "29.99"

    def test_item_ids_continue_across_orders(self, store):
        handler = CreateOrderHandler(JsonOrderRepository(store))
        handler.handle(_request((1, 1), (2, 1)))
        dto = handler.handle(_request((3, 1)))
        assert [i.id for i in JsonOrderRepository(store).get_by_id(dto.id).items] == [3]

    def test_stock_decremented_on_disk(self, store):
        CreateOrderHandler(JsonOrderRepository(store)).handle(_request((1, 2), (2, 5)))
        assert _stock(store, 1) == 148
        assert _stock(store, 2) == 70

    def test_failures_write_nothing(self, store):
        handler = CreateOrderHandler(JsonOrderRepository(store))
        before = store.file_path.read_text()

        with pytest.raises(EntityNotFoundError):
            handler.handle(_request((1, 1), (404, 1)))
        with pytest.raises(InsufficientStockError):
            handler.handle(_request((1, 1), (6, 31)))
        with pytest.raises(EntityNotFoundError, match="Customer"):
            handler.handle(_request((1, 1), customer_id=77))

        assert store.file_path.read_text() == before

    def test_insert_failure_rolls_back_stock(self, store):
        class BrokenRepo(JsonOrderRepository):
            def add(self, order):
                raise OSError("disk full")

        with pytest.raises(OSError):
            CreateOrderHandler(BrokenRepo(store)).handle(_request((1, 3)))
        assert _stock(store, 1) == 150
        assert store.read()["orders"] == []

    def test_inactive_products_hidden_from_ordering(self, store):
        doc = store.read()
        doc["products"][0]["is_active"] = False
        store.write(doc)

        repo = JsonOrderRepository(store)
        assert [p.id for p in repo.get_products_by_ids([1, 2])] == [2]
        assert repo.get_product_names([1]) == {1: "Wireless Mouse"}

    def test_listing_newest_first(self, store):
        start = datetime(2026, 3, 1, tzinfo=timezone.utc)
        ticks = iter(start + timedelta(days=n) for n in range(10))
        repo = JsonOrderRepository(store)
        handler = CreateOrderHandler(repo, clock=lambda: next(ticks))
        a = handler.handle(_request((1, 1))).id
        b = handler.handle(_request((1, 1), customer_id=2)).id
        c = handler.handle(_request((1, 1))).id

        assert [o.id for o in repo.list_all()] == [c, b, a]
        assert [o.id for o in repo.list_by_customer(1)] == [c, a]
        assert repo.list_by_customer(3) == []

    def test_update_status_compare_and_set(self, store):
        repo = JsonOrderRepository(store)
        order_id = CreateOrderHandler(repo).handle(_request((1, 1))).id

        assert not repo.update_status(order_id, OrderStatus.SHIPPED, OrderStatus.DELIVERED)
        assert repo.update_status(order_id, OrderStatus.PENDING, OrderStatus.CONFIRMED)
        assert not repo.update_status(999, OrderStatus.PENDING, OrderStatus.CONFIRMED)
        assert repo.get_by_id(order_id).status == OrderStatus.CONFIRMED


class TestConcurrency:

    def test_concurrent_orders_never_oversell(self, store):
        """Ten buyers race for the last five units: exactly five win."""
        doc = store.read()
        doc["products"][5]["stock_quantity"] = 5
        store.write(doc)
        product_id = doc["products"][5]["id"]

        handler = CreateOrderHandler(JsonOrderRepository(store))

        def buy(_: int) -> str:
            try:
                handler.handle(_request((product_id, 1)))
            except InsufficientStockError:
                return "insufficient"
            return "success"

        with ThreadPoolExecutor(max_workers=10) as pool:
            results = [f.result() for f in as_completed(pool.submit(buy, n) for n in range(10))]

        assert results.count("success") == 5
        assert results.count("insufficient") == 5
        assert _stock(store, product_id) == 0
        assert len(store.read()["orders"]) == 5

    def test_concurrent_status_updates_apply_once(self, store):
        repo = JsonOrderRepository(store)
        order_id = CreateOrderHandler(repo).handle(_request((1, 1))).id
        handler = UpdateOrderStatusHandler(repo)

        def confirm(_: int) -> bool:
            try:
                handler.handle(order_id, "Confirmed")
            except InvalidTransitionError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=4) as pool:
            outcomes = list(pool.map(confirm, range(4)))

        assert outcomes.count(True) == 1
        assert repo.get_by_id(order_id).status == OrderStatus.CONFIRMED


class TestSharedFileAcrossStores:
    """Separate JsonStore instances on one file stand in for separate processes."""

    def test_second_store_waits_for_open_transaction(self, store):
        repo = JsonOrderRepository(store)
        other_repo = JsonOrderRepository(JsonStore(store.file_path))
        results: list[str] = []
        finished = threading.Event()

        def buy_through_other_store() -> None:
            try:
                CreateOrderHandler(other_repo).handle(_request((6, 20)))
                results.append("success")
            except InsufficientStockError:
                results.append("insufficient")
            finally:
                finished.set()

        worker = threading.Thread(target=buy_through_other_store)
        with repo.atomic():
            CreateOrderHandler(repo).handle(_request((6, 20)))
            worker.start()
            assert not finished.wait(0.2)
        worker.join(timeout=5)

        assert results == ["insufficient"]
        assert _stock(store, 6) == 10
        assert len(store.read()["orders"]) == 1

    def test_orders_from_both_stores_survive(self, store):
        other = JsonStore(store.file_path)
        first = CreateOrderHandler(JsonOrderRepository(store)).handle(_request((1, 1)))
        second = CreateOrderHandler(JsonOrderRepository(other)).handle(_request((1, 2)))

        assert [o["id"] for o in store.read()["orders"]] == [first.id, second.id]
        assert _stock(other, 1) == 147

    def test_racing_stores_never_oversell(self, store):
        doc = store.read()
        doc["products"][5]["stock_quantity"] = 5
        store.write(doc)
        product_id = doc["products"][5]["id"]
        stores = [store, JsonStore(store.file_path)]

        def buy(n: int) -> str:
            handler = CreateOrderHandler(JsonOrderRepository(stores[n % 2]))
            try:
                handler.handle(_request((product_id, 1)))
            except InsufficientStockError:
                return "insufficient"
            return "success"

        with ThreadPoolExecutor(max_workers=10) as pool:
            results = list(pool.map(buy, range(10)))

        assert results.count("success") == 5
        assert _stock(store, product_id) == 0
        assert len(store.read()["orders"]) == 5

    def test_status_race_across_stores_applies_once(self, store):
        order_id = CreateOrderHandler(JsonOrderRepository(store)).handle(_request((1, 1))).id
        stores = [store, JsonStore(store.file_path)]

        def confirm_through(n: int) -> bool:
            handler = UpdateOrderStatusHandler(JsonOrderRepository(stores[n % 2]))
            try:
                handler.handle(order_id, "Confirmed")
            except InvalidTransitionError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=4) as pool:
            outcomes = list(pool.map(confirm_through, range(4)))

        assert outcomes.count(True) == 1
        assert JsonOrderRepository(stores[1]).get_by_id(order_id).status == OrderStatus.CONFIRMED


class TestCatalogRepositories:

    def test_products(self, store):
        repo = JsonProductRepository(store)
        assert len(repo.list_active()) == 6
        assert repo.get_active_by_id(3).name == "USB-C Hub"
        assert repo.get_active_by_id(99) is None

    def test_stored_sub_cent_price_rejected_on_load(self, store):
        doc = store.read()
        doc["products"][0]["price"] = "29.995"
        store.write(doc)
        with pytest.raises(ValidationError, match="two decimal places"):
            JsonProductRepository(store).get_active_by_id(1)

    def test_customers(self, store):
        repo = JsonCustomerRepository(store)
        assert repo.get_by_id(2).full_name == "Bob Smith"
        assert repo.get_by_id(9) is None
        assert len(repo.list_all()) == 3

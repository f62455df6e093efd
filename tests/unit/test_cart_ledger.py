"""
Unit Tests - Cart Ledger
"""
import pytest

from stridefit.services.cart_ledger import CartLedger, DeliveryMethod


class TestMutations:
    def test_same_key_merges(self, cart):
        cart.add_item("x", 9, 1)
        items = cart.add_item("x", 9, 1)

        assert len(items) == 1
        assert items[0].quantity == 2

    def test_different_size_is_a_new_line(self, cart):
        cart.add_item("x", 9)
        items = cart.add_item("x", 9.5)

        assert [(i.shoe_id, i.size) for i in items] == [("x", 9), ("x", 9.5)]

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_ignored(self, cart, qty):
        assert cart.add_item("x", 9, qty) == []

    @pytest.mark.parametrize("size, qty", [(9, 1.5), ("big", 1)])
    def test_invalid_line_is_rejected(self, cart, size, qty):
        counts = []
        cart.subscribe(counts.append)

        assert cart.add_item("x", size, qty) == []
        assert counts == []

    def test_invalid_line_keeps_existing_items(self, cart):
        cart.add_item("x", 9, 2)
        items = cart.add_item("y", 10, 0.5)

        assert [(i.shoe_id, i.quantity) for i in items] == [("x", 2)]

    def test_remove_requires_exact_size(self, cart):
        cart.add_item("x", 9, 1)

        assert len(cart.remove_item("x", 10)) == 1
        assert cart.remove_item("x", 9) == []

    def test_remove_drops_whole_line(self, cart):
        cart.add_item("x", 9, 3)
        assert cart.remove_item("x", 9) == []

    def test_item_count_sums_quantities(self, cart):
        cart.add_item("x", 9, 2)
        cart.add_item("y", 10, 1)
        assert cart.item_count() == 3

    def test_cart_persists(self, cart, member):
        cart.add_item("x", 9)
        assert member.get_cart()[0].shoe_id == "x"


class TestTotals:
    def test_subtotal(self, cart, small_catalog):
        cart.add_item("shoe-a", 9, 2)
        cart.add_item("track-spike", 8)

        assert cart.subtotal(small_catalog) == pytest.approx(355.0)

    def test_unresolved_shoe_prices_at_zero(self, cart, small_catalog):
        cart.add_item("gone", 9)
        assert cart.subtotal(small_catalog) == 0.0

    def test_delivery_fee(self, cart):
        assert cart.delivery_fee(DeliveryMethod.PICKUP) == 0.0
        assert cart.delivery_fee(DeliveryMethod.DELIVERY) == 5.0
        assert cart.delivery_fee("delivery") == 5.0

    def test_total(self, cart, small_catalog):
        cart.add_item("shoe-a", 9)
        assert cart.total(small_catalog, DeliveryMethod.DELIVERY) == pytest.approx(145.0)


class TestCheckout:
    def test_checkout_clears_cart(self, cart, small_catalog):
        cart.add_item("shoe-a", 9, 2)
        cart.add_item("gone", 9)

        order = cart.checkout(small_catalog, DeliveryMethod.DELIVERY)

        assert order.subtotal == pytest.approx(280.0)
        assert order.delivery_fee == 5.0
        assert order.total == pytest.approx(285.0)
        assert order.item_count == 3
        assert order.unresolved == ["gone"]
        assert cart.items() == []

    def test_empty_cart_places_no_order(self, cart, small_catalog):
        assert cart.checkout(small_catalog) is None


class TestObservers:
    def test_listener_receives_counts(self, cart):
        counts = []
        cart.subscribe(counts.append)

        cart.add_item("x", 9, 2)
        cart.add_item("y", 10)
        cart.remove_item("x", 9)
        cart.clear()

        assert counts == [2, 3, 1, 0]

    def test_unsubscribe(self, cart):
        counts = []
        unsubscribe = cart.subscribe(counts.append)

        unsubscribe()
        cart.add_item("x", 9)

        assert counts == []

    def test_wipe_resets_badge(self, cart, store):
        counts = []
        cart.add_item("x", 9)
        cart.subscribe(counts.append)

        store.wipe()

        assert counts == [0]

    def test_failing_listener_does_not_break_cart(self, member):
        cart = CartLedger(member)

        def broken(count):
            raise RuntimeError("badge gone")

        cart.subscribe(broken)

        assert len(cart.add_item("x", 9)) == 1

"""Application tests for cart commands and reads."""

import pytest
from marketplace.ordering.cart.cart import ShoppingCart
from marketplace.ordering.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from marketplace.ordering.cart.queries import total_quantity, view_cart
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


def _add(user_id, product_id, quantity):
    return current_domain.process(
        AddToCart(user_id=user_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


class TestAddToCart:
    def test_first_add_creates_cart(self, add_product):
        product_id = add_product()

        _add("user-001", product_id, 2)

        cart = current_domain.repository_for(ShoppingCart).for_user("user-001")
        assert cart is not None
        assert [(str(i.product_id), i.quantity) for i in cart.items] == [(product_id, 2)]

    def test_repeated_add_yields_one_line_with_summed_quantity(self, add_product):
        product_id = add_product()

        first = _add("user-001", product_id, 2)
        second = _add("user-001", product_id, 3)

        assert first == second
        cart = current_domain.repository_for(ShoppingCart).for_user("user-001")
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_unknown_product_is_rejected(self):
        with pytest.raises(ObjectNotFoundError):
            _add("user-001", "no-such-product", 1)

        assert current_domain.repository_for(ShoppingCart).for_user("user-001") is None

    def test_carts_are_per_user(self, add_product):
        product_id = add_product()

        _add("user-001", product_id, 1)
        _add("user-002", product_id, 4)

        assert total_quantity("user-001") == 1
        assert total_quantity("user-002") == 4


class TestUpdateAndRemove:
    def test_update_overwrites_quantity(self, add_product):
        product_id = add_product()
        item_id = _add("user-001", product_id, 2)

        current_domain.process(
            UpdateCartQuantity(user_id="user-001", item_id=item_id, quantity=9),
            asynchronous=False,
        )

        assert total_quantity("user-001") == 9

    def test_update_item_of_another_user_is_not_found(self, add_product):
        product_id = add_product()
        item_id = _add("user-001", product_id, 2)
        _add("user-002", product_id, 1)

        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateCartQuantity(user_id="user-002", item_id=item_id, quantity=9),
                asynchronous=False,
            )

    def test_update_without_cart_is_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                UpdateCartQuantity(user_id="user-001", item_id="missing", quantity=1),
                asynchronous=False,
            )

    def test_remove(self, add_product):
        product_id = add_product()
        item_id = _add("user-001", product_id, 2)

        current_domain.process(RemoveFromCart(user_id="user-001", item_id=item_id), asynchronous=False)

        assert view_cart("user-001") == []

    def test_remove_unknown_item(self, add_product):
        product_id = add_product()
        _add("user-001", product_id, 2)

        with pytest.raises(ObjectNotFoundError):
            current_domain.process(RemoveFromCart(user_id="user-001", item_id="missing"), asynchronous=False)


class TestCartReads:
    def test_view_enriches_lines_with_product_fields(self, add_product):
        product_id = add_product(title="Hub", price=34.5)
        _add("user-001", product_id, 2)

        lines = view_cart("user-001")

        assert len(lines) == 1
        assert lines[0]["quantity"] == 2
        assert lines[0]["product"] == {"title": "Hub", "price": 34.5, "availability": True}

    def test_view_without_cart_is_empty(self):
        assert view_cart("user-001") == []

    def test_total_quantity_of_missing_cart_is_zero(self):
        assert total_quantity("user-001") == 0

    def test_reads_are_pure(self, add_product):
        _add("user-001", add_product(title="A"), 2)
        _add("user-001", add_product(title="B"), 1)

        assert view_cart("user-001") == view_cart("user-001")
        assert total_quantity("user-001") == total_quantity("user-001") == 3

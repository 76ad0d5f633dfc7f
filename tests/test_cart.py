"""
Unit tests for option selection and cart line items.
"""
import pytest

from storefront.errors import OptionNotFoundError, StorefrontError
from storefront.pricing.cart import Cart, CartItem
from storefront.pricing.options import can_add_to_cart, find_option, has_required_options, select_option
from tests.conftest import make_product


class TestOptions:

    def test_find_option(self, latte):
        assert find_option(latte, "size", "Large").price == 1.0

    def test_find_option_unknown_label(self, latte):
        with pytest.raises(OptionNotFoundError) as exc_info:
            find_option(latte, "size", "Huge")
        assert "Huge" in str(exc_info.value)

    def test_find_option_unknown_group(self, latte):
        with pytest.raises(StorefrontError):
            find_option(latte, "syrup", "Vanilla")

    def test_select_option_returns_new_mapping(self, latte):
        size = latte.option_groups()[0]
        first = select_option({}, size, size.options[0])
        second = select_option(first, size, size.options[1])
        assert first == {"size": {"label": "Small", "price": 0}}
        assert second == {"size": {"label": "Large", "price": 1.0}}

    def test_required_groups(self, latte):
        size, milk = latte.option_groups()
        assert not has_required_options(latte, {})
        assert not has_required_options(latte, select_option({}, milk, milk.options[1]))
        assert has_required_options(latte, select_option({}, size, size.options[0]))

    def test_product_without_options(self):
        assert has_required_options(make_product("Tea"), None)

    def test_can_add_to_cart(self, latte):
        size = latte.option_groups()[0]
        selected = select_option({}, size, size.options[0])
        assert can_add_to_cart(latte, selected)
        assert not can_add_to_cart(latte, {})

    def test_out_of_stock_cannot_be_added(self, latte):
        sold_out = latte.model_copy(update={"in_stock": False})
        size = sold_out.option_groups()[0]
        assert not can_add_to_cart(sold_out, select_option({}, size, size.options[0]))
        assert not can_add_to_cart(make_product("Green Tea", in_stock=False), None)


class TestCartItem:

    def test_from_product_prices_line(self, latte):
        item = CartItem.from_product(latte, {"size": find_option(latte, "size", "Large")}, quantity=2)
        assert item.product_id == "p-latte"
        assert item.base_price == 4.5
        assert item.options == {"size": {"label": "Large", "price": 1.0}}
        assert item.unit_price == 5.5
        assert item.total_price == 11.0

    def test_ids_unique(self, latte):
        assert CartItem.from_product(latte).id != CartItem.from_product(latte).id


class TestCart:

    def test_same_configuration_merges(self, latte):
        cart = Cart()
        large = {"size": {"label": "Large", "price": 1.0}}
        cart.add_item(CartItem.from_product(latte, large, 1))
        merged = cart.add_item(CartItem.from_product(latte, large, 2))

        assert len(cart) == 1
        assert merged.quantity == 3
        assert merged.total_price == pytest.approx(16.5)

    def test_different_options_separate_lines(self, latte):
        cart = Cart()
        cart.add_item(CartItem.from_product(latte, {"size": {"label": "Small", "price": 0}}))
        cart.add_item(CartItem.from_product(latte, {"size": {"label": "Large", "price": 1.0}}))
        assert len(cart) == 2
        assert cart.subtotal == pytest.approx(10.0)
        assert cart.item_count == 2

    def test_update_quantity(self, latte):
        cart = Cart()
        item = cart.add_item(CartItem.from_product(latte))
        updated = cart.update_quantity(item.id, 4)
        assert updated.quantity == 4
        assert cart.items[0].total_price == pytest.approx(18.0)

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_update_quantity_below_one_ignored(self, latte, quantity):
        cart = Cart()
        item = cart.add_item(CartItem.from_product(latte, quantity=2))
        assert cart.update_quantity(item.id, quantity) is None
        assert cart.items[0].quantity == 2

    def test_update_unknown_line(self, latte):
        assert Cart().update_quantity("missing", 2) is None

    def test_remove_and_clear(self, latte):
        cart = Cart()
        item = cart.add_item(CartItem.from_product(latte))
        cart.add_item(CartItem.from_product(make_product("Tea", amount=3.0)))
        cart.remove_item(item.id)
        assert [line.title for line in cart.items] == ["Tea"]
        cart.remove_item("missing")
        assert len(cart) == 1
        cart.clear()
        assert cart.items == []
        assert cart.subtotal == 0

"""Application tests for removing products from the inventory."""

import pytest
from protean.utils.globals import current_domain
from stockroom.exceptions import NotFound
from stockroom.product.product import Product


class TestDeleteProduct:
    def test_product_is_removed_from_store(self, engine, categories, make_product):
        milk = engine.add_goods(make_product("Milk", categories["Dairy"]), 5)

        engine.delete_product(milk.id)

        assert current_domain.repository_for(Product).find_by_code(milk.product_code) is None
        with pytest.raises(NotFound):
            engine.find_product(milk.id)

    @pytest.mark.parametrize("category_name", ["Dairy", "Meat", "Produce"])
    def test_every_entry_of_the_product_leaves_its_container(self, engine, categories, make_product, category_name):
        category = categories[category_name]
        first = engine.add_goods(make_product("First", category), 1)
        doomed = engine.add_goods(make_product("Doomed", category), 1)
        engine.receive_goods(doomed.id, 1)
        last = engine.add_goods(make_product("Last", category), 1)

        engine.delete_product(doomed.id)

        remaining = [product.id for product in engine.registry.snapshot(category.id)]
        assert remaining == [first.id, last.id]

    def test_stack_order_survives_a_delete(self, engine, categories, make_product):
        dairy = categories["Dairy"]
        milk = engine.add_goods(make_product("Milk", dairy), 1)
        cream = engine.add_goods(make_product("Cream", dairy), 1)
        engine.add_goods(make_product("Butter", dairy), 1)

        engine.delete_product(cream.id)
        sale = engine.issue_goods(milk.id, 1, "Ann")

        assert sale.product_id == milk.id
        # Butter was pushed last, so it is the entry popped
        assert [product.id for product in engine.registry.snapshot(dairy.id)] == [milk.id]

    def test_other_products_keep_their_stock(self, engine, categories, make_product):
        meat = categories["Meat"]
        beef = engine.add_goods(make_product("Beef", meat), 3)
        pork = engine.add_goods(make_product("Pork", meat), 4)

        engine.delete_product(beef.id)

        assert engine.find_product(pork.id).quantity_in_stock == 4
        assert [product.id for product in engine.registry.snapshot(meat.id)] == [pork.id]

    def test_unknown_product(self, engine):
        with pytest.raises(NotFound):
            engine.delete_product("missing")

    def test_deleted_product_is_not_rebuilt(self, engine, categories, make_product):
        produce = categories["Produce"]
        apple = engine.add_goods(make_product("Apple", produce), 2)
        engine.delete_product(apple.id)

        assert engine.rebuild() == {}
        assert engine.registry.get(produce.id) is None

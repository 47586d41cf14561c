from decimal import Decimal


class TestDishService:
    def test_register_dish_rounds_price(self, dish_service):
        success, msg = dish_service.register_dish("Pozole", Decimal("89.995"))

        assert success, msg
        dish = dish_service.get_all_dishes()[0]
        assert dish.name == "Pozole"
        assert dish.price == Decimal("90.00")

    def test_duplicate_name_differing_only_by_case(self, dish_service):
        assert dish_service.register_dish("Tacos", Decimal("50"))[0]

        success, msg = dish_service.register_dish("TACOS", Decimal("55"))

        assert not success
        assert msg == "Ya existe un platillo con ese nombre."
        assert len(dish_service.get_all_dishes()) == 1

    def test_register_rejects_non_positive_price(self, dish_service):
        assert dish_service.register_dish("Agua", Decimal("0")) == (False, "El precio debe ser mayor que 0.")
        assert dish_service.register_dish("Agua", Decimal("-3")) == (False, "El precio debe ser mayor que 0.")
        assert dish_service.get_all_dishes() == []

    def test_update_dish_allows_own_name_in_other_case(self, dish_service, sample_data):
        success, msg = dish_service.update_dish(sample_data["tacos_id"], "tacos", Decimal("55.50"))

        assert success, msg
        dish = dish_service.get_dish(sample_data["tacos_id"])
        assert (dish.name, dish.price) == ("tacos", Decimal("55.50"))

    def test_update_rejects_name_of_other_dish(self, dish_service, sample_data):
        success, msg = dish_service.update_dish(sample_data["agua_id"], "tacos", Decimal("20"))

        assert (success, msg) == (False, "Ya existe otro platillo con ese nombre.")
        assert dish_service.get_dish(sample_data["agua_id"]).name == "Agua"

    def test_delete_dish_removes_its_order_lines(self, dish_service, order_service, sample_data, ana_order):
        assert dish_service.count_order_lines(sample_data["tacos_id"]) == 1

        success, msg = dish_service.delete_dish(sample_data["tacos_id"])

        assert success, msg
        order = order_service.get_order(ana_order)
        assert [(line.dish.name, line.subtotal) for line in order.lines] == [("Agua", Decimal("20.00"))]
        # El total guardado no se recalcula
        assert order.total == Decimal("120.00")

    def test_delete_unknown_dish(self, dish_service):
        assert dish_service.delete_dish(7) == (False, "Platillo no encontrado.")

    def test_duplicate_accented_name_differing_only_by_case(self, dish_service):
        assert dish_service.register_dish("PIÑA COLADA", Decimal("40"))[0]

        success, msg = dish_service.register_dish("piña colada", Decimal("45"))

        assert (success, msg) == (False, "Ya existe un platillo con ese nombre.")
        assert [d.name for d in dish_service.get_all_dishes()] == ["PIÑA COLADA"]

    def test_update_rejects_accented_name_of_other_dish(self, dish_service, sample_data):
        assert dish_service.register_dish("Café de Olla", Decimal("25"))[0]

        success, msg = dish_service.update_dish(sample_data["agua_id"], "CAFÉ DE OLLA", Decimal("20"))

        assert (success, msg) == (False, "Ya existe otro platillo con ese nombre.")

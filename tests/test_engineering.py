from sidss.inputs import BillOfQuantitiesItem
from sidss.models import EngineeringModel


def test_totals_sum_cost_and_mass():
    boq = [
        BillOfQuantitiesItem("Concrete", 5000, 120, 240),
        BillOfQuantitiesItem("Steel", 500, 900, 1850),
        BillOfQuantitiesItem("Asphalt", 1200, 80, 45),
    ]
    metrics = EngineeringModel().calculate_metrics(boq)

    assert metrics.total_construction_cost == 5000 * 120 + 500 * 900 + 1200 * 80
    assert metrics.total_material_mass == 5000 + 500 + 1200


def test_empty_boq_is_zero():
    metrics = EngineeringModel().calculate_metrics([])

    assert metrics.total_construction_cost == 0
    assert metrics.total_material_mass == 0


def test_item_order_does_not_change_totals():
    a = BillOfQuantitiesItem("A", 10, 3, 0)
    b = BillOfQuantitiesItem("B", 4, 25, 0)
    model = EngineeringModel()

    assert model.calculate_metrics([a, b]) == model.calculate_metrics([b, a])

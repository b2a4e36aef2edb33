import pytest
from pydantic import ValidationError

from contracts.item_line_dto import ItemBatch, ParsedItemLine, Unit


def test_unit_values():
    assert [unit.value for unit in Unit] == ["ud", "kg", "L"]
    assert Unit.KG == "kg"


def test_defaults():
    item = ParsedItemLine(product="Tomate", quantity=10, unit="kg")
    assert item.ref == "UNKNOWN"
    assert item.reason is None
    assert item.unit is Unit.KG


def test_blank_ref_becomes_unknown():
    assert ParsedItemLine(ref="  ", product="Tomate", quantity=1, unit="ud").ref == "UNKNOWN"


def test_blank_reason_is_absent():
    item = ParsedItemLine(product="Tomate", quantity=1, unit="ud", reason="  ")
    assert item.reason is None
    assert "reason" not in item.model_dump(exclude_none=True)


def test_product_required():
    with pytest.raises(ValidationError):
        ParsedItemLine(product="   ", quantity=1, unit="ud")


@pytest.mark.parametrize("quantity", [float("inf"), float("nan")])
def test_quantity_must_be_finite(quantity):
    with pytest.raises(ValidationError):
        ParsedItemLine(product="Tomate", quantity=quantity, unit="ud")


def test_unit_is_closed():
    with pytest.raises(ValidationError):
        ParsedItemLine(product="Tomate", quantity=1, unit="g")


def test_frozen():
    item = ParsedItemLine(product="Tomate", quantity=1, unit="ud")
    with pytest.raises(ValidationError):
        item.quantity = 2


@pytest.mark.parametrize("quantity, expected", [
    (10, "ABC123 - Tomate (10 kg)"),
    (0.25, "ABC123 - Tomate (0.25 kg)"),
])
def test_summary_line(quantity, expected):
    item = ParsedItemLine(ref="ABC123", product="Tomate", quantity=quantity, unit=Unit.KG)
    assert item.to_summary_line() == expected


def test_batch_defaults():
    batch = ItemBatch()
    assert batch.items == []
    assert batch.reason is None

"""
Unit-тесты для ItemBatchParser.

ЦКП: Порядок товаров, первая ошибка прерывает партию, директива "motivo:".
"""

import pytest
from unittest.mock import MagicMock

from contracts.item_line_dto import ItemBatch, ParsedItemLine, Unit
from koabot.parsing import parse_item_lines
from koabot.parsing.application.batch_parser import ItemBatchParser
from koabot.parsing.application.factory import ParsingComponentFactory
from koabot.parsing.domain.exceptions import (
    EmptyBatchError,
    InvalidUnitError,
    ItemBatchError,
    QuantityPrecisionError,
)


@pytest.fixture(scope="module")
def line_parser():
    return ParsingComponentFactory.create_item_line_parser()


def test_items_in_input_order(line_parser):
    batch = ItemBatchParser(line_parser).parse(
        "ABC123; Tomate dañado; 2; kg\n"
        "\n"
        "DEF456; Lechuga; 1; ud\n"
        "Aceite 1.5 litros\n"
    )

    assert isinstance(batch, ItemBatch)
    assert [item.product for item in batch.items] == ["Tomate dañado", "Lechuga", "Aceite"]
    assert batch.items[2].unit == Unit.L
    assert batch.reason is None


def test_first_failing_line_aborts_batch(line_parser):
    with pytest.raises(ItemBatchError) as exc_info:
        ItemBatchParser(line_parser).parse("Tomate 10 kg\n\nTomate 10 cajas\nxx")

    error = exc_info.value
    assert error.line_number == 3
    assert error.line == "Tomate 10 cajas"
    assert isinstance(error.cause, InvalidUnitError)
    assert error.message.startswith('Error al parsear la línea 3: "Tomate 10 cajas"\n')
    assert "Unidad" in str(error)


def test_blank_message_is_empty_batch(line_parser):
    with pytest.raises(EmptyBatchError):
        ItemBatchParser(line_parser).parse("  \n\n ")


def test_reason_directive(line_parser):
    parser = ItemBatchParser(line_parser, allow_reason_directive=True)
    batch = parser.parse("ABC123; Tomate; 2; kg\nMotivo: caducado\nDEF456; Lechuga; 1; ud")

    assert batch.reason == "caducado"
    assert len(batch.items) == 2


def test_reason_directive_disabled_by_default(line_parser):
    with pytest.raises(ItemBatchError):
        ItemBatchParser(line_parser).parse("ABC123; Tomate; 2; kg\nmotivo: caducado")


def test_only_directive_is_empty_batch(line_parser):
    parser = ItemBatchParser(line_parser, allow_reason_directive=True)
    with pytest.raises(EmptyBatchError):
        parser.parse("motivo: caducado")


def test_precision_policy(line_parser):
    parser = ItemBatchParser(line_parser, max_decimal_places=3)

    assert parser.parse("Sal 0.125 kg").items[0].quantity == 0.125
    with pytest.raises(ItemBatchError) as exc_info:
        parser.parse("Sal 0.1255 kg")
    assert isinstance(exc_info.value.cause, QuantityPrecisionError)
    assert "Cantidad" in exc_info.value.message


def test_line_parser_is_called_per_line():
    item = ParsedItemLine(product="Tomate", quantity=1, unit=Unit.KG)
    line_parser = MagicMock()
    line_parser.parse.return_value = item

    batch = ItemBatchParser(line_parser).parse("a\n\nb\nc")

    assert line_parser.parse.call_count == 3
    assert batch.items == [item, item, item]


def test_module_level_entry_point():
    batch = parse_item_lines("Tomate 10 kg\nmotivo: roto", allow_reason_directive=True)
    assert batch.reason == "roto"
    assert batch.items[0].ref == "UNKNOWN"

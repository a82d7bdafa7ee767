"""Tests for reading ledger and bill export files."""

import types

import pytest

from conftest import bill_row, ledger_row
from ledgersync.domain import schema
from ledgersync.domain.errors import ValidationError
from ledgersync.storage.export_csv import is_expense, iter_export_rows, read_export
from ledgersync.storage.ledger_csv import iter_ledger_rows, read_ledger


def test_read_ledger_rows(write_ledger):
    path = write_ledger(
        [
            ledger_row("2024年3月1日", "50.00", "CoffeeShop"),
            ledger_row("2024年3月2日", "8.00", "便利店", product="牛奶", quantity="2"),
        ]
    )

    rows = read_ledger(path)

    assert len(rows) == 2
    assert rows[0][schema.NOTE] == "CoffeeShop"
    assert rows[1][schema.QUANTITY] == "2"
    assert list(rows[0]) == schema.LEDGER_COLUMNS


def test_ledger_reader_is_lazy(write_ledger):
    path = write_ledger([ledger_row("2024年3月1日", "50.00", "CoffeeShop")])

    rows = iter_ledger_rows(path)

    assert isinstance(rows, types.GeneratorType)
    assert len(list(rows)) == 1
    assert list(rows) == []


def test_ledger_keeps_extra_columns(write_ledger):
    columns = schema.LEDGER_COLUMNS + ["标签"]
    row = dict(ledger_row("2024年3月1日", "50.00", "CoffeeShop"), 标签="早餐")
    path = write_ledger([row], columns=columns)

    assert read_ledger(path)[0]["标签"] == "早餐"


def test_ledger_with_bom(work_dir):
    path = work_dir / "家庭账本.csv"
    path.write_text(
        ",".join(schema.LEDGER_COLUMNS) + "\n咖啡,,2024年3月1日,50.00,餐饮,CoffeeShop,线下\n",
        encoding="utf-8-sig",
    )

    rows = read_ledger(path)

    assert rows[0][schema.PRODUCT] == "咖啡"


def test_ledger_missing_required_columns(work_dir):
    path = work_dir / "家庭账本.csv"
    path.write_text("所购商品,备注\n咖啡,CoffeeShop\n", encoding="utf-8")

    with pytest.raises(ValidationError) as excinfo:
        read_ledger(path)

    assert "missing required columns" in str(excinfo.value)
    assert schema.PURCHASE_DATE in str(excinfo.value)


def test_empty_ledger_file(work_dir):
    path = work_dir / "家庭账本.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValidationError):
        read_ledger(path)


def test_header_only_ledger(write_ledger):
    assert read_ledger(write_ledger([])) == []


def test_read_export_skips_preamble_and_header(write_export):
    path = write_export(
        [
            bill_row("2024-03-01 08:30:00", "CoffeeShop(Downtown)", "¥50.00"),
            bill_row("2024-03-02 12:00:00", "张三", "¥20.00", direction="收入"),
        ]
    )

    rows = read_export(path)

    assert len(rows) == 2
    assert rows[0][schema.TX_TIME] == "2024-03-01 08:30:00"
    assert rows[0][schema.COUNTERPARTY] == "CoffeeShop(Downtown)"
    assert rows[0][schema.TX_AMOUNT] == "¥50.00"
    assert rows[1][schema.DIRECTION] == "收入"
    assert list(rows[0]) == schema.EXPORT_COLUMNS


def test_read_export_strips_padding(write_export):
    path = write_export([bill_row("2024-03-01 08:30:00", "CoffeeShop", "¥50.00", tx_id="42")])

    assert read_export(path)[0][schema.TX_ID] == "42"


def test_read_export_without_header_row(write_export):
    path = write_export([bill_row("2024-03-01 08:30:00", "CoffeeShop", "¥50.00")], header=False)

    assert len(read_export(path)) == 1


def test_read_export_tolerates_trailing_empty_cell(write_export):
    path = write_export([bill_row("2024-03-01 08:30:00", "CoffeeShop", "¥50.00") + [""]])

    assert len(read_export(path)) == 1


def test_read_export_skips_blank_lines(write_export):
    path = write_export([bill_row("2024-03-01 08:30:00", "CoffeeShop", "¥50.00")])
    path.write_text(path.read_text(encoding="utf-8") + "\n\n", encoding="utf-8")

    assert len(read_export(path)) == 1


def test_read_export_accepts_empty_last_cells(write_export):
    """Rows with an empty remark, or empty merchant id and remark, keep all columns."""
    no_remark = bill_row("2024-03-01 08:30:00", "CoffeeShop", "¥50.00")
    no_remark[10] = ""
    no_ids = bill_row("2024-03-02 08:30:00", "Bookstore", "¥30.00")
    no_ids[9] = ""
    no_ids[10] = ""
    path = write_export([no_remark, no_ids])

    rows = read_export(path)

    assert len(rows) == 2
    assert rows[0][schema.REMARK] == ""
    assert rows[0][schema.TX_ID] == "4200001"
    assert rows[1][schema.MERCHANT_ID] == ""
    assert rows[1][schema.COUNTERPARTY] == "Bookstore"


def test_read_export_rejects_misaligned_rows(write_export):
    short_row = bill_row("2024-03-02 08:30:00", "CoffeeShop", "¥50.00")[:9]
    path = write_export([bill_row("2024-03-01 08:30:00", "CoffeeShop", "¥50.00"), short_row])

    with pytest.raises(ValidationError) as excinfo:
        read_export(path)

    message = str(excinfo.value)
    assert "expected 11 columns, got 9" in message
    # 16 preamble lines, header, first row, then the short row
    assert "line 19" in message


def test_read_export_rejects_wide_rows(write_export):
    wide_row = bill_row("2024-03-01 08:30:00", "CoffeeShop", "¥50.00") + ["extra"]
    path = write_export([wide_row])

    with pytest.raises(ValidationError):
        list(iter_export_rows(path))


def test_is_expense():
    row = dict(zip(schema.EXPORT_COLUMNS, bill_row("2024-03-01 08:30:00", "A", "¥1.00")))
    income = dict(row, **{schema.DIRECTION: "收入"})
    neutral = dict(row, **{schema.DIRECTION: "/"})
    no_time = dict(row, **{schema.TX_TIME: ""})

    assert is_expense(row)
    assert not is_expense(income)
    assert not is_expense(neutral)
    assert not is_expense(no_time)

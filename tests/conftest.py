"""Shared pytest fixtures for ledgersync tests."""

import csv
import io
import json
from pathlib import Path

import pytest

from ledgersync.config import LedgerConfig
from ledgersync.domain import schema

LEDGER_NAME = "家庭账本2024.csv"
EXPORT_NAME = "wechat_bill_20240301_20240331.csv"

# Account summary block that precedes the transaction table in a bill export
PREAMBLE = [
    "微信支付账单明细,,,,,,,,",
    "微信昵称：[测试用户],,,,,,,,",
    "起始时间：[2024-03-01 00:00:00] 终止时间：[2024-03-31 23:59:59],,,,,,,,",
    "导出类型：[全部],,,,,,,,",
    "导出时间：[2024-04-01 10:00:00],,,,,,,,",
    ",,,,,,,,",
    "共3笔记录,,,,,,,,",
    "收入：1笔 20.00元,,,,,,,,",
    "支出：2笔 80.00元,,,,,,,,",
    "中性交易：0笔 0.00元,,,,,,,,",
    "注：,,,,,,,,",
    "1. 充值/提现/理财通购买/零钱通存取/信用卡还款等交易，将计入中性交易,,,,,,,,",
    "2. 除微信支付交易外，其他交易均计入中性交易,,,,,,,,",
    '3. 如有疑问，请联系"客服",,,,,,,,',
    ",,,,,,,,",
    "----------------------微信支付账单明细列表--------------------,,,,,,,,",
]


def bill_row(time, counterparty, amount, item="/", direction=schema.EXPENSE, tx_id="4200001"):
    """Build one export row in column order."""
    return [
        time,
        "商户消费",
        counterparty,
        item,
        direction,
        amount,
        "零钱",
        "支付成功",
        f"{tx_id}\t",
        "10000\t",
        "/",
    ]


def ledger_row(date, amount, note, product="咖啡", category="餐饮", platform="线下", quantity=""):
    """Build one ledger row keyed by ledger columns."""
    return {
        schema.PRODUCT: product,
        schema.QUANTITY: quantity,
        schema.PURCHASE_DATE: date,
        schema.AMOUNT: amount,
        schema.CATEGORY: category,
        schema.NOTE: note,
        schema.PLATFORM: platform,
    }


def render_export(rows, header=True) -> str:
    buffer = io.StringIO()
    buffer.write("\n".join(PREAMBLE) + "\n")
    writer = csv.writer(buffer, lineterminator="\n")
    if header:
        writer.writerow(schema.EXPORT_COLUMNS)
    writer.writerows(rows)
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment settings out of the tests."""
    for name in (
        "LEDGERSYNC_DIR",
        "LEDGERSYNC_RULES",
        "LEDGERSYNC_OUTPUT",
        "LEDGERSYNC_LOG",
        "LEDGERSYNC_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def work_dir(tmp_path):
    """Return an empty working directory."""
    return tmp_path


@pytest.fixture
def config(work_dir):
    """Create a default configuration for the working directory."""
    return LedgerConfig(work_dir=work_dir)


@pytest.fixture
def write_ledger(work_dir):
    """Return a helper writing a ledger CSV into the working directory."""

    def _write(rows, name=LEDGER_NAME, columns=None) -> Path:
        path = work_dir / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=columns or schema.LEDGER_COLUMNS)
            writer.writeheader()
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def write_export(work_dir):
    """Return a helper writing a bill export into the working directory."""

    def _write(rows, name=EXPORT_NAME, header=True) -> Path:
        path = work_dir / name
        path.write_text(render_export(rows, header=header), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_rules(work_dir):
    """Return a helper writing rules.json into the working directory."""

    def _write(rules, name="rules.json") -> Path:
        path = work_dir / name
        path.write_text(json.dumps(rules, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_rules(write_rules):
    """Write a small rule set."""
    return write_rules(
        [
            {"keyword": "Book", "category": "Reading", "product": "Book"},
            {"keyword": ["美团", "饿了么"], "category": "餐饮", "product": "外卖", "platform": "美团"},
            {"keyword": "CoffeeShop", "category": "餐饮", "product": "咖啡"},
        ]
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

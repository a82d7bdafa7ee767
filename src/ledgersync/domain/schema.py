"""Column layouts of the ledger and of the WeChat Pay bill export."""

# Ledger CSV, in write order
PRODUCT = "所购商品"
QUANTITY = "数量"
PURCHASE_DATE = "购买日期"
AMOUNT = "金额（元）"
CATEGORY = "类别"
NOTE = "备注"
PLATFORM = "购物平台"

LEDGER_COLUMNS = [PRODUCT, QUANTITY, PURCHASE_DATE, AMOUNT, CATEGORY, NOTE, PLATFORM]
REQUIRED_LEDGER_COLUMNS = [PURCHASE_DATE, AMOUNT]

# Merchant lookup order for existing rows; older ledgers lack a note column
LEDGER_MERCHANT_COLUMNS = [NOTE, PRODUCT]

# Sentinels for unclassified transactions
UNCATEGORIZED = "待分类"
UNKNOWN_PRODUCT = "未知商品"
OFFLINE = "线下"

# WeChat Pay bill export. The file does not describe itself reliably, so the
# preamble length and the column order are pinned to a known layout.
EXPORT_SCHEMA_VERSION = "wechat-2024"
EXPORT_PREAMBLE_LINES = 16

TX_TIME = "交易时间"
TX_TYPE = "交易类型"
COUNTERPARTY = "交易对方"
ITEM = "商品"
DIRECTION = "收/支"
TX_AMOUNT = "金额(元)"
PAYMENT_METHOD = "支付方式"
STATUS = "当前状态"
TX_ID = "交易单号"
MERCHANT_ID = "商户单号"
REMARK = "备注"

EXPORT_COLUMNS = [
    TX_TIME,
    TX_TYPE,
    COUNTERPARTY,
    ITEM,
    DIRECTION,
    TX_AMOUNT,
    PAYMENT_METHOD,
    STATUS,
    TX_ID,
    MERCHANT_ID,
    REMARK,
]

EXPENSE = "支出"

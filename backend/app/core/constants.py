from datetime import timedelta
from decimal import Decimal

# Fixed exchange rates: USDT received per unit of the payment currency
EXCHANGE_RATES: dict[str, float] = {
    "ETH": 2400.00,
    "BNB": 620.00,
    "TRX": 0.12,
    "SOL": 180.00,
    "USDT": 1.00,
}

# 1 USDT buys 65 tokens
TOKENS_PER_USDT = 65
TOKEN_PRICE_USDT = 1 / TOKENS_PER_USDT

# Row inserted when presale_data is empty
INITIAL_TOTAL_RAISED = Decimal("76735.34")
INITIAL_TOTAL_SUPPLY = Decimal("200000")
INITIAL_CURRENT_RATE = Decimal("65")
INITIAL_STAGE_DURATION = timedelta(days=3, hours=5, minutes=17, seconds=14)

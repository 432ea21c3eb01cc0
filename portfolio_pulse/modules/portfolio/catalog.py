from __future__ import annotations

from typing import List

from portfolio_pulse.modules.portfolio.schemas import CatalogStock


def _stock(symbol: str, name: str, price: float, change: float, change_percent: float, sector: str) -> CatalogStock:
    return CatalogStock(
        symbol=symbol,
        name=name,
        current_price=price,
        change=change,
        change_percent=change_percent,
        sector=sector,
    )


# Popular NSE listings across large, mid and small caps with static quotes.
STOCK_CATALOG: List[CatalogStock] = [
    # Large cap
    _stock("RELIANCE", "Reliance Industries", 2750.50, 25.75, 0.95, "Oil & Gas"),
    _stock("TCS", "Tata Consultancy Services", 3456.25, -32.10, -0.92, "IT"),
    _stock("HDFCBANK", "HDFC Bank", 1450.75, 15.25, 1.06, "Banking"),
    _stock("INFY", "Infosys", 1520.40, 8.90, 0.59, "IT"),
    _stock("HINDUNILVR", "Hindustan Unilever", 2350.20, -12.30, -0.52, "FMCG"),
    _stock("ICICIBANK", "ICICI Bank", 890.60, 5.40, 0.61, "Banking"),
    _stock("BHARTIARTL", "Bharti Airtel", 1025.30, 18.90, 1.88, "Telecom"),
    _stock("ITC", "ITC Limited", 420.75, 3.25, 0.78, "FMCG"),
    _stock("SBIN", "State Bank of India", 580.25, 7.80, 1.36, "Banking"),
    _stock("HDFC", "HDFC Limited", 2650.80, 32.45, 1.24, "Finance"),
    # Mid cap
    _stock("ADANIPORTS", "Adani Ports", 745.60, -8.90, -1.18, "Infrastructure"),
    _stock("BAJFINANCE", "Bajaj Finance", 6850.75, 125.50, 1.87, "Finance"),
    _stock("TATAMOTORS", "Tata Motors", 450.30, 5.20, 1.17, "Automobile"),
    _stock("SUNPHARMA", "Sun Pharmaceutical", 980.45, -12.30, -1.24, "Pharma"),
    _stock("TITAN", "Titan Company", 2450.60, 45.80, 1.90, "Consumer Goods"),
    # Small cap and others
    _stock("IRCTC", "Indian Railway Catering", 680.25, 15.40, 2.32, "Travel"),
    _stock("NAUKRI", "Info Edge", 4250.80, -75.60, -1.75, "Internet"),
    _stock("AUBANK", "AU Small Finance Bank", 1250.40, 32.80, 2.70, "Banking"),
    _stock("DIVISLAB", "Divi's Laboratories", 3850.75, -42.30, -1.09, "Pharma"),
    _stock("PAGEIND", "Page Industries", 32500.80, 450.60, 1.41, "Textiles"),
    # New age and tech
    _stock("ZOMATO", "Zomato Limited", 85.40, 2.10, 2.52, "Internet"),
    _stock("PAYTM", "One 97 Communications", 650.25, -8.75, -1.33, "Fintech"),
    _stock("NAZARA", "Nazara Technologies", 580.60, 12.40, 2.18, "Gaming"),
    _stock("TATAPOWER", "Tata Power", 230.45, 3.20, 1.41, "Power"),
    _stock("ADANIENT", "Adani Enterprises", 1850.75, -22.40, -1.20, "Conglomerate"),
]


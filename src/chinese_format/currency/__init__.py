"""
Currency — денежные суммы.

Сейчас поддерживается только жэньминьби (юань / цзяо / фэнь).
"""

from chinese_format.currency.renminbi import (
    FINANCIAL_TERMINATOR,
    CurrencyStyle,
    EverydayFormalAmount,
    EverydayInformalAmount,
    FinancialAmount,
    RenminbiCurrency,
    RenminbiCurrencyBuilder,
)

__all__ = [
    "CurrencyStyle",
    "RenminbiCurrency",
    "RenminbiCurrencyBuilder",
    # Measures
    "EverydayFormalAmount",
    "EverydayInformalAmount",
    "FinancialAmount",
    "FINANCIAL_TERMINATOR",
]

"""Category vocabulary offered by the add form, keyed by transaction type.

Advisory only: the store accepts any category string.
"""

from typing import List

CATEGORIES = {
    "expense": [
        "Alimentação",
        "Transporte",
        "Moradia",
        "Lazer",
        "Saúde",
        "Educação",
        "Compras",
        "Outros",
    ],
    "income": [
        "Salário",
        "Investimentos",
        "Freelance",
        "Presente",
        "Outros",
    ],
}


def categories_for(transaction_type: str) -> List[str]:
    return list(CATEGORIES.get(transaction_type, []))

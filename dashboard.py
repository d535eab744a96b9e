# dashboard.py — totals, category breakdown and charts for the summary view

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable

import pandas as pd
import plotly.express as px

from storage import TransactionRecord

COLUMNS = ["id", "type", "category", "amount", "date", "description"]
COLORS = ["#10b981", "#3b82f6", "#f59e0b", "#ef4444", "#8b5cf6", "#ec4899", "#06b6d4", "#71717a"]

MONTHS_PT = [
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
]


@dataclass
class Summary:
    total_income: float = 0.0
    total_expenses: float = 0.0
    balance: float = 0.0
    category_breakdown: Dict[str, float] = field(default_factory=dict)


def transactions_to_df(transactions: Iterable[TransactionRecord]) -> pd.DataFrame:
    rows = [t.to_dict() for t in transactions]
    if not rows:
        return pd.DataFrame(columns=COLUMNS)

    df = pd.DataFrame(rows, columns=COLUMNS)
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0.0)
    df["category"] = df["category"].fillna("Uncategorized")
    return df


def category_breakdown(df: pd.DataFrame) -> Dict[str, float]:
    """
    Summed expense amount per category, in first-seen order.
    """
    expenses = df[df["type"] == "expense"]
    if expenses.empty:
        return {}
    by_cat = expenses.groupby("category", sort=False)["amount"].sum()
    return {str(cat): float(total) for cat, total in by_cat.items()}


def summarize(transactions: Iterable[TransactionRecord]) -> Summary:
    """
    Recomputes every figure from the full list. Nothing is cached.
    """
    df = transactions_to_df(transactions)
    if df.empty:
        return Summary()

    income = float(df[df["type"] == "income"]["amount"].sum())
    expenses = float(df[df["type"] == "expense"]["amount"].sum())

    return Summary(
        total_income=income,
        total_expenses=expenses,
        balance=income - expenses,
        category_breakdown=category_breakdown(df),
    )


def cat_spend(breakdown: Dict[str, float]):
    """
    Donut chart of spending by category.
    """
    by_cat = pd.DataFrame({"Category": list(breakdown.keys()), "Amount": list(breakdown.values())})
    fig = px.pie(
        by_cat,
        values="Amount",
        names="Category",
        hole=0.4,
        title="Gastos por Categoria",
        color_discrete_sequence=COLORS,
    )
    fig.update_traces(textposition="inside", textinfo="percent+label")
    return fig


def format_currency(value: float) -> str:
    """BRL in pt-BR notation, e.g. ``R$ 1.234,56``."""
    text = f"{abs(value):,.2f}".translate(str.maketrans({",": ".", ".": ","}))
    sign = "-" if value < 0 else ""
    return f"{sign}R$ {text}"


def format_day(iso_date: str) -> str:
    try:
        d = date.fromisoformat(iso_date)
    except (TypeError, ValueError):
        return iso_date
    return f"{d.day:02d} de {MONTHS_PT[d.month - 1]}"

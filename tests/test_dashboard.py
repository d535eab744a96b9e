from dashboard import Summary, cat_spend, format_currency, format_day, summarize, transactions_to_df
from storage import TransactionRecord


def _txn(id, type, category, amount, date="2024-01-01"):
    return TransactionRecord(id=id, type=type, category=category, amount=amount, date=date, description="")


def test_empty_list_is_all_zero():
    summary = summarize([])
    assert summary == Summary(total_income=0.0, total_expenses=0.0, balance=0.0, category_breakdown={})


def test_salary_and_food_scenario():
    txns = [
        _txn(2, "expense", "Alimentação", 200, "2024-01-02"),
        _txn(1, "income", "Salário", 1000, "2024-01-01"),
    ]

    summary = summarize(txns)

    assert summary.total_income == 1000
    assert summary.total_expenses == 200
    assert summary.balance == 800
    assert summary.category_breakdown == {"Alimentação": 200}


def test_same_category_expenses_are_summed():
    summary = summarize([_txn(1, "expense", "Lazer", 50), _txn(2, "expense", "Lazer", 30)])
    assert summary.category_breakdown == {"Lazer": 80}


def test_income_only_has_empty_breakdown():
    summary = summarize([_txn(1, "income", "Salário", 1000), _txn(2, "income", "Outros", 20)])
    assert summary.category_breakdown == {}
    assert summary.total_expenses == 0
    assert summary.balance == 1020


def test_income_in_expense_category_is_not_charted():
    # "Outros" exists in both vocabularies
    summary = summarize([_txn(1, "income", "Outros", 500), _txn(2, "expense", "Outros", 20)])
    assert summary.category_breakdown == {"Outros": 20}


def test_balance_can_go_negative():
    summary = summarize([_txn(1, "income", "Salário", 100), _txn(2, "expense", "Moradia", 900)])
    assert summary.balance == summary.total_income - summary.total_expenses == -800


def test_breakdown_keeps_first_seen_order():
    txns = [
        _txn(1, "expense", "Transporte", 10),
        _txn(2, "expense", "Alimentação", 10),
        _txn(3, "expense", "Transporte", 5),
        _txn(4, "expense", "Compras", 1),
    ]
    assert list(summarize(txns).category_breakdown) == ["Transporte", "Alimentação", "Compras"]


def test_missing_category_grouped_as_uncategorized():
    summary = summarize([_txn(1, "expense", None, 12)])
    assert summary.category_breakdown == {"Uncategorized": 12}


def test_transactions_to_df_empty_has_columns():
    df = transactions_to_df([])
    assert df.empty
    assert "amount" in df.columns and "type" in df.columns


def test_cat_spend_one_slice_per_category():
    fig = cat_spend({"Alimentação": 200.0, "Lazer": 80.0})
    pie = fig.data[0]
    assert list(pie.labels) == ["Alimentação", "Lazer"]
    assert list(pie.values) == [200.0, 80.0]
    assert pie.hole == 0.4


def test_format_currency_brl():
    assert format_currency(1234.5) == "R$ 1.234,50"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(-800) == "-R$ 800,00"
    assert format_currency(1000000) == "R$ 1.000.000,00"


def test_format_day():
    assert format_day("2024-01-05") == "05 de janeiro"
    assert format_day("2024-03-31") == "31 de março"
    assert format_day("not a date") == "not a date"

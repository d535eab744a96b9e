import streamlit as st
from datetime import date

from api_client import FinanceClient, LedgerState
from categories import categories_for
from dashboard import cat_spend, format_currency, format_day
from logging_setup import configure_logging

# --- Configuration ---
st.set_page_config(page_title="Finanças Pessoais", layout="wide", page_icon="💰")
configure_logging()

TYPE_LABELS = {"expense": "Despesa", "income": "Receita"}

# --- Ledger State ---
if "ledger" not in st.session_state:
    st.session_state.ledger = LedgerState(FinanceClient())


def get_ledger() -> LedgerState:
    return st.session_state.ledger


ledger = get_ledger()
if not ledger.loaded:
    ledger.refresh()

summary = ledger.summary

st.title("💰 Finanças Pessoais")

# --- Summary Cards ---
col1, col2, col3 = st.columns(3)
col1.metric("👛 Saldo Total", format_currency(summary.balance))
col2.metric("📈 Receitas", format_currency(summary.total_income))
col3.metric("📉 Despesas", format_currency(summary.total_expenses))

st.divider()

list_col, chart_col = st.columns([2, 1])

with list_col:
    st.subheader("Transações Recentes")

    with st.expander("➕ Nova Transação"):
        # Outside the form so the category options follow the chosen type
        txn_type = st.radio(
            "Tipo",
            list(TYPE_LABELS.keys()),
            format_func=TYPE_LABELS.get,
            horizontal=True,
            key="new_txn_type",
        )
        with st.form("add_transaction", clear_on_submit=True):
            category = st.selectbox("Categoria", categories_for(txn_type), index=None, placeholder="Selecione")
            amount = st.number_input("Valor (R$)", min_value=0.0, step=10.0, value=None)
            txn_date = st.date_input("Data", value=date.today())
            description = st.text_input("Descrição (opcional)")

            if st.form_submit_button("Adicionar"):
                new_id = ledger.add(
                    txn_type,
                    category,
                    amount,
                    txn_date.isoformat() if txn_date else "",
                    description,
                )
                if new_id is not None:
                    st.rerun()

    if not ledger.transactions:
        st.info("Nenhuma transação encontrada.")
    else:
        for t in ledger.transactions:
            c1, c2, c3 = st.columns([5, 2, 1])
            label = t.description or t.category
            c1.markdown(f"**{label}**  \n{t.category} · {format_day(t.date)}")
            sign = "+" if t.type == "income" else "-"
            c2.markdown(f"{sign} {format_currency(t.amount)}")
            if c3.button("🗑️", key=f"delete_{t.id}"):
                ledger.remove(t.id)
                st.rerun()

with chart_col:
    st.subheader("Gastos por Categoria")
    if summary.category_breakdown:
        st.plotly_chart(cat_spend(summary.category_breakdown), use_container_width=True)
    else:
        st.info("Nenhuma despesa registrada.")

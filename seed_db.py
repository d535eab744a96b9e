from database import init_db
from logging_setup import configure_logging, get_logger
from storage import SqlTransactionStore, TransactionStore

logger = get_logger("finance.seed_db")

DEMO_TRANSACTIONS = [
    ("income", "Salário", 1000.0, "2024-01-01", "Salário de janeiro"),
    ("expense", "Alimentação", 200.0, "2024-01-02", "Supermercado"),
    ("expense", "Transporte", 50.0, "2024-01-03", "Ônibus"),
]


def seed_transactions(store: TransactionStore) -> int:
    # Check if transactions exist
    if store.list():
        logger.info("Transactions already exist. Skipping seed.")
        return 0

    for row in DEMO_TRANSACTIONS:
        store.create(*row)
    logger.info("Seeded %d demo transactions.", len(DEMO_TRANSACTIONS))
    return len(DEMO_TRANSACTIONS)


if __name__ == "__main__":
    configure_logging()
    init_db()
    seed_transactions(SqlTransactionStore())

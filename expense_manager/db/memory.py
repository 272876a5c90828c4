import logging
from typing import Iterator, List, Optional

from expense_manager.models.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionStore:
    """
    In-memory, newest-first sequence of transactions for a single session.
    Transactions are only ever added or removed, never updated in place.
    """

    def __init__(self) -> None:
        self._items: List[Transaction] = []

    def add(self, transaction: Transaction) -> Transaction:
        """Prepend a transaction. Content duplicates with distinct ids are kept."""
        self._items.insert(0, transaction)
        logger.info(
            f"Added {transaction.kind.value} {transaction.id}: "
            f"{transaction.category} {transaction.amount:.2f}"
        )
        return transaction

    def remove(self, transaction_id: str) -> bool:
        """Remove the transaction with the given id; absent ids are a no-op."""
        for idx, item in enumerate(self._items):
            if item.id == transaction_id:
                del self._items[idx]
                logger.info(f"Removed transaction {transaction_id}")
                return True
        logger.info(f"Transaction {transaction_id} not found, nothing removed")
        return False

    def get(self, transaction_id: str) -> Optional[Transaction]:
        return next((t for t in self._items if t.id == transaction_id), None)

    def list(self) -> List[Transaction]:
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._items))

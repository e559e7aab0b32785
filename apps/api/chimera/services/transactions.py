"""Shared transaction submission for ledger services."""

from collections.abc import Callable
import logging

from chimera.core.logging_safety import safe_log_identifier
from chimera.domain.ledger import LedgerEvent, LedgerState
from chimera.errors import ApiError
from chimera.repositories.memory import EventLogRecord, InMemoryStore, LedgerRecord, TransactionRecord
from chimera.schemas.ledger import EventLog, TransactionReceipt

logger = logging.getLogger(__name__)


def require_ledger(store: InMemoryStore, address: str) -> LedgerRecord:
    record = store.get_ledger(address)
    if record is None:
        raise ApiError(status_code=404, code="RESOURCE_NOT_FOUND", message="Resource not found")
    return record


def submit_transaction(
    store: InMemoryStore,
    *,
    ledger: LedgerRecord,
    sender: str,
    action: str,
    operation: Callable[[LedgerState], list[LedgerEvent]],
) -> TransactionReceipt:
    """Apply a mutating ledger operation and log whether it was mined or reverted."""
    safe_ledger = safe_log_identifier(ledger.address, prefix="lid")
    safe_sender = safe_log_identifier(sender, prefix="acc")
    try:
        transaction = store.apply_transaction(ledger=ledger, sender=sender, operation=operation)
    except ApiError as exc:
        logger.info(
            "ledger.reverted action=%s ledger=%s sender=%s code=%s",
            action,
            safe_ledger,
            safe_sender,
            exc.payload.code,
        )
        raise

    logger.info(
        "ledger.%s ledger=%s sender=%s block=%s logs=%s",
        action,
        safe_ledger,
        safe_sender,
        transaction.block_number,
        len(transaction.logs),
    )
    return to_receipt(transaction)


def to_receipt(transaction: TransactionRecord) -> TransactionReceipt:
    return TransactionReceipt(
        transaction_hash=transaction.transaction_hash,
        ledger_address=transaction.ledger_address,
        block_number=transaction.block_number,
        sender=transaction.sender,
        logs=[to_event_log(log) for log in transaction.logs],
    )


def to_event_log(log: EventLogRecord) -> EventLog:
    return EventLog(
        event=log.event,
        args=log.args,
        ledger_address=log.ledger_address,
        block_number=log.block_number,
        log_index=log.log_index,
        transaction_hash=log.transaction_hash,
    )

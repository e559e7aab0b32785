"""In-memory repositories used by the API and tests."""

from __future__ import annotations

import copy
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from chimera.domain.ledger import LedgerEvent, LedgerState


def _new_address() -> str:
    return f"0x{secrets.token_hex(20)}"


def _new_transaction_hash() -> str:
    return f"0x{secrets.token_hex(32)}"


@dataclass(slots=True)
class LedgerRecord:
    address: str
    state: LedgerState
    created_at: datetime
    block_number: int
    gas: int | None = None
    gas_price: int | None = None


@dataclass(slots=True)
class EventLogRecord:
    event: str
    args: dict[str, Any]
    ledger_address: str
    block_number: int
    log_index: int
    transaction_hash: str


@dataclass(slots=True)
class TransactionRecord:
    transaction_hash: str
    ledger_address: str
    block_number: int
    sender: str
    logs: list[EventLogRecord]


@dataclass(slots=True)
class InMemoryStore:
    """Deterministic persistence layer for deployed ledgers and their event logs."""

    ledgers: dict[str, LedgerRecord] = field(default_factory=dict)
    event_logs: dict[str, list[EventLogRecord]] = field(default_factory=dict)
    block_number: int = 0
    ledger_write_count: int = 0
    transaction_failpoint_message: str | None = None

    def create_ledger(
        self,
        *,
        creator: str,
        name: str,
        symbol: str,
        decimals: int,
        total_supply: int,
        gas: int | None = None,
        gas_price: int | None = None,
    ) -> LedgerRecord:
        self.block_number += 1
        record = LedgerRecord(
            address=_new_address(),
            state=LedgerState.create(
                name=name,
                symbol=symbol,
                decimals=decimals,
                total_supply=total_supply,
                owner=creator,
            ),
            created_at=datetime.now(UTC),
            block_number=self.block_number,
            gas=gas,
            gas_price=gas_price,
        )
        self.ledgers[record.address] = record
        self.event_logs[record.address] = []
        self.ledger_write_count += 1
        return record

    def get_ledger(self, address: str) -> LedgerRecord | None:
        ledger = self.ledgers.get(address)
        if ledger is None:
            # Addresses are hex; accept any casing the caller used.
            ledger = self.ledgers.get(address.lower())
        return ledger

    def list_events(self, address: str, event: str | None = None) -> list[EventLogRecord]:
        logs = self.event_logs.get(address, [])
        if event is None:
            return list(logs)
        return [log for log in logs if log.event == event]

    def apply_transaction(
        self,
        *,
        ledger: LedgerRecord,
        sender: str,
        operation: Callable[[LedgerState], list[LedgerEvent]],
    ) -> TransactionRecord:
        """Run ``operation`` against the ledger state; restore everything if it raises."""
        previous_state = copy.deepcopy(ledger.state)
        previous_block_number = self.block_number
        previous_write_count = self.ledger_write_count
        event_log = self.event_logs.setdefault(ledger.address, [])
        previous_log_count = len(event_log)

        try:
            events = operation(ledger.state)
            self._maybe_raise_transaction_failpoint()

            self.block_number += 1
            transaction_hash = _new_transaction_hash()
            logs = [
                EventLogRecord(
                    event=event.name,
                    args=dict(event.args),
                    ledger_address=ledger.address,
                    block_number=self.block_number,
                    log_index=index,
                    transaction_hash=transaction_hash,
                )
                for index, event in enumerate(events)
            ]
            event_log.extend(logs)
            self.ledger_write_count += 1
        except Exception:
            ledger.state = previous_state
            self.block_number = previous_block_number
            self.ledger_write_count = previous_write_count
            del event_log[previous_log_count:]
            raise

        return TransactionRecord(
            transaction_hash=transaction_hash,
            ledger_address=ledger.address,
            block_number=self.block_number,
            sender=sender,
            logs=logs,
        )

    def _maybe_raise_transaction_failpoint(self) -> None:
        if self.transaction_failpoint_message is None:
            return

        message = self.transaction_failpoint_message
        self.transaction_failpoint_message = None
        raise RuntimeError(message)

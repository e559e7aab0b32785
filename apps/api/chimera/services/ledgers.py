"""Ledger deployment and token service layer."""

from functools import partial
import logging

from chimera.core.logging_safety import safe_log_identifier
from chimera.domain import ledger as ledger_rules
from chimera.repositories.memory import InMemoryStore, LedgerRecord
from chimera.schemas.ledger import (
    Allowance,
    Balance,
    DeployLedgerRequest,
    EventLog,
    Ledger,
    TransactionReceipt,
)
from chimera.services.transactions import require_ledger, submit_transaction, to_event_log

logger = logging.getLogger(__name__)


class LedgerService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def deploy_ledger(self, *, creator: str, request: DeployLedgerRequest) -> Ledger:
        record = self._store.create_ledger(
            creator=creator,
            name=request.name,
            symbol=request.symbol,
            decimals=request.decimals,
            total_supply=request.total_supply,
            gas=request.gas,
            gas_price=request.gas_price,
        )
        logger.info(
            "ledger.deployed ledger=%s creator=%s symbol=%s total_supply=%s block=%s",
            safe_log_identifier(record.address, prefix="lid"),
            safe_log_identifier(creator, prefix="acc"),
            request.symbol,
            request.total_supply,
            record.block_number,
        )
        return self._to_ledger(record)

    def get_ledger(self, *, address: str) -> Ledger:
        return self._to_ledger(require_ledger(self._store, address))

    def get_balance(self, *, address: str, account: str) -> Balance:
        record = require_ledger(self._store, address)
        return Balance(account=account, balance=record.state.balance_of(account))

    def get_allowance(self, *, address: str, owner: str, spender: str) -> Allowance:
        record = require_ledger(self._store, address)
        return Allowance(owner=owner, spender=spender, allowance=record.state.allowance_of(owner, spender))

    def transfer(self, *, address: str, sender: str, to: str, amount: int) -> TransactionReceipt:
        record = require_ledger(self._store, address)
        return submit_transaction(
            self._store,
            ledger=record,
            sender=sender,
            action="transfer",
            operation=partial(ledger_rules.transfer, sender=sender, to=to, amount=amount),
        )

    def approve(self, *, address: str, owner: str, spender: str, amount: int) -> TransactionReceipt:
        record = require_ledger(self._store, address)
        return submit_transaction(
            self._store,
            ledger=record,
            sender=owner,
            action="approve",
            operation=partial(ledger_rules.approve, owner=owner, spender=spender, amount=amount),
        )

    def transfer_from(
        self,
        *,
        address: str,
        spender: str,
        owner: str,
        to: str,
        amount: int,
    ) -> TransactionReceipt:
        record = require_ledger(self._store, address)
        return submit_transaction(
            self._store,
            ledger=record,
            sender=spender,
            action="transfer_from",
            operation=partial(ledger_rules.transfer_from, spender=spender, owner=owner, to=to, amount=amount),
        )

    def list_events(self, *, address: str, event: str | None = None) -> list[EventLog]:
        record = require_ledger(self._store, address)
        return [to_event_log(log) for log in self._store.list_events(record.address, event)]

    @staticmethod
    def _to_ledger(record: LedgerRecord) -> Ledger:
        state = record.state
        return Ledger(
            address=record.address,
            creator=state.owner,
            name=state.name,
            symbol=state.symbol,
            decimals=state.decimals,
            total_supply=state.total_supply,
            num_assets=state.num_assets,
            block_number=record.block_number,
            created_at=record.created_at,
        )

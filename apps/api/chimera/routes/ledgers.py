"""Ledger and token routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from chimera.routes.dependencies import get_ledger_service, get_sender, require_deploy_secret
from chimera.schemas.auth import AuthPrincipal
from chimera.schemas.error import ErrorResponse, NoLeakNotFoundError, RevertError
from chimera.schemas.ledger import (
    Allowance,
    ApproveRequest,
    Balance,
    DeployLedgerRequest,
    EventLog,
    Ledger,
    TransactionReceipt,
    TransferFromRequest,
    TransferRequest,
)
from chimera.services.ledgers import LedgerService

router = APIRouter(prefix="/ledgers", tags=["Ledgers"])

LedgerAddress = Annotated[str, Path(alias="ledgerAddress")]


@router.post(
    "",
    response_model=Ledger,
    status_code=status.HTTP_201_CREATED,
    responses={401: {"model": ErrorResponse}},
)
async def deploy_ledger(
    payload: DeployLedgerRequest,
    principal: Annotated[AuthPrincipal, Depends(get_sender)],
    _: Annotated[None, Depends(require_deploy_secret)],
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> Ledger:
    return service.deploy_ledger(creator=principal.account, request=payload)


@router.get(
    "/{ledgerAddress}",
    response_model=Ledger,
    responses={404: {"model": NoLeakNotFoundError}},
)
async def get_ledger(
    address: LedgerAddress,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> Ledger:
    return service.get_ledger(address=address)


@router.get(
    "/{ledgerAddress}/balances/{account}",
    response_model=Balance,
    responses={404: {"model": NoLeakNotFoundError}},
)
async def get_balance(
    address: LedgerAddress,
    account: str,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> Balance:
    return service.get_balance(address=address, account=account)


@router.get(
    "/{ledgerAddress}/allowances/{owner}/{spender}",
    response_model=Allowance,
    responses={404: {"model": NoLeakNotFoundError}},
)
async def get_allowance(
    address: LedgerAddress,
    owner: str,
    spender: str,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> Allowance:
    return service.get_allowance(address=address, owner=owner, spender=spender)


@router.post(
    "/{ledgerAddress}/transfer",
    response_model=TransactionReceipt,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": NoLeakNotFoundError},
        409: {"model": RevertError},
    },
)
async def transfer(
    address: LedgerAddress,
    payload: TransferRequest,
    principal: Annotated[AuthPrincipal, Depends(get_sender)],
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> TransactionReceipt:
    return service.transfer(address=address, sender=principal.account, to=payload.to, amount=payload.amount)


@router.post(
    "/{ledgerAddress}/approve",
    response_model=TransactionReceipt,
    responses={401: {"model": ErrorResponse}, 404: {"model": NoLeakNotFoundError}},
)
async def approve(
    address: LedgerAddress,
    payload: ApproveRequest,
    principal: Annotated[AuthPrincipal, Depends(get_sender)],
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> TransactionReceipt:
    return service.approve(
        address=address,
        owner=principal.account,
        spender=payload.spender,
        amount=payload.amount,
    )


@router.post(
    "/{ledgerAddress}/transfer-from",
    response_model=TransactionReceipt,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": NoLeakNotFoundError},
        409: {"model": RevertError},
    },
)
async def transfer_from(
    address: LedgerAddress,
    payload: TransferFromRequest,
    principal: Annotated[AuthPrincipal, Depends(get_sender)],
    service: Annotated[LedgerService, Depends(get_ledger_service)],
) -> TransactionReceipt:
    return service.transfer_from(
        address=address,
        spender=principal.account,
        owner=payload.owner,
        to=payload.to,
        amount=payload.amount,
    )


@router.get(
    "/{ledgerAddress}/events",
    response_model=list[EventLog],
    responses={404: {"model": NoLeakNotFoundError}},
)
async def list_events(
    address: LedgerAddress,
    service: Annotated[LedgerService, Depends(get_ledger_service)],
    event: Annotated[str | None, Query(min_length=1)] = None,
) -> list[EventLog]:
    return service.list_events(address=address, event=event)

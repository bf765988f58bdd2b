"""Pocket account endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from readmore.api.deps import get_pocket_accounts_repo
from readmore.api.filters import RequiredQueryParameter
from readmore.api.schemas import (
    FeatureToggleListResponse,
    FeatureToggleResponse,
    PocketAccountCreate,
    PocketAccountResponse,
    PocketAccountUpdate,
)
from readmore.core.exceptions import NotFoundError
from readmore.domain.models import PocketAccount
from readmore.repositories.protocols import PocketAccountsRepository

router = APIRouter(prefix="/pocket-accounts", tags=["pocket-accounts"])


@router.get(
    "",
    response_model=PocketAccountResponse,
    dependencies=[Depends(RequiredQueryParameter("username"))],
)
async def find_account_by_username(
    username: Optional[str] = None,
    repo: PocketAccountsRepository = Depends(get_pocket_accounts_repo),
) -> PocketAccountResponse:
    """Look up an account by its Pocket username."""
    account = await repo.find_by_username(username)
    if account is None:
        raise NotFoundError("PocketAccount", username)
    return PocketAccountResponse.model_validate(account)


@router.get("/{account_id}", response_model=PocketAccountResponse)
async def get_account(
    account_id: int,
    repo: PocketAccountsRepository = Depends(get_pocket_accounts_repo),
) -> PocketAccountResponse:
    """Get a single account."""
    account = await repo.find_by_id(account_id)
    if account is None:
        raise NotFoundError("PocketAccount", str(account_id))
    return PocketAccountResponse.model_validate(account)


@router.post("", response_model=PocketAccountResponse, status_code=201)
async def create_account(
    data: PocketAccountCreate,
    repo: PocketAccountsRepository = Depends(get_pocket_accounts_repo),
) -> PocketAccountResponse:
    """Store a new account. A taken username is reported as 409."""
    account = await repo.insert(PocketAccount(**data.model_dump()))
    return PocketAccountResponse.model_validate(account)


@router.put("/{account_id}", response_model=PocketAccountResponse)
async def update_account(
    account_id: int,
    data: PocketAccountUpdate,
    repo: PocketAccountsRepository = Depends(get_pocket_accounts_repo),
) -> PocketAccountResponse:
    """Overwrite every field of an existing account."""
    await repo.update(PocketAccount(id=account_id, **data.model_dump()))
    account = await repo.find_by_id(account_id)
    if account is None:
        raise NotFoundError("PocketAccount", str(account_id))
    return PocketAccountResponse.model_validate(account)


@router.delete("/{account_id}", status_code=204)
async def delete_account(
    account_id: int,
    repo: PocketAccountsRepository = Depends(get_pocket_accounts_repo),
) -> Response:
    """Delete an account. Deleting an unknown account also succeeds."""
    await repo.delete_by_id(account_id)
    return Response(status_code=204)


@router.get("/{account_id}/feature-toggles", response_model=FeatureToggleListResponse)
async def list_account_feature_toggles(
    account_id: int,
    repo: PocketAccountsRepository = Depends(get_pocket_accounts_repo),
) -> FeatureToggleListResponse:
    """List the feature toggles enabled for an account."""
    toggles = await repo.find_toggles_for_account(account_id)
    return FeatureToggleListResponse(
        toggles=[FeatureToggleResponse.model_validate(t) for t in toggles],
        count=len(toggles),
    )

from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import validate_current_token
from shared.core.database import get_rental_db as get_db
from shared.core.schemas import DeleteResult, DocumentAttach, UserToken
from ...crud.leasing_tenants import contracts_crud as crud
from ...schemas.leasing_tenants.contracts_schemas import (
    ContractCreate, ContractListResponse, ContractOut, ContractOverview,
    ContractRequest, ContractUpdate
)

router = APIRouter(
    prefix="/api/contracts",
    tags=["contracts"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/all", response_model=ContractListResponse)
def get_contracts(
    params: ContractRequest = Depends(),
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_contracts(db, current_user.user_id, params)


@router.get("/overview", response_model=ContractOverview)
def get_contracts_overview(
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_contracts_overview(db, current_user.user_id)


@router.post("/", response_model=ContractOut)
def create_contract(
    contract: ContractCreate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.create_contract(db, current_user.user_id, contract)


@router.put("/", response_model=ContractOut)
def update_contract(
    contract: ContractUpdate,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.update_contract(db, current_user.user_id, contract)


@router.get("/{contract_id}", response_model=ContractOut)
def get_contract(
    contract_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.get_contract(db, current_user.user_id, contract_id)


@router.put("/{contract_id}/document", response_model=ContractOut)
def attach_document(
    contract_id: UUID,
    document: DocumentAttach,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.attach_document(db, current_user.user_id, contract_id, document.document_url)


@router.delete("/{contract_id}", response_model=DeleteResult)
def delete_contract(
    contract_id: UUID,
    db: Session = Depends(get_db),
    current_user: UserToken = Depends(validate_current_token)):
    return crud.delete_contract(db, current_user.user_id, contract_id)

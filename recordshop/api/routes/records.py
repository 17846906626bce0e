"""Records CRUD over the in-process record store."""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header

from recordshop.api.state import AppState, get_state
from recordshop.core.role_policy import ADD, DELETE, UPDATE, is_allowed
from recordshop.errors import AuthenticationRequired, PermissionDenied, RecordNotFound
from recordshop.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


def require_permission(action: str):
    """Dependency: check the caller's role when enforcement is switched on.

    Callers identify themselves with X-User-Id (the id from the login
    response). With enforcement off every caller passes.
    """

    def check(
        state: AppState = Depends(get_state),
        x_user_id: Optional[int] = Header(default=None),
    ) -> Optional[User]:
        if not state.enforce_roles:
            return None
        user = state.directory.get(x_user_id) if x_user_id is not None else None
        if user is None:
            raise AuthenticationRequired()
        if not is_allowed(user.role, action):
            logger.warning("Denied %s for %s (%s)", action, user.email, user.role)
            raise PermissionDenied(f"Role '{user.role}' may not {action} records.")
        return user

    return check


@router.get("")
def list_records(state: AppState = Depends(get_state)):
    """List all records in insertion order."""
    return [r.to_dict() for r in state.store.list()]


@router.get("/{record_id}")
def get_record(record_id: int, state: AppState = Depends(get_state)):
    record = state.store.get(record_id)
    if record is None:
        raise RecordNotFound(record_id)
    return record.to_dict()


@router.post("", status_code=201, dependencies=[Depends(require_permission(ADD))])
def create_record(
    body: Dict[str, Any] = Body(...),
    state: AppState = Depends(get_state),
):
    """Create a record from the posted fields; values are stored as sent."""
    return state.store.create(body).to_dict()


@router.put("/{record_id}", dependencies=[Depends(require_permission(UPDATE))])
def update_record(
    record_id: int,
    body: Dict[str, Any] = Body(...),
    state: AppState = Depends(get_state),
):
    """Merge the posted fields over the record; missing fields are kept."""
    record = state.store.update(record_id, body)
    if record is None:
        raise RecordNotFound(record_id)
    return record.to_dict()


@router.delete("/{record_id}", dependencies=[Depends(require_permission(DELETE))])
def delete_record(record_id: int, state: AppState = Depends(get_state)):
    record = state.store.delete(record_id)
    if record is None:
        raise RecordNotFound(record_id)
    return {"message": "Record deleted.", "record": record.to_dict()}

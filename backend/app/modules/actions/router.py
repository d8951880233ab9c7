import logging
from fastapi import APIRouter, Depends
from app.modules.actions.deps import get_dispatcher
from app.modules.actions.schemas import ActionRequest, ActionResponse
from app.modules.auth.deps import get_current_admin
from app.modules.users.models import User
from app.system.dispatcher import ActionDispatcher

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Actions"])


@router.post("/actions", response_model=ActionResponse)
def run_action(
        payload: ActionRequest,
        dispatcher: ActionDispatcher = Depends(get_dispatcher),
        current_admin: User = Depends(get_current_admin)
):
    logger.info("User '%s' requested action '%s'", current_admin.username, payload.action)

    # Gagal pun tetap 200, hasilnya ada di field success/output
    result = dispatcher.dispatch(payload.action, payload.params)
    return ActionResponse(success=result.success, output=result.output)

from pydantic import BaseModel, Field
from typing import Dict


class ActionRequest(BaseModel):
    # add_website, switch_php, remove_website, restart_service, backup_website, view_logs
    action: str
    params: Dict[str, str] = Field(default_factory=dict)


class ActionResponse(BaseModel):
    success: bool
    output: str

from fastapi import APIRouter, Depends
from app.core import config
from app.modules.actions.deps import get_runner
from app.modules.auth.deps import get_current_admin
from app.modules.server import schemas
from app.modules.users.models import User
from app.system.command_runner import CommandRunner
from app.system.monitor import get_system_info
from app.system.service_manager import get_php_versions, get_services

router = APIRouter(tags=["Server"])


@router.get("/server/info", response_model=schemas.SystemInfoResponse)
def read_system_info(runner: CommandRunner = Depends(get_runner),
                     current_admin: User = Depends(get_current_admin)):
    return get_system_info(runner)


@router.get("/server/php", response_model=list[schemas.PhpVersionResponse])
def read_php_versions(current_admin: User = Depends(get_current_admin)):
    return get_php_versions(config.PHP_VERSIONS, config.PHP_FPM_DIR)


@router.get("/server/services", response_model=list[schemas.ServiceStatusResponse])
def read_services(runner: CommandRunner = Depends(get_runner),
                  current_admin: User = Depends(get_current_admin)):
    return get_services(runner, config.build_services())

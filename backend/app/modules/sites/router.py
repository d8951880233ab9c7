from fastapi import APIRouter, Depends
from app.core import config
from app.modules.auth.deps import get_current_admin
from app.modules.sites import schemas
from app.modules.users.models import User
from app.system.site_manager import get_websites

router = APIRouter(
    prefix="/sites",
    tags=["Sites"]
)


@router.get("/", response_model=list[schemas.WebsiteResponse])
def read_sites(current_admin: User = Depends(get_current_admin)):
    # Website tidak disimpan di DB, selalu dibaca ulang dari folder SITES_ROOT
    return get_websites(config.SITES_ROOT, config.NGINX_DIR)

from pydantic import BaseModel


class WebsiteResponse(BaseModel):
    domain: str
    php_version: str
    public_html: str
    logs_dir: str

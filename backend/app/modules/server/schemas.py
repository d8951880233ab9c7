from pydantic import BaseModel


class SystemInfoResponse(BaseModel):
    cpu: str
    memory_total: str
    memory_used: str
    memory_free: str
    disk_total: str
    disk_used: str
    disk_free: str
    uptime: str
    load: str


class PhpVersionResponse(BaseModel):
    version: str
    status: str  # Installed / Not Installed


class ServiceStatusResponse(BaseModel):
    name: str
    service: str
    status: str  # Running / Stopped

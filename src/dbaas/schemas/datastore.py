from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..encoding import convert_config_values
from .common import APIModel, DiskType, ServerStatus, Status


class Instance(APIModel):
    """One node of a datastore cluster."""

    id: str
    ip: str = ""
    floating_ip: str = Field("", description="Literal 'None' when not assigned")
    role: str = Field("", description="e.g., MASTER, REPLICA")
    role_name: str = ""
    status: ServerStatus | None = None
    hostname: str = ""
    availability_zone: str = ""


class Flavor(APIModel):
    vcpus: int = 0
    ram: int = Field(0, description="MB")
    disk: int = Field(0, description="GB")
    disk_type: DiskType | None = None


class Restore(APIModel):
    datastore_id: str | None = None
    target_time: str | None = None


class Pooler(APIModel):
    mode: str | None = Field(None, description="session, transaction or statement")
    size: int | None = None


class Firewall(APIModel):
    ip: str


class FloatingIPs(BaseModel):
    """How many floating IPs to attach on creation, per role."""

    master: int = 0
    replica: int = 0


class DatastoreLogGroup(APIModel):
    log_group: str = ""


class Datastore(APIModel):
    id: str
    created_at: str = ""
    updated_at: str = ""
    creation_finished_at: str = ""
    project_id: str = ""
    name: str = ""
    type_id: str = ""
    subnet_id: str = ""
    flavor_id: str = ""
    status: ServerStatus | None = None
    connection: dict[str, str] = Field(default_factory=dict)
    firewall: list[Firewall] = Field(default_factory=list)
    instances: list[Instance] = Field(default_factory=list)
    config: dict[str, Any] = Field(default_factory=dict)
    pooler: Pooler | None = None
    flavor: Flavor | None = None
    security_groups: list[str] = Field(default_factory=list)
    log_platform: DatastoreLogGroup | None = None
    node_count: int = 0
    enabled: bool = False
    allow_restore: bool = False
    is_maintenance: bool = False
    is_protected: bool = False
    backup_retention_days: int = 0
    databases_count: int = 0
    topics_count: int = 0
    disk_used: int = 0

    @field_validator("config", mode="before")
    @classmethod
    def _coerce_config(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return convert_config_values(value)
        return value


class Disk(BaseModel):
    type: str
    size: int


class ResizeDisk(BaseModel):
    size: int


class DatastoreCreateOpts(BaseModel):
    type_id: str
    subnet_id: str
    project_id: str
    name: str
    node_count: int
    flavor_id: str | None = None
    flavor: Flavor | None = None
    restore: Restore | None = None
    pooler: Pooler | None = None
    floating_ips: FloatingIPs | None = None
    config: dict[str, Any] | None = None
    disk: Disk | None = None
    redis_password: str | None = None
    backup_retention_days: int | None = None


class DatastoreUpdateOpts(BaseModel):
    name: str


class DatastoreResizeOpts(BaseModel):
    flavor_id: str | None = None
    flavor: Flavor | None = None
    disk: ResizeDisk | None = None
    node_count: int | None = None


class DatastorePoolerOpts(BaseModel):
    mode: str | None = None
    size: int | None = None


class DatastoreFirewallOpts(BaseModel):
    ips: list[str] = Field(default_factory=list)


class DatastoreConfigOpts(BaseModel):
    config: dict[str, Any]


class DatastorePasswordOpts(BaseModel):
    """Redis only."""

    redis_password: str


class DatastoreBackupsOpts(BaseModel):
    backup_retention_days: int


class DatastoreSecurityGroupOpts(BaseModel):
    security_groups: list[str] = Field(default_factory=list)


class LogPlatformOpts(BaseModel):
    log_platform: DatastoreLogGroup


class DatastoreQueryParams(BaseModel):
    """Filters for listing datastores. Unset and zero values are not sent."""

    id: str | None = None
    project_id: str | None = None
    name: str | None = None
    status: Status | None = None
    enabled: str | None = None
    type_id: str | None = None
    flavor_id: str | None = None
    subnet_id: str | None = None
    allow_restore: bool | None = None
    is_maintenance: bool | None = None
    is_protected: bool | None = None
    deleted: bool | None = None

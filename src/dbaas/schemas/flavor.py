from pydantic import Field

from .common import APIModel


class FlavorHost(APIModel):
    line: str = ""
    processor: str = ""
    available_count: int = 0


class FlavorResponse(APIModel):
    id: str
    name: str = ""
    description: str = ""
    fl_size: str = Field("", description="e.g., standard")
    datastore_type_ids: list[str] = Field(default_factory=list)
    vcpus: int = 0
    ram: int = Field(0, description="MB")
    disk: int = Field(0, description="GB")
    host: FlavorHost | None = None

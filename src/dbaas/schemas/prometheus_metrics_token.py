from pydantic import BaseModel

from .common import APIModel


class PrometheusMetricToken(APIModel):
    id: str
    created_at: str = ""
    updated_at: str = ""
    project_id: str = ""
    name: str = ""
    value: str = ""


class PrometheusMetricTokenCreateOpts(BaseModel):
    name: str


class PrometheusMetricTokenUpdateOpts(BaseModel):
    name: str

from pydantic import BaseModel


class FloatingIPsOpts(BaseModel):
    """Targets one instance of an existing datastore."""

    instance_id: str

from typing import Any

from pydantic import Field

from .common import APIModel


class ConfigurationParameter(APIModel):
    """
    A tunable setting of a datastore type.

    Bounds and defaults are loosely typed by the API (number, string or null),
    so they are kept as decoded.
    """

    id: str
    datastore_type_id: str = ""
    name: str = ""
    type: str = Field("", description="e.g., int, float, str, boolean")
    unit: str = ""
    min: Any = None
    max: Any = None
    default_value: Any = None
    choices: list[Any] | None = None
    invalid_values: list[Any] | None = None
    is_restart_required: bool = False
    is_changeable: bool = False

from ..clients import DBaaSAPI
from ..core import CONFIGURATION_PARAMETERS_URI
from ..encoding import decode_many, decode_one
from ..schemas.configuration_parameter import ConfigurationParameter


def list_configuration_parameters(api: DBaaSAPI) -> list[ConfigurationParameter]:
    resp = api.make_request("GET", CONFIGURATION_PARAMETERS_URI)
    return decode_many(resp, "configuration-parameters", ConfigurationParameter)


def get_configuration_parameter(
    api: DBaaSAPI, configuration_parameter_id: str
) -> ConfigurationParameter:
    uri = f"{CONFIGURATION_PARAMETERS_URI}/{configuration_parameter_id}"
    resp = api.make_request("GET", uri)
    return decode_one(resp, "configuration-parameter", ConfigurationParameter)

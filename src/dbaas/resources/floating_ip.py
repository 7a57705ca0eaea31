from ..clients import DBaaSAPI
from ..core import FLOATING_IPS_URI
from ..schemas.floating_ip import FloatingIPsOpts


def create_floating_ip(api: DBaaSAPI, opts: FloatingIPsOpts) -> None:
    """Attaches a floating IP to an instance of an existing datastore."""
    api.make_request("POST", FLOATING_IPS_URI, {"floating-ip": opts})


def delete_floating_ip(api: DBaaSAPI, opts: FloatingIPsOpts) -> None:
    """Detaches the floating IP from an instance of an existing datastore."""
    api.make_request("DELETE", FLOATING_IPS_URI, {"floating-ip": opts})

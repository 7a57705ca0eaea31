# Application identity sent with every request
APP_NAME = "dbaas-python"
APP_VERSION = "0.1.0"
USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

# Auth header expected by the DBaaS API
AUTH_HEADER = "X-Auth-Token"

# Resource URIs, relative to the service endpoint
DATASTORES_URI = "/datastores"
DATABASES_URI = "/databases"
USERS_URI = "/users"
ACLS_URI = "/acls"
GRANTS_URI = "/grants"
TOPICS_URI = "/topics"
EXTENSIONS_URI = "/extensions"
AVAILABLE_EXTENSIONS_URI = "/available-extensions"
FLAVORS_URI = "/flavors"
DATASTORE_TYPES_URI = "/datastore-types"
CONFIGURATION_PARAMETERS_URI = "/configuration-parameters"
LOGICAL_REPLICATION_SLOTS_URI = "/logical-replication-slots"
PROMETHEUS_METRICS_TOKENS_URI = "/prometheus-metrics-tokens"
FLOATING_IPS_URI = "/floating-ips"

# Datastore action sub-paths
# e.g. /datastores/{id}/resize
RESIZE_POSTFIX = "resize"
POOLER_POSTFIX = "pooler"
FIREWALL_POSTFIX = "firewall"
CONFIG_POSTFIX = "config"
PASSWORD_POSTFIX = "password"
BACKUPS_POSTFIX = "backups"
SECURITY_GROUPS_POSTFIX = "security-groups"
LOG_PLATFORM_POSTFIX = "log-platform"

from ..clients import DBaaSAPI
from ..core import PROMETHEUS_METRICS_TOKENS_URI
from ..encoding import decode_many, decode_one
from ..schemas.prometheus_metrics_token import (
    PrometheusMetricToken,
    PrometheusMetricTokenCreateOpts,
    PrometheusMetricTokenUpdateOpts,
)

ENVELOPE = "prometheus-metrics-token"


def list_prometheus_metric_tokens(api: DBaaSAPI) -> list[PrometheusMetricToken]:
    resp = api.make_request("GET", PROMETHEUS_METRICS_TOKENS_URI)
    return decode_many(resp, "prometheus-metrics-tokens", PrometheusMetricToken)


def get_prometheus_metric_token(api: DBaaSAPI, token_id: str) -> PrometheusMetricToken:
    resp = api.make_request("GET", f"{PROMETHEUS_METRICS_TOKENS_URI}/{token_id}")
    return decode_one(resp, ENVELOPE, PrometheusMetricToken)


def create_prometheus_metric_token(
    api: DBaaSAPI, opts: PrometheusMetricTokenCreateOpts
) -> PrometheusMetricToken:
    resp = api.make_request("POST", PROMETHEUS_METRICS_TOKENS_URI, {ENVELOPE: opts})
    return decode_one(resp, ENVELOPE, PrometheusMetricToken)


def update_prometheus_metric_token(
    api: DBaaSAPI, token_id: str, opts: PrometheusMetricTokenUpdateOpts
) -> PrometheusMetricToken:
    """
    Renames a token.

    The service may answer with the bare token instead of the envelope.
    """
    uri = f"{PROMETHEUS_METRICS_TOKENS_URI}/{token_id}"
    resp = api.make_request("PUT", uri, {ENVELOPE: opts})
    return decode_one(resp, ENVELOPE, PrometheusMetricToken, allow_bare=True)


def delete_prometheus_metric_token(api: DBaaSAPI, token_id: str) -> None:
    api.make_request("DELETE", f"{PROMETHEUS_METRICS_TOKENS_URI}/{token_id}")

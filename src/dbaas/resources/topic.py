from ..clients import DBaaSAPI
from ..core import TOPICS_URI
from ..encoding import decode_many, decode_one, set_query_params
from ..schemas.topic import Topic, TopicCreateOpts, TopicQueryParams, TopicUpdateOpts


def list_topics(api: DBaaSAPI, params: TopicQueryParams | None = None) -> list[Topic]:
    uri = set_query_params(TOPICS_URI, params)
    resp = api.make_request("GET", uri)
    return decode_many(resp, "topics", Topic)


def get_topic(api: DBaaSAPI, topic_id: str) -> Topic:
    resp = api.make_request("GET", f"{TOPICS_URI}/{topic_id}")
    return decode_one(resp, "topic", Topic)


def create_topic(api: DBaaSAPI, opts: TopicCreateOpts) -> Topic:
    resp = api.make_request("POST", TOPICS_URI, {"topic": opts})
    return decode_one(resp, "topic", Topic)


def update_topic(api: DBaaSAPI, topic_id: str, opts: TopicUpdateOpts) -> Topic:
    """Changes the partition count of a Kafka topic."""
    resp = api.make_request("PUT", f"{TOPICS_URI}/{topic_id}", {"topic": opts})
    return decode_one(resp, "topic", Topic)


def delete_topic(api: DBaaSAPI, topic_id: str) -> None:
    api.make_request("DELETE", f"{TOPICS_URI}/{topic_id}")

from .common import APIModel


class DatastoreType(APIModel):
    id: str
    engine: str = ""
    version: str = ""

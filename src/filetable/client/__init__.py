from filetable.client.errors import FetchError
from filetable.client.http import HttpFileSource
from filetable.client.memory import InMemoryFileSource

__all__ = [
    "FetchError",
    "HttpFileSource",
    "InMemoryFileSource",
]

from typing import Any, Literal

Method = Literal["GET", "POST", "PUT", "DELETE"]

METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "DELETE"})

# Anything json.dumps accepts, or whatever json.loads / raw text produced.
JSON = Any

PathParam = int | str

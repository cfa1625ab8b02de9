import abc
from dataclasses import dataclass

from apitask.models import RequestDescriptor
from apitask.types import JSON


class Operation(metaclass=abc.ABCMeta):
    @abc.abstractmethod
    def to_descriptor(self, base_url: str) -> RequestDescriptor:
        pass


@dataclass(frozen=True)
class Read(Operation):
    path: str

    def to_descriptor(self, base_url: str) -> RequestDescriptor:
        return RequestDescriptor("GET", f"{base_url}{self.path}")


@dataclass(frozen=True)
class Create(Operation):
    path: str
    body: JSON

    def to_descriptor(self, base_url: str) -> RequestDescriptor:
        return RequestDescriptor("POST", f"{base_url}{self.path}", self.body)


@dataclass(frozen=True)
class Replace(Operation):
    path: str
    body: JSON

    def to_descriptor(self, base_url: str) -> RequestDescriptor:
        return RequestDescriptor("PUT", f"{base_url}{self.path}", self.body)


@dataclass(frozen=True)
class Remove(Operation):
    path: str

    def to_descriptor(self, base_url: str) -> RequestDescriptor:
        return RequestDescriptor("DELETE", f"{base_url}{self.path}")

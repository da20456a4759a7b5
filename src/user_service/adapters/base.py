import abc
from typing import Iterable

from user_service.domain.base import IDomain


class IRepository(abc.ABC):
    @abc.abstractmethod
    def add(self, data: IDomain) -> IDomain:
        raise NotImplementedError

    @abc.abstractmethod
    def list(self) -> Iterable[IDomain]:
        raise NotImplementedError

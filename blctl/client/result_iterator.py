from logging import Logger

from abc import ABC
from collections import deque
from threading import Lock
from typing import Deque, Generic, List, Optional, TypeVar
from uuid import uuid4

from blctl.common.logger import get_logger

T = TypeVar('T')


class InactiveLoaderError(StopIteration):
    """ Raised when the loader has ended its session """


class ResultLoader(ABC, Generic[T]):
    __uuid__: Optional[str] = None
    __logger__: Optional[Logger] = None

    @property
    def uuid(self):
        if not self.__uuid__:
            self.__uuid__ = str(uuid4())
        return self.__uuid__

    @property
    def logger(self):
        if not self.__logger__:
            self.__logger__ = get_logger(f'{type(self).__name__}/{self.uuid}')
        return self.__logger__

    def load(self) -> List[T]:
        raise NotImplementedError()

    def has_more(self) -> bool:
        raise NotImplementedError()


class ResultIterator(Generic[T]):
    """ Iterate over everything a loader provides, one batch at a time

        Batches are requested strictly one after another. An error raised by the loader propagates to the consumer.
    """

    def __init__(self, loader: ResultLoader[T]):
        self.__read_lock = Lock()
        self.__loader = loader
        self.__buffer: Deque[T] = deque()
        self.__depleted = False

    def __iter__(self):
        return self

    def __next__(self) -> T:
        if self.__depleted:
            raise StopIteration('Already depleted')

        with self.__read_lock:
            # Empty batches do not end the iteration as long as the loader has more.
            while not self.__buffer:
                if self.__loader.has_more():
                    try:
                        self.__buffer.extend(self.__loader.load())
                    except StopIteration as e:
                        self.__depleted = True
                        raise e
                else:
                    self.__depleted = True
                    raise StopIteration('No more result to iterate')

            item = self.__buffer.popleft()

        return item

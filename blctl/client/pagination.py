"""
Aggregation of paginated list endpoints

Every list endpoint of the API returns one page at a time. A list operation supplies a page fetcher (a callable
that performs exactly one request for the given page selector) and receives the complete, ordered collection of
every page's items. The result is all-or-nothing: if any page fails, the caller only gets the error.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from blctl.client.base_exceptions import PaginationLimitExceededError, UnexpectedValueError
from blctl.client.result_iterator import InactiveLoaderError, ResultIterator, ResultLoader

E = TypeVar('E')
A = TypeVar('A')

MAX_PER_PAGE = 200
""" The maximum page size accepted by the API """

MAX_PAGES = 10000
""" The number of pages after which a list operation gives up on an API that keeps reporting a next page """


class PageSelector(BaseModel):
    """ Page number and page size of the page to request """
    page: int = 1
    per_page: int = MAX_PER_PAGE

    @classmethod
    def first(cls, per_page: Optional[int] = None) -> 'PageSelector':
        """ Select the first page, with the page size clamped to what the API accepts """
        size = MAX_PER_PAGE if per_page is None else min(max(int(per_page), 1), MAX_PER_PAGE)
        return cls(page=1, per_page=size)

    def next(self) -> 'PageSelector':
        return PageSelector(page=self.page + 1, per_page=self.per_page)

    def as_params(self) -> dict:
        return dict(page=self.page, per_page=self.per_page)


@dataclass(frozen=True)
class Page(Generic[E, A]):
    """ The result of one page fetch """
    items: List[E]
    has_next: bool
    total: Optional[int] = None
    auxiliary: Optional[A] = None
    """ Envelope data that is not per-item, e.g., the invoice preview """


@dataclass(frozen=True)
class AggregateCollection(Generic[E, A]):
    """ Every item of every page, in the order the pages were fetched """
    items: List[E] = field(default_factory=list)
    auxiliary: Optional[A] = None
    """ The auxiliary value of the last page """
    total: Optional[int] = None
    page_count: int = 0


PageFetcher = Callable[[PageSelector], Page]


class LoaderState(str, Enum):
    IDLE = 'idle'
    FETCHING = 'fetching'
    ACCUMULATING = 'accumulating'
    DONE = 'done'
    FAILED = 'failed'

    def is_terminal(self) -> bool:
        return self in (LoaderState.DONE, LoaderState.FAILED)


class PageLoader(ResultLoader[E], Generic[E, A]):
    """ Load one page per call, advancing the page number by one until the API reports no next page """

    def __init__(self,
                 fetcher: PageFetcher,
                 per_page: Optional[int] = None,
                 max_pages: Optional[int] = MAX_PAGES):
        self.__fetcher = fetcher
        self.__selector = PageSelector.first(per_page)
        self.__max_pages = max_pages
        self.__state = LoaderState.IDLE
        self.__page_count = 0
        self.__total: Optional[int] = None
        self.__auxiliary: Optional[A] = None

    @property
    def state(self) -> LoaderState:
        return self.__state

    @property
    def page_count(self) -> int:
        return self.__page_count

    @property
    def total(self) -> Optional[int]:
        return self.__total

    @property
    def auxiliary(self) -> Optional[A]:
        return self.__auxiliary

    def has_more(self) -> bool:
        return not self.__state.is_terminal()

    def load(self) -> List[E]:
        if self.__state.is_terminal():
            raise InactiveLoaderError(self.__state)

        selector = self.__selector
        self.__state = LoaderState.FETCHING
        self.logger.debug(f'Fetching page {selector.page} (per_page={selector.per_page})')

        try:
            page: Page[E, A] = self.__fetcher(selector)
        except StopIteration as e:
            # The iterator would otherwise take this for the end of the listing.
            self.__state = LoaderState.FAILED
            raise RuntimeError(f'Failed to fetch page {selector.page}: {type(e).__name__}: {e}') from e
        except Exception:
            self.__state = LoaderState.FAILED
            raise

        self.__state = LoaderState.ACCUMULATING
        self.__page_count += 1
        self.__total = page.total
        self.__auxiliary = page.auxiliary

        self.logger.debug(f'Page {selector.page}: {len(page.items)} item(s), has_next={page.has_next}, '
                          f'total={page.total}')

        if not page.has_next:
            self.__state = LoaderState.DONE
        elif self.__max_pages and self.__page_count >= self.__max_pages:
            self.__state = LoaderState.FAILED
            raise PaginationLimitExceededError(self.__max_pages)
        else:
            self.__selector = selector.next()

        return list(page.items)


def collect(fetcher: PageFetcher,
            per_page: Optional[int] = None,
            max_pages: Optional[int] = MAX_PAGES) -> AggregateCollection:
    """
    Fetch every page and merge the items into one collection

    :param fetcher: performs one request for the given page selector
    :param per_page: the page size, clamped to MAX_PER_PAGE (default)
    :param max_pages: give up with PaginationLimitExceededError after this many pages (falsy for no limit)
    """
    loader: PageLoader = PageLoader(fetcher, per_page=per_page, max_pages=max_pages)
    items = list(ResultIterator(loader))

    if loader.state != LoaderState.DONE:
        raise RuntimeError(f'The listing ended in the {loader.state.value} state after {loader.page_count} page(s)')

    return AggregateCollection(items=items,
                               auxiliary=loader.auxiliary,
                               total=loader.total,
                               page_count=loader.page_count)


def paginate(fetcher: PageFetcher,
             per_page: Optional[int] = None,
             max_pages: Optional[int] = MAX_PAGES) -> List[Any]:
    """ Same as "collect" but only returns the items """
    return collect(fetcher, per_page=per_page, max_pages=max_pages).items


def expect_items(items: List[Any], item_type: Type[E]) -> List[E]:
    """ Ensure that every item is of the given type """
    for index, item in enumerate(items):
        if not isinstance(item, item_type):
            raise UnexpectedValueError(item_type, item, index)
    return list(items)

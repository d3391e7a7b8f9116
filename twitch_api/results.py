from collections import namedtuple
from enum import Enum
from typing import Any, List, Optional


class Outcome(Enum):
    SUCCESS = 'success'
    EMPTY = 'empty'
    FAILURE = 'failure'


class Page(namedtuple('Page', 'total, items')):
    __slots__ = ()


class Result(namedtuple('Result', 'outcome, value, error')):
    """Outcome of a single API request.

    ``EMPTY`` means the request succeeded but the API returned no entity, e.g. the stream
    of an offline channel. It is never used for failures.
    """
    __slots__ = ()

    @classmethod
    def success(cls, value: Any) -> 'Result':
        return cls(Outcome.SUCCESS, value, None)

    @classmethod
    def empty(cls) -> 'Result':
        return cls(Outcome.EMPTY, None, None)

    @classmethod
    def failure(cls, error: Exception) -> 'Result':
        return cls(Outcome.FAILURE, None, error)

    @property
    def ok(self) -> bool:
        return self.outcome is not Outcome.FAILURE

    @property
    def is_empty(self) -> bool:
        return self.outcome is Outcome.EMPTY

    @property
    def failed(self) -> bool:
        return self.outcome is Outcome.FAILURE

    def unwrap(self) -> Any:
        if self.failed:
            raise self.error
        return self.value


def page(total: Optional[int], items: List) -> Result:
    return Result.success(Page(total=total, items=items))

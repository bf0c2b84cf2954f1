from collections import deque
from enum import Enum

from eliot import start_action

from twitter_cursor_client.api_v1.errors import ParseError
from twitter_cursor_client.api_v1.response import Response, parse_response
from twitter_cursor_client.util.items import TwitterList, TwitterUser


START_CURSOR = -1
END_CURSOR = 0  # no further page in that direction


def _cursor_value(resp_json, key):
    # the *_str variant is exact, the numeric one can exceed 53 bits
    val = resp_json.get(f'{key}_str', resp_json.get(key))
    if val is None:
        raise ParseError(f"cursored response is missing '{key}'")
    try:
        return int(val)
    except (TypeError, ValueError):
        raise ParseError(f"invalid cursor value for '{key}': {val!r}")


class CursorPage(object):
    """
    One page of a cursored endpoint. Subclasses name the json key holding
    the items and how each item is decoded.
    """
    items_key = None
    decode_item = None

    def __init__(self, items, previous_cursor=END_CURSOR, next_cursor=END_CURSOR):
        self.items = items
        self.previous_cursor = previous_cursor
        self.next_cursor = next_cursor

    @classmethod
    def from_json(cls, resp_json):
        if not isinstance(resp_json, dict) or not isinstance(resp_json.get(cls.items_key), list):
            raise ParseError(f"cursored response has no '{cls.items_key}' array")

        return cls(
            [cls.decode_item(di) for di in resp_json[cls.items_key]],
            previous_cursor=_cursor_value(resp_json, 'previous_cursor'),
            next_cursor=_cursor_value(resp_json, 'next_cursor')
        )

    @property
    def is_last(self):
        return self.next_cursor == END_CURSOR

    def __repr__(self):
        return (
            f"{type(self).__name__}(items={len(self.items)}, "
            f"previous_cursor={self.previous_cursor}, next_cursor={self.next_cursor})"
        )


class ListCursor(CursorPage):
    items_key = 'lists'
    decode_item = staticmethod(TwitterList.from_json)


class UserCursor(CursorPage):
    items_key = 'users'
    decode_item = staticmethod(TwitterUser.from_json)


class IDCursor(CursorPage):
    items_key = 'ids'
    decode_item = staticmethod(int)


class CursorState(Enum):
    FRESH = 'fresh'
    FETCHING = 'fetching'
    YIELDING = 'yielding'
    EXHAUSTED = 'exhausted'


class CursorIter(object):
    """
    Async iterator over every item of a cursored endpoint, fetching one page
    at a time as items are consumed. Each item comes wrapped in a Response
    carrying the rate limit of the page it arrived on.

    A failed fetch is raised once, after which the iterator is exhausted.
    Iterators can't be restarted, create a new one to traverse again.
    """

    def __init__(
        self, session, endpoint, token, page_type, params=None,
        page_size=None, initial_cursor=START_CURSOR
    ):
        self.session = session
        self.endpoint = endpoint
        self.token = token
        self.page_type = page_type
        self.params = dict(params or {})
        self.page_size = page_size

        self.previous_cursor = None
        self.next_cursor = initial_cursor
        self.last_rate_limit = None
        self.state = CursorState.FRESH
        self._buffer = deque()

    def with_page_size(self, page_size):
        if self.state is not CursorState.FRESH:
            raise ValueError('page size can only be changed before iteration starts')
        self.page_size = page_size
        return self

    @property
    def exhausted(self):
        return self.state is CursorState.EXHAUSTED

    def _request_params(self, cursor):
        params = dict(self.params)
        params['cursor'] = cursor
        if self.page_size is not None:
            params['count'] = self.page_size
        return params

    def _decode_page(self, resp_json):
        return self.page_type.from_json(resp_json)

    async def _fetch(self, cursor):
        with start_action(action_type='cursor_page', endpoint=self.endpoint, cursor=cursor) as action:
            resp_obj = await self.session.get(
                self.endpoint, self.token, self._request_params(cursor)
            )
            response = parse_response(resp_obj, self._decode_page)
            action.add_success_fields(
                num_items=len(response.body.items), next_cursor=response.body.next_cursor
            )
        return response

    async def call(self):
        """ Fetch the page at the current cursor, without advancing the iterator. """
        return await self._fetch(self.next_cursor)

    def __aiter__(self):
        return self

    async def __anext__(self):
        while True:
            if self.state is CursorState.EXHAUSTED:
                raise StopAsyncIteration

            if self.state is CursorState.YIELDING:
                if self._buffer:
                    return Response(self.last_rate_limit, self._buffer.popleft())
                if self.next_cursor == END_CURSOR:
                    self.state = CursorState.EXHAUSTED
                else:
                    self.state = CursorState.FETCHING
                continue

            self.state = CursorState.FETCHING
            try:
                response = await self._fetch(self.next_cursor)
            except Exception:
                self.state = CursorState.EXHAUSTED
                raise

            page = response.body
            self.last_rate_limit = response.rate_limit
            self.previous_cursor = page.previous_cursor
            self.next_cursor = page.next_cursor
            self._buffer.extend(page.items)
            self.state = CursorState.YIELDING

    async def collect(self):
        return [response.body async for response in self]

from collections import namedtuple
import datetime

import pytz

from twitter_cursor_client.api_v1.errors import ApiError, BadStatusError, ParseError


RATE_LIMIT_HEADER = 'x-rate-limit-limit'
RATE_REMAINING_HEADER = 'x-rate-limit-remaining'
RATE_RESET_HEADER = 'x-rate-limit-reset'


class RateLimit(namedtuple('RateLimit', ['limit', 'remaining', 'reset_at'])):
    """
    Quota accounting taken from one http response. Fields are None
    when the corresponding header is missing or malformed.
    """
    __slots__ = ()

    @property
    def is_exhausted(self):
        return self.remaining == 0


class Response(object):
    """ a decoded payload together with the rate-limit accounting of the response it came from """

    def __init__(self, rate_limit, body):
        self.rate_limit = rate_limit
        self.body = body

    def map(self, func):
        return Response(self.rate_limit, func(self.body))

    def __eq__(self, other):
        if not isinstance(other, Response):
            return NotImplemented
        return self.rate_limit == other.rate_limit and self.body == other.body

    def __repr__(self):
        return f"Response(rate_limit={self.rate_limit!r}, body={self.body!r})"


def _int_header(headers, name):
    val = headers.get(name)
    if val is None:
        return None
    try:
        return int(val)
    except (TypeError, ValueError):
        return None


def rate_headers(resp_obj):
    # headers are present on error responses too, so this never looks at the body
    headers = resp_obj.headers
    reset_at = _int_header(headers, RATE_RESET_HEADER)
    if reset_at is not None:
        reset_at = datetime.datetime.fromtimestamp(reset_at, tz=pytz.UTC)

    return RateLimit(
        limit=_int_header(headers, RATE_LIMIT_HEADER),
        remaining=_int_header(headers, RATE_REMAINING_HEADER),
        reset_at=reset_at
    )


def _is_success(status_code):
    return 200 <= status_code < 300


def parse_response(resp_obj, decoder):

    rate_limit = rate_headers(resp_obj)
    status_code = resp_obj.status_code

    try:
        resp_json = resp_obj.json()
    except ValueError:
        if _is_success(status_code):
            raise ParseError(
                f"response body is not valid json (status: {status_code})", rate_limit
            )
        raise BadStatusError(status_code, rate_limit, resp_obj.text)

    api_error = ApiError.create_from_dict(resp_json, status_code, rate_limit)
    if api_error is not None:
        raise api_error

    if not _is_success(status_code):
        raise BadStatusError(status_code, rate_limit, resp_obj.text)

    try:
        body = decoder(resp_json)
    except ParseError as e:
        if e.rate_limit is None:
            e.rate_limit = rate_limit
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise ParseError(f"unexpected payload shape: {e!r}", rate_limit) from e

    return Response(rate_limit, body)

from functools import partial

from eliot import start_action
import httpx
import requests
import trio

from twitter_cursor_client.api_v1.errors import TransportError
from twitter_cursor_client.util.auth_util import AccessToken
from twitter_cursor_client.util.config_util import get_request_timeout


def _stringify_params(params):
    if not params:
        return None
    return {k: str(v) for k, v in params.items()}


class TwitterHttpSession(object):
    """
    Transport for the API: one httpx.AsyncClient for bearer-token requests,
    plus one rauth session per AccessToken for signed requests. Does not retry,
    and does not wait on rate limits; those are reported back to the caller.
    """

    def __init__(self, http_session=None, timeout=None):
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.http_session = http_session or httpx.AsyncClient(timeout=self.timeout)
        self._oauth_sessions = {}

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self.http_session.aclose()
        for oauth_session in self._oauth_sessions.values():
            oauth_session.close()
        self._oauth_sessions.clear()

    def _get_oauth_session(self, token):
        if token.key not in self._oauth_sessions:
            self._oauth_sessions[token.key] = token.create_oauth_session()
        return self._oauth_sessions[token.key]

    async def do_request(self, method, url, token, params=None):

        method = method.upper()
        assert method in ('GET', 'POST')
        params = _stringify_params(params)

        with start_action(action_type=f"{method.lower()}_request", url=url) as action:
            if isinstance(token, AccessToken):
                resp_obj = await self._do_oauth1_request(method, url, token, params)
            else:
                resp_obj = await self._do_bearer_request(method, url, token, params)
            action.add_success_fields(status_code=resp_obj.status_code)

        return resp_obj

    async def _do_bearer_request(self, method, url, token, params):
        headers = token.get_auth_headers()
        try:
            if method == 'GET':
                return await self.http_session.get(url, headers=headers, params=params)
            return await self.http_session.post(url, headers=headers, params=params)
        except httpx.TransportError as e:
            raise TransportError(f"{method} {url} failed: {e!r}", cause=e) from e

    async def _do_oauth1_request(self, method, url, token, params):
        oauth_session = self._get_oauth_session(token)

        if method == 'GET':
            request_func = partial(
                oauth_session.get, url, params=params, timeout=self.timeout
            )
        else:
            # rauth fails when posting without setting 'data'
            request_func = partial(
                oauth_session.post, url, params=params, data="", timeout=self.timeout
            )

        try:
            return await trio.to_thread.run_sync(request_func)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e!r}", cause=e) from e

    async def get(self, url, token, params=None):
        return await self.do_request('get', url, token, params)

    async def post(self, url, token, params=None):
        return await self.do_request('post', url, token, params)

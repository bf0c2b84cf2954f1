import pytest

from twitter_cursor_client.util.auth_util import BearerToken
from twitter_cursor_client.util.http_util import TwitterHttpSession


@pytest.fixture
def token():
    return BearerToken('test-bearer-token')


@pytest.fixture
async def twitter_session():
    session = TwitterHttpSession()
    yield session
    await session.aclose()

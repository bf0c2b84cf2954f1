from twitter_cursor_client.api_v1 import links
from twitter_cursor_client.api_v1.cursor import CursorIter, IDCursor
from twitter_cursor_client.api_v1.params import add_name_param, add_param
from twitter_cursor_client.api_v1.response import parse_response
from twitter_cursor_client.util.items import TwitterUser, decode_list_of


ID_PAGE_SIZE = 5000
LOOKUP_LIMIT = 100


def friends_ids(session, user, token):
    """ ids of the accounts the given user follows """
    params = {}
    add_name_param(params, user)
    return CursorIter(
        session, links.users.FRIENDS_IDS, token, IDCursor, params, ID_PAGE_SIZE
    )


def followers_ids(session, user, token):
    """ ids of the accounts following the given user """
    params = {}
    add_name_param(params, user)
    return CursorIter(
        session, links.users.FOLLOWERS_IDS, token, IDCursor, params, ID_PAGE_SIZE
    )


def _chunker(seq, size):
    return (seq[pos:pos + size] for pos in range(0, len(seq), size))


async def lookup(session, users, token):
    """
    Look up to 100 users at once, by user_id (ints) and/or screen_name
    (strings). Accounts that are suspended or don't exist are left out of
    the result. When none of them resolve, twitter answers 404 with code 17
    and this raises ApiError.
    """
    users = [u for u in users]
    if len(users) > LOOKUP_LIMIT:
        raise ValueError(f"users/lookup accepts at most {LOOKUP_LIMIT} users, got: {len(users)}")

    user_ids, screen_names = [], []
    for user in users:
        if isinstance(user, TwitterUser):
            user = user.id
        if isinstance(user, int):
            user_ids.append(str(user))
        else:
            screen_names.append(user.lstrip('@'))

    params = {}
    if user_ids:
        add_param(params, 'user_id', ','.join(user_ids))
    if screen_names:
        add_param(params, 'screen_name', ','.join(screen_names))

    resp_obj = await session.post(links.users.LOOKUP, token, params)
    return parse_response(resp_obj, decode_list_of(TwitterUser.from_json))


async def lookup_many(session, users, token):
    """ lookup() over any number of users, yielding one Response per chunk of 100 """
    for chunk in _chunker([u for u in users], LOOKUP_LIMIT):
        yield await lookup(session, chunk, token)


async def show(session, user, token):
    params = {}
    add_name_param(params, user)

    resp_obj = await session.get(links.users.SHOW, token, params)
    return parse_response(resp_obj, TwitterUser.from_json)

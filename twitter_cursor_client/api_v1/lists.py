from eliot import log_message

from twitter_cursor_client.api_v1 import links
from twitter_cursor_client.api_v1.cursor import CursorIter, ListCursor, UserCursor
from twitter_cursor_client.api_v1.errors import ApiError
from twitter_cursor_client.api_v1.params import add_list_param, add_name_param, add_param
from twitter_cursor_client.api_v1.response import Response, parse_response, rate_headers
from twitter_cursor_client.api_v1.timeline import Timeline
from twitter_cursor_client.util.items import TwitterList, TwitterUser, decode_list_of


LIST_PAGE_SIZE = 20
MEMBER_PAGE_SIZE = 20

# "The specified user is not a member of this list", also used for subscribers
NOT_IN_LIST_CODE = 109


def memberships(session, user, token):
    """ Look up the lists the given user has been added to. """
    params = {}
    add_name_param(params, user)
    return CursorIter(
        session, links.lists.MEMBERSHIPS, token, ListCursor, params, LIST_PAGE_SIZE
    )


async def list(session, user, owned_first, token):
    """
    Return up to 100 lists the given user is subscribed to, including those
    the user made themselves.
    """
    params = {}
    add_name_param(params, user)
    add_param(params, 'reverse', str(owned_first).lower())

    resp_obj = await session.get(links.lists.LIST, token, params)
    return parse_response(resp_obj, decode_list_of(TwitterList.from_json))


def subscriptions(session, user, token):
    """ Lists the given user is subscribed to, not ones they made themselves. """
    params = {}
    add_name_param(params, user)
    return CursorIter(
        session, links.lists.SUBSCRIPTIONS, token, ListCursor, params, LIST_PAGE_SIZE
    )


def ownerships(session, user, token):
    params = {}
    add_name_param(params, user)
    return CursorIter(
        session, links.lists.OWNERSHIPS, token, ListCursor, params, LIST_PAGE_SIZE
    )


async def show(session, list_id, token):
    params = {}
    add_list_param(params, list_id)

    resp_obj = await session.get(links.lists.SHOW, token, params)
    return parse_response(resp_obj, TwitterList.from_json)


def members(session, list_id, token):
    params = {}
    add_list_param(params, list_id)
    return CursorIter(
        session, links.lists.MEMBERS, token, UserCursor, params, MEMBER_PAGE_SIZE
    )


def subscribers(session, list_id, token):
    params = {}
    add_list_param(params, list_id)
    return CursorIter(
        session, links.lists.SUBSCRIBERS, token, UserCursor, params, MEMBER_PAGE_SIZE
    )


async def _check_relation(session, endpoint, user, list_id, token):
    params = {}
    add_list_param(params, list_id)
    add_name_param(params, user)

    resp_obj = await session.get(endpoint, token, params)

    try:
        response = parse_response(resp_obj, TwitterUser.from_json)
    except ApiError as e:
        if not e.has_code(NOT_IN_LIST_CODE):
            raise
        # "not in this list" arrives as an error, but the rate limit headers
        # are still on the response and belong to the caller
        log_message(
            message_type='relation_not_found', endpoint=endpoint,
            code=NOT_IN_LIST_CODE, result=False
        )
        return Response(rate_headers(resp_obj), False)

    return response.map(lambda _: True)


async def is_subscribed(session, user, list_id, token):
    """ Check whether the given user is subscribed to the given list. """
    return await _check_relation(
        session, links.lists.IS_SUBSCRIBER, user, list_id, token
    )


async def is_member(session, user, list_id, token):
    """ Check whether the given user has been added to the given list. """
    return await _check_relation(
        session, links.lists.IS_MEMBER, user, list_id, token
    )


def statuses(session, list_id, with_rts, token, since_id=None):
    """ Tweets made by the members of the given list, newest first. """
    params = {}
    add_list_param(params, list_id)
    add_param(params, 'include_rts', 'true')

    return Timeline(
        session, links.lists.STATUSES, token, params, since_id=since_id, with_rts=with_rts
    )


async def add(session, list_id, user, token):
    """ Add the given user to the given list (needs user auth). """
    params = {}
    add_list_param(params, list_id)
    add_name_param(params, user)

    resp_obj = await session.post(links.lists.ADD, token, params)
    return parse_response(resp_obj, TwitterList.from_json)

import pytest
import respx

from twitter_cursor_client.api_v1 import links, users
from twitter_cursor_client.api_v1.errors import ApiError

from helpers import error_json, id_page, json_response, user_json


@pytest.mark.parametrize('func, endpoint', [
    (users.friends_ids, links.users.FRIENDS_IDS),
    (users.followers_ids, links.users.FOLLOWERS_IDS),
])
async def test_relationship_ids(twitter_session, token, func, endpoint):
    with respx.mock() as router:
        route = router.get(endpoint).mock(side_effect=[
            json_response(id_page([1, 2], 0, 77)),
            json_response(id_page([3], -77, 0)),
        ])
        ids = await func(twitter_session, 'jack', token).collect()

    assert ids == [1, 2, 3]
    params = route.calls[0].request.url.params
    assert params['screen_name'] == 'jack'
    assert params['count'] == str(users.ID_PAGE_SIZE)


async def test_reciprocal_ids(twitter_session, token):
    with respx.mock() as router:
        router.get(links.users.FRIENDS_IDS).mock(
            return_value=json_response(id_page([1, 2, 3, 4], 0, 0))
        )
        router.get(links.users.FOLLOWERS_IDS).mock(
            return_value=json_response(id_page([3, 4, 5], 0, 0))
        )
        friends = set(await users.friends_ids(twitter_session, 42, token).collect())
        followers = set(await users.followers_ids(twitter_session, 42, token).collect())

    assert friends & followers == {3, 4}


async def test_lookup_splits_ids_and_screen_names(twitter_session, token):
    with respx.mock() as router:
        route = router.post(links.users.LOOKUP).mock(
            return_value=json_response([user_json(1), user_json(2, 'jack')], remaining=299)
        )
        response = await users.lookup(twitter_session, [1, '@jack'], token)

    assert [u.id for u in response.body] == [1, 2]
    assert response.rate_limit.remaining == 299
    params = route.calls[0].request.url.params
    assert params['user_id'] == '1'
    assert params['screen_name'] == 'jack'


async def test_lookup_none_found_raises_api_error(twitter_session, token):
    with respx.mock() as router:
        router.post(links.users.LOOKUP).mock(
            return_value=json_response(error_json(17), status_code=404, remaining=298)
        )
        with pytest.raises(ApiError) as exc_info:
            await users.lookup(twitter_session, [1, 'gone'], token)

    assert exc_info.value.codes == [17]
    assert exc_info.value.status_code == 404
    assert exc_info.value.rate_limit.remaining == 298


async def test_lookup_rejects_more_than_100_users(twitter_session, token):
    with pytest.raises(ValueError):
        await users.lookup(twitter_session, range(101), token)


async def test_lookup_many_chunks_by_100(twitter_session, token):
    with respx.mock() as router:
        route = router.post(links.users.LOOKUP).mock(side_effect=[
            json_response([user_json(i) for i in range(100)]),
            json_response([user_json(i) for i in range(100, 150)]),
        ])
        found = []
        async for response in users.lookup_many(twitter_session, range(150), token):
            found.extend(u.id for u in response.body)

    assert found == list(range(150))
    assert route.call_count == 2
    assert route.calls[1].request.url.params['user_id'].split(',')[0] == '100'


async def test_show_user(twitter_session, token):
    with respx.mock() as router:
        router.get(links.users.SHOW).mock(return_value=json_response(user_json(42, 'jack')))
        response = await users.show(twitter_session, 'jack', token)

    assert response.body.screen_name == 'jack'
    assert response.body.is_available

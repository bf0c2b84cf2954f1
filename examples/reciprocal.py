import sys

from eliot import to_file as eliot_init_file
import trio

from twitter_cursor_client.api_v1 import users
from twitter_cursor_client.util.config_util import load_token
from twitter_cursor_client.util.http_util import TwitterHttpSession


# usage: API_KEYS_FILEPATH=./api-keys.json python examples/reciprocal.py <user_id or screen_name>


async def _once(user):
    token = load_token()

    async with TwitterHttpSession() as twitter_session:
        friends = set(await users.friends_ids(twitter_session, user, token).collect())
        followers = set(await users.followers_ids(twitter_session, user, token).collect())

        reciprocals = sorted(friends & followers)
        print(f"{len(reciprocals)} accounts that {user} follows follow them back.")

        async for response in users.lookup_many(twitter_session, reciprocals, token):
            for twitter_user in response.body:
                print(f"{twitter_user.name} (@{twitter_user.screen_name})")
            print(f"users/lookup rate limit remaining: {response.rate_limit.remaining}")


if __name__ == '__main__':
    args = sys.argv[1:]
    assert len(args) > 0

    eliot_init_file(open('/tmp/eliot-reciprocal.log', 'w'))

    user_arg = int(args[0]) if args[0].isdigit() else args[0]
    trio.run(_once, user_arg)

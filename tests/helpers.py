import httpx


RESET_EPOCH = 1700000000


def rate_limit_headers(remaining=899, limit=900, reset=RESET_EPOCH):
    return {
        'x-rate-limit-limit': str(limit),
        'x-rate-limit-remaining': str(remaining),
        'x-rate-limit-reset': str(reset),
    }


def json_response(payload, status_code=200, remaining=899):
    return httpx.Response(
        status_code, json=payload, headers=rate_limit_headers(remaining=remaining)
    )


def id_page(ids, previous_cursor, next_cursor):
    return {
        'ids': ids,
        'previous_cursor': previous_cursor,
        'previous_cursor_str': str(previous_cursor),
        'next_cursor': next_cursor,
        'next_cursor_str': str(next_cursor),
    }


def user_json(user_id, screen_name=None):
    return {
        'id': user_id,
        'id_str': str(user_id),
        'screen_name': screen_name or f'user{user_id}',
        'name': f'User {user_id}',
        'protected': False,
        'followers_count': 10,
        'friends_count': 20,
    }


def list_json(list_id, slug='my-list', owner_id=1):
    return {
        'id': list_id,
        'id_str': str(list_id),
        'slug': slug,
        'name': slug.replace('-', ' '),
        'full_name': f'@user{owner_id}/{slug}',
        'mode': 'public',
        'member_count': 3,
        'subscriber_count': 1,
        'user': user_json(owner_id),
    }


def tweet_json(tweet_id, user_id=1):
    return {
        'id': tweet_id,
        'id_str': str(tweet_id),
        'text': f'tweet {tweet_id}',
        'created_at': 'Wed Oct 10 20:19:24 +0000 2018',
        'user': {'id': user_id, 'id_str': str(user_id)},
    }


def error_json(*codes):
    return {'errors': [{'code': code, 'message': f'error {code}'} for code in codes]}

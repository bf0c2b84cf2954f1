API_BASE = 'https://api.twitter.com/1.1'


class lists(object):
    LIST = f'{API_BASE}/lists/list.json'
    MEMBERSHIPS = f'{API_BASE}/lists/memberships.json'
    SUBSCRIPTIONS = f'{API_BASE}/lists/subscriptions.json'
    OWNERSHIPS = f'{API_BASE}/lists/ownerships.json'
    SHOW = f'{API_BASE}/lists/show.json'
    MEMBERS = f'{API_BASE}/lists/members.json'
    SUBSCRIBERS = f'{API_BASE}/lists/subscribers.json'
    IS_MEMBER = f'{API_BASE}/lists/members/show.json'
    IS_SUBSCRIBER = f'{API_BASE}/lists/subscribers/show.json'
    STATUSES = f'{API_BASE}/lists/statuses.json'
    ADD = f'{API_BASE}/lists/members/create.json'


class users(object):
    LOOKUP = f'{API_BASE}/users/lookup.json'
    SHOW = f'{API_BASE}/users/show.json'
    FRIENDS_IDS = f'{API_BASE}/friends/ids.json'
    FOLLOWERS_IDS = f'{API_BASE}/followers/ids.json'


class statuses(object):
    USER_TIMELINE = f'{API_BASE}/statuses/user_timeline.json'

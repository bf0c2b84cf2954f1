import datetime
import re

import pytz

from twitter_cursor_client.api_v1.errors import ParseError


MONTH_NAMES = r'(?P<month_name>jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)'
DATE_REGEX = MONTH_NAMES + r' (?P<day_num>\d{1,2}) (?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) .+ (?P<year>\d{4})$'
MONTH_NAME_TO_NUM = {
    'jan': 1,
    'feb': 2,
    'mar': 3,
    'apr': 4,
    'may': 5,
    'jun': 6,
    'jul': 7,
    'aug': 8,
    'sep': 9,
    'oct': 10,
    'nov': 11,
    'dec': 12
}


def parse_date_str(date_string):
    # v1.1 format: 'Wed Oct 10 20:19:24 +0000 2018' (always UTC)
    if not date_string:
        return None

    match = re.search(DATE_REGEX, date_string, flags=re.I)
    if match is None:
        return None

    values = match.groupdict()

    return datetime.datetime(
        day=int(values['day_num']),
        month=MONTH_NAME_TO_NUM[values['month_name'].lower()],
        year=int(values['year']),
        hour=int(values['hour']),
        minute=int(values['minute']),
        second=int(values['second']),
        tzinfo=pytz.UTC
    )


def _get_id(di):
    # prefer id_str, large ids lose precision in some json encoders
    id_val = di.get('id_str') or di.get('id')
    if id_val is None:
        return None
    try:
        return int(id_val)
    except (TypeError, ValueError):
        return None


class TwitterUser(object):

    def __init__(
        self, id=None, screen_name=None, name=None, protected=False,
        followers_count=None, friends_count=None, raw=None, **kwargs
    ):
        self.id = id
        self.screen_name = screen_name
        self.name = name
        self.protected = protected
        self.followers_count = followers_count
        self.friends_count = friends_count
        self.raw = raw

    @staticmethod
    def create_from_dict(di):
        if not isinstance(di, dict):
            return False, None
        user_id = _get_id(di)
        if user_id is None or not di.get('screen_name'):
            return False, None

        return True, TwitterUser(
            id=user_id,
            screen_name=di['screen_name'],
            name=di.get('name'),
            protected=bool(di.get('protected')),
            followers_count=di.get('followers_count'),
            friends_count=di.get('friends_count'),
            raw=di
        )

    @staticmethod
    def from_json(di):
        succ, user = TwitterUser.create_from_dict(di)
        if not succ:
            raise ParseError(f"invalid user object: {str(di)[:140]}")
        return user

    @property
    def is_available(self):
        return not self.protected

    def __repr__(self):
        return f"TwitterUser(id={self.id}, screen_name={self.screen_name!r})"


class TwitterList(object):

    def __init__(
        self, id=None, slug=None, name=None, full_name=None, mode=None,
        description=None, member_count=None, subscriber_count=None,
        owner=None, raw=None, **kwargs
    ):
        self.id = id
        self.slug = slug
        self.name = name
        self.full_name = full_name
        self.mode = mode
        self.description = description
        self.member_count = member_count
        self.subscriber_count = subscriber_count
        self.owner = owner
        self.raw = raw

    @staticmethod
    def create_from_dict(di):
        if not isinstance(di, dict):
            return False, None
        list_id = _get_id(di)
        if list_id is None or not di.get('slug'):
            return False, None

        owner = None
        if di.get('user') is not None:
            succ, owner = TwitterUser.create_from_dict(di['user'])
            if not succ:
                return False, None

        return True, TwitterList(
            id=list_id,
            slug=di['slug'],
            name=di.get('name'),
            full_name=di.get('full_name'),
            mode=di.get('mode'),
            description=di.get('description'),
            member_count=di.get('member_count'),
            subscriber_count=di.get('subscriber_count'),
            owner=owner,
            raw=di
        )

    @staticmethod
    def from_json(di):
        succ, twitter_list = TwitterList.create_from_dict(di)
        if not succ:
            raise ParseError(f"invalid list object: {str(di)[:140]}")
        return twitter_list

    def __repr__(self):
        return f"TwitterList(id={self.id}, slug={self.slug!r})"


class Tweet(object):

    def __init__(
        self, id=None, text=None, user_id=None, created_at=None,
        in_reply_to_status_id=None, is_retweet=False, raw=None, **kwargs
    ):
        self.id = id
        self.text = text
        self.user_id = user_id
        self.created_at = created_at
        self.in_reply_to_status_id = in_reply_to_status_id
        self.is_retweet = is_retweet
        self.raw = raw

    @staticmethod
    def create_from_dict(di):
        if not isinstance(di, dict):
            return False, None
        tweet_id = _get_id(di)
        if tweet_id is None:
            return False, None

        # trim_user=true leaves only the id in 'user'
        user_id = None
        if isinstance(di.get('user'), dict):
            user_id = _get_id(di['user'])

        return True, Tweet(
            id=tweet_id,
            text=di.get('full_text') or di.get('text'),
            user_id=user_id,
            created_at=parse_date_str(di.get('created_at')),
            in_reply_to_status_id=di.get('in_reply_to_status_id'),
            is_retweet='retweeted_status' in di,
            raw=di
        )

    @staticmethod
    def from_json(di):
        succ, tweet = Tweet.create_from_dict(di)
        if not succ:
            raise ParseError(f"invalid tweet object: {str(di)[:140]}")
        return tweet

    def __repr__(self):
        return f"Tweet(id={self.id}, user_id={self.user_id})"


def decode_list_of(decoder):
    def _decode(resp_json):
        if not isinstance(resp_json, list):
            raise ParseError(f"expected a json array, got: {type(resp_json).__name__}")
        return [decoder(di) for di in resp_json]
    return _decode

from twitter_cursor_client.api_v1 import links
from twitter_cursor_client.api_v1.cursor import CursorIter, CursorPage, END_CURSOR, START_CURSOR
from twitter_cursor_client.api_v1.errors import ParseError
from twitter_cursor_client.api_v1.params import add_name_param, add_param
from twitter_cursor_client.util.items import Tweet


DEFAULT_TIMELINE_COUNT = 20


# note: timelines are paged by tweet id rather than by cursor token. The next
# request asks for tweets older than the oldest one seen (max_id = min_id - 1)
# and an empty page marks the end.


class TimelinePage(CursorPage):
    decode_item = staticmethod(Tweet.from_json)

    @classmethod
    def from_json(cls, resp_json, keep=None):
        if not isinstance(resp_json, list):
            raise ParseError(f"expected a json array of tweets, got: {type(resp_json).__name__}")

        tweets = [cls.decode_item(di) for di in resp_json]
        if not tweets:
            return cls(tweets, previous_cursor=END_CURSOR, next_cursor=END_CURSOR)

        # cursors come from the whole page, filtered-out tweets included
        tweet_ids = [t.id for t in tweets]
        if keep is not None:
            tweets = [t for t in tweets if keep(t)]
        return cls(tweets, previous_cursor=max(tweet_ids), next_cursor=min(tweet_ids) - 1)


class Timeline(CursorIter):
    """
    Tweets of a timeline endpoint, newest first.

    Replies and retweets are dropped here rather than by the api: twitter
    applies `count` before its own exclude_replies/include_rts filtering,
    so a filtered page can come back empty while older tweets remain. The
    request always asks for the unfiltered timeline and paging follows the
    unfiltered ids.
    """

    def __init__(
        self, session, endpoint, token, params=None,
        page_size=DEFAULT_TIMELINE_COUNT, since_id=None, max_id=None,
        with_replies=True, with_rts=True
    ):
        initial_cursor = max_id if max_id is not None else START_CURSOR
        super(Timeline, self).__init__(
            session, endpoint, token, TimelinePage, params=params,
            page_size=page_size, initial_cursor=initial_cursor
        )
        self.with_replies = with_replies
        self.with_rts = with_rts
        if since_id is not None:
            add_param(self.params, 'since_id', since_id)

    def _keep_tweet(self, tweet):
        if not self.with_replies and tweet.in_reply_to_status_id is not None:
            return False
        if not self.with_rts and tweet.is_retweet:
            return False
        return True

    def _decode_page(self, resp_json):
        return TimelinePage.from_json(resp_json, keep=self._keep_tweet)

    def _request_params(self, cursor):
        params = dict(self.params)
        if cursor != START_CURSOR:
            params['max_id'] = cursor
        if self.page_size is not None:
            params['count'] = self.page_size
        return params


def user_timeline(
    session, user, token, with_replies=True, with_rts=True, since_id=None
):
    params = {}
    add_name_param(params, user)
    add_param(params, 'exclude_replies', 'false')
    add_param(params, 'include_rts', 'true')
    add_param(params, 'trim_user', 'true')

    return Timeline(
        session, links.statuses.USER_TIMELINE, token, params, since_id=since_id,
        with_replies=with_replies, with_rts=with_rts
    )

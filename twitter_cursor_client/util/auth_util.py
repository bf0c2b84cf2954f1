import rauth


class BearerToken(object):
    """ app-only auth, sent as an Authorization header """

    def __init__(self, bearer_token):
        self.bearer_token = bearer_token

    def get_auth_headers(self):
        return {"Authorization": f"Bearer {self.bearer_token}"}

    def __repr__(self):
        return 'BearerToken(...)'


class AccessToken(object):
    """ user auth, requests are OAuth1-signed by rauth """

    def __init__(self, consumer_key, consumer_secret_key, access_token, access_token_secret):
        self.consumer_key = consumer_key
        self.consumer_secret_key = consumer_secret_key
        self.access_token = access_token
        self.access_token_secret = access_token_secret

    @property
    def key(self):
        return (self.consumer_key, self.access_token)

    def create_oauth_session(self):
        return rauth.OAuth1Session(
            self.consumer_key, self.consumer_secret_key,
            access_token=self.access_token,
            access_token_secret=self.access_token_secret
        )

    def __repr__(self):
        return f'AccessToken(consumer_key={self.consumer_key!r}, ...)'

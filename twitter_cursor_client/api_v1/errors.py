from collections import namedtuple


ApiErrorItem = namedtuple('ApiErrorItem', ['code', 'message'])


class TwitterClientError(Exception):
    pass


class ConfigError(TwitterClientError):
    pass


class TransportError(TwitterClientError):
    """ network/connection level failure, the request never got a response """

    def __init__(self, message, cause=None):
        super(TransportError, self).__init__(message)
        self.cause = cause


class ParseError(TwitterClientError):

    def __init__(self, message, rate_limit=None):
        super(ParseError, self).__init__(message)
        self.rate_limit = rate_limit


class ApiError(TwitterClientError):
    """
    The API answered with a structured error list, e.g:
        {"errors": [{"code": 109, "message": "The specified user is not a member of this list."}]}
    """

    def __init__(self, errors, status_code=None, rate_limit=None):
        self.errors = list(errors)
        self.status_code = status_code
        self.rate_limit = rate_limit
        summary = '; '.join(f"{e.code}: {e.message}" for e in self.errors)
        super(ApiError, self).__init__(f"twitter returned errors ({status_code}): {summary}")

    @property
    def codes(self):
        return [e.code for e in self.errors]

    def has_code(self, code):
        return any(e.code == code for e in self.errors)

    @staticmethod
    def create_from_dict(resp_json, status_code=None, rate_limit=None):
        # returns None when resp_json carries no well-formed error entry
        if not isinstance(resp_json, dict):
            return None
        raw_errors = resp_json.get('errors')
        if not isinstance(raw_errors, list) or not raw_errors:
            return None

        errors = []
        for di in raw_errors:
            if not isinstance(di, dict) or 'code' not in di:
                continue
            try:
                code = int(di['code'])
            except (TypeError, ValueError):
                continue
            errors.append(ApiErrorItem(code, di.get('message', '')))

        if not errors:
            return None
        return ApiError(errors, status_code=status_code, rate_limit=rate_limit)


class BadStatusError(TwitterClientError):

    def __init__(self, status_code, rate_limit=None, text=None):
        super(BadStatusError, self).__init__(f"unexpected status_code: {status_code}")
        self.status_code = status_code
        self.rate_limit = rate_limit
        self.text = text

import json
import os

from twitter_cursor_client.api_v1.errors import ConfigError
from twitter_cursor_client.util.auth_util import AccessToken, BearerToken


DEFAULT_API_KEYS_FILEPATH = 'api-keys.json'
DEFAULT_REQUEST_TIMEOUT = 30.0

ACCESS_TOKEN_FIELDS = [
    'consumer_key', 'consumer_secret_key', 'access_token', 'access_token_secret'
]


def get_api_keys_filepath():
    return os.environ.get('API_KEYS_FILEPATH', DEFAULT_API_KEYS_FILEPATH)


def get_request_timeout():
    val = os.environ.get('TWITTER_API_TIMEOUT')
    if not val:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        return float(val)
    except ValueError:
        raise ConfigError(f"TWITTER_API_TIMEOUT must be a number, got: {val!r}")


def load_api_keys(filepath=None):
    """
    api-keys.json layout:
        {"twitter": {"account1": {"bearer_token": "..."},
                     "account2": {"consumer_key": "...", "consumer_secret_key": "...",
                                  "access_token": "...", "access_token_secret": "..."}}}
    """
    filepath = filepath or get_api_keys_filepath()

    try:
        with open(filepath) as f:
            api_keys = json.load(f)
    except FileNotFoundError:
        raise ConfigError(f"api-keys.json file not found: {filepath}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse api-keys.json file: {filepath} ({e})")

    accounts = api_keys.get('twitter') if isinstance(api_keys, dict) else None
    if not accounts or not isinstance(accounts, dict):
        raise ConfigError(f"no twitter account credentials found in: {filepath}")

    return accounts


def token_from_account_dict(account_dict):
    # user-auth takes precedence, some endpoints (e.g. lists/members/create) need it
    if all(account_dict.get(k) for k in ACCESS_TOKEN_FIELDS):
        return AccessToken(
            account_dict['consumer_key'], account_dict['consumer_secret_key'],
            account_dict['access_token'], account_dict['access_token_secret']
        )
    if account_dict.get('bearer_token'):
        return BearerToken(account_dict['bearer_token'])

    raise ConfigError(
        'account credentials need either a bearer_token or all of: ' + ', '.join(ACCESS_TOKEN_FIELDS)
    )


def load_token(account_key=None, filepath=None):
    accounts = load_api_keys(filepath)

    if account_key is None:
        account_key = sorted(accounts.keys())[0]
    elif account_key not in accounts:
        raise ConfigError(f"account not found in api-keys.json: {account_key}")

    return token_from_account_dict(accounts[account_key])

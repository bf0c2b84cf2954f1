import json

import pytest

from twitter_cursor_client.api_v1.errors import ConfigError
from twitter_cursor_client.util.auth_util import AccessToken, BearerToken
from twitter_cursor_client.util.config_util import (
    DEFAULT_REQUEST_TIMEOUT, get_request_timeout, load_api_keys, load_token,
    token_from_account_dict
)


ACCESS_ACCOUNT = {
    'consumer_key': 'ck',
    'consumer_secret_key': 'cs',
    'access_token': 'at',
    'access_token_secret': 'as',
}


@pytest.fixture
def api_keys_file(tmp_path):
    filepath = tmp_path / 'api-keys.json'
    filepath.write_text(json.dumps({
        'twitter': {
            'account-a': {'bearer_token': 'bt'},
            'account-b': ACCESS_ACCOUNT,
        }
    }))
    return filepath


def test_load_api_keys(api_keys_file):
    accounts = load_api_keys(str(api_keys_file))
    assert sorted(accounts) == ['account-a', 'account-b']


def test_load_api_keys_from_env(api_keys_file, monkeypatch):
    monkeypatch.setenv('API_KEYS_FILEPATH', str(api_keys_file))
    assert 'account-a' in load_api_keys()


def test_load_api_keys_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_api_keys(str(tmp_path / 'nope.json'))


def test_load_api_keys_invalid_json(tmp_path):
    filepath = tmp_path / 'api-keys.json'
    filepath.write_text('{not json')
    with pytest.raises(ConfigError):
        load_api_keys(str(filepath))


def test_load_api_keys_without_accounts(tmp_path):
    filepath = tmp_path / 'api-keys.json'
    filepath.write_text(json.dumps({'twitter': {}}))
    with pytest.raises(ConfigError):
        load_api_keys(str(filepath))


def test_token_from_account_dict():
    assert isinstance(token_from_account_dict({'bearer_token': 'bt'}), BearerToken)

    token = token_from_account_dict(dict(ACCESS_ACCOUNT, bearer_token='bt'))
    assert isinstance(token, AccessToken)
    assert token.key == ('ck', 'at')

    with pytest.raises(ConfigError):
        token_from_account_dict({'consumer_key': 'ck'})


def test_load_token(api_keys_file):
    assert load_token(filepath=str(api_keys_file)).bearer_token == 'bt'
    assert isinstance(load_token('account-b', str(api_keys_file)), AccessToken)
    with pytest.raises(ConfigError):
        load_token('account-c', str(api_keys_file))


def test_request_timeout(monkeypatch):
    monkeypatch.delenv('TWITTER_API_TIMEOUT', raising=False)
    assert get_request_timeout() == DEFAULT_REQUEST_TIMEOUT

    monkeypatch.setenv('TWITTER_API_TIMEOUT', '2.5')
    assert get_request_timeout() == 2.5

    monkeypatch.setenv('TWITTER_API_TIMEOUT', 'soon')
    with pytest.raises(ConfigError):
        get_request_timeout()

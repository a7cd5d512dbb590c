import pytest
import requests
import responses
from responses import matchers

from addonmeta.ocm_client import (
    API_URL_STAGE,
    DisconnectedOCMClient,
    OCMClient,
    OCMClientDisconnectedError,
    OCMError,
    OCMResponseError,
    is_ocm_server_side_error,
)

API = "https://ocm.example.com"
QUOTA_URL = API + "/api/accounts_mgmt/v1/quota_rules"


@pytest.mark.parametrize(
    "code, expected",
    [
        (-1, False),
        (0, False),
        (600, False),
        (200, False),
        (301, False),
        (400, False),
        (404, False),
        (500, True),
        (502, True),
    ],
)
def test_response_error_server_side(code, expected):
    assert OCMResponseError(code).server_side() is expected


def test_response_error_is_ocm_error_with_message():
    err = OCMResponseError(400)
    assert isinstance(err, OCMError)
    assert str(err) == "ocm responded with code 400"


def test_is_ocm_server_side_error():
    assert is_ocm_server_side_error(OCMResponseError(503)) is True
    assert is_ocm_server_side_error(OCMResponseError(404)) is False
    assert is_ocm_server_side_error(RuntimeError("x")) is False


def test_disconnected_client_raises():
    with pytest.raises(OCMClientDisconnectedError):
        DisconnectedOCMClient().quota_rule_exists("")


def test_client_requires_token():
    with pytest.raises(ValueError):
        OCMClient(api_url=API, access_token="")


def test_client_default_url():
    with OCMClient(access_token="token") as client:
        assert client.config.api_url == API_URL_STAGE


def test_quota_rule_exists_true():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            QUOTA_URL,
            json={"size": 1},
            match=[
                matchers.query_param_matcher(
                    {"search": "name = 'addon-reference-addon'"}
                ),
                matchers.header_matcher({"Authorization": "Bearer token"}),
            ],
        )
        with OCMClient(api_url=API, access_token="token") as client:
            assert client.quota_rule_exists("addon-reference-addon") is True


def test_quota_rule_exists_false():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, QUOTA_URL, json={"size": 0})
        with OCMClient(api_url=API, access_token="token") as client:
            assert client.quota_rule_exists("addon-failing-candidate") is False


def test_quota_rule_server_error():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, QUOTA_URL, status=502)
        with OCMClient(api_url=API, access_token="token") as client:
            with pytest.raises(OCMResponseError) as info:
                client.quota_rule_exists("addon-x")
    assert info.value.code == 502
    assert is_ocm_server_side_error(info.value)


def test_quota_rule_client_error_not_server_side():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, QUOTA_URL, status=404)
        with OCMClient(api_url=API, access_token="token") as client:
            with pytest.raises(OCMResponseError) as info:
                client.quota_rule_exists("addon-x")
    assert not info.value.server_side()


def test_quota_rule_bad_json():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, QUOTA_URL, body="not json")
        with OCMClient(api_url=API, access_token="token") as client:
            with pytest.raises(ValueError, match="unmarshalling quota rules"):
                client.quota_rule_exists("addon-x")


def test_client_keeps_given_session_open():
    session = requests.Session()
    client = OCMClient(api_url=API, access_token="token", session=session)
    client.close()
    assert session.headers["Authorization"] == "Bearer token"
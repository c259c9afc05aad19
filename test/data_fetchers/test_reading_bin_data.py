import pytest
import requests
import os
import sys
from unittest.mock import MagicMock

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, project_root)

from mcp_bins.data_fetchers.reading_bin_data import ReadingBinData, REQUEST_TIMEOUT
from mcp_bins.data_models import BinCollection, CollectionsResult
from mcp_bins.exceptions import DecodeError, FetchError, UpstreamStatusError

# --- Mock JSON Data ---
MOCK_COLLECTIONS_JSON = {
    "Collections": [
        {"Date": "05/02/2020 00:00:00", "Day": "Wednesday", "Service": "Recycling Collection Service"},
        {"Date": "12/02/2020 00:00:00", "Day": "Wednesday", "Service": "Household Waste Collection Service"},
    ]
}


def create_mock_response(json_data=None, status_code=200, json_error=None):
    """Creates a mock requests.Response object."""
    mock_resp = MagicMock(spec=requests.Response)
    mock_resp.status_code = status_code
    if json_error is not None:
        mock_resp.json.side_effect = json_error
    else:
        mock_resp.json.return_value = json_data
    return mock_resp


@pytest.fixture
def mock_session():
    return MagicMock(spec=requests.Session)


def test_get_collections_success(mock_session):
    mock_response = create_mock_response(MOCK_COLLECTIONS_JSON)
    mock_session.get.return_value = mock_response
    fetcher = ReadingBinData(session=mock_session)

    result = fetcher.get_collections(310045409)

    assert result == CollectionsResult(collections=[
        BinCollection(date="05/02/2020 00:00:00", day="Wednesday", service="Recycling Collection Service"),
        BinCollection(date="12/02/2020 00:00:00", day="Wednesday", service="Household Waste Collection Service"),
    ])
    mock_session.get.assert_called_once_with(
        "https://api.reading.gov.uk/rbc/mycollections/310045409", timeout=REQUEST_TIMEOUT)
    mock_response.close.assert_called_once()


def test_uprn_rendered_as_plain_integer(mock_session):
    mock_session.get.return_value = create_mock_response({"Collections": []})
    fetcher = ReadingBinData(session=mock_session)

    fetcher.get_collections(int("000000042"))

    mock_session.get.assert_called_once_with(
        "https://api.reading.gov.uk/rbc/mycollections/42", timeout=REQUEST_TIMEOUT)


def test_timeout_is_ten_seconds():
    assert REQUEST_TIMEOUT == 10


def test_get_collections_empty(mock_session):
    mock_session.get.return_value = create_mock_response({"Collections": []})
    result = ReadingBinData(session=mock_session).get_collections(1)
    assert result.collections == []


def test_missing_collections_key_is_empty(mock_session):
    mock_session.get.return_value = create_mock_response({"Collections": None})
    result = ReadingBinData(session=mock_session).get_collections(1)
    assert result.collections == []


def test_network_failure_raises_fetch_error(mock_session):
    mock_session.get.side_effect = requests.exceptions.Timeout("timed out")
    fetcher = ReadingBinData(session=mock_session)

    with pytest.raises(FetchError) as excinfo:
        fetcher.get_collections(1)

    assert "failed to fetch bin collection data" in str(excinfo.value)
    assert "timed out" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, requests.exceptions.Timeout)


def test_error_status_raises_upstream_status_error(mock_session):
    mock_response = create_mock_response(status_code=404)
    mock_session.get.return_value = mock_response
    fetcher = ReadingBinData(session=mock_session)

    with pytest.raises(UpstreamStatusError) as excinfo:
        fetcher.get_collections(1)

    assert excinfo.value.status_code == 404
    assert str(excinfo.value) == "API request failed with status 404"
    mock_response.json.assert_not_called()
    mock_response.close.assert_called_once()


def test_invalid_json_raises_decode_error(mock_session):
    json_error = requests.exceptions.JSONDecodeError("Expecting value", "not json", 0)
    mock_response = create_mock_response(json_error=json_error)
    mock_session.get.return_value = mock_response
    fetcher = ReadingBinData(session=mock_session)

    with pytest.raises(DecodeError) as excinfo:
        fetcher.get_collections(1)

    assert "failed to decode API response" in str(excinfo.value)
    mock_response.close.assert_called_once()


@pytest.mark.parametrize("payload", [
    ["not", "an", "object"],
    {"Collections": "nope"},
    {"Collections": {}},
    {"Collections": ""},
    {"Collections": [42]},
    {"Collections": [{"Date": 5, "Day": "Monday", "Service": "Recycling"}]},
])
def test_unexpected_payload_shape_raises_decode_error(mock_session, payload):
    mock_response = create_mock_response(payload)
    mock_session.get.return_value = mock_response

    with pytest.raises(DecodeError):
        ReadingBinData(session=mock_session).get_collections(1)
    mock_response.close.assert_called_once()


def test_missing_record_fields_default_to_empty(mock_session):
    mock_session.get.return_value = create_mock_response({"Collections": [{"Service": "Garden Waste"}]})
    result = ReadingBinData(session=mock_session).get_collections(1)
    assert result.collections == [BinCollection(date="", day="", service="Garden Waste")]


def test_default_session_is_requests_session():
    fetcher = ReadingBinData()
    assert isinstance(fetcher._session, requests.Session)
    assert fetcher._timeout == REQUEST_TIMEOUT


def test_keys_matched_case_insensitively(mock_session):
    mock_session.get.return_value = create_mock_response(
        {"collections": [{"date": "05/02/2020 00:00:00", "DAY": "Wednesday", "service": "Recycling"}]})
    result = ReadingBinData(session=mock_session).get_collections(1)
    assert result.collections == [BinCollection(date="05/02/2020 00:00:00", day="Wednesday", service="Recycling")]


def test_exact_key_preferred_over_other_casing(mock_session):
    mock_session.get.return_value = create_mock_response({
        "collections": "ignored",
        "Collections": [{"Date": "05/02/2020 00:00:00", "Day": "Wednesday", "Service": "Garden Waste"}],
    })
    result = ReadingBinData(session=mock_session).get_collections(1)
    assert [c.service for c in result.collections] == ["Garden Waste"]

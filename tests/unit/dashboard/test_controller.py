"""Tests for the dashboard controller."""

from unittest.mock import MagicMock, patch

import pytest

from profile_ocr.dashboard.client import OCRClient
from profile_ocr.dashboard.controller import DashboardController
from profile_ocr.exceptions import InvalidInput, TransportFailure
from profile_ocr.models import ProfileStatus


@pytest.fixture
def mock_client():
    return MagicMock()


@pytest.fixture
def controller(mock_client):
    return DashboardController(client=mock_client, demo_fallback=False, quote_csv_fields=False)


def test_add_files_replaces_selection(controller, image_factory):
    controller.add_files([image_factory("a.png"), image_factory("b.png")])
    controller.add_files([image_factory("c.png")])

    assert [f.file_name for f in controller.state.uploaded_files] == ["c.png"]


def test_clear_files(controller, image_factory):
    controller.add_files([image_factory("a.png")])
    controller.clear_files()

    assert controller.state.uploaded_files == ()


def test_run_extraction_replaces_profiles(controller, mock_client, image_factory, profile_factory):
    profiles = [profile_factory(source_file_name="a.png")]
    mock_client.process_images.return_value = profiles
    controller.add_files([image_factory("a.png")])

    result = controller.run_extraction()

    assert result == profiles
    assert list(controller.state.extracted_profiles) == profiles
    assert controller.state.last_error is None
    mock_client.process_images.assert_called_once_with(controller.state.uploaded_files)


def test_run_extraction_without_files(controller, mock_client):
    with pytest.raises(InvalidInput):
        controller.run_extraction()
    mock_client.process_images.assert_not_called()


def test_transport_failure_sets_explicit_error(controller, mock_client, image_factory, profile_factory):
    previous = [profile_factory()]
    mock_client.process_images.return_value = previous
    controller.add_files([image_factory("a.png")])
    controller.run_extraction()

    mock_client.process_images.side_effect = TransportFailure("OCR service unreachable")
    controller.run_extraction()

    assert controller.state.last_error == "OCR service unreachable"
    assert list(controller.state.extracted_profiles) == previous
    assert controller.state.is_demo is False


def test_transport_failure_with_demo_fallback(mock_client, image_factory):
    mock_client.process_images.side_effect = TransportFailure("down")
    controller = DashboardController(client=mock_client, demo_fallback=True)
    controller.add_files([image_factory("a.png")])

    profiles = controller.run_extraction()

    assert controller.state.is_demo is True
    assert controller.state.last_error == "down"
    assert [p.display_name for p in profiles] == ["Rubi Rose", "Bella Poarch"]


def test_filtered_view_uses_state(controller, mock_client, image_factory, profile_factory):
    bella = profile_factory(display_name="Bella Poarch", status=ProfileStatus.PROCESSING)
    rubi = profile_factory(display_name="Rubi Rose")
    mock_client.process_images.return_value = [bella, rubi]
    controller.add_files([image_factory("a.png"), image_factory("b.png")])
    controller.run_extraction()

    controller.set_search_term("BELLA")
    assert controller.filtered_view() == [bella]

    controller.set_search_term("")
    controller.set_status_filter("completed")
    assert controller.filtered_view() == [rubi]
    assert list(controller.state.extracted_profiles) == [bella, rubi]


def test_invalid_filter_and_view_mode(controller):
    with pytest.raises(InvalidInput):
        controller.set_status_filter("archived")
    with pytest.raises(InvalidInput):
        controller.set_view_mode("table")

    controller.set_view_mode("list")
    assert controller.state.view_mode == "list"


def test_export_csv_uses_full_list(controller):
    controller.load_demo_profiles()
    controller.set_search_term("bella")

    rows = controller.export_csv().strip().split("\n")
    filtered_rows = controller.export_csv(filtered_only=True).strip().split("\n")

    assert len(rows) == 3
    assert len(filtered_rows) == 2


def test_aggregates_over_demo_profiles(controller):
    controller.load_demo_profiles()

    aggregates = controller.aggregates()

    assert aggregates.total_revenue == 15640 + 23890
    assert aggregates.completed_count == 1
    assert aggregates.average_revenue == (15640 + 23890) / 2


def test_malformed_service_response_sets_error(image_factory):
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = {"success": True, "profiles": [{"id": "x"}], "failures": []}
    controller = DashboardController(client=OCRClient(url="http://ocr.test/api/ocr/process"), demo_fallback=False)
    controller.add_files([image_factory("a.png")])

    with patch("profile_ocr.dashboard.client.requests.post", return_value=response):
        profiles = controller.run_extraction()

    assert profiles == []
    assert controller.state.last_error.startswith("Malformed OCR response")

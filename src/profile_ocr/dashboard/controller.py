"""
Dashboard controller: owns the session state and the operations on it.

State lives in an immutable ``DashboardState``; every operation swaps in a new
one, and views are computed from it on demand.
"""
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from ..config import settings
from ..exceptions import InvalidInput, TransportFailure
from ..logging_config import setup_logging
from ..models import ImageUpload, ProfileRecord, ProfileStatus
from .client import OCRClient
from .demo import demo_profiles
from .views import STATUS_FILTER_ALL, Aggregates, compute_aggregates, filter_profiles, profiles_to_csv

logger = setup_logging("dashboard")

VIEW_MODES = ("grid", "list")
STATUS_FILTERS = (STATUS_FILTER_ALL,) + tuple(status.value for status in ProfileStatus)


@dataclass(frozen=True)
class DashboardState:
    uploaded_files: Tuple[ImageUpload, ...] = ()
    extracted_profiles: Tuple[ProfileRecord, ...] = ()
    search_term: str = ""
    status_filter: str = STATUS_FILTER_ALL
    view_mode: str = "grid"
    last_error: Optional[str] = None
    is_demo: bool = False


class DashboardController:
    """Session-scoped controller behind the dashboard UI."""

    def __init__(
        self,
        client: Optional[OCRClient] = None,
        demo_fallback: Optional[bool] = None,
        quote_csv_fields: Optional[bool] = None,
    ):
        self.client = client or OCRClient()
        self.demo_fallback = settings.demo_fallback if demo_fallback is None else demo_fallback
        self.quote_csv_fields = settings.csv_quote_fields if quote_csv_fields is None else quote_csv_fields
        self._state = DashboardState()

    @property
    def state(self) -> DashboardState:
        return self._state

    def add_files(self, files: Sequence[ImageUpload]) -> None:
        """Replace the current upload selection."""
        self._state = replace(self._state, uploaded_files=tuple(files))

    def clear_files(self) -> None:
        self._state = replace(self._state, uploaded_files=())

    def set_search_term(self, term: str) -> None:
        self._state = replace(self._state, search_term=term or "")

    def set_status_filter(self, status_filter: str) -> None:
        if status_filter not in STATUS_FILTERS:
            raise InvalidInput(f"Unknown status filter: {status_filter}")
        self._state = replace(self._state, status_filter=status_filter)

    def set_view_mode(self, view_mode: str) -> None:
        if view_mode not in VIEW_MODES:
            raise InvalidInput(f"Unknown view mode: {view_mode}")
        self._state = replace(self._state, view_mode=view_mode)

    def load_demo_profiles(self) -> None:
        self._state = replace(self._state, extracted_profiles=tuple(demo_profiles()), is_demo=True, last_error=None)

    def run_extraction(self) -> List[ProfileRecord]:
        """
        Send the uploaded files to the OCR service.

        On success the extracted profiles replace the current ones. When the
        service cannot be reached the failure is kept in ``last_error``; the
        demo profiles are shown instead only if demo fallback is enabled.

        Raises:
            InvalidInput: If no files are uploaded or the service rejects them
        """
        if not self._state.uploaded_files:
            raise InvalidInput("No files provided")

        try:
            profiles = self.client.process_images(self._state.uploaded_files)
        except TransportFailure as e:
            logger.error("Extraction failed", extra={"error": str(e), "demo_fallback": self.demo_fallback})
            if self.demo_fallback:
                self._state = replace(
                    self._state, extracted_profiles=tuple(demo_profiles()), is_demo=True, last_error=str(e)
                )
            else:
                self._state = replace(self._state, last_error=str(e))
            return list(self._state.extracted_profiles)

        logger.info(
            "Extraction completed",
            extra={"files": len(self._state.uploaded_files), "profiles": len(profiles)},
        )
        self._state = replace(self._state, extracted_profiles=tuple(profiles), is_demo=False, last_error=None)
        return profiles

    def filtered_view(self) -> List[ProfileRecord]:
        return filter_profiles(self._state.extracted_profiles, self._state.search_term, self._state.status_filter)

    def export_csv(self, filtered_only: bool = False) -> str:
        """CSV of all extracted profiles, or only the filtered ones."""
        profiles = self.filtered_view() if filtered_only else self._state.extracted_profiles
        return profiles_to_csv(profiles, quote_fields=self.quote_csv_fields)

    def aggregates(self) -> Aggregates:
        return compute_aggregates(self._state.extracted_profiles)

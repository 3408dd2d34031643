from .client import OCRClient
from .controller import DashboardController, DashboardState
from .views import Aggregates, compute_aggregates, filter_profiles, profiles_to_csv

__all__ = [
    "Aggregates",
    "DashboardController",
    "DashboardState",
    "OCRClient",
    "compute_aggregates",
    "filter_profiles",
    "profiles_to_csv",
]

"""COVID dataset download client package."""

from covid_client.base import BaseClient
from covid_client.dataset import DatasetClient, download_datasets

__all__ = [
    "BaseClient",
    "DatasetClient",
    "download_datasets",
]

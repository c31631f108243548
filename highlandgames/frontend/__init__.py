"""Front-end shell: page router and reference data loading."""
from .router import View, PageRouter
from .loader import ReferenceDataLoader, http_fetcher, flask_client_fetcher

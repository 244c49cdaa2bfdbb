"""
Cliente HTTP de la API de ventas, para consumir los endpoints desde
otros servicios o scripts.
"""

from .api_client import ApiClient, ApiClientError

__all__ = [
    "ApiClient",
    "ApiClientError"
]

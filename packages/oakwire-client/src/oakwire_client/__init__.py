from oakwire_client.client import OakwireApiClient
from oakwire_client.exceptions import ApiError

__all__ = ["ApiError", "OakwireApiClient"]

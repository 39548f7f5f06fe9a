"""Transport exports."""

from .requests_transport import KycTransport, RequestsTransport

__all__ = ["KycTransport", "RequestsTransport"]

"""Domain value objects package"""

from .kyc_status import KycStatus

__all__ = ["KycStatus"]

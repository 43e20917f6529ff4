"""
Core package: configuration, security, authorization, exceptions and middleware.
Kept free of route code so services and tests can import it directly.
"""

from core.config import get_settings

__all__ = ["get_settings"]

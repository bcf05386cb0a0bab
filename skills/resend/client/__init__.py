from .resend_client import ResendApiError, ResendClient

__all__ = ["ResendApiError", "ResendClient"]

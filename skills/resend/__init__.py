"""
Resend email skill: a single `send_email` MCP tool backed by the Resend API.
"""

__version__ = "0.1.0"

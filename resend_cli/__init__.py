"""
Resend CLI - Three-layer architecture for the Resend API.

Layers:
- core: Raw types and HTTP client
- sdk: ResendClient with one method per API operation
- cli: Opinionated command-line interface
"""

from resend_cli.sdk import ResendClient

__version__ = "0.1.0"
__all__ = ["ResendClient"]

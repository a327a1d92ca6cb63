"""
Core layer - Raw types and HTTP client.

This layer provides:
- Typed dataclasses for Resend request payloads and response records
- Low-level HTTP client with auth and error handling
"""

from resend_cli.core.client import (
    APIClient,
    APIError,
    CLIError,
    ConfigError,
    DecodeError,
    LocalIOError,
    TransportError,
    ValidationError,
)
from resend_cli.core.types import (
    ApiKey,
    Attachment,
    Broadcast,
    Contact,
    ContactProperty,
    Domain,
    Email,
    PaginationOptions,
    ReceivedEmail,
    Segment,
    Template,
    Topic,
    Webhook,
)

__all__ = [
    "APIClient",
    "APIError",
    "ApiKey",
    "Attachment",
    "Broadcast",
    "CLIError",
    "ConfigError",
    "Contact",
    "ContactProperty",
    "DecodeError",
    "Domain",
    "Email",
    "LocalIOError",
    "PaginationOptions",
    "ReceivedEmail",
    "Segment",
    "Template",
    "Topic",
    "TransportError",
    "ValidationError",
    "Webhook",
]

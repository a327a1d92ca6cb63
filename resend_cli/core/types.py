"""
Core types for the Resend API.

Request dataclasses serialize with ``to_dict()``; optional fields left as None
are dropped from the payload so the server applies its own defaults.
Record dataclasses are built with ``from_dict()`` and read required keys
strictly, so a malformed response surfaces as a decode error.
"""

from dataclasses import dataclass, field
from typing import Any


def _compact(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in payload.items() if v is not None}


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {value!r}")
    return value


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


# =============================================================================
# Pagination
# =============================================================================


@dataclass
class PaginationOptions:
    """Cursor pagination for list endpoints."""

    limit: int | None = None
    after: str | None = None
    before: str | None = None

    def to_params(self) -> dict[str, Any]:
        """Query parameters for the fields that are set."""
        return _compact({"limit": self.limit, "after": self.after, "before": self.before})


# =============================================================================
# Email Types
# =============================================================================


@dataclass
class SendEmailRequest:
    """Payload for POST /emails and each item of POST /emails/batch."""

    sender: str
    to: list[str]
    subject: str
    html: str | None = None
    text: str | None = None
    cc: list[str] | None = None
    bcc: list[str] | None = None
    reply_to: list[str] | None = None
    scheduled_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact(
            {
                "from": self.sender,
                "to": self.to,
                "subject": self.subject,
                "html": self.html,
                "text": self.text,
                "cc": self.cc,
                "bcc": self.bcc,
                "reply_to": self.reply_to,
                "scheduled_at": self.scheduled_at,
            }
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SendEmailRequest":
        """Create from a batch file entry."""
        to = data["to"]
        return cls(
            sender=data["from"],
            to=[to] if isinstance(to, str) else list(to),
            subject=data["subject"],
            html=data.get("html"),
            text=data.get("text"),
            cc=data.get("cc"),
            bcc=data.get("bcc"),
            reply_to=data.get("reply_to"),
            scheduled_at=data.get("scheduled_at"),
        )


@dataclass
class SendEmailResponse:
    """Identifier returned after sending or updating an email."""

    id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SendEmailResponse":
        """Create from API response dict."""
        return cls(id=data["id"])


@dataclass
class BatchSendResponse:
    """Identifiers returned by POST /emails/batch, in request order."""

    data: list[SendEmailResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "BatchSendResponse":
        """Create from API response (bare array or ``{"data": [...]}``)."""
        items = data if isinstance(data, list) else data["data"]
        return cls(data=[SendEmailResponse.from_dict(item) for item in items])


@dataclass
class UpdateEmailRequest:
    """Payload for PATCH /emails/{id}."""

    scheduled_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact({"scheduled_at": self.scheduled_at})


@dataclass
class Email:
    """A sent or scheduled email."""

    id: str
    sender: str
    to: list[str]
    subject: str
    created_at: str
    last_event: str
    html: str | None = None
    text: str | None = None
    cc: list[str] | None = None
    bcc: list[str] | None = None
    reply_to: list[str] | None = None
    scheduled_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Email":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            sender=data["from"],
            to=data["to"],
            subject=data["subject"],
            created_at=data["created_at"],
            last_event=data["last_event"],
            html=data.get("html"),
            text=data.get("text"),
            cc=data.get("cc"),
            bcc=data.get("bcc"),
            reply_to=data.get("reply_to"),
            scheduled_at=data.get("scheduled_at"),
        )


@dataclass
class ListEmailsResponse:
    """Envelope for GET /emails."""

    data: list[Email]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListEmailsResponse":
        """Create from API response dict."""
        return cls(data=[Email.from_dict(item) for item in data["data"]])


@dataclass
class Attachment:
    """An attachment on a sent or received email."""

    id: str
    filename: str
    size: int
    content_type: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Attachment":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            filename=data["filename"],
            size=_int(data["size"]),
            content_type=data["content_type"],
        )


@dataclass
class ListAttachmentsResponse:
    """Envelope for attachment listings."""

    data: list[Attachment]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListAttachmentsResponse":
        """Create from API response dict."""
        return cls(data=[Attachment.from_dict(item) for item in data["data"]])


# =============================================================================
# Domain Types
# =============================================================================


@dataclass
class CreateDomainRequest:
    """Payload for POST /domains."""

    name: str
    region: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact({"name": self.name, "region": self.region})


@dataclass
class Domain:
    """A sending domain."""

    id: str
    name: str
    created_at: str
    status: str
    region: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Domain":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            name=data["name"],
            created_at=data["created_at"],
            status=data["status"],
            region=data["region"],
        )


@dataclass
class ListDomainsResponse:
    """Envelope for GET /domains."""

    data: list[Domain]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListDomainsResponse":
        """Create from API response dict."""
        return cls(data=[Domain.from_dict(item) for item in data["data"]])


# =============================================================================
# Contact Types
# =============================================================================


@dataclass
class CreateContactRequest:
    """Payload for POST /contacts."""

    email: str
    first_name: str | None = None
    last_name: str | None = None
    unsubscribed: bool | None = None
    properties: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact(
            {
                "email": self.email,
                "first_name": self.first_name,
                "last_name": self.last_name,
                "unsubscribed": self.unsubscribed,
                "properties": self.properties,
            }
        )


@dataclass
class UpdateContactRequest:
    """Payload for PATCH /contacts/{id}."""

    first_name: str | None = None
    last_name: str | None = None
    unsubscribed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact(
            {
                "first_name": self.first_name,
                "last_name": self.last_name,
                "unsubscribed": self.unsubscribed,
            }
        )


@dataclass
class Contact:
    """An audience contact."""

    id: str
    email: str
    created_at: str
    unsubscribed: bool
    first_name: str | None = None
    last_name: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            email=data["email"],
            created_at=data["created_at"],
            unsubscribed=_bool(data["unsubscribed"]),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
        )


@dataclass
class ListContactsResponse:
    """Envelope for GET /contacts."""

    data: list[Contact]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListContactsResponse":
        """Create from API response dict."""
        return cls(data=[Contact.from_dict(item) for item in data["data"]])


# =============================================================================
# Segment Types
# =============================================================================


@dataclass
class CreateSegmentRequest:
    """Payload for POST /segments."""

    name: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return {"name": self.name}


@dataclass
class Segment:
    """A named group of contacts."""

    id: str
    name: str
    created_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Create from API response dict."""
        return cls(id=data["id"], name=data["name"], created_at=data["created_at"])


@dataclass
class ListSegmentsResponse:
    """Envelope for GET /segments."""

    data: list[Segment]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListSegmentsResponse":
        """Create from API response dict."""
        return cls(data=[Segment.from_dict(item) for item in data["data"]])


# =============================================================================
# Template Types
# =============================================================================


@dataclass
class CreateTemplateRequest:
    """Payload for POST /templates."""

    name: str
    html: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return {"name": self.name, "html": self.html}


@dataclass
class UpdateTemplateRequest:
    """Payload for PATCH /templates/{id}."""

    name: str | None = None
    html: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact({"name": self.name, "html": self.html})


@dataclass
class Template:
    """A stored email template."""

    id: str
    name: str
    created_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Template":
        """Create from API response dict."""
        return cls(id=data["id"], name=data["name"], created_at=data["created_at"])


@dataclass
class ListTemplatesResponse:
    """Envelope for GET /templates."""

    data: list[Template]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListTemplatesResponse":
        """Create from API response dict."""
        return cls(data=[Template.from_dict(item) for item in data["data"]])


# =============================================================================
# Topic Types
# =============================================================================


@dataclass
class CreateTopicRequest:
    """Payload for POST /topics."""

    name: str
    default_subscription: str = "opt_in"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return {"name": self.name, "default_subscription": self.default_subscription}


@dataclass
class UpdateTopicRequest:
    """Payload for PATCH /topics/{id}."""

    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact({"name": self.name})


@dataclass
class Topic:
    """A subscription topic."""

    id: str
    name: str
    created_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Topic":
        """Create from API response dict."""
        return cls(id=data["id"], name=data["name"], created_at=data["created_at"])


@dataclass
class ListTopicsResponse:
    """Envelope for GET /topics."""

    data: list[Topic]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListTopicsResponse":
        """Create from API response dict."""
        return cls(data=[Topic.from_dict(item) for item in data["data"]])


# =============================================================================
# Webhook Types
# =============================================================================


@dataclass
class CreateWebhookRequest:
    """Payload for POST /webhooks."""

    endpoint: str
    events: list[str]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return {"endpoint": self.endpoint, "events": self.events}


@dataclass
class Webhook:
    """A webhook subscription."""

    id: str
    endpoint: str | None = None
    created_at: str | None = None
    # Only present on create
    signing_secret: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Webhook":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            endpoint=data.get("endpoint"),
            created_at=data.get("created_at"),
            signing_secret=data.get("signing_secret"),
        )


@dataclass
class ListWebhooksResponse:
    """Envelope for GET /webhooks."""

    data: list[Webhook]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListWebhooksResponse":
        """Create from API response dict."""
        return cls(data=[Webhook.from_dict(item) for item in data["data"]])


# =============================================================================
# Broadcast Types
# =============================================================================


@dataclass
class CreateBroadcastRequest:
    """Payload for POST /broadcasts."""

    name: str
    segment_id: str
    sender: str
    subject: str
    html: str | None = None
    text: str | None = None
    reply_to: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact(
            {
                "name": self.name,
                "segment_id": self.segment_id,
                "from": self.sender,
                "subject": self.subject,
                "html": self.html,
                "text": self.text,
                "reply_to": self.reply_to,
            }
        )


@dataclass
class UpdateBroadcastRequest:
    """Payload for PATCH /broadcasts/{id}."""

    name: str | None = None
    segment_id: str | None = None
    sender: str | None = None
    subject: str | None = None
    html: str | None = None
    text: str | None = None
    reply_to: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact(
            {
                "name": self.name,
                "segment_id": self.segment_id,
                "from": self.sender,
                "subject": self.subject,
                "html": self.html,
                "text": self.text,
                "reply_to": self.reply_to,
            }
        )


@dataclass
class Broadcast:
    """A broadcast to a segment."""

    id: str
    status: str
    created_at: str
    name: str | None = None
    segment_id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Broadcast":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            status=data["status"],
            created_at=data["created_at"],
            name=data.get("name"),
            segment_id=data.get("segment_id"),
        )


@dataclass
class ListBroadcastsResponse:
    """Envelope for GET /broadcasts."""

    data: list[Broadcast]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListBroadcastsResponse":
        """Create from API response dict."""
        return cls(data=[Broadcast.from_dict(item) for item in data["data"]])


# =============================================================================
# API Key Types
# =============================================================================


@dataclass
class CreateApiKeyRequest:
    """Payload for POST /api-keys."""

    name: str
    permission: str | None = None
    domain_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact({"name": self.name, "permission": self.permission, "domain_id": self.domain_id})


@dataclass
class ApiKey:
    """An API key. ``token`` is only returned once, on create."""

    id: str
    name: str
    created_at: str
    token: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiKey":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            name=data["name"],
            created_at=data["created_at"],
            token=data.get("token"),
        )


@dataclass
class ListApiKeysResponse:
    """Envelope for GET /api-keys."""

    data: list[ApiKey]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListApiKeysResponse":
        """Create from API response dict."""
        return cls(data=[ApiKey.from_dict(item) for item in data["data"]])


# =============================================================================
# Contact Property Types
# =============================================================================


@dataclass
class CreateContactPropertyRequest:
    """Payload for POST /contact-properties."""

    key: str
    property_type: str
    fallback_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact({"key": self.key, "type": self.property_type, "fallback_value": self.fallback_value})


@dataclass
class UpdateContactPropertyRequest:
    """Payload for PATCH /contact-properties/{id}."""

    fallback_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API request."""
        return _compact({"fallback_value": self.fallback_value})


@dataclass
class ContactProperty:
    """A custom contact attribute definition."""

    id: str
    key: str
    property_type: str
    created_at: str
    fallback_value: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContactProperty":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            key=data["key"],
            property_type=data["type"],
            created_at=data["created_at"],
            fallback_value=data.get("fallback_value"),
        )


@dataclass
class ListContactPropertiesResponse:
    """Envelope for GET /contact-properties."""

    data: list[ContactProperty]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListContactPropertiesResponse":
        """Create from API response dict."""
        return cls(data=[ContactProperty.from_dict(item) for item in data["data"]])


# =============================================================================
# Receiving Types
# =============================================================================


@dataclass
class ReceivedEmail:
    """An inbound email."""

    id: str
    sender: str
    to: list[str]
    subject: str
    created_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReceivedEmail":
        """Create from API response dict."""
        return cls(
            id=data["id"],
            sender=data["from"],
            to=data["to"],
            subject=data["subject"],
            created_at=data["created_at"],
        )


@dataclass
class ListReceivedEmailsResponse:
    """Envelope for GET /emails/receiving."""

    data: list[ReceivedEmail]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ListReceivedEmailsResponse":
        """Create from API response dict."""
        return cls(data=[ReceivedEmail.from_dict(item) for item in data["data"]])

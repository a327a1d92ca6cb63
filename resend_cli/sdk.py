"""
Resend SDK - One typed method per API operation.

``ResendApi`` is the full operation set; command handlers depend on it rather
than on the concrete client, so tests can substitute a fake. ``ResendClient``
implements every method on top of the core ``APIClient`` and issues exactly
one HTTP call per method.
"""

import urllib.parse
from typing import Any, Protocol

from resend_cli.core.client import DEFAULT_BASE_URL, APIClient
from resend_cli.core.types import (
    ApiKey,
    BatchSendResponse,
    Broadcast,
    Contact,
    ContactProperty,
    CreateApiKeyRequest,
    CreateBroadcastRequest,
    CreateContactPropertyRequest,
    CreateContactRequest,
    CreateDomainRequest,
    CreateSegmentRequest,
    CreateTemplateRequest,
    CreateTopicRequest,
    CreateWebhookRequest,
    Domain,
    Email,
    ListApiKeysResponse,
    ListAttachmentsResponse,
    ListBroadcastsResponse,
    ListContactPropertiesResponse,
    ListContactsResponse,
    ListDomainsResponse,
    ListEmailsResponse,
    ListReceivedEmailsResponse,
    ListSegmentsResponse,
    ListTemplatesResponse,
    ListTopicsResponse,
    ListWebhooksResponse,
    PaginationOptions,
    Segment,
    SendEmailRequest,
    SendEmailResponse,
    Template,
    Topic,
    UpdateBroadcastRequest,
    UpdateContactPropertyRequest,
    UpdateContactRequest,
    UpdateEmailRequest,
    UpdateTemplateRequest,
    UpdateTopicRequest,
    Webhook,
)


def _segment(value: str) -> str:
    """Percent-encode an id so it stays a single path segment."""
    return urllib.parse.quote(value, safe="")


def _json_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


class ResendApi(Protocol):
    """Every operation the CLI can perform against the Resend API."""

    # Emails
    def send_email(self, request: SendEmailRequest) -> SendEmailResponse: ...
    def send_email_batch(self, requests: list[SendEmailRequest]) -> BatchSendResponse: ...
    def get_email(self, email_id: str) -> Email: ...
    def list_emails(self, pagination: PaginationOptions) -> ListEmailsResponse: ...
    def cancel_email(self, email_id: str) -> None: ...
    def update_email(self, email_id: str, request: UpdateEmailRequest) -> SendEmailResponse: ...
    def list_email_attachments(self, email_id: str) -> ListAttachmentsResponse: ...

    # API keys
    def create_api_key(self, request: CreateApiKeyRequest) -> ApiKey: ...
    def list_api_keys(self, pagination: PaginationOptions) -> ListApiKeysResponse: ...
    def delete_api_key(self, api_key_id: str) -> None: ...

    # Domains
    def create_domain(self, request: CreateDomainRequest) -> Domain: ...
    def list_domains(self, pagination: PaginationOptions) -> ListDomainsResponse: ...
    def get_domain(self, domain_id: str) -> Domain: ...
    def delete_domain(self, domain_id: str) -> None: ...
    def verify_domain(self, domain_id: str) -> None: ...

    # Segments
    def create_segment(self, name: str) -> Segment: ...
    def list_segments(self, pagination: PaginationOptions) -> ListSegmentsResponse: ...
    def get_segment(self, segment_id: str) -> Segment: ...
    def delete_segment(self, segment_id: str) -> None: ...

    # Contacts
    def create_contact(self, request: CreateContactRequest) -> Contact: ...
    def list_contacts(self, pagination: PaginationOptions) -> ListContactsResponse: ...
    def get_contact(self, contact_id: str) -> Contact: ...
    def update_contact(self, contact_id: str, request: UpdateContactRequest) -> Contact: ...
    def delete_contact(self, contact_id: str) -> None: ...
    def add_contact_to_segment(self, contact_id: str, segment_id: str) -> None: ...
    def remove_contact_from_segment(self, contact_id: str, segment_id: str) -> None: ...

    # Templates
    def create_template(self, request: CreateTemplateRequest) -> Template: ...
    def list_templates(self, pagination: PaginationOptions) -> ListTemplatesResponse: ...
    def get_template(self, template_id: str) -> Template: ...
    def update_template(self, template_id: str, request: UpdateTemplateRequest) -> Template: ...
    def delete_template(self, template_id: str) -> None: ...

    # Topics
    def create_topic(self, request: CreateTopicRequest) -> Topic: ...
    def list_topics(self, pagination: PaginationOptions) -> ListTopicsResponse: ...
    def get_topic(self, topic_id: str) -> Topic: ...
    def update_topic(self, topic_id: str, request: UpdateTopicRequest) -> Topic: ...
    def delete_topic(self, topic_id: str) -> None: ...

    # Webhooks
    def create_webhook(self, request: CreateWebhookRequest) -> Webhook: ...
    def list_webhooks(self, pagination: PaginationOptions) -> ListWebhooksResponse: ...
    def get_webhook(self, webhook_id: str) -> Webhook: ...
    def delete_webhook(self, webhook_id: str) -> None: ...

    # Broadcasts
    def create_broadcast(self, request: CreateBroadcastRequest) -> Broadcast: ...
    def list_broadcasts(self, pagination: PaginationOptions) -> ListBroadcastsResponse: ...
    def get_broadcast(self, broadcast_id: str) -> Broadcast: ...
    def update_broadcast(self, broadcast_id: str, request: UpdateBroadcastRequest) -> Broadcast: ...
    def delete_broadcast(self, broadcast_id: str) -> None: ...
    def send_broadcast(self, broadcast_id: str) -> None: ...

    # Contact properties
    def create_contact_property(self, request: CreateContactPropertyRequest) -> ContactProperty: ...
    def list_contact_properties(self, pagination: PaginationOptions) -> ListContactPropertiesResponse: ...
    def get_contact_property(self, property_id: str) -> ContactProperty: ...
    def update_contact_property(
        self, property_id: str, request: UpdateContactPropertyRequest
    ) -> ContactProperty: ...
    def delete_contact_property(self, property_id: str) -> None: ...

    # Receiving
    def list_received_emails(self, pagination: PaginationOptions) -> ListReceivedEmailsResponse: ...
    def get_received_email(self, email_id: str) -> dict[str, Any]: ...
    def list_received_attachments(self, email_id: str) -> ListAttachmentsResponse: ...


class ResendClient:
    """
    Resend API client with one typed method per operation.

    Example:
        client = ResendClient("re_123")

        domain = client.create_domain(CreateDomainRequest(name="example.com"))
        client.verify_domain(domain.id)

        page = client.list_contacts(PaginationOptions(limit=10))

    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, timeout: float | None = None):
        """
        Initialize the Resend client.

        Args:
            api_key: Resend API key
            base_url: API base URL
            timeout: Socket timeout in seconds; None leaves the urllib default

        """
        self._client = APIClient(api_key=api_key, base_url=base_url, timeout=timeout)

    # =========================================================================
    # Emails
    # =========================================================================

    def send_email(self, request: SendEmailRequest) -> SendEmailResponse:
        return self._client.post("/emails", SendEmailResponse.from_dict, request.to_dict())

    def send_email_batch(self, requests: list[SendEmailRequest]) -> BatchSendResponse:
        """Send several emails in one request; the server reports per-item results."""
        payload = [r.to_dict() for r in requests]
        return self._client.post("/emails/batch", BatchSendResponse.from_dict, payload)

    def get_email(self, email_id: str) -> Email:
        return self._client.get(f"/emails/{_segment(email_id)}", Email.from_dict)

    def list_emails(self, pagination: PaginationOptions) -> ListEmailsResponse:
        return self._client.get("/emails", ListEmailsResponse.from_dict, pagination)

    def cancel_email(self, email_id: str) -> None:
        """Cancel a scheduled email."""
        self._client.request_void("POST", f"/emails/{_segment(email_id)}/cancel")

    def update_email(self, email_id: str, request: UpdateEmailRequest) -> SendEmailResponse:
        """Reschedule a scheduled email."""
        return self._client.patch(f"/emails/{_segment(email_id)}", SendEmailResponse.from_dict, request.to_dict())

    def list_email_attachments(self, email_id: str) -> ListAttachmentsResponse:
        return self._client.get(f"/emails/{_segment(email_id)}/attachments", ListAttachmentsResponse.from_dict)

    # =========================================================================
    # API Keys
    # =========================================================================

    def create_api_key(self, request: CreateApiKeyRequest) -> ApiKey:
        return self._client.post("/api-keys", ApiKey.from_dict, request.to_dict())

    def list_api_keys(self, pagination: PaginationOptions) -> ListApiKeysResponse:
        return self._client.get("/api-keys", ListApiKeysResponse.from_dict, pagination)

    def delete_api_key(self, api_key_id: str) -> None:
        self._client.delete(f"/api-keys/{_segment(api_key_id)}")

    # =========================================================================
    # Domains
    # =========================================================================

    def create_domain(self, request: CreateDomainRequest) -> Domain:
        return self._client.post("/domains", Domain.from_dict, request.to_dict())

    def list_domains(self, pagination: PaginationOptions) -> ListDomainsResponse:
        return self._client.get("/domains", ListDomainsResponse.from_dict, pagination)

    def get_domain(self, domain_id: str) -> Domain:
        return self._client.get(f"/domains/{_segment(domain_id)}", Domain.from_dict)

    def delete_domain(self, domain_id: str) -> None:
        self._client.delete(f"/domains/{_segment(domain_id)}")

    def verify_domain(self, domain_id: str) -> None:
        """Start DNS verification for a domain."""
        self._client.request_void("POST", f"/domains/{_segment(domain_id)}/verify")

    # =========================================================================
    # Segments
    # =========================================================================

    def create_segment(self, name: str) -> Segment:
        request = CreateSegmentRequest(name=name)
        return self._client.post("/segments", Segment.from_dict, request.to_dict())

    def list_segments(self, pagination: PaginationOptions) -> ListSegmentsResponse:
        return self._client.get("/segments", ListSegmentsResponse.from_dict, pagination)

    def get_segment(self, segment_id: str) -> Segment:
        return self._client.get(f"/segments/{_segment(segment_id)}", Segment.from_dict)

    def delete_segment(self, segment_id: str) -> None:
        self._client.delete(f"/segments/{_segment(segment_id)}")

    # =========================================================================
    # Contacts
    # =========================================================================

    def create_contact(self, request: CreateContactRequest) -> Contact:
        return self._client.post("/contacts", Contact.from_dict, request.to_dict())

    def list_contacts(self, pagination: PaginationOptions) -> ListContactsResponse:
        return self._client.get("/contacts", ListContactsResponse.from_dict, pagination)

    def get_contact(self, contact_id: str) -> Contact:
        return self._client.get(f"/contacts/{_segment(contact_id)}", Contact.from_dict)

    def update_contact(self, contact_id: str, request: UpdateContactRequest) -> Contact:
        return self._client.patch(f"/contacts/{_segment(contact_id)}", Contact.from_dict, request.to_dict())

    def delete_contact(self, contact_id: str) -> None:
        self._client.delete(f"/contacts/{_segment(contact_id)}")

    def add_contact_to_segment(self, contact_id: str, segment_id: str) -> None:
        self._client.request_void("POST", f"/contacts/{_segment(contact_id)}/segments/{_segment(segment_id)}")

    def remove_contact_from_segment(self, contact_id: str, segment_id: str) -> None:
        self._client.delete(f"/contacts/{_segment(contact_id)}/segments/{_segment(segment_id)}")

    # =========================================================================
    # Templates
    # =========================================================================

    def create_template(self, request: CreateTemplateRequest) -> Template:
        return self._client.post("/templates", Template.from_dict, request.to_dict())

    def list_templates(self, pagination: PaginationOptions) -> ListTemplatesResponse:
        return self._client.get("/templates", ListTemplatesResponse.from_dict, pagination)

    def get_template(self, template_id: str) -> Template:
        return self._client.get(f"/templates/{_segment(template_id)}", Template.from_dict)

    def update_template(self, template_id: str, request: UpdateTemplateRequest) -> Template:
        return self._client.patch(f"/templates/{_segment(template_id)}", Template.from_dict, request.to_dict())

    def delete_template(self, template_id: str) -> None:
        self._client.delete(f"/templates/{_segment(template_id)}")

    # =========================================================================
    # Topics
    # =========================================================================

    def create_topic(self, request: CreateTopicRequest) -> Topic:
        return self._client.post("/topics", Topic.from_dict, request.to_dict())

    def list_topics(self, pagination: PaginationOptions) -> ListTopicsResponse:
        return self._client.get("/topics", ListTopicsResponse.from_dict, pagination)

    def get_topic(self, topic_id: str) -> Topic:
        return self._client.get(f"/topics/{_segment(topic_id)}", Topic.from_dict)

    def update_topic(self, topic_id: str, request: UpdateTopicRequest) -> Topic:
        return self._client.patch(f"/topics/{_segment(topic_id)}", Topic.from_dict, request.to_dict())

    def delete_topic(self, topic_id: str) -> None:
        self._client.delete(f"/topics/{_segment(topic_id)}")

    # =========================================================================
    # Webhooks
    # =========================================================================

    def create_webhook(self, request: CreateWebhookRequest) -> Webhook:
        return self._client.post("/webhooks", Webhook.from_dict, request.to_dict())

    def list_webhooks(self, pagination: PaginationOptions) -> ListWebhooksResponse:
        return self._client.get("/webhooks", ListWebhooksResponse.from_dict, pagination)

    def get_webhook(self, webhook_id: str) -> Webhook:
        return self._client.get(f"/webhooks/{_segment(webhook_id)}", Webhook.from_dict)

    def delete_webhook(self, webhook_id: str) -> None:
        self._client.delete(f"/webhooks/{_segment(webhook_id)}")

    # =========================================================================
    # Broadcasts
    # =========================================================================

    def create_broadcast(self, request: CreateBroadcastRequest) -> Broadcast:
        return self._client.post("/broadcasts", Broadcast.from_dict, request.to_dict())

    def list_broadcasts(self, pagination: PaginationOptions) -> ListBroadcastsResponse:
        return self._client.get("/broadcasts", ListBroadcastsResponse.from_dict, pagination)

    def get_broadcast(self, broadcast_id: str) -> Broadcast:
        return self._client.get(f"/broadcasts/{_segment(broadcast_id)}", Broadcast.from_dict)

    def update_broadcast(self, broadcast_id: str, request: UpdateBroadcastRequest) -> Broadcast:
        return self._client.patch(f"/broadcasts/{_segment(broadcast_id)}", Broadcast.from_dict, request.to_dict())

    def delete_broadcast(self, broadcast_id: str) -> None:
        self._client.delete(f"/broadcasts/{_segment(broadcast_id)}")

    def send_broadcast(self, broadcast_id: str) -> None:
        self._client.request_void("POST", f"/broadcasts/{_segment(broadcast_id)}/send")

    # =========================================================================
    # Contact Properties
    # =========================================================================

    def create_contact_property(self, request: CreateContactPropertyRequest) -> ContactProperty:
        return self._client.post("/contact-properties", ContactProperty.from_dict, request.to_dict())

    def list_contact_properties(self, pagination: PaginationOptions) -> ListContactPropertiesResponse:
        return self._client.get("/contact-properties", ListContactPropertiesResponse.from_dict, pagination)

    def get_contact_property(self, property_id: str) -> ContactProperty:
        return self._client.get(f"/contact-properties/{_segment(property_id)}", ContactProperty.from_dict)

    def update_contact_property(self, property_id: str, request: UpdateContactPropertyRequest) -> ContactProperty:
        return self._client.patch(
            f"/contact-properties/{_segment(property_id)}",
            ContactProperty.from_dict,
            request.to_dict(),
        )

    def delete_contact_property(self, property_id: str) -> None:
        self._client.delete(f"/contact-properties/{_segment(property_id)}")

    # =========================================================================
    # Receiving
    # =========================================================================

    def list_received_emails(self, pagination: PaginationOptions) -> ListReceivedEmailsResponse:
        return self._client.get("/emails/receiving", ListReceivedEmailsResponse.from_dict, pagination)

    def get_received_email(self, email_id: str) -> dict[str, Any]:
        """Get a received email as raw JSON (headers and bodies vary by message)."""
        return self._client.get(f"/emails/receiving/{_segment(email_id)}", _json_object)

    def list_received_attachments(self, email_id: str) -> ListAttachmentsResponse:
        return self._client.get(f"/emails/receiving/{_segment(email_id)}/attachments", ListAttachmentsResponse.from_dict)

"""
Resend CLI - Command-line interface for the Resend API.

This layer provides the user-facing CLI commands, calling the SDK layer
for all operations. It handles:
- Argument parsing
- TTY detection for human vs machine output
- Tables and key/value text for human output
- JSON output for piping/automation
"""

import argparse
import dataclasses
import json
import logging
import sys
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from resend_cli.config import Config
from resend_cli.core.client import CLIError, LocalIOError, ValidationError
from resend_cli.core.types import (
    CreateApiKeyRequest,
    CreateBroadcastRequest,
    CreateContactPropertyRequest,
    CreateContactRequest,
    CreateDomainRequest,
    CreateTemplateRequest,
    CreateTopicRequest,
    CreateWebhookRequest,
    PaginationOptions,
    SendEmailRequest,
    UpdateBroadcastRequest,
    UpdateContactPropertyRequest,
    UpdateContactRequest,
    UpdateEmailRequest,
    UpdateTemplateRequest,
    UpdateTopicRequest,
)
from resend_cli.sdk import ResendApi, ResendClient

logger = logging.getLogger(__name__)

# =============================================================================
# Output Helpers
# =============================================================================


# Record attributes renamed on the wire
WIRE_NAMES = {"sender": "from", "property_type": "type"}

Column = tuple[str, str, int]  # (header, attribute, width)


def is_tty() -> bool:
    """Check if stdout is a TTY (human) or pipe (machine)."""
    return sys.stdout.isatty()


def json_output(data: Any, pretty: bool = False) -> None:
    """Print JSON output."""
    indent = 2 if pretty or is_tty() else None
    print(json.dumps(data, indent=indent, default=str))


def error_output(error: CLIError) -> None:
    """Print error to stderr and exit."""
    print(json.dumps(error.to_dict(), default=str), file=sys.stderr)
    sys.exit(1)


def success_output(data: Any) -> None:
    """Print success output."""
    json_output(data)


def message_output(message: str, **extra: Any) -> None:
    """Print a confirmation line (TTY) or a JSON acknowledgement (pipe)."""
    if is_tty():
        print(message)
    else:
        success_output({"success": True, "message": message, **extra})


def table_output(
    headers: list[str],
    rows: list[list[str]],
    widths: list[int],
) -> None:
    """Print a formatted table for human output."""
    # Header
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths))
    print(header_line)
    print("-" * len(header_line))

    # Rows
    for row in rows:
        print("  ".join(str(v)[:w].ljust(w) for v, w in zip(row, widths)))


def record_to_dict(record: Any) -> dict[str, Any]:
    """Convert a response record to a dict keyed by wire names."""
    return {WIRE_NAMES.get(k, k): v for k, v in dataclasses.asdict(record).items()}


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


def record_output(record: Any) -> None:
    """Print a single record as key/value lines (TTY) or JSON (pipe)."""
    data = record if isinstance(record, dict) else record_to_dict(record)
    if not is_tty():
        success_output(data)
        return
    width = max((len(k) for k in data), default=0)
    for key, value in data.items():
        if isinstance(value, dict):
            value = json.dumps(value)
        print(f"{key.ljust(width)}  {_cell(value)}")


def list_output(records: Sequence[Any], columns: list[Column]) -> None:
    """Print records as a table (TTY) or a JSON envelope (pipe)."""
    if not is_tty():
        success_output({"data": [record_to_dict(r) for r in records]})
        return
    if not records:
        print("No items found.")
        return
    table_output(
        [c[0] for c in columns],
        [[_cell(getattr(r, c[1])) for c in columns] for r in records],
        [c[2] for c in columns],
    )


# =============================================================================
# Argument Helpers
# =============================================================================


def parse_bool(value: str) -> bool:
    """Parse true/false style flag values."""
    lowered = value.lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def pagination_from_args(args: argparse.Namespace) -> PaginationOptions:
    """Build pagination options from --limit/--after/--before."""
    return PaginationOptions(limit=args.limit, after=args.after, before=args.before)


def read_text_file(path: str) -> str:
    """Read a local file, wrapping failures as LocalIOError."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise LocalIOError(f"Could not read {path}: {e}") from e


def add_pagination_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", "-l", type=int, help="Maximum number of items to return")
    parser.add_argument("--after", help="Cursor for the next page")
    parser.add_argument("--before", help="Cursor for the previous page")


# =============================================================================
# Table Columns
# =============================================================================


EMAIL_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("From", "sender", 30),
    ("To", "to", 30),
    ("Subject", "subject", 30),
    ("Created", "created_at", 26),
    ("Last Event", "last_event", 12),
]
ATTACHMENT_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("Filename", "filename", 30),
    ("Size", "size", 10),
    ("Content Type", "content_type", 24),
]
DOMAIN_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("Name", "name", 30),
    ("Status", "status", 14),
    ("Region", "region", 12),
    ("Created", "created_at", 26),
]
CONTACT_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("Email", "email", 30),
    ("First Name", "first_name", 15),
    ("Last Name", "last_name", 15),
    ("Unsubscribed", "unsubscribed", 12),
]
NAMED_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("Name", "name", 40),
    ("Created", "created_at", 26),
]
WEBHOOK_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("Endpoint", "endpoint", 50),
    ("Created", "created_at", 26),
]
BROADCAST_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("Name", "name", 30),
    ("Status", "status", 10),
    ("Segment", "segment_id", 36),
    ("Created", "created_at", 26),
]
CONTACT_PROPERTY_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("Key", "key", 25),
    ("Type", "property_type", 10),
    ("Fallback", "fallback_value", 20),
]
RECEIVED_EMAIL_COLUMNS: list[Column] = [
    ("ID", "id", 36),
    ("From", "sender", 30),
    ("To", "to", 30),
    ("Subject", "subject", 30),
    ("Created", "created_at", 26),
]


# =============================================================================
# Email Commands
# =============================================================================


def cmd_emails_send(client: ResendApi, args: argparse.Namespace) -> None:
    """Send an email."""
    request = SendEmailRequest(
        sender=args.sender,
        to=args.to,
        subject=args.subject,
        html=args.html,
        text=args.text,
        cc=args.cc,
        bcc=args.bcc,
        reply_to=args.reply_to,
        scheduled_at=args.scheduled_at,
    )
    response = client.send_email(request)
    message_output(f"Email sent successfully! ID: {response.id}", id=response.id)


def cmd_emails_draft(_client: ResendApi, args: argparse.Namespace) -> None:
    """Save an email request to a local draft file instead of sending it."""
    html = read_text_file(args.html_file) if args.html_file else args.html
    text = read_text_file(args.text_file) if args.text_file else args.text
    request = SendEmailRequest(
        sender=args.sender,
        to=args.to,
        subject=args.subject,
        html=html or None,
        text=text or None,
        scheduled_at=args.scheduled_at,
    )

    draft_path = Path(f"draft_{int(time.time())}.json")
    try:
        draft_path.write_text(json.dumps(request.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        raise LocalIOError(f"Could not write draft {draft_path}: {e}") from e
    message_output(f"Email draft saved successfully to: {draft_path}", path=str(draft_path))


def cmd_emails_send_batch(client: ResendApi, args: argparse.Namespace) -> None:
    """Send every email in a JSON array file with one request."""
    content = read_text_file(args.file)
    try:
        items = json.loads(content)
        if not isinstance(items, list):
            raise ValidationError(f"{args.file} must contain a JSON array of emails")
        requests = [SendEmailRequest.from_dict(item) for item in items]
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {args.file}: {e}") from e
    except (KeyError, TypeError) as e:
        raise ValidationError(f"Invalid email entry in {args.file}: {e!r}") from e

    response = client.send_email_batch(requests)
    if is_tty():
        print(f"Batch sent successfully! {len(response.data)} emails processed.")
        for i, item in enumerate(response.data, 1):
            print(f"  Email {i}: ID {item.id}")
    else:
        success_output({"data": [{"id": item.id} for item in response.data]})


def cmd_emails_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get an email by ID."""
    record_output(client.get_email(args.id))


def cmd_emails_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List sent emails."""
    response = client.list_emails(pagination_from_args(args))
    list_output(response.data, EMAIL_COLUMNS)


def cmd_emails_cancel(client: ResendApi, args: argparse.Namespace) -> None:
    """Cancel a scheduled email."""
    client.cancel_email(args.id)
    message_output(f"Email {args.id} canceled successfully!")


def cmd_emails_update(client: ResendApi, args: argparse.Namespace) -> None:
    """Reschedule a scheduled email."""
    response = client.update_email(args.id, UpdateEmailRequest(scheduled_at=args.scheduled_at))
    message_output(f"Email updated successfully! ID: {response.id}", id=response.id)


def cmd_emails_attachments(client: ResendApi, args: argparse.Namespace) -> None:
    """List attachments of a sent email."""
    response = client.list_email_attachments(args.id)
    list_output(response.data, ATTACHMENT_COLUMNS)


# =============================================================================
# API Key Commands
# =============================================================================


def cmd_api_keys_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create an API key and show its one-time token."""
    request = CreateApiKeyRequest(name=args.name, permission=args.permission, domain_id=args.domain_id)
    api_key = client.create_api_key(request)
    if is_tty():
        print("API Key created successfully!")
        print(f"ID: {api_key.id}")
        if api_key.token:
            print(f"Token: {api_key.token}")
            print("WARNING: This token is only shown once!")
    else:
        success_output(record_to_dict(api_key))


def cmd_api_keys_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List API keys."""
    response = client.list_api_keys(pagination_from_args(args))
    list_output(response.data, NAMED_COLUMNS)


def cmd_api_keys_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete an API key."""
    client.delete_api_key(args.id)
    message_output(f"API Key {args.id} deleted successfully!")


# =============================================================================
# Domain Commands
# =============================================================================


def cmd_domains_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create a sending domain."""
    domain = client.create_domain(CreateDomainRequest(name=args.name, region=args.region))
    if is_tty():
        print("Domain created successfully!")
    record_output(domain)


def cmd_domains_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List domains."""
    response = client.list_domains(pagination_from_args(args))
    list_output(response.data, DOMAIN_COLUMNS)


def cmd_domains_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a domain by ID."""
    record_output(client.get_domain(args.id))


def cmd_domains_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete a domain."""
    client.delete_domain(args.id)
    message_output(f"Domain {args.id} deleted successfully!")


def cmd_domains_verify(client: ResendApi, args: argparse.Namespace) -> None:
    """Start verification of a domain."""
    client.verify_domain(args.id)
    message_output(f"Verification process initiated for domain {args.id}!")


# =============================================================================
# Segment Commands
# =============================================================================


def cmd_segments_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create a segment."""
    segment = client.create_segment(args.name)
    if is_tty():
        print("Segment created successfully!")
    record_output(segment)


def cmd_segments_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List segments."""
    response = client.list_segments(pagination_from_args(args))
    list_output(response.data, NAMED_COLUMNS)


def cmd_segments_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a segment by ID."""
    record_output(client.get_segment(args.id))


def cmd_segments_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete a segment."""
    client.delete_segment(args.id)
    message_output(f"Segment {args.id} deleted successfully!")


# =============================================================================
# Contact Commands
# =============================================================================


def cmd_contacts_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create a contact."""
    properties = None
    if args.properties:
        try:
            properties = json.loads(args.properties)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in --properties: {e}") from e
        if not isinstance(properties, dict):
            raise ValidationError("--properties must be a JSON object")
    request = CreateContactRequest(
        email=args.email,
        first_name=args.first_name,
        last_name=args.last_name,
        unsubscribed=args.unsubscribed,
        properties=properties,
    )
    contact = client.create_contact(request)
    if is_tty():
        print("Contact created successfully!")
    record_output(contact)


def cmd_contacts_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List contacts."""
    response = client.list_contacts(pagination_from_args(args))
    list_output(response.data, CONTACT_COLUMNS)


def cmd_contacts_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a contact by ID."""
    record_output(client.get_contact(args.id))


def cmd_contacts_update(client: ResendApi, args: argparse.Namespace) -> None:
    """Update a contact; omitted flags leave fields unchanged."""
    request = UpdateContactRequest(
        first_name=args.first_name,
        last_name=args.last_name,
        unsubscribed=args.unsubscribed,
    )
    contact = client.update_contact(args.id, request)
    if is_tty():
        print("Contact updated successfully!")
    record_output(contact)


def cmd_contacts_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete a contact."""
    client.delete_contact(args.id)
    message_output(f"Contact {args.id} deleted successfully!")


def cmd_contacts_add_to_segment(client: ResendApi, args: argparse.Namespace) -> None:
    """Add a contact to a segment."""
    client.add_contact_to_segment(args.contact_id, args.segment_id)
    message_output(f"Contact {args.contact_id} added to segment {args.segment_id} successfully!")


def cmd_contacts_remove_from_segment(client: ResendApi, args: argparse.Namespace) -> None:
    """Remove a contact from a segment."""
    client.remove_contact_from_segment(args.contact_id, args.segment_id)
    message_output(f"Contact {args.contact_id} removed from segment {args.segment_id} successfully!")


# =============================================================================
# Template Commands
# =============================================================================


def cmd_templates_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create a template."""
    template = client.create_template(CreateTemplateRequest(name=args.name, html=args.html))
    if is_tty():
        print("Template created successfully!")
    record_output(template)


def cmd_templates_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List templates."""
    response = client.list_templates(pagination_from_args(args))
    list_output(response.data, NAMED_COLUMNS)


def cmd_templates_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a template by ID."""
    record_output(client.get_template(args.id))


def cmd_templates_update(client: ResendApi, args: argparse.Namespace) -> None:
    """Update a template."""
    template = client.update_template(args.id, UpdateTemplateRequest(name=args.name, html=args.html))
    if is_tty():
        print("Template updated successfully!")
    record_output(template)


def cmd_templates_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete a template."""
    client.delete_template(args.id)
    message_output(f"Template {args.id} deleted successfully!")


# =============================================================================
# Topic Commands
# =============================================================================


def cmd_topics_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create a topic."""
    request = CreateTopicRequest(name=args.name, default_subscription=args.default_subscription)
    topic = client.create_topic(request)
    if is_tty():
        print("Topic created successfully!")
    record_output(topic)


def cmd_topics_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List topics."""
    response = client.list_topics(pagination_from_args(args))
    list_output(response.data, NAMED_COLUMNS)


def cmd_topics_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a topic by ID."""
    record_output(client.get_topic(args.id))


def cmd_topics_update(client: ResendApi, args: argparse.Namespace) -> None:
    """Rename a topic."""
    topic = client.update_topic(args.id, UpdateTopicRequest(name=args.name))
    if is_tty():
        print("Topic updated successfully!")
    record_output(topic)


def cmd_topics_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete a topic."""
    client.delete_topic(args.id)
    message_output(f"Topic {args.id} deleted successfully!")


# =============================================================================
# Webhook Commands
# =============================================================================


def cmd_webhooks_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create a webhook."""
    webhook = client.create_webhook(CreateWebhookRequest(endpoint=args.endpoint, events=args.events))
    if is_tty():
        print("Webhook created successfully!")
    record_output(webhook)


def cmd_webhooks_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List webhooks."""
    response = client.list_webhooks(pagination_from_args(args))
    list_output(response.data, WEBHOOK_COLUMNS)


def cmd_webhooks_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a webhook by ID."""
    record_output(client.get_webhook(args.id))


def cmd_webhooks_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete a webhook."""
    client.delete_webhook(args.id)
    message_output(f"Webhook {args.id} deleted successfully!")


# =============================================================================
# Broadcast Commands
# =============================================================================


def cmd_broadcasts_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create a broadcast."""
    request = CreateBroadcastRequest(
        name=args.name,
        segment_id=args.segment_id,
        sender=args.sender,
        subject=args.subject,
        html=args.html,
        text=args.text,
        reply_to=args.reply_to,
    )
    broadcast = client.create_broadcast(request)
    if is_tty():
        print("Broadcast created successfully!")
    record_output(broadcast)


def cmd_broadcasts_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List broadcasts."""
    response = client.list_broadcasts(pagination_from_args(args))
    list_output(response.data, BROADCAST_COLUMNS)


def cmd_broadcasts_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a broadcast by ID."""
    record_output(client.get_broadcast(args.id))


def cmd_broadcasts_update(client: ResendApi, args: argparse.Namespace) -> None:
    """Update a draft broadcast."""
    request = UpdateBroadcastRequest(
        name=args.name,
        segment_id=args.segment_id,
        sender=args.sender,
        subject=args.subject,
        html=args.html,
        text=args.text,
        reply_to=args.reply_to,
    )
    broadcast = client.update_broadcast(args.id, request)
    if is_tty():
        print("Broadcast updated successfully!")
    record_output(broadcast)


def cmd_broadcasts_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete a broadcast."""
    client.delete_broadcast(args.id)
    message_output(f"Broadcast {args.id} deleted successfully!")


def cmd_broadcasts_send(client: ResendApi, args: argparse.Namespace) -> None:
    """Send a broadcast."""
    client.send_broadcast(args.id)
    message_output(f"Broadcast {args.id} sent successfully!")


# =============================================================================
# Contact Property Commands
# =============================================================================


def cmd_contact_properties_create(client: ResendApi, args: argparse.Namespace) -> None:
    """Create a contact property."""
    request = CreateContactPropertyRequest(
        key=args.key,
        property_type=args.property_type,
        fallback_value=args.fallback_value,
    )
    prop = client.create_contact_property(request)
    if is_tty():
        print("Contact property created successfully!")
    record_output(prop)


def cmd_contact_properties_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List contact properties."""
    response = client.list_contact_properties(pagination_from_args(args))
    list_output(response.data, CONTACT_PROPERTY_COLUMNS)


def cmd_contact_properties_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a contact property by ID."""
    record_output(client.get_contact_property(args.id))


def cmd_contact_properties_update(client: ResendApi, args: argparse.Namespace) -> None:
    """Change the fallback value of a contact property."""
    prop = client.update_contact_property(args.id, UpdateContactPropertyRequest(fallback_value=args.fallback_value))
    if is_tty():
        print("Contact property updated successfully!")
    record_output(prop)


def cmd_contact_properties_delete(client: ResendApi, args: argparse.Namespace) -> None:
    """Delete a contact property."""
    client.delete_contact_property(args.id)
    message_output(f"Contact property {args.id} deleted successfully!")


# =============================================================================
# Receiving Commands
# =============================================================================


def cmd_receiving_list(client: ResendApi, args: argparse.Namespace) -> None:
    """List received emails."""
    response = client.list_received_emails(pagination_from_args(args))
    list_output(response.data, RECEIVED_EMAIL_COLUMNS)


def cmd_receiving_get(client: ResendApi, args: argparse.Namespace) -> None:
    """Get a received email as JSON."""
    json_output(client.get_received_email(args.id), pretty=True)


def cmd_receiving_attachments(client: ResendApi, args: argparse.Namespace) -> None:
    """List attachments of a received email."""
    response = client.list_received_attachments(args.id)
    list_output(response.data, ATTACHMENT_COLUMNS)


# =============================================================================
# Main CLI
# =============================================================================


def _add_group(
    subparsers: argparse._SubParsersAction,
    name: str,
    help_text: str,
) -> argparse._SubParsersAction:
    group = subparsers.add_parser(name, help=help_text, description=help_text)
    group.set_defaults(func=lambda _c, _a: group.print_help())
    return group.add_subparsers(dest="subcommand")


def _add_id_command(
    actions: argparse._SubParsersAction,
    name: str,
    help_text: str,
    func: Any,
    id_help: str = "Resource ID",
) -> argparse.ArgumentParser:
    parser = actions.add_parser(name, help=help_text)
    parser.add_argument("id", help=id_help)
    parser.set_defaults(func=func)
    return parser


def _add_list_command(actions: argparse._SubParsersAction, help_text: str, func: Any) -> argparse.ArgumentParser:
    parser = actions.add_parser("list", help=help_text)
    add_pagination_args(parser)
    parser.set_defaults(func=func)
    return parser


def create_parser() -> argparse.ArgumentParser:  # noqa: PLR0915
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="resend",
        description="Resend CLI - Manage your emails, domains, and more",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output Modes:
  TTY (human):  Tables and key/value text
  Pipe:         JSON

Examples:
  resend config --api-key re_123
  resend emails send -f me@example.com -t you@example.com -s "Hello" --text "Hi"
  resend domains create --name example.com
  resend contacts list --limit 10 | jq '.data[].email'
""",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log HTTP requests to stderr")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ========== Config ==========
    config = subparsers.add_parser("config", help="Configure the Resend CLI with an API key")
    config.add_argument("--api-key", required=True, help="API key for authenticating with the Resend API")

    # ========== Emails ==========
    emails = _add_group(subparsers, "emails", "Manage emails - send, retrieve, list, cancel, and update emails")

    e_send = emails.add_parser("send", help="Send an email")
    e_send.add_argument("--from", "-f", dest="sender", required=True, help="Sender address")
    e_send.add_argument("--to", "-t", action="append", required=True, help="Recipient (repeatable)")
    e_send.add_argument("--subject", "-s", required=True, help="Subject line")
    e_send.add_argument("--html", help="HTML body")
    e_send.add_argument("--text", help="Plain-text body")
    e_send.add_argument("--cc", action="append", help="CC recipient (repeatable)")
    e_send.add_argument("--bcc", action="append", help="BCC recipient (repeatable)")
    e_send.add_argument("--reply-to", action="append", help="Reply-to address (repeatable)")
    e_send.add_argument("--scheduled-at", help="Schedule time (ISO 8601 or natural language)")
    e_send.set_defaults(func=cmd_emails_send)

    e_draft = emails.add_parser("draft", help="Save an email to a local draft file")
    e_draft.add_argument("--from", "-f", dest="sender", required=True, help="Sender address")
    e_draft.add_argument("--to", "-t", action="append", required=True, help="Recipient (repeatable)")
    e_draft.add_argument("--subject", "-s", required=True, help="Subject line")
    e_draft.add_argument("--html", help="HTML body")
    e_draft.add_argument("--text", help="Plain-text body")
    e_draft.add_argument("--html-file", help="Read the HTML body from a file")
    e_draft.add_argument("--text-file", help="Read the plain-text body from a file")
    e_draft.add_argument("--scheduled-at", help="Schedule time")
    e_draft.set_defaults(func=cmd_emails_draft)

    _add_id_command(emails, "get", "Get email details", cmd_emails_get, "Email ID")
    _add_list_command(emails, "List emails", cmd_emails_list)
    _add_id_command(emails, "cancel", "Cancel a scheduled email", cmd_emails_cancel, "Email ID")
    e_update = _add_id_command(emails, "update", "Reschedule an email", cmd_emails_update, "Email ID")
    e_update.add_argument("--scheduled-at", required=True, help="New schedule time")
    _add_id_command(emails, "attachments", "List attachments of an email", cmd_emails_attachments, "Email ID")

    e_batch = emails.add_parser("send-batch", help="Send emails from a JSON array file")
    e_batch.add_argument("file", help="JSON file with an array of emails")
    e_batch.set_defaults(func=cmd_emails_send_batch)

    # ========== API Keys ==========
    api_keys = _add_group(subparsers, "api-keys", "Manage API keys - create, list, and delete API keys")

    k_create = api_keys.add_parser("create", help="Create an API key")
    k_create.add_argument("--name", "-n", required=True, help="Key name")
    k_create.add_argument("--permission", "-p", help="full_access or sending_access")
    k_create.add_argument("--domain-id", "-d", help="Restrict sending to a domain")
    k_create.set_defaults(func=cmd_api_keys_create)

    _add_list_command(api_keys, "List API keys", cmd_api_keys_list)
    _add_id_command(api_keys, "delete", "Delete an API key", cmd_api_keys_delete, "API key ID")

    # ========== Domains ==========
    domains = _add_group(subparsers, "domains", "Manage domains - create, list, get, delete, and verify domains")

    d_create = domains.add_parser("create", help="Create a domain")
    d_create.add_argument("--name", "-n", required=True, help="Domain name")
    d_create.add_argument("--region", "-r", help="Sending region (server default if omitted)")
    d_create.set_defaults(func=cmd_domains_create)

    _add_list_command(domains, "List domains", cmd_domains_list)
    _add_id_command(domains, "get", "Get domain details", cmd_domains_get, "Domain ID")
    _add_id_command(domains, "delete", "Delete a domain", cmd_domains_delete, "Domain ID")
    _add_id_command(domains, "verify", "Verify a domain", cmd_domains_verify, "Domain ID")

    # ========== Segments ==========
    segments = _add_group(subparsers, "segments", "Manage segments - create, list, get, and delete segments")

    s_create = segments.add_parser("create", help="Create a segment")
    s_create.add_argument("--name", "-n", required=True, help="Segment name")
    s_create.set_defaults(func=cmd_segments_create)

    _add_list_command(segments, "List segments", cmd_segments_list)
    _add_id_command(segments, "get", "Get segment details", cmd_segments_get, "Segment ID")
    _add_id_command(segments, "delete", "Delete a segment", cmd_segments_delete, "Segment ID")

    # ========== Contacts ==========
    contacts = _add_group(
        subparsers, "contacts", "Manage contacts - create, list, get, update, and delete contacts"
    )

    c_create = contacts.add_parser("create", help="Create a contact")
    c_create.add_argument("--email", "-e", required=True, help="Contact email")
    c_create.add_argument("--first-name", help="First name")
    c_create.add_argument("--last-name", help="Last name")
    c_create.add_argument("--unsubscribed", type=parse_bool, help="true or false")
    c_create.add_argument("--properties", help="JSON object of custom properties")
    c_create.set_defaults(func=cmd_contacts_create)

    _add_list_command(contacts, "List contacts", cmd_contacts_list)
    _add_id_command(contacts, "get", "Get contact details", cmd_contacts_get, "Contact ID")

    c_update = _add_id_command(contacts, "update", "Update a contact", cmd_contacts_update, "Contact ID")
    c_update.add_argument("--first-name", help="First name")
    c_update.add_argument("--last-name", help="Last name")
    c_update.add_argument("--unsubscribed", type=parse_bool, help="true or false")

    _add_id_command(contacts, "delete", "Delete a contact", cmd_contacts_delete, "Contact ID")

    for name, help_text, func in (
        ("add-to-segment", "Add a contact to a segment", cmd_contacts_add_to_segment),
        ("remove-from-segment", "Remove a contact from a segment", cmd_contacts_remove_from_segment),
    ):
        membership = contacts.add_parser(name, help=help_text)
        membership.add_argument("contact_id", help="Contact ID")
        membership.add_argument("segment_id", help="Segment ID")
        membership.set_defaults(func=func)

    # ========== Templates ==========
    templates = _add_group(
        subparsers, "templates", "Manage templates - create, list, get, update, and delete email templates"
    )

    t_create = templates.add_parser("create", help="Create a template")
    t_create.add_argument("--name", "-n", required=True, help="Template name")
    t_create.add_argument("--html", required=True, help="Template HTML")
    t_create.set_defaults(func=cmd_templates_create)

    _add_list_command(templates, "List templates", cmd_templates_list)
    _add_id_command(templates, "get", "Get template details", cmd_templates_get, "Template ID")

    t_update = _add_id_command(templates, "update", "Update a template", cmd_templates_update, "Template ID")
    t_update.add_argument("--name", help="Template name")
    t_update.add_argument("--html", help="Template HTML")

    _add_id_command(templates, "delete", "Delete a template", cmd_templates_delete, "Template ID")

    # ========== Topics ==========
    topics = _add_group(subparsers, "topics", "Manage topics - create, list, get, update, and delete topics")

    tp_create = topics.add_parser("create", help="Create a topic")
    tp_create.add_argument("--name", "-n", required=True, help="Topic name")
    tp_create.add_argument(
        "--default-subscription",
        default="opt_in",
        choices=["opt_in", "opt_out"],
        help="Subscription state for new contacts",
    )
    tp_create.set_defaults(func=cmd_topics_create)

    _add_list_command(topics, "List topics", cmd_topics_list)
    _add_id_command(topics, "get", "Get topic details", cmd_topics_get, "Topic ID")

    tp_update = _add_id_command(topics, "update", "Update a topic", cmd_topics_update, "Topic ID")
    tp_update.add_argument("--name", help="Topic name")

    _add_id_command(topics, "delete", "Delete a topic", cmd_topics_delete, "Topic ID")

    # ========== Webhooks ==========
    webhooks = _add_group(subparsers, "webhooks", "Manage webhooks - create, list, get, and delete webhooks")

    w_create = webhooks.add_parser("create", help="Create a webhook")
    w_create.add_argument("--endpoint", "-e", required=True, help="Endpoint URL")
    w_create.add_argument("--event", dest="events", action="append", required=True, help="Event type (repeatable)")
    w_create.set_defaults(func=cmd_webhooks_create)

    _add_list_command(webhooks, "List webhooks", cmd_webhooks_list)
    _add_id_command(webhooks, "get", "Get webhook details", cmd_webhooks_get, "Webhook ID")
    _add_id_command(webhooks, "delete", "Delete a webhook", cmd_webhooks_delete, "Webhook ID")

    # ========== Broadcasts ==========
    broadcasts = _add_group(
        subparsers, "broadcasts", "Manage broadcasts - create, list, get, update, delete, and send broadcasts"
    )

    b_create = broadcasts.add_parser("create", help="Create a broadcast")
    b_create.add_argument("--name", "-n", required=True, help="Broadcast name")
    b_create.add_argument("--segment-id", required=True, help="Target segment")
    b_create.add_argument("--from", "-f", dest="sender", required=True, help="Sender address")
    b_create.add_argument("--subject", "-s", required=True, help="Subject line")
    b_create.add_argument("--html", help="HTML body")
    b_create.add_argument("--text", help="Plain-text body")
    b_create.add_argument("--reply-to", action="append", help="Reply-to address (repeatable)")
    b_create.set_defaults(func=cmd_broadcasts_create)

    _add_list_command(broadcasts, "List broadcasts", cmd_broadcasts_list)
    _add_id_command(broadcasts, "get", "Get broadcast details", cmd_broadcasts_get, "Broadcast ID")

    b_update = _add_id_command(broadcasts, "update", "Update a broadcast", cmd_broadcasts_update, "Broadcast ID")
    b_update.add_argument("--name", "-n", help="Broadcast name")
    b_update.add_argument("--segment-id", help="Target segment")
    b_update.add_argument("--from", "-f", dest="sender", help="Sender address")
    b_update.add_argument("--subject", "-s", help="Subject line")
    b_update.add_argument("--html", help="HTML body")
    b_update.add_argument("--text", help="Plain-text body")
    b_update.add_argument("--reply-to", action="append", help="Reply-to address (repeatable)")

    _add_id_command(broadcasts, "delete", "Delete a broadcast", cmd_broadcasts_delete, "Broadcast ID")
    _add_id_command(broadcasts, "send", "Send a broadcast", cmd_broadcasts_send, "Broadcast ID")

    # ========== Contact Properties ==========
    props = _add_group(
        subparsers,
        "contact-properties",
        "Manage contact properties - create, list, get, update, and delete contact properties",
    )

    p_create = props.add_parser("create", help="Create a contact property")
    p_create.add_argument("--key", "-k", required=True, help="Property key")
    p_create.add_argument("--type", dest="property_type", required=True, help="string or number")
    p_create.add_argument("--fallback-value", help="Value used when a contact has none")
    p_create.set_defaults(func=cmd_contact_properties_create)

    _add_list_command(props, "List contact properties", cmd_contact_properties_list)
    _add_id_command(props, "get", "Get contact property details", cmd_contact_properties_get, "Property ID")

    p_update = _add_id_command(
        props, "update", "Update a contact property", cmd_contact_properties_update, "Property ID"
    )
    p_update.add_argument("--fallback-value", help="Value used when a contact has none")

    _add_id_command(props, "delete", "Delete a contact property", cmd_contact_properties_delete, "Property ID")

    # ========== Receiving ==========
    receiving = _add_group(subparsers, "receiving", "Manage received emails - list and retrieve received emails")

    _add_list_command(receiving, "List received emails", cmd_receiving_list)
    _add_id_command(receiving, "get", "Get a received email", cmd_receiving_get, "Email ID")
    _add_id_command(
        receiving, "attachments", "List attachments of a received email", cmd_receiving_attachments, "Email ID"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None, client: ResendApi | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    configure_logging(args.verbose)

    try:
        if args.command == "config":
            path = Config(api_key=args.api_key).save()
            message_output(f"Configuration saved successfully to {path}")
            return

        # A bare group prints its help and needs no credentials
        if client is None and args.subcommand is not None:
            client = ResendClient(Config.load().api_key)

        # Run command (all groups have default funcs that print help)
        args.func(client, args)
    except CLIError as e:
        logger.debug("command failed", exc_info=True)
        error_output(e)


if __name__ == "__main__":
    main()

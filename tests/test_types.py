"""Schema tests - request serialization and record decoding."""

import pytest

from resend_cli.core.types import (
    ApiKey,
    Attachment,
    BatchSendResponse,
    Contact,
    ContactProperty,
    CreateBroadcastRequest,
    CreateContactPropertyRequest,
    CreateContactRequest,
    CreateDomainRequest,
    CreateTopicRequest,
    Email,
    ListContactsResponse,
    PaginationOptions,
    SendEmailRequest,
    UpdateBroadcastRequest,
    UpdateContactRequest,
    Webhook,
)

# =============================================================================
# Requests
# =============================================================================


def test_optional_fields_are_omitted_not_null() -> None:
    payload = SendEmailRequest(sender="me@example.com", to=["you@example.com"], subject="Hi").to_dict()

    assert payload == {"from": "me@example.com", "to": ["you@example.com"], "subject": "Hi"}
    assert None not in payload.values()


def test_domain_region_only_when_given() -> None:
    assert CreateDomainRequest(name="example.com").to_dict() == {"name": "example.com"}
    assert CreateDomainRequest(name="example.com", region="eu-west-1").to_dict() == {
        "name": "example.com",
        "region": "eu-west-1",
    }


def test_false_is_sent_not_omitted() -> None:
    assert UpdateContactRequest(unsubscribed=False).to_dict() == {"unsubscribed": False}


def test_empty_update_sends_empty_object() -> None:
    assert UpdateBroadcastRequest().to_dict() == {}
    assert UpdateContactRequest().to_dict() == {}


def test_contact_properties_pass_through() -> None:
    payload = CreateContactRequest(email="c@example.com", properties={"plan": "pro"}).to_dict()

    assert payload == {"email": "c@example.com", "properties": {"plan": "pro"}}


def test_topic_defaults_to_opt_in() -> None:
    assert CreateTopicRequest(name="News").to_dict() == {"name": "News", "default_subscription": "opt_in"}


def test_broadcast_sender_serialized_as_from() -> None:
    payload = CreateBroadcastRequest(name="L", segment_id="seg_1", sender="me@example.com", subject="S").to_dict()

    assert payload["from"] == "me@example.com"
    assert "sender" not in payload


def test_contact_property_type_key() -> None:
    payload = CreateContactPropertyRequest(key="plan", property_type="string").to_dict()

    assert payload == {"key": "plan", "type": "string"}


def test_batch_entry_accepts_single_recipient() -> None:
    request = SendEmailRequest.from_dict({"from": "me@example.com", "to": "you@example.com", "subject": "Hi"})

    assert request.to == ["you@example.com"]
    assert request.to_dict()["to"] == ["you@example.com"]


def test_batch_entry_requires_subject() -> None:
    with pytest.raises(KeyError):
        SendEmailRequest.from_dict({"from": "me@example.com", "to": ["you@example.com"]})


# =============================================================================
# Pagination
# =============================================================================


@pytest.mark.parametrize(
    ("options", "expected"),
    [
        (PaginationOptions(), {}),
        (PaginationOptions(limit=10), {"limit": 10}),
        (PaginationOptions(after="cur_a"), {"after": "cur_a"}),
        (PaginationOptions(limit=5, before="cur_b"), {"limit": 5, "before": "cur_b"}),
        (PaginationOptions(limit=1, after="a", before="b"), {"limit": 1, "after": "a", "before": "b"}),
    ],
)
def test_pagination_params_match_set_fields(options: PaginationOptions, expected: dict) -> None:
    assert options.to_params() == expected


# =============================================================================
# Records
# =============================================================================


def test_email_record_reads_from_field() -> None:
    email = Email.from_dict(
        {
            "id": "em_1",
            "from": "me@example.com",
            "to": ["you@example.com"],
            "subject": "Hi",
            "created_at": "2024-01-01",
            "last_event": "delivered",
            "html": "<p>Hi</p>",
        }
    )

    assert email.sender == "me@example.com"
    assert email.html == "<p>Hi</p>"
    assert email.cc is None


def test_missing_required_field_raises() -> None:
    with pytest.raises(KeyError):
        Contact.from_dict({"id": "con_1", "email": "c@example.com", "created_at": "2024-01-01"})


def test_optional_record_fields_default_to_none() -> None:
    key = ApiKey.from_dict({"id": "key_1", "name": "ci", "created_at": "2024-01-01"})
    webhook = Webhook.from_dict({"id": "wh_1"})

    assert key.token is None
    assert webhook.endpoint is None
    assert webhook.signing_secret is None


def test_contact_property_reads_type() -> None:
    prop = ContactProperty.from_dict(
        {"id": "cp_1", "key": "plan", "type": "number", "created_at": "2024-01-01", "fallback_value": 0}
    )

    assert prop.property_type == "number"
    assert prop.fallback_value == 0


def test_list_envelope_preserves_order() -> None:
    contacts = ListContactsResponse.from_dict(
        {
            "data": [
                {"id": "c2", "email": "b@example.com", "created_at": "t", "unsubscribed": True},
                {"id": "c1", "email": "a@example.com", "created_at": "t", "unsubscribed": False},
            ]
        }
    )

    assert [c.id for c in contacts.data] == ["c2", "c1"]
    assert contacts.data[0].unsubscribed is True


def test_batch_response_shapes() -> None:
    wrapped = BatchSendResponse.from_dict({"data": [{"id": "a"}, {"id": "b"}]})
    bare = BatchSendResponse.from_dict([{"id": "a"}, {"id": "b"}])

    assert wrapped == bare
    assert [r.id for r in bare.data] == ["a", "b"]


@pytest.mark.parametrize("unsubscribed", ["false", "true", 1, None])
def test_contact_unsubscribed_must_be_boolean(unsubscribed: object) -> None:
    with pytest.raises(TypeError):
        Contact.from_dict({"id": "c", "email": "e", "created_at": "t", "unsubscribed": unsubscribed})


@pytest.mark.parametrize("size", [1.9, "10", False])
def test_attachment_size_must_be_integer(size: object) -> None:
    with pytest.raises(TypeError):
        Attachment.from_dict({"id": "a", "filename": "f", "size": size, "content_type": "text/plain"})

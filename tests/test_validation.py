from __future__ import annotations

import pytest

from skills.resend.validation import (
  INVALID_ARGS_MESSAGE,
  ValidationError,
  is_attachment,
  is_email_args,
  parse_send_email_args,
)

VALID = {"to": "a@x.com", "subject": "Hi", "content": "Hello"}


def test_minimal_args_accepted() -> None:
  assert is_email_args(VALID)
  parsed = parse_send_email_args(VALID)
  assert parsed.to == "a@x.com"
  assert parsed.subject == "Hi"
  assert parsed.content == "Hello"
  assert parsed.from_ is None
  assert parsed.reply_to is None
  assert parsed.attachments is None


@pytest.mark.parametrize("missing", ["to", "subject", "content"])
def test_missing_required_field_rejected(missing: str) -> None:
  args = {k: v for k, v in VALID.items() if k != missing}
  assert not is_email_args(args)


@pytest.mark.parametrize("field", ["to", "subject", "content"])
def test_non_string_required_field_rejected(field: str) -> None:
  assert not is_email_args({**VALID, field: 42})
  assert not is_email_args({**VALID, field: None})


@pytest.mark.parametrize("value", [None, "to=a@x.com", ["a@x.com"], 7])
def test_non_object_rejected(value: object) -> None:
  assert not is_email_args(value)


def test_parse_raises_uniform_message() -> None:
  with pytest.raises(ValidationError) as exc:
    parse_send_email_args({"to": "a@x.com"})
  assert str(exc.value) == INVALID_ARGS_MESSAGE


def test_empty_strings_are_still_strings() -> None:
  assert is_email_args({"to": "a@x.com", "subject": "", "content": ""})


def test_optional_fields_are_read() -> None:
  parsed = parse_send_email_args(
    {
      **VALID,
      "from": "me@x.com",
      "replyTo": ["r1@x.com", "r2@x.com"],
      "scheduledAt": "tomorrow at 10am",
    }
  )
  assert parsed.from_ == "me@x.com"
  assert parsed.reply_to == ["r1@x.com", "r2@x.com"]
  assert parsed.scheduled_at == "tomorrow at 10am"


def test_wrong_typed_optional_fields_are_ignored() -> None:
  parsed = parse_send_email_args({**VALID, "from": 5, "replyTo": "r@x.com", "scheduledAt": 3})
  assert parsed.from_ is None
  assert parsed.reply_to is None
  assert parsed.scheduled_at is None


class TestAttachmentPredicate:
  def test_local_only_accepted(self) -> None:
    assert is_attachment({"filename": "a", "localPath": "/x"})

  def test_remote_only_accepted(self) -> None:
    assert is_attachment({"filename": "a", "remoteUrl": "http://y"})

  def test_neither_rejected(self) -> None:
    assert not is_attachment({"filename": "a"})

  def test_both_rejected(self) -> None:
    assert not is_attachment({"filename": "a", "localPath": "/x", "remoteUrl": "http://y"})

  def test_missing_filename_rejected(self) -> None:
    assert not is_attachment({"localPath": "/x"})

  def test_non_string_source_does_not_count(self) -> None:
    assert not is_attachment({"filename": "a", "localPath": 1})
    assert is_attachment({"filename": "a", "localPath": None, "remoteUrl": "http://y"})

  def test_non_object_rejected(self) -> None:
    assert not is_attachment(None)
    assert not is_attachment("a")


def test_attachments_must_be_a_list() -> None:
  assert not is_email_args({**VALID, "attachments": {"filename": "a", "localPath": "/x"}})


def test_one_bad_attachment_rejects_the_call() -> None:
  args = {
    **VALID,
    "attachments": [
      {"filename": "a", "localPath": "/x"},
      {"filename": "b"},
    ],
  }
  assert not is_email_args(args)
  with pytest.raises(ValidationError):
    parse_send_email_args(args)


def test_attachments_parsed_in_order() -> None:
  parsed = parse_send_email_args(
    {
      **VALID,
      "attachments": [
        {"filename": "one.txt", "localPath": "/tmp/one.txt"},
        {"filename": "two.pdf", "remoteUrl": "https://cdn.x.com/two.pdf"},
      ],
    }
  )
  assert parsed.attachments is not None
  assert [a.filename for a in parsed.attachments] == ["one.txt", "two.pdf"]
  assert parsed.attachments[0].local_path == "/tmp/one.txt"
  assert parsed.attachments[0].remote_url is None
  assert parsed.attachments[1].remote_url == "https://cdn.x.com/two.pdf"


def test_empty_attachment_list_accepted() -> None:
  assert parse_send_email_args({**VALID, "attachments": []}).attachments == []

"""Tests for commit message validation."""
import pytest

from aicommit.commit_message import CommitMessageValidator
from aicommit.commit_message.validation import (
    EmptyMessageHandler,
    PreambleHandler,
    SingleLineHandler,
    TypeTagHandler,
    create_validation_chain,
)


def test_empty_message_handler():
    handler = EmptyMessageHandler()

    is_valid, msg = handler.validate("")
    assert not is_valid
    assert "Empty commit message" in msg

    is_valid, msg = handler.validate("   \n  ")
    assert not is_valid

    is_valid, msg = handler.validate("[Add] feature")
    assert is_valid


def test_single_line_handler():
    handler = SingleLineHandler()

    is_valid, msg = handler.validate("[Fix] one\n\nsecond paragraph")
    assert not is_valid
    assert "single line" in msg

    # Surrounding whitespace does not count as extra lines
    is_valid, _ = handler.validate("\n[Fix] one\n")
    assert is_valid


@pytest.mark.parametrize("message", [
    "Here is the commit message: [Add] x",
    "here's your message",
    "Sure! [Fix] y",
    "Certainly, [Chore] z",
])
def test_preamble_handler_rejects(message):
    is_valid, msg = PreambleHandler().validate(message)
    assert not is_valid
    assert "preamble" in msg


def test_preamble_handler_accepts_tagged_message():
    is_valid, _ = PreambleHandler().validate("[Update] (here.py) rename helper")
    assert is_valid


@pytest.mark.parametrize("message", [
    "[Add] new endpoint",
    "[Fix] (api.py) handle null payload",
    "[Update] (controllers/products.go, controllers/users.go) drop redundant calls",
    "[Remove] dead code",
    "[Chore] bump dependencies",
])
def test_type_tag_handler_accepts(message):
    is_valid, _ = TypeTagHandler().validate(message)
    assert is_valid


@pytest.mark.parametrize("message", [
    "feat: conventional style",
    "[Feature] unknown tag",
    "[Add]missing space",
    "[Add] ",
    "Add: no brackets",
])
def test_type_tag_handler_rejects(message):
    is_valid, msg = TypeTagHandler().validate(message)
    assert not is_valid
    assert "[Add]" in msg


def test_type_tag_handler_custom_types():
    handler = TypeTagHandler(types=["Docs"])
    assert handler.validate("[Docs] explain setup")[0]
    assert not handler.validate("[Add] explain setup")[0]


def test_validation_chain_stops_at_first_failure():
    chain = create_validation_chain()

    is_valid, msg = chain.handle("")
    assert not is_valid
    assert msg == "Empty commit message"

    is_valid, msg = chain.handle("Here is the commit message:\n[Add] x")
    assert not is_valid
    assert "single line" in msg


def test_validator_accepts_expected_format():
    validator = CommitMessageValidator()
    assert validator.validate("[Fix] (cli.py) exit non-zero on errors") == (True, "")


def test_validator_reports_reason():
    is_valid, msg = CommitMessageValidator().validate("fix: something")
    assert not is_valid
    assert msg

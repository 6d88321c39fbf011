"""
Direct tests of the validation helpers, without going through HTTP.
"""
import pytest

from backend.app.models.user import Role
from backend.app.utils.error_handlers import ValidationError
from backend.app.utils.skills import decode_skills, encode_skills
from backend.app.utils.validation import (
    validate_email,
    validate_id,
    validate_message,
    validate_password,
    validate_role,
    validate_skills,
    validate_string_field,
)


def test_valid_email_is_case_folded():
    assert validate_email("test@example.com") == "test@example.com"
    assert validate_email("  TEST@EXAMPLE.COM  ") == "test@example.com"


@pytest.mark.parametrize("email", ["", None, "invalid", "a@b", "@example.com", "x" * 250 + "@example.com"])
def test_invalid_email(email):
    with pytest.raises(ValidationError) as excinfo:
        validate_email(email)
    assert excinfo.value.status_code == 400


def test_password_rules():
    validate_password("123456")  # Minimum
    with pytest.raises(ValidationError):
        validate_password("12345")
    with pytest.raises(ValidationError):
        validate_password("")
    with pytest.raises(ValidationError):
        validate_password("é" * 37)  # 74 bytes


def test_string_field_strips_and_checks_bounds():
    assert validate_string_field("  hi  ", "field") == "hi"
    assert validate_string_field(None, "field", required=False) is None
    with pytest.raises(ValidationError, match="field is required"):
        validate_string_field(None, "field")
    with pytest.raises(ValidationError, match="at least 3"):
        validate_string_field("ab", "field", min_length=3)
    with pytest.raises(ValidationError, match="must not exceed 5"):
        validate_string_field("abcdef", "field", max_length=5)
    with pytest.raises(ValidationError, match="must be a string"):
        validate_string_field(12, "field")


def test_role_signup_only_allows_employer_and_seeker():
    assert validate_role("employer") is Role.EMPLOYER
    assert validate_role(" SEEKER ") is Role.SEEKER
    with pytest.raises(ValidationError):
        validate_role("ADMIN")
    with pytest.raises(ValidationError):
        validate_role("recruiter")
    assert validate_role("ADMIN", allowed=tuple(Role)) is Role.ADMIN


def test_skills_are_cleaned_but_keep_order_and_duplicates():
    assert validate_skills(None) == []
    assert validate_skills([" Go", "SQL ", "", "Go"]) == ["Go", "SQL", "Go"]
    with pytest.raises(ValidationError):
        validate_skills("Go")
    with pytest.raises(ValidationError):
        validate_skills(["Go", 3])


def test_id_must_be_a_uuid():
    raw = "6F1C2A4E-4A43-4BB5-9A55-2A8F8C1B0D11"
    assert validate_id(raw, "jobId") == raw.lower()
    with pytest.raises(ValidationError, match="jobId must be a valid id"):
        validate_id("123", "jobId")
    with pytest.raises(ValidationError, match="jobId is required"):
        validate_id(None, "jobId")


def test_message_length_limits():
    assert validate_message(" hello ") == "hello"
    assert len(validate_message("x" * 1000)) == 1000
    with pytest.raises(ValidationError):
        validate_message("x" * 1001)
    with pytest.raises(ValidationError):
        validate_message("")


def test_skill_storage_tolerates_bad_payloads():
    assert decode_skills(encode_skills(["Go", "SQL"])) == ["Go", "SQL"]
    assert decode_skills(None) == []
    assert decode_skills("not json") == []
    assert decode_skills('{"a": 1}') == []
    assert decode_skills('["Go", 1, null, "SQL"]') == ["Go", "SQL"]


def test_optional_string_field_blank_means_unset():
    assert validate_string_field("", "experience", required=False) is None
    assert validate_string_field("   ", "experience", required=False) is None
    with pytest.raises(ValidationError, match="experience cannot be empty"):
        validate_string_field("   ", "experience")

from pghub.dtos.request.post_request import AttachmentRequest, CreatePostRequest
from pghub.dtos.request.user_request import CreateUserRequest
from pghub.validators.post_validator import validate_post_request
from pghub.validators.user_validator import validate_user_request


def _messages(violations, field=None):
    return [v.message for v in violations if field is None or v.field == field]


def _user(**overrides):
    values = {"email": "jane@example.com", "first_name": "Jane", "last_name": "Doe"}
    values.update(overrides)
    return CreateUserRequest(**values)


def test_valid_user_has_no_violations():
    assert validate_user_request(_user()) == []


def test_empty_email_is_required():
    messages = _messages(validate_user_request(_user(email="")), "email")

    assert "Email is required." in messages
    assert "Email must be at least 5 characters long." in messages


def test_email_without_domain_suffix_fails_domain_rule():
    messages = _messages(validate_user_request(_user(email="jane@example")), "email")

    assert "Email must have a valid domain (e.g., .com, .ro, etc.)." in messages
    assert "Email is required." not in messages


def test_email_with_illegal_characters_fails_format_rule():
    messages = _messages(validate_user_request(_user(email="ja ne@example.com")), "email")

    assert "Invalid email format." in messages
    assert messages.count("Invalid email format.") == 1


def test_email_length_upper_bound():
    long_email = "a" * 95 + "@x.com"

    messages = _messages(validate_user_request(_user(email=long_email)), "email")

    assert messages == ["Email must be less than 100 characters long."]


def test_all_violated_fields_are_reported():
    violations = validate_user_request(_user(email="", first_name="", last_name="Al"))

    fields = {v.field for v in violations}
    assert fields == {"email", "first_name", "last_name"}
    assert "First name is required." in _messages(violations, "first_name")
    assert _messages(violations, "last_name") == ["Last name must be at least 3 characters long."]


def test_post_rules_cover_attachments():
    request = CreatePostRequest(
        title="",
        content="Body",
        attachments=[AttachmentRequest(file_name="ok.jpg"), AttachmentRequest(file_name="")],
    )

    violations = validate_post_request(request)

    assert [v.to_dict() for v in violations] == [
        {"field": "title", "message": "Title is required."},
        {"field": "attachments[1].file_name", "message": "Attachment file name is required."},
    ]


def test_max_length_bounds_are_inclusive():
    at_limit_email = "a" * 94 + "@x.com"
    assert len(at_limit_email) == 100

    assert validate_user_request(_user(email=at_limit_email, first_name="a" * 100, last_name="b" * 100)) == []

    messages = _messages(validate_user_request(_user(first_name="a" * 101, last_name="b" * 101)))
    assert messages == [
        "First name must be less than 100 characters long.",
        "Last name must be less than 100 characters long.",
    ]


def test_post_max_length_bounds_are_inclusive():
    at_limit = CreatePostRequest(
        title="t" * 200,
        content="c" * 10000,
        attachments=[AttachmentRequest(file_name="f" * 255)],
    )
    over_limit = CreatePostRequest(
        title="t" * 201,
        content="c" * 10001,
        attachments=[AttachmentRequest(file_name="f" * 256)],
    )

    assert validate_post_request(at_limit) == []
    assert {v.field for v in validate_post_request(over_limit)} == {
        "title", "content", "attachments[0].file_name",
    }

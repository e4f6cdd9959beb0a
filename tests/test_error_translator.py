import pytest

from repos_client.domain.exceptions import (
    BadRequestError,
    ClientArgumentError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from repos_client.services.error_translator import error_message, translate


@pytest.mark.parametrize("status", [200, 201, 202, 204, 299])
def test_success_statuses_translate_to_none(status: int) -> None:
    assert translate(status, {"message": "ok"}) is None


@pytest.mark.parametrize(
    "status,expected,kind",
    [
        (404, NotFoundError, ErrorKind.NOT_FOUND),
        (401, UnauthorizedError, ErrorKind.UNAUTHORIZED),
        (403, ForbiddenError, ErrorKind.FORBIDDEN),
        (422, UnprocessableEntityError, ErrorKind.UNPROCESSABLE_ENTITY),
        (400, BadRequestError, ErrorKind.CLIENT_ARGUMENT),
        (409, BadRequestError, ErrorKind.CLIENT_ARGUMENT),
        (500, ServiceError, ErrorKind.SERVICE),
        (503, ServiceError, ErrorKind.SERVICE),
        (302, ServiceError, ErrorKind.SERVICE),
        (102, ServiceError, ErrorKind.SERVICE),
        (600, ServiceError, ErrorKind.SERVICE),
    ],
)
def test_status_mapping(status: int, expected: type, kind: ErrorKind) -> None:
    error = translate(status, None)

    assert type(error) is expected
    assert error.kind is kind
    assert error.status == status


def test_generic_4xx_is_a_client_argument_error() -> None:
    assert isinstance(translate(418, None), ClientArgumentError)


def test_translation_is_deterministic() -> None:
    first, second = translate(404, ""), translate(404, "")

    assert type(first) is type(second)
    assert str(first) == str(second)


def test_message_prefers_server_message() -> None:
    error = translate(404, {"message": "Not Found", "documentation_url": "https://docs"})

    assert error.message == "Not Found"
    assert str(error) == "[404] Not Found"


def test_message_falls_back_to_reason_phrase() -> None:
    assert translate(403, None).message == "Forbidden"
    assert error_message(599, None) == "Unknown Status"


def test_validation_details_are_included() -> None:
    body = {
        "message": "Validation Failed",
        "errors": [
            {"resource": "Repository", "field": "name", "code": "missing_field"},
            {"message": "name already exists on this account"},
        ],
    }

    error = translate(422, body)

    assert error.message == (
        "Validation Failed (Repository name missing_field; "
        "name already exists on this account)"
    )
    assert error.body is body


def test_plain_text_body_becomes_message() -> None:
    assert translate(500, "  upstream exploded \n").message == "upstream exploded"

import logging

import pytest
from fastapi import HTTPException

from pghub.exceptions import DatabaseError, DuplicateEmailError, PostNotFoundError, ValidationError
from pghub.utils.error_handlers import handle_api_errors, to_http_exception
from pghub.utils.logging_utils import clear_logging_context, log_operation, set_logging_context


@pytest.mark.parametrize("error, status", [
    (PostNotFoundError("p1"), 404),
    (ValidationError("bad", [{"field": "title", "message": "Title is required."}]), 400),
    (DuplicateEmailError("a@b.com"), 409),
    (DatabaseError("creating the post", "boom"), 500),
    (RuntimeError("boom"), 500),
])
def test_to_http_exception_status(error, status):
    assert to_http_exception("Operation", error).status_code == status


def test_failure_detail_hides_internal_messages():
    exc = to_http_exception("Post deletion", DatabaseError("deleting the post", "disk I/O error"), "Generic message")

    assert exc.detail == "Generic message"


def test_decorator_passes_http_exceptions_through():
    @handle_api_errors("Lookup")
    def lookup():
        raise HTTPException(status_code=418, detail="teapot")

    with pytest.raises(HTTPException) as exc_info:
        lookup()

    assert exc_info.value.status_code == 418


def test_log_operation_includes_request_context(caplog):
    @log_operation("fetch_post")
    def fetch(post_id):
        return post_id

    caplog.set_level(logging.INFO)
    set_logging_context(request_id="req-1")
    try:
        assert fetch(post_id="p1") == "p1"
    finally:
        clear_logging_context()

    assert "Completed fetch_post [request_id=req-1 operation=fetch_post post_id=p1]" in caplog.text


def test_configure_logging_installs_handlers_once(tmp_path, monkeypatch):
    from pghub import main

    monkeypatch.setattr(main, "LOG_DIR", tmp_path)
    root_logger = logging.getLogger()
    before = list(root_logger.handlers)
    try:
        main.configure_logging()
        main.configure_logging()

        added = [h for h in root_logger.handlers if h not in before]
        assert len(added) == 2
    finally:
        for handler in root_logger.handlers[:]:
            if handler not in before:
                root_logger.removeHandler(handler)
                handler.close()

"""Blog Rules — required fields, likes default, partial updates."""

import pytest

from app.core.enforce_blog import validate_blog_update, validate_new_blog
from app.core.errors import ValidationError


def test_missing_likes_defaults_to_zero():
    fields = validate_new_blog({"title": "T", "url": "http://x"})
    assert fields["likes"] == 0
    assert fields["author"] is None


def test_given_likes_are_kept():
    assert validate_new_blog({"title": "T", "url": "http://x", "likes": 4})["likes"] == 4


def test_missing_title_fails_with_field_message():
    with pytest.raises(ValidationError) as exc:
        validate_new_blog({"url": "http://x", "likes": 3})
    assert exc.value.message == "title is required"
    assert exc.value.field == "title"
    assert exc.value.http_status == 400


def test_missing_url_fails_with_field_message():
    with pytest.raises(ValidationError, match="url is required"):
        validate_new_blog({"title": "T"})


def test_blank_title_counts_as_missing():
    with pytest.raises(ValidationError, match="title is required"):
        validate_new_blog({"title": "   ", "url": "http://x"})


@pytest.mark.parametrize("likes", [-1, True, "7"])
def test_invalid_likes_rejected(likes):
    with pytest.raises(ValidationError, match="likes must be a non-negative integer"):
        validate_new_blog({"title": "T", "url": "http://x", "likes": likes})


def test_input_mapping_not_mutated():
    fields = {"title": " T ", "url": "http://x"}
    validate_new_blog(fields)
    assert fields == {"title": " T ", "url": "http://x"}


def test_update_keeps_only_sent_known_fields():
    changes = validate_blog_update({"likes": 100, "id": "abc", "creator": {"id": "u"}})
    assert changes == {"likes": 100}


def test_update_rejects_blank_title():
    with pytest.raises(ValidationError, match="title is required"):
        validate_blog_update({"title": ""})


def test_update_with_nothing_known_fails():
    with pytest.raises(ValidationError, match="no updatable fields provided"):
        validate_blog_update({"id": "abc"})

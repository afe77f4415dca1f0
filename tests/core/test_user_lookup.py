"""User lookup tests — pure tests for lookup_user.

Tests cover:
    - Known ids 1..3 return a success envelope whose data.id matches
    - Unknown ids raise UserNotFoundError echoing the input verbatim
    - No numeric coercion ("01", " 1" are misses)
"""

from datetime import datetime, timezone

import pytest

from vibe_ssr.core.errors import ResourceNotFoundError, UserNotFoundError
from vibe_ssr.core.user_lookup import lookup_user

NOW = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("user_id", ["1", "2", "3"])
def test_known_ids_return_matching_record(user_id):
    result = lookup_user(user_id, NOW)
    assert result["success"] is True
    assert result["data"]["id"] == int(user_id)
    assert result["timestamp"] == "2024-01-15T10:30:00.000Z"
    assert "message" not in result


def test_record_carries_all_public_fields():
    data = lookup_user("3", NOW)["data"]
    assert data == {
        "id": 3,
        "name": "Carol Williams",
        "email": "carol@example.com",
        "role": "Designer",
        "status": "inactive",
    }


@pytest.mark.parametrize("user_id", ["99", "0", "abc", "01", " 1", ""])
def test_unknown_ids_raise_with_verbatim_id(user_id):
    with pytest.raises(UserNotFoundError) as exc_info:
        lookup_user(user_id, NOW)
    assert exc_info.value.to_response() == {"error": "User not found", "id": user_id}
    assert exc_info.value.http_status == 404


def test_user_not_found_is_a_resource_not_found():
    with pytest.raises(ResourceNotFoundError):
        lookup_user("42", NOW)


def test_empty_table_misses_every_id():
    with pytest.raises(UserNotFoundError):
        lookup_user("1", NOW, users={})

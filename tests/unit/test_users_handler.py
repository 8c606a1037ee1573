import json
from unittest.mock import MagicMock, patch

from core.models import UserSummary
from handlers.users import handler


def test_users_handler_lists_display_names(api_event):
    client = MagicMock()
    client.list_users.return_value = [
        UserSummary(id=1, email="ann@example.com", first_name="Ann", last_name="Lee"),
        UserSummary(id=2, email="bo@example.com"),
    ]
    with patch("handlers.users.PostgresClient") as mock_cls, patch("handlers.users.get_config"):
        mock_cls.return_value.__enter__.return_value = client
        result = handler(api_event("GET"), None)

    assert result["statusCode"] == 200
    users = json.loads(result["body"])
    assert [user["displayName"] for user in users] == ["Ann Lee", None]
    assert users[0]["firstName"] == "Ann"


def test_users_handler_requires_caller(api_event):
    with patch("handlers.users.PostgresClient") as mock_cls:
        result = handler(api_event("GET", user_id=None), None)

    assert result["statusCode"] == 401
    mock_cls.assert_not_called()

from typing import Any

from core.responses import json_response


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Liveness ping. Does not touch the database."""
    return json_response(200, {"ok": True, "message": "SmartTrip backend running"})

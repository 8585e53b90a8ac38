from typing import Any, Dict, Optional

SOURCE_LIVE = "live"
SOURCE_EXAMPLE = "example"


def _drop_none(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}


def success_envelope(source: str, **payload: Any) -> Dict[str, Any]:
    """Wrap a payload (``data=...`` or ``translation=...``) into a success envelope."""
    if not payload:
        raise ValueError("success envelope needs a payload field")
    return {"success": True, **payload, "source": source}


def error_envelope(error: str, details: Optional[str] = None) -> Dict[str, Any]:
    return _drop_none({"success": False, "error": error, "details": details})

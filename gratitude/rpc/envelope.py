# gratitude/rpc/envelope.py
"""
JSON envelope used when RPC results travel over HTTP.

    {"ok": true, "result": {...}}
    {"ok": false, "code": "INVALID_ARGUMENT", "message": "text is required"}
"""
from typing import Any, Dict

from gratitude.rpc.status import Err, Ok, RpcResult, StatusCode, internal


def encode_result(result: RpcResult) -> Dict[str, Any]:
    if result.ok:
        return {"ok": True, "result": result.value}
    return {"ok": False, "code": result.code.value, "message": result.message}


def decode_envelope(body: Any) -> RpcResult:
    if not isinstance(body, dict) or "ok" not in body:
        return internal("malformed response")

    if body["ok"]:
        return Ok(body.get("result") or {})

    try:
        code = StatusCode(body.get("code"))
    except ValueError:
        code = StatusCode.INTERNAL
    return Err(code, str(body.get("message") or "internal error"))

# gratitude/rpc/registry.py
import logging
from typing import Any, Dict, Iterable, Tuple, Type

from pydantic import BaseModel, ValidationError

from gratitude.rpc.status import Err, RpcResult, StatusCode, internal, invalid_argument

logger = logging.getLogger(__name__)

# RPC method name -> (request model, handler attribute)
MethodTable = Dict[str, Tuple[Type[BaseModel], str]]


class ServiceRegistry:
    """
    Name -> servicer table that channels and the RPC host dispatch into.

    A servicer is any object with a ``service_name`` and an ``rpc_methods``
    table. Handlers take a validated request model and return an
    ``Ok(model) | Err`` result; values are dumped to JSON-ready dicts here
    so both channels see the same payloads.
    """

    def __init__(self, servicers: Iterable[Any] = ()):
        self._services: Dict[str, Any] = {}
        for servicer in servicers:
            self.register(servicer)

    def register(self, servicer: Any) -> None:
        self._services[servicer.service_name] = servicer
        logger.debug("Registered RPC service %s", servicer.service_name)

    def __contains__(self, service: str) -> bool:
        return service in self._services

    @property
    def services(self) -> Tuple[str, ...]:
        return tuple(self._services)

    def dispatch(self, service: str, method: str, payload: Any) -> RpcResult:
        servicer = self._services.get(service)
        methods: MethodTable = getattr(servicer, "rpc_methods", {})
        if servicer is None or method not in methods:
            return Err(StatusCode.UNIMPLEMENTED, f"unknown method {service}/{method}")

        request_type, handler_name = methods[method]
        try:
            request = request_type.model_validate(payload if payload is not None else {})
        except ValidationError as e:
            return invalid_argument(_describe(e))

        try:
            result = getattr(servicer, handler_name)(request)
        except Exception:
            logger.exception("Unhandled error in %s/%s", service, method)
            return internal()

        return result.map(lambda value: value.model_dump(mode="json"))


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "request"
    return f"invalid request: {field} {first.get('msg', 'is invalid')}".strip()

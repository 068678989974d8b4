from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from localized_response.errors import ResponseBuildError
from localized_response.response.templating import substitute_params

if TYPE_CHECKING:
    from localized_response.core.models import ResponseConfig


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Language and protocol carried along a request, e.g. from HTTP middleware to a handler."""

    language: Optional[str] = None
    protocol: Optional[str] = None

    def with_language(self, language: str) -> RequestContext:
        return dataclasses.replace(self, language=language)

    def with_protocol(self, protocol: str) -> RequestContext:
        return dataclasses.replace(self, protocol=protocol)


@dataclass(slots=True)
class Response:
    code: int
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)
    error: Optional[BaseException] = None
    language: str = ""
    protocol: str = ""

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data:
            payload["data"] = self.data
        if self.meta:
            payload["meta"] = self.meta
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)


class ResponseBuilder:
    """
    Collects everything needed to render one response.

    The builder holds no configuration; `build_response` resolves the message template
    against a snapshot at build time.
    """

    def __init__(self, message_key: str) -> None:
        self.message_key = message_key
        self.params: Dict[str, Any] = {}
        self.data: Dict[str, Any] = {}
        self.meta: Dict[str, Any] = {}
        self.context: Optional[RequestContext] = None
        self.language = ""
        self.protocol = ""
        self.error: Optional[BaseException] = None
        self.is_error = False

    def with_context(self, context: Optional[RequestContext]) -> ResponseBuilder:
        self.context = context
        if context is not None:
            if context.language:
                self.language = context.language
            if context.protocol:
                self.protocol = context.protocol
        return self

    def set_language(self, language: str) -> ResponseBuilder:
        self.language = language
        return self

    def set_protocol(self, protocol: str) -> ResponseBuilder:
        self.protocol = protocol
        return self

    def set_error(self, error: BaseException) -> ResponseBuilder:
        self.error = error
        self.is_error = True
        return self

    def set_param(self, key: str, value: Any) -> ResponseBuilder:
        self.params[key] = value
        return self

    def set_params(self, params: Mapping[str, Any]) -> ResponseBuilder:
        self.params.update(params)
        return self

    def set_data(self, key: str, value: Any) -> ResponseBuilder:
        self.data[key] = value
        return self

    def set_datas(self, data: Mapping[str, Any]) -> ResponseBuilder:
        self.data.update(data)
        return self

    def set_meta(self, key: str, value: Any) -> ResponseBuilder:
        self.meta[key] = value
        return self

    def set_metas(self, meta: Mapping[str, Any]) -> ResponseBuilder:
        self.meta.update(meta)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message_key": self.message_key,
            "params": self.params,
            "data": self.data,
            "meta": self.meta,
            "language": self.language,
            "protocol": self.protocol,
            "error": str(self.error) if self.error is not None else None,
            "is_error": self.is_error,
        }

    def to_error(self) -> ResponseBuilderError:
        return ResponseBuilderError(self)


class ResponseBuilderError(Exception):
    """Carries a prepared `ResponseBuilder` up the call stack, e.g. from a service to its handler."""

    def __init__(self, builder: ResponseBuilder) -> None:
        super().__init__(json.dumps(builder.to_dict(), default=str, ensure_ascii=False))
        self.builder = builder


def parse_response_builder_error(error: Optional[BaseException]) -> Optional[ResponseBuilder]:
    """Return the builder carried by `error` or by any exception it was raised from."""
    seen = set()
    current = error
    while current is not None and id(current) not in seen:
        if isinstance(current, ResponseBuilderError):
            return current.builder
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


def build_response(config: ResponseConfig, builder: Optional[ResponseBuilder]) -> Response:
    if builder is None:
        raise ResponseBuildError("Response builder is missing.")

    language = builder.language or config.get_default_language()
    template = config.get_message_template(builder.message_key)
    if template is None:
        raise ResponseBuildError(f"Message template not found. key={builder.message_key}")

    message = template.translations.get(language)
    if message is None:
        message = config.get_translation(language, builder.message_key)
    if message is None:
        message = config.get_message_template_translation_with_fallback(builder.message_key, language)

    return Response(
        code=template.code_mappings.get(builder.protocol, 0),
        message=substitute_params(message, builder.params),
        data=dict(builder.data),
        meta=dict(builder.meta),
        error=builder.error,
        language=language,
        protocol=builder.protocol,
    )

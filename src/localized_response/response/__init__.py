"""Fluent response building on top of a configuration snapshot."""

from localized_response.response.builder import (
    RequestContext,
    Response,
    ResponseBuilder,
    ResponseBuilderError,
    build_response,
    parse_response_builder_error,
)
from localized_response.response.templating import substitute_params

__all__ = [
    "RequestContext",
    "Response",
    "ResponseBuilder",
    "ResponseBuilderError",
    "build_response",
    "parse_response_builder_error",
    "substitute_params",
]

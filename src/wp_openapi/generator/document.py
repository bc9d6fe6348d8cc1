"""Swagger document assembly — turns a WordPress index into a Swagger 2.0 document."""

import re
from urllib.parse import urlparse

from wp_openapi.generator.base import SwaggerDocument, SwaggerInfo, SwaggerOperation
from wp_openapi.generator.parameters import build_parameters
from wp_openapi.generator.paths import rewrite_path
from wp_openapi.parser.base import WordPressEndpoint, WordPressSchema

SUPPORTED_METHODS = ("get", "post", "put", "delete")
FORM_CONSUMES = ["application/x-www-form-urlencoded", "multipart/form-data"]
JSON = "application/json"


def build_document(
    schema: WordPressSchema,
    host: str | None = None,
    base_path: str = "/wp-json",
    schemes: list[str] | None = None,
    namespaces: list[str] | None = None,
    version: str = "1.0.0",
) -> SwaggerDocument:
    """Build a Swagger document covering every route of the index.

    Routes outside ``namespaces`` (when given) and the index root are skipped.
    """
    site = urlparse(schema.url)
    doc = SwaggerDocument(
        info=SwaggerInfo(
            title=schema.name or "WordPress REST API",
            version=version,
            description=schema.description,
        ),
        host=host if host is not None else site.netloc,
        base_path=base_path,
        schemes=list(schemes) if schemes else ([site.scheme] if site.scheme else []),
        consumes=[JSON, *FORM_CONSUMES],
        produces=[JSON],
    )
    if schema.home:
        doc.external_docs = {"url": schema.home}

    used_namespaces: list[str] = []
    for route_path, route in schema.routes.items():
        if not route.namespace:
            continue
        if namespaces and route.namespace not in namespaces:
            continue

        path = rewrite_path(route_path)
        item = doc.paths.setdefault(path, {})
        for endpoint in route.endpoints:
            for method in endpoint.methods:
                method = method.lower()
                if method not in SUPPORTED_METHODS:
                    continue
                item[method] = build_operation(path, method, route.namespace, endpoint)

        if item and route.namespace not in used_namespaces:
            used_namespaces.append(route.namespace)
        if not item:
            del doc.paths[path]

    doc.tags = [{"name": ns} for ns in used_namespaces]
    return doc


def build_operation(
    path: str, method: str, namespace: str, endpoint: WordPressEndpoint
) -> SwaggerOperation:
    """Build the Swagger operation for one method of an endpoint."""
    summary = endpoint.description or path
    return SwaggerOperation(
        tags=[namespace],
        summary=summary,
        description=summary,
        operation_id=operation_id(method, path),
        consumes=FORM_CONSUMES if method in ("post", "put") else [],
        produces=[JSON],
        parameters=build_parameters(path, endpoint.args, method),
        responses={"200": {"description": "OK"}},
        security=[],
    )


def operation_id(method: str, path: str) -> str:
    """``get`` + ``/wp/v2/posts/{id}`` -> ``getWpV2PostsId``."""
    words = [w for w in re.split(r"[^0-9A-Za-z]+", path) if w]
    return method.lower() + "".join(w[0].upper() + w[1:] for w in words)

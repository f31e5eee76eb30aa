from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import Field, RootModel, model_validator

from oasmodel.exceptions import ReservedKeyError
from oasmodel.openapi.base import OpenAPIObject, Reference, is_extension

logger = logging.getLogger(__name__)

STATUS_CODE_PATTERN = re.compile(r'^[1-5](?:\d\d|XX)$')


class HttpMethod(Enum):
    """HTTP methods a PathItem can hold, in enumeration order."""

    GET = 'get'
    PUT = 'put'
    POST = 'post'
    DELETE = 'delete'
    OPTIONS = 'options'
    HEAD = 'head'
    PATCH = 'patch'
    TRACE = 'trace'


def _http_method(method: Union[HttpMethod, str]) -> HttpMethod:
    if isinstance(method, HttpMethod):
        return method
    return HttpMethod(method.lower())


class SchemaType(Enum):
    array = 'array'
    boolean = 'boolean'
    integer = 'integer'
    number = 'number'
    object = 'object'
    string = 'string'


class ParameterIn(Enum):
    path = 'path'
    query = 'query'
    header = 'header'
    cookie = 'cookie'


class ParameterStyle(Enum):
    matrix = 'matrix'
    label = 'label'
    form = 'form'
    simple = 'simple'
    spaceDelimited = 'spaceDelimited'
    pipeDelimited = 'pipeDelimited'
    deepObject = 'deepObject'


class SecuritySchemeType(Enum):
    apiKey = 'apiKey'
    http = 'http'
    oauth2 = 'oauth2'
    openIdConnect = 'openIdConnect'


class SecuritySchemeIn(Enum):
    header = 'header'
    query = 'query'
    cookie = 'cookie'


class Contact(OpenAPIObject):
    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None


class License(OpenAPIObject):
    required_fields: ClassVar[frozenset[str]] = frozenset({'name'})

    name: Optional[str] = None
    url: Optional[str] = None


class Info(OpenAPIObject):
    required_fields: ClassVar[frozenset[str]] = frozenset({'title', 'version'})

    title: Optional[str] = None
    description: Optional[str] = None
    termsOfService: Optional[str] = None
    contact: Optional[Contact] = None
    license: Optional[License] = None
    version: Optional[str] = None


class ExternalDocumentation(OpenAPIObject):
    required_fields: ClassVar[frozenset[str]] = frozenset({'url'})

    description: Optional[str] = None
    url: Optional[str] = None


class ServerVariable(OpenAPIObject):
    required_fields: ClassVar[frozenset[str]] = frozenset({'default'})

    enum: Optional[List[str]] = None
    default: Optional[str] = None
    description: Optional[str] = None

    def add_enumeration(self, value: str) -> ServerVariable:
        return self.add('enum', value)


class Server(OpenAPIObject):
    required_fields: ClassVar[frozenset[str]] = frozenset({'url'})

    url: Optional[str] = None
    description: Optional[str] = None
    variables: Optional[Dict[str, ServerVariable]] = None

    def add_variable(self, name: str, variable: ServerVariable) -> Server:
        return self._put('variables', name, variable)


class Tag(OpenAPIObject):
    required_fields: ClassVar[frozenset[str]] = frozenset({'name'})

    name: Optional[str] = None
    description: Optional[str] = None
    externalDocs: Optional[ExternalDocumentation] = None


class Discriminator(OpenAPIObject):
    required_fields: ClassVar[frozenset[str]] = frozenset({'propertyName'})

    propertyName: Optional[str] = None
    mapping: Optional[Dict[str, str]] = None


class XML(OpenAPIObject):
    name: Optional[str] = None
    namespace: Optional[str] = None
    prefix: Optional[str] = None
    attribute: Optional[bool] = None
    wrapped: Optional[bool] = None


class Schema(Reference):
    """The OpenAPI 3.0 Schema Object, an extended subset of JSON Schema."""

    component: ClassVar[str] = 'schemas'

    title: Optional[str] = None
    multipleOf: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    exclusiveMaximum: Optional[bool] = None
    minimum: Optional[Union[int, float]] = None
    exclusiveMinimum: Optional[bool] = None
    maxLength: Optional[int] = None
    minLength: Optional[int] = None
    pattern: Optional[str] = None
    maxItems: Optional[int] = None
    minItems: Optional[int] = None
    uniqueItems: Optional[bool] = None
    maxProperties: Optional[int] = None
    minProperties: Optional[int] = None
    required: Optional[List[str]] = None
    enum: Optional[List[Any]] = None
    type: Optional[SchemaType] = None
    not_: Optional[Schema] = Field(None, alias='not')
    allOf: Optional[List[Schema]] = None
    oneOf: Optional[List[Schema]] = None
    anyOf: Optional[List[Schema]] = None
    items: Optional[Schema] = None
    properties: Optional[Dict[str, Schema]] = None
    additionalProperties: Optional[Union[bool, Schema]] = None
    description: Optional[str] = None
    format: Optional[str] = None
    default: Optional[Any] = None
    nullable: Optional[bool] = None
    discriminator: Optional[Discriminator] = None
    readOnly: Optional[bool] = None
    writeOnly: Optional[bool] = None
    example: Optional[Any] = None
    externalDocs: Optional[ExternalDocumentation] = None
    deprecated: Optional[bool] = None
    xml: Optional[XML] = None

    def add_property(self, name: str, schema: Schema) -> Schema:
        return self._put('properties', name, schema)

    def add_required(self, name: str) -> Schema:
        return self.add('required', name)

    def add_enumeration(self, value: Any) -> Schema:
        return self.add('enum', value)

    def add_all_of(self, schema: Schema) -> Schema:
        return self.add('allOf', schema)

    def add_one_of(self, schema: Schema) -> Schema:
        return self.add('oneOf', schema)

    def add_any_of(self, schema: Schema) -> Schema:
        return self.add('anyOf', schema)


class Example(Reference):
    component: ClassVar[str] = 'examples'

    summary: Optional[str] = None
    description: Optional[str] = None
    value: Optional[Any] = None
    externalValue: Optional[str] = None


class Encoding(OpenAPIObject):
    contentType: Optional[str] = None
    headers: Optional[Dict[str, Header]] = None
    style: Optional[ParameterStyle] = None
    explode: Optional[bool] = None
    allowReserved: Optional[bool] = None

    def add_header(self, name: str, header: Header) -> Encoding:
        return self._put('headers', name, header)


class MediaType(OpenAPIObject):
    schema_: Optional[Schema] = Field(None, alias='schema')
    example: Optional[Any] = None
    examples: Optional[Dict[str, Example]] = None
    encoding: Optional[Dict[str, Encoding]] = None

    def add_example(self, name: str, example: Example) -> MediaType:
        return self._put('examples', name, example)

    def add_encoding(self, name: str, encoding: Encoding) -> MediaType:
        return self._put('encoding', name, encoding)


class Header(Reference):
    component: ClassVar[str] = 'headers'

    description: Optional[str] = None
    required: Optional[bool] = None
    deprecated: Optional[bool] = None
    allowEmptyValue: Optional[bool] = None
    style: Optional[ParameterStyle] = None
    explode: Optional[bool] = None
    allowReserved: Optional[bool] = None
    schema_: Optional[Schema] = Field(None, alias='schema')
    content: Optional[Dict[str, MediaType]] = None
    example: Optional[Any] = None
    examples: Optional[Dict[str, Example]] = None

    def add_example(self, name: str, example: Example) -> Header:
        return self._put('examples', name, example)


class Parameter(Reference):
    """A single operation parameter, unique per (name, location) pair."""

    component: ClassVar[str] = 'parameters'

    name: Optional[str] = None
    in_: Optional[ParameterIn] = Field(None, alias='in')
    description: Optional[str] = None
    required: Optional[bool] = None
    deprecated: Optional[bool] = None
    allowEmptyValue: Optional[bool] = None
    style: Optional[ParameterStyle] = None
    explode: Optional[bool] = None
    allowReserved: Optional[bool] = None
    schema_: Optional[Schema] = Field(None, alias='schema')
    example: Optional[Any] = None
    examples: Optional[Dict[str, Example]] = None
    content: Optional[Dict[str, MediaType]] = None

    def add_example(self, name: str, example: Example) -> Parameter:
        return self._put('examples', name, example)

    def add_media_type(self, name: str, media_type: MediaType) -> Parameter:
        return self._put('content', name, media_type)


class RequestBody(Reference):
    component: ClassVar[str] = 'requestBodies'

    description: Optional[str] = None
    content: Optional[Dict[str, MediaType]] = None
    required: Optional[bool] = None

    def add_media_type(self, name: str, media_type: MediaType) -> RequestBody:
        return self._put('content', name, media_type)


class Link(Reference):
    component: ClassVar[str] = 'links'

    operationRef: Optional[str] = None
    operationId: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None
    requestBody: Optional[Any] = None
    description: Optional[str] = None
    server: Optional[Server] = None

    def add_parameter(self, name: str, expression: Any) -> Link:
        return self._put('parameters', name, expression)


class APIResponse(Reference):
    component: ClassVar[str] = 'responses'

    description: Optional[str] = None
    headers: Optional[Dict[str, Header]] = None
    content: Optional[Dict[str, MediaType]] = None
    links: Optional[Dict[str, Link]] = None

    def add_header(self, name: str, header: Header) -> APIResponse:
        return self._put('headers', name, header)

    def add_media_type(self, name: str, media_type: MediaType) -> APIResponse:
        return self._put('content', name, media_type)

    def add_link(self, name: str, link: Link) -> APIResponse:
        return self._put('links', name, link)


class APIResponses(OpenAPIObject):
    """Expected responses of an operation.

    Responses are keyed by HTTP status code (``200``, ``4XX``...) and stored
    next to ``default`` and any vendor extensions, matching the document
    layout.
    """

    default: Optional[APIResponse] = None

    def _coerce_entry(self, name: str, value: Any, context: Any = None) -> Any:
        if not STATUS_CODE_PATTERN.match(name):
            return super()._coerce_entry(name, value, context)
        if isinstance(value, APIResponse):
            return value
        return APIResponse.model_validate(value, context=context)

    @property
    def responses(self) -> Dict[str, APIResponse]:
        """Status code keyed responses, without ``default``."""
        return {
            code: response
            for code, response in (self.__pydantic_extra__ or {}).items()
            if STATUS_CODE_PATTERN.match(code)
        }

    def get_response(self, code: Union[str, int]) -> Optional[APIResponse]:
        code = str(code)
        if code == 'default':
            return self.default
        return self.responses.get(code)

    def add_response(self, code: Union[str, int], response: APIResponse) -> APIResponses:
        code = str(code)
        if code == 'default':
            self.default = response
            return self
        if is_extension(code):
            raise ReservedKeyError(code)
        response = self._coerce_entry(code, response)
        if code in self.__pydantic_extra__:
            logger.debug("Replacing response for status code '%s'", code)
        self._store_extra(code, response)
        return self

    def remove_response(self, code: Union[str, int]) -> None:
        code = str(code)
        if code == 'default':
            self.default = None
        elif STATUS_CODE_PATTERN.match(code):
            self._drop_extra(code)


class Callback(Reference):
    """Map of runtime expressions to the PathItems describing the callback requests.

    Expressions share the object with vendor extensions, so an expression may
    not start with ``x-``.
    """

    component: ClassVar[str] = 'callbacks'

    def _coerce_entry(self, name: str, value: Any, context: Any = None) -> Any:
        if isinstance(value, PathItem):
            return value
        return PathItem.model_validate(value, context=context)

    @property
    def path_items(self) -> Dict[str, PathItem]:
        return {
            expression: item
            for expression, item in (self.__pydantic_extra__ or {}).items()
            if not is_extension(expression)
        }

    def get_path_item(self, expression: str) -> Optional[PathItem]:
        return self.path_items.get(expression)

    def add_path_item(self, expression: str, item: PathItem) -> Callback:
        if is_extension(expression):
            raise ReservedKeyError(expression)
        item = self._coerce_entry(expression, item)
        if expression in self.__pydantic_extra__:
            logger.debug("Replacing callback path item '%s'", expression)
        self._store_extra(expression, item)
        return self

    def remove_path_item(self, expression: str) -> None:
        if not is_extension(expression):
            self._drop_extra(expression)


class SecurityRequirement(RootModel[Dict[str, List[str]]]):
    """Names of security schemes, each with the scopes it requires.

    Every key is a scheme name, so unlike the other model objects a
    security requirement carries no vendor extensions.
    """

    root: Dict[str, List[str]] = Field(default_factory=dict)

    @model_validator(mode='after')
    def _mark_root_set(self) -> SecurityRequirement:
        # An empty requirement ({}) is meaningful and is always emitted.
        self.__pydantic_fields_set__.add('root')
        return self

    @property
    def schemes(self) -> Dict[str, List[str]]:
        return dict(self.root)

    def add_scheme(self, name: str, scopes: Union[str, List[str], None] = None) -> SecurityRequirement:
        """Require scheme ``name``; ``None`` means no scopes."""
        if scopes is None:
            scopes = []
        elif isinstance(scopes, str):
            scopes = [scopes]
        self.root[name] = list(scopes)
        return self

    def remove_scheme(self, name: str) -> None:
        self.root.pop(name, None)

    def to_dict(self) -> Dict[str, List[str]]:
        return self.model_dump(mode='json')

    @classmethod
    def from_dict(cls, data: Dict[str, List[str]]) -> SecurityRequirement:
        return cls.model_validate(data)


class OAuthFlow(OpenAPIObject):
    authorizationUrl: Optional[str] = None
    tokenUrl: Optional[str] = None
    refreshUrl: Optional[str] = None
    scopes: Optional[Dict[str, str]] = None

    def add_scope(self, name: str, description: str) -> OAuthFlow:
        return self._put('scopes', name, description)


class OAuthFlows(OpenAPIObject):
    implicit: Optional[OAuthFlow] = None
    password: Optional[OAuthFlow] = None
    clientCredentials: Optional[OAuthFlow] = None
    authorizationCode: Optional[OAuthFlow] = None


class SecurityScheme(Reference):
    component: ClassVar[str] = 'securitySchemes'

    type: Optional[SecuritySchemeType] = None
    description: Optional[str] = None
    name: Optional[str] = None
    in_: Optional[SecuritySchemeIn] = Field(None, alias='in')
    scheme: Optional[str] = None
    bearerFormat: Optional[str] = None
    flows: Optional[OAuthFlows] = None
    openIdConnectUrl: Optional[str] = None


class Operation(OpenAPIObject):
    tags: Optional[List[str]] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    externalDocs: Optional[ExternalDocumentation] = None
    operationId: Optional[str] = None
    parameters: Optional[List[Parameter]] = None
    requestBody: Optional[RequestBody] = None
    responses: Optional[APIResponses] = None
    callbacks: Optional[Dict[str, Callback]] = None
    deprecated: Optional[bool] = None
    security: Optional[List[SecurityRequirement]] = None
    servers: Optional[List[Server]] = None

    def add_tag(self, tag: str) -> Operation:
        return self.add('tags', tag)

    def add_parameter(self, parameter: Parameter) -> Operation:
        return self.add('parameters', parameter)

    def add_callback(self, name: str, callback: Callback) -> Operation:
        return self._put('callbacks', name, callback)

    def add_security_requirement(self, requirement: SecurityRequirement) -> Operation:
        return self.add('security', requirement)

    def add_server(self, server: Server) -> Operation:
        return self.add('servers', server)


class PathItem(Reference):
    """The operations available on a single path.

    ``ref`` points at an external Path Item definition and is stored as
    given. When it is set together with local fields, both are kept and the
    outcome is left to whoever resolves the reference.
    """

    summary: Optional[str] = None
    description: Optional[str] = None
    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    delete: Optional[Operation] = None
    options: Optional[Operation] = None
    head: Optional[Operation] = None
    patch: Optional[Operation] = None
    trace: Optional[Operation] = None
    servers: Optional[List[Server]] = None
    parameters: Optional[List[Parameter]] = None

    @model_validator(mode='after')
    def _note_ref_with_local_fields(self) -> PathItem:
        if self.ref is not None:
            local = [
                name
                for name in type(self).model_fields
                if name != 'ref' and getattr(self, name) is not None
            ]
            if local:
                logger.debug(
                    "Path item '%s' also defines %s", self.ref, ', '.join(local)
                )
        return self

    def get_operation(self, method: Union[HttpMethod, str]) -> Optional[Operation]:
        return getattr(self, _http_method(method).value)

    def set_operation(
        self, method: Union[HttpMethod, str], operation: Optional[Operation]
    ) -> PathItem:
        setattr(self, _http_method(method).value, operation)
        return self

    def read_operations(self) -> List[Operation]:
        """All operations that are set, in HttpMethod order."""
        return list(self.read_operations_map().values())

    def read_operations_map(self) -> Dict[HttpMethod, Operation]:
        """Operations keyed by method, for the methods that are set."""
        operations = {}
        for method in HttpMethod:
            operation = getattr(self, method.value)
            if operation is not None:
                operations[method] = operation
        return operations

    def add_server(self, server: Server) -> PathItem:
        return self.add('servers', server)

    def add_parameter(self, parameter: Parameter) -> PathItem:
        return self.add('parameters', parameter)


class Components(OpenAPIObject):
    schemas: Optional[Dict[str, Schema]] = None
    responses: Optional[Dict[str, APIResponse]] = None
    parameters: Optional[Dict[str, Parameter]] = None
    examples: Optional[Dict[str, Example]] = None
    requestBodies: Optional[Dict[str, RequestBody]] = None
    headers: Optional[Dict[str, Header]] = None
    securitySchemes: Optional[Dict[str, SecurityScheme]] = None
    links: Optional[Dict[str, Link]] = None
    callbacks: Optional[Dict[str, Callback]] = None

    def add_schema(self, name: str, schema: Schema) -> Components:
        return self._put('schemas', name, schema)

    def add_response(self, name: str, response: APIResponse) -> Components:
        return self._put('responses', name, response)

    def add_parameter(self, name: str, parameter: Parameter) -> Components:
        return self._put('parameters', name, parameter)

    def add_example(self, name: str, example: Example) -> Components:
        return self._put('examples', name, example)

    def add_request_body(self, name: str, request_body: RequestBody) -> Components:
        return self._put('requestBodies', name, request_body)

    def add_header(self, name: str, header: Header) -> Components:
        return self._put('headers', name, header)

    def add_security_scheme(self, name: str, scheme: SecurityScheme) -> Components:
        return self._put('securitySchemes', name, scheme)

    def add_link(self, name: str, link: Link) -> Components:
        return self._put('links', name, link)

    def add_callback(self, name: str, callback: Callback) -> Components:
        return self._put('callbacks', name, callback)


class OpenAPI(OpenAPIObject):
    """Root of an OpenAPI 3.0 document.

    ``openapi``, ``info`` and ``paths`` are required: they start out unset
    (``paths`` as an empty mapping) but cannot be assigned ``None``. Nothing
    else is checked; duplicate tag names or a malformed version string are
    accepted.
    """

    required_fields: ClassVar[frozenset[str]] = frozenset({'openapi', 'info', 'paths'})

    openapi: Optional[str] = None
    info: Optional[Info] = None
    externalDocs: Optional[ExternalDocumentation] = None
    servers: Optional[List[Server]] = None
    security: Optional[List[SecurityRequirement]] = None
    tags: Optional[List[Tag]] = None
    paths: Dict[str, PathItem] = Field(default_factory=dict)
    components: Optional[Components] = None

    def add_server(self, server: Server) -> OpenAPI:
        return self.add('servers', server)

    def add_security_requirement(self, requirement: SecurityRequirement) -> OpenAPI:
        return self.add('security', requirement)

    def add_tag(self, tag: Tag) -> OpenAPI:
        return self.add('tags', tag)

    def add_path(self, name: str, item: PathItem) -> OpenAPI:
        return self._put('paths', name, item)

    def add_schema(self, name: str, schema: Schema) -> OpenAPI:
        self._ensure_components().add_schema(name, schema)
        return self

    def add_security_scheme(self, name: str, scheme: SecurityScheme) -> OpenAPI:
        self._ensure_components().add_security_scheme(name, scheme)
        return self

    def _ensure_components(self) -> Components:
        if self.components is None:
            self.components = Components()
        return self.components


Schema.model_rebuild()
Encoding.model_rebuild()
MediaType.model_rebuild()
Header.model_rebuild()
Parameter.model_rebuild()
RequestBody.model_rebuild()
APIResponse.model_rebuild()
APIResponses.model_rebuild()
Callback.model_rebuild()
Operation.model_rebuild()
PathItem.model_rebuild()
Components.model_rebuild()
OpenAPI.model_rebuild()

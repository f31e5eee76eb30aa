"""OpenAPI 3.0 document models."""

from oasmodel.openapi.v3.v3 import (
    XML,
    APIResponse,
    APIResponses,
    Callback,
    Components,
    Contact,
    Discriminator,
    Encoding,
    Example,
    ExternalDocumentation,
    Header,
    HttpMethod,
    Info,
    License,
    Link,
    MediaType,
    OAuthFlow,
    OAuthFlows,
    OpenAPI,
    Operation,
    Parameter,
    ParameterIn,
    ParameterStyle,
    PathItem,
    RequestBody,
    Schema,
    SchemaType,
    SecurityRequirement,
    SecurityScheme,
    SecuritySchemeIn,
    SecuritySchemeType,
    Server,
    ServerVariable,
    Tag,
)

__all__ = [
    'APIResponse',
    'APIResponses',
    'Callback',
    'Components',
    'Contact',
    'Discriminator',
    'Encoding',
    'Example',
    'ExternalDocumentation',
    'Header',
    'HttpMethod',
    'Info',
    'License',
    'Link',
    'MediaType',
    'OAuthFlow',
    'OAuthFlows',
    'OpenAPI',
    'Operation',
    'Parameter',
    'ParameterIn',
    'ParameterStyle',
    'PathItem',
    'RequestBody',
    'Schema',
    'SchemaType',
    'SecurityRequirement',
    'SecurityScheme',
    'SecuritySchemeIn',
    'SecuritySchemeType',
    'Server',
    'ServerVariable',
    'Tag',
    'XML',
]

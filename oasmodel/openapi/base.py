"""Capabilities shared by every OpenAPI model object.

Every model is constructible with no arguments, carries vendor extensions
(``x-`` keys stored next to its regular fields), and supports fluent
construction through :meth:`OpenAPIObject.set` and :meth:`OpenAPIObject.add`.
Types that may stand in for a reference object additionally derive from
:class:`Reference`.
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Self, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from oasmodel.exceptions import InvalidExtensionError

logger = logging.getLogger(__name__)

EXTENSION_PREFIX = 'x-'

# Validation context used by from_dict: component references are kept as
# written instead of being expanded.
LOAD_CONTEXT = {'load': True}




class OpenAPIObject(BaseModel):
    """Base class of all document model objects.

    Regular fields are read and written as plain attributes; assignments are
    validated. Keys that are not declared fields end up in the pydantic extra
    store and must be vendor extensions, unless a subclass accepts them as
    keyed entries (see :meth:`_coerce_entry`).

    A field counts as set once it has been given a value, and only set fields
    appear in :meth:`to_dict`. Assigning ``None`` unsets a field again, except
    for fields typed ``Any`` where ``None`` is a legitimate JSON ``null``.
    """

    model_config = ConfigDict(
        extra='allow',
        populate_by_name=True,
        validate_assignment=True,
    )

    # Fields that reject an explicit None.
    required_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator('*', mode='before')
    @classmethod
    def _reject_missing_required(cls, value: Any, validation_info: ValidationInfo) -> Any:
        if value is None and validation_info.field_name in cls.required_fields:
            raise ValueError(f'{validation_info.field_name} is required')
        return value

    @model_validator(mode='after')
    def _check_extra_keys(self, validation_info: ValidationInfo) -> Self:
        extra = self.__pydantic_extra__
        if extra:
            for name, value in list(extra.items()):
                if not is_extension(name):
                    extra[name] = self._coerce_entry(name, value, validation_info.context)
        return self

    @model_validator(mode='after')
    def _track_set_fields(self) -> Self:
        fields = type(self).model_fields
        fields_set = self.__pydantic_fields_set__
        for name in list(fields_set):
            if (
                name in fields
                and self.__dict__.get(name) is None
                and not _accepts_null(fields[name].annotation)
            ):
                fields_set.discard(name)
        # Required fields are always part of the document once they hold a value.
        for name in self.required_fields:
            if self.__dict__.get(name) is not None:
                fields_set.add(name)
        return self

    def _coerce_entry(self, name: str, value: Any, context: Any = None) -> Any:
        """Validate an extra key that is not a vendor extension.

        Plain objects only accept extensions. Map-like objects (responses,
        callbacks) override this to accept their keyed entries.
        """
        raise InvalidExtensionError(name)

    def __setattr__(self, name: str, value: Any) -> None:
        cls = type(self)
        if name in cls.model_fields or name.startswith('_') or hasattr(cls, name):
            super().__setattr__(name, value)
            return
        # pydantic stores unknown keys before the extra check runs, so a
        # rejected key has to be rolled back.
        extra = dict(self.__pydantic_extra__ or {})
        fields_set = set(self.__pydantic_fields_set__)
        try:
            super().__setattr__(name, value)
        except ValidationError:
            object.__setattr__(self, '__pydantic_extra__', extra)
            object.__setattr__(self, '__pydantic_fields_set__', fields_set)
            raise
        self.__pydantic_fields_set__.add(name)

    @property
    def extensions(self) -> dict[str, Any]:
        """Vendor extensions of this object, as a new dict."""
        return {
            name: value
            for name, value in (self.__pydantic_extra__ or {}).items()
            if is_extension(name)
        }

    @extensions.setter
    def extensions(self, extensions: Mapping[str, Any] | None) -> None:
        self.set_extensions(extensions)

    def get_extension(self, name: str, default: Any = None) -> Any:
        return self.extensions.get(name, default)

    def add_extension(self, name: str, value: Any) -> Self:
        """Add or replace a vendor extension."""
        if not is_extension(name):
            raise InvalidExtensionError(name)
        self._store_extra(name, value)
        return self

    def remove_extension(self, name: str) -> None:
        if is_extension(name):
            self._drop_extra(name)

    def set_extensions(self, extensions: Mapping[str, Any] | None) -> Self:
        """Replace all vendor extensions; ``None`` clears them."""
        extensions = dict(extensions or {})
        for name in extensions:
            if not is_extension(name):
                raise InvalidExtensionError(name)
        for name in self.extensions:
            self._drop_extra(name)
        for name, value in extensions.items():
            self._store_extra(name, value)
        return self

    def set(self, **fields: Any) -> Self:
        """Assign fields by name and return this object.

        Equivalent to assigning each attribute in turn, so the same
        validation applies::

            PathItem().set(summary='Pets', get=list_pets)
        """
        for name, value in fields.items():
            setattr(self, name, value)
        return self

    def add(self, field: str, item: Any) -> Self:
        """Append ``item`` to the list field ``field``, creating the list if unset."""
        current = getattr(self, field)
        items = list(current) if current is not None else []
        items.append(item)
        setattr(self, field, items)
        return self

    def _put(self, field: str, key: str, value: Any) -> Self:
        """Insert ``value`` under ``key`` in the dict field ``field``; last write wins."""
        current = getattr(self, field)
        entries = dict(current) if current is not None else {}
        if key in entries:
            logger.debug(
                "Replacing %s entry '%s' on %s", field, key, type(self).__name__
            )
        entries[key] = value
        setattr(self, field, entries)
        return self

    def _store_extra(self, name: str, value: Any) -> None:
        self.__pydantic_extra__[name] = value
        self.__pydantic_fields_set__.add(name)

    def _drop_extra(self, name: str) -> None:
        self.__pydantic_extra__.pop(name, None)
        self.__pydantic_fields_set__.discard(name)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON document shape of this object.

        Unset fields are omitted, while set values are kept as they are:
        empty collections, ``null`` values of ``Any`` fields and extension
        values. Extensions are inlined.
        """
        return self.model_dump(mode='json', by_alias=True, exclude_unset=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build an object from its JSON document shape, keeping values as written."""
        return cls.model_validate(data, context=LOAD_CONTEXT)


class Reference(OpenAPIObject):
    """An object that may be a reference to a reusable component.

    Assigning a bare component name to ``ref`` expands it to the component
    location of the concrete type, e.g. ``Pet`` becomes
    ``#/components/schemas/Pet`` on a schema. Values containing ``/`` or
    ``.`` are kept as they are, and so is anything loaded by
    :meth:`~OpenAPIObject.from_dict`.

    Local fields may be set alongside ``ref``; the model does not decide
    which one wins.
    """

    # Section under ``components`` this type is stored in, if any.
    component: ClassVar[str | None] = None

    ref: str | None = Field(None, alias='$ref')

    @field_validator('ref')
    @classmethod
    def _expand_short_ref(cls, value: str | None, validation_info: ValidationInfo) -> str | None:
        if value is None or cls.component is None or is_loading(validation_info.context):
            return value
        if '/' in value or '.' in value:
            return value
        return f'#/components/{cls.component}/{value}'


def is_loading(context: Any) -> bool:
    """Whether a validation context comes from :meth:`OpenAPIObject.from_dict`."""
    return bool(context and context.get('load'))


def is_extension(name: object) -> bool:
    return isinstance(name, str) and name.startswith(EXTENSION_PREFIX)


def _accepts_null(annotation: Any) -> bool:
    return annotation is Any or (get_origin(annotation) is Union and Any in get_args(annotation))

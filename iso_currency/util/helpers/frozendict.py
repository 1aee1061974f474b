# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

import typing

from frozendict import frozendict
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class PydanticFrozenDictAnnotation:
    """Validate mappings as plain dicts, then freeze them. Serialises back to a plain dict."""

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: typing.Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        args = typing.get_args(source_type) or (typing.Any, typing.Any)
        return core_schema.no_info_after_validator_function(
            function=frozendict,
            schema=handler.generate_schema(dict[args[0], args[1]]),
            serialization=core_schema.plain_serializer_function_ser_schema(dict),
        )


_K = typing.TypeVar("_K")
_V = typing.TypeVar("_V")
FrozenDict = typing.Annotated[frozendict[_K, _V], PydanticFrozenDictAnnotation]

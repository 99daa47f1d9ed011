from typing import Any, NoReturn
from pydantic import BaseModel


VARIANT_TAGS = ("node", "span", "frag", "semantic")


class UnknownVariantError(Exception):
    pass


def variant_name(value: Any) -> str:
    if isinstance(value, BaseModel):
        for tag in VARIANT_TAGS:
            if tag in type(value).model_fields:
                return f"{type(value).__name__}({tag}={getattr(value, tag)!r})"
    return type(value).__name__


def assert_never(value: NoReturn) -> NoReturn:
    """
    Fail on a variant the dispatch did not handle.

    Nodes, spans and fragments are closed sets, so reaching this means the
    input was built against a different schema version.
    """
    raise UnknownVariantError(f"Unknown variant: {variant_name(value)}")

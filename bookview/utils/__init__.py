from .type_utils import UnknownVariantError, assert_never, variant_name

__all__ = [
    "UnknownVariantError",
    "assert_never",
    "variant_name",
]

"""Domain types for the product list."""
from typing import NewType, Any
from uuid import UUID
from pydantic_core import CoreSchema, core_schema


# Strong type for product identity
ProductId = NewType('ProductId', UUID)


# Unicode Z* separators plus the C0/C1 line and tab controls. Plain
# str.strip() would also drop the U+001C-U+001F information separators.
WHITESPACE_AND_NEWLINES = (
    "\t\n\x0b\x0c\r\x85"
    "\x20\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007"
    "\u2008\u2009\u200a\u202f\u205f\u3000\u2028\u2029"
)


def trim(value: str) -> str:
    """Strip leading and trailing whitespace, newlines included."""
    return value.strip(WHITESPACE_AND_NEWLINES)


class ProductName(str):
    """String subclass holding a trimmed, non-empty product name."""

    def __new__(cls, value: str) -> 'ProductName':
        """Create a new ProductName instance with validation."""
        if not isinstance(value, str):
            raise TypeError('Product name must be a string')
        text = trim(value)
        if not text:
            raise ValueError('Product name cannot be empty')
        return super().__new__(cls, text)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        _source_type: Any,
        _handler: Any
    ) -> CoreSchema:
        """Get Pydantic core schema for validation."""
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls, core_schema.str_schema()
            ),
            python_schema=core_schema.union_schema([
                core_schema.is_instance_schema(cls),
                core_schema.no_info_plain_validator_function(cls)
            ]),
            serialization=core_schema.plain_serializer_function_ser_schema(str)
        )

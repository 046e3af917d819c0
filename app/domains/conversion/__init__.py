"""
Boundary to the external document converter.
Converters turn an uploaded spreadsheet or document into HTML and JSONL;
the record service only depends on the gateway protocol defined here.
"""

from app.domains.conversion.interfaces import ConversionError, ConversionResult, ConverterGateway
from app.domains.conversion.adapters import UnconfiguredConverter

__all__ = [
    "ConversionError", "ConversionResult", "ConverterGateway", "UnconfiguredConverter"
]

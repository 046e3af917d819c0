from app.domains.conversion.interfaces import ConversionError, ConversionResult, ConverterGateway


class UnconfiguredConverter(ConverterGateway):
    """Placeholder used until a real converter is wired into the application"""

    def convert(self, file_name: str, content: bytes) -> ConversionResult:
        raise ConversionError(f"No document converter is configured, cannot convert '{file_name}'")

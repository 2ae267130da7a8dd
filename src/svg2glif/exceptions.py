"""Exception hierarchy for svg2glif."""


class Svg2GlifError(Exception):
    """Base exception for all svg2glif errors."""

    pass


class DocumentError(Svg2GlifError):
    """Errors related to the content of the SVG document."""

    pass


class MalformedInputError(DocumentError):
    """The document could not be parsed as markup."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed SVG document: {reason}")


class UnsupportedUnitError(DocumentError):
    """A length uses a unit other than unitless or px."""

    def __init__(self, value: str, unit: str) -> None:
        self.value = value
        self.unit = unit
        super().__init__(f"Unsupported length unit '{unit}' in '{value}'")


class MalformedTransformError(DocumentError):
    """A transform attribute does not follow the SVG transform syntax."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed transform '{value}': {reason}")


class MalformedPathDataError(DocumentError):
    """Path data contains invalid syntax."""

    def __init__(self, path_data: str, reason: str, segment: str | None = None) -> None:
        self.path_data = path_data
        self.reason = reason
        self.segment = segment
        context = f" near '{segment}'" if segment else ""
        super().__init__(f"Malformed path data{context}: {reason}")


class InvalidAnchorNameError(Svg2GlifError):
    """Text content cannot be used as an anchor name."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid anchor name {name!r}: {reason}")


class GlifError(Svg2GlifError):
    """Errors related to reading input or writing GLIF output."""

    pass


class SvgLoadError(GlifError):
    """Error reading an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read SVG '{path}': {reason}")


class GlifSaveError(GlifError):
    """Error writing a GLIF file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save GLIF '{path}': {reason}")


class ConversionError(Svg2GlifError):
    """A single file failed to convert during a batch run."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Conversion of '{path}' failed: {reason}")

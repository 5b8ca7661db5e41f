"""eib: image definition loading for edge image builds."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("edge-image-builder")
except PackageNotFoundError:
    __version__ = "dev"

from eib.api import load_definition, validate, ValidationIssue, ValidationResult
from eib.codes import ValidationCode
from eib.image import Arch, Definition, DefinitionParseError, UnknownArchError, parse_definition

__all__ = [
    "__version__",
    "load_definition",
    "validate",
    "parse_definition",
    "Arch",
    "Definition",
    "DefinitionParseError",
    "UnknownArchError",
    "ValidationCode",
    "ValidationIssue",
    "ValidationResult",
]

"""Public API for eib.

High-level functions that load an image definition from disk and
report on it with structured results.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel

from eib.codes import ValidationCode
from eib.image.definition import Definition, DefinitionParseError, parse_definition

logger = logging.getLogger(__name__)

DEFAULT_DEFINITION_FILE = "definition.yaml"


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


class ValidationIssue(BaseModel):
    """A single validation issue (error or warning)."""
    code: str  # e.g., "FILE_NOT_FOUND", "FILE_UNREADABLE", "INVALID_STRUCTURE", "UNKNOWN_ARCH"
    message: str
    path: Optional[str] = None  # Definition file the issue refers to, if loaded from disk


class ValidationResult(BaseModel):
    """Result of validation/preflight check."""
    ok: bool  # True if no errors (warnings don't block)
    errors: List[ValidationIssue]  # Blocking issues
    warnings: List[ValidationIssue]  # Non-blocking issues
    api_version: Optional[str] = None  # Recorded from the definition when it parsed


def load_definition(
    config_dir: Union[str, os.PathLike, Path],
    definition_file: str = DEFAULT_DEFINITION_FILE,
) -> Definition:
    """
    Load the image definition from an image configuration directory.

    Args:
        config_dir: Image configuration directory
        definition_file: Definition file name, relative to config_dir

    Returns:
        Parsed Definition

    Raises:
        OSError: if the definition file does not exist or cannot be read
        DefinitionParseError: if the file contents cannot be parsed
    """
    definition_path = _normalize_path(config_dir) / definition_file
    logger.debug("Reading image definition from %s", definition_path)
    return parse_definition(definition_path.read_bytes())


def validate(definition: Union[str, os.PathLike, Path, bytes]) -> ValidationResult:
    """
    Preflight check for a single image definition.

    Checks that the definition loads and that its architecture is one
    the build knows how to normalize. Does not check that fields are
    consistent with each other.

    Args:
        definition: Path to a definition file, or the raw document bytes

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: List[ValidationIssue] = []
    warnings: List[ValidationIssue] = []
    path: Optional[str] = None

    # 1. Load (ERROR)
    try:
        if isinstance(definition, bytes):
            data = definition
        else:
            definition_path = _normalize_path(definition)
            path = str(definition_path)
            data = definition_path.read_bytes()
    except FileNotFoundError as e:
        errors.append(ValidationIssue(
            code=ValidationCode.FILE_NOT_FOUND.value,
            message=f"Definition file not found: {e.filename}",
            path=path,
        ))
        return ValidationResult(ok=False, errors=errors, warnings=warnings)
    except OSError as e:
        errors.append(ValidationIssue(
            code=ValidationCode.FILE_UNREADABLE.value,
            message=f"Definition file could not be read: {e}",
            path=path,
        ))
        return ValidationResult(ok=False, errors=errors, warnings=warnings)

    # 2. Structure (ERROR)
    try:
        parsed = parse_definition(data)
    except DefinitionParseError as e:
        errors.append(ValidationIssue(
            code=ValidationCode.INVALID_STRUCTURE.value,
            message=str(e),
            path=path,
        ))
        return ValidationResult(ok=False, errors=errors, warnings=warnings)

    # 3. Architecture (WARNING)
    arch = parsed.image.arch
    if not arch.is_known:
        warnings.append(ValidationIssue(
            code=ValidationCode.UNKNOWN_ARCH.value,
            message=f"Unknown image arch '{arch}', expected 'x86_64' or 'aarch64'",
            path=path,
        ))

    return ValidationResult(
        ok=True,
        errors=errors,
        warnings=warnings,
        api_version=parsed.api_version,
    )

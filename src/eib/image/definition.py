"""Pydantic models for the image definition and its YAML parser.

The definition is decoded structurally: unknown keys are dropped, missing
sections fall back to zero values, and scalars keep their literal YAML text
so that ``apiVersion: 1.0`` stays ``"1.0"``.
"""

import logging
import re
from typing import Annotated, Any, Union

import yaml
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import core_schema

logger = logging.getLogger(__name__)

PARSE_ERROR_PREFIX = "could not parse the image definition"


class DefinitionError(ValueError):
    """Base class for recoverable image definition errors."""


class DefinitionParseError(DefinitionError):
    """The definition bytes could not be decoded into a Definition.

    The decoder error (YAML syntax or schema mismatch) is chained as
    ``__cause__`` and also kept on ``cause``.
    """

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"{PARSE_ERROR_PREFIX}: {cause}")


class UnknownArchError(RuntimeError):
    """An Arch outside the known set reached the normalizer.

    Not a DefinitionError: this signals a caller that skipped validation.
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"unknown arch: {value}")


class Arch(str):
    """CPU architecture identifier as written in the definition."""

    @property
    def is_known(self) -> bool:
        return str(self) in _SHORT_ARCH

    def short(self) -> str:
        """Return the short form used by container and chart tooling.

        Raises:
            UnknownArchError: if the value is not x86_64 or aarch64
        """
        try:
            return _SHORT_ARCH[str(self)]
        except KeyError:
            raise UnknownArchError(str(self)) from None

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.to_string_ser_schema(),
        )


ARCH_TYPE_X86 = Arch("x86_64")
ARCH_TYPE_ARM = Arch("aarch64")

_SHORT_ARCH = {
    ARCH_TYPE_X86: "amd64",
    ARCH_TYPE_ARM: "arm64",
}


class _DefinitionLoader(yaml.BaseLoader):
    """YAML loader that keeps scalars as literal text but still knows null."""


_DefinitionLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)
_DefinitionLoader.add_constructor("tag:yaml.org,2002:null", lambda loader, node: None)


def _empty_items_to_blank(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return ["" if item is None else item for item in value]
    return value


# Empty sequence items (`- `) decode to "" like empty mapping values.
Strings = Annotated[tuple[str, ...], BeforeValidator(_empty_items_to_blank)]


class _DefinitionModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Treat empty YAML values as absent so they fall back to defaults."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Image(_DefinitionModel):
    arch: Arch = Arch("")
    image_type: str = ""  # "iso" | "raw", not enforced
    base_image: str = ""
    output_image_name: str = ""


class UserConfig(_DefinitionModel):
    username: str = ""
    encrypted_password: str = ""  # pre-hashed, opaque
    ssh_key: str = ""


class SystemdConfig(_DefinitionModel):
    enable: Strings = ()
    disable: Strings = ()


class SumaConfig(_DefinitionModel):
    host: str = ""
    activation_key: str = ""
    get_ssl: bool = Field(False, alias="getSSL")


class OperatingSystem(_DefinitionModel):
    kernel_args: Strings = ()  # passed to the bootloader verbatim
    users: tuple[UserConfig, ...] = ()
    systemd: SystemdConfig = Field(default_factory=SystemdConfig)
    suma: SumaConfig = Field(default_factory=SumaConfig)


class ContainerImage(_DefinitionModel):
    name: str = ""
    supply_chain_key: str = ""


class HelmChart(_DefinitionModel):
    name: str = ""
    repo_url: str = Field("", alias="repoURL")
    version: str = ""


class EmbeddedArtifactRegistry(_DefinitionModel):
    container_images: tuple[ContainerImage, ...] = ()
    helm_charts: tuple[HelmChart, ...] = ()


class Kubernetes(_DefinitionModel):
    version: str = ""
    node_type: str = ""  # "server" | "agent", not enforced
    cni: str = ""
    multus_enabled: bool = False
    vsphere_enabled: bool = Field(False, alias="vSphereEnabled")


class Definition(_DefinitionModel):
    """Root of an image definition."""
    api_version: str
    image: Image
    operating_system: OperatingSystem = Field(default_factory=OperatingSystem)
    embedded_artifact_registry: EmbeddedArtifactRegistry = Field(default_factory=EmbeddedArtifactRegistry)
    kubernetes: Kubernetes = Field(default_factory=Kubernetes)


def parse_definition(data: Union[bytes, str]) -> Definition:
    """
    Decode an image definition document.

    Args:
        data: YAML document as bytes or text

    Returns:
        Fully populated Definition

    Raises:
        DefinitionParseError: if the document is not valid YAML or does not
            match the definition shape
    """
    try:
        # Scalars stay strings; pydantic coerces "true"/"false" for bool fields.
        raw = yaml.load(data, Loader=_DefinitionLoader)
        definition = Definition.model_validate(raw)
    except (yaml.YAMLError, ValidationError, RecursionError) as e:
        logger.debug("Image definition rejected: %s", e)
        raise DefinitionParseError(e) from e

    logger.debug(
        "Parsed image definition (apiVersion=%s, arch=%s)",
        definition.api_version,
        definition.image.arch,
    )
    return definition

"""Image definition model and parser."""

from eib.image.definition import (
    ARCH_TYPE_ARM,
    ARCH_TYPE_X86,
    Arch,
    ContainerImage,
    Definition,
    DefinitionError,
    DefinitionParseError,
    EmbeddedArtifactRegistry,
    HelmChart,
    Image,
    Kubernetes,
    OperatingSystem,
    SumaConfig,
    SystemdConfig,
    UnknownArchError,
    UserConfig,
    parse_definition,
)

__all__ = [
    "ARCH_TYPE_ARM",
    "ARCH_TYPE_X86",
    "Arch",
    "ContainerImage",
    "Definition",
    "DefinitionError",
    "DefinitionParseError",
    "EmbeddedArtifactRegistry",
    "HelmChart",
    "Image",
    "Kubernetes",
    "OperatingSystem",
    "SumaConfig",
    "SystemdConfig",
    "UnknownArchError",
    "UserConfig",
    "parse_definition",
]

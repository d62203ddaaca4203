"""
Provider descriptor loading.

The descriptor is a YAML file (data/provider.yaml by default, or
STARTER_PROVIDER_FILE) with `description`, `dependencies`, `config`,
`samples` and `features.install` keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from swagger_starter.config import get_provider_file
from swagger_starter.models import Provider, Sample, Scope, ServerConfig

logger = logging.getLogger(__name__)


class DescriptorError(ValueError):
    """The provider descriptor is missing, unparsable or incomplete."""


@dataclass
class ProviderDescriptor:
    provider: Provider
    config: ServerConfig
    sample: Sample
    install_features: List[str] = field(default_factory=list)

    def features_to_install(self) -> str:
        return ",".join(self.install_features)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise DescriptorError(f"provider descriptor not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise DescriptorError(f"provider descriptor {path} is not valid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise DescriptorError(f"provider descriptor {path} must be a mapping")
    return raw


def _check_scopes(provider: Provider, path: Path) -> None:
    missing = [s.value for s in Scope if not provider.by_scope(s)]
    if missing:
        raise DescriptorError(
            f"provider descriptor {path} declares no {' or '.join(missing)} dependencies")


def load_descriptor(path: Optional[Path] = None) -> ProviderDescriptor:
    path = path or get_provider_file()
    raw = _load_yaml(path)
    features = raw.get("features") or {}
    try:
        descriptor = ProviderDescriptor(
            provider=Provider(description=raw.get("description", ""),
                              dependencies=raw.get("dependencies") or []),
            config=ServerConfig.model_validate(raw.get("config") or {}),
            sample=Sample.model_validate(raw.get("samples") or {}),
            install_features=[str(f) for f in features.get("install") or []],
        )
    except (ValidationError, AttributeError) as e:
        raise DescriptorError(f"provider descriptor {path} is malformed: {e}") from e

    _check_scopes(descriptor.provider, path)
    if not descriptor.install_features:
        raise DescriptorError(f"provider descriptor {path} lists no features to install")
    logger.info("loaded provider descriptor %s (%d dependencies)",
                path, len(descriptor.provider.dependencies))
    return descriptor

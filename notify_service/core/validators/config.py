"""Validation of notification configuration documents.

The validator decodes a YAML document into ``Configuration`` and checks the
invariants the model cannot express on its own:

1. every language code is non-empty and upper-case;
2. no template sets both ``template`` and ``template_path``;
3. every template key is upper-case;
4. every declared language has a template in every event.

Checks run in that order and the first violation wins, which suits a
one-shot startup check. ``Validator(collect_all=True)`` keeps scanning and
reports every violation instead; the pass/fail outcome is the same.

Template keys for languages that are not declared at the top level are
accepted. Only "declared language has a template" is enforced, not the
reverse.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any

from pydantic import ValidationError
import yaml

from notify_service.core.exceptions import (
    ConfigError,
    DecodeError,
    LanguageFormatError,
    MissingLanguageTemplateError,
    TemplateConflictError,
    TemplateKeyCaseError,
)
from notify_service.core.schemas.config import Configuration
from notify_service.infra.logging import get_lazy_logger

logger = get_lazy_logger(__name__)

Source = IO[bytes] | IO[str] | bytes | str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation run.

    Truthy when the document is valid. ``error`` is the first violation and
    ``errors`` holds all reported violations (a single one unless the
    validator collects).
    """

    ok: bool
    error: ConfigError | None = None
    errors: tuple[ConfigError, ...] = ()
    configuration: Configuration | None = field(default=None, compare=False)

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, configuration: Configuration) -> ValidationResult:
        return cls(ok=True, configuration=configuration)

    @classmethod
    def failure(
        cls,
        errors: list[ConfigError] | tuple[ConfigError, ...],
        configuration: Configuration | None = None,
    ) -> ValidationResult:
        return cls(
            ok=False,
            error=errors[0],
            errors=tuple(errors),
            configuration=configuration,
        )


def decode(source: Source) -> Configuration:
    """Decode a YAML document into a ``Configuration``.

    Only the first document of a multi-document stream is read.

    Args:
        source: Readable stream (binary or text) or raw document content.

    Returns:
        Decoded, not yet validated configuration.

    Raises:
        DecodeError: If the document is malformed, empty, or does not match
            the configuration structure.
    """
    content = source if isinstance(source, (bytes, str)) else source.read()

    try:
        document: Any = next(yaml.safe_load_all(content), None)
    except yaml.YAMLError as exc:
        raise DecodeError(f"malformed configuration document: {exc}") from exc

    if document is None:
        msg = "configuration document is empty"
        raise DecodeError(msg)
    if not isinstance(document, dict):
        msg = f"configuration document must be a mapping, got {type(document).__name__}"
        raise DecodeError(msg)

    try:
        return Configuration.model_validate(document)
    except ValidationError as exc:
        raise DecodeError(f"invalid configuration structure: {exc}") from exc


class Validator:
    """Checks configuration documents for structural invariants.

    Example:
        result = Validator().validate(stream)
        if not result:
            raise SystemExit(result.error.detail)
    """

    def __init__(self, collect_all: bool = False) -> None:
        """Initialize validator.

        Args:
            collect_all: Report every violation instead of stopping at the first.
        """
        self.collect_all = collect_all

    def validate(self, source: Source) -> ValidationResult:
        """Decode ``source`` and check it.

        A decode failure stops validation in both modes.
        """
        try:
            configuration = decode(source)
        except DecodeError as exc:
            return ValidationResult.failure([exc])

        return self.check(configuration)

    def check(self, configuration: Configuration) -> ValidationResult:
        """Check an already decoded configuration."""
        errors: list[ConfigError] = []
        for error in iter_violations(configuration):
            errors.append(error)
            if not self.collect_all:
                break

        if errors:
            return ValidationResult.failure(errors, configuration)

        logger.debug(
            lambda: (
                f"Configuration valid: {len(configuration.languages)} languages, "
                f"{len(configuration.events)} events"
            ),
        )
        return ValidationResult.success(configuration)


def iter_violations(configuration: Configuration) -> Iterator[ConfigError]:
    """Yield invariant violations in the order they are checked."""
    for language in configuration.languages:
        if not language.is_valid:
            yield LanguageFormatError(language.code)

    for event in configuration.events:
        for code, source in event.templates.items():
            if source.has_inline and source.has_path:
                yield TemplateConflictError(event=event.name, language=code)
            if code != code.upper():
                yield TemplateKeyCaseError(event=event.name, language=code)

    for event in configuration.events:
        for language in configuration.languages:
            if language.code not in event.templates:
                yield MissingLanguageTemplateError(event=event.name, language=language.code)


def validate(source: Source, collect_all: bool = False) -> ValidationResult:
    """Validate a configuration document.

    Args:
        source: Readable stream (binary or text) or raw document content.
        collect_all: Report every violation instead of stopping at the first.

    Returns:
        ValidationResult; falsy with ``error`` set when the document is rejected.
    """
    return Validator(collect_all=collect_all).validate(source)


def load_configuration(source: Source) -> Configuration:
    """Decode and validate a configuration, raising on the first violation.

    Raises:
        DecodeError: If the document cannot be decoded.
        ConfigError: The first violation found.
    """
    configuration = decode(source)
    result = Validator().check(configuration)
    if result.error is not None:
        raise result.error
    return configuration


def load_configuration_file(path: str | Path) -> Configuration:
    """Load and validate the configuration stored at ``path``.

    Raises:
        DecodeError: If the file cannot be read.
        ConfigError: The first violation found.
    """
    try:
        with Path(path).open("rb") as stream:
            return load_configuration(stream)
    except OSError as exc:
        raise DecodeError(f"cannot read configuration file {path}: {exc}") from exc

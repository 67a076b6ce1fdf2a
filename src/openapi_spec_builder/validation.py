"""Conformance checking of normalized documents.

The rule set itself lives in an external validator. This module only decides
how a verdict becomes a result: an empty list of diagnostics means the
document conforms, a non-empty list becomes a ConformanceError, and a
validator that raises becomes a ValidatorUnavailableError. A reference the
library cannot resolve is a fault in the document, so it is reported as a
diagnostic rather than a crash.
"""

import asyncio
import logging
from typing import Any, Mapping, Protocol, Sequence

from openapi_spec_validator import OpenAPIV2SpecValidator
from openapi_spec_validator.validation.exceptions import OpenAPIValidationError
from referencing.exceptions import Unresolvable

from openapi_spec_builder.errors import ConformanceError, ValidatorUnavailableError
from openapi_spec_builder.models.shared import SWAGGER_VERSION

logger = logging.getLogger(__name__)


class ConformanceValidator(Protocol):
    """Anything that can check a document against a specification version."""

    async def validate(self, document: Mapping[str, Any], version: str) -> Sequence[Any]:
        """Return the diagnostics found in the document, empty if it conforms."""
        ...


class OpenApiSpecValidator:
    """Validator backed by openapi-spec-validator.

    The check is CPU bound and synchronous, so it runs in a worker thread.
    """

    VALIDATORS = {"2.0": OpenAPIV2SpecValidator}

    async def validate(self, document: Mapping[str, Any], version: str) -> list[Any]:
        try:
            validator_cls = self.VALIDATORS[version]
        except KeyError:
            raise ValueError(f"unsupported specification version {version!r}") from None
        return await asyncio.to_thread(_collect_errors, validator_cls, document)


def _collect_errors(validator_cls: Any, document: Mapping[str, Any]) -> list[Any]:
    errors: list[Any] = []
    try:
        for error in validator_cls(document).iter_errors():
            errors.append(error)
    except (Unresolvable, OpenAPIValidationError) as e:
        # Raised instead of yielded; the walk stops here.
        errors.append(e)
    return errors


async def check_conformance(
    validator: ConformanceValidator,
    document: dict[str, Any],
    version: str = SWAGGER_VERSION,
) -> dict[str, Any]:
    """Return the document unchanged if the validator accepts it.

    Raises ConformanceError with the validator's diagnostics if it rejects
    the document, or ValidatorUnavailableError if the validator fails to run.
    """
    try:
        errors = await validator.validate(document, version)
    except Exception as e:
        raise ValidatorUnavailableError(f"conformance validator failed to run: {e}") from e

    if errors:
        logger.debug("Validator reported %d error(s)", len(errors))
        raise ConformanceError(errors)
    return document

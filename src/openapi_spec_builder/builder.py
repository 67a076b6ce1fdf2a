"""Spec builder: turns a relaxed document into strict Swagger 2.0 JSON.

The pipeline (normalize, then check conformance) runs at most once per
successful build. Concurrent callers share the run that is in flight;
a failed run is not remembered, so the next call starts a fresh one.
"""

import asyncio
import copy
import json
import logging
from typing import Any, Mapping

from openapi_spec_builder.models import relaxed, strict
from openapi_spec_builder.normalizer import normalize
from openapi_spec_builder.validation import ConformanceValidator, OpenApiSpecValidator, check_conformance

logger = logging.getLogger(__name__)


class OpenApiSpecBuilder:
    """Builds, validates and serializes one strict document."""

    def __init__(
        self,
        spec: relaxed.Spec | Mapping[str, Any],
        validator: ConformanceValidator | None = None,
        strict_duplicates: bool = False,
    ):
        if isinstance(spec, relaxed.Spec):
            self._relaxed = spec.to_document()
        else:
            self._relaxed = copy.deepcopy(dict(spec))
        self.validator = validator or OpenApiSpecValidator()
        self.strict_duplicates = strict_duplicates
        self._strict_spec: dict[str, Any] | None = None
        self._pending: asyncio.Future | None = None

    async def get_strict_spec(self) -> dict[str, Any]:
        """Return the strict document, building it on first use.

        The returned dict is shared by every caller and must not be modified.
        """
        if self._strict_spec is not None:
            return self._strict_spec
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._build())
            self._pending.add_done_callback(_retrieve_exception)
        # Shielded so one caller giving up does not cancel the run for the rest.
        return await asyncio.shield(self._pending)

    async def get_strict_model(self) -> strict.Spec:
        """Return the strict document parsed into the typed model."""
        return strict.Spec.from_document(await self.get_strict_spec())

    async def to_json(self, indent: int | None = None) -> str:
        """Serialize the strict document, ready for swagger-ui and other tools."""
        document = await self.get_strict_spec()
        return json.dumps(document, indent=indent, ensure_ascii=False)

    async def _build(self) -> dict[str, Any]:
        try:
            logger.debug("Normalizing relaxed document")
            document = normalize(self._relaxed, strict_duplicates=self.strict_duplicates)
            document = await check_conformance(self.validator, document)
        except BaseException:
            self._pending = None
            raise
        logger.debug("Strict document built with %d path(s)", len(document["paths"]))
        self._strict_spec = document
        self._pending = None
        return document


def _retrieve_exception(task: asyncio.Future) -> None:
    # A run can fail after every waiter has been cancelled.
    if not task.cancelled():
        task.exception()

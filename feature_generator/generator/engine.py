from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import httpx
from openai import AsyncOpenAI, OpenAIError

from .deref import dereference_spec
from .errors import FilesystemError, GenerationError
from .fragment import fragment
from .model import GenerationRequest
from .render import feature_path, render_prompt

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"


def parse(api_docs: str) -> dict[str, str]:
    return fragment(dereference_spec(api_docs))


class FeatureGenerator:
    """Generates feature files from API documentation.

    Every operation of the document is sent on its own to the chat completion
    API and the answer is written to ``<destination>/[<tag>/]<name>.feature``.
    """

    def __init__(
        self,
        api_key: str,
        api_docs: str,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self._http_client = http_client
        self.api_docs = parse(api_docs)

    def generate(self, destination: str | os.PathLike[str], language: str) -> list[Path]:
        return asyncio.run(self.agenerate(destination, language))

    async def agenerate(self, destination: str | os.PathLike[str], language: str) -> list[Path]:
        logger.info("Feature generation started...")
        path = Path(destination).absolute()
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Cannot create output dir [{path}]: {exc}") from exc

        identifiers = sorted(self.api_docs)
        written: list[Path] = []
        first_error: Exception | None = None
        async with self._open_client() as client:
            tasks = [
                asyncio.create_task(self._create_feature(client, path, identifier, language))
                for identifier in identifiers
            ]
            for finished in asyncio.as_completed(tasks):
                try:
                    result = await finished
                except Exception as exc:
                    if first_error is None:
                        first_error = exc
                    continue
                if result is not None:
                    written.append(result)

        if first_error is not None:
            raise first_error
        logger.info(
            "Feature generation finished: %d written, %d skipped",
            len(written),
            len(identifiers) - len(written),
        )
        return written

    @asynccontextmanager
    async def _open_client(self) -> AsyncIterator[AsyncOpenAI]:
        client = AsyncOpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            http_client=self._http_client,
            max_retries=0,
        )
        try:
            yield client
        finally:
            # An injected http client belongs to the caller.
            if self._http_client is None:
                await client.close()

    async def _create_feature(
        self,
        client: AsyncOpenAI,
        destination: Path,
        identifier: str,
        language: str,
    ) -> Path | None:
        feature = feature_path(destination, identifier)
        if not _release(feature):
            logger.info("Feature [%s] already exists and cannot be deleted; skipping", feature)
            return None

        try:
            feature.parent.mkdir(parents=True, exist_ok=True)
            feature.touch(exist_ok=False)
        except OSError as exc:
            raise FilesystemError(f"Cannot create feature [{feature}]: {exc}") from exc

        request = GenerationRequest.from_identifier(identifier, self.api_docs[identifier], language)
        try:
            content = await self._complete(client, render_prompt(request), identifier)
            feature.write_bytes(content.encode("utf-8"))
        except OSError as exc:
            feature.unlink(missing_ok=True)
            raise FilesystemError(f"Cannot write feature [{feature}]: {exc}") from exc
        except BaseException:
            feature.unlink(missing_ok=True)
            raise

        logger.debug("Feature [%s] written", feature)
        return feature

    async def _complete(self, client: AsyncOpenAI, prompt: str, identifier: str) -> str:
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as exc:
            raise GenerationError(f"Completion request failed for [{identifier}]: {exc}") from exc

        content = _first_content(completion)
        if not content:
            raise GenerationError(f"Empty response for [{identifier}]")
        return content


def _release(feature: Path) -> bool:
    if not feature.exists():
        return True
    try:
        feature.unlink()
    except OSError:
        return False
    return True


def _first_content(completion: Any) -> str | None:
    choices = getattr(completion, "choices", None)
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else None

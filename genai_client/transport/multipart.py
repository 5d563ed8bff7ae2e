"""
Multipart payload encoding for upload requests.

Parts, in order:
  file             binary part named after FileContent.content_name
  model            always
  prompt           only when non-blank
  response_format  only when non-blank
  temperature      only when set

Stream sources are drained fully into one buffer before the body is built:
- chunked (81920 bytes), no length assumed in advance
- sync `read(n)` runs in a worker thread, async `read(n)` is awaited
- the cancellation token is checked between chunks

Preconditions are verified before any part is assembled; a violation raises
PayloadError and no partial body is ever produced.
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from genai_client.models.common import FileContent
from genai_client.models.translation import TranslationRequest
from genai_client.transport.cancellation import CancellationToken
from genai_client.validation import check_file_content

logger = logging.getLogger(__name__)

STREAM_CHUNK_SIZE = 81920

# httpx `files` entry: (name, (filename | None, content))
Part = Tuple[str, Tuple[Optional[str], Any]]


@dataclass
class MultipartPayload:
    """Ordered multipart parts, ready to pass to httpx as `files=`."""

    parts: List[Part] = field(default_factory=list)

    def add_file(self, name: str, filename: str, content: bytes) -> None:
        self.parts.append((name, (filename, content)))

    def add_text(self, name: str, value: Optional[str]) -> None:
        """Add a text part; blank or missing values are omitted."""
        if value is None or not str(value).strip():
            return
        self.parts.append((name, (None, str(value))))

    def part_names(self) -> List[str]:
        return [name for name, _ in self.parts]

    def get(self, name: str) -> Optional[Tuple[Optional[str], Any]]:
        for part_name, value in self.parts:
            if part_name == name:
                return value
        return None


async def read_stream(stream: Any, cancellation: Optional[CancellationToken] = None) -> bytes:
    """
    Drain a sync or async byte stream into memory.

    Raises:
        OperationCancelled: token cancelled between chunks.
    """
    token = cancellation or CancellationToken.none()
    buffer = bytearray()
    is_async = inspect.iscoroutinefunction(getattr(stream, "read", None))

    while True:
        token.raise_if_cancelled()
        if is_async:
            chunk = await stream.read(STREAM_CHUNK_SIZE)
        else:
            chunk = await asyncio.to_thread(stream.read, STREAM_CHUNK_SIZE)
        if not chunk:
            break
        buffer.extend(chunk)

    token.raise_if_cancelled()
    return bytes(buffer)


async def resolve_file_bytes(
    file_content: FileContent,
    cancellation: Optional[CancellationToken] = None,
) -> bytes:
    """Buffer wins over stream; the stream is only read when no buffer is set."""
    if file_content.source_content is not None:
        return file_content.source_content
    return await read_stream(file_content.source_stream, cancellation)


async def encode_translation(
    request: TranslationRequest,
    cancellation: Optional[CancellationToken] = None,
) -> MultipartPayload:
    """
    Build the multipart body for an audio translation request.

    Raises:
        PayloadError: missing audio file, no buffer nor stream, blank name.
        OperationCancelled: cancelled while draining the stream.
    """
    check_file_content(request.audio_file, "audio_file")

    audio = request.audio_file
    content = await resolve_file_bytes(audio, cancellation)

    payload = MultipartPayload()
    payload.add_file("file", audio.content_name, content)
    payload.add_text("model", request.model)
    payload.add_text("prompt", request.prompt)
    payload.add_text("response_format", request.response_format)
    if request.temperature is not None:
        payload.add_text("temperature", str(request.temperature))

    logger.debug(
        f"Encoded multipart payload ({len(content)} bytes)",
        extra={"parts": payload.part_names(), "content_name": audio.content_name},
    )
    return payload

"""
Audio translation façade.

Uploads an audio file as multipart/form-data and returns English text.
The audio source may be an in-memory buffer or a readable stream; see
transport.multipart for how the body is assembled.
"""

from typing import Optional

from genai_client.models.result import OperationResult
from genai_client.models.translation import TranslationRequest, TranslationResponse
from genai_client.services.base import BaseService
from genai_client.transport.cancellation import CancellationToken
from genai_client.transport.multipart import encode_translation


class TranslationService(BaseService):
    required_uris = ("audio_translation_uri",)

    async def get(
        self,
        request: TranslationRequest,
        cancellation: Optional[CancellationToken] = None,
    ) -> OperationResult[TranslationResponse]:
        """
        Translate audio into English.

        A missing audio file (or one with neither buffer nor stream) is a
        caller_input_error citing `audio_file`; nothing is sent.
        """
        rejected = self._check_request(request, cancellation)
        if rejected:
            return rejected

        return await self._http.post(
            self._uri("audio_translation_uri"),
            TranslationResponse,
            request,
            content_factory=encode_translation,
            cancellation=cancellation,
        )

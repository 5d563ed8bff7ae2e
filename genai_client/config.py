"""
Client configuration.

Environment-based options with OpenAI defaults. Loads a local .env file
when present so credentials never need to be hard-coded.

Path templates use positional `{0}` placeholders, filled by the URI builder
with thread/run/step identifiers.
"""

import os
from dataclasses import dataclass, fields
from typing import Literal, Optional

from dotenv import load_dotenv

load_dotenv()


ProviderType = Literal["openai", "azure"]

DEFAULT_BASE_ADDRESS = "https://api.openai.com"
DEFAULT_API_VERSION = "v1"
DEFAULT_AZURE_API_VERSION = "2024-05-01-preview"
DEFAULT_ASSISTANTS_HEADER = "assistants=v2"


@dataclass(frozen=True)
class OpenAIOptions:
    """Immutable client options shared by every façade."""

    provider: ProviderType = "openai"
    base_address: str = DEFAULT_BASE_ADDRESS
    api_version: str = DEFAULT_API_VERSION
    api_key: Optional[str] = None
    organization: Optional[str] = None
    assistants_header: Optional[str] = DEFAULT_ASSISTANTS_HEADER
    request_timeout_s: float = 120.0

    # Azure
    azure_resource_name: Optional[str] = None
    azure_deployment_id: Optional[str] = None
    azure_api_version: str = DEFAULT_AZURE_API_VERSION

    # Runs
    run_create_uri: str = "threads/{0}/runs"
    run_thread_and_run_create_uri: str = "threads/runs"
    run_get_uri: str = "threads/{0}/runs/{1}"
    run_list_uri: str = "threads/{0}/runs"
    run_modify_uri: str = "threads/{0}/runs/{1}"
    run_submit_tool_outputs_uri: str = "threads/{0}/runs/{1}/submit_tool_outputs"
    run_cancel_uri: str = "threads/{0}/runs/{1}/cancel"

    # Run steps
    run_steps_get_uri: str = "threads/{0}/runs/{1}/steps/{2}"
    run_steps_list_uri: str = "threads/{0}/runs/{1}/steps"

    # Moderation / audio
    moderation_uri: str = "moderations"
    audio_translation_uri: str = "audio/translations"

    @classmethod
    def from_env(cls) -> "OpenAIOptions":
        """
        Load options from environment variables.

        Unset variables fall back to the public OpenAI endpoint defaults.
        Path templates can be overridden with OPENAI_<FIELD> (upper case),
        e.g. OPENAI_RUN_LIST_URI.
        """
        overrides = {}
        for f in fields(cls):
            if f.name.endswith("_uri"):
                value = os.getenv(f"OPENAI_{f.name.upper()}")
                if value:
                    overrides[f.name] = value

        return cls(
            provider=os.getenv("OPENAI_PROVIDER", "openai").lower(),  # type: ignore
            base_address=os.getenv("OPENAI_BASE_ADDRESS", DEFAULT_BASE_ADDRESS),
            api_version=os.getenv("OPENAI_API_VERSION", DEFAULT_API_VERSION),
            api_key=os.getenv("OPENAI_API_KEY") or None,
            organization=os.getenv("OPENAI_ORGANIZATION") or None,
            assistants_header=os.getenv("OPENAI_ASSISTANTS_HEADER", DEFAULT_ASSISTANTS_HEADER) or None,
            request_timeout_s=float(os.getenv("OPENAI_REQUEST_TIMEOUT_S", "120")),
            azure_resource_name=os.getenv("AZURE_OPENAI_RESOURCE_NAME") or None,
            azure_deployment_id=os.getenv("AZURE_OPENAI_DEPLOYMENT_ID") or None,
            azure_api_version=os.getenv("AZURE_OPENAI_API_VERSION", DEFAULT_AZURE_API_VERSION),
            **overrides,
        )


def get_options() -> OpenAIOptions:
    """Re-read the environment each time (good for tests)."""
    return OpenAIOptions.from_env()

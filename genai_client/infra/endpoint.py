"""
Endpoint resolution.

Supplies the base address every resource path template is relative to.

Providers:

  Provider  Base address
  ────────  ──────────────────────────────────────────────────────────────
  openai    {base_address}/{api_version}/
  azure     https://{resource}.openai.azure.com/openai/deployments/{deployment}/
            (+ api-version query parameter on every call)

Invariants:
- resolve() is pure and safe to call concurrently
- Missing options → ConfigurationError at construction
- Blank base address → ConfigurationError at first resolve(), never a
  per-call failure
"""

from typing import Dict, List, Tuple

from genai_client.config import OpenAIOptions
from genai_client.errors import ConfigurationError


AZURE_URL_TEMPLATE = "https://{resource}.openai.azure.com/openai/deployments/{deployment}/"


class EndpointResolver:
    """Resolves the provider base address from immutable options."""

    def __init__(self, options: OpenAIOptions):
        if options is None:
            raise ConfigurationError("options")
        if options.provider not in ("openai", "azure"):
            raise ConfigurationError("provider", f"unsupported provider {options.provider!r}")
        self._options = options

    @property
    def provider(self) -> str:
        return self._options.provider

    def resolve(self) -> str:
        """Return the base address, always ending with '/'."""
        opts = self._options

        if opts.provider == "azure":
            if not (opts.azure_resource_name or "").strip():
                raise ConfigurationError("azure_resource_name")
            if not (opts.azure_deployment_id or "").strip():
                raise ConfigurationError("azure_deployment_id")
            return AZURE_URL_TEMPLATE.format(
                resource=opts.azure_resource_name.strip(),
                deployment=opts.azure_deployment_id.strip(),
            )

        base = (opts.base_address or "").strip()
        if not base:
            raise ConfigurationError("base_address")

        base = base.rstrip("/")
        version = (opts.api_version or "").strip("/ ")
        if version:
            return f"{base}/{version}/"
        return f"{base}/"

    def default_query(self) -> List[Tuple[str, str]]:
        """Query parameters the provider requires on every call."""
        if self._options.provider == "azure":
            return [("api-version", self._options.azure_api_version)]
        return []

    def auth_headers(self) -> Dict[str, str]:
        """Credential headers. Values are never logged."""
        key = self._options.api_key
        if not key:
            return {}
        if self._options.provider == "azure":
            return {"api-key": key}
        return {"Authorization": f"Bearer {key}"}

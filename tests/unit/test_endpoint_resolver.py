"""
tests/unit/test_endpoint_resolver.py

Tests for EndpointResolver.

Verifies:
✔ OpenAI base address is {base}/{version}/
✔ Azure base address uses resource and deployment
✔ Missing options / unsupported provider fail at construction
✔ Blank base address fails at resolve(), not per call
✔ Azure adds an api-version query parameter
✔ Auth headers per provider; none without a key
"""

import pytest

from genai_client.config import OpenAIOptions
from genai_client.errors import ConfigurationError
from genai_client.infra.endpoint import EndpointResolver


class TestOpenAIResolution:
    def test_default_base(self):
        resolver = EndpointResolver(OpenAIOptions())
        assert resolver.resolve() == "https://api.openai.com/v1/"

    def test_trailing_slash_normalized(self):
        resolver = EndpointResolver(OpenAIOptions(base_address="https://proxy.local/", api_version="v1"))
        assert resolver.resolve() == "https://proxy.local/v1/"

    def test_resolve_is_repeatable(self):
        resolver = EndpointResolver(OpenAIOptions())
        assert resolver.resolve() == resolver.resolve()

    def test_blank_base_raises_on_resolve(self):
        resolver = EndpointResolver(OpenAIOptions(base_address="  "))
        with pytest.raises(ConfigurationError) as exc:
            resolver.resolve()
        assert exc.value.setting == "base_address"

    def test_no_default_query(self):
        assert EndpointResolver(OpenAIOptions()).default_query() == []

    def test_bearer_auth(self):
        resolver = EndpointResolver(OpenAIOptions(api_key="sk-123"))
        assert resolver.auth_headers() == {"Authorization": "Bearer sk-123"}

    def test_no_key_no_auth_header(self):
        assert EndpointResolver(OpenAIOptions(api_key=None)).auth_headers() == {}


class TestAzureResolution:
    def test_azure_base(self, azure_options):
        resolver = EndpointResolver(azure_options)
        assert resolver.resolve() == "https://contoso.openai.azure.com/openai/deployments/gpt4o/"

    def test_azure_api_version_query(self, azure_options):
        resolver = EndpointResolver(azure_options)
        assert resolver.default_query() == [("api-version", "2024-05-01-preview")]

    def test_azure_api_key_header(self, azure_options):
        assert EndpointResolver(azure_options).auth_headers() == {"api-key": "az-key"}

    def test_missing_deployment_raises(self):
        resolver = EndpointResolver(OpenAIOptions(provider="azure", azure_resource_name="contoso"))
        with pytest.raises(ConfigurationError) as exc:
            resolver.resolve()
        assert exc.value.setting == "azure_deployment_id"


class TestConstruction:
    def test_none_options(self):
        with pytest.raises(ConfigurationError):
            EndpointResolver(None)

    def test_unsupported_provider(self):
        with pytest.raises(ConfigurationError) as exc:
            EndpointResolver(OpenAIOptions(provider="bedrock"))
        assert exc.value.setting == "provider"

from tools.config import DEFAULT_CACHE_BASE_URL, DEFAULT_CLOSE_BASE_URL, RefreshConfig


class TestRefreshConfig:
    """Test loading configuration from the environment."""

    def test_defaults(self):
        config = RefreshConfig.from_env({})

        assert config.close_api_key == ""
        assert config.cache_token == ""
        assert config.close_base_url == DEFAULT_CLOSE_BASE_URL
        assert config.cache_base_url == DEFAULT_CACHE_BASE_URL
        assert config.timeout == 20.0
        assert config.leads_csv == "./leads.csv"

    def test_from_env(self):
        config = RefreshConfig.from_env({
            "CLOSEIO_APIKEY": "key",
            "CACHE_TOKEN": "token",
            "CLOSE_BASE_URL": "https://close.test/api/v1/",
            "HTTP_TIMEOUT": "5",
            "LEADS_CSV": "/tmp/leads.csv"
        })

        assert config.close_api_key == "key"
        assert config.cache_token == "token"
        assert config.close_base_url == "https://close.test/api/v1"
        assert config.timeout == 5.0
        assert config.leads_csv == "/tmp/leads.csv"

    def test_invalid_timeout_falls_back_to_default(self):
        assert RefreshConfig.from_env({"HTTP_TIMEOUT": "twenty"}).timeout == 20.0
        assert RefreshConfig.from_env({"HTTP_TIMEOUT": "-1"}).timeout == 20.0
        assert RefreshConfig.from_env({"HTTP_TIMEOUT": ""}).timeout == 20.0

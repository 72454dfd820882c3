"""
Unit tests for shopify_rest_methods.config module.
"""

import pytest
import sys
import os
from unittest.mock import patch

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from shopify_rest_methods.config import ClientConfig
from shopify_rest_methods.exceptions import AuthenticationError, ValidationError


class TestClientConfig:
    """Test building and validating a ClientConfig."""

    def test_access_token_config(self):
        config = ClientConfig(shop_name="fooshop", access_token="shpat_token")

        assert config.shop_name == "fooshop.myshopify.com"
        assert config.base_url == "https://fooshop.myshopify.com"
        assert config.path_prefix == "admin/api/2024-10"
        assert config.auth is None
        assert config.default_headers()["X-Shopify-Access-Token"] == "shpat_token"

    def test_full_domain_is_kept(self):
        config = ClientConfig(shop_name="https://fooshop.myshopify.com/", access_token="shpat_token")

        assert config.shop_name == "fooshop.myshopify.com"

    def test_custom_domain_is_kept(self):
        config = ClientConfig(shop_name="shop.example.com", access_token="shpat_token")

        assert config.base_url == "https://shop.example.com"

    def test_basic_auth_config(self):
        config = ClientConfig(shop_name="fooshop", api_key="key", password="secret")

        assert config.auth == ("key", "secret")
        assert "X-Shopify-Access-Token" not in config.default_headers()

    def test_unversioned_path_prefix(self):
        config = ClientConfig(shop_name="fooshop", access_token="shpat_token", api_version=None)

        assert config.path_prefix == "admin"
        assert config.url_for("pages.json") == "https://fooshop.myshopify.com/admin/pages.json"

    def test_url_for(self):
        config = ClientConfig(shop_name="fooshop", access_token="shpat_token")

        assert config.url_for("products/1/images.json") == (
            "https://fooshop.myshopify.com/admin/api/2024-10/products/1/images.json"
        )

    def test_default_headers(self):
        config = ClientConfig(shop_name="fooshop", access_token="shpat_token", user_agent="my-app/1.0")

        headers = config.default_headers()
        assert headers["User-Agent"] == "my-app/1.0"
        assert headers["Content-Type"] == "application/json"
        assert headers["Accept"] == "application/json"

    @pytest.mark.parametrize("shop_name", ["", "   "])
    def test_empty_shop_name(self, shop_name):
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(shop_name=shop_name, access_token="shpat_token")

        assert exc_info.value.field == "shop_name"

    def test_missing_credentials(self):
        with pytest.raises(AuthenticationError) as exc_info:
            ClientConfig(shop_name="fooshop")

        assert "SHOPIFY_ACCESS_TOKEN" in str(exc_info.value)

    def test_api_key_without_password(self):
        with pytest.raises(AuthenticationError):
            ClientConfig(shop_name="fooshop", api_key="key")

    def test_config_is_immutable(self):
        config = ClientConfig(shop_name="fooshop", access_token="shpat_token")

        with pytest.raises(AttributeError):
            config.timeout = 5


class TestFromEnv:
    """Test loading configuration from the environment."""

    @patch('shopify_rest_methods.config.load_dotenv')
    def test_from_env(self, mock_load_dotenv):
        env = {
            "SHOPIFY_SHOP_NAME": "envshop",
            "SHOPIFY_ACCESS_TOKEN": "shpat_env",
            "SHOPIFY_API_VERSION": "2024-07",
            "SHOPIFY_TIMEOUT": "12",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ClientConfig.from_env()

        mock_load_dotenv.assert_called_once()
        assert config.shop_name == "envshop.myshopify.com"
        assert config.access_token == "shpat_env"
        assert config.path_prefix == "admin/api/2024-07"
        assert config.timeout == 12.0

    @patch('shopify_rest_methods.config.load_dotenv')
    def test_from_env_defaults(self, mock_load_dotenv):
        env = {"SHOPIFY_SHOP_NAME": "envshop", "SHOPIFY_API_KEY": "key", "SHOPIFY_PASSWORD": "secret"}
        with patch.dict(os.environ, env, clear=True):
            config = ClientConfig.from_env()

        assert config.auth == ("key", "secret")
        assert config.api_version == "2024-10"
        assert config.timeout == 30

    @patch('shopify_rest_methods.config.load_dotenv')
    def test_overrides_take_precedence(self, mock_load_dotenv):
        env = {"SHOPIFY_SHOP_NAME": "envshop", "SHOPIFY_ACCESS_TOKEN": "shpat_env"}
        with patch.dict(os.environ, env, clear=True):
            config = ClientConfig.from_env(shop_name="othershop", enable_logging=False)

        assert config.shop_name == "othershop.myshopify.com"
        assert config.enable_logging is False

    @patch('shopify_rest_methods.config.load_dotenv')
    def test_from_env_without_credentials(self, mock_load_dotenv):
        with patch.dict(os.environ, {"SHOPIFY_SHOP_NAME": "envshop"}, clear=True):
            with pytest.raises(AuthenticationError):
                ClientConfig.from_env()

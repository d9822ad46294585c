import pytest

from gist_snippet.errors import ConfigMissingError, CredentialValidationError
from gist_snippet.options import RequestOptions, coerce_options, verify_options


class TestCoerceOptions:
    """Tests for turning host input into RequestOptions."""

    def test_none_raises_config_missing(self):
        with pytest.raises(ConfigMissingError) as exc_info:
            coerce_options(None)

        assert "authToken" in str(exc_info.value)

    def test_non_mapping_raises_config_missing(self):
        with pytest.raises(ConfigMissingError):
            coerce_options("token")

    def test_camel_case_mapping(self):
        opts = coerce_options({
            "authToken": "x",
            "userAgent": "y",
            "useCache": True,
            "debug": True,
            "addHiddenField": True,
        })

        assert opts == RequestOptions("x", "y", True, True, True)

    def test_snake_case_mapping(self):
        opts = coerce_options({"auth_token": "x", "user_agent": "y", "use_cache": 1})

        assert opts.auth_token == "x"
        assert opts.use_cache is True

    def test_flags_default_to_false(self):
        opts = coerce_options({"authToken": "x", "userAgent": "y"})

        assert opts.use_cache is False
        assert opts.debug is False
        assert opts.add_hidden_field is False

    def test_unknown_keys_ignored(self):
        opts = coerce_options({"authToken": "x", "userAgent": "y", "colour": "blue"})

        assert opts == RequestOptions(auth_token="x", user_agent="y")

    def test_request_options_passed_through(self):
        opts = RequestOptions(auth_token="x", user_agent="y")

        assert coerce_options(opts) is opts


class TestVerifyOptions:
    def test_valid_credentials(self):
        opts = RequestOptions(auth_token="x", user_agent="y")

        assert verify_options(opts) is opts

    def test_missing_token(self):
        with pytest.raises(CredentialValidationError, match="auth token"):
            verify_options(RequestOptions(user_agent="y"))

    def test_missing_both_lists_both(self):
        with pytest.raises(CredentialValidationError) as exc_info:
            verify_options(RequestOptions())

        message = str(exc_info.value)
        assert "auth token" in message
        assert "User Agent" in message


class TestStringFlags:
    @pytest.mark.parametrize("value", ["false", "False", "0", "no", ""])
    def test_false_strings(self, value):
        opts = coerce_options({"authToken": "x", "userAgent": "y", "useCache": value, "debug": value})

        assert opts.use_cache is False
        assert opts.debug is False

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", " on "])
    def test_true_strings(self, value):
        opts = coerce_options({"authToken": "x", "userAgent": "y", "addHiddenField": value})

        assert opts.add_hidden_field is True

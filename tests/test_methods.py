import pytest

from restful import HttpMethod


class TestHttpMethod:
    @pytest.mark.parametrize("value", ["GET", "get", "Get", HttpMethod.GET])
    def test_parse(self, value):
        assert HttpMethod.parse(value) is HttpMethod.GET

    @pytest.mark.parametrize("value", ["", "HEAD", "OPTIONS", None])
    def test_parse_rejects_unsupported(self, value):
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            HttpMethod.parse(value)

    def test_members_are_strings(self):
        assert HttpMethod.PATCH == "PATCH"

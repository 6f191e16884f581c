import pytest

from libs.packaged.exceptions import PackagedError, UnknownMethodError
from libs.packaged.methods import RequestMethod


class TestFromText:
    @pytest.mark.parametrize("name", ["post", "POST", "Post", "pOsT"])
    def test_case_insensitive(self, name):
        assert RequestMethod.from_text(name) is RequestMethod.POST

    @pytest.mark.parametrize("method", list(RequestMethod))
    def test_every_member_resolves(self, method):
        assert RequestMethod.from_text(method.name.lower()) is method

    @pytest.mark.parametrize("name", ["FETCH", "", " get", "GE", "GETS"])
    def test_unknown_method(self, name):
        with pytest.raises(UnknownMethodError) as exc_info:
            RequestMethod.from_text(name)
        assert exc_info.value.name == name
        assert f"«{name}»" in str(exc_info.value)

    def test_unknown_method_is_value_error(self):
        with pytest.raises(ValueError):
            RequestMethod.from_text("SEND")
        with pytest.raises(PackagedError):
            RequestMethod.from_text("SEND")


class TestReliesOnBody:
    @pytest.mark.parametrize("method", list(RequestMethod))
    def test_only_post_put_patch(self, method):
        expected = method in {RequestMethod.POST, RequestMethod.PUT, RequestMethod.PATCH}
        assert method.relies_on_body() is expected

    def test_closed_set(self):
        assert [m.name for m in RequestMethod] == [
            "GET",
            "POST",
            "PUT",
            "DELETE",
            "HEAD",
            "OPTIONS",
            "TRACE",
            "PATCH",
            "CONNECT",
        ]


def test_str_is_method_name():
    assert str(RequestMethod.PATCH) == "PATCH"
    assert f"{RequestMethod.GET}" == "GET"

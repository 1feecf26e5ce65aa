"""URL 정리 테스트"""

import pytest

from normalizers.errors import InvalidOperationError, InvalidURLError
from normalizers.url_cleanup import (
    CleanupOperation,
    canonical,
    cleanup,
    cleanup_all,
    redirection,
)


class TestCleanupOperation:
    """CleanupOperation.parse 테스트"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("canonical", CleanupOperation.CANONICAL),
            ("  Redirection ", CleanupOperation.REDIRECTION),
            ("ALL", CleanupOperation.ALL),
            (CleanupOperation.ALL, CleanupOperation.ALL),
        ],
    )
    def test_parse(self, name, expected):
        assert CleanupOperation.parse(name) is expected

    @pytest.mark.parametrize("name", ["bogus", "", "canonical,all", None])
    def test_parse_unknown(self, name):
        with pytest.raises(InvalidOperationError):
            CleanupOperation.parse(name)


class TestCanonical:
    """canonical 테스트"""

    def test_drops_query_fragment_and_trailing_slash(self):
        assert canonical("https://Example.com/Path/To/?a=1#frag") == "https://Example.com/Path/To"

    def test_root_path(self):
        assert canonical("https://example.com/") == "https://example.com"

    def test_keeps_port_and_case(self):
        assert canonical("http://Example.com:8080/A/b?x=1") == "http://Example.com:8080/A/b"

    def test_strips_only_one_trailing_slash(self):
        assert canonical("https://example.com/a//") == "https://example.com/a/"

    @pytest.mark.parametrize(
        "url",
        [
            "https://Example.com/Path/To/?a=1#frag",
            "https://example.com",
            "http://api.example.com:8080/v1/items/?page=2",
        ],
    )
    def test_fixed_point(self, url):
        once = canonical(url)
        assert canonical(once) == once


class TestRedirection:
    """redirection 테스트"""

    def test_adds_www_and_lowercases_path(self):
        assert (
            redirection("https://example.com/Path/To/?x=1&y=2")
            == "https://www.example.com/path/to?x=1&y=2"
        )

    def test_lowercases_host(self):
        assert redirection("https://EXAMPLE.COM/") == "https://www.example.com"

    def test_subdomain_untouched(self):
        assert redirection("https://API.Example.com/v1") == "https://api.example.com/v1"

    def test_existing_www_untouched(self):
        assert redirection("https://WWW.Example.com/a") == "https://www.example.com/a"

    def test_port_ignored_for_www_decision(self):
        assert redirection("http://example.com:8080/a/") == "http://www.example.com:8080/a"

    def test_query_values_trailing_slash_stripped(self):
        """값의 끝 슬래시만 제거, 키는 그대로"""
        assert (
            redirection("https://www.example.com/a?next=/home/&ref/=x/")
            == "https://www.example.com/a?next=%2Fhome&ref%2F=x"
        )

    def test_query_order_preserved(self):
        assert redirection("https://www.example.com/?b=2&a=1") == "https://www.example.com?b=2&a=1"

    def test_blank_query_value_kept(self):
        assert redirection("https://www.example.com/a?flag=") == "https://www.example.com/a?flag="

    def test_fragment_dropped(self):
        assert redirection("https://www.example.com/a#top") == "https://www.example.com/a"

    def test_userinfo_preserved(self):
        assert redirection("https://User@Example.com/a") == "https://User@www.example.com/a"

    def test_non_utf8_query_bytes_preserved(self):
        """UTF-8이 아닌 퍼센트 인코딩 바이트도 원래 값 그대로"""
        assert redirection("https://www.example.com/s?q=caf%E9") == "https://www.example.com/s?q=caf%E9"
        assert redirection("https://www.example.com/s?q=%E9/") == "https://www.example.com/s?q=%E9"

    def test_utf8_query_value_round_trips(self):
        assert redirection("https://www.example.com/s?q=caf%C3%A9") == "https://www.example.com/s?q=caf%C3%A9"


class TestAll:
    """all 테스트"""

    def test_subdomain(self):
        assert cleanup_all("https://Sub.Example.com/Path/To/?x=1#frag") == "https://sub.example.com/path/to"

    def test_root_domain(self):
        assert cleanup_all("https://Example.com/Path/?x=1/") == "https://www.example.com/path"

    def test_equals_redirection_without_query(self):
        url = "http://example.com:8000/Docs/?page=1/#intro"
        assert cleanup_all(url) == redirection(url).split("?")[0]


class TestCleanup:
    """cleanup 디스패치/에러 테스트"""

    def test_operation_by_name(self):
        assert cleanup("https://example.com/A/", " ALL ") == "https://www.example.com/a"

    @pytest.mark.parametrize(
        "url",
        [
            "not-a-url",
            "",
            "/relative/path",
            "mailto:someone@example.com",
            "https://",
            "http://[::1",
            "http://example.com:abc/",
            "http://example.com:99999/",
        ],
    )
    def test_invalid_url(self, url):
        with pytest.raises(InvalidURLError) as exc_info:
            cleanup(url, CleanupOperation.CANONICAL)
        assert str(exc_info.value) == "invalid url"

    def test_invalid_operation(self):
        with pytest.raises(InvalidOperationError) as exc_info:
            cleanup("https://example.com", "bogus")
        assert "invalid operation" in str(exc_info.value)

    def test_invalid_url_checked_before_operation(self):
        with pytest.raises(InvalidURLError):
            cleanup("not-a-url", "bogus")

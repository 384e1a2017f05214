"""Tests for openria_tooling.routing (endpoint route patterns)."""

import pytest

from openria_tooling.routing import (
    DEFAULT_ROUTE_PATTERN,
    EndpointRoutePattern,
    domain_service_route,
    parse_route_pattern,
    resolve_route_pattern,
)


class TestDomainServiceRoute:
    def test_name_pattern_uses_simple_type_name(self) -> None:
        assert (
            domain_service_route("My.App.CustomerService", EndpointRoutePattern.NAME)
            == "CustomerService"
        )

    def test_name_pattern_for_nested_type(self) -> None:
        assert (
            domain_service_route("My.App.Outer+CustomerService", EndpointRoutePattern.NAME)
            == "CustomerService"
        )

    def test_wcf_pattern(self) -> None:
        assert (
            domain_service_route("My.App.CustomerService", EndpointRoutePattern.WCF)
            == "My-App-CustomerService.svc/binary"
        )

    def test_full_name_pattern(self) -> None:
        assert (
            domain_service_route("My.App.CustomerService", EndpointRoutePattern.FULL_NAME)
            == "My-App-CustomerService"
        )

    def test_default_is_wcf(self) -> None:
        assert DEFAULT_ROUTE_PATTERN is EndpointRoutePattern.WCF
        assert domain_service_route("Svc") == "Svc.svc/binary"

    def test_empty_type_name_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            domain_service_route("", EndpointRoutePattern.FULL_NAME)


class TestParseRoutePattern:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Name", EndpointRoutePattern.NAME),
            ("wcf", EndpointRoutePattern.WCF),
            ("FullName", EndpointRoutePattern.FULL_NAME),
            ("full_name", EndpointRoutePattern.FULL_NAME),
            (" FULLNAME ", EndpointRoutePattern.FULL_NAME),
        ],
    )
    def test_accepts_values_and_names(self, value: str, expected: EndpointRoutePattern) -> None:
        assert parse_route_pattern(value) is expected

    def test_unknown_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown endpoint route pattern"):
            parse_route_pattern("rest")


class TestResolveRoutePattern:
    def test_first_configured_wins(self) -> None:
        assert (
            resolve_route_pattern(EndpointRoutePattern.NAME, EndpointRoutePattern.FULL_NAME)
            is EndpointRoutePattern.NAME
        )

    def test_skips_unset(self) -> None:
        assert (
            resolve_route_pattern(None, EndpointRoutePattern.FULL_NAME)
            is EndpointRoutePattern.FULL_NAME
        )

    def test_falls_back_to_wcf(self) -> None:
        assert resolve_route_pattern() is EndpointRoutePattern.WCF
        assert resolve_route_pattern(None, None) is EndpointRoutePattern.WCF

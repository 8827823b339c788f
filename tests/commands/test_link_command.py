"""Tests for `linkto link`."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from linkto.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestLinkCommand:
    def test_quiet_html(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "link", "Home", "/", "-a", "class=nav"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == '<a href="/" class="nav">Home</a>'

    def test_empty_label_shows_url(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "link", "", "https://example.com"])
        assert result.stdout.strip() == (
            '<a href="https://example.com">https://example.com</a>'
        )

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", "Home", "/"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "href: /" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "link", "Shop", "shop#index", "--route"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["ok"] is True
        assert payload["op"] == "link_to"
        assert payload["data"]["href"] == "/shop"
        assert payload["data"]["linked"] is True

    def test_route_with_params(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "link", "Widget", "products#show", "--route", "-p", "id=42"]
        )
        assert result.stdout.strip() == '<a href="/products/42">Widget</a>'

    def test_method_form_with_confirm(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "link", "Delete", "/posts/7", "--method", "DELETE", "-d", "confirm=Sure?"],
        )
        assert result.exit_code == 0
        html = result.stdout.strip()
        assert html.startswith('<form class="button_to" method="post" action="/posts/7">')
        assert 'name="_method" value="delete"' in html
        assert '<button type="submit" data-confirm="Sure?">Delete</button>' in html

    def test_remote(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "link", "More", "/more", "--remote"])
        assert result.stdout.strip() == '<a href="/more" data-remote="true">More</a>'

    def test_back_with_referrer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "link", "Back", ":back", "--referrer", "http://shop.test/cart"]
        )
        assert result.stdout.strip() == '<a href="http://shop.test/cart">Back</a>'

    def test_back_without_referrer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "link", "Back", ":back"])
        assert result.stdout.strip() == '<a href="javascript:history.back()">Back</a>'


@pytest.mark.usefixtures("_isolated_project")
class TestConditionalLinkCommand:
    def test_if_false(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "link", "Admin", "/admin", "--if", "false"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Admin"

    def test_if_true(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "link", "Admin", "/admin", "--if", "true"])
        assert result.stdout.strip() == '<a href="/admin">Admin</a>'

    def test_unless_true(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "link", "Admin", "/admin", "--unless", "true"])
        assert result.stdout.strip() == "Admin"

    def test_unless_current_on_current_page(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "link", "Cart", "/cart", "--unless-current", "-r", "/cart?page=2"]
        )
        assert result.stdout.strip() == "Cart"

    def test_unless_current_with_query_check(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "-q",
                "link",
                "Cart",
                "/cart",
                "--unless-current",
                "--check-query",
                "-r",
                "/cart?page=2",
            ],
        )
        assert result.stdout.strip() == '<a href="/cart">Cart</a>'

    def test_unless_current_post_request(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "link", "Cart", "/cart", "--unless-current", "-r", "/cart"]
            + ["--request-method", "POST"],
        )
        assert result.stdout.strip() == '<a href="/cart">Cart</a>'

    def test_conflicting_conditions(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["link", "Cart", "/cart", "--if", "true", "--unless-current"]
        )
        assert result.exit_code == 2
        assert "Use only one of" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestLinkErrors:
    def test_unknown_route(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", "Refund", "shop#refund", "--route"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ROUTE_NOT_FOUND" in result.stderr
        assert "No route matches 'shop#refund'" in result.stderr

    def test_unknown_route_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "link", "Refund", "shop#refund", "--route"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "ROUTE_NOT_FOUND"

    def test_missing_route_parameter(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "link", "Widget", "products#show", "--route"])
        assert result.exit_code == 1
        assert "requires 'id'" in result.stderr

    def test_bad_attr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", "Home", "/", "-a", "=x"])
        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output

    def test_param_without_route(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", "Home", "/", "-p", "id=1"])
        assert result.exit_code == 2
        assert "--route" in result.output

    def test_back_with_route(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", "Back", ":back", "--route"])
        assert result.exit_code == 2

    def test_bad_method(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["link", "Go", "/", "--method", "fetch"])
        assert result.exit_code == 2

    def test_relative_request_url_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["link", "Cart", "/cart", "--unless-current", "-r", "cart"]
        )
        assert result.exit_code == 2
        assert "absolute" in result.output

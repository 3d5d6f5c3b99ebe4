"""
Tests for CLI commands: synthesize, check, catalog, and global options.
"""

import json
import logging
from pathlib import Path

from click.testing import CliRunner

from contractgen.main import cli


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Builder contract synthesizer" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestSynthesizeCommand:
    def test_synthesize(self, service_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--model", str(service_yml), "synthesize"])
        assert result.exit_code == 0
        assert "ExampleBaseClientBuilder" in result.output
        assert "enableEndpointDiscovery(boolean endpointDiscovery)" in result.output
        assert "deprecated_alias" in result.output
        assert "useFips(Boolean useFips)" in result.output

    def test_synthesize_json(self, service_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--model", str(service_yml), "synthesize", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["interface_name"] == "ExampleBaseClientBuilder"
        names = [m["name"] for m in data["methods"]]
        assert names[:2] == ["enableEndpointDiscovery", "endpointDiscoveryEnabled"]
        assert names.count("tokenProvider") == 2
        assert data["method_count"] == len(names)

    def test_synthesize_auto_detect(self, service_yml: Path, monkeypatch):
        monkeypatch.chdir(service_yml.parent)
        runner = CliRunner()
        result = runner.invoke(cli, ["synthesize", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["interface_name"] == "ExampleBaseClientBuilder"

    def test_synthesize_missing_model(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["synthesize"])
        assert result.exit_code == 1
        assert "No service.yml" in result.output

    def test_synthesize_missing_model_json(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(cli, ["synthesize", "--json"])
        assert result.exit_code == 1
        assert "error" in json.loads(result.output)


class TestCheckCommand:
    def test_check_valid(self, service_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--model", str(service_yml), "check"])
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_check_json(self, service_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--model", str(service_yml), "check", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["valid"] is True

    def test_check_invalid(self, tmp_path: Path):
        path = tmp_path / "service.yml"
        path.write_text("- not a mapping\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--model", str(path), "check"])
        assert result.exit_code == 1
        assert "Expected a YAML mapping" in result.output


class TestCatalogCommand:
    def test_catalog(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["catalog"])
        assert result.exit_code == 0
        assert "endpoint_discovery" in result.output
        assert "client_context_params (per param)" in result.output

    def test_catalog_json(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["catalog", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["key"] == "endpoint_discovery"
        assert data[-1]["key"] == "sigv4a_signing_region_set"


class TestLoggingFlags:
    def test_debug_flag_sets_package_level(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--debug", "catalog", "--json"])
        assert result.exit_code == 0
        assert logging.getLogger("contractgen").level == logging.DEBUG

    def test_quiet_flag(self):
        runner = CliRunner()
        runner.invoke(cli, ["--quiet", "catalog"])
        assert logging.getLogger("contractgen").level == logging.ERROR

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("CONTRACTGEN_LOG_LEVEL", "ERROR")
        runner = CliRunner()
        runner.invoke(cli, ["catalog"])
        assert logging.getLogger("contractgen").level == logging.ERROR

    def test_verbose_logs_model_load(self, service_yml: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "--model", str(service_yml), "synthesize"])
        assert result.exit_code == 0
        assert "[config.loader] Loaded service model 'Example'" in result.output

"""Tests for variants and signing commands."""


class TestVariantsCommand:
    """Listing the variant matrix."""

    def test_lists_all_six_variants(self, cli_runner, cli_app):
        result = cli_runner.invoke(cli_app, ["variants"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("devDebug")
        assert lines[-1].startswith("productionRelease")

    def test_rows_include_identity_and_task(self, cli_runner, cli_app):
        result = cli_runner.invoke(cli_app, ["variants"])

        assert "com.example.mini_coding_challenges.staging" in result.output
        assert "assembleStagingRelease" in result.output
        assert "installStagingRelease" in result.output
        assert "Mini Coding Challenges" in result.output

    def test_needs_no_signing(self, cli_runner, app_with_mocks, mock_variant_resolver):
        mock_variant_resolver.list_variants.return_value = []

        result = cli_runner.invoke(app_with_mocks, ["variants"])

        assert result.exit_code == 0
        mock_variant_resolver.resolve_build.assert_not_called()


class TestSigningCommand:
    """Showing the winning signing source."""

    def test_no_source_fails(self, cli_runner, cli_app):
        result = cli_runner.invoke(cli_app, ["signing"])

        assert result.exit_code == 1
        assert "No signing configuration found" in result.output

    def test_properties_file_source_masks_passwords(
        self, cli_runner, cli_app, write_key_properties
    ):
        write_key_properties()

        result = cli_runner.invoke(cli_app, ["signing"])

        assert result.exit_code == 0
        assert "properties_file" in result.output
        assert "upload" in result.output
        assert "file-store-pass" not in result.output
        assert "file-key-pass" not in result.output
        assert "Usable" in result.output

    def test_default_keystore_reported_unusable(
        self, cli_runner, cli_app, write_default_keystore
    ):
        write_default_keystore()

        result = cli_runner.invoke(cli_app, ["signing"])

        assert result.exit_code == 0
        assert "default_keystore" in result.output
        assert "Not usable" in result.output
        assert "key_alias" in result.output

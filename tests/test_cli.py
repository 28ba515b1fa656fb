"""Test the command line interface."""

from unittest.mock import patch

from typer.testing import CliRunner

from src.cli.main import app

runner = CliRunner()


class TestRewriteCommand:
    def test_rewrite_to_output_file(self, tmp_path, ingress_manifest):
        manifest = tmp_path / "ingress.yaml"
        manifest.write_text(ingress_manifest)
        output = tmp_path / "out.yaml"

        result = runner.invoke(
            app, ["rewrite", str(manifest), "--kube-version", "1.22", "-o", str(output)]
        )

        assert result.exit_code == 0
        assert "apiVersion: networking.k8s.io/v1\nkind: Ingress\n" in output.read_text()
        assert manifest.read_text() == ingress_manifest

    def test_rewrite_in_place(self, tmp_path, ingress_manifest):
        manifest = tmp_path / "ingress.yaml"
        manifest.write_text(ingress_manifest)

        result = runner.invoke(app, ["rewrite", str(manifest), "-k", "1.19", "--in-place"])

        assert result.exit_code == 0
        assert "networking.k8s.io/v1beta1" in manifest.read_text()

    def test_rewrite_to_stdout(self, tmp_path, ingress_manifest):
        manifest = tmp_path / "ingress.yaml"
        manifest.write_text(ingress_manifest)

        result = runner.invoke(app, ["rewrite", str(manifest), "-k", "1.25"])

        assert result.exit_code == 0
        assert "apiVersion: networking.k8s.io/v1" in result.output

    def test_rewrite_invalid_version(self, tmp_path, ingress_manifest):
        manifest = tmp_path / "ingress.yaml"
        manifest.write_text(ingress_manifest)

        result = runner.invoke(app, ["rewrite", str(manifest), "-k", "not-a-version"])

        assert result.exit_code == 1
        assert "Invalid Kubernetes version" in result.output

    def test_rewrite_missing_map_file(self, tmp_path, ingress_manifest):
        manifest = tmp_path / "ingress.yaml"
        manifest.write_text(ingress_manifest)

        result = runner.invoke(
            app,
            ["rewrite", str(manifest), "-k", "1.22", "--map-file", str(tmp_path / "none.yaml")],
        )

        assert result.exit_code == 1
        assert "Failed to load mapping file" in result.output


class TestMapCommand:
    @patch("src.api.mapping_service.K8sClient")
    def test_map_dry_run(self, mock_client_cls, mock_k8s_client, release_secret):
        mock_k8s_client.get_json.return_value = {"items": [release_secret()]}
        mock_client_cls.from_kube_config.return_value = mock_k8s_client

        result = runner.invoke(app, ["map", "web", "-n", "apps", "--dry-run"])

        assert result.exit_code == 0
        assert "would be updated" in result.output
        mock_k8s_client.apply.assert_not_called()
        kube_config = mock_client_cls.from_kube_config.call_args[0][0]
        assert kube_config.context is None

    @patch("src.api.mapping_service.K8sClient")
    def test_map_updates_release(self, mock_client_cls, mock_k8s_client, release_secret):
        mock_k8s_client.get_json.return_value = {"items": [release_secret()]}
        mock_client_cls.from_kube_config.return_value = mock_k8s_client

        result = runner.invoke(app, ["map", "web", "-n", "apps", "--context", "prod"])

        assert result.exit_code == 0
        assert "updated" in result.output
        assert mock_k8s_client.apply.call_count == 2
        assert mock_client_cls.from_kube_config.call_args[0][0].context == "prod"

    @patch("src.api.mapping_service.K8sClient")
    def test_map_release_not_found(self, mock_client_cls, mock_k8s_client):
        mock_client_cls.from_kube_config.return_value = mock_k8s_client

        result = runner.invoke(app, ["map", "missing", "-n", "apps"])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestMappingsCommand:
    def test_list_default_mappings(self):
        result = runner.invoke(app, ["mappings"])

        assert result.exit_code == 0
        assert "mappings" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "k8s-api-mapper" in result.output

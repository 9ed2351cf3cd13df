from __future__ import annotations

import json

import pytest
import yaml

from kotsmigrate.cli import image, render


def test_render_yaml(capsys: pytest.CaptureFixture[str]):
    """Tests rendering the Pod manifest as YAML."""
    render(namespace="kots-ns", registry="registry.example.com", tag="v1.2.3")
    manifest = yaml.safe_load(capsys.readouterr().out)

    assert manifest["kind"] == "Pod"
    assert manifest["metadata"]["namespace"] == "kots-ns"
    assert manifest["metadata"]["name"].startswith("kotsadm-migrations-")
    assert manifest["spec"]["securityContext"] == {"runAsUser": 1001, "fsGroup": 1001}
    assert manifest["spec"]["containers"][0]["image"] == "registry.example.com/kotsadm-migrations:v1.2.3"


def test_render_json_restricted(capsys: pytest.CaptureFixture[str]):
    """Tests rendering a restricted-runtime Pod as JSON."""
    render(
        namespace="kots-ns",
        restricted_runtime=True,
        registry="registry.example.com",
        tag="v1.2.3",
        format="json",
        random_suffix=True,
    )
    manifest = json.loads(capsys.readouterr().out)

    assert "securityContext" not in manifest["spec"]
    assert manifest["metadata"]["name"].count("-") == 3


def test_render_partial_override(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    """Tests that a flag overrides only its own environment variable."""
    monkeypatch.setenv("KOTSADM_REGISTRY", "quay.io/kotsadm")
    monkeypatch.setenv("KOTSADM_TAG", "v1.0.0")

    render(namespace="kots-ns", tag="v2.0.0", format="json")
    manifest = json.loads(capsys.readouterr().out)
    assert manifest["spec"]["containers"][0]["image"] == "quay.io/kotsadm/kotsadm-migrations:v2.0.0"


def test_render_empty_namespace():
    """Tests that the CLI refuses an empty namespace."""
    with pytest.raises(SystemExit) as exc_info:
        render(namespace="  ", registry="registry.example.com", tag="v1.2.3")
    assert exc_info.value.code == 1


def test_image(capsys: pytest.CaptureFixture[str]):
    """Tests printing the image reference."""
    image(registry="registry.example.com", tag="v1.2.3")
    assert capsys.readouterr().out == "registry.example.com/kotsadm-migrations:v1.2.3\n"

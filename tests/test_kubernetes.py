import os

from promptparts.kubernetes import find_kube_context, get_kube_context, parse_kubectl_file

CONTEXT_AND_NS = """
apiVersion: v1
clusters: []
contexts:
- context:
    cluster: test_cluster
    user: test_user
    namespace: test_namespace
  name: test_context
current-context: test_context
kind: Config
preferences: {}
users: []
"""


def test_parse_empty_config():
    assert get_kube_context("") is None


def test_parse_no_config():
    text = """
apiVersion: v1
clusters: []
contexts: []
current-context: ""
kind: Config
preferences: {}
users: []
"""
    assert get_kube_context(text) is None


def test_parse_only_context():
    text = """
apiVersion: v1
clusters: []
contexts:
- context:
    cluster: test_cluster
    user: test_user
  name: test_context
current-context: test_context
kind: Config
preferences: {}
users: []
"""
    assert get_kube_context(text) == ("test_context", "")


def test_parse_context_and_ns():
    assert get_kube_context(CONTEXT_AND_NS) == ("test_context", "test_namespace")


def test_parse_multiple_contexts():
    text = """
apiVersion: v1
clusters: []
contexts:
- context:
    cluster: another_cluster
    user: another_user
    namespace: another_namespace
  name: another_context
- context:
    cluster: test_cluster
    user: test_user
    namespace: test_namespace
  name: test_context
current-context: test_context
kind: Config
preferences: {}
users: []
"""
    assert get_kube_context(text) == ("test_context", "test_namespace")


def test_parse_broken_config():
    assert get_kube_context("\n---\ndummy_string\n") is None


def test_parse_kubectl_file_missing(tmp_path):
    assert parse_kubectl_file(tmp_path / "missing") is None


def test_find_from_home(tmp_path):
    kube = tmp_path / ".kube"
    kube.mkdir()
    (kube / "config").write_text(CONTEXT_AND_NS, encoding="utf-8")
    assert find_kube_context(None, tmp_path) == ("test_context", "test_namespace")


def test_find_from_kubeconfig_list_skips_missing(tmp_path):
    good = tmp_path / "good.yaml"
    good.write_text(CONTEXT_AND_NS, encoding="utf-8")
    kubeconfig = os.pathsep.join([str(tmp_path / "missing.yaml"), str(good)])
    assert find_kube_context(kubeconfig, None) == ("test_context", "test_namespace")


def test_find_without_home_or_kubeconfig():
    assert find_kube_context(None, None) is None
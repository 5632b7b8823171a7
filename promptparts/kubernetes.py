"""Reading the current Kubernetes context and namespace from kubeconfig."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from promptparts.utils import read_file


def get_kube_context(contents: str) -> tuple[str, str] | None:
    """Return ``(context, namespace)`` from kubeconfig YAML text.

    The namespace is an empty string when the current context has none.
    """
    try:
        docs = list(yaml.safe_load_all(contents))
    except yaml.YAMLError:
        return None
    if not docs:
        return None
    conf = docs[0]
    if not isinstance(conf, dict):
        return None

    current_ctx = conf.get("current-context")
    if not isinstance(current_ctx, str) or not current_ctx:
        return None

    namespace = ""
    contexts = conf.get("contexts")
    if isinstance(contexts, list):
        match = next(
            (
                ctx
                for ctx in contexts
                if isinstance(ctx, dict) and ctx.get("name") == current_ctx
            ),
            None,
        )
        if match is not None:
            inner = match.get("context")
            if isinstance(inner, dict) and isinstance(inner.get("namespace"), str):
                namespace = inner["namespace"]

    return current_ctx, namespace


def parse_kubectl_file(path: str | os.PathLike[str]) -> tuple[str, str] | None:
    """Read a kubeconfig file and return its current context, if any."""
    try:
        contents = read_file(path)
    except (OSError, UnicodeDecodeError):
        return None
    return get_kube_context(contents)


def find_kube_context(
    kubeconfig: str | None, home: str | os.PathLike[str] | None
) -> tuple[str, str] | None:
    """Find the current context from ``$KUBECONFIG`` or ``~/.kube/config``.

    ``kubeconfig`` is a path list separated by ``os.pathsep``; the first file
    that yields a context wins.
    """
    if kubeconfig is not None:
        for filename in kubeconfig.split(os.pathsep):
            result = parse_kubectl_file(filename)
            if result is not None:
                return result
        return None
    if home is None:
        return None
    return parse_kubectl_file(Path(home) / ".kube" / "config")
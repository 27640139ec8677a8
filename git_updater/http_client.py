"""Outbound HTTP client configuration for remote checks."""

import httpx

from .config import UpdaterSettings


def client_options(
    settings: UpdaterSettings,
    access_token: str | None = None,
) -> dict:
    """Keyword arguments for ``httpx.Client``.

    ``verify_ssl: false`` turns off certificate verification for hosts with
    broken certificate bundles.
    """
    headers = {"user-agent": "git-updater"}
    if access_token:
        headers["authorization"] = f"token {access_token}"

    return {
        "verify": settings.verify_ssl,
        "timeout": httpx.Timeout(settings.timeout),
        "headers": headers,
        "follow_redirects": True,
    }

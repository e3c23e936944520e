"""TLS/SSL configuration for talking to agents over HTTPS.

This module provides the TLS settings used to build the httpx client an
`A2AClient` owns when the caller does not supply one.
"""

import ssl

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx


_MIN_VERSIONS = {
    'TLSv1_2': ssl.TLSVersion.TLSv1_2,
    'TLSv1_3': ssl.TLSVersion.TLSv1_3,
}


@dataclass
class TLSConfig:
    """TLS/SSL configuration for agent connections.

    Attributes:
        enabled: Whether certificate verification is enabled. Defaults to True.
        verify: Whether to verify server certificates. Can be a boolean,
            path to CA bundle file, or ssl.SSLContext. Defaults to True.
        cert: Client certificate for mTLS. Can be a tuple of (cert_file, key_file)
            or (cert_file, key_file, password). Defaults to None.
        ca_cert: Path to CA certificate file for server verification.
            Defaults to None (use system defaults).
        min_version: Minimum TLS version, 'TLSv1_2' or 'TLSv1_3'.
        verify_hostname: Whether to verify hostname in certificate.
            Defaults to True.
    """

    enabled: bool = True
    verify: bool | str | ssl.SSLContext = True
    cert: tuple[str, str] | tuple[str, str, str] | None = None
    ca_cert: str | Path | None = None
    min_version: str = 'TLSv1_2'
    verify_hostname: bool = True

    def create_ssl_context(self) -> ssl.SSLContext:
        """Create an SSL context from this configuration.

        Returns:
            A configured ssl.SSLContext instance.
        """
        if isinstance(self.verify, ssl.SSLContext):
            return self.verify

        cafile = None
        if self.ca_cert:
            cafile = str(self.ca_cert)
        elif isinstance(self.verify, str):
            cafile = self.verify

        context = ssl.create_default_context(cafile=cafile)
        context.minimum_version = _MIN_VERSIONS.get(
            self.min_version, ssl.TLSVersion.TLSv1_2
        )

        if self.verify is False:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        else:
            context.check_hostname = self.verify_hostname

        if self.cert:
            password = self.cert[2] if len(self.cert) == 3 else None
            context.load_cert_chain(
                self.cert[0], self.cert[1], password=password
            )

        return context

    def create_httpx_client(self, **kwargs: Any) -> httpx.AsyncClient:
        """Create an httpx AsyncClient with this TLS configuration.

        Args:
            **kwargs: Additional arguments passed to httpx.AsyncClient.

        Returns:
            Configured httpx.AsyncClient instance.
        """
        if not self.enabled:
            return httpx.AsyncClient(verify=False, **kwargs)
        return httpx.AsyncClient(verify=self.create_ssl_context(), **kwargs)

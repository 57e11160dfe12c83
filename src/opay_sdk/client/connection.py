from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import requests

from ..core.endpoints import AuthScheme, EndpointSpec, HttpMethod
from ..core.errors import ParseError, TransportError, raise_for_provider_error
from .auth import RequestSigner, canonical_json, canonical_query
from .settings import OPaySettings

logger = logging.getLogger(__name__)

Params = Optional[Mapping[str, Any]]

_BODY_SNIPPET = 200


@dataclass
class PreparedRequest:
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[str] = None
    # ordered (key, value) pairs so the query string follows the signed key order
    params: List[Tuple[str, str]] = field(default_factory=list)

    def redacted_headers(self) -> Dict[str, str]:
        out = dict(self.headers)
        if "Authorization" in out:
            out["Authorization"] = "Bearer ***"
        return out


class ConnectionClient:
    """Thin REST client for the OPay API.

    - Serializes parameters to canonical (key-sorted) JSON
    - Adds MerchantId + Bearer authorization headers
    - Returns the provider's JSON object unchanged

    One call is one HTTP request: nothing is retried or cached. A single
    instance is shared by every feature module built on it.
    """

    def __init__(
        self,
        settings: OPaySettings,
        *,
        signer: Optional[RequestSigner] = None,
        raise_on_provider_error: bool = False,
    ):
        # only a signer built here follows later reconfiguration
        self._owns_signer = signer is None
        self.signer = signer or RequestSigner(settings)
        self.settings = settings
        self.raise_on_provider_error = raise_on_provider_error

    @property
    def settings(self) -> OPaySettings:
        return self._settings

    @settings.setter
    def settings(self, value: OPaySettings) -> None:
        self._settings = value
        if self._owns_signer:
            self.signer.settings = value

    def _resolve(self, endpoint: Union[EndpointSpec, str], method: Optional[Union[HttpMethod, str]]) -> EndpointSpec:
        if isinstance(endpoint, EndpointSpec):
            spec = endpoint
        else:
            spec = EndpointSpec(name=endpoint, path=endpoint)
        if method is not None:
            m = HttpMethod(str(getattr(method, "value", method)).upper())
            if m != spec.method:
                spec = EndpointSpec(name=spec.name, path=spec.path, method=m, auth=spec.auth)
        return spec

    def prepare(
        self,
        parameters: Params,
        endpoint: Union[EndpointSpec, str],
        method: Optional[Union[HttpMethod, str]] = None,
    ) -> PreparedRequest:
        spec = self._resolve(endpoint, method)
        payload = canonical_json(parameters)
        headers = self.signer.headers(spec.auth, payload)
        url = f"{self.settings.base_url}{spec.path}"

        if spec.method == HttpMethod.POST:
            headers["Content-Type"] = "application/json"
            return PreparedRequest(method=spec.method.value, url=url, headers=headers, body=payload)

        query = canonical_query(parameters)
        return PreparedRequest(method=spec.method.value, url=url, headers=headers, params=query)

    def send(
        self,
        parameters: Params,
        endpoint: Union[EndpointSpec, str],
        method: Optional[Union[HttpMethod, str]] = None,
    ) -> Dict[str, Any]:
        req = self.prepare(parameters, endpoint, method)
        logger.debug("OPay request %s %s", req.method, req.url)

        try:
            resp = requests.request(
                req.method,
                req.url,
                headers=req.headers,
                params=req.params or None,
                data=req.body.encode("utf-8") if req.body is not None else None,
                timeout=self.settings.timeout_sec,
            )
        except requests.RequestException as e:
            logger.warning("OPay request failed: %s %s (%s)", req.method, req.url, e)
            raise TransportError(f"OPay request failed: {req.method} {req.url}: {e}", url=req.url) from e

        logger.debug("OPay response %s for %s %s", resp.status_code, req.method, req.url)
        data = self._parse(resp)
        if self.raise_on_provider_error:
            raise_for_provider_error(data)
        return data

    def post(self, parameters: Params, path: Union[EndpointSpec, str]) -> Dict[str, Any]:
        return self.send(parameters, path, HttpMethod.POST)

    def get(self, parameters: Params, path: Union[EndpointSpec, str]) -> Dict[str, Any]:
        return self.send(parameters, path, HttpMethod.GET)

    @staticmethod
    def _parse(resp: requests.Response) -> Dict[str, Any]:
        status = int(resp.status_code)
        try:
            data = resp.json()
        except ValueError as e:
            snippet = (resp.text or "")[:_BODY_SNIPPET]
            logger.warning("OPay returned a non-JSON body (HTTP %s)", status)
            raise ParseError(f"OPay returned a non-JSON body (HTTP {status}): {snippet!r}", status_code=status, body=snippet) from e

        if not isinstance(data, dict):
            snippet = (resp.text or "")[:_BODY_SNIPPET]
            raise ParseError(
                f"OPay returned JSON {type(data).__name__}, expected an object (HTTP {status})",
                status_code=status,
                body=snippet,
            )
        return data

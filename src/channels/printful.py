# src/channels/printful.py
# Printful REST client for the bulk pipeline:
#   ingest_asset(bytes, mime)                -> RemoteFileHandle   (POST /files)
#   create_product(title, thumb, variants)   -> RemoteProductRecord (POST /store/products)
# plus the read calls behind the status probe and template detection.
#
# Every response body carries a numeric "code"; anything but 200 is an API error.

from __future__ import annotations
from typing import Any, Dict, List, Optional
import base64
import json
import os
import httpx
from loguru import logger
from pydantic import ValidationError
from catalog.models import RemoteFileHandle, SyncVariant
from .base import CatalogClient, NetworkError, RemoteAPIError, RemoteProductRecord

DEFAULT_BASE_URL = "https://api.printful.com"
SUCCESS_CODE = 200


class PrintfulClient(CatalogClient):
    name = "printful"

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.token = token
        self.base = base_url.rstrip("/")
        self._http = httpx.Client(timeout=timeout, transport=transport)

    @classmethod
    def from_env(cls) -> "PrintfulClient":
        return cls(
            token=os.getenv("PRINTFUL_TOKEN", ""),
            base_url=os.getenv("PRINTFUL_API", DEFAULT_BASE_URL),
            timeout=float(os.getenv("PRINTFUL_TIMEOUT", "30")),
        )

    @property
    def configured(self) -> bool:
        return bool(self.token)

    def close(self) -> None:
        self._http.close()

    # ---------- request contract ----------
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base}{path}"
        try:
            r = self._http.request(method, url, headers=self._headers(), json=body)
            data = r.json()
        except httpx.HTTPError as exc:
            raise NetworkError(f"{method} {path}: {exc}") from exc
        except ValueError as exc:
            # non-JSON body (proxy error page, truncated response)
            raise NetworkError(f"{method} {path}: invalid JSON response") from exc

        if not isinstance(data, dict):
            raise NetworkError(f"{method} {path}: unexpected response shape")

        code = data.get("code")
        if isinstance(code, int) and code != SUCCESS_CODE:
            raise RemoteAPIError(code, self._error_detail(data))
        return data

    @staticmethod
    def _error_detail(data: Dict[str, Any]) -> str:
        if data.get("result"):
            return str(data["result"])
        err = data.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
        return json.dumps(data)

    @staticmethod
    def _result_with_id(res: Dict[str, Any], what: str) -> Dict[str, Any]:
        result = res.get("result")
        if not isinstance(result, dict) or not isinstance(result.get("id"), int):
            raise RemoteAPIError(SUCCESS_CODE, f"{what} returned no usable id")
        return result

    # ---------- pipeline operations ----------
    def ingest_asset(self, data: bytes, mime_type: str) -> RemoteFileHandle:
        encoded = base64.b64encode(data).decode("ascii")
        res = self._request("POST", "/files", {
            "type": "default",
            "url": f"data:{mime_type};base64,{encoded}",
        })
        result = self._result_with_id(res, "file upload")
        try:
            handle = RemoteFileHandle(
                remote_file_id=result["id"],
                preview_url=result.get("preview_url") or result.get("url") or "",
            )
        except ValidationError as exc:
            raise RemoteAPIError(SUCCESS_CODE, f"file upload returned an unusable file: {exc.error_count()} invalid field(s)") from exc
        logger.debug(f"Ingested asset as Printful file {handle.remote_file_id}")
        return handle

    def create_product(self, title: str, thumbnail_url: str, variants: List[SyncVariant]) -> RemoteProductRecord:
        payload = {
            "sync_product": {"name": title, "thumbnail": thumbnail_url},
            "sync_variants": [self._to_sync_variant(v) for v in variants],
        }
        res = self._request("POST", "/store/products", payload)
        result = self._result_with_id(res, "product creation")
        try:
            return RemoteProductRecord(**result)
        except ValidationError as exc:
            raise RemoteAPIError(SUCCESS_CODE, f"product creation returned an unusable record: {exc.error_count()} invalid field(s)") from exc

    # ---------- read helpers ----------
    def list_products(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/store/products").get("result") or []

    def get_product(self, product_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/store/products/{product_id}").get("result") or {}

    def get_catalog_product(self, product_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/products/{product_id}").get("result") or {}

    # ---------- shaping helpers ----------
    @staticmethod
    def _to_sync_variant(v: SyncVariant) -> Dict[str, Any]:
        return {
            "variant_id": v.remote_variant_id,
            "retail_price": v.retail_price,
            "files": [
                {
                    "type": "default",
                    "id": v.attached_file.remote_file_id,
                    "url": v.attached_file.preview_url,
                }
            ],
        }

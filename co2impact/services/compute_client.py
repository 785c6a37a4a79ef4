"""
Remote Compute Client - CO2 Impact Dashboard
co2impact/services/compute_client.py

HTTP boundary to the external CO2 computation service.

    call_fn(name, payload)  ->  POST {COMPUTE_API_URL}{COMPUTE_FN_PATH}/{name}

Operations:
  co2_dashboard            {regions}
  co2_marginal_reduction   {regions}
  co2_policy_pathway       {regions, startYear, targetYear, targetSharePct}

The computation itself lives in the service; this module only builds
payloads, maps HTTP failures to ComputeServiceException subclasses and
validates response shapes.
"""

from typing import Any, Dict, Optional, Sequence, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from co2impact.config import Settings, get_settings
from co2impact.core.exceptions import (
    ComputeRequestError,
    ComputeResponseError,
    ComputeUnavailableError,
    UnknownOperationError,
)
from co2impact.models.policy import PathwayParams
from co2impact.models.region import Region
from co2impact.models.results import DashboardResult, MarginalResult, PathwayResult

logger = structlog.get_logger(__name__)

CO2_DASHBOARD = "co2_dashboard"
CO2_MARGINAL_REDUCTION = "co2_marginal_reduction"
CO2_POLICY_PATHWAY = "co2_policy_pathway"

OPERATIONS = (CO2_DASHBOARD, CO2_MARGINAL_REDUCTION, CO2_POLICY_PATHWAY)

ResultT = TypeVar("ResultT", bound=BaseModel)


def regions_payload(regions: Sequence[Region]) -> list:
    return [r.model_dump() for r in regions]


def _error_detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200]
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)[:200]


class RemoteComputeClient:
    """Thin async client for the compute service's function-call API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.COMPUTE_API_KEY is not None:
            headers["Authorization"] = f"Bearer {self.settings.COMPUTE_API_KEY.get_secret_value()}"
        return headers

    async def call_fn(self, operation_name: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Invoke one remote operation.

        Args:
            operation_name: One of OPERATIONS.
            payload: JSON-serialisable request body.

        Returns:
            Decoded JSON object from the service.

        Raises:
            UnknownOperationError: operation_name is not recognised (no I/O done).
            ComputeRequestError: service returned status >= 400.
            ComputeUnavailableError: connection failure or timeout.
            ComputeResponseError: body is not a JSON object.
        """
        if operation_name not in OPERATIONS:
            raise UnknownOperationError(operation_name)

        url = f"{self.settings.compute_fn_base}/{operation_name}"
        logger.info("compute_call", operation=operation_name, url=url)

        # A fresh client per call: the view drives each action on its own event loop
        async with httpx.AsyncClient(
            timeout=self.settings.COMPUTE_TIMEOUT_SECONDS,
            transport=self._transport,
        ) as client:
            try:
                resp = await client.post(url, json=payload, headers=self._headers())
            except httpx.TimeoutException as e:
                logger.warning("compute_call_timeout", operation=operation_name)
                raise ComputeUnavailableError(operation_name, "request timed out") from e
            except httpx.HTTPError as e:
                logger.warning("compute_call_unreachable", operation=operation_name, error=str(e))
                raise ComputeUnavailableError(operation_name, str(e) or "connection failed") from e

        if resp.status_code >= 400:
            detail = _error_detail(resp)
            logger.warning(
                "compute_call_rejected",
                operation=operation_name,
                status_code=resp.status_code,
                detail=detail,
            )
            raise ComputeRequestError(operation_name, resp.status_code, detail)

        try:
            body = resp.json()
        except ValueError as e:
            raise ComputeResponseError(operation_name, "response is not JSON") from e
        if not isinstance(body, dict):
            raise ComputeResponseError(operation_name, "response is not a JSON object")

        logger.debug("compute_call_ok", operation=operation_name, status_code=resp.status_code)
        return body

    async def _call_typed(
        self, operation_name: str, payload: Dict[str, Any], model: Type[ResultT]
    ) -> ResultT:
        body = await self.call_fn(operation_name, payload)
        try:
            return model.model_validate(body)
        except ValidationError as e:
            raise ComputeResponseError(
                operation_name, f"unexpected response shape ({e.error_count()} error(s))"
            ) from e

    # ------------------------------------------------------------------
    # Typed operations
    # ------------------------------------------------------------------

    async def co2_dashboard(self, regions: Sequence[Region]) -> DashboardResult:
        return await self._call_typed(
            CO2_DASHBOARD, {"regions": regions_payload(regions)}, DashboardResult
        )

    async def co2_marginal_reduction(self, regions: Sequence[Region]) -> MarginalResult:
        return await self._call_typed(
            CO2_MARGINAL_REDUCTION, {"regions": regions_payload(regions)}, MarginalResult
        )

    async def co2_policy_pathway(
        self, regions: Sequence[Region], params: PathwayParams
    ) -> PathwayResult:
        payload = {"regions": regions_payload(regions), **params.model_dump(by_alias=True)}
        return await self._call_typed(CO2_POLICY_PATHWAY, payload, PathwayResult)

"""Access the Azure HTTP API"""
from __future__ import annotations

import dataclasses
import json
import logging
import time
from typing import Any, Dict, Iterator, Optional, Type, Union, cast

import requests
from pydantic import TypeAdapter, ValidationError

from azmgmt.azrest.models import AzBatch, AzBatchResponses, AzList, AzureError, AzureErrorDetails, AzureErrorResponse, BatchReq, Continuable, LongOperationError, Req, Ret_T
from azmgmt.azrest.settings import RetrySettings, Settings

l = logging.getLogger(__name__)


def fmt_req(req: Req) -> str:
	"""Format a request"""
	return req.name


def fmt_log(msg: str, req: Req, **kwargs: Union[str, int, float]) -> str:
	"""Format a log statement referencing a request"""
	arg_s = " ".join(f"{k}={v}" for k, v in kwargs.items())
	return f"{msg} req={fmt_req(req)} {arg_s}"


@dataclasses.dataclass
class RetryPolicy:
	"""Parameters and strategies for retrying Azure requests"""

	retries: int = 0  # number of times to retry. This is in addition to the initial try
	long_running_retries: int = 10  # number of retry attempts to try each long-running task. This is in addition to the initial try
	retry_after: float = 5.0  # seconds to wait between polls if Azure doesn't tell us

	@classmethod
	def from_settings(cls, settings: RetrySettings) -> RetryPolicy:
		return cls(retries=settings.retries, long_running_retries=settings.long_running_retries, retry_after=settings.retry_after)


HEADER_LOCATION = "Location"
HEADER_ASYNC = "Azure-AsyncOperation"
HEADER_RETRY_AFTER = "Retry-After"


def _returns_nothing(req: Req) -> bool:
	return req.ret_t is None or req.ret_t is Type[None]  # noqa: E721  # we're comparing types here


class AzRest:
	"""Access the Azure HTTP API"""

	def __init__(self, session: requests.Session, base_url: str = "https://management.azure.com", retry_policy: RetryPolicy = RetryPolicy()):
		self.session = session

		self.base_url = base_url
		self.retry_policy = retry_policy

	@classmethod
	def from_credential(cls, credential, settings: Optional[Settings] = None) -> AzRest:
		"""Create from an Azure credential"""
		settings = settings or Settings()
		token = credential.get_token(settings.token_scope)
		session = requests.Session()
		session.headers["Authorization"] = f"Bearer {token.token}"

		return cls(session=session, base_url=settings.base_url, retry_policy=RetryPolicy.from_settings(settings.retry))

	def _url(self, path: str) -> str:
		if path.startswith("https://") or path.startswith("http://"):
			return path
		return self.base_url + path

	def to_request(self, req: Req) -> requests.Request:
		"""Convert a Req into a requests.Request"""
		r = requests.Request(method=req.method, url=self._url(req.path))
		r.params = dict(req.params)
		if req.apiv:
			r.params["api-version"] = req.apiv
		if req.body is not None:
			r.headers["Content-Type"] = "application/json"
			if isinstance(req.body, dict):
				# allows you to do your own serialisation
				r.data = json.dumps(req.body)
			else:
				r.data = req.body.model_dump_json(exclude_none=True, by_alias=True)
		return r

	def _build_url(self, req: Req) -> str:
		"""Hacky way to get requests to build our url for us"""
		return cast(str, self.session.prepare_request(self.to_request(req)).url)

	def _to_batchable_request(self, req: Req, batch_id: str) -> Dict[str, Any]:
		r: Dict[str, Any] = {
			"httpMethod": req.method,
			"name": batch_id,
			"url": self._build_url(req),
		}
		if req.body is not None:
			r["content"] = req.body if isinstance(req.body, dict) else req.body.model_dump(mode="json", exclude_none=True, by_alias=True)
		return r

	def batch_to_request(self, batch: BatchReq) -> Req[AzBatchResponses]:
		"""Convert the BatchReq into the Req that contains the requests"""
		req = Req(
			name=batch.name,
			path="/batch",
			method="POST",
			apiv=batch.apiv,
			body=AzBatch(requests=[self._to_batchable_request(r, batch_id) for batch_id, r in batch.requests.items()]),
			ret_t=AzBatchResponses,
		)
		return req

	def _resolve_batch_response(self, req: Req[Ret_T], res) -> Union[Ret_T, AzureError]:
		"""Deserialise the response to a batch request"""
		if res.content and res.content.get("error"):
			return AzureErrorResponse.model_validate(res.content).error.as_exception()
		if _returns_nothing(req):
			return None  # type: ignore
		type_adapter = TypeAdapter(req.ret_t)
		return type_adapter.validate_python(res.content)

	def call_batch(self, req: BatchReq) -> Dict[str, Union[Ret_T, AzureError]]:
		"""Call a batch request"""
		batch_request = self.batch_to_request(req)

		batch_response: AzBatchResponses = self.call(batch_request)
		deserialised_responses = {e.name: self._resolve_batch_response(req.requests[e.name], e) for e in batch_response.responses}
		return deserialised_responses

	def call(self, req: Req[Ret_T]) -> Ret_T:
		"""
		Make the request to Azure

		Lists are followed through all their pages and unwrapped into a list of their items.
		"""
		res = self._deserialise(req, self._call_with_retry(req, self.to_request(req)))
		if res is None:
			return res

		if isinstance(res, AzList):
			acc = list(res.value)
			for page in self._following_pages(req, res):
				acc.extend(page.value)
			return acc  # type: ignore  # we're deliberately unwrapping a list into its primitive type
		else:
			return res

	def pages(self, req: Req[Ret_T]) -> Iterator[Ret_T]:
		"""Make the request to Azure, yielding each page of the result"""
		res = self._deserialise(req, self._call_with_retry(req, self.to_request(req)))
		if res is None:
			return
		yield res
		if isinstance(res, Continuable):
			yield from self._following_pages(req, res)

	def _following_pages(self, req: Req[Ret_T], first: Continuable) -> Iterator[Any]:
		page = first
		n = 0
		while (next_link := page.continuation()) is not None:
			n += 1
			l.debug(fmt_log("paginating req", req, page=n))
			# This is basically always a GET
			next_req = Req.from_url(req.name, "GET", next_link, ret_t=req.ret_t)
			page = self._deserialise(next_req, self._call_with_retry(next_req, self.to_request(next_req)))
			yield page

	def _call_with_retry(self, req: Req[Ret_T], r: requests.Request) -> requests.Response:
		l.debug(fmt_log("making req", req))
		res = self._do_call(r)
		if isinstance(res, AzureError):
			retries = 0
			while retries < self.retry_policy.retries and isinstance(res, AzureError):
				l.debug(fmt_log("req returned error; retrying", req, err=res.error.model_dump_json()))
				retries += 1
				res = self._do_call(r)

		if isinstance(res, AzureError):
			l.warning(fmt_log("req returned error; retries exhausted", req, err=res.error.model_dump_json()))
			raise res
		else:
			l.debug(fmt_log("req complete", req))
			return res

	def _do_call(self, r: requests.Request) -> Union[requests.Response, AzureError]:
		"""Make a single request to Azure, without retry or pagination"""
		res = self.session.send(self.session.prepare_request(r))
		if not res.ok:
			return self._to_error(res)
		return res

	@staticmethod
	def _to_error(res: requests.Response) -> AzureError:
		try:
			return AzureErrorResponse.model_validate_json(res.content).error.as_exception()
		except ValidationError:
			# not every failure comes from ARM, for example gateway errors
			return AzureError(AzureErrorDetails(code=str(res.status_code), message=res.text))

	def _deserialise(self, req: Req[Ret_T], res: requests.Response) -> Ret_T:
		if _returns_nothing(req):
			return None  # type: ignore

		type_adapter = TypeAdapter(req.ret_t)
		if len(res.content) == 0:
			return type_adapter.validate_python(None)

		deserialised = type_adapter.validate_json(res.content)
		return deserialised

	def _get_longpoll_location(self, res: requests.Response) -> Optional[str]:
		if HEADER_ASYNC in res.headers:
			return res.headers[HEADER_ASYNC]
		elif HEADER_LOCATION in res.headers:
			return res.headers[HEADER_LOCATION]
		else:
			return None

	def _get_time_to_wait(self, res: requests.Response) -> float:
		if HEADER_RETRY_AFTER in res.headers:
			return float(res.headers[HEADER_RETRY_AFTER])
		else:
			return self.retry_policy.retry_after

	@staticmethod
	def _get_poll_status(res: requests.Response) -> Optional[str]:
		"""The status of an operation from its Azure-AsyncOperation body. Location polls have no status."""
		if len(res.content) == 0:
			return None
		try:
			body = res.json()
		except ValueError:
			return None
		return body.get("status") if isinstance(body, dict) else None

	def call_long_operation(self, req: Req[Ret_T]) -> Ret_T:
		"""Make a call for a long-running operation, where we will need to check a new location for the result."""
		ir = self._call_with_retry(req, self.to_request(req))

		if ir.status_code in {200, 204}:
			l.debug(fmt_log("req longpoll completed synchronously", req, status=ir.status_code))
			return self._deserialise(req, ir)

		if ir.status_code not in {202, 201}:
			l.warning(fmt_log("req longpoll returned unexpected status", req, status=ir.status_code))

		result_location = self._get_longpoll_location(ir)
		if result_location is None:
			msg = f"req longpoll did not have header needed to find result of longpoll, expected one of '{HEADER_ASYNC}' or '{HEADER_LOCATION}'"
			l.error(fmt_log(msg, req))
			raise LongOperationError(msg)
		is_async_operation = HEADER_ASYNC in ir.headers

		poll_req: Req[Dict] = Req.from_url(f"{req.name}.poll", "GET", result_location, ret_t=dict)
		res = self._call_with_retry(poll_req, self.to_request(poll_req))

		retries = 0
		while retries < self.retry_policy.long_running_retries and not self._is_done(res):
			time_to_wait = self._get_time_to_wait(res)
			l.debug(fmt_log("longpoll request sleep", req, attempt=retries, time=time_to_wait))
			time.sleep(time_to_wait)
			retries += 1
			res = self._call_with_retry(poll_req, self.to_request(poll_req))

		if not self._is_done(res):
			msg = "req longpoll did not complete in the allowed number of polls"
			l.error(fmt_log(msg, req, status=res.status_code, polls=retries))
			raise LongOperationError(msg)

		status = self._get_poll_status(res)
		if status in {"Failed", "Canceled"}:
			try:
				error = AzureErrorResponse.model_validate_json(res.content).error.as_exception()
			except ValidationError:
				msg = "req longpoll failed with a body that could not be deserialised into an error"
				l.error(fmt_log(msg, req, status=status, content=res.content.decode()))
				raise LongOperationError(msg)
			raise error

		if req.method == "DELETE":
			return None  # type: ignore
		if not is_async_operation:
			# the Location poll returns the result once it is done
			return self._deserialise(req, res)

		# the operation status only says that the operation is done
		if req.method in {"PUT", "PATCH"}:
			final_req = Req.get(req.name, req.path, req.apiv, ret_t=req.ret_t)
			return self.call(final_req)
		if HEADER_LOCATION in ir.headers:
			result_req = Req.from_url(f"{req.name}.result", "GET", ir.headers[HEADER_LOCATION], ret_t=req.ret_t)
			return self._deserialise(result_req, self._call_with_retry(result_req, self.to_request(result_req)))
		l.debug(fmt_log("req longpoll has no result", req, method=req.method))
		return None  # type: ignore

	def _is_done(self, res: requests.Response) -> bool:
		if res.status_code == 202:
			return False
		status = self._get_poll_status(res)
		return status is None or status in {"Succeeded", "Failed", "Canceled"}


class AzOps:
	"""Parent class for helpers which dispatch requests to Azure"""

	def __init__(self, azrest: AzRest):
		self.azrest = azrest

	def run(self, req: Req[Ret_T]) -> Ret_T:
		"""Call a request"""
		return self.azrest.call(req)


def rid_eq(a: Optional[str], b: Optional[str]) -> bool:
	"""Whether 2 Azure resource IDs are the same"""
	return a is not None and b is not None and a.lower() == b.lower()

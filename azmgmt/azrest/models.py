"""Models for the Azure REST API"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Dict, Generic, List, Optional, Protocol, Type, TypeVar, Union, runtime_checkable

from pydantic import BaseModel, BeforeValidator, ConfigDict, Discriminator, Field, SerializationInfo, SerializerFunctionWrapHandler, Tag, model_serializer

Ret_T = TypeVar("Ret_T")
T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)
ReadOnly = Optional

UNKNOWN_VALUE = "UnknownValue"


def _null_as_empty(v: Any) -> Any:
	return [] if v is None else v


NullableList = Annotated[List[T], BeforeValidator(_null_as_empty)]
"""A list which Azure may send as `null` when it is empty"""


class AzModel(BaseModel):
	"""
	Base for Azure resources and the objects they contain.

	Fields are snake_case and aliased to their camelCase name on the wire.
	Fields which are not set are left out of the serialised form.
	Optional lists which are empty are also left out, so a merge-patch does not clear them.
	"""

	model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

	@model_serializer(mode="wrap")
	def _omit_empty_lists(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo):
		d = handler(self)
		for name, f in type(self).model_fields.items():
			if isinstance(f.default, list) and not getattr(self, name):
				d.pop(f.alias if info.by_alias and f.alias else name, None)
		return d

	def to_wire(self) -> Dict[str, Any]:
		"""Serialise to the JSON-compatible form Azure expects"""
		return self.model_dump(mode="json", by_alias=True, exclude_none=True)

	def to_json(self) -> str:
		return self.model_dump_json(by_alias=True, exclude_none=True)

	@classmethod
	def from_wire(cls: Type[M], data: Dict[str, Any]) -> M:
		return cls.model_validate(data)

	@classmethod
	def from_json(cls: Type[M], data: Union[str, bytes]) -> M:
		return cls.model_validate_json(data)


class OpenEnum(str, Enum):
	"""
	A string enum which tolerates values it does not know about.

	Azure adds new values to its enums without changing the api version.
	A value which is not a member is captured as an `UnknownValue` member.
	That member keeps the original string, so it is sent back to Azure unchanged.
	"""

	@classmethod
	def _missing_(cls, value: object):
		if not isinstance(value, str):
			return None
		return cls._unknown(value)

	@classmethod
	def _unknown(cls, value: str):
		member = str.__new__(cls, value)
		member._name_ = UNKNOWN_VALUE
		member._value_ = value
		return member

	@property
	def is_known(self) -> bool:
		"""Whether this is one of the values the enum was generated with"""
		return self._name_ != UNKNOWN_VALUE

	def __str__(self) -> str:
		return self._value_


@runtime_checkable
class Continuable(Protocol):
	"""A page of results which may be followed by more pages"""

	def continuation(self) -> Optional[str]:
		"""The link to the next page, or None if this is the last page"""


def continuation_of(next_link: Optional[str]) -> Optional[str]:
	"""An absent or empty next link both mean that there are no more pages"""
	return next_link or None


class AzList(AzModel, Generic[Ret_T]):
	"""A page of a list of Azure resources"""

	value: List[Ret_T]
	next_link: Optional[str] = Field(alias="nextLink", default=None)

	def continuation(self) -> Optional[str]:
		return continuation_of(self.next_link)


def _discriminant(v: Any, tag: str) -> Optional[str]:
	if isinstance(v, dict):
		value = v.get(tag)
	else:
		value = getattr(v, tag, None)
	if isinstance(value, Enum):
		value = value.value
	return value


def polymorphic(tag: str, base: Type[M], variants: Dict[str, Type[M]]) -> Any:
	"""
	A union of the subtypes of a polymorphic Azure model, selected by the value of the `tag` field.

	Values of the tag which are not one of the variants are deserialised as the base model.
	"""

	def discriminate(v: Any) -> str:
		if isinstance(v, BaseModel):
			return next((k for k, t in variants.items() if type(v) is t), UNKNOWN_VALUE)
		value = _discriminant(v, tag)
		return value if value in variants else UNKNOWN_VALUE

	choices = [Annotated[t, Tag(k)] for k, t in variants.items()]
	choices.append(Annotated[base, Tag(UNKNOWN_VALUE)])
	return Annotated[Union[tuple(choices)], Discriminator(discriminate)]


@dataclass(frozen=True)
class Req(Generic[Ret_T]):
	"""Azure REST request"""

	name: str
	path: str
	method: str
	apiv: Optional[str]
	body: Optional[Union[BaseModel, Dict]] = None
	params: Dict[str, str] = field(default_factory=dict)
	ret_t: Type[Ret_T] = Type[None]  # type: ignore

	@classmethod
	def get(cls, name: str, path: str, apiv: Optional[str], ret_t: Type[Ret_T]) -> Req:
		return cls(name, path, "GET", apiv, ret_t=ret_t)

	@classmethod
	def delete(cls, name: str, path: str, apiv: Optional[str], ret_t: Optional[Type[Ret_T]] = Type[None]) -> Req:  # type: ignore
		return cls(name, path, "DELETE", apiv, ret_t=ret_t)

	@classmethod
	def put(cls, name: str, path: str, apiv: Optional[str], body: Optional[BaseModel] = None, ret_t: Type[Ret_T] = Type[None]) -> Req:  # type: ignore
		return cls(name, path, "PUT", apiv, body, ret_t=ret_t)

	@classmethod
	def post(cls, name: str, path: str, apiv: Optional[str], body: Optional[BaseModel] = None, ret_t: Type[Ret_T] = Type[None]) -> Req:  # type: ignore
		return cls(name, path, "POST", apiv, body, ret_t=ret_t)

	@classmethod
	def patch(cls, name: str, path: str, apiv: Optional[str], body: Optional[BaseModel] = None, ret_t: Type[Ret_T] = Type[None]) -> Req:  # type: ignore
		return cls(name, path, "PATCH", apiv, body, ret_t=ret_t)

	@classmethod
	def from_url(cls, name: str, method: str, url: str, ret_t: Type[Ret_T], apiv: Optional[str] = None) -> Req:
		"""
		Create a request for a url Azure gave us, such as a next link or the location of a long-running operation.

		These urls already carry their query parameters, including the api version.
		"""
		return cls(name, url, method, apiv, ret_t=ret_t)

	def add_param(self, k: str, v: str) -> Req:
		return self.add_params({k: v})

	def add_params(self, params: Dict[str, str]) -> Req:
		return dataclasses.replace(self, params={**self.params, **params})

	def with_ret_t(self, ret_t: Type[Ret_T]) -> Req:
		return dataclasses.replace(self, ret_t=ret_t)


@dataclass
class BatchReq:
	"""A set of requests sent together through the batch api, keyed by the name of each request"""

	requests: Dict[str, Req]
	name: str = "batch"
	apiv: str = "2020-06-01"

	@classmethod
	def gather(cls, requests: List[Req], name: str = "batch", apiv: str = "2020-06-01") -> BatchReq:
		"""Batch requests, naming them by their position"""
		return cls({str(i): r for i, r in enumerate(requests)}, name=name, apiv=apiv)


class AzBatch(BaseModel):
	requests: List[Dict]


class AzBatchResponse(BaseModel):
	"""A single response in a batch"""

	name: str
	httpStatusCode: int
	headers: Dict[str, str] = {}
	content: Optional[Dict] = None


class AzBatchResponses(BaseModel):
	responses: List[AzBatchResponse]


class AzureError(Exception):
	"""An error returned by Azure"""

	def __init__(self, error: AzureErrorDetails):
		super().__init__(f"{error.code}: {error.message}")
		self.error = error


class LongOperationError(RuntimeError):
	"""A long-running operation could not be followed to its result"""


class AzureErrorResponse(AzModel):
	"""The container of an Azure error"""

	error: AzureErrorDetails


class AzureErrorDetails(AzModel):
	"""An Azure-specific error"""

	code: str
	message: str
	target: Optional[str] = None
	details: NullableList[AzureErrorDetails] = []
	additional_info: NullableList[AzureErrorAdditionInfo] = Field(alias="additionalInfo", default=[])

	def as_exception(self) -> AzureError:
		return AzureError(self)


class AzureErrorAdditionInfo(AzModel):
	"""The resource management error additional info."""

	info_type: str = Field(alias="type")
	info: Dict = {}


AzureErrorResponse.model_rebuild()
AzureErrorDetails.model_rebuild()


def cast_as(o: BaseModel, t: Type[M]) -> M:
	"""
	Convert a model into another model with the same fields.

	Useful for sending a resource back as its update parameters.
	Fields which the target does not have are dropped.
	"""
	return t.model_validate(o.model_dump(by_alias=True, exclude_none=True))


def ensure(v: Optional[T]) -> T:
	"""Narrow an Optional, raising if the value is missing"""
	if v is None:
		raise TypeError("value was None")
	return v

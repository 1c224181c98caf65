# pylint: disable
# flake8: noqa
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from azmgmt.azrest.models import AzList, AzModel, NullableList, OpenEnum, ReadOnly, Req, polymorphic


class ExtendedLocationType(OpenEnum):
	"""The supported ExtendedLocation types."""

	EDGE_ZONE = "EdgeZone"


class SystemData(AzModel):
	"""Metadata pertaining to creation and last modification of the resource."""

	class CreatedByType(OpenEnum):
		"""The type of identity that created the resource."""

		USER = "User"
		APPLICATION = "Application"
		MANAGED_IDENTITY = "ManagedIdentity"
		KEY = "Key"

	class LastModifiedByType(OpenEnum):
		"""The type of identity that last modified the resource."""

		USER = "User"
		APPLICATION = "Application"
		MANAGED_IDENTITY = "ManagedIdentity"
		KEY = "Key"

	created_by: Optional[str] = Field(alias="createdBy", default=None)
	created_by_type: Optional[CreatedByType] = Field(alias="createdByType", default=None)
	created_at: Optional[datetime] = Field(alias="createdAt", default=None)
	last_modified_by: Optional[str] = Field(alias="lastModifiedBy", default=None)
	last_modified_by_type: Optional[LastModifiedByType] = Field(alias="lastModifiedByType", default=None)
	last_modified_at: Optional[datetime] = Field(alias="lastModifiedAt", default=None)


class Resource(AzModel):
	"""Common fields that are returned in the response for all Azure Resource Manager resources"""

	rid: ReadOnly[str] = Field(alias="id", default=None)
	name: ReadOnly[str] = None
	type: ReadOnly[str] = None
	system_data: ReadOnly[SystemData] = Field(alias="systemData", default=None)


class TrackedResource(Resource):
	"""The resource model definition for an Azure Resource Manager tracked top level resource which has 'tags' and a 'location'"""

	tags: Optional[Dict[str, str]] = None
	location: str


class ProxyResource(Resource):
	"""The resource model definition for a Azure Resource Manager proxy resource. It will not have tags and a location"""


class ErrorAdditionalInfo(AzModel):
	"""The resource management error additional info."""

	type: ReadOnly[str] = None
	info: ReadOnly[dict] = None


class ErrorDetail(AzModel):
	"""The error detail."""

	code: ReadOnly[str] = None
	message: ReadOnly[str] = None
	target: ReadOnly[str] = None
	details: NullableList[ErrorDetail] = []
	additional_info: NullableList[ErrorAdditionalInfo] = Field(alias="additionalInfo", default=[])


class ErrorResponse(AzModel):
	"""Common error response for all Azure Resource Manager APIs to return error details for failed operations. (This also follows the OData error response format.)."""

	error: Optional[ErrorDetail] = None


class Operation(AzModel):
	"""Details of a REST API operation, returned from the Resource Provider Operations API"""

	class Display(AzModel):
		"""Localized display information for this particular operation."""

		provider: ReadOnly[str] = None
		resource: ReadOnly[str] = None
		operation: ReadOnly[str] = None
		description: ReadOnly[str] = None

	class Origin(OpenEnum):
		"""The intended executor of the operation; as in Resource Based Access Control (RBAC) and audit logs UX. Default value is "user,system" """

		USER = "user"
		SYSTEM = "system"
		USER_SYSTEM = "user,system"

	class ActionType(OpenEnum):
		"""Enum. Indicates the action type. "Internal" refers to actions that are for internal only APIs."""

		INTERNAL = "Internal"

	name: ReadOnly[str] = None
	is_data_action: ReadOnly[bool] = Field(alias="isDataAction", default=None)
	display: Optional[Display] = None
	origin: ReadOnly[Origin] = None
	action_type: ReadOnly[ActionType] = Field(alias="actionType", default=None)


class CheckNameAvailabilityRequest(AzModel):
	"""The check availability request body."""

	name: Optional[str] = None
	type: Optional[str] = None


class CheckNameAvailabilityResponse(AzModel):
	"""The check availability result."""

	class Reason(OpenEnum):
		"""The reason why the given name is not available."""

		INVALID = "Invalid"
		ALREADY_EXISTS = "AlreadyExists"

	name_available: Optional[bool] = Field(alias="nameAvailable", default=None)
	reason: Optional[Reason] = None
	message: Optional[str] = None


class ExtendedLocation(AzModel):
	"""The complex type of the extended location."""

	name: Optional[str] = None
	type: Optional[ExtendedLocationType] = None


class OperationListResult(AzList[Operation]):
	"""A list of REST API operations supported by an Azure Resource Provider. It contains an URL link to get the next set of results."""

	value: NullableList[Operation] = []


SystemData.model_rebuild()
Resource.model_rebuild()
TrackedResource.model_rebuild()
ProxyResource.model_rebuild()
ErrorAdditionalInfo.model_rebuild()
ErrorDetail.model_rebuild()
ErrorResponse.model_rebuild()
Operation.model_rebuild()
CheckNameAvailabilityRequest.model_rebuild()
CheckNameAvailabilityResponse.model_rebuild()
ExtendedLocation.model_rebuild()
OperationListResult.model_rebuild()

# pylint: disable
# flake8: noqa
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from azmgmt.azrest.models import AzList, AzModel, NullableList, OpenEnum, ReadOnly, Req, polymorphic


class ManagedServiceIdentityType(OpenEnum):
	"""Type of managed service identity (where both SystemAssigned and UserAssigned types are allowed)."""

	NONE = "None"
	SYSTEM_ASSIGNED = "SystemAssigned"
	USER_ASSIGNED = "UserAssigned"
	SYSTEM_ASSIGNED_USER_ASSIGNED = "SystemAssigned,UserAssigned"


class SystemAssignedServiceIdentityType(OpenEnum):
	"""Type of managed service identity (either system assigned, or none)."""

	NONE = "None"
	SYSTEM_ASSIGNED = "SystemAssigned"


class UserAssignedIdentity(AzModel):
	"""User assigned identity properties"""

	principal_id: ReadOnly[str] = Field(alias="principalId", default=None)
	client_id: ReadOnly[str] = Field(alias="clientId", default=None)


class ManagedServiceIdentity(AzModel):
	"""Managed service identity (system assigned and/or user assigned identities)"""

	principal_id: ReadOnly[str] = Field(alias="principalId", default=None)
	tenant_id: ReadOnly[str] = Field(alias="tenantId", default=None)
	type: ManagedServiceIdentityType
	user_assigned_identities: Optional[Dict[str, UserAssignedIdentity]] = Field(alias="userAssignedIdentities", default=None)


class SystemAssignedServiceIdentity(AzModel):
	"""Managed service identity (either system assigned, or none)"""

	principal_id: ReadOnly[str] = Field(alias="principalId", default=None)
	tenant_id: ReadOnly[str] = Field(alias="tenantId", default=None)
	type: SystemAssignedServiceIdentityType


UserAssignedIdentities = Dict[str, UserAssignedIdentity]


UserAssignedIdentity.model_rebuild()
ManagedServiceIdentity.model_rebuild()
SystemAssignedServiceIdentity.model_rebuild()

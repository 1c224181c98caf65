# pylint: disable
# flake8: noqa
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from azmgmt.azrest.models import AzList, AzModel, NullableList, OpenEnum, ReadOnly, Req, polymorphic
from azmgmt.mgmt.app.commondefinitions import Configuration, ExtendedLocation, SecretsCollection, Template
from azmgmt.mgmt.common.managedidentity import ManagedServiceIdentity
from azmgmt.mgmt.common.types import TrackedResource


class ContainerApp(TrackedResource):
	"""Container App."""

	class Properties(AzModel):
		"""ContainerApp resource specific properties"""

		class ProvisioningState(OpenEnum):
			"""Provisioning state of the Container App."""

			IN_PROGRESS = "InProgress"
			SUCCEEDED = "Succeeded"
			FAILED = "Failed"
			CANCELED = "Canceled"
			DELETING = "Deleting"

		provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
		managed_environment_id: Optional[str] = Field(alias="managedEnvironmentId", default=None)
		environment_id: Optional[str] = Field(alias="environmentId", default=None)
		workload_profile_name: Optional[str] = Field(alias="workloadProfileName", default=None)
		latest_revision_name: ReadOnly[str] = Field(alias="latestRevisionName", default=None)
		latest_ready_revision_name: ReadOnly[str] = Field(alias="latestReadyRevisionName", default=None)
		latest_revision_fqdn: ReadOnly[str] = Field(alias="latestRevisionFqdn", default=None)
		custom_domain_verification_id: ReadOnly[str] = Field(alias="customDomainVerificationId", default=None)
		configuration: Optional[Configuration] = None
		template: Optional[Template] = None
		outbound_ip_addresses: NullableList[str] = Field(alias="outboundIpAddresses", default=[])
		event_stream_endpoint: ReadOnly[str] = Field(alias="eventStreamEndpoint", default=None)

	extended_location: Optional[ExtendedLocation] = Field(alias="extendedLocation", default=None)
	identity: Optional[ManagedServiceIdentity] = None
	managed_by: Optional[str] = Field(alias="managedBy", default=None)
	properties: Optional[Properties] = None


class ContainerAppAuthToken(TrackedResource):
	"""Container App Auth Token."""

	class Properties(AzModel):
		"""Container App auth token resource specific properties"""

		token: ReadOnly[str] = None
		expires: ReadOnly[datetime] = None

	properties: Optional[Properties] = None


class ContainerAppCollection(AzList[ContainerApp]):
	"""Container App collection ARM resource."""


ContainerApp.model_rebuild()
ContainerAppAuthToken.model_rebuild()
ContainerAppCollection.model_rebuild()


class AzContainerApps:
	apiv = "2023-04-01-preview"

	@staticmethod
	def ListBySubscription(subscriptionId: str) -> Req[ContainerAppCollection]:
		"""Get the Container Apps in a given subscription."""
		r = Req.get(
			name="ContainerApps.ListBySubscription",
			path=f"/subscriptions/{subscriptionId}/providers/Microsoft.App/containerApps",
			apiv="2023-04-01-preview",
			ret_t=ContainerAppCollection,
		)

		return r

	@staticmethod
	def ListByResourceGroup(subscriptionId: str, resourceGroupName: str) -> Req[ContainerAppCollection]:
		"""Get the Container Apps in a given resource group."""
		r = Req.get(
			name="ContainerApps.ListByResourceGroup",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps",
			apiv="2023-04-01-preview",
			ret_t=ContainerAppCollection,
		)

		return r

	@staticmethod
	def Get(subscriptionId: str, resourceGroupName: str, containerAppName: str) -> Req[ContainerApp]:
		"""Get the properties of a Container App."""
		r = Req.get(
			name="ContainerApps.Get",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps/{containerAppName}",
			apiv="2023-04-01-preview",
			ret_t=ContainerApp,
		)

		return r

	@staticmethod
	def CreateOrUpdate(subscriptionId: str, resourceGroupName: str, containerAppName: str, containerAppEnvelope: ContainerApp) -> Req[ContainerApp]:
		"""Create or update a Container App."""
		r = Req.put(
			name="ContainerApps.CreateOrUpdate",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps/{containerAppName}",
			apiv="2023-04-01-preview",
			body=containerAppEnvelope,
			ret_t=ContainerApp,
		)

		return r

	@staticmethod
	def Delete(subscriptionId: str, resourceGroupName: str, containerAppName: str) -> Req[None]:
		"""Delete a Container App."""
		r = Req.delete(
			name="ContainerApps.Delete",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps/{containerAppName}",
			apiv="2023-04-01-preview",
		)

		return r

	@staticmethod
	def Update(subscriptionId: str, resourceGroupName: str, containerAppName: str, containerAppEnvelope: ContainerApp) -> Req[Optional[ContainerApp]]:
		"""Patches a Container App using JSON Merge Patch"""
		r = Req.patch(
			name="ContainerApps.Update",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps/{containerAppName}",
			apiv="2023-04-01-preview",
			body=containerAppEnvelope,
			ret_t=Optional[ContainerApp],
		)

		return r

	@staticmethod
	def ListSecrets(subscriptionId: str, resourceGroupName: str, containerAppName: str) -> Req[SecretsCollection]:
		"""List secrets for a container app"""
		r = Req.post(
			name="ContainerApps.ListSecrets",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps/{containerAppName}/listSecrets",
			apiv="2023-04-01-preview",
			ret_t=SecretsCollection,
		)

		return r

	@staticmethod
	def GetAuthToken(subscriptionId: str, resourceGroupName: str, containerAppName: str) -> Req[ContainerAppAuthToken]:
		"""Get auth token for a container app"""
		r = Req.post(
			name="ContainerApps.GetAuthToken",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps/{containerAppName}/getAuthtoken",
			apiv="2023-04-01-preview",
			ret_t=ContainerAppAuthToken,
		)

		return r

	@staticmethod
	def Start(subscriptionId: str, resourceGroupName: str, containerAppName: str) -> Req[Optional[ContainerApp]]:
		"""Start a container app"""
		r = Req.post(
			name="ContainerApps.Start",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps/{containerAppName}/start",
			apiv="2023-04-01-preview",
			ret_t=Optional[ContainerApp],
		)

		return r

	@staticmethod
	def Stop(subscriptionId: str, resourceGroupName: str, containerAppName: str) -> Req[Optional[ContainerApp]]:
		"""Stop a container app"""
		r = Req.post(
			name="ContainerApps.Stop",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/containerApps/{containerAppName}/stop",
			apiv="2023-04-01-preview",
			ret_t=Optional[ContainerApp],
		)

		return r

# pylint: disable
# flake8: noqa
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from azmgmt.azrest.models import AzList, AzModel, NullableList, OpenEnum, ReadOnly, Req, polymorphic
from azmgmt.mgmt.common.types import TrackedResource


class VnetConfiguration(AzModel):
	"""Configuration properties for apps environment to join a Virtual Network"""

	internal: Optional[bool] = None
	infrastructure_subnet_id: Optional[str] = Field(alias="infrastructureSubnetId", default=None)
	docker_bridge_cidr: Optional[str] = Field(alias="dockerBridgeCidr", default=None)
	platform_reserved_cidr: Optional[str] = Field(alias="platformReservedCidr", default=None)
	platform_reserved_dns_ip: Optional[str] = Field(alias="platformReservedDnsIP", default=None)


class LogAnalyticsConfiguration(AzModel):
	"""Log Analytics configuration, must only be provided when destination is configured as 'log-analytics'"""

	customer_id: Optional[str] = Field(alias="customerId", default=None)
	shared_key: Optional[str] = Field(alias="sharedKey", default=None)


class AppLogsConfiguration(AzModel):
	"""Configuration of application logs"""

	destination: Optional[str] = None
	log_analytics_configuration: Optional[LogAnalyticsConfiguration] = Field(alias="logAnalyticsConfiguration", default=None)


class WorkloadProfile(AzModel):
	"""Workload profile to scope container app execution."""

	name: str
	workload_profile_type: str = Field(alias="workloadProfileType")
	minimum_count: Optional[int] = Field(alias="minimumCount", default=None)
	maximum_count: Optional[int] = Field(alias="maximumCount", default=None)


class ManagedEnvironment(TrackedResource):
	"""An environment for hosting container apps"""

	class Properties(AzModel):
		"""Managed environment resource specific properties"""

		class ProvisioningState(OpenEnum):
			"""Provisioning state of the Environment."""

			SUCCEEDED = "Succeeded"
			FAILED = "Failed"
			CANCELED = "Canceled"
			WAITING = "Waiting"
			INITIALIZATION_IN_PROGRESS = "InitializationInProgress"
			INFRASTRUCTURE_SETUP_IN_PROGRESS = "InfrastructureSetupInProgress"
			INFRASTRUCTURE_SETUP_COMPLETE = "InfrastructureSetupComplete"
			SCHEDULED_FOR_DELETE = "ScheduledForDelete"
			UPGRADE_REQUESTED = "UpgradeRequested"
			UPGRADE_FAILED = "UpgradeFailed"

		provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
		dapr_ai_instrumentation_key: Optional[str] = Field(alias="daprAIInstrumentationKey", default=None)
		dapr_ai_connection_string: Optional[str] = Field(alias="daprAIConnectionString", default=None)
		vnet_configuration: Optional[VnetConfiguration] = Field(alias="vnetConfiguration", default=None)
		deployment_errors: ReadOnly[str] = Field(alias="deploymentErrors", default=None)
		default_domain: ReadOnly[str] = Field(alias="defaultDomain", default=None)
		static_ip: ReadOnly[str] = Field(alias="staticIp", default=None)
		app_logs_configuration: Optional[AppLogsConfiguration] = Field(alias="appLogsConfiguration", default=None)
		zone_redundant: Optional[bool] = Field(alias="zoneRedundant", default=None)
		event_stream_endpoint: ReadOnly[str] = Field(alias="eventStreamEndpoint", default=None)
		workload_profiles: NullableList[WorkloadProfile] = Field(alias="workloadProfiles", default=[])
		infrastructure_resource_group: Optional[str] = Field(alias="infrastructureResourceGroup", default=None)

	kind: Optional[str] = None
	properties: Optional[Properties] = None


class EnvironmentAuthToken(TrackedResource):
	"""Environment Auth Token."""

	class Properties(AzModel):
		"""Environment auth token resource specific properties"""

		token: ReadOnly[str] = None
		expires: ReadOnly[datetime] = None

	properties: Optional[Properties] = None


class ManagedEnvironmentsCollection(AzList[ManagedEnvironment]):
	"""Collection of Environments"""


VnetConfiguration.model_rebuild()
LogAnalyticsConfiguration.model_rebuild()
AppLogsConfiguration.model_rebuild()
WorkloadProfile.model_rebuild()
ManagedEnvironment.model_rebuild()
EnvironmentAuthToken.model_rebuild()
ManagedEnvironmentsCollection.model_rebuild()


class AzManagedEnvironments:
	apiv = "2023-04-01-preview"

	@staticmethod
	def ListBySubscription(subscriptionId: str) -> Req[ManagedEnvironmentsCollection]:
		"""Get all Managed Environments for a subscription."""
		r = Req.get(
			name="ManagedEnvironments.ListBySubscription",
			path=f"/subscriptions/{subscriptionId}/providers/Microsoft.App/managedEnvironments",
			apiv="2023-04-01-preview",
			ret_t=ManagedEnvironmentsCollection,
		)

		return r

	@staticmethod
	def ListByResourceGroup(subscriptionId: str, resourceGroupName: str) -> Req[ManagedEnvironmentsCollection]:
		"""Get all the Managed Environments in a resource group."""
		r = Req.get(
			name="ManagedEnvironments.ListByResourceGroup",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/managedEnvironments",
			apiv="2023-04-01-preview",
			ret_t=ManagedEnvironmentsCollection,
		)

		return r

	@staticmethod
	def Get(subscriptionId: str, resourceGroupName: str, environmentName: str) -> Req[ManagedEnvironment]:
		"""Get the properties of a Managed Environment used to host container apps."""
		r = Req.get(
			name="ManagedEnvironments.Get",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/managedEnvironments/{environmentName}",
			apiv="2023-04-01-preview",
			ret_t=ManagedEnvironment,
		)

		return r

	@staticmethod
	def CreateOrUpdate(subscriptionId: str, resourceGroupName: str, environmentName: str, environmentEnvelope: ManagedEnvironment) -> Req[ManagedEnvironment]:
		"""Creates or updates a Managed Environment used to host container apps."""
		r = Req.put(
			name="ManagedEnvironments.CreateOrUpdate",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/managedEnvironments/{environmentName}",
			apiv="2023-04-01-preview",
			body=environmentEnvelope,
			ret_t=ManagedEnvironment,
		)

		return r

	@staticmethod
	def Delete(subscriptionId: str, resourceGroupName: str, environmentName: str) -> Req[None]:
		"""Delete a Managed Environment if it does not have any container apps."""
		r = Req.delete(
			name="ManagedEnvironments.Delete",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/managedEnvironments/{environmentName}",
			apiv="2023-04-01-preview",
		)

		return r

	@staticmethod
	def Update(subscriptionId: str, resourceGroupName: str, environmentName: str, environmentEnvelope: ManagedEnvironment) -> Req[Optional[ManagedEnvironment]]:
		"""Patches a Managed Environment using JSON Merge Patch"""
		r = Req.patch(
			name="ManagedEnvironments.Update",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/managedEnvironments/{environmentName}",
			apiv="2023-04-01-preview",
			body=environmentEnvelope,
			ret_t=Optional[ManagedEnvironment],
		)

		return r

	@staticmethod
	def GetAuthToken(subscriptionId: str, resourceGroupName: str, environmentName: str) -> Req[EnvironmentAuthToken]:
		"""Get auth token for a managed environment"""
		r = Req.post(
			name="ManagedEnvironments.GetAuthToken",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.App/managedEnvironments/{environmentName}/getAuthtoken",
			apiv="2023-04-01-preview",
			ret_t=EnvironmentAuthToken,
		)

		return r

# pylint: disable
# flake8: noqa
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from azmgmt.azrest.models import AzList, AzModel, NullableList, OpenEnum, ReadOnly, Req, polymorphic
from azmgmt.mgmt.common.types import ProxyResource


class OsType(OpenEnum):
	"""The particular KubernetesVersion Image OS Type (Linux, Windows)"""

	LINUX = "Linux"
	WINDOWS = "Windows"


class Ossku(OpenEnum):
	"""Specifies the OS SKU used by the agent pool. The default is CBLMariner if OSType is Linux. The default is Windows2019 when OSType is Windows."""

	CBL_MARINER = "CBLMariner"
	WINDOWS2019 = "Windows2019"
	WINDOWS2022 = "Windows2022"


class ProvisioningState(OpenEnum):
	"""Provisioning state of the resource"""

	SUCCEEDED = "Succeeded"
	FAILED = "Failed"
	CANCELED = "Canceled"
	PENDING = "Pending"
	CREATING = "Creating"
	DELETING = "Deleting"
	UPDATING = "Updating"
	UPGRADING = "Upgrading"
	ACCEPTED = "Accepted"


class AddonStatusProfile(AzModel):
	"""The status profile of the addons and other kubernetes components"""

	class Phase(OpenEnum):
		"""Observed phase of the addon or component on the provisioned cluster. Possible values include: 'pending', 'provisioning', 'provisioning {HelmChartInstalled}', 'provisioning {MSICertificateDownloaded}', 'provisioned', 'deleting', 'failed', 'upgrading'"""

		PENDING = "pending"
		PROVISIONING = "provisioning"
		PROVISIONING_HELM_CHART_INSTALLED = "provisioning {HelmChartInstalled}"
		PROVISIONING_MSI_CERTIFICATE_DOWNLOADED = "provisioning {MSICertificateDownloaded}"
		PROVISIONED = "provisioned"
		DELETING = "deleting"
		FAILED = "failed"
		UPGRADING = "upgrading"

	name: Optional[str] = None
	phase: Optional[Phase] = None
	ready: Optional[bool] = None
	error_message: Optional[str] = Field(alias="errorMessage", default=None)


class AgentPoolProfile(AzModel):
	"""Profile for agent pool properties specified during creation"""

	os_type: Optional[OsType] = Field(alias="osType", default=None)
	os_sku: Optional[Ossku] = Field(alias="osSKU", default=None)
	node_labels: Optional[Dict[str, str]] = Field(alias="nodeLabels", default=None)
	node_taints: NullableList[str] = Field(alias="nodeTaints", default=[])
	max_count: Optional[int] = Field(alias="maxCount", default=None)
	min_count: Optional[int] = Field(alias="minCount", default=None)
	enable_auto_scaling: Optional[bool] = Field(alias="enableAutoScaling", default=None)
	max_pods: Optional[int] = Field(alias="maxPods", default=None)


class AgentPoolUpdateProfile(AzModel):
	"""Profile for agent pool properties that can be updated"""

	count: Optional[int] = None
	vm_size: Optional[str] = Field(alias="vmSize", default=None)
	kubernetes_version: ReadOnly[str] = Field(alias="kubernetesVersion", default=None)


class AgentPoolProvisioningStatus(AzModel):
	"""The agentPool resource provisioning status definition"""

	class Status(AzModel):
		"""The observed status of the agent pool."""

		current_state: ReadOnly[ProvisioningState] = Field(alias="currentState", default=None)
		error_message: Optional[str] = Field(alias="errorMessage", default=None)
		ready_replicas: NullableList[AgentPoolUpdateProfile] = Field(alias="readyReplicas", default=[])

	provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
	status: Optional[Status] = None


class AgentPoolProperties(AgentPoolProfile, AgentPoolUpdateProfile, AgentPoolProvisioningStatus):
	"""Properties of the agent pool resource"""


class ExtendedLocation(AzModel):
	"""Extended location pointing to the underlying infrastructure"""

	class Type(OpenEnum):
		"""The extended location type. Allowed value: 'CustomLocation'"""

		CUSTOM_LOCATION = "CustomLocation"

	type: Optional[Type] = None
	name: Optional[str] = None


class AgentPool(ProxyResource):
	"""The agentPool resource definition"""

	properties: Optional[AgentPoolProperties] = None
	tags: Optional[Dict[str, str]] = None
	extended_location: Optional[ExtendedLocation] = Field(alias="extendedLocation", default=None)


class AgentPoolName(AzModel):
	"""Name of the default Agent Pool"""

	name: Optional[str] = None


class CloudProviderProfile(AzModel):
	"""The profile for the underlying cloud infrastructure provider for the provisioned cluster."""

	class InfraNetworkProfile(AzModel):
		"""The profile for the infrastructure networks used by the provisioned cluster"""

		vnet_subnet_ids: NullableList[str] = Field(alias="vnetSubnetIds", default=[])

	infra_network_profile: Optional[InfraNetworkProfile] = Field(alias="infraNetworkProfile", default=None)


class ClusterVmAccessProfile(AzModel):
	"""The SSH restricted access profile for the VMs in the provisioned cluster."""

	authorized_ip_ranges: Optional[str] = Field(alias="authorizedIPRanges", default=None)


class ControlPlaneProfile(AzModel):
	"""The properties of the control plane nodes of the provisioned cluster"""

	class ControlPlaneEndpoint(AzModel):
		"""IP Address of the Kubernetes API server"""

		host_ip: Optional[str] = Field(alias="hostIP", default=None)

	count: Optional[int] = None
	vm_size: Optional[str] = Field(alias="vmSize", default=None)
	control_plane_endpoint: Optional[ControlPlaneEndpoint] = Field(alias="controlPlaneEndpoint", default=None)


class CredentialResult(AzModel):
	"""The credential result response."""

	name: ReadOnly[str] = None
	value: ReadOnly[str] = None


class KubernetesVersionReadiness(AzModel):
	"""Indicates whether the kubernetes version image is ready or not"""

	class OsType(OpenEnum):
		"""The particular KubernetesVersion Image OS Type (Linux, Windows)"""

		WINDOWS = "Windows"
		LINUX = "Linux"

	os_type: ReadOnly[OsType] = Field(alias="osType", default=None)
	os_sku: Optional[Ossku] = Field(alias="osSku", default=None)
	ready: ReadOnly[bool] = None
	error_message: ReadOnly[str] = Field(alias="errorMessage", default=None)


class KubernetesPatchVersions(AzModel):
	"""Kubernetes Patch Version profile"""

	readiness: NullableList[KubernetesVersionReadiness] = []
	upgrades: NullableList[str] = []


class KubernetesVersionProperties(AzModel):
	"""Kubernetes version profile for given major.minor release"""

	version: ReadOnly[str] = None
	is_preview: ReadOnly[bool] = Field(alias="isPreview", default=None)
	patch_versions: ReadOnly[Dict[str, KubernetesPatchVersions]] = Field(alias="patchVersions", default=None)


class KubernetesVersionProfile(ProxyResource):
	"""The supported kubernetes versions."""

	class Properties(AzModel):
		provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
		values: NullableList[KubernetesVersionProperties] = []

	extended_location: Optional[ExtendedLocation] = Field(alias="extendedLocation", default=None)
	properties: Optional[Properties] = None


class LinuxProfileProperties(AzModel):
	"""SSH profile for control plane and nodepool VMs of the provisioned cluster."""

	class Ssh(AzModel):
		"""SSH configuration for VMs of the provisioned cluster."""

		class PublicKeys(AzModel):
			key_data: Optional[str] = Field(alias="keyData", default=None)

		public_keys: NullableList[PublicKeys] = Field(alias="publicKeys", default=[])

	ssh: Optional[Ssh] = None


class ListCredentialResponse(AzModel):
	"""The list kubeconfig result response."""

	class Error(AzModel):
		code: Optional[str] = None
		message: Optional[str] = None

	class Properties(AzModel):
		kubeconfigs: NullableList[CredentialResult] = []

	rid: ReadOnly[str] = Field(alias="id", default=None)
	name: ReadOnly[str] = None
	resource_id: ReadOnly[str] = Field(alias="resourceId", default=None)
	status: ReadOnly[ProvisioningState] = None
	error: Optional[Error] = None
	properties: Optional[Properties] = None


class NamedAgentPoolProfile(AgentPoolProfile, AgentPoolUpdateProfile, AgentPoolName):
	"""Profile of the default agent pool along with a name parameter"""


class NetworkProfile(AzModel):
	"""The network configuration profile for the provisioned cluster."""

	class LoadBalancerProfile(AzModel):
		"""Profile of the HA Proxy load balancer."""

		count: Optional[int] = None

	class NetworkPolicy(OpenEnum):
		"""Network policy used for building Kubernetes network. Possible values include: 'calico'."""

		CALICO = "calico"

	load_balancer_profile: Optional[LoadBalancerProfile] = Field(alias="loadBalancerProfile", default=None)
	network_policy: Optional[NetworkPolicy] = Field(alias="networkPolicy", default=None)
	pod_cidr: Optional[str] = Field(alias="podCidr", default=None)


class StorageProfileSmbCsiDriver(AzModel):
	"""SMB CSI Driver settings for the storage profile."""

	enabled: Optional[bool] = None


class StorageProfileNfsCsiDriver(AzModel):
	"""NFS CSI Driver settings for the storage profile."""

	enabled: Optional[bool] = None


class StorageProfile(AzModel):
	"""The storage configuration profile for the provisioned cluster."""

	smb_csi_driver: Optional[StorageProfileSmbCsiDriver] = Field(alias="smbCsiDriver", default=None)
	nfs_csi_driver: Optional[StorageProfileNfsCsiDriver] = Field(alias="nfsCsiDriver", default=None)


class ProvisionedClusterLicenseProfile(AzModel):
	"""The license profile of the provisioned cluster."""

	class AzureHybridBenefit(OpenEnum):
		"""Indicates whether Azure Hybrid Benefit is opted in. Default value is false"""

		TRUE = "True"
		FALSE = "False"
		NOT_APPLICABLE = "NotApplicable"

	azure_hybrid_benefit: Optional[AzureHybridBenefit] = Field(alias="azureHybridBenefit", default=None)


class ProvisionedClusterProperties(AzModel):
	"""Properties of the provisioned cluster."""

	class Status(AzModel):
		"""The observed status of the provisioned cluster."""

		control_plane_status: NullableList[AddonStatusProfile] = Field(alias="controlPlaneStatus", default=[])
		current_state: ReadOnly[ProvisioningState] = Field(alias="currentState", default=None)
		error_message: Optional[str] = Field(alias="errorMessage", default=None)

	class AutoScalerProfile(AzModel):
		"""Parameters to be applied to the cluster-autoscaler when auto scaling is enabled for the provisioned cluster."""

		class Expander(OpenEnum):
			"""If not specified, the default is 'random'. See [expanders](https://github.com/kubernetes/autoscaler/blob/master/cluster-autoscaler/FAQ.md#what-are-expanders) for more information."""

			LEAST_WASTE = "least-waste"
			MOST_PODS = "most-pods"
			PRIORITY = "priority"
			RANDOM = "random"

		balance_similar_node_groups: Optional[str] = Field(alias="balance-similar-node-groups", default=None)
		expander: Optional[Expander] = None
		max_empty_bulk_delete: Optional[str] = Field(alias="max-empty-bulk-delete", default=None)
		max_graceful_termination_sec: Optional[str] = Field(alias="max-graceful-termination-sec", default=None)
		max_node_provision_time: Optional[str] = Field(alias="max-node-provision-time", default=None)
		max_total_unready_percentage: Optional[str] = Field(alias="max-total-unready-percentage", default=None)
		new_pod_scale_up_delay: Optional[str] = Field(alias="new-pod-scale-up-delay", default=None)
		ok_total_unready_count: Optional[str] = Field(alias="ok-total-unready-count", default=None)
		scan_interval: Optional[str] = Field(alias="scan-interval", default=None)
		scale_down_delay_after_add: Optional[str] = Field(alias="scale-down-delay-after-add", default=None)
		scale_down_delay_after_delete: Optional[str] = Field(alias="scale-down-delay-after-delete", default=None)
		scale_down_delay_after_failure: Optional[str] = Field(alias="scale-down-delay-after-failure", default=None)
		scale_down_unneeded_time: Optional[str] = Field(alias="scale-down-unneeded-time", default=None)
		scale_down_unready_time: Optional[str] = Field(alias="scale-down-unready-time", default=None)
		scale_down_utilization_threshold: Optional[str] = Field(alias="scale-down-utilization-threshold", default=None)
		skip_nodes_with_local_storage: Optional[str] = Field(alias="skip-nodes-with-local-storage", default=None)
		skip_nodes_with_system_pods: Optional[str] = Field(alias="skip-nodes-with-system-pods", default=None)

	linux_profile: Optional[LinuxProfileProperties] = Field(alias="linuxProfile", default=None)
	control_plane: Optional[ControlPlaneProfile] = Field(alias="controlPlane", default=None)
	kubernetes_version: Optional[str] = Field(alias="kubernetesVersion", default=None)
	network_profile: Optional[NetworkProfile] = Field(alias="networkProfile", default=None)
	storage_profile: Optional[StorageProfile] = Field(alias="storageProfile", default=None)
	cluster_vm_access_profile: Optional[ClusterVmAccessProfile] = Field(alias="clusterVMAccessProfile", default=None)
	agent_pool_profiles: NullableList[NamedAgentPoolProfile] = Field(alias="agentPoolProfiles", default=[])
	cloud_provider_profile: Optional[CloudProviderProfile] = Field(alias="cloudProviderProfile", default=None)
	provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
	status: ReadOnly[Status] = None
	license_profile: Optional[ProvisionedClusterLicenseProfile] = Field(alias="licenseProfile", default=None)
	auto_scaler_profile: Optional[AutoScalerProfile] = Field(alias="autoScalerProfile", default=None)


class ProvisionedCluster(ProxyResource):
	"""The provisioned cluster resource definition."""

	properties: Optional[ProvisionedClusterProperties] = None
	extended_location: Optional[ExtendedLocation] = Field(alias="extendedLocation", default=None)


class ProvisionedClusterPoolUpgradeProfileProperties(AzModel):
	"""The upgrade properties."""

	kubernetes_version: ReadOnly[str] = Field(alias="kubernetesVersion", default=None)
	is_preview: ReadOnly[bool] = Field(alias="isPreview", default=None)


class ProvisionedClusterPoolUpgradeProfile(AzModel):
	"""The list of available kubernetes versions for upgrade."""

	kubernetes_version: ReadOnly[str] = Field(alias="kubernetesVersion", default=None)
	os_type: ReadOnly[OsType] = Field(alias="osType", default=None)
	upgrades: NullableList[ProvisionedClusterPoolUpgradeProfileProperties] = []


class ProvisionedClusterUpgradeProfileProperties(AzModel):
	"""Control plane and agent pool upgrade profiles."""

	provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
	control_plane_profile: ProvisionedClusterPoolUpgradeProfile = Field(alias="controlPlaneProfile")


class ProvisionedClusterUpgradeProfile(ProxyResource):
	"""The list of available kubernetes version upgrades for the provisioned cluster."""

	properties: ProvisionedClusterUpgradeProfileProperties


class VmSkuCapabilities(AzModel):
	"""Describes the VM SKU capabilities like MemoryGB, vCPUs, etc."""

	name: ReadOnly[str] = None
	value: ReadOnly[str] = None


class VmSkuProperties(AzModel):
	"""The profile for supported VM SKUs"""

	resource_type: ReadOnly[str] = Field(alias="resourceType", default=None)
	capabilities: NullableList[VmSkuCapabilities] = []
	name: ReadOnly[str] = None
	tier: ReadOnly[str] = None
	size: ReadOnly[str] = None


class VmSkuProfile(ProxyResource):
	"""The list of supported VM SKUs."""

	class Properties(AzModel):
		provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
		values: NullableList[VmSkuProperties] = []

	extended_location: Optional[ExtendedLocation] = Field(alias="extendedLocation", default=None)
	properties: Optional[Properties] = None


class AgentPoolListResult(AzList[AgentPool]):
	"""List of all agent pool resources associated with the provisioned cluster."""

	value: NullableList[AgentPool] = []


class KubernetesVersionProfileList(AzList[KubernetesVersionProfile]):
	"""List of supported kubernetes versions."""

	value: NullableList[KubernetesVersionProfile] = []


class ProvisionedClusterListResult(AzList[ProvisionedCluster]):
	"""Lists the ProvisionedClusterInstance resource associated with the ConnectedCluster."""

	value: NullableList[ProvisionedCluster] = []


class VmSkuProfileList(AzList[VmSkuProfile]):
	"""The list of supported VM SKUs."""

	value: NullableList[VmSkuProfile] = []


AddonStatusProfile.model_rebuild()
AgentPoolProfile.model_rebuild()
AgentPoolUpdateProfile.model_rebuild()
AgentPoolProvisioningStatus.model_rebuild()
AgentPoolProperties.model_rebuild()
ExtendedLocation.model_rebuild()
AgentPool.model_rebuild()
AgentPoolName.model_rebuild()
CloudProviderProfile.model_rebuild()
ClusterVmAccessProfile.model_rebuild()
ControlPlaneProfile.model_rebuild()
CredentialResult.model_rebuild()
KubernetesVersionReadiness.model_rebuild()
KubernetesPatchVersions.model_rebuild()
KubernetesVersionProperties.model_rebuild()
KubernetesVersionProfile.model_rebuild()
LinuxProfileProperties.model_rebuild()
ListCredentialResponse.model_rebuild()
NamedAgentPoolProfile.model_rebuild()
NetworkProfile.model_rebuild()
StorageProfileSmbCsiDriver.model_rebuild()
StorageProfileNfsCsiDriver.model_rebuild()
StorageProfile.model_rebuild()
ProvisionedClusterLicenseProfile.model_rebuild()
ProvisionedClusterProperties.model_rebuild()
ProvisionedCluster.model_rebuild()
ProvisionedClusterPoolUpgradeProfileProperties.model_rebuild()
ProvisionedClusterPoolUpgradeProfile.model_rebuild()
ProvisionedClusterUpgradeProfileProperties.model_rebuild()
ProvisionedClusterUpgradeProfile.model_rebuild()
VmSkuCapabilities.model_rebuild()
VmSkuProperties.model_rebuild()
VmSkuProfile.model_rebuild()
AgentPoolListResult.model_rebuild()
KubernetesVersionProfileList.model_rebuild()
ProvisionedClusterListResult.model_rebuild()
VmSkuProfileList.model_rebuild()


class AzProvisionedClusterInstances:
	apiv = "2024-01-01"

	@staticmethod
	def Get(connectedClusterResourceUri: str) -> Req[ProvisionedCluster]:
		"""Gets the provisioned cluster instance"""
		r = Req.get(
			name="ProvisionedClusterInstances.Get",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default",
			apiv="2024-01-01",
			ret_t=ProvisionedCluster,
		)

		return r

	@staticmethod
	def CreateOrUpdate(connectedClusterResourceUri: str, provisionedClusterInstance: ProvisionedCluster) -> Req[ProvisionedCluster]:
		"""Creates or updates the provisioned cluster instance"""
		r = Req.put(
			name="ProvisionedClusterInstances.CreateOrUpdate",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default",
			apiv="2024-01-01",
			body=provisionedClusterInstance,
			ret_t=ProvisionedCluster,
		)

		return r

	@staticmethod
	def Delete(connectedClusterResourceUri: str) -> Req[None]:
		"""Deletes the provisioned cluster instance"""
		r = Req.delete(
			name="ProvisionedClusterInstances.Delete",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default",
			apiv="2024-01-01",
		)

		return r

	@staticmethod
	def List(connectedClusterResourceUri: str) -> Req[ProvisionedClusterListResult]:
		"""Lists the ProvisionedClusterInstance resource associated with the ConnectedCluster"""
		r = Req.get(
			name="ProvisionedClusterInstances.List",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances",
			apiv="2024-01-01",
			ret_t=ProvisionedClusterListResult,
		)

		return r

	@staticmethod
	def GetUpgradeProfile(connectedClusterResourceUri: str) -> Req[ProvisionedClusterUpgradeProfile]:
		"""Gets the upgrade profile of a provisioned cluster"""
		r = Req.get(
			name="ProvisionedClusterInstances.GetUpgradeProfile",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default/upgradeProfiles/default",
			apiv="2024-01-01",
			ret_t=ProvisionedClusterUpgradeProfile,
		)

		return r

	@staticmethod
	def ListUserKubeconfig(connectedClusterResourceUri: str) -> Req[Optional[ListCredentialResponse]]:
		"""Lists the user credentials of the provisioned cluster (can only be used within private network)"""
		r = Req.post(
			name="ProvisionedClusterInstances.ListUserKubeconfig",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default/listUserKubeconfig",
			apiv="2024-01-01",
			ret_t=Optional[ListCredentialResponse],
		)

		return r

	@staticmethod
	def ListAdminKubeconfig(connectedClusterResourceUri: str) -> Req[Optional[ListCredentialResponse]]:
		"""Lists the admin credentials of the provisioned cluster (can only be used within private network)"""
		r = Req.post(
			name="ProvisionedClusterInstances.ListAdminKubeconfig",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default/listAdminKubeconfig",
			apiv="2024-01-01",
			ret_t=Optional[ListCredentialResponse],
		)

		return r


class AzAgentPool:
	apiv = "2024-01-01"

	@staticmethod
	def Get(connectedClusterResourceUri: str, agentPoolName: str) -> Req[AgentPool]:
		"""Gets the specified agent pool in the provisioned cluster"""
		r = Req.get(
			name="AgentPool.Get",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default/agentPools/{agentPoolName}",
			apiv="2024-01-01",
			ret_t=AgentPool,
		)

		return r

	@staticmethod
	def CreateOrUpdate(connectedClusterResourceUri: str, agentPoolName: str, agentPool: AgentPool) -> Req[AgentPool]:
		"""Creates or updates the agent pool in the provisioned cluster"""
		r = Req.put(
			name="AgentPool.CreateOrUpdate",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default/agentPools/{agentPoolName}",
			apiv="2024-01-01",
			body=agentPool,
			ret_t=AgentPool,
		)

		return r

	@staticmethod
	def Delete(connectedClusterResourceUri: str, agentPoolName: str) -> Req[None]:
		"""Deletes the specified agent pool in the provisioned cluster"""
		r = Req.delete(
			name="AgentPool.Delete",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default/agentPools/{agentPoolName}",
			apiv="2024-01-01",
		)

		return r

	@staticmethod
	def ListByProvisionedCluster(connectedClusterResourceUri: str) -> Req[AgentPoolListResult]:
		"""Gets the list of agent pools in the specified provisioned cluster"""
		r = Req.get(
			name="AgentPool.ListByProvisionedCluster",
			path=f"/{connectedClusterResourceUri}/providers/Microsoft.HybridContainerService/provisionedClusterInstances/default/agentPools",
			apiv="2024-01-01",
			ret_t=AgentPoolListResult,
		)

		return r


class AzKubernetesVersions:
	apiv = "2024-01-01"

	@staticmethod
	def List(customLocationResourceUri: str) -> Req[KubernetesVersionProfileList]:
		"""Lists the supported kubernetes versions for the specified custom location"""
		r = Req.get(
			name="KubernetesVersions.List",
			path=f"/{customLocationResourceUri}/providers/Microsoft.HybridContainerService/kubernetesVersions",
			apiv="2024-01-01",
			ret_t=KubernetesVersionProfileList,
		)

		return r


class AzVMSkus:
	apiv = "2024-01-01"

	@staticmethod
	def List(customLocationResourceUri: str) -> Req[VmSkuProfileList]:
		"""Lists the supported VM skus for the specified custom location"""
		r = Req.get(
			name="VMSkus.List",
			path=f"/{customLocationResourceUri}/providers/Microsoft.HybridContainerService/skus",
			apiv="2024-01-01",
			ret_t=VmSkuProfileList,
		)

		return r

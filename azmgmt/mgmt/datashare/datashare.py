# pylint: disable
# flake8: noqa
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from azmgmt.azrest.models import AzList, AzModel, NullableList, OpenEnum, ReadOnly, Req, polymorphic


class ProxyDto(AzModel):
	"""Base data transfer object implementation for proxy resources."""

	rid: ReadOnly[str] = Field(alias="id", default=None)
	name: ReadOnly[str] = None
	type: ReadOnly[str] = None


class DefaultDto(ProxyDto):
	"""Base data transfer object implementation for default resources."""

	location: Optional[str] = None
	tags: Optional[Dict[str, str]] = None


class Identity(AzModel):
	"""Identity of resource"""

	class Type(OpenEnum):
		"""Identity Type"""

		SYSTEM_ASSIGNED = "SystemAssigned"

	principal_id: ReadOnly[str] = Field(alias="principalId", default=None)
	tenant_id: ReadOnly[str] = Field(alias="tenantId", default=None)
	type: Optional[Type] = None


class AccountProperties(AzModel):
	"""Account property bag."""

	class ProvisioningState(OpenEnum):
		"""Provisioning state of the Account"""

		SUCCEEDED = "Succeeded"
		CREATING = "Creating"
		DELETING = "Deleting"
		MOVING = "Moving"
		FAILED = "Failed"

	created_at: ReadOnly[datetime] = Field(alias="createdAt", default=None)
	provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
	user_email: ReadOnly[str] = Field(alias="userEmail", default=None)
	user_name: ReadOnly[str] = Field(alias="userName", default=None)


class Account(DefaultDto):
	"""An account data transfer object."""

	identity: Identity
	properties: Optional[AccountProperties] = None


class AccountUpdateParameters(AzModel):
	"""Update parameters for accounts"""

	tags: Optional[Dict[str, str]] = None


class DataSet(ProxyDto):
	"""A DataSet data transfer object."""

	class Kind(OpenEnum):
		"""Kind of data set."""

		BLOB = "Blob"
		CONTAINER = "Container"
		BLOB_FOLDER = "BlobFolder"
		ADLS_GEN2_FILE_SYSTEM = "AdlsGen2FileSystem"
		ADLS_GEN2_FOLDER = "AdlsGen2Folder"
		ADLS_GEN2_FILE = "AdlsGen2File"
		ADLS_GEN1_FOLDER = "AdlsGen1Folder"
		ADLS_GEN1_FILE = "AdlsGen1File"
		KUSTO_CLUSTER = "KustoCluster"
		KUSTO_DATABASE = "KustoDatabase"
		SQL_DB_TABLE = "SqlDBTable"
		SQL_DW_TABLE = "SqlDWTable"

	kind: Kind


class AdlsGen2FileSystemProperties(AzModel):
	"""Properties of the ADLS Gen2 file system data set."""

	data_set_id: ReadOnly[str] = Field(alias="dataSetId", default=None)
	file_system: str = Field(alias="fileSystem")
	resource_group: str = Field(alias="resourceGroup")
	storage_account_name: str = Field(alias="storageAccountName")
	subscription_id: str = Field(alias="subscriptionId")


class AdlsGen2FileSystemDataSet(DataSet):
	"""An ADLS Gen 2 file system data set."""

	kind: DataSet.Kind = DataSet.Kind.ADLS_GEN2_FILE_SYSTEM
	properties: AdlsGen2FileSystemProperties


class BlobContainerProperties(AzModel):
	"""Properties of the BLOB container data set."""

	container_name: str = Field(alias="containerName")
	data_set_id: ReadOnly[str] = Field(alias="dataSetId", default=None)
	resource_group: str = Field(alias="resourceGroup")
	storage_account_name: str = Field(alias="storageAccountName")
	subscription_id: str = Field(alias="subscriptionId")


class BlobContainerDataSet(DataSet):
	"""An Azure storage blob container data set."""

	kind: DataSet.Kind = DataSet.Kind.CONTAINER
	properties: BlobContainerProperties


class BlobProperties(AzModel):
	"""Properties of the blob data set."""

	container_name: str = Field(alias="containerName")
	data_set_id: ReadOnly[str] = Field(alias="dataSetId", default=None)
	file_path: str = Field(alias="filePath")
	resource_group: str = Field(alias="resourceGroup")
	storage_account_name: str = Field(alias="storageAccountName")
	subscription_id: str = Field(alias="subscriptionId")


class BlobDataSet(DataSet):
	"""An Azure storage blob data set."""

	kind: DataSet.Kind = DataSet.Kind.BLOB
	properties: BlobProperties


class BlobFolderProperties(AzModel):
	"""Properties of the blob folder data set."""

	container_name: str = Field(alias="containerName")
	data_set_id: ReadOnly[str] = Field(alias="dataSetId", default=None)
	prefix: str
	resource_group: str = Field(alias="resourceGroup")
	storage_account_name: str = Field(alias="storageAccountName")
	subscription_id: str = Field(alias="subscriptionId")


class BlobFolderDataSet(DataSet):
	"""An Azure storage blob folder data set."""

	kind: DataSet.Kind = DataSet.Kind.BLOB_FOLDER
	properties: BlobFolderProperties


class DataShareErrorInfo(AzModel):
	"""The data share error body model."""

	code: str
	details: NullableList[DataShareErrorInfo] = []
	message: str
	target: Optional[str] = None


class DataShareError(AzModel):
	"""The data share error model."""

	error: DataShareErrorInfo


class InvitationProperties(AzModel):
	"""Invitation property bag."""

	class InvitationStatus(OpenEnum):
		"""The status of the invitation."""

		PENDING = "Pending"
		ACCEPTED = "Accepted"
		REJECTED = "Rejected"
		WITHDRAWN = "Withdrawn"

	invitation_id: ReadOnly[str] = Field(alias="invitationId", default=None)
	invitation_status: ReadOnly[InvitationStatus] = Field(alias="invitationStatus", default=None)
	responded_at: ReadOnly[datetime] = Field(alias="respondedAt", default=None)
	sent_at: ReadOnly[datetime] = Field(alias="sentAt", default=None)
	target_active_directory_id: Optional[str] = Field(alias="targetActiveDirectoryId", default=None)
	target_email: Optional[str] = Field(alias="targetEmail", default=None)
	target_object_id: Optional[str] = Field(alias="targetObjectId", default=None)
	user_email: ReadOnly[str] = Field(alias="userEmail", default=None)
	user_name: ReadOnly[str] = Field(alias="userName", default=None)


class Invitation(ProxyDto):
	"""A Invitation data transfer object."""

	properties: Optional[InvitationProperties] = None


class KustoClusterDataSetProperties(AzModel):
	"""Properties of the kusto cluster data set."""

	class ProvisioningState(OpenEnum):
		"""Provisioning state of the kusto cluster data set."""

		SUCCEEDED = "Succeeded"
		CREATING = "Creating"
		DELETING = "Deleting"
		MOVING = "Moving"
		FAILED = "Failed"

	data_set_id: ReadOnly[str] = Field(alias="dataSetId", default=None)
	kusto_cluster_resource_id: str = Field(alias="kustoClusterResourceId")
	location: ReadOnly[str] = None
	provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)


class KustoClusterDataSet(DataSet):
	"""A kusto cluster data set."""

	kind: DataSet.Kind = DataSet.Kind.KUSTO_CLUSTER
	properties: KustoClusterDataSetProperties


class OperationResponse(AzModel):
	"""Response for long running operation"""

	class Status(OpenEnum):
		"""Operation state of the long running operation."""

		ACCEPTED = "Accepted"
		IN_PROGRESS = "InProgress"
		TRANSIENT_FAILURE = "TransientFailure"
		SUCCEEDED = "Succeeded"
		FAILED = "Failed"

	end_time: Optional[datetime] = Field(alias="endTime", default=None)
	error: Optional[DataShareErrorInfo] = None
	start_time: Optional[datetime] = Field(alias="startTime", default=None)
	status: Status


class ShareProperties(AzModel):
	"""Share property bag."""

	class ProvisioningState(OpenEnum):
		"""Gets or sets the provisioning state"""

		SUCCEEDED = "Succeeded"
		CREATING = "Creating"
		DELETING = "Deleting"
		MOVING = "Moving"
		FAILED = "Failed"

	class ShareKind(OpenEnum):
		"""Share kind."""

		COPY_BASED = "CopyBased"
		IN_PLACE = "InPlace"

	created_at: ReadOnly[datetime] = Field(alias="createdAt", default=None)
	description: Optional[str] = None
	provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
	share_kind: Optional[ShareKind] = Field(alias="shareKind", default=None)
	terms: Optional[str] = None
	user_email: ReadOnly[str] = Field(alias="userEmail", default=None)
	user_name: ReadOnly[str] = Field(alias="userName", default=None)


class Share(ProxyDto):
	"""A share data transfer object."""

	properties: Optional[ShareProperties] = None


class ShareSubscriptionProperties(AzModel):
	"""Share subscription property bag."""

	class ProvisioningState(OpenEnum):
		"""Provisioning state of the share subscription"""

		SUCCEEDED = "Succeeded"
		CREATING = "Creating"
		DELETING = "Deleting"
		MOVING = "Moving"
		FAILED = "Failed"

	class ShareKind(OpenEnum):
		"""Kind of share"""

		COPY_BASED = "CopyBased"
		IN_PLACE = "InPlace"

	class ShareSubscriptionStatus(OpenEnum):
		"""Gets the current status of share subscription."""

		ACTIVE = "Active"
		REVOKED = "Revoked"
		SOURCE_DELETED = "SourceDeleted"
		REVOKING = "Revoking"

	created_at: ReadOnly[datetime] = Field(alias="createdAt", default=None)
	invitation_id: str = Field(alias="invitationId")
	provider_email: ReadOnly[str] = Field(alias="providerEmail", default=None)
	provider_name: ReadOnly[str] = Field(alias="providerName", default=None)
	provider_tenant_name: ReadOnly[str] = Field(alias="providerTenantName", default=None)
	provisioning_state: ReadOnly[ProvisioningState] = Field(alias="provisioningState", default=None)
	share_description: ReadOnly[str] = Field(alias="shareDescription", default=None)
	share_kind: ReadOnly[ShareKind] = Field(alias="shareKind", default=None)
	share_name: ReadOnly[str] = Field(alias="shareName", default=None)
	share_subscription_status: ReadOnly[ShareSubscriptionStatus] = Field(alias="shareSubscriptionStatus", default=None)
	share_terms: ReadOnly[str] = Field(alias="shareTerms", default=None)
	user_email: ReadOnly[str] = Field(alias="userEmail", default=None)
	user_name: ReadOnly[str] = Field(alias="userName", default=None)


class ShareSubscription(ProxyDto):
	"""A share subscription data transfer object."""

	properties: ShareSubscriptionProperties


DataSetUnion = polymorphic(
	"kind",
	DataSet,
	{
		"AdlsGen2FileSystem": AdlsGen2FileSystemDataSet,
		"Container": BlobContainerDataSet,
		"Blob": BlobDataSet,
		"BlobFolder": BlobFolderDataSet,
		"KustoCluster": KustoClusterDataSet,
	},
)


class AccountList(AzList[Account]):
	"""List response for get Accounts."""


class DataSetList(AzList[DataSetUnion]):
	"""List response for get DataSets"""


class InvitationList(AzList[Invitation]):
	"""List response for get InvitationList"""


class ShareList(AzList[Share]):
	"""List response for get Shares."""


class ShareSubscriptionList(AzList[ShareSubscription]):
	"""List response for get ShareSubscription."""


ProxyDto.model_rebuild()
DefaultDto.model_rebuild()
Identity.model_rebuild()
AccountProperties.model_rebuild()
Account.model_rebuild()
AccountUpdateParameters.model_rebuild()
DataSet.model_rebuild()
AdlsGen2FileSystemProperties.model_rebuild()
AdlsGen2FileSystemDataSet.model_rebuild()
BlobContainerProperties.model_rebuild()
BlobContainerDataSet.model_rebuild()
BlobProperties.model_rebuild()
BlobDataSet.model_rebuild()
BlobFolderProperties.model_rebuild()
BlobFolderDataSet.model_rebuild()
DataShareErrorInfo.model_rebuild()
DataShareError.model_rebuild()
InvitationProperties.model_rebuild()
Invitation.model_rebuild()
KustoClusterDataSetProperties.model_rebuild()
KustoClusterDataSet.model_rebuild()
OperationResponse.model_rebuild()
ShareProperties.model_rebuild()
Share.model_rebuild()
ShareSubscriptionProperties.model_rebuild()
ShareSubscription.model_rebuild()
AccountList.model_rebuild()
DataSetList.model_rebuild()
InvitationList.model_rebuild()
ShareList.model_rebuild()
ShareSubscriptionList.model_rebuild()


class AzAccounts:
	apiv = "2018-11-01-preview"

	@staticmethod
	def ListBySubscription(subscriptionId: str, skipToken: Optional[str] = None) -> Req[AccountList]:
		"""List Accounts in Subscription"""
		r = Req.get(
			name="Accounts.ListBySubscription",
			path=f"/subscriptions/{subscriptionId}/providers/Microsoft.DataShare/accounts",
			apiv="2018-11-01-preview",
			ret_t=AccountList,
		)
		if skipToken is not None:
			r = r.add_param("$skipToken", str(skipToken))

		return r

	@staticmethod
	def ListByResourceGroup(subscriptionId: str, resourceGroupName: str, skipToken: Optional[str] = None) -> Req[AccountList]:
		"""List Accounts in ResourceGroup"""
		r = Req.get(
			name="Accounts.ListByResourceGroup",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts",
			apiv="2018-11-01-preview",
			ret_t=AccountList,
		)
		if skipToken is not None:
			r = r.add_param("$skipToken", str(skipToken))

		return r

	@staticmethod
	def Get(subscriptionId: str, resourceGroupName: str, accountName: str) -> Req[Account]:
		"""Get an account"""
		r = Req.get(
			name="Accounts.Get",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}",
			apiv="2018-11-01-preview",
			ret_t=Account,
		)

		return r

	@staticmethod
	def Create(subscriptionId: str, resourceGroupName: str, accountName: str, account: Account) -> Req[Account]:
		"""Create an account"""
		r = Req.put(
			name="Accounts.Create",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}",
			apiv="2018-11-01-preview",
			body=account,
			ret_t=Account,
		)

		return r

	@staticmethod
	def Delete(subscriptionId: str, resourceGroupName: str, accountName: str) -> Req[Optional[OperationResponse]]:
		"""DeleteAccount"""
		r = Req.delete(
			name="Accounts.Delete",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}",
			apiv="2018-11-01-preview",
			ret_t=Optional[OperationResponse],
		)

		return r

	@staticmethod
	def Update(subscriptionId: str, resourceGroupName: str, accountName: str, accountUpdateParameters: AccountUpdateParameters) -> Req[Account]:
		"""Patch an account"""
		r = Req.patch(
			name="Accounts.Update",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}",
			apiv="2018-11-01-preview",
			body=accountUpdateParameters,
			ret_t=Account,
		)

		return r


class AzShares:
	apiv = "2018-11-01-preview"

	@staticmethod
	def ListByAccount(subscriptionId: str, resourceGroupName: str, accountName: str, skipToken: Optional[str] = None) -> Req[ShareList]:
		"""List shares in an account"""
		r = Req.get(
			name="Shares.ListByAccount",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares",
			apiv="2018-11-01-preview",
			ret_t=ShareList,
		)
		if skipToken is not None:
			r = r.add_param("$skipToken", str(skipToken))

		return r

	@staticmethod
	def Get(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str) -> Req[Share]:
		"""Get a share"""
		r = Req.get(
			name="Shares.Get",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}",
			apiv="2018-11-01-preview",
			ret_t=Share,
		)

		return r

	@staticmethod
	def Create(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, share: Share) -> Req[Share]:
		"""Create a share"""
		r = Req.put(
			name="Shares.Create",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}",
			apiv="2018-11-01-preview",
			body=share,
			ret_t=Share,
		)

		return r

	@staticmethod
	def Delete(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str) -> Req[Optional[OperationResponse]]:
		"""Delete a share"""
		r = Req.delete(
			name="Shares.Delete",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}",
			apiv="2018-11-01-preview",
			ret_t=Optional[OperationResponse],
		)

		return r


class AzDataSets:
	apiv = "2018-11-01-preview"

	@staticmethod
	def ListByShare(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, skipToken: Optional[str] = None) -> Req[DataSetList]:
		"""List DataSets in a share"""
		r = Req.get(
			name="DataSets.ListByShare",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}/dataSets",
			apiv="2018-11-01-preview",
			ret_t=DataSetList,
		)
		if skipToken is not None:
			r = r.add_param("$skipToken", str(skipToken))

		return r

	@staticmethod
	def Get(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, dataSetName: str) -> Req[DataSetUnion]:
		"""Get a DataSet in a share"""
		r = Req.get(
			name="DataSets.Get",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}/dataSets/{dataSetName}",
			apiv="2018-11-01-preview",
			ret_t=DataSetUnion,
		)

		return r

	@staticmethod
	def Create(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, dataSetName: str, dataSet: DataSetUnion) -> Req[DataSetUnion]:
		"""Create a DataSet"""
		r = Req.put(
			name="DataSets.Create",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}/dataSets/{dataSetName}",
			apiv="2018-11-01-preview",
			body=dataSet,
			ret_t=DataSetUnion,
		)

		return r

	@staticmethod
	def Delete(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, dataSetName: str) -> Req[None]:
		"""Delete a DataSet in a share"""
		r = Req.delete(
			name="DataSets.Delete",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}/dataSets/{dataSetName}",
			apiv="2018-11-01-preview",
		)

		return r


class AzInvitations:
	apiv = "2018-11-01-preview"

	@staticmethod
	def ListByShare(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, skipToken: Optional[str] = None) -> Req[InvitationList]:
		"""List invitations in a share"""
		r = Req.get(
			name="Invitations.ListByShare",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}/invitations",
			apiv="2018-11-01-preview",
			ret_t=InvitationList,
		)
		if skipToken is not None:
			r = r.add_param("$skipToken", str(skipToken))

		return r

	@staticmethod
	def Get(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, invitationName: str) -> Req[Invitation]:
		"""Get an invitation in a share"""
		r = Req.get(
			name="Invitations.Get",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}/invitations/{invitationName}",
			apiv="2018-11-01-preview",
			ret_t=Invitation,
		)

		return r

	@staticmethod
	def Create(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, invitationName: str, invitation: Invitation) -> Req[Invitation]:
		"""Sends a new invitation to a recipient to access a share."""
		r = Req.put(
			name="Invitations.Create",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}/invitations/{invitationName}",
			apiv="2018-11-01-preview",
			body=invitation,
			ret_t=Invitation,
		)

		return r

	@staticmethod
	def Delete(subscriptionId: str, resourceGroupName: str, accountName: str, shareName: str, invitationName: str) -> Req[None]:
		"""Delete an invitation in a share"""
		r = Req.delete(
			name="Invitations.Delete",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shares/{shareName}/invitations/{invitationName}",
			apiv="2018-11-01-preview",
		)

		return r


class AzShareSubscriptions:
	apiv = "2018-11-01-preview"

	@staticmethod
	def ListByAccount(subscriptionId: str, resourceGroupName: str, accountName: str, skipToken: Optional[str] = None) -> Req[ShareSubscriptionList]:
		"""List share subscriptions in an account"""
		r = Req.get(
			name="ShareSubscriptions.ListByAccount",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shareSubscriptions",
			apiv="2018-11-01-preview",
			ret_t=ShareSubscriptionList,
		)
		if skipToken is not None:
			r = r.add_param("$skipToken", str(skipToken))

		return r

	@staticmethod
	def Get(subscriptionId: str, resourceGroupName: str, accountName: str, shareSubscriptionName: str) -> Req[ShareSubscription]:
		"""Get a shareSubscription in an account"""
		r = Req.get(
			name="ShareSubscriptions.Get",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shareSubscriptions/{shareSubscriptionName}",
			apiv="2018-11-01-preview",
			ret_t=ShareSubscription,
		)

		return r

	@staticmethod
	def Create(subscriptionId: str, resourceGroupName: str, accountName: str, shareSubscriptionName: str, shareSubscription: ShareSubscription) -> Req[ShareSubscription]:
		"""Create a shareSubscription in an account"""
		r = Req.put(
			name="ShareSubscriptions.Create",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shareSubscriptions/{shareSubscriptionName}",
			apiv="2018-11-01-preview",
			body=shareSubscription,
			ret_t=ShareSubscription,
		)

		return r

	@staticmethod
	def Delete(subscriptionId: str, resourceGroupName: str, accountName: str, shareSubscriptionName: str) -> Req[Optional[OperationResponse]]:
		"""Delete a shareSubscription in an account"""
		r = Req.delete(
			name="ShareSubscriptions.Delete",
			path=f"/subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}/providers/Microsoft.DataShare/accounts/{accountName}/shareSubscriptions/{shareSubscriptionName}",
			apiv="2018-11-01-preview",
			ret_t=Optional[OperationResponse],
		)

		return r

"""Tests for the Data Share models and operations"""
from typing import Optional

import pytest
from pydantic import ValidationError

from azmgmt.mgmt.datashare.datashare import (
	Account,
	AccountProperties,
	AzAccounts,
	AzDataSets,
	AzShares,
	AzShareSubscriptions,
	BlobContainerDataSet,
	BlobDataSet,
	BlobProperties,
	DataSet,
	DataSetList,
	DataShareError,
	Identity,
	KustoClusterDataSet,
	OperationResponse,
	ShareSubscription,
	ShareSubscriptionProperties,
)

sub = "00000000-0000-0000-0000-000000000000"
account_path = f"/subscriptions/{sub}/resourceGroups/rg0/providers/Microsoft.DataShare/accounts/acc0"

storage = {"resourceGroup": "rg0", "storageAccountName": "sa0", "subscriptionId": sub}

data_sets = {
	"value": [
		{"kind": "Blob", "name": "ds0", "properties": {**storage, "containerName": "c0", "filePath": "a/b.csv", "dataSetId": "d0"}},
		{"kind": "Container", "name": "ds1", "properties": {**storage, "containerName": "c1"}},
		{"kind": "KustoCluster", "name": "ds2", "properties": {"kustoClusterResourceId": "/subscriptions/s/kusto/k0", "provisioningState": "Succeeded"}},
		{"kind": "SqlDBTable", "name": "ds3", "properties": {"tableName": "t0"}},
		{"kind": "CosmosDbContainer", "name": "ds4"},
	],
	"nextLink": f"https://management.azure.com{account_path}/shares/share0/dataSets?$skipToken=abc",
}


class TestDataSets:
	@staticmethod
	def test_subtypes_are_selected_by_kind():
		page = DataSetList.from_wire(data_sets)

		blob, container, kusto, *_ = page.value
		assert isinstance(blob, BlobDataSet)
		assert blob.properties.file_path == "a/b.csv"
		assert isinstance(container, BlobContainerDataSet)
		assert container.properties.container_name == "c1"
		assert isinstance(kusto, KustoClusterDataSet)
		assert kusto.properties.provisioning_state.is_known

	@staticmethod
	def test_kind_without_subtype_is_base():
		page = DataSetList.from_wire(data_sets)

		sql = page.value[3]
		assert type(sql) is DataSet
		assert sql.kind is DataSet.Kind.SQL_DB_TABLE
		assert sql.name == "ds3"

	@staticmethod
	def test_unknown_kind_is_base():
		page = DataSetList.from_wire(data_sets)

		cosmos = page.value[4]
		assert type(cosmos) is DataSet
		assert not cosmos.kind.is_known
		assert cosmos.to_wire() == {"kind": "CosmosDbContainer", "name": "ds4"}

	@staticmethod
	def test_subtype_serialises_its_kind():
		ds = BlobDataSet(properties=BlobProperties(container_name="c0", file_path="a.csv", resource_group="rg0", storage_account_name="sa0", subscription_id=sub))

		assert ds.to_wire() == {"kind": "Blob", "properties": {"containerName": "c0", "filePath": "a.csv", **storage}}

	@staticmethod
	def test_subtype_needs_properties():
		with pytest.raises(ValidationError):
			BlobDataSet.from_wire({"kind": "Blob", "name": "ds0"})

	@staticmethod
	def test_list_roundtrip():
		page = DataSetList.from_wire(data_sets)
		again = DataSetList.from_json(page.to_json())

		assert [type(d) for d in again.value] == [type(d) for d in page.value]
		assert again.continuation() == data_sets["nextLink"]


class TestAccount:
	@staticmethod
	def test_identity_is_required():
		with pytest.raises(ValidationError):
			Account(location="westus")

	@staticmethod
	def test_parse():
		a = Account.from_wire(
			{
				"id": account_path,
				"name": "acc0",
				"location": "westus",
				"identity": {"type": "SystemAssigned", "principalId": "p"},
				"properties": {"provisioningState": "Creating", "createdAt": "2019-01-01T00:00:00Z", "userEmail": "someone@example.com"},
			}
		)

		assert a.rid == account_path
		assert a.identity.type is Identity.Type.SYSTEM_ASSIGNED
		assert a.properties.provisioning_state is AccountProperties.ProvisioningState.CREATING
		assert a.properties.created_at.year == 2019

	@staticmethod
	def test_minimal_body():
		a = Account(location="westus", identity=Identity(type=Identity.Type.SYSTEM_ASSIGNED))
		assert a.to_wire() == {"location": "westus", "identity": {"type": "SystemAssigned"}}


class TestShareSubscription:
	@staticmethod
	def test_properties_are_required():
		with pytest.raises(ValidationError):
			ShareSubscription(name="ss0")

	@staticmethod
	def test_invitation_id_is_required():
		with pytest.raises(ValidationError):
			ShareSubscriptionProperties()
		assert ShareSubscription(properties=ShareSubscriptionProperties(invitation_id="i0")).to_wire() == {"properties": {"invitationId": "i0"}}


class TestErrors:
	@staticmethod
	def test_operation_response():
		r = OperationResponse.from_wire({"status": "Failed", "error": {"code": "Conflict", "message": "in use", "details": [{"code": "Inner", "message": "inner"}]}})

		assert r.status is OperationResponse.Status.FAILED
		assert r.error.details[0].code == "Inner"

	@staticmethod
	def test_error_needs_message():
		with pytest.raises(ValidationError):
			DataShareError.from_wire({"error": {"code": "Conflict"}})


class TestOps:
	@staticmethod
	def test_skip_token():
		assert AzAccounts.ListBySubscription(sub).params == {}
		r = AzAccounts.ListBySubscription(sub, skipToken="abc")
		assert r.params == {"$skipToken": "abc"}
		assert r.path == f"/subscriptions/{sub}/providers/Microsoft.DataShare/accounts"

	@staticmethod
	def test_delete_may_return_operation():
		r = AzAccounts.Delete(sub, "rg0", "acc0")
		assert r.ret_t == Optional[OperationResponse]
		assert AzShareSubscriptions.Delete(sub, "rg0", "acc0", "ss0").ret_t == Optional[OperationResponse]

	@staticmethod
	def test_nested_paths():
		assert AzShares.Get(sub, "rg0", "acc0", "share0").path == account_path + "/shares/share0"
		assert AzDataSets.Get(sub, "rg0", "acc0", "share0", "ds0").path == account_path + "/shares/share0/dataSets/ds0"
		assert AzShareSubscriptions.Get(sub, "rg0", "acc0", "ss0").path == account_path + "/shareSubscriptions/ss0"

	@staticmethod
	def test_create_data_set():
		ds = BlobContainerDataSet.from_wire({"properties": {**storage, "containerName": "c0"}})
		r = AzDataSets.Create(sub, "rg0", "acc0", "share0", "ds0", ds)

		assert r.method == "PUT"
		assert r.body.to_wire()["kind"] == "Container"

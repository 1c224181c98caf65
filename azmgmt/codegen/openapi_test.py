"""Test the OpenAPI codegen"""
from datetime import datetime
from pathlib import Path
from textwrap import dedent
from typing import Dict

# pylint: disable=protected-access
import pytest
from pydantic import TypeAdapter

from azmgmt.codegen.openapi import (
	IR_T,
	AZEnum,
	AZImport,
	AZList,
	AZOp,
	AZUnion,
	IR_Dict,
	IR_Enum,
	IR_List,
	IR_Union,
	IRDef,
	IRParam,
	IRTransformer,
	JSONSchemaSubparser,
	OADef,
	OAEnum,
	OAObj,
	OAParam,
	OARef,
	OAResponse,
	ParamPosition,
	PathLookupError,
	Reader,
	RefCache,
	mk_docstring,
	mk_enum_member,
	mk_fieldname,
	mk_typename,
	path2module,
)


def empty_jsp() -> JSONSchemaSubparser:
	return JSONSchemaSubparser(Reader("", Path(), {}, {}), RefCache())


def transformer_for(definitions: Dict, paths: Dict = None, path: Path = Path("pets.json")) -> IRTransformer:
	doc = {"info": {"version": "2023-01-01"}, "definitions": definitions, "paths": paths or {}}
	return IRTransformer.from_reader(Reader("", path, doc, {}))


class TestResolveReference:
	"""Test resolving references"""

	def test_get_from_object_at_path_valid_path(self):
		data = {"a": {"b": {"c": 42}}}
		result = Reader._get_from_object_at_path(data, "a/b/c")
		assert result == 42

	def test_get_from_object_at_path_invalid_path(self):
		data = {"a": {"b": {"c": 42}}}
		with pytest.raises(PathLookupError):
			Reader._get_from_object_at_path(data, "a/b/d")

	def test_get_from_object_at_path_invalid_object(self):
		data = {"a": {"b": {"c": 42}}}
		with pytest.raises(PathLookupError):
			Reader._get_from_object_at_path(data, "a/b/c/d")

	def test_get_from_object_at_path_empty_path(self):
		data = {"a": {"b": {"c": 42}}}
		result = Reader._get_from_object_at_path(data, "")
		assert result == data

	def test_get_from_object_at_path_path_with_slash_prefix(self):
		data = {"a": {"b": {"c": 42}}}
		result = Reader._get_from_object_at_path(data, "/a/b/c")
		assert result == 42

	def test_resolve_path_removes_parent_segments(self):
		p = Path("specification/app/resource-manager/Microsoft.App/stable/2023-05-01") / "../../../../../common-types/resource-management/v5/types.json"
		assert Reader.resolve_path(p) == Path("specification/common-types/resource-management/v5/types.json")

	def test_load_relative_from_cache(self):
		cache: Dict[Path, Reader] = {}
		common = Reader("", Path("specification/common-types/resource-management/v5/types.json"), {"parameters": {"SubscriptionIdParameter": {"name": "subscriptionId"}}}, cache)
		reader = Reader("", Path("specification/app/resource-manager/Microsoft.App/stable/2023-05-01/ContainerApps.json"), {}, cache)

		loaded_from, obj = reader.load_relative("../../../../../common-types/resource-management/v5/types.json#/parameters/SubscriptionIdParameter")
		assert loaded_from is common
		assert obj == {"name": "subscriptionId"}


class TestClassifyRelative:
	@staticmethod
	def test_definition():
		assert Reader.classify_relative("#/definitions/Foo") == (None, "definitions", "/definitions/Foo")

	@staticmethod
	def test_long_path():
		relative = "../../../../../common-types/resource-management/v5/types.json#/parameters/SubscriptionIdParameter"
		expected = (Path("../../../../../common-types/resource-management/v5/types.json"), "parameters", "/parameters/SubscriptionIdParameter")
		assert Reader.classify_relative(relative) == expected

	@staticmethod
	def test_with_current_directory():
		assert Reader.classify_relative("./CommonDefinitions.json#/definitions/Dapr") == (Path("./CommonDefinitions.json"), "definitions", "/definitions/Dapr")

	@staticmethod
	def test_invalid_input():
		with pytest.raises(ValueError):
			Reader.classify_relative("CommonDefinitions.json")


class TestNaming:
	@staticmethod
	@pytest.mark.parametrize(
		"wire_name, expected",
		[
			("id", "rid"),
			("osSKU", "os_sku"),
			("systemData", "system_data"),
			("nextLink", "next_link"),
			("type", "type"),
			("from", "from_"),
			("json", "json_"),
			("continuation", "continuation_"),
			("ipv4Address", "ipv4_address"),
			("eTag", "e_tag"),
			("HTTPSOnly", "https_only"),
			("enableRBAC", "enable_rbac"),
			("@odata.nextLink", "odata_next_link"),
			("kubernetesVersion", "kubernetes_version"),
		],
	)
	def test_fieldname(wire_name, expected):
		assert mk_fieldname(wire_name) == expected

	@staticmethod
	@pytest.mark.parametrize(
		"value, expected",
		[
			("Succeeded", "SUCCEEDED"),
			("SystemAssigned, UserAssigned", "SYSTEM_ASSIGNED_USER_ASSIGNED"),
			("CBLMariner", "CBL_MARINER"),
			("Windows2019", "WINDOWS2019"),
			("Standard_A2", "STANDARD_A2"),
			("HTTP", "HTTP"),
			("1.0", "V1_0"),
			("", "EMPTY"),
		],
	)
	def test_enum_member(value, expected):
		assert mk_enum_member(value) == expected

	@staticmethod
	@pytest.mark.parametrize(
		"name, expected",
		[
			("systemData", "SystemData"),
			("ContainerApp", "ContainerApp"),
			("kubernetes-version", "KubernetesVersion"),
			("2019", "T2019"),
		],
	)
	def test_typename(name, expected):
		assert mk_typename(name) == expected

	@staticmethod
	def test_enum_members_are_unique():
		assert AZEnum.member_names(["Value", "value", "VALUE"]) == {"Value": "VALUE", "value": "VALUE_2", "VALUE": "VALUE_3"}

	@staticmethod
	def test_docstring_is_one_line():
		assert mk_docstring("The name\n   of the   app") == '"""The name of the app"""'

	@staticmethod
	def test_docstring_escapes_quotes():
		assert mk_docstring('ends with "quote"') == '"""ends with "quote" """'

	@staticmethod
	def test_no_docstring():
		assert mk_docstring(None) is None
		assert mk_docstring("") is None


class TestPath2Module:
	@staticmethod
	@pytest.mark.parametrize(
		"spec, expected",
		[
			("specification/common-types/resource-management/v5/types.json", "common/types"),
			("specification/common-types/resource-management/v5/managedidentity.json", "common/managedidentity"),
			("specification/app/resource-manager/Microsoft.App/preview/2023-04-01-preview/CommonDefinitions.json", "app/commondefinitions"),
			("specification/app/resource-manager/Microsoft.App/preview/2023-04-01-preview/ContainerApps.json", "app/containerapps"),
			("specification/datashare/resource-manager/Microsoft.DataShare/preview/2018-11-01-preview/DataShare.json", "datashare/datashare"),
			(
				"specification/hybridaks/resource-manager/Microsoft.HybridContainerService/stable/2024-01-01/provisionedClusterInstances.json",
				"hybridaks/provisionedclusterinstances",
			),
		],
	)
	def test_path2module(spec, expected):
		assert path2module(Path(spec)) == Path(expected)


class TestExamples:
	"""Parse pieces of real Azure specs"""

	parser = TypeAdapter(Dict[str, OAObj])

	def test_common_types(self):
		parsed = self.parser.validate_python(
			{
				"Resource": {
					"type": "object",
					"properties": {
						"id": {"readOnly": True, "type": "string"},
						"systemData": {"$ref": "#/definitions/systemData", "readOnly": True},
					},
					"x-ms-azure-resource": True,
				},
				"createdByType": {"type": "string", "enum": ["User", "Application"], "x-ms-enum": {"name": "createdByType", "modelAsString": True}},
				"tags": {"type": "array", "items": {"type": "string"}},
				"secretRef": {"type": "string"},
			}
		)

		resource = parsed["Resource"]
		assert isinstance(resource, OADef)
		assert isinstance(resource.properties["id"], OADef.Property)
		assert resource.properties["id"].readOnly
		assert isinstance(resource.properties["systemData"], OARef)
		assert resource.properties["systemData"].readOnly

		assert isinstance(parsed["createdByType"], OAEnum)
		assert parsed["createdByType"].ms_enum.modelAsString
		assert isinstance(parsed["tags"], OADef.Array)
		assert isinstance(parsed["secretRef"], OADef.Property)

	def test_polymorphic(self):
		parsed = self.parser.validate_python(
			{
				"DataSet": {"required": ["kind"], "properties": {"kind": {"type": "string", "enum": ["Blob"]}}, "discriminator": "kind"},
				"BlobDataSet": {"x-ms-discriminator-value": "Blob", "allOf": [{"$ref": "#/definitions/DataSet"}]},
			}
		)
		assert parsed["DataSet"].discriminator == "kind"
		assert parsed["BlobDataSet"].discriminator_value == "Blob"
		assert isinstance(parsed["BlobDataSet"].allOf[0], OARef)

	def test_additional_properties(self):
		parsed = self.parser.validate_python(
			{
				"Tags": {"type": "object", "additionalProperties": {"type": "string"}},
				"Anything": {"type": "object", "additionalProperties": True},
			}
		)
		assert isinstance(parsed["Tags"].additionalProperties, OADef.Property)
		assert parsed["Anything"].additionalProperties is True


class TestIRTransformerResolveIRTStr:
	@staticmethod
	def test_basic():
		assert IRTransformer.resolve_ir_t_str(IR_T(t=str)) == "str"
		assert IRTransformer.resolve_ir_t_str(IR_T(t=datetime)) == "datetime"

	@staticmethod
	def test_ir_def():
		ir_def = IRDef(name="ExampleDefinition", properties={})
		assert IRTransformer.resolve_ir_t_str(IR_T(t=ir_def)) == "ExampleDefinition"

	@staticmethod
	def test_polymorphic_def_uses_union():
		ir_def = IRDef(name="DataSet", properties={}, discriminator="kind")
		assert IRTransformer.resolve_ir_t_str(IR_T(t=ir_def)) == "DataSetUnion"

	@staticmethod
	def test_ir_list():
		assert IRTransformer.resolve_ir_t_str(IR_T(t=IR_List(items=IR_T(t=int)))) == "List[int]"

	@staticmethod
	def test_ir_dict():
		assert IRTransformer.resolve_ir_t_str(IR_T(t=IR_Dict(keys=IR_T(t=str), values=IR_T(t=str)), required=False)) == "Optional[Dict[str, str]]"

	@staticmethod
	def test_ir_enum():
		assert IRTransformer.resolve_ir_t_str(IR_T(t=IR_Enum(name="OsType", values=["Linux"]))) == "OsType"

	@staticmethod
	def test_placeholder():
		assert IRTransformer.resolve_ir_t_str(IR_T(t="systemData")) == "SystemData"

	@staticmethod
	def test_none():
		assert IRTransformer.resolve_ir_t_str(None) == "None"
		assert IRTransformer.resolve_ir_t_str(IR_T(t="None")) == "None"


class TestIRTransformerResolveIRTStrReadOnlyAndRequired:
	@staticmethod
	def test_readonly():
		assert IRTransformer.resolve_ir_t_str(IR_T(t=str, readonly=True)) == "ReadOnly[str]"

	@staticmethod
	def test_optional():
		assert IRTransformer.resolve_ir_t_str(IR_T(t=str, required=False)) == "Optional[str]"

	@staticmethod
	def test_priority_readonly_greaterthan_optional():
		assert IRTransformer.resolve_ir_t_str(IR_T(t=str, readonly=True, required=False)) == "ReadOnly[str]"

	@staticmethod
	def test_no_modifiers():
		assert IRTransformer.resolve_ir_t_str(IR_T(t=str, readonly=False, required=True)) == "str"


class TestTransformPrimitives:
	@staticmethod
	@pytest.mark.parametrize(
		"t, fmt, expected",
		[
			("string", None, str),
			("string", "date-time", datetime),
			("string", "uuid", str),
			("integer", "int32", int),
			("number", None, float),
			("boolean", None, bool),
			("object", None, dict),
		],
	)
	def test_resolve_type(t, fmt, expected):
		assert JSONSchemaSubparser.resolve_type(t, fmt) is expected

	@staticmethod
	def test_nonhandled():
		assert JSONSchemaSubparser.resolve_type("unknowable") == "unknowable"


class TestIRTransformerUnifyIRT:
	@staticmethod
	def test_empty_list():
		assert IRTransformer.unify_ir_t([]) is None

	@staticmethod
	def test_single_type():
		assert IRTransformer.unify_ir_t([IR_T(t=str)]) == IR_T(t=str)

	@staticmethod
	def test_same_type_twice():
		"""Like an operation which returns a resource for both 200 and 201"""
		assert IRTransformer.unify_ir_t([IR_T(t=str), IR_T(t=str)]) == IR_T(t=str)

	@staticmethod
	def test_multiple_types():
		assert IRTransformer.unify_ir_t([IR_T(t=str), IR_T(t=int)]) == IR_T(t=IR_Union(items=[IR_T(t=str), IR_T(t=int)]))

	@staticmethod
	def test_optional_type():
		assert IRTransformer.unify_ir_t([IR_T(t=str), IR_T(t="None")]) == IR_T(t=str, required=False)

	@staticmethod
	def test_all_optional_types():
		assert IRTransformer.unify_ir_t([IR_T(t="None"), IR_T(t="None")]) is None


class TestJSONSchemaDefs:
	@staticmethod
	def test_enum_inline():
		result = empty_jsp().transform("osType", OAEnum(type="string", enum=["Linux", "Windows"], description="The OS"), ["osType"])
		assert result == IR_T(t=IR_Enum(name="OsType", values=["Linux", "Windows"], description="The OS", inline=True), required=True)

	@staticmethod
	def test_integer_enum_is_plain():
		result = empty_jsp().transform("count", OAEnum(type="integer", enum=[1, 2]))
		assert result == IR_T(t=int, required=False)

	@staticmethod
	def test_dict():
		result = empty_jsp().transform("labels", OADef(type="object", additionalProperties=True))
		assert result == IR_T(t=dict, required=False)

	@staticmethod
	def test_dict_typed():
		result = empty_jsp().transform("labels", OADef(type="object", additionalProperties=OADef.Property(type="string")), ["labels"])
		assert result == IR_T(t=IR_Dict(keys=IR_T(t=str), values=IR_T(t=str)), required=True)

	@staticmethod
	def test_required_and_readonly():
		obj = OADef(
			type="object",
			required=["name"],
			properties={"name": OADef.Property(type="string"), "fqdn": OADef.Property(type="string", readOnly=True)},
		)
		result = empty_jsp().transform("Thing", obj, inline=False)
		assert result.t.properties == {"name": IR_T(t=str, required=True), "fqdn": IR_T(t=str, readonly=True, required=False)}

	@staticmethod
	def test_allof_ref_is_base_and_inline_is_merged():
		tx = transformer_for(
			{
				"Resource": {"type": "object", "properties": {"id": {"type": "string", "readOnly": True}}},
				"Thing": {
					"type": "object",
					"allOf": [
						{"$ref": "#/definitions/Resource"},
						{"type": "object", "properties": {"size": {"type": "integer"}}},
					],
					"properties": {"colour": {"type": "string"}},
				},
			}
		)
		thing = tx.ir_definitions()["Thing"].t
		assert [b.name for b in thing.bases] == ["Resource"]
		assert set(thing.properties.keys()) == {"colour", "size"}

	@staticmethod
	def test_required_comes_from_referencing_def():
		tx = transformer_for(
			{
				"Holder": {"type": "object", "required": ["inner"], "properties": {"inner": {"$ref": "#/definitions/Inner"}, "other": {"$ref": "#/definitions/Inner"}}},
				"Inner": {"type": "object", "properties": {"a": {"type": "string"}}},
			}
		)
		holder = tx.ir_definitions()["Holder"].t
		assert holder.properties["inner"].required
		assert not holder.properties["other"].required

	@staticmethod
	def test_self_referential():
		tx = transformer_for({"Node": {"type": "object", "properties": {"children": {"type": "array", "items": {"$ref": "#/definitions/Node"}}}}})
		node = tx.ir_definitions()["Node"].t
		children = node.properties["children"]
		assert isinstance(children.t, IR_List)
		assert children.t.items.t == "Node"

	@staticmethod
	def test_references_are_shared():
		tx = transformer_for(
			{
				"A": {"type": "object", "properties": {"c": {"$ref": "#/definitions/C"}}},
				"B": {"type": "object", "properties": {"c": {"$ref": "#/definitions/C"}}},
				"C": {"type": "object", "properties": {"x": {"type": "string"}}},
			}
		)
		defs = tx.ir_definitions()
		assert defs["A"].t.properties["c"].t is defs["B"].t.properties["c"].t


class TestJSONSchemaParams:
	@staticmethod
	def test_path_param_is_required():
		param = OAParam.model_validate({"name": "subscriptionId", "in": "path", "type": "string"})
		assert empty_jsp().ir_param(param) == IRParam(t=IR_T(t=str, required=True), name="subscriptionId", position=ParamPosition.path)

	@staticmethod
	def test_list_param():
		param = OAParam.model_validate({"name": "$select", "in": "query", "type": "array", "items": {"type": "string"}})
		assert empty_jsp().ir_param(param) == IRParam(t=IR_T(t=IR_List(items=IR_T(t=str)), required=False), name="$select", position=ParamPosition.query)

	@staticmethod
	def test_ref():
		doc = {"parameters": {"ShareName": {"name": "shareName", "in": "path", "required": True, "type": "string"}}}
		jsp = JSONSchemaSubparser(Reader("", Path("datashare.json"), doc, {}), RefCache())
		result = jsp.ir_param(OARef(ref="#/parameters/ShareName"))
		assert result.name == "shareName"
		assert result.position == ParamPosition.path

	@staticmethod
	def test_body():
		doc = {"definitions": {"Share": {"type": "object", "properties": {"description": {"type": "string"}}}}}
		jsp = JSONSchemaSubparser(Reader("", Path("datashare.json"), doc, {}), RefCache())
		param = OAParam.model_validate({"name": "share", "in": "body", "required": True, "schema": {"$ref": "#/definitions/Share"}})
		result = jsp.ir_param(param)
		assert result.position == ParamPosition.body
		assert result.t.required
		assert isinstance(result.t.t, IRDef) and result.t.t.name == "Share"


class TestJSONSchemaResponse:
	@pytest.fixture
	def jsp(self) -> JSONSchemaSubparser:
		doc = {
			"definitions": {"Share": {"type": "object", "properties": {"description": {"type": "string"}}}},
			"responses": {"ShareResponse": {"description": "a share", "schema": {"$ref": "#/definitions/Share"}}},
		}
		return JSONSchemaSubparser(Reader("", Path("datashare.json"), doc, {}), RefCache())

	def test_no_schema(self, jsp):
		assert jsp.ir_response(OAResponse(description="Deleted")) == IR_T(t="None")

	def test_schema_reference(self, jsp):
		result = jsp.ir_response(OAResponse.model_validate({"description": "OK", "schema": {"$ref": "#/definitions/Share"}}))
		assert result.t.name == "Share"
		assert result.required

	def test_reference(self, jsp):
		result = jsp.ir_response(OARef(ref="#/responses/ShareResponse"))
		assert result.t.name == "Share"

	def test_inline_array(self, jsp):
		result = jsp.ir_response(OAResponse.model_validate({"description": "OK", "schema": {"type": "array", "items": {"$ref": "#/definitions/Share"}}}))
		assert IRTransformer.resolve_ir_t_str(result) == "List[Share]"


class TestTransformDefs:
	@staticmethod
	def test_simple_def():
		tx = transformer_for(
			{
				"MyClass": {
					"type": "object",
					"description": "BlahBlah MyClass",
					"properties": {"myProperty": {"type": "integer", "description": "A property"}},
				}
			}
		)
		assert (
			tx.transform_definitions().strip()
			== dedent(
				'''\
			class MyClass(AzModel):
				"""BlahBlah MyClass"""

				my_property: Optional[int] = Field(alias="myProperty", default=None)


			MyClass.model_rebuild()
			'''
			).strip()
		)

	@staticmethod
	def test_inline_definitions_are_nested():
		tx = transformer_for(
			{
				"Widget": {
					"type": "object",
					"required": ["name"],
					"properties": {
						"name": {"type": "string"},
						"state": {"type": "string", "enum": ["Running", "Stopped"], "readOnly": True},
						"tags": {"type": "array", "items": {"type": "string"}},
						"properties": {"type": "object", "properties": {"createdAt": {"type": "string", "format": "date-time"}}},
					},
				}
			}
		)
		assert (
			tx.transform_definitions().strip()
			== dedent(
				'''\
			class Widget(AzModel):
				class State(OpenEnum):
					RUNNING = "Running"
					STOPPED = "Stopped"

				class Properties(AzModel):
					created_at: Optional[datetime] = Field(alias="createdAt", default=None)

				name: str
				state: ReadOnly[State] = None
				tags: NullableList[str] = []
				properties: Optional[Properties] = None


			Widget.model_rebuild()
			'''
			).strip()
		)

	@staticmethod
	def test_top_level_enum_and_alias():
		tx = transformer_for(
			{
				"createdByType": {"type": "string", "description": "The type of identity", "enum": ["User", "Application"]},
				"WorkloadProfileName": {"type": "string"},
			}
		)
		assert (
			tx.transform_definitions().strip()
			== dedent(
				'''\
			class CreatedByType(OpenEnum):
				"""The type of identity"""

				USER = "User"
				APPLICATION = "Application"


			WorkloadProfileName = str
			'''
			).strip()
		)

	@staticmethod
	def test_polymorphic_and_list():
		tx = transformer_for(
			{
				"PetList": {"type": "object", "properties": {"value": {"type": "array", "items": {"$ref": "#/definitions/Pet"}}, "nextLink": {"type": "string"}}},
				"Cat": {"type": "object", "allOf": [{"$ref": "#/definitions/Pet"}], "x-ms-discriminator-value": "Cat", "properties": {"lives": {"type": "integer"}}},
				"Pet": {
					"type": "object",
					"discriminator": "kind",
					"required": ["kind"],
					"properties": {"kind": {"type": "string", "enum": ["Cat", "Dog"], "x-ms-enum": {"name": "Kind", "modelAsString": True}}},
				},
			}
		)
		assert (
			tx.transform_definitions().strip()
			== dedent(
				'''\
			class Pet(AzModel):
				class Kind(OpenEnum):
					CAT = "Cat"
					DOG = "Dog"

				kind: Kind


			class Cat(Pet):
				kind: Pet.Kind = Pet.Kind.CAT
				lives: Optional[int] = None


			PetUnion = polymorphic(
				"kind",
				Pet,
				{
					"Cat": Cat,
				},
			)


			class PetList(AzList[PetUnion]):
				value: NullableList[PetUnion] = []


			Pet.model_rebuild()
			Cat.model_rebuild()
			PetList.model_rebuild()
			'''
			).strip()
		)

	@staticmethod
	def test_definitions_come_after_their_dependencies():
		tx = transformer_for(
			{
				"Outer": {"type": "object", "properties": {"inner": {"$ref": "#/definitions/Inner"}}},
				"Child": {"type": "object", "allOf": [{"$ref": "#/definitions/Base"}]},
				"Inner": {"type": "object", "properties": {"a": {"type": "string"}}},
				"Base": {"type": "object", "properties": {"b": {"type": "string"}}},
			}
		)
		defs = {k: v.t for k, v in tx.ir_definitions().items()}
		assert IRTransformer.order_definitions({d.name: d for d in defs.values()}) == ["Inner", "Outer", "Base", "Child"]


class TestLists:
	value = {"type": "array", "items": {"$ref": "#/definitions/Share"}}
	share = {"type": "object", "properties": {"description": {"type": "string"}}}

	def _azlist(self, list_def: Dict, paths: Dict = None) -> AZList:
		tx = transformer_for({"ShareList": list_def, "Share": self.share}, paths)
		ir = tx.ir_definitions()["ShareList"].t
		azlist = tx.ir_azlist("ShareList", ir, tx.identify_pageables(tx.openapi.paths))
		assert azlist is not None
		return azlist

	def test_not_a_list(self):
		tx = transformer_for({"Share": self.share})
		assert tx.ir_azlist("Share", tx.ir_definitions()["Share"].t, {}) is None

	def test_next_link(self):
		azlist = self._azlist({"required": ["value"], "properties": {"value": self.value, "nextLink": {"type": "string"}}})
		assert azlist.next_link_name == "nextLink"
		assert azlist.codegen() == "class ShareList(AzList[Share]):\n\tpass"

	def test_no_next_link(self):
		azlist = self._azlist({"required": ["value"], "properties": {"value": self.value}})
		assert (
			azlist.codegen()
			== dedent(
				"""\
			class ShareList(AzList[Share]):
				next_link: Optional[str] = Field(alias="nextLink", default=None, exclude=True)

				def continuation(self) -> Optional[str]:
					return None"""
			)
		)

	def test_pageable_without_next_link_name(self):
		paths = {
			"/shares": {
				"get": {
					"operationId": "Shares_List",
					"x-ms-pageable": {"nextLinkName": None},
					"responses": {"200": {"description": "OK", "schema": {"$ref": "#/definitions/ShareList"}}},
				}
			}
		}
		azlist = self._azlist({"required": ["value"], "properties": {"value": self.value, "nextLink": {"type": "string"}}}, paths)
		assert azlist.next_link_name is None

	def test_custom_next_link_name(self):
		paths = {
			"/shares": {
				"get": {
					"operationId": "Shares_List",
					"x-ms-pageable": {"nextLinkName": "@odata.nextLink"},
					"responses": {"200": {"description": "OK", "schema": {"$ref": "#/definitions/ShareList"}}},
				}
			}
		}
		azlist = self._azlist({"required": ["value"], "properties": {"value": self.value, "@odata.nextLink": {"type": "string"}}}, paths)
		assert (
			azlist.codegen()
			== dedent(
				"""\
			class ShareList(AzList[Share]):
				next_link: Optional[str] = Field(alias="@odata.nextLink", default=None)"""
			)
		)

	def test_optional_value_may_be_null(self):
		azlist = self._azlist({"description": "List response for get Shares.", "properties": {"value": self.value, "nextLink": {"type": "string"}}})
		assert (
			azlist.codegen()
			== dedent(
				'''\
			class ShareList(AzList[Share]):
				"""List response for get Shares."""

				value: NullableList[Share] = []'''
			)
		)


class TestCodegenPieces:
	@staticmethod
	def test_union():
		union = AZUnion(name="DataSetUnion", tag="kind", base="DataSet", variants={"Blob": "BlobDataSet", "KustoCluster": "KustoClusterDataSet"})
		assert (
			union.codegen()
			== dedent(
				"""\
			DataSetUnion = polymorphic(
				"kind",
				DataSet,
				{
					"Blob": BlobDataSet,
					"KustoCluster": KustoClusterDataSet,
				},
			)"""
			)
		)

	@staticmethod
	def test_enum_without_values():
		assert AZEnum(name="Nothing", values=[]).codegen() == "class Nothing(OpenEnum):\n\tpass"

	@staticmethod
	def test_op_with_query_params():
		op = AZOp(
			ops_name="Shares",
			name="ListByAccount",
			description="List shares in an account",
			path="/subscriptions/{subscriptionId}/providers/Microsoft.DataShare/accounts/{accountName}/shares",
			method="get",
			apiv="2018-11-01-preview",
			params={"subscriptionId": "str", "accountName": "str"},
			query_params=[AZOp.Param(name="$skipToken", type="Optional[str]", required=False)],
			ret_t="ShareList",
		)
		assert (
			op.codegen()
			== dedent(
				'''\
			@staticmethod
			def ListByAccount(subscriptionId: str, accountName: str, skipToken: Optional[str] = None) -> Req[ShareList]:
				"""List shares in an account"""
				r = Req.get(
					name="Shares.ListByAccount",
					path=f"/subscriptions/{subscriptionId}/providers/Microsoft.DataShare/accounts/{accountName}/shares",
					apiv="2018-11-01-preview",
					ret_t=ShareList,
				)
				if skipToken is not None:
					r = r.add_param("$skipToken", str(skipToken))

				return r'''
			)
		)

	@staticmethod
	def test_op_with_body_and_no_return():
		op = AZOp(
			ops_name="ContainerApps",
			name="Update",
			path="/containerApps/{containerAppName}",
			method="patch",
			apiv="2023-04-01-preview",
			params={"containerAppName": "str"},
			body=AZOp.Body(name="containerAppEnvelope", type="ContainerApp"),
			ret_t="None",
		)
		assert (
			op.codegen()
			== dedent(
				"""\
			@staticmethod
			def Update(containerAppName: str, containerAppEnvelope: ContainerApp) -> Req[None]:
				r = Req.patch(
					name="ContainerApps.Update",
					path=f"/containerApps/{containerAppName}",
					apiv="2023-04-01-preview",
					body=containerAppEnvelope,
				)

				return r"""
			)
		)

	@staticmethod
	def test_op_with_other_method():
		op = AZOp(ops_name="Things", name="CheckExistence", path="/things/{thingName}", method="head", apiv="2023-01-01", params={"thingName": "str"}, ret_t="None")
		assert 'r = Req(\n\t\tname="Things.CheckExistence",\n\t\tpath=f"/things/{thingName}",\n\t\tmethod="HEAD",' in op.codegen()

	@staticmethod
	def test_required_query_params_come_first():
		op = AZOp(
			ops_name="Things",
			name="List",
			path="/things",
			method="get",
			apiv="2023-01-01",
			query_params=[AZOp.Param(name="$top", type="Optional[int]"), AZOp.Param(name="filter", type="str", required=True)],
			ret_t="ThingList",
		)
		# the transformer sorts these
		op.query_params.sort(key=lambda x: x.required, reverse=True)
		assert "def List(filter: str, top: Optional[int] = None) -> Req[ThingList]:" in op.codegen()


class TestTransformPaths:
	@staticmethod
	def test_ops_class():
		parameters = [
			{"name": "subscriptionId", "in": "path", "required": True, "type": "string"},
			{"name": "toyName", "in": "path", "required": True, "type": "string"},
			{"$ref": "#/parameters/ApiVersionParameter"},
		]
		paths = {
			"/subscriptions/{subscriptionId}/toys/{toyName}": {
				"get": {
					"operationId": "Toys_Get",
					"parameters": parameters,
					"responses": {
						"200": {"description": "OK", "schema": {"$ref": "#/definitions/Toy"}},
						"default": {"description": "Error", "schema": {"$ref": "#/definitions/Toy"}},
					},
				},
				"delete": {
					"operationId": "Toys_Delete",
					"parameters": parameters,
					"responses": {"200": {"description": "OK"}, "204": {"description": "No Content"}},
				},
			}
		}
		doc = {
			"info": {"version": "2023-01-01"},
			"paths": paths,
			"definitions": {"Toy": {"type": "object", "properties": {"colour": {"type": "string"}}}},
			"parameters": {"ApiVersionParameter": {"name": "api-version", "in": "query", "required": True, "type": "string"}},
		}
		tx = IRTransformer.from_reader(Reader("", Path("toys.json"), doc, {}))

		assert (
			tx.transform_paths(paths, "2023-01-01")
			== dedent(
				"""\
			class AzToys:
				apiv = "2023-01-01"

				@staticmethod
				def Get(subscriptionId: str, toyName: str) -> Req[Toy]:
					r = Req.get(
						name="Toys.Get",
						path=f"/subscriptions/{subscriptionId}/toys/{toyName}",
						apiv="2023-01-01",
						ret_t=Toy,
					)

					return r

				@staticmethod
				def Delete(subscriptionId: str, toyName: str) -> Req[None]:
					r = Req.delete(
						name="Toys.Delete",
						path=f"/subscriptions/{subscriptionId}/toys/{toyName}",
						apiv="2023-01-01",
					)

					return r"""
			)
		)

	@staticmethod
	def test_split_operation_id():
		assert IRTransformer.split_operation_id("ContainerApps_ListBySubscription") == ("ContainerApps", "ListBySubscription")
		assert IRTransformer.split_operation_id("ProvisionedClusterInstances_listAdminKubeconfig") == ("ProvisionedClusterInstances", "ListAdminKubeconfig")
		assert IRTransformer.split_operation_id("getSomething") == ("Operations", "GetSomething")


class TestIRTransformerImports:
	common_path = Path("specification/common-types/resource-management/v5/types.json")
	app_path = Path("specification/app/resource-manager/Microsoft.App/stable/2023-05-01/ContainerApps.json")

	@pytest.fixture
	def tx(self) -> IRTransformer:
		cache: Dict[Path, Reader] = {}
		Reader(
			"",
			self.common_path,
			{"definitions": {"Resource": {"type": "object", "properties": {"id": {"type": "string", "readOnly": True}}}, "systemData": {"type": "object", "properties": {"createdBy": {"type": "string"}}}}},
			cache,
		)
		types_ref = "../../../../../common-types/resource-management/v5/types.json#/definitions/"
		app = Reader(
			"",
			self.app_path,
			{
				"definitions": {
					"ContainerApp": {
						"type": "object",
						"allOf": [{"$ref": types_ref + "Resource"}],
						"properties": {"systemData": {"$ref": types_ref + "systemData", "readOnly": True}, "properties": {"$ref": "#/definitions/ContainerAppProperties"}},
					},
					"ContainerAppProperties": {"type": "object", "properties": {"fqdn": {"type": "string"}}},
				},
				"paths": {},
			},
			cache,
		)
		return IRTransformer.from_reader(app)

	def test_imports(self, tx: IRTransformer):
		assert tx.transform_imports("azmgmt.mgmt") == "from azmgmt.mgmt.common.types import Resource, SystemData"

	def test_base_from_other_document(self, tx: IRTransformer):
		assert "class ContainerApp(Resource):" in tx.transform_definitions()

	def test_find_imports_does_not_explore_other_documents(self, tx: IRTransformer):
		other = IRDef(name="Other", properties={"a": IR_T(t=IRDef(name="Further", properties={}, src=Path("further.json")))}, src=Path("other.json"))
		assert tx._find_imports(IR_T(t=other)) == [AZImport(path=Path("other.json"), names={"Other"})]

	def test_find_imports_of_polymorphic(self, tx: IRTransformer):
		other = IRDef(name="DataSet", properties={}, src=Path("other.json"), discriminator="kind")
		assert tx._find_imports(IR_T(t=IR_List(items=IR_T(t=other)))) == [AZImport(path=Path("other.json"), names={"DataSetUnion"})]

	def test_merge(self):
		merged = AZImport.merge([AZImport(path=Path("a.json"), names={"A"}), AZImport(path=Path("a.json"), names={"B"}), AZImport(path=Path("c.json"), names={"C"})])
		assert merged == [AZImport(path=Path("a.json"), names={"A", "B"}), AZImport(path=Path("c.json"), names={"C"})]

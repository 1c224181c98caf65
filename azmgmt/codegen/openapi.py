"""
OpenAPI code generator for Azure

Naming Conventions:
- OA* : OpenAPI things
- IR* : Intermediate Representation of things
- AZ* : Azure things
OA things are used to parse the OpenAPI spec.
AZ things are used for reasoning about the Azure API, and are generated into Python.
For example, ContainerAppCollection might be an OA object because it is present in the OpenAPI spec.
However, it's just a page of ContainerApp objects.
It will be transformed into an AZList, which generates a subclass of `AzList[ContainerApp]`.
"""
# pylint: disable=consider-using-f-string
from __future__ import annotations

import itertools
import json
import keyword
import logging
import re
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from textwrap import indent
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Sequence, Set, Tuple, Type, Union

import pydantic
import requests
from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter

l = logging.getLogger(__name__)

RUNTIME_MODULE = "azmgmt.azrest.models"

# names which would shadow pydantic, our model base, or the types used in annotations
RESERVED_FIELD_NAMES = {
	"construct",
	"continuation",
	"copy",
	"datetime",
	"dict",
	"fields",
	"from_json",
	"from_wire",
	"json",
	"schema",
	"to_json",
	"to_wire",
	"validate",
	"bool",
	"float",
	"int",
	"list",
	"str",
}


def _split_words(s: str) -> str:
	s = re.sub(r"[^0-9a-zA-Z]+", "_", s)
	s = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", s)
	s = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s)
	return re.sub(r"_+", "_", s).strip("_")


def mk_typename(typename: str) -> str:
	"""Make a name from the OpenAPI spec into a class name"""
	parts = re.split(r"[^0-9a-zA-Z]+", typename)
	name = "".join(p[0].upper() + p[1:] for p in parts if p)
	if not name or name[0].isdigit():
		name = "T" + name
	return name


def mk_fieldname(wire_name: str) -> str:
	"""
	Make the name of a field on the wire into a Python attribute name

	>>> mk_fieldname("osSKU")
	'os_sku'
	"""
	if wire_name == "id":
		return "rid"
	name = _split_words(wire_name).lower()
	if not name or name[0].isdigit():
		name = "n_" + name
	if keyword.iskeyword(name) or name in RESERVED_FIELD_NAMES:
		name += "_"
	return name


def mk_enum_member(value: str) -> str:
	"""Make the value of an enum into the name of its member"""
	name = _split_words(value).upper()
	if not name:
		return "EMPTY"
	if name[0].isdigit():
		name = "V" + name
	return name


def mk_docstring(s: Optional[str]) -> Optional[str]:
	"""Fit a description from the spec onto one line of a docstring"""
	if not s:
		return None
	s = " ".join(s.split()).replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
	if s.endswith('"'):
		s += " "
	return '"""%s"""' % s


class PathLookupError(Exception):
	"""Could not look up an OpenAPI reference"""

	def __init__(self, object_path: str, segment: str):
		self.object_path = object_path
		super().__init__(f"Error while looking up path={object_path} segment={segment}")


class LoadError(Exception):
	"""Could not deserialise part of an OpenAPI document"""

	def __init__(self, path, obj):
		self.path = path
		self.obj = obj
		super().__init__(f"Error deserialising {path=}")


class CodegenError(Exception):
	"""The OpenAPI document uses something we can't generate code for"""


class OARef(BaseModel):
	"""An OpenAPI reference"""

	model_config = ConfigDict(populate_by_name=True)

	ref: str = Field(alias="$ref")
	description: Optional[str] = None
	readOnly: bool = False

	@property
	def name(self) -> str:
		"""The name of this Definition"""
		return self.ref.split("/")[-1]


class OAMSEnum(BaseModel):
	"""MS Enum extension"""

	name: Optional[str] = None
	modelAsString: bool = False


class OAEnum(BaseModel):
	"""An OpenAPI enum"""

	model_config = ConfigDict(populate_by_name=True)

	t: str = Field(alias="type", default="string")
	description: Optional[str] = None
	enum: List[Any]
	ms_enum: Optional[OAMSEnum] = Field(alias="x-ms-enum", default=None)
	readOnly: bool = False


class OADef(BaseModel):
	"""An OpenAPI definition"""

	model_config = ConfigDict(populate_by_name=True)

	class Array(BaseModel):
		"""An Array field of an OpenAPI definition"""

		model_config = ConfigDict(populate_by_name=True)

		t: Literal["array"] = Field(alias="type", default="array")
		items: OAObj
		description: Optional[str] = None
		readOnly: bool = False

	class Property(BaseModel):
		"""A normal field of an OpenAPI definition"""

		model_config = ConfigDict(populate_by_name=True)

		t: str = Field(alias="type", default="object")
		description: Optional[str] = None
		readOnly: bool = False
		required: bool = False
		format: Optional[str] = None

	properties: Dict[str, OAObj] = {}
	t: Optional[str] = Field(alias="type", default=None)
	description: Optional[str] = None

	allOf: Optional[List[OAObj]] = None
	required: Optional[List[str]] = None
	additionalProperties: Optional[Union[bool, OAObj]] = None
	discriminator: Optional[str] = None
	discriminator_value: Optional[str] = Field(alias="x-ms-discriminator-value", default=None)
	readOnly: bool = False


def _oa_kind(v: Any) -> Optional[str]:
	"""Which kind of OpenAPI schema object this is"""
	if isinstance(v, dict):
		if "$ref" in v:
			return "ref"
		if "enum" in v:
			return "enum"
		if v.get("type") == "array":
			return "array"
		if "properties" in v or "allOf" in v or "additionalProperties" in v:
			return "def"
		return "property"
	return {OARef: "ref", OAEnum: "enum", OADef.Array: "array", OADef: "def", OADef.Property: "property"}.get(type(v))


OAObj = Annotated[
	Union[
		Annotated[OARef, Tag("ref")],
		Annotated[OAEnum, Tag("enum")],
		Annotated[OADef.Array, Tag("array")],
		Annotated[OADef, Tag("def")],
		Annotated[OADef.Property, Tag("property")],
	],
	Discriminator(_oa_kind),
]

OADef.Array.model_rebuild()
OADef.model_rebuild()


class OAParam(BaseModel):
	"""A Param for an OpenAPI Operation"""

	model_config = ConfigDict(populate_by_name=True)

	name: str
	in_component: str = Field(alias="in")
	required: bool = False
	type: Optional[str] = None
	description: Optional[str] = None
	oa_schema: Optional[OAObj] = Field(alias="schema", default=None)
	items: Optional[Dict] = None


class OAResponse(BaseModel):
	"""A response for an OpenAPI Operation"""

	model_config = ConfigDict(populate_by_name=True)

	description: Optional[str] = None
	oa_schema: Optional[OAObj] = Field(alias="schema", default=None)


class OAMSPageable(BaseModel):
	"""MS Pageable extension"""

	nextLinkName: Optional[str] = None
	itemName: str = "value"


class OAOp(BaseModel):
	"""An OpenAPI Operation"""

	model_config = ConfigDict(populate_by_name=True)

	tags: List[str] = []
	operationId: str
	description: Optional[str] = None
	parameters: List[Union[OAParam, OARef]] = []
	responses: Dict[str, Union[OAResponse, OARef]]
	pageable: Optional[OAMSPageable] = Field(alias="x-ms-pageable", default=None)
	long_running: bool = Field(alias="x-ms-long-running-operation", default=False)


class OAPath(BaseModel):
	"""An OpenAPI Path item"""

	methods: ClassVar[Tuple[str, ...]] = ("get", "put", "post", "delete", "options", "head", "patch")

	get: Optional[OAOp] = None
	put: Optional[OAOp] = None
	post: Optional[OAOp] = None
	delete: Optional[OAOp] = None
	options: Optional[OAOp] = None
	head: Optional[OAOp] = None
	patch: Optional[OAOp] = None
	parameters: List[Union[OAParam, OARef]] = []

	def items(self) -> Sequence[Tuple[str, OAOp]]:
		return [(k, getattr(self, k)) for k in self.methods if getattr(self, k) is not None]


class ParamPosition(Enum):
	"""Where a parameter goes in the request"""

	path = "path"
	query = "query"
	body = "body"
	header = "header"
	form = "formData"


class IRParam(BaseModel):
	"""An IR parameter of an Operation"""

	t: IR_T
	name: str
	position: ParamPosition


class IROp(BaseModel):
	"""An IR Operation"""

	object_name: str
	name: str
	description: Optional[str]

	path: str
	method: str
	apiv: Optional[str]
	body: Optional[IRParam] = None
	params: List[IRParam] = []
	query_params: List[IRParam] = []
	ret_t: Optional[IR_T] = None


class IRDef(BaseModel):
	"""An IR Definition"""

	name: str
	properties: Dict[str, IR_T]
	description: Optional[str] = None
	src: Optional[Path] = None
	bases: List[IRDef] = []
	discriminator: Optional[str] = None
	discriminator_value: Optional[str] = None
	inline: bool = False  # defined inside another definition instead of at the top level of a document

	@property
	def union_name(self) -> str:
		return self.name + "Union"


class IR_T(BaseModel):
	"""An IR Type descriptor"""

	t: Union[Type, IRDef, IR_List, IR_Dict, IR_Enum, IR_Union, str]
	readonly: bool = False
	required: bool = True


class IR_List(BaseModel):
	"""An IR descriptor for a List type"""

	items: IR_T
	required: bool = True


class IR_Dict(BaseModel):
	"""An IR descriptor for a Dictionary type"""

	keys: IR_T
	values: IR_T
	required: bool = True


class IR_Enum(BaseModel):
	"""An IR descriptor for an Enum"""

	name: str
	values: List[str]
	description: Optional[str] = None
	src: Optional[Path] = None
	inline: bool = False


class IR_Union(BaseModel):
	"""An IR descriptor for one of several types"""

	items: List[IR_T]


IRParam.model_rebuild()
IROp.model_rebuild()
IRDef.model_rebuild()
IR_T.model_rebuild()
IR_List.model_rebuild()
IR_Dict.model_rebuild()


class Reader:
	"""Read Microsoft OpenAPI specifications"""

	def __init__(self, root: str, path: Path, openapi: dict, reader_cache: Dict[Path, Reader]):
		self.root = root
		self.path = path
		self.doc = openapi
		self.reader_cache = reader_cache

		self.reader_cache[path] = self

	@classmethod
	def load(cls, root: str, path: Path, reader_cache: Optional[Dict[Path, Reader]] = None) -> Reader:
		"""Load from a path or file-like object"""
		return cls._load_file(root, path, reader_cache if reader_cache is not None else {})

	@property
	def paths(self) -> dict:
		"""Get API paths (standard and ms xtended)"""
		return dict(itertools.chain(self.doc.get("paths", {}).items(), self.doc.get("x-ms-paths", {}).items()))

	@property
	def definitions(self) -> dict:
		"""The OpenAPI definition in this doc"""
		return self.doc.get("definitions", {})

	@property
	def apiv(self) -> str:
		"""Azure API version"""
		return self.doc["info"]["version"]

	@staticmethod
	def classify_relative(relative: str) -> Tuple[Optional[Path], str, str]:
		"""Decompose an OpenAPI reference into its filepath, item type, and path inside that document"""
		file_path, object_path = relative.split("#")
		oa_type = object_path.split("/")[1]
		return Path(file_path) if file_path else None, oa_type, object_path

	@staticmethod
	def resolve_path(path: Path) -> Path:
		parts: List[str] = []
		for part in path.parts:
			if part == "..":
				if parts:
					parts.pop()
			elif part != ".":
				parts.append(part)
		return Path(*parts)

	def load_relative(self, relative: str) -> Tuple[Reader, Any]:
		"""Load an object from a relative path"""
		file_path, _, object_path = self.classify_relative(relative)

		if file_path:
			tgt = self.resolve_path(self.path.parent / file_path)
			if tgt in self.reader_cache:
				reader = self.reader_cache[tgt]
			else:
				reader = self._load_file(self.root, tgt, self.reader_cache)
		else:
			reader = self

		return reader, self._get_from_object_at_path(reader.doc, object_path)

	@staticmethod
	def _get_from_object_at_path(file: dict, object_path: str) -> Any:
		"""Load an object from a path in a different file"""
		try:
			o: Any = file
			for segment in object_path.split("/"):
				if segment:  # escape empty segments
					o = o[segment]
			return o
		except KeyError as e:
			raise PathLookupError(object_path, e.args[0])
		except TypeError:
			raise PathLookupError(object_path, "???")

	@staticmethod
	def extract_remote_object_name(object_path: str) -> str:
		"""Extract the name of a remote object. Useful for registering class references while instantiating."""
		return object_path.split("/")[-1]

	@staticmethod
	def _load_file(root: str, file_path: Path, reader_cache: Dict[Path, Reader]) -> Reader:
		"""Load the contents of a file"""
		l.debug(f"loading openapi={file_path}")
		if root.startswith("https://") or root.startswith("http://"):
			res = requests.get(root + file_path.as_posix())
			res.raise_for_status()
			content = res.content.decode("utf-8")
		elif root.startswith("file://"):
			file_root = root.split("://")[1]
			with (Path(file_root) / file_path).open(mode="r", encoding="utf-8") as fp:
				content = fp.read()
		else:
			scheme = root.split("://")[0]
			raise ValueError(f"unknown uri scheme scheme={scheme}")
		loaded = json.loads(content)

		return Reader(root, file_path, loaded, reader_cache)


class RefCache:
	"""Cache of references which have been transformed, so that recursive definitions terminate"""

	ref_initialising = object()

	@dataclass(frozen=True)
	class Ref:
		path: Path
		ref: str

	def __init__(self):
		self.cache: Dict[RefCache.Ref, Any] = {}

	def __getitem__(self, ref: Ref) -> Optional[IR_T]:
		value = self.cache.get(ref)
		if value is RefCache.ref_initialising:
			return None
		return value

	def mark_initialising(self, ref: Ref):
		"""Mark that we've started initialising this reference, so we know if we're in a recursive loop."""
		self.cache[ref] = RefCache.ref_initialising

	def mark_referenceable(self, ref: Ref, value: IR_T):
		"""
		Mark that we have enough information to provide a reference to this class,
		even if we haven't fully resolved it.

		For example, we can provide a class name even if we don't know all of its members
		"""
		self.cache[ref] = value

	def __setitem__(self, ref: Ref, value: IR_T):
		self.cache[ref] = value


class JSONSchemaSubparser:
	"""Transform the JSONSchema parts of an OpenAPI document into IR"""

	oaparser: ClassVar[TypeAdapter] = TypeAdapter(OAObj)

	def __init__(self, openapi: Reader, refcache: RefCache):
		self.openapi = openapi
		self.refcache = refcache

	@staticmethod
	def resolve_type(t: str, fmt: Optional[str] = None) -> Union[str, type]:
		"""Resolve OpenAPI types to Python types, if applicable"""
		if t == "string" and fmt == "date-time":
			return datetime
		return {
			"string": str,
			"number": float,
			"integer": int,
			"boolean": bool,
			"object": dict,
			"file": bytes,
		}.get(t, t)

	def transform_definition(self, name: str, obj: OAObj) -> IR_T:
		"""Transform a top-level definition of this document, sharing it with references to it"""
		cache_ref = RefCache.Ref(self.openapi.path, name)
		cached = self.refcache[cache_ref]
		if cached is None:
			self.refcache.mark_referenceable(cache_ref, IR_T(t=name, required=False))
			cached = self.transform(name, obj, inline=False)
			self.refcache[cache_ref] = cached
		return cached

	def resolve_reference(self, name: str, ref: OARef, required: bool) -> IR_T:
		"""Resolve a reference, possibly to another document, to the IR of its target"""
		relname = self.openapi.extract_remote_object_name(ref.ref)
		reader, resolved = self.openapi.load_relative(ref.ref)

		relative_transformer = JSONSchemaSubparser(reader, self.refcache)
		transformed = relative_transformer.transform_definition(relname, self.oaparser.validate_python(resolved))
		return transformed.model_copy(update={"required": required, "readonly": ref.readOnly or transformed.readonly})

	def ir_array(self, name: str, obj: OADef.Array, required: bool) -> IR_T:
		"""Transform an OpenAPI array to IR"""
		item_t = self.transform(name, obj.items).model_copy(update={"required": True})
		return IR_T(t=IR_List(items=item_t), readonly=obj.readOnly, required=required)

	def ir_enum(self, name: str, obj: OAEnum, required: bool, inline: bool) -> IR_T:
		"""Transform an OpenAPI enum to IR. Enums of things other than strings are left as their plain type"""
		if obj.t != "string":
			return IR_T(t=self.resolve_type(obj.t), readonly=obj.readOnly, required=required)
		return IR_T(
			t=IR_Enum(
				name=mk_typename(name),
				values=[str(v) for v in obj.enum],
				description=obj.description,
				src=None if inline else self.openapi.path,
				inline=inline,
			),
			readonly=obj.readOnly,
			required=required,
		)

	def ir_def(self, name: str, obj: OADef, required: bool, inline: bool) -> IR_T:
		"""Transform an OpenAPI object to IR"""
		if not obj.properties and not obj.allOf:
			if obj.additionalProperties is not None and not isinstance(obj.additionalProperties, bool):
				values = self.transform(name, obj.additionalProperties).model_copy(update={"required": True})
				return IR_T(t=IR_Dict(keys=IR_T(t=str), values=values), readonly=obj.readOnly, required=required)
			return IR_T(t=self.resolve_type(obj.t or "object"), readonly=obj.readOnly, required=required)

		properties = {n: self.transform(n, e, obj.required) for n, e in obj.properties.items()}

		bases = []
		for referenced in obj.allOf or []:
			referenced_t = self.transform(name, referenced)
			resolved_t = referenced_t.t
			if isinstance(resolved_t, str):
				# a definition which is still being resolved, because it eventually references this one
				resolved_t = IRDef(name=mk_typename(resolved_t), properties={})
			if not isinstance(resolved_t, IRDef):
				raise CodegenError(f"allOf did not reference a definition {name=} resolved_t={resolved_t}")

			if isinstance(referenced, OARef):
				bases.append(resolved_t)
			else:
				properties.update(resolved_t.properties)

		return IR_T(
			t=IRDef(
				name=mk_typename(name),
				properties=properties,
				description=obj.description,
				src=self.openapi.path,
				bases=bases,
				discriminator=obj.discriminator,
				discriminator_value=obj.discriminator_value,
				inline=inline,
			),
			readonly=obj.readOnly,
			required=required,
		)

	def transform(self, name: str, obj: OAObj, required_properties: Optional[List[str]] = None, inline: bool = True) -> IR_T:
		"""When we're in JSONSchema mode, we can only contain more jsonschema items"""
		l.debug(f"transforming {name}")
		required = name in (required_properties or [])

		if isinstance(obj, OARef):
			return self.resolve_reference(name, obj, required)
		elif isinstance(obj, OAEnum):
			return self.ir_enum(name, obj, required, inline)
		elif isinstance(obj, OADef):
			return self.ir_def(name, obj, required, inline)
		elif isinstance(obj, OADef.Property):
			resolved_type = self.resolve_type(obj.t, obj.format)
			return IR_T(t=resolved_type, readonly=obj.readOnly, required=obj.required or required)
		elif isinstance(obj, OADef.Array):
			return self.ir_array(name, obj, required)
		else:
			raise TypeError(f"unsupported OpenAPI type {type(obj)}")

	def ir_param(self, param: Union[OAParam, OARef]) -> IRParam:
		"""Transform an OpenAPI parameter, which may be a reference to a shared parameter, to IR"""
		if isinstance(param, OARef):
			_, resolved = self.openapi.load_relative(param.ref)
			param = OAParam.model_validate(resolved)

		position = ParamPosition(param.in_component)
		required = param.required or position == ParamPosition.path

		if param.oa_schema is not None:
			t = self.transform(param.name, param.oa_schema, inline=False).model_copy(update={"required": required})
		elif param.type == "array":
			items = param.items or {}
			t = IR_T(t=IR_List(items=IR_T(t=self.resolve_type(items.get("type", "string"), items.get("format")))), required=required)
		else:
			if not param.type:
				raise CodegenError(f"parameter without schema does not have a type name={param.name}")
			t = IR_T(t=self.resolve_type(param.type), required=required)
		return IRParam(t=t, name=param.name, position=position)

	def ir_response(self, response: Union[OAResponse, OARef]) -> IR_T:
		"""Transform an OpenAPI response, which may be a reference to a shared response, to IR"""
		if isinstance(response, OARef):
			_, resolved = self.openapi.load_relative(response.ref)
			response = OAResponse.model_validate(resolved)

		if response.oa_schema is None:
			return IR_T(t="None")
		name = response.oa_schema.name if isinstance(response.oa_schema, OARef) else "response"
		return self.transform(name, response.oa_schema, inline=False).model_copy(update={"required": True})


class IRTransformer:
	"""Transformer to and from the IR"""

	def __init__(self, defs: Dict[str, OAObj], openapi: Reader, refcache: RefCache):
		self.oa_defs: Dict[str, OAObj] = defs
		self.openapi = openapi

		self.jsonparser = JSONSchemaSubparser(openapi, refcache)

	@classmethod
	def from_reader(cls, reader: Reader, refcache: Optional[RefCache] = None) -> IRTransformer:
		parser = TypeAdapter(Dict[str, OAObj])
		try:
			oa_defs = parser.validate_python(reader.definitions)
		except pydantic.ValidationError as e:
			l.error(f"could not load definitions openapi={reader.path} errors={e.errors()}")
			raise LoadError(reader.path, reader.definitions) from e
		return IRTransformer(oa_defs, reader, refcache or RefCache())

	def ir_definitions(self) -> Dict[str, IR_T]:
		"""Transform each top-level definition of this document to IR"""
		return {name: self.jsonparser.transform_definition(name, obj) for name, obj in self.oa_defs.items()}

	def transform_definitions(self) -> str:
		"""Transform the OpenAPI objects into their codegened str"""
		ir_definitions = self.ir_definitions()
		pageables = self.identify_pageables(self.openapi.paths)

		enums: List[AZEnum] = []
		early_aliases: List[AZAlias] = []
		late_aliases: List[AZAlias] = []
		az_lists: List[AZList] = []
		ir_defs: Dict[str, IRDef] = {}

		for name, ir_t in ir_definitions.items():
			declared = ir_t.t
			if isinstance(declared, IRDef):
				az_list = self.ir_azlist(name, declared, pageables)
				if az_list:
					az_lists.append(az_list)
				else:
					ir_defs[declared.name] = declared
			elif isinstance(declared, IR_Enum):
				enums.append(AZEnum.from_ir(declared))
			elif isinstance(declared, str):
				l.warning(f"definition did not resolve name={name}")
			else:
				alias = AZAlias(name=mk_typename(name), alias=self.resolve_ir_t_str(ir_t.model_copy(update={"required": True, "readonly": False})))
				if self._is_basic(ir_t):
					early_aliases.append(alias)
				else:
					late_aliases.append(alias)

		azs = [self.defIR2AZ(ir_defs[name]) for name in self.order_definitions(ir_defs)]
		unions = self.identify_unions(ir_defs)

		output_req: List[CodeGenable] = [*enums, *early_aliases, *azs, *unions, *late_aliases, *az_lists]
		return self.codegen_definitions(azs, az_lists, output_req)

	@staticmethod
	def codegen_definitions(azs: List[AZDef], az_lists: List[AZList], output_req: List[CodeGenable]) -> str:
		codegened_definitions = [cg.codegen() for cg in output_req]
		reloaded_definitions = [f"{az_definition.name}.model_rebuild()" for az_definition in azs] + [f"{az_list.name}.model_rebuild()" for az_list in az_lists]
		if reloaded_definitions:
			codegened_definitions.append("\n".join(reloaded_definitions))
		return "\n\n\n".join(codegened_definitions)

	def identify_pageables(self, paths: dict) -> Dict[str, Optional[str]]:
		"""Find the definitions which are pages of a pageable operation, and the name of their next link"""
		pageables: Dict[str, Optional[str]] = {}
		parsed = TypeAdapter(Dict[str, OAPath]).validate_python(paths)
		for path_item in parsed.values():
			for _, op in path_item.items():
				if op.pageable is None:
					continue
				for status, response in op.responses.items():
					if not status.startswith("2") or not isinstance(response, OAResponse) or not isinstance(response.oa_schema, OARef):
						continue
					name = response.oa_schema.name
					# prefer the operation that tells us how to follow the pages
					if pageables.get(name) is None:
						pageables[name] = op.pageable.nextLinkName
		return pageables

	def ir_azlist(self, name: str, obj: IRDef, pageables: Dict[str, Optional[str]]) -> Optional[AZList]:
		"""Transform a definition representing a page of a list into a continuable list"""
		value = obj.properties.get("value", None)
		if value is None or not isinstance(value.t, IR_List):
			return None

		if name in pageables:
			next_link_name = pageables[name]
		else:
			next_link_name = "nextLink"
		if next_link_name is not None and next_link_name not in obj.properties:
			next_link_name = None

		others = {k: v for k, v in obj.properties.items() if k not in {"value", "nextLink", next_link_name}}
		return AZList(
			name=obj.name,
			description=obj.description,
			item=self.resolve_ir_t_str(value.t.items),
			value_required=value.required,
			next_link_name=next_link_name,
			subclasses=self._inline_defs(value),
			fields=self.fieldsIR2AZ(others),
		)

	def identify_unions(self, ir_defs: Dict[str, IRDef]) -> List[AZUnion]:
		"""Make a union of the subtypes of each polymorphic definition"""
		unions = []
		for irdef in ir_defs.values():
			if not irdef.discriminator:
				continue
			variants = {}
			for candidate in ir_defs.values():
				ancestor = self._polymorphic_ancestor(candidate)
				if ancestor is not None and ancestor.name == irdef.name:
					variants[candidate.discriminator_value or candidate.name] = candidate.name
			unions.append(AZUnion(name=irdef.union_name, tag=irdef.discriminator, base=irdef.name, variants=variants))
		return unions

	@staticmethod
	def _polymorphic_ancestor(irdef: IRDef) -> Optional[IRDef]:
		for base in irdef.bases:
			if base.discriminator:
				return base
			ancestor = IRTransformer._polymorphic_ancestor(base)
			if ancestor:
				return ancestor
		return None

	@staticmethod
	def order_definitions(ir_defs: Dict[str, IRDef]) -> List[str]:
		"""Order definitions so that each comes after its bases and, where possible, the definitions it references"""
		ordered: List[str] = []
		visiting: Set[str] = set()

		def deps_of(ir: Any) -> List[str]:
			if isinstance(ir, IR_T):
				return deps_of(ir.t)
			elif isinstance(ir, IR_List):
				return deps_of(ir.items)
			elif isinstance(ir, IR_Dict):
				return deps_of(ir.values)
			elif isinstance(ir, IRDef):
				if ir.inline:
					return [b.name for b in ir.bases] + list(itertools.chain.from_iterable(deps_of(p) for p in ir.properties.values()))
				return [ir.name]
			return []

		def visit(name: str):
			if name in ordered or name in visiting or name not in ir_defs:
				return
			visiting.add(name)
			irdef = ir_defs[name]
			for base in irdef.bases:
				visit(base.name)
			for prop in irdef.properties.values():
				for dep in deps_of(prop):
					visit(dep)
			visiting.discard(name)
			ordered.append(name)

		for name in ir_defs:
			visit(name)
		return ordered

	@staticmethod
	def _is_basic(ir: Any) -> bool:
		"""Whether this type doesn't reference any definitions"""
		if isinstance(ir, IR_T):
			return IRTransformer._is_basic(ir.t)
		elif isinstance(ir, IR_List):
			return IRTransformer._is_basic(ir.items)
		elif isinstance(ir, IR_Dict):
			return IRTransformer._is_basic(ir.values)
		return isinstance(ir, type)

	@staticmethod
	def resolve_ir_t_str(ir_t: Union[IR_T, None]) -> str:
		"""Resolve the IR type to the stringified Python type"""
		if ir_t is None:
			return "None"

		declared_type = ir_t.t
		if isinstance(declared_type, type):
			type_as_str = declared_type.__name__
		elif isinstance(declared_type, IRDef):
			type_as_str = declared_type.union_name if declared_type.discriminator else declared_type.name
		elif isinstance(declared_type, IR_List):
			type_as_str = "List[%s]" % IRTransformer.resolve_ir_t_str(declared_type.items)
		elif isinstance(declared_type, IR_Dict):
			type_as_str = "Dict[%s, %s]" % (IRTransformer.resolve_ir_t_str(declared_type.keys), IRTransformer.resolve_ir_t_str(declared_type.values))
		elif isinstance(declared_type, IR_Enum):
			type_as_str = declared_type.name
		elif isinstance(declared_type, IR_Union):
			type_as_str = "Union[%s]" % ", ".join(sorted(IRTransformer.resolve_ir_t_str(e) for e in declared_type.items))
		elif isinstance(declared_type, str):
			type_as_str = declared_type if declared_type == "None" else mk_typename(declared_type)
		else:
			raise TypeError(f"Cannot handle {type(declared_type)}")

		if ir_t.readonly:
			return "ReadOnly[%s]" % type_as_str
		elif not ir_t.required:
			return "Optional[%s]" % type_as_str
		else:
			return type_as_str

	@staticmethod
	def fieldIR2AZ(name: str, ir_t: IR_T) -> AZField:
		"""Convert an IR field to an AZ field"""
		if isinstance(ir_t.t, IR_List):
			inner = IRTransformer.resolve_ir_t_str(ir_t.t.items)
			if ir_t.required:
				return AZField(name=mk_fieldname(name), wire_name=name, t="List[%s]" % inner, readonly=ir_t.readonly)
			# Azure sends empty lists as null, or leaves them out
			return AZField(name=mk_fieldname(name), wire_name=name, t="NullableList[%s]" % inner, default="[]", readonly=ir_t.readonly)

		t = IRTransformer.resolve_ir_t_str(ir_t)
		default = "None" if ir_t.readonly or not ir_t.required else None
		return AZField(name=mk_fieldname(name), wire_name=name, t=t, default=default, readonly=ir_t.readonly)

	@staticmethod
	def fieldsIR2AZ(fields: Dict[str, IR_T]) -> List[AZField]:
		"""Convert IR fields to AZ fields"""
		return [IRTransformer.fieldIR2AZ(f_name, f_type) for f_name, f_type in fields.items()]

	def _inline_defs(self, ir_t: IR_T) -> List[CodeGenable]:
		"""The classes for definitions which are declared inline in a field, which become nested classes"""
		declared = ir_t.t
		if isinstance(declared, IRDef) and declared.inline:
			return [self.defIR2AZ(declared)]
		elif isinstance(declared, IR_Enum) and declared.inline:
			return [AZEnum.from_ir(declared)]
		elif isinstance(declared, IR_List):
			return self._inline_defs(declared.items)
		elif isinstance(declared, IR_Dict):
			return self._inline_defs(declared.values)
		return []

	def _discriminator_field(self, irdef: IRDef) -> Optional[AZField]:
		"""The field which fixes the discriminator of a subtype of a polymorphic definition"""
		ancestor = self._polymorphic_ancestor(irdef)
		if ancestor is None or ancestor.discriminator is None or ancestor.discriminator in irdef.properties:
			return None
		tag = ancestor.discriminator
		value = irdef.discriminator_value or irdef.name

		tag_t = ancestor.properties.get(tag)
		if tag_t is not None and isinstance(tag_t.t, IR_Enum):
			enum_ref = f"{ancestor.name}.{tag_t.t.name}" if tag_t.t.inline else tag_t.t.name
			member = AZEnum.member_names(tag_t.t.values).get(value)
			default = f"{enum_ref}.{member}" if member else f"{enum_ref}({CodeGenable.quote(value)})"
			return AZField(name=mk_fieldname(tag), wire_name=tag, t=enum_ref, default=default, readonly=False)
		return AZField(name=mk_fieldname(tag), wire_name=tag, t="str", default=CodeGenable.quote(value), readonly=False)

	def defIR2AZ(self, irdef: IRDef) -> AZDef:
		"""Convert IR Defs to AZ Defs"""
		nested = list(itertools.chain.from_iterable(self._inline_defs(prop) for prop in irdef.properties.values()))
		fields = self.fieldsIR2AZ(irdef.properties)

		discriminator_field = self._discriminator_field(irdef)
		if discriminator_field:
			fields.insert(0, discriminator_field)

		return AZDef(
			name=irdef.name,
			description=irdef.description,
			bases=[b.name for b in irdef.bases],
			fields=fields,
			subclasses=nested,
		)

	@staticmethod
	def unify_ir_t(ir_ts: List[IR_T]) -> Optional[IR_T]:
		"""Unify IR types, usually for returns"""
		by_name: Dict[str, IR_T] = {}
		for t in ir_ts:
			by_name.setdefault(IRTransformer.resolve_ir_t_str(t), t)

		is_required = "None" not in by_name
		non_none = [t for name, t in by_name.items() if name != "None"]

		if len(non_none) == 0:
			return None
		elif len(non_none) == 1:
			return non_none[0].model_copy(update={"required": is_required})
		else:
			return IR_T(t=IR_Union(items=non_none), required=is_required)

	def transform_paths(self, paths: dict, apiv: str) -> str:
		"""Transform OpenAPI Paths into the Python code for the Azure objects"""
		parser = TypeAdapter(Dict[str, OAPath])
		parsed = parser.validate_python(paths)

		resolved = self.resolve_parameters_in_oapath(parsed)

		ops: List[IROp] = []
		for path, path_item in resolved.items():
			for method, op in path_item.items():
				ops.append(self.oa2ir_op(apiv, path, method, op))

		az_objs: Dict[str, List[IROp]] = defaultdict(list)
		for ir_op in ops:
			az_objs[ir_op.object_name].append(ir_op)

		az_ops = []
		for name, ir_ops in az_objs.items():
			seen: Set[str] = set()
			unique_ops = []
			for ir_op in ir_ops:
				if ir_op.name in seen:
					l.warning(f"skipping duplicate operation object={name} op={ir_op.name}")
					continue
				seen.add(ir_op.name)
				unique_ops.append(ir_op)
			az_ops.append(AZOps(name=name, apiv=apiv, ops=[self.ir2az_op(name, x) for x in unique_ops]))

		return "\n\n\n".join([cg.codegen() for cg in az_ops])

	@staticmethod
	def split_operation_id(operation_id: str) -> Tuple[str, str]:
		"""Split an operationId like `ContainerApps_Get` into the group and the operation"""
		if "_" not in operation_id:
			return "Operations", mk_typename(operation_id)
		object_name, name = operation_id.split("_", 1)
		return mk_typename(object_name), mk_typename(name)

	def oa2ir_op(self, apiv: str, path: str, method: str, op: OAOp) -> IROp:
		object_name, name = self.split_operation_id(op.operationId)
		l.debug(f"transforming operation object={object_name} op={name}")

		params = [self.jsonparser.ir_param(p) for p in op.parameters]
		body_params = [p for p in params if p.position == ParamPosition.body]
		if len(body_params) > 1:
			raise CodegenError(f"operation has more than one body param operationId={op.operationId}")

		rets_ts = [self.jsonparser.ir_response(r) for r_name, r in op.responses.items() if r_name.startswith("2")]
		return IROp(
			object_name=object_name,
			name=name,
			description=op.description,
			path=path,
			method=method,
			apiv=apiv,
			body=body_params[0] if body_params else None,
			params=[p for p in params if p.position == ParamPosition.path],
			query_params=[p for p in params if p.position == ParamPosition.query and p.name != "api-version"],
			ret_t=IRTransformer.unify_ir_t(rets_ts),
		)

	def resolve_parameters_in_oapath(self, parsed: Dict[str, OAPath]) -> Dict[str, OAPath]:
		"""Resolve params of OAOps (methods) of an OAPath, including the params shared by all methods of the path"""
		resolved: Dict[str, OAPath] = {}
		for path, path_item in parsed.items():
			new_path_item = {}
			for method, op in path_item.items():
				resolved_parameters = self.resolve_oaparam_refs([*path_item.parameters, *op.parameters])
				new_path_item[method] = op.model_copy(update={"parameters": resolved_parameters})
			resolved[path] = OAPath(**new_path_item)
		return resolved

	def resolve_oaparam_refs(self, params: List[Union[OAParam, OARef]]) -> List[OAParam]:
		"""Resolve OpenAPI parameters which are references to the definition that they reference"""
		resolved_parameters: Dict[Tuple[str, str], OAParam] = {}
		for param in params:
			if isinstance(param, OARef):
				_, relative_param = self.openapi.load_relative(param.ref)
				param = OAParam.model_validate(relative_param)
			# params on the operation override params on the path
			resolved_parameters[(param.name, param.in_component)] = param
		return list(resolved_parameters.values())

	@staticmethod
	def ir2az_op(name: str, op: IROp) -> AZOp:
		az_params = {p.name: IRTransformer.resolve_ir_t_str(p.t) for p in op.params}

		query_params = [AZOp.Param(name=p.name, type=IRTransformer.resolve_ir_t_str(p.t), required=p.t.required) for p in op.query_params]
		query_params.sort(key=lambda x: x.required, reverse=True)

		if op.body:
			body = AZOp.Body(name=op.body.name, type=IRTransformer.resolve_ir_t_str(op.body.t))
		else:
			body = None

		return AZOp(
			ops_name=name,
			name=op.name,
			description=op.description,
			path=op.path,
			method=op.method,
			apiv=op.apiv,
			body=body,
			params=az_params,
			query_params=query_params,
			ret_t=IRTransformer.resolve_ir_t_str(op.ret_t),
		)

	def transform_imports(self, root_package: str) -> str:
		"""Import the definitions from other documents which this document references"""
		imports = list(itertools.chain.from_iterable(self._find_imports_in_definition(ir) for ir in self.ir_definitions().values()))
		imports.extend(self._find_imports_in_paths())

		merged = AZImport.merge(self._remove_local_imports(self.openapi.path, imports))
		resolved = [e.model_copy(update={"module": module_of(root_package, e.path)}) for e in merged]
		return "\n".join([cg.codegen() for cg in sorted(resolved, key=lambda e: e.module)])

	def _find_imports_in_paths(self) -> List[AZImport]:
		parsed = TypeAdapter(Dict[str, OAPath]).validate_python(self.openapi.paths)
		out = []
		for path, path_item in self.resolve_parameters_in_oapath(parsed).items():
			for method, op in path_item.items():
				ir_op = self.oa2ir_op(self.openapi.apiv, path, method, op)
				for t in [ir_op.ret_t, ir_op.body.t if ir_op.body else None]:
					if t is not None:
						out.extend(self._find_imports(t))
		return out

	def _find_imports_in_definition(self, ir_t: IR_T) -> List[AZImport]:
		"""Find the imports needed by a definition in this document"""
		declared = ir_t.t
		if isinstance(declared, IRDef):
			out = []
			for base in declared.bases:
				if base.src:
					out.append(AZImport(path=base.src, names={base.name}))
			for prop in declared.properties.values():
				out.extend(self._find_imports(prop))
			return out
		return self._find_imports(ir_t)

	def _find_imports(self, ir: Union[IRDef, IR_T, IR_Enum, IR_List, IR_Dict, IR_Union, str, type]) -> List[AZImport]:
		if isinstance(ir, (str, type)):
			return []
		elif isinstance(ir, IRDef):
			if ir.inline:
				out = [AZImport(path=b.src, names={b.name}) for b in ir.bases if b.src]
				return out + list(itertools.chain.from_iterable([self._find_imports(t) for t in ir.properties.values()]))
			if ir.src:
				return [AZImport(path=ir.src, names={ir.union_name if ir.discriminator else ir.name})]
			return []
		elif isinstance(ir, IR_T):
			return self._find_imports(ir.t)
		elif isinstance(ir, IR_Enum):
			if ir.src and not ir.inline:
				return [AZImport(path=ir.src, names={ir.name})]
			return []
		elif isinstance(ir, IR_List):
			return self._find_imports(ir.items)
		elif isinstance(ir, IR_Dict):
			return list(itertools.chain.from_iterable([self._find_imports(ir.keys), self._find_imports(ir.values)]))
		elif isinstance(ir, IR_Union):
			return list(itertools.chain.from_iterable([self._find_imports(t) for t in ir.items]))
		else:
			raise TypeError(f"Cannot find imports for unexpected type {type(ir)}")

	@staticmethod
	def _remove_local_imports(local: Path, imports: List[AZImport]) -> List[AZImport]:
		return [e for e in imports if e.path != local]


class CodeGenable(ABC):
	"""All objects which can be generated into Python code"""

	@abstractmethod
	def codegen(self) -> str:
		"""Dump this object to Python code"""

	@staticmethod
	def quote(s: str) -> str:
		"""Normal quotes, escaped"""
		return json.dumps(s)

	@staticmethod
	def fstring(s: str) -> str:
		"""An f-string"""
		return 'f"%s"' % s

	@staticmethod
	def indent(i: int, s: str) -> str:
		"""Indent this block
		:param i: number of indents
		:param s: content
		:return:
		"""
		return indent(s, "\t" * i)


class AZField(BaseModel, CodeGenable):
	"""An Azure field"""

	name: str
	wire_name: str
	t: str
	default: Optional[str] = None
	readonly: bool

	def codegen(self) -> str:
		if self.name == self.wire_name:
			default = f" = {self.default}" if self.default is not None else ""
			return f"{self.name}: {self.t}" + default

		args = [f"alias={self.quote(self.wire_name)}"]
		if self.default is not None:
			args.append(f"default={self.default}")
		return f"{self.name}: {self.t} = Field({', '.join(args)})"


class AZEnum(BaseModel, CodeGenable):
	"""An Azure enum. All of these are open, since Azure adds values without changing the api version"""

	name: str
	description: Optional[str] = None
	values: List[str]

	@classmethod
	def from_ir(cls, ir: IR_Enum) -> AZEnum:
		return cls(name=ir.name, description=ir.description, values=ir.values)

	@staticmethod
	def member_names(values: List[str]) -> Dict[str, str]:
		"""The name of the member for each value"""
		names: Dict[str, str] = {}
		used: Set[str] = set()
		for value in values:
			if value in names:
				continue
			name = mk_enum_member(value)
			candidate, i = name, 2
			while candidate in used:
				candidate = f"{name}_{i}"
				i += 1
			used.add(candidate)
			names[value] = candidate
		return names

	def codegen(self) -> str:
		body = []
		docstring = mk_docstring(self.description)
		if docstring:
			body.append(docstring)
		members = self.member_names(self.values)
		if members:
			body.append("\n".join(f"{member} = {self.quote(value)}" for value, member in members.items()))
		else:
			body.append("pass")
		return f"class {self.name}(OpenEnum):\n" + self.indent(1, "\n\n".join(body))


class AZDef(BaseModel, CodeGenable):
	"""An Azure Definition"""

	name: str
	description: Optional[str]
	bases: List[str] = []
	fields: List[AZField]
	subclasses: List[Union[AZDef, AZEnum]] = []

	def codegen(self) -> str:
		body = []
		docstring = mk_docstring(self.description)
		if docstring:
			body.append(docstring)
		body.extend(e.codegen() for e in self.subclasses)
		if self.fields:
			body.append("\n".join(field.codegen() for field in self.fields))
		if not body:
			body.append("pass")

		return f"class {self.name}({', '.join(self.bases) or 'AzModel'}):\n" + self.indent(1, "\n\n".join(body))


class AZList(BaseModel, CodeGenable):
	"""A page of an Azure list, which can be continued to the next page"""

	name: str
	description: Optional[str] = None
	item: str
	value_required: bool = True
	next_link_name: Optional[str] = "nextLink"
	fields: List[AZField] = []
	subclasses: List[Union[AZDef, AZEnum]] = []

	def codegen(self) -> str:
		body = []
		docstring = mk_docstring(self.description)
		if docstring:
			body.append(docstring)
		body.extend(e.codegen() for e in self.subclasses)

		fields = []
		if not self.value_required:
			fields.append(f"value: NullableList[{self.item}] = []")
		if self.next_link_name is not None and self.next_link_name != "nextLink":
			fields.append(f"next_link: Optional[str] = Field(alias={self.quote(self.next_link_name)}, default=None)")
		elif self.next_link_name is None:
			fields.append('next_link: Optional[str] = Field(alias="nextLink", default=None, exclude=True)')
		fields.extend(field.codegen() for field in self.fields)
		if fields:
			body.append("\n".join(fields))

		if self.next_link_name is None:
			body.append("def continuation(self) -> Optional[str]:\n\treturn None")
		if not body:
			body.append("pass")

		return f"class {self.name}(AzList[{self.item}]):\n" + self.indent(1, "\n\n".join(body))


class AZAlias(BaseModel, CodeGenable):
	"""An alias to another type. Useful for definitions which are just a string or a list"""

	name: str
	alias: str

	def codegen(self) -> str:
		return f"{self.name} = {self.alias}"


class AZUnion(BaseModel, CodeGenable):
	"""The subtypes of a polymorphic definition, chosen by their discriminator"""

	name: str
	tag: str
	base: str
	variants: Dict[str, str]

	def codegen(self) -> str:
		lines = [f"{self.quote(self.tag)},", f"{self.base},", "{"]
		lines.extend(f"\t{self.quote(k)}: {v}," for k, v in self.variants.items())
		lines.append("},")
		return f"{self.name} = polymorphic(\n" + self.indent(1, "\n".join(lines)) + "\n)"


class AZOp(BaseModel, CodeGenable):
	"""An OpenAPI operation ready for codegen"""

	class Body(BaseModel):
		type: str
		name: str

	class Param(BaseModel):
		name: str
		type: str
		required: bool = False

	req_constructors: ClassVar[Set[str]] = {"get", "put", "post", "patch", "delete"}

	ops_name: str
	name: str
	description: Optional[str] = None
	path: str
	method: str
	apiv: Optional[str]
	body: Optional[Body] = None
	params: Dict[str, str] = {}
	query_params: List[Param] = []
	ret_t: Optional[str]

	@staticmethod
	def _safe_param_name(s: str) -> str:
		name = re.sub(r"[^0-9a-zA-Z_]", "_", s.replace("$", ""))
		if keyword.iskeyword(name):
			name += "_"
		return name

	def _path_fstring(self) -> str:
		return self.fstring(re.sub(r"{([^}]+)}", lambda m: "{%s}" % self._safe_param_name(m.group(1)), self.path))

	def codegen(self) -> str:
		params = [f"{self._safe_param_name(p_name)}: {p_type}" for p_name, p_type in self.params.items()]
		req_args = {
			"name": self.quote(self.ops_name + "." + self.name),
			"path": self._path_fstring(),
		}
		if self.method not in self.req_constructors:
			req_args["method"] = self.quote(self.method.upper())
		if self.apiv:
			req_args["apiv"] = self.quote(self.apiv)
		if self.body:
			body_name = self._safe_param_name(self.body.name)
			params.append(f"{body_name}: {self.body.type}")
			req_args["body"] = body_name
		if self.ret_t and self.ret_t != "None":
			req_args["ret_t"] = self.ret_t

		query_params = []
		for p in self.query_params:
			p_name_safe = self._safe_param_name(p.name)
			add_param = f"r = r.add_param({self.quote(p.name)}, str({p_name_safe}))"
			if p.required:
				params.append(f"{p_name_safe}: {p.type}")
				query_params.append(add_param)
			else:
				params.append(f"{p_name_safe}: {p.type} = None")
				query_params.append(f"if {p_name_safe} is not None:\n\t{add_param}")

		constructor = f"Req.{self.method}" if self.method in self.req_constructors else "Req"
		req_args_str = self.indent(1, "\n".join(f"{k}={v}," for k, v in req_args.items()))
		body = []
		docstring = mk_docstring(self.description)
		if docstring:
			body.append(docstring)
		body.append(f"r = {constructor}(\n{req_args_str}\n)")
		body.extend(query_params)

		return "@staticmethod\ndef {name}({params}) -> Req[{ret_t}]:\n{body}\n\n\treturn r".format(
			name=self.name,
			params=", ".join(params),
			ret_t=self.ret_t,
			body=self.indent(1, "\n".join(body)),
		)


class AZOps(BaseModel, CodeGenable):
	"""All the OpenAPI methods of one area covered by and OpenAPI file"""

	name: str
	apiv: str
	ops: List[AZOp]

	def codegen(self) -> str:
		op_strs = "\n\n".join(op.codegen() for op in self.ops)
		return f"class Az{self.name}:\n" + self.indent(1, f"apiv = {self.quote(self.apiv)}\n\n{op_strs}")


class AZImport(BaseModel, CodeGenable):
	"""Import definitions from another generated module"""

	path: Path
	names: Set[str] = set()
	module: Optional[str] = None

	def codegen(self) -> str:
		names_str = ", ".join(sorted(self.names))
		return f"from {self.module} import {names_str}"

	@classmethod
	def merge(cls, imports: List[AZImport]) -> List[AZImport]:
		merged: Dict[Path, AZImport] = {}
		for imp in imports:
			p = imp.path
			if p in merged:
				t = merged[p]
				merged[p] = AZImport(path=p, names=t.names | imp.names)
			else:
				merged[p] = imp

		return list(merged.values())


AZDef.model_rebuild()

HEADER = """\
# pylint: disable
# flake8: noqa
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from {runtime} import AzList, AzModel, NullableList, OpenEnum, ReadOnly, Req, polymorphic
"""


def codegen(transformer: IRTransformer, root_package: str) -> str:
	"""Generate the Python module for the document the transformer has loaded"""
	header = HEADER.format(runtime=RUNTIME_MODULE)
	imports = transformer.transform_imports(root_package)
	if imports:
		header += imports + "\n"

	sections = [transformer.transform_definitions(), transformer.transform_paths(transformer.openapi.paths, transformer.openapi.apiv)]
	return "\n\n\n".join([header.rstrip("\n"), *[s for s in sections if s]]) + "\n"


def path2module(p: Path) -> Path:
	"""
	Convert the filepath of the Azure OpenAPI spec to a module name

	:param p: the path within the azure openapi repo
	:return: a valid module name with extraneous pieces removed
	"""
	parts = list(p.with_suffix("").parts)

	def module_name(s: str) -> str:
		return re.sub(r"[^0-9a-z]+", "_", s.lower()).strip("_")

	def schema(s: str) -> str:
		if s.endswith("_API"):
			return s[: s.rfind("_API")]
		return s

	if "common-types" in parts:
		return Path("common", module_name(schema(parts[-1])))

	if parts[0] == "specification":
		parts = parts[1:]
	# the service, without the provider namespace or api version
	return Path(module_name(parts[0]), module_name(schema(parts[-1])))


def module_of(root_package: str, p: Path) -> str:
	"""The dotted name of the module generated for a spec"""
	return ".".join([root_package, *path2module(p).parts])


def main(openapi_root: str, openapi_files: str, output_dir: Union[str, Path], root_package: str):
	"""
	Generate modules for the OpenAPI files and for every file they reference

	:param openapi_root: url of the root of the specs, as `file://` or `https://`
	:param openapi_files: comma-separated paths of the specs, relative to the root
	:param output_dir: the directory of the root package
	:param root_package: the dotted name of the root package, used for imports between generated modules
	"""
	reader_cache: Dict[Path, Reader] = {}
	for openapi_file in openapi_files.split(","):
		Reader.load(openapi_root, Path(openapi_file), reader_cache)

	done: Set[Path] = set()
	while len(done) < len(reader_cache):
		for p, r in list(reader_cache.items()):
			if p in done:
				continue
			done.add(p)
			transformer = IRTransformer.from_reader(r)
			generated = codegen(transformer, root_package)

			output_file = Path(Path(output_dir) / path2module(p)).with_suffix(".py")
			output_file.parent.mkdir(exist_ok=True, parents=True)
			l.info(f"writing out openapi={p} file={output_file}")
			with open(output_file, mode="w", encoding="utf-8") as f:
				f.write(generated)

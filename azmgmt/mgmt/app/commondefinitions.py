# pylint: disable
# flake8: noqa
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from azmgmt.azrest.models import AzList, AzModel, NullableList, OpenEnum, ReadOnly, Req, polymorphic


class ExtendedLocationType(OpenEnum):
	"""The type of extendedLocation."""

	CUSTOM_LOCATION = "CustomLocation"


WorkloadProfileName = str


class Secret(AzModel):
	"""Secret definition."""

	name: Optional[str] = None
	value: Optional[str] = None
	identity: Optional[str] = None
	key_vault_url: Optional[str] = Field(alias="keyVaultUrl", default=None)


class TrafficWeight(AzModel):
	"""Traffic weight assigned to a revision"""

	revision_name: Optional[str] = Field(alias="revisionName", default=None)
	weight: Optional[int] = None
	latest_revision: Optional[bool] = Field(alias="latestRevision", default=None)
	label: Optional[str] = None


class CustomDomain(AzModel):
	"""Custom Domain of a Container App"""

	class BindingType(OpenEnum):
		"""Custom Domain binding type."""

		DISABLED = "Disabled"
		SNI_ENABLED = "SniEnabled"

	name: str
	binding_type: Optional[BindingType] = Field(alias="bindingType", default=None)
	certificate_id: Optional[str] = Field(alias="certificateId", default=None)


class IpSecurityRestrictionRule(AzModel):
	"""Rule to restrict incoming IP address."""

	class Action(OpenEnum):
		"""Allow or Deny rules to determine for incoming IP. Note: Rules can only consist of ALL Allow or ALL Deny"""

		ALLOW = "Allow"
		DENY = "Deny"

	name: str
	description: Optional[str] = None
	ip_address_range: str = Field(alias="ipAddressRange")
	action: Action


class CorsPolicy(AzModel):
	"""Cross-Origin-Resource-Sharing policy"""

	allowed_origins: List[str] = Field(alias="allowedOrigins")
	allowed_methods: NullableList[str] = Field(alias="allowedMethods", default=[])
	allowed_headers: NullableList[str] = Field(alias="allowedHeaders", default=[])
	expose_headers: NullableList[str] = Field(alias="exposeHeaders", default=[])
	max_age: Optional[int] = Field(alias="maxAge", default=None)
	allow_credentials: Optional[bool] = Field(alias="allowCredentials", default=None)


class Ingress(AzModel):
	"""Container App Ingress configuration."""

	class Transport(OpenEnum):
		"""Ingress transport protocol"""

		AUTO = "auto"
		HTTP = "http"
		HTTP2 = "http2"
		TCP = "tcp"

	class StickySessions(AzModel):
		"""Sticky Sessions for Single Revision Mode"""

		class Affinity(OpenEnum):
			"""Sticky Session Affinity"""

			STICKY = "sticky"
			NONE = "none"

		affinity: Optional[Affinity] = None

	class ClientCertificateMode(OpenEnum):
		"""Client certificate mode for mTLS authentication. Ignore indicates server drops client certificate on forwarding. Accept indicates server forwards client certificate but does not require a client certificate. Require indicates server requires a client certificate."""

		IGNORE = "ignore"
		ACCEPT = "accept"
		REQUIRE = "require"

	fqdn: ReadOnly[str] = None
	external: Optional[bool] = None
	target_port: Optional[int] = Field(alias="targetPort", default=None)
	exposed_port: Optional[int] = Field(alias="exposedPort", default=None)
	transport: Optional[Transport] = None
	traffic: NullableList[TrafficWeight] = []
	custom_domains: NullableList[CustomDomain] = Field(alias="customDomains", default=[])
	allow_insecure: Optional[bool] = Field(alias="allowInsecure", default=None)
	ip_security_restrictions: NullableList[IpSecurityRestrictionRule] = Field(alias="ipSecurityRestrictions", default=[])
	sticky_sessions: Optional[StickySessions] = Field(alias="stickySessions", default=None)
	client_certificate_mode: Optional[ClientCertificateMode] = Field(alias="clientCertificateMode", default=None)
	cors_policy: Optional[CorsPolicy] = Field(alias="corsPolicy", default=None)


class RegistryCredentials(AzModel):
	"""Container App Private Registry"""

	server: Optional[str] = None
	username: Optional[str] = None
	password_secret_ref: Optional[str] = Field(alias="passwordSecretRef", default=None)
	identity: Optional[str] = None


class Dapr(AzModel):
	"""Container App Dapr configuration."""

	class AppProtocol(OpenEnum):
		"""Tells Dapr which protocol your application is using. Valid options are http and grpc. Default is http"""

		HTTP = "http"
		GRPC = "grpc"

	class LogLevel(OpenEnum):
		"""Sets the log level for the Dapr sidecar. Allowed values are debug, info, warn, error. Default is info."""

		INFO = "info"
		DEBUG = "debug"
		WARN = "warn"
		ERROR = "error"

	enabled: Optional[bool] = None
	app_id: Optional[str] = Field(alias="appId", default=None)
	app_protocol: Optional[AppProtocol] = Field(alias="appProtocol", default=None)
	app_port: Optional[int] = Field(alias="appPort", default=None)
	http_read_buffer_size: Optional[int] = Field(alias="httpReadBufferSize", default=None)
	http_max_request_size: Optional[int] = Field(alias="httpMaxRequestSize", default=None)
	log_level: Optional[LogLevel] = Field(alias="logLevel", default=None)
	enable_api_logging: Optional[bool] = Field(alias="enableApiLogging", default=None)


class Configuration(AzModel):
	"""Non versioned Container App configuration properties that define the mutable settings of a Container app"""

	class ActiveRevisionsMode(OpenEnum):
		"""ActiveRevisionsMode controls how active revisions are handled for the Container app: <list><item>Multiple: multiple revisions can be active.</item><item>Single: Only one revision can be active at a time. Revision weights can not be used in this mode. If no value if provided, this is the default.</item></list>"""

		MULTIPLE = "Multiple"
		SINGLE = "Single"

	class Service(AzModel):
		"""Container App to be a dev Container App Service"""

		type: str

	secrets: NullableList[Secret] = []
	active_revisions_mode: Optional[ActiveRevisionsMode] = Field(alias="activeRevisionsMode", default=None)
	ingress: Optional[Ingress] = None
	registries: NullableList[RegistryCredentials] = []
	dapr: Optional[Dapr] = None
	max_inactive_revisions: Optional[int] = Field(alias="maxInactiveRevisions", default=None)
	service: Optional[Service] = None


class ContainerAppSecret(AzModel):
	"""Container App Secret."""

	name: ReadOnly[str] = None
	value: ReadOnly[str] = None
	identity: ReadOnly[str] = None
	key_vault_url: ReadOnly[str] = Field(alias="keyVaultUrl", default=None)


class EnvironmentVar(AzModel):
	"""Container App container environment variable."""

	name: Optional[str] = None
	value: Optional[str] = None
	secret_ref: Optional[str] = Field(alias="secretRef", default=None)


class ContainerResources(AzModel):
	"""Container App container resource requirements."""

	cpu: Optional[float] = None
	memory: Optional[str] = None
	ephemeral_storage: ReadOnly[str] = Field(alias="ephemeralStorage", default=None)


class VolumeMount(AzModel):
	"""Volume mount for the Container App."""

	volume_name: Optional[str] = Field(alias="volumeName", default=None)
	mount_path: Optional[str] = Field(alias="mountPath", default=None)
	sub_path: Optional[str] = Field(alias="subPath", default=None)


class BaseContainer(AzModel):
	"""Container App base container definition."""

	image: Optional[str] = None
	name: Optional[str] = None
	command: NullableList[str] = []
	args: NullableList[str] = []
	env: NullableList[EnvironmentVar] = []
	resources: Optional[ContainerResources] = None
	volume_mounts: NullableList[VolumeMount] = Field(alias="volumeMounts", default=[])


class Container(BaseContainer):
	"""Container App container definition"""


class ScaleRuleAuth(AzModel):
	"""Auth Secrets for Scale Rule"""

	secret_ref: Optional[str] = Field(alias="secretRef", default=None)
	trigger_parameter: Optional[str] = Field(alias="triggerParameter", default=None)


class CustomScaleRule(AzModel):
	"""Container App container Custom scaling rule."""

	type: Optional[str] = None
	metadata: Optional[Dict[str, str]] = None
	auth: NullableList[ScaleRuleAuth] = []


class ExtendedLocation(AzModel):
	"""The complex type of the extended location."""

	name: Optional[str] = None
	type: Optional[ExtendedLocationType] = None


class HttpScaleRule(AzModel):
	"""Container App container Http scaling rule."""

	metadata: Optional[Dict[str, str]] = None
	auth: NullableList[ScaleRuleAuth] = []


class InitContainer(BaseContainer):
	"""Container App init container definition"""


class ScaleRule(AzModel):
	"""Container App container scaling rule."""

	name: Optional[str] = None
	custom: Optional[CustomScaleRule] = None
	http: Optional[HttpScaleRule] = None


class Scale(AzModel):
	"""Container App scaling configurations."""

	min_replicas: Optional[int] = Field(alias="minReplicas", default=None)
	max_replicas: Optional[int] = Field(alias="maxReplicas", default=None)
	rules: NullableList[ScaleRule] = []


class Volume(AzModel):
	"""Volume definitions for the Container App."""

	class StorageType(OpenEnum):
		"""Storage type for the volume. If not provided, use EmptyDir."""

		AZURE_FILE = "AzureFile"
		EMPTY_DIR = "EmptyDir"
		SECRET = "Secret"

	name: Optional[str] = None
	storage_type: Optional[StorageType] = Field(alias="storageType", default=None)
	storage_name: Optional[str] = Field(alias="storageName", default=None)
	mount_options: Optional[str] = Field(alias="mountOptions", default=None)


class Template(AzModel):
	"""Container App versioned application definition. Defines the desired state of an immutable revision. Any changes to this section Will result in a new revision being created"""

	revision_suffix: Optional[str] = Field(alias="revisionSuffix", default=None)
	termination_grace_period_seconds: Optional[int] = Field(alias="terminationGracePeriodSeconds", default=None)
	init_containers: NullableList[InitContainer] = Field(alias="initContainers", default=[])
	containers: NullableList[Container] = []
	scale: Optional[Scale] = None
	volumes: NullableList[Volume] = []


class SecretsCollection(AzList[ContainerAppSecret]):
	"""Container App Secrets Collection ARM resource."""

	next_link: Optional[str] = Field(alias="nextLink", default=None, exclude=True)

	def continuation(self) -> Optional[str]:
		return None


Secret.model_rebuild()
TrafficWeight.model_rebuild()
CustomDomain.model_rebuild()
IpSecurityRestrictionRule.model_rebuild()
CorsPolicy.model_rebuild()
Ingress.model_rebuild()
RegistryCredentials.model_rebuild()
Dapr.model_rebuild()
Configuration.model_rebuild()
ContainerAppSecret.model_rebuild()
EnvironmentVar.model_rebuild()
ContainerResources.model_rebuild()
VolumeMount.model_rebuild()
BaseContainer.model_rebuild()
Container.model_rebuild()
ScaleRuleAuth.model_rebuild()
CustomScaleRule.model_rebuild()
ExtendedLocation.model_rebuild()
HttpScaleRule.model_rebuild()
InitContainer.model_rebuild()
ScaleRule.model_rebuild()
Scale.model_rebuild()
Volume.model_rebuild()
Template.model_rebuild()
SecretsCollection.model_rebuild()

"""List and delete cluster resources using the Kubernetes dynamic client"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from kubernetes import client  # type: ignore
from kubernetes.dynamic import DynamicClient  # type: ignore
from kubernetes.dynamic.exceptions import (  # type: ignore
    ResourceNotFoundError,
    ResourceNotUniqueError,
)
from urllib3.exceptions import HTTPError

from .cluster_config import ClusterConfig
from .exceptions import ClusterConnectionError, DeleteError
from .protocols import ResourceRecord, ResourceRef


def get_api_client(cluster_config: ClusterConfig) -> client.ApiClient:
    """Build an API client authenticating with a bearer token"""
    configuration = client.Configuration()
    configuration.host = cluster_config.server
    configuration.api_key = {"authorization": cluster_config.token}
    configuration.api_key_prefix = {"authorization": "Bearer"}
    configuration.verify_ssl = cluster_config.verify_ssl
    return client.ApiClient(configuration)


@dataclass(frozen=True)
class KubernetesResourceClient:
    """
    Provide the listing and deletion capabilities of the reclaimer on top of a
    dynamic client.

    :param dynamic_client: a connected dynamic client
    :param page_size: maximal number of resources fetched per list request
    """

    dynamic_client: DynamicClient
    page_size: int = 500

    def list_resources(self, kind: str, namespace: str) -> list[ResourceRecord]:
        """
        List all resources of a kind in a namespace, following pagination
        :param kind: kind of resource, resolved through API discovery
        :param namespace: namespace of the resources
        :return: records in the order the API returned them
        :throws: ClusterConnectionError
        """
        try:
            api = self.dynamic_client.resources.get(kind=kind)
        except (ResourceNotFoundError, ResourceNotUniqueError) as ex:
            raise ClusterConnectionError(
                f"Failed resolving resource kind {kind}: {ex}"
            ) from ex
        except (client.ApiException, HTTPError) as ex:
            raise ClusterConnectionError(
                f"Failed discovering cluster APIs: {ex}"
            ) from ex

        records: list[ResourceRecord] = []
        continue_token: Optional[str] = None
        while True:
            try:
                page = self.dynamic_client.get(
                    api,
                    namespace=namespace,
                    limit=self.page_size,
                    _continue=continue_token,
                )
            except (client.ApiException, HTTPError) as ex:
                raise ClusterConnectionError(
                    f"Failed listing {kind} in namespace {namespace}: {ex}"
                ) from ex

            records += [
                self.to_record(api, kind, namespace, item) for item in page.items
            ]
            continue_token = getattr(page.metadata, "continue", None)
            if not continue_token:
                break
        return records

    @staticmethod
    def to_record(api: Any, kind: str, namespace: str, item: Any) -> ResourceRecord:
        """Convert a listed item to a record whose handle is its API resource"""
        return ResourceRecord(
            ref=ResourceRef(kind=kind, namespace=namespace, name=item.metadata.name),
            creation_timestamp=getattr(item.metadata, "creationTimestamp", None),
            handle=api,
        )

    def delete_resource(self, record: ResourceRecord) -> None:
        """
        Delete a listed resource
        :param record: a record returned by list_resources
        :throws: DeleteError
        """
        try:
            self.dynamic_client.delete(
                record.handle,
                name=record.ref.name,
                namespace=record.ref.namespace,
            )
        except (client.ApiException, HTTPError) as ex:
            raise DeleteError(str(ex)) from ex


def get_resource_client(
    cluster_config: ClusterConfig,
    dynamic_client_getter: Callable[[client.ApiClient], DynamicClient] = DynamicClient,
) -> KubernetesResourceClient:
    """
    Connect to the cluster and return a resource client
    :param cluster_config: endpoint and credentials of the cluster
    :param dynamic_client_getter: builds a dynamic client from an API client
    :return: a client scoped to the configured cluster
    :throws: ClusterConnectionError
    """
    try:
        dynamic_client = dynamic_client_getter(get_api_client(cluster_config))
    except (client.ApiException, HTTPError) as ex:
        raise ClusterConnectionError(
            f"Failed connecting to {cluster_config.server}: {ex}"
        ) from ex
    return KubernetesResourceClient(
        dynamic_client=dynamic_client, page_size=cluster_config.page_size
    )

#!/usr/bin/env python3

"""Clean old resources"""

import click

from .cluster_client import get_resource_client
from .cluster_config import ClusterConfig
from .exceptions import ClusterConnectionError
from .reclaimer import Reclaimer


@click.command()
@click.option(
    "--server",
    help="Cluster API server URL",
    type=click.STRING,
    required=True,
    envvar="OPENSHIFT_SERVER",
    metavar="URL",
)
@click.option(
    "--token",
    help="Token used for authenticating with the cluster",
    type=click.STRING,
    required=True,
    envvar="OPENSHIFT_TOKEN",
)
@click.option(
    "--verify-ssl/--no-verify-ssl",
    help="Verify the server's certificate",
    default=True,
    envvar="VERIFY_SSL",
)
@click.option(
    "--namespace",
    help="Namespace to clean",
    type=click.STRING,
    required=True,
    envvar="NAMESPACE",
)
@click.option(
    "--kind",
    "kinds",
    help="Kind of resources to clean, may be repeated",
    type=click.STRING,
    multiple=True,
    required=True,
)
@click.option(
    "--interval-days",
    help="Threshold in days after which resources will be deleted",
    type=click.IntRange(min=0),
    default=7,
    envvar="INTERVAL_DAYS",
)
@click.option(
    "--query",
    help="Only resources whose name contains this string are deleted",
    type=click.STRING,
    default="",
    envvar="QUERY",
)
@click.option(
    "--page-size",
    help="Maximal number of resources fetched per list request",
    type=click.IntRange(min=1),
    default=500,
    envvar="PAGE_SIZE",
)
def main(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    server: str,
    token: str,
    verify_ssl: bool,
    namespace: str,
    kinds: tuple[str, ...],
    interval_days: int,
    query: str,
    page_size: int,
) -> None:
    """Clean old resources"""
    cluster_config = ClusterConfig(
        server=server, token=token, verify_ssl=verify_ssl, page_size=page_size
    )
    try:
        resource_client = get_resource_client(cluster_config)
        reclaimer = Reclaimer(
            lister=resource_client.list_resources,
            deleter=resource_client.delete_resource,
        )

        for kind in kinds:
            print(f"Processing {kind} in {namespace}")
            deleted = reclaimer.reclaim(kind, namespace, interval_days, query)
            print(f"Deleted {kind}: {deleted}")
    except ClusterConnectionError as ex:
        raise click.ClickException(str(ex)) from ex


if __name__ == "__main__":
    main()  # pylint: disable=no-value-for-parameter

"""Backend dialect selection."""

from collections.abc import Collection

from node_rpc_middleware.core.models import Dialect
from node_rpc_middleware.data.loader import get_rest_networks


def select_dialect(network: str, rest_networks: Collection[str] | None = None) -> Dialect:
    """
    Pick the backend dialect for a network.

    Parameters
    ----------
    network : str
        Network identifier (e.g. 'mainnet', 'devnet')
    rest_networks : Collection[str] | None
        Networks served by the REST backend. Uses the packaged catalogue if None.

    Returns
    -------
    Dialect
        ``Dialect.REST`` for known REST networks, ``Dialect.JSON_RPC`` for
        every other name, including unknown ones

    """
    if rest_networks is None:
        rest_networks = get_rest_networks()
    return Dialect.REST if network in rest_networks else Dialect.JSON_RPC

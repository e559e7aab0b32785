"""Named network environments the API can be served for."""

from chimera.schemas.network import Network

DEFAULT_NETWORK = "development"

# network_id "*" matches any network id.
NETWORKS: dict[str, Network] = {
    "development": Network(name="development", host="localhost", port=8545, network_id="*", gas=100_000_000),
    "livenet": Network(name="livenet", host="localhost", port=8545, network_id="1", gas=70_000_000),
    "ropsten": Network(name="ropsten", host="localhost", port=18545, network_id="3", gas=30_000_000),
}


def get_network(name: str) -> Network:
    """Return the network environment registered under ``name``."""
    try:
        return NETWORKS[name]
    except KeyError:
        known = ", ".join(sorted(NETWORKS))
        raise ValueError(f"Unknown network '{name}' (known: {known})") from None

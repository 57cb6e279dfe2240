"""LiveKit video room server: pages, room provisioning and token issuance."""

__version__ = "0.1.0"

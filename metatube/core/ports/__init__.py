"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports client API :
- IMetadataAPIClient : Contrat du client de l'API MetaTube
"""

from metatube.core.ports.api_client import IMetadataAPIClient

__all__ = [
    "IMetadataAPIClient",
]

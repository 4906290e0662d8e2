"""
Objets valeur immutables du client MetaTube.

Exports :
- ServerConfig : Instantane de la configuration serveur, lu a chaque appel
- ConfigProvider : Accesseur renvoyant le ServerConfig courant
- ApiErrorInfo : Erreur structuree de l'enveloppe
- ResponseEnvelope : Enveloppe generique {data, error}
- ImageResponse : Descripteur neutre d'une reponse image brute
"""

from metatube.core.value_objects.envelope import ApiErrorInfo, ResponseEnvelope
from metatube.core.value_objects.image_response import ImageResponse
from metatube.core.value_objects.server_config import ConfigProvider, ServerConfig

__all__ = [
    "ApiErrorInfo",
    "ConfigProvider",
    "ImageResponse",
    "ResponseEnvelope",
    "ServerConfig",
]

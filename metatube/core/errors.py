"""
Erreurs levees par le client MetaTube.

Hierarchie :
- MetaTubeError : base commune
  - RequestCancelledError : annulation demandee par l'appelant
  - RemoteAPIError : erreur structuree renvoyee par le serveur
  - EmptyResponseError : reponse sans donnees ni erreur
  - InvalidResponseError : corps de reponse qui n'est pas une enveloppe JSON
  - ConfigurationError : adresse du serveur absente

Les erreurs de transport (connexion, DNS, timeout de connexion) ne sont pas
enveloppees : les exceptions httpx.HTTPError remontent telles quelles.
"""

from typing import Optional, Union


class MetaTubeError(Exception):
    """Classe de base des erreurs du client MetaTube."""


class RequestCancelledError(MetaTubeError):
    """
    Levee quand le signal d'annulation de l'appelant est declenche.

    Soit avant l'envoi de la requete (aucun octet envoye), soit pendant
    l'echange reseau (la requete en cours est interrompue).
    """

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Request cancelled: {url}")


class RemoteAPIError(MetaTubeError):
    """
    Erreur structuree renvoyee par le serveur MetaTube.

    Attributes:
        code: Code d'erreur distant, conserve tel quel (int ou str)
        message: Message d'erreur distant, conserve tel quel
        status_code: Code HTTP de la reponse
    """

    def __init__(
        self,
        code: Union[int, str, None],
        message: Optional[str],
        status_code: int,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"API request error: {code} ({message})")


class EmptyResponseError(MetaTubeError):
    """Le champ data de l'enveloppe est null alors qu'aucune erreur n'est signalee."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__("Response data field is null")


class InvalidResponseError(MetaTubeError):
    """Le corps de la reponse n'est pas une enveloppe JSON exploitable."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        super().__init__(f"Invalid API response (HTTP {status_code}): {reason}")


class ConfigurationError(MetaTubeError):
    """La configuration ne permet pas de composer une URL (serveur absent)."""

"""
Instantane de la configuration du serveur MetaTube.

La configuration appartient a l'hote (plugin). Le client ne la conserve pas :
il appelle un ConfigProvider a chaque requete, de sorte qu'un changement
est pris en compte des l'appel suivant sans recreer le client.
"""

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class ServerConfig:
    """
    Parametres serveur lus par le client.

    Attributs :
        server : URL de base du serveur (ex: "http://127.0.0.1:8080")
        token : Jeton Bearer optionnel
        default_image_quality : Qualite JPEG envoyee avec chaque URL d'image
        primary_image_ratio : Ratio par defaut des images primaires (-1 = non defini)
    """

    server: str
    token: Optional[str] = None
    default_image_quality: int = 90
    primary_image_ratio: float = -1

    @property
    def has_token(self) -> bool:
        """Un jeton vide ou compose d'espaces est considere comme absent."""
        return bool(self.token and self.token.strip())


ConfigProvider = Callable[[], ServerConfig]

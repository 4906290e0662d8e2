"""
MetaTube - Client de l'API de metadonnees MetaTube.

Ce package traduit les requetes du plugin (acteurs, films, images, recherche,
traduction) en appels HTTP vers un serveur MetaTube unique, et deballe
l'enveloppe JSON `{data, error}` renvoyee par le serveur.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (types de resultats, ports, objets valeur, erreurs)
- adapters/ : Couche infrastructure (client HTTP, CLI)

Utilise comme bibliotheque, le package n'ecrit aucun log : ses messages
loguru restent desactives tant que configure_logging n'est pas appele.
"""

from loguru import logger

__version__ = "0.1.0"

# Nom du produit annonce dans le User-Agent
PROVIDER_NAME = "MetaTube"

logger.disable(__name__)

"""
Types des payloads renvoyes par le serveur MetaTube.

Ces types documentent la forme des objets JSON du serveur. Le client ne les
interprete pas : le dictionnaire decode est rendu tel quel a l'appelant.

Exports:
- ActorSearchResult, ActorInfo : Acteurs
- MovieSearchResult, MovieInfo : Films
- TranslationInfo : Resultat de traduction
"""

from metatube.core.entities.metadata import (
    ActorInfo,
    ActorSearchResult,
    MovieInfo,
    MovieSearchResult,
    TranslationInfo,
)

__all__ = [
    "ActorInfo",
    "ActorSearchResult",
    "MovieInfo",
    "MovieSearchResult",
    "TranslationInfo",
]

"""
Payloads de metadonnees MetaTube.

Declares en TypedDict (total=False) : ce sont des dictionnaires JSON decodes,
transmis sans transformation. Tous les champs sont optionnels car le serveur
peut en omettre selon le provider.
"""

from typing import TypedDict


class ActorSearchResult(TypedDict, total=False):
    """Acteur renvoye par /v1/actors/search."""

    id: str
    name: str
    provider: str
    homepage: str
    aliases: list[str]
    images: list[str]


class ActorInfo(ActorSearchResult, total=False):
    """Fiche complete d'un acteur renvoyee par /v1/actors/{provider}/{id}."""

    summary: str
    hobby: str
    skills: str
    blood_type: str
    cup_size: str
    measurements: str
    nationality: str
    height: int
    birthday: str
    debut_date: str


class MovieSearchResult(TypedDict, total=False):
    """Film renvoye par /v1/movies/search."""

    id: str
    number: str
    title: str
    provider: str
    homepage: str
    thumb_url: str
    cover_url: str
    score: float
    actors: list[str]
    release_date: str


class MovieInfo(MovieSearchResult, total=False):
    """Fiche complete d'un film renvoyee par /v1/movies/{provider}/{id}."""

    summary: str
    big_thumb_url: str
    big_cover_url: str
    genres: list[str]
    director: str
    maker: str
    label: str
    series: str
    runtime: int
    preview_video_url: str
    preview_video_hls_url: str
    preview_images: list[str]


class TranslationInfo(TypedDict, total=False):
    """Resultat de /v1/translate."""

    translated_text: str

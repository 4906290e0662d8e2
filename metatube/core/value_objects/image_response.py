"""
Descripteur neutre d'une reponse image brute.

Remplace les deux formes propres aux hotes (reponse transport brute ou
structure projetee avec longueur/type/statut/headers). La couche d'adaptation
de l'hote convertit ce descripteur vers le type attendu par son runtime.
"""

from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable, Optional


@dataclass
class ImageResponse:
    """
    Reponse image non decodee, a consommer en streaming.

    Attributs :
        status_code : Code HTTP de la reponse
        content_type : Valeur du header Content-Type (None si absent)
        content_length : Taille annoncee du corps (None si inconnue)
        headers : Headers de la reponse, valeurs multiples jointes par ", "

    Le corps doit etre consomme une seule fois (aiter_raw ou aread), puis
    la reponse fermee (aclose ou `async with`).

    Example:
        async with await client.get_image_response(url) as image:
            async for chunk in image.aiter_raw():
                sink.write(chunk)
    """

    status_code: int
    content_type: Optional[str]
    content_length: Optional[int]
    headers: dict[str, str]
    _stream: Callable[[], AsyncIterator[bytes]] = field(repr=False)
    _close: Callable[[], Awaitable[None]] = field(repr=False)
    _closed: bool = field(default=False, repr=False)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def aiter_raw(self) -> AsyncIterator[bytes]:
        """Itere sur le corps tel que recu, par morceaux.

        Aucun Content-Encoding n'est retire : les octets restent coherents
        avec les headers (Content-Length, Content-Encoding) transmis a l'hote.
        """
        return self._stream()

    async def aread(self) -> bytes:
        """Lit tout le corps en memoire puis ferme la reponse."""
        try:
            chunks = [chunk async for chunk in self._stream()]
        finally:
            await self.aclose()
        return b"".join(chunks)

    async def aclose(self) -> None:
        """Libere la connexion sous-jacente (idempotent)."""
        if not self._closed:
            self._closed = True
            await self._close()

    async def __aenter__(self) -> "ImageResponse":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

"""
Enveloppe generique des reponses JSON MetaTube.

Chaque endpoint renvoie `{"data": T | null, "error": {"code", "message"} | null}`,
y compris pour les statuts HTTP en erreur.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ApiErrorInfo:
    """
    Erreur structuree renvoyee par le serveur.

    Attributs :
        code : Code d'erreur, conserve tel quel (le serveur envoie un entier
               ou une chaine selon la version)
        message : Message lisible
    """

    code: Union[int, str, None]
    message: Optional[str] = None


@dataclass(frozen=True)
class ResponseEnvelope(Generic[T]):
    """Enveloppe `{data, error}` decodee."""

    data: Optional[T] = None
    error: Optional[ApiErrorInfo] = None

    @classmethod
    def from_json(cls, payload: Any) -> "ResponseEnvelope[Any]":
        """
        Construit l'enveloppe depuis le JSON decode.

        Args:
            payload: Objet JSON decode (doit etre un dict)

        Returns:
            ResponseEnvelope avec data transmis tel quel

        Raises:
            ValueError: Si le payload n'est pas un objet JSON ou si
                        le champ error n'est pas un objet
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

        error = None
        raw_error = payload.get("error")
        if raw_error is not None:
            if not isinstance(raw_error, dict):
                raise ValueError("error field is not a JSON object")
            error = ApiErrorInfo(
                code=raw_error.get("code"),
                message=raw_error.get("message"),
            )

        return cls(data=payload.get("data"), error=error)

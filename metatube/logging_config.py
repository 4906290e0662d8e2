"""
Activation des logs du client MetaTube (loguru).

Le package desactive son logger a l'import : un hote qui embarque le client
ne recoit aucune sortie. La CLI appelle configure_logging pour reactiver les
messages `metatube` et les diriger vers deux sorties :

- console : une ligne par requete/reponse, restreinte au package
- fichier : JSON avec rotation, pour rejouer une session d'interrogation

Seuls le chemin de l'endpoint et le statut sont journalises, jamais le
token ni la query string (les cles des moteurs de traduction y circulent).
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

PACKAGE_LOGGER = "metatube"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level> <dim>{extra}</dim>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/metatube.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Reactive les logs du package et installe les sorties console/fichier.

    Args :
        log_level : Niveau minimum pour la console ("DEBUG" affiche chaque appel API)
        log_file : Fichier de log JSON, None pour ne journaliser qu'en console
        rotation_size : Taille maximale avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves
    """
    logger.remove()
    logger.enable(PACKAGE_LOGGER)

    logger.add(
        sys.stderr,
        level=log_level,
        format=CONSOLE_FORMAT,
        filter=PACKAGE_LOGGER,
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            filter=PACKAGE_LOGGER,
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=True,
        )

    logger.bind(log_file=str(log_file)).debug("Logs MetaTube actives")

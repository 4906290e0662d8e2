"""Interface ligne de commande (Typer) pour interroger un serveur MetaTube."""

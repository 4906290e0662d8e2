"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- api/ : Client HTTP de l'API MetaTube (httpx)
- cli/ : Interface ligne de commande (Typer) pour interroger un serveur

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

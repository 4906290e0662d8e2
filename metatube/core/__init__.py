"""
Couche domaine (core).

Contient les types de resultats, ports (interfaces abstraites), objets valeur
et erreurs. Cette couche n'a AUCUNE dependance vers l'infrastructure (httpx, CLI).

Sous-packages :
- entities/ : Types des payloads renvoyes par le serveur (ActorInfo, MovieInfo, ...)
- ports/ : Interface abstraite du client API
- value_objects/ : Objets valeur immutables (ServerConfig, ResponseEnvelope, ImageResponse)
"""

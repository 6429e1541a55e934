"""Adaptadores: todo lo que toca el mundo exterior (sitios web, navegador).

Por qué separado del Core:
- El Core define contratos (`SiteAdapter`, `UrlOpener`); aquí viven las implementaciones.
"""

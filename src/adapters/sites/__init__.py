"""Adaptadores de sitios (uno por web).

Por qué un paquete:
- Agrupa módulos por sitio (GitHub, APIdock, web genérica).
- Cada módulo implementa `core.interfaces.site_adapter.SiteAdapter`.
"""

from adapters.sites.apidock import ApiDockAdapter
from adapters.sites.github import GitHubAdapter
from adapters.sites.web import WebAdapter

SITE_ADAPTERS = {
	"gh": GitHubAdapter,
	"apidock": ApiDockAdapter,
	"web": WebAdapter,
}

__all__ = [
	"ApiDockAdapter",
	"GitHubAdapter",
	"SITE_ADAPTERS",
	"WebAdapter",
]

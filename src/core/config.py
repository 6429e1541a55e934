"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los adaptadores de sitios lean URLs base y alias de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "sitejump"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "sitejump"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "sitejump"
    return Path.home() / ".config" / "sitejump"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        if key:
            data[key] = value
    return data


def read_user_env_vars(env_path: Path | None = None) -> dict[str, str]:
    """Lee el .env global del usuario (vacío si no existe)."""

    env_path = env_path or get_user_env_file()
    if not env_path.exists():
        return {}
    return _parse_env_lines(env_path.read_text(encoding="utf-8"))


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = read_user_env_vars(env_path)
    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# sitejump user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}='{existing[key]}'")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - `repo_aliases` llega como JSON (`SITEJUMP_REPO_ALIASES='{"df": "..."}'`).
    """

    model_config = SettingsConfigDict(
        env_prefix="SITEJUMP_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    apidock_url: str = Field(
        default="http://apidock.com",
        min_length=8,
        description="URL base del sitio de documentación (APIdock).",
    )
    home_url: str = Field(
        default="http://eqdw.net",
        min_length=1,
        description="URL que abre el handler web genérico cuando no recibe argumentos.",
    )
    default_branch: str = Field(
        default="master",
        min_length=1,
        description="Ref usada por path/file/history/blame cuando no se indica una.",
    )
    repo_aliases: dict[str, str] = Field(
        default_factory=dict,
        description="Mapa abreviatura -> URL base del repositorio.",
    )
    open_command: str | None = Field(
        default=None,
        description="Programa para abrir URLs (p.ej. 'open', 'xdg-open'). Vacío: navegador por defecto.",
    )

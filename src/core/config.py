"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que servicios y adaptadores lean el mismo contrato de config.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


GatewayName = Literal["stripe", "paypal"]


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "solid-lab"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "solid-lab"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "solid-lab"
    return Path.home() / ".config" / "solid-lab"


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
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# SOLID Lab user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado y validación en el borde (env vars) sin contaminar los ejemplos.
    - Un único contrato de settings para CLI, lecciones y adaptadores.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_LAB_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    customer_name: str = Field(
        default="John Doe",
        min_length=1,
        max_length=128,
        description="Customer who pays in the dependency-inversion store.",
    )
    payment_gateway: GatewayName = Field(
        default="stripe",
        description="Gateway the store is wired to first (stripe/paypal).",
    )

    min_name_length: int = Field(
        default=3,
        ge=0,
        description="A valid name must be strictly longer than this.",
    )
    min_age: int = Field(
        default=18,
        ge=0,
        description="A valid age must be strictly greater than this.",
    )

    flavors_path: Path | None = Field(
        default=None,
        description='Optional JSON flavor catalog ({"flavors": [...]}) added at runtime.',
    )
    reports_dir: Path = Field(
        default=Path("reports"),
        description="Default directory for JSON/HTML lesson reports.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )

    @field_validator("payment_gateway", mode="before")
    @classmethod
    def _normalize_gateway(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"unknown log level: {value!r}")
        return level

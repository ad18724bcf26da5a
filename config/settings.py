# config/settings.py
"""
Configuración de la API leída del entorno.

Se carga el `.env` de la raíz del proyecto (si existe) sin pisar variables
que ya vengan del sistema, así los tests y los contenedores mandan.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

dotenv_path = find_dotenv(usecwd=True)
if not dotenv_path:
    repo_root_env = Path(__file__).resolve().parents[1] / ".env"
    if repo_root_env.exists():
        dotenv_path = str(repo_root_env)

load_dotenv(dotenv_path=dotenv_path if dotenv_path else None, override=False)


def _as_bool(raw: str | None, default: bool = False) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


API_TITLE: str = "ExerciseDB API"
API_VERSION: str = "1.0.0"

# --- Base de datos ---
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./exercises.db")
SQL_ECHO: bool = _as_bool(os.getenv("SQL_ECHO"))

# --- JWT ---
JWT_SECRET: str = os.getenv("JWT_SECRET", "super-secreto")
JWT_ALG: str = os.getenv("JWT_ALG", "HS256")
JWT_EXPIRES_IN: int = int(os.getenv("JWT_EXPIRES_IN", str(60 * 60)))  # 1 hora

# --- OTP (TOTP, pasos de 30 s) ---
OTP_VALID_WINDOW: int = int(os.getenv("OTP_VALID_WINDOW", "1"))

# --- API ---
EXERCISES_REQUIRE_AUTH: bool = _as_bool(os.getenv("EXERCISES_REQUIRE_AUTH"))
CORS_ORIGINS: list[str] = [
    o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
]
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

"""
Configuración de la aplicación.

Se lee del entorno (y de un archivo .env en la raíz del proyecto si existe):
  - TABLE_STORE_PATH: archivo de la tabla (por defecto "table.csv")
  - TABLE_STORE_ENCODING: codificación al guardar (por defecto "utf-8")
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_TABLE_PATH = "table.csv"
DEFAULT_ENCODING = "utf-8"
ENV_FILE = Path(__file__).parent.parent / ".env"


@dataclass(frozen=True)
class AppSettings:
    table_path: str = DEFAULT_TABLE_PATH
    encoding: str = DEFAULT_ENCODING


def load_settings(env_file: Path = ENV_FILE) -> AppSettings:
    # Las variables ya definidas en el entorno tienen prioridad sobre el .env
    load_dotenv(dotenv_path=env_file, override=False)
    return AppSettings(
        table_path=os.getenv("TABLE_STORE_PATH") or DEFAULT_TABLE_PATH,
        encoding=os.getenv("TABLE_STORE_ENCODING") or DEFAULT_ENCODING,
    )

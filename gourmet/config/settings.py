import os
from pydantic_settings import BaseSettings, SettingsConfigDict

_BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    # Base de datos
    database_url: str = f"sqlite:///{os.path.join(_BASE_DIR, 'restaurante.db')}"
    database_echo: bool = False

    # Carpeta donde se guardan boletas y cartas en PDF
    output_dir: str = _BASE_DIR

    app_title: str = "Sistema de Gestión de Restaurante 'Delicias Gourmet'"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="GOURMET_", env_file=".env", case_sensitive=False)


def get_settings() -> Settings:
    """Construye la configuración leyendo variables de entorno y .env."""
    return Settings()

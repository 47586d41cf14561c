import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base

logger = logging.getLogger(__name__)

# Base a nivel de módulo para que los modelos puedan heredar de ella
# sin necesitar una instancia de DatabaseManager
Base = declarative_base()


class DatabaseConnectionError(Exception):
    """No fue posible establecer la conexión con la base de datos."""


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignora ON DELETE CASCADE si no se activa por conexión
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Administra la única conexión (motor) de la aplicación.
    Se construye una vez en main.py y se entrega a cada servicio.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self._database_url = database_url
        self._echo = echo
        self._engine = None
        self._session_factory = None

    @property
    def database_url(self) -> str:
        return self._database_url

    def acquire(self) -> Engine:
        """
        Retorna el motor compartido, creándolo en el primer uso.
        Lanza DatabaseConnectionError si el driver no puede conectar.
        """
        if self._engine is not None:
            return self._engine

        try:
            engine = create_engine(self._database_url, echo=self._echo)
            if engine.dialect.name == "sqlite":
                event.listen(engine, "connect", _enable_sqlite_foreign_keys)
            # Probamos la conexión una vez para fallar temprano
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(f"Error al conectar con la base de datos: {e}") from e

        logger.info("Conexión establecida con %s", engine.url.render_as_string(hide_password=True))
        self._engine = engine
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        return engine

    def release(self):
        """Cierra la conexión y limpia el motor en caché. Seguro de llamar varias veces."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Conexión a la base de datos cerrada.")

    def create_tables(self):
        """Crea las tablas si no existen."""
        # Importación local para registrar los modelos en Base.metadata antes de crear
        import gourmet.models  # noqa: F401
        engine = self.acquire()
        logger.info("Inicializando esquema en: %s", engine.url.render_as_string(hide_password=True))
        Base.metadata.create_all(bind=engine)

    @contextmanager
    def get_session(self):
        """
        Entrega una sesión controlada para usar con 'with'.
        Ante cualquier excepción hace rollback y la propaga.
        """
        self.acquire()
        session = self._session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

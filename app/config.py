import os
import ssl
import logging
from sqlalchemy.engine import URL, make_url

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_PORT = 3307


def _database_port() -> int:
    raw_port = os.getenv("DATABASE_PORT")
    if raw_port is None:
        return DEFAULT_DATABASE_PORT
    try:
        return int(raw_port)
    except ValueError:
        logger.warning(f"Ignoring invalid DATABASE_PORT {raw_port!r}, using {DEFAULT_DATABASE_PORT}")
        return DEFAULT_DATABASE_PORT


def database_url() -> URL:
    """
    Builds the async SQLAlchemy URL from the environment.
    DATABASE_URL wins over the individual DATABASE_* variables.
    """
    explicit_url = os.getenv("DATABASE_URL")
    if explicit_url:
        return make_url(explicit_url)

    return URL.create(
        drivername="mysql+aiomysql",
        host=os.getenv("DATABASE_HOST", "localhost"),
        port=_database_port(),
        username=os.getenv("DATABASE_USERNAME", "pokedex_db_user"),
        password=os.getenv("DATABASE_PASSWORD", "Pokedex"),
        database=os.getenv("DATABASE_NAME", "pokedex_db"),
    )


def connect_args(url: URL) -> dict:
    """Driver arguments for the URL: MySQL connections use TLS without certificate verification."""
    if url.get_backend_name() != "mysql":
        return {}

    tls_context = ssl.create_default_context()
    tls_context.check_hostname = False
    tls_context.verify_mode = ssl.CERT_NONE
    return {"ssl": tls_context}


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()

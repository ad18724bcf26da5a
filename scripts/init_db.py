# scripts/init_db.py
"""
Script para crear o eliminar las tablas de la API.

Uso:
    python scripts/init_db.py create
    python scripts/init_db.py drop
"""
import argparse
import sys
from pathlib import Path

# Agregar el directorio padre al path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.database import Base, engine  # noqa: E402
from utils.logging_utils import setup_logger  # noqa: E402

# Importar los modelos para que se registren en Base.metadata
import models  # noqa: E402,F401

logger = setup_logger("init_db")


def init_db():
    """Crea todas las tablas en la base de datos"""
    logger.info("Creando tablas en %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    for table_name in sorted(Base.metadata.tables.keys()):
        logger.info("  - %s", table_name)


def drop_db(assume_yes: bool = False):
    """Elimina todas las tablas (SOLO PARA DESARROLLO)"""
    if not assume_yes:
        respuesta = input("¿Seguro que deseas eliminar todas las tablas? (s/n): ")
        if respuesta.strip().lower() != "s":
            logger.info("Operación cancelada")
            return

    Base.metadata.drop_all(bind=engine)
    logger.info("Tablas eliminadas")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Gestión de base de datos")
    parser.add_argument("action", choices=["create", "drop"], help="Acción a ejecutar")
    parser.add_argument("-y", "--yes", action="store_true", help="No pedir confirmación al borrar")
    args = parser.parse_args(argv)

    try:
        if args.action == "create":
            init_db()
        else:
            drop_db(assume_yes=args.yes)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
